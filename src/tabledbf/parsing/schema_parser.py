"""Parse the field descriptor array that follows the header."""

from __future__ import annotations

import struct

from tabledbf.charsets.codepages import decode_or_raw
from tabledbf.core.exceptions import InvalidSchemaError, TruncatedError
from tabledbf.core.logging import get_logger
from tabledbf.core.protocols import IByteStream, ITextDecoder
from tabledbf.models.field import FieldDescriptor
from tabledbf.models.header import DESCRIPTOR_LENGTH
from tabledbf.parsing.stream import read_byte, read_exact

log = get_logger(__name__)

FIELD_TERMINATOR = 0x0D


def parse_descriptor(raw: bytes, decoder: ITextDecoder) -> FieldDescriptor:
    """Decode one 32-byte descriptor; bytes 18..31 are padding."""
    name = decode_or_raw(decoder, raw[0:11].rstrip(b"\x00"))
    (memory_address,) = struct.unpack_from("<I", raw, 12)
    return FieldDescriptor(
        name=name,
        type=chr(raw[11]),
        memory_address=memory_address,
        length=raw[16],
        decimal_count=raw[17],
    )


def parse_fields(stream: IByteStream, field_count: int, decoder: ITextDecoder) -> list[FieldDescriptor]:
    """Read ``field_count`` descriptors and the 0x0D terminator."""
    fields: list[FieldDescriptor] = []
    for index in range(field_count):
        try:
            raw = read_exact(stream, DESCRIPTOR_LENGTH, "read field bytes")
        except TruncatedError as exc:
            raise TruncatedError(f"read field {index}: {exc}") from exc
        field = parse_descriptor(raw, decoder)
        log.debug("field %d: %s %s(%d,%d)", index, field.name, field.type,
                  field.length, field.decimal_count)
        fields.append(field)

    terminator = read_byte(stream, "read terminator")
    if terminator != FIELD_TERMINATOR:
        raise InvalidSchemaError(terminator)
    return fields
