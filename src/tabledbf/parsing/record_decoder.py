"""Decode fixed-width record bodies into Record models.

Text that will not transcode is returned as raw bytes rendered one
character per byte. A record is never rejected because of its contents;
only a short read is an error.
"""

from __future__ import annotations

from tabledbf.charsets.codepages import decode_or_raw, raw_text
from tabledbf.core.protocols import ITextDecoder
from tabledbf.core.types import RecordData
from tabledbf.models.field import FieldDescriptor, FieldType
from tabledbf.models.record import Record

DELETED_FLAG = 0x2A  # '*'

_TRUE_BYTES = frozenset(b"TtYy")
_FALSE_BYTES = frozenset(b"FfNn")

# Types emitted as the literal trimmed bytes, without transcoding.
_LITERAL_TYPES = frozenset({FieldType.NUMERIC, FieldType.FLOAT, FieldType.DATE, FieldType.MEMO})


def decode_logical(trimmed: bytes) -> str:
    if not trimmed:
        return ""
    if trimmed[0] in _TRUE_BYTES:
        return "true"
    if trimmed[0] in _FALSE_BYTES:
        return "false"
    return ""


def decode_value(field: FieldDescriptor, data: bytes, decoder: ITextDecoder) -> str:
    trimmed = data.strip()

    if field.type in _LITERAL_TYPES:
        return raw_text(trimmed)
    if field.type == FieldType.LOGICAL:
        return decode_logical(trimmed)
    # Character, and best effort for unknown tags
    return decode_or_raw(decoder, trimmed)


def decode_record(raw: bytes, fields: list[FieldDescriptor], decoder: ITextDecoder) -> Record:
    """Split ``raw`` into the deletion flag and per-field slices, in field order."""
    data: RecordData = {}
    offset = 1
    for field in fields:
        chunk = raw[offset:offset + field.length]
        offset += field.length
        data[field.name] = decode_value(field, chunk, decoder)
    return Record(deleted=raw[:1] == bytes([DELETED_FLAG]), data=data)
