"""Parse the fixed 32-byte table header."""

from __future__ import annotations

import struct
from datetime import date, timedelta

from tabledbf.charsets.codepages import decoder_for_language_driver
from tabledbf.core.exceptions import EncodingUndeterminedError, InvalidFormatError
from tabledbf.core.logging import get_logger
from tabledbf.core.protocols import IByteStream, ITextDecoder
from tabledbf.models.header import FileHeader, FileType
from tabledbf.parsing.stream import read_byte, read_exact

log = get_logger(__name__)


def compose_date(year: int, month: int, day: int) -> date:
    """Build a calendar date, carrying out-of-range month/day into neighbours.

    Month 0 is December of the previous year and day 0 is the last day of the
    previous month, so a zero-filled header still yields a date.
    """
    carry_year, month_index = divmod(year * 12 + month - 1, 12)
    return date(carry_year, month_index + 1, 1) + timedelta(days=day - 1)


def parse_header(stream: IByteStream) -> FileHeader:
    """Consume 32 bytes from ``stream`` and return the header."""
    tag = read_byte(stream, "read file type")
    try:
        file_type = FileType(tag)
    except ValueError:
        raise InvalidFormatError(tag) from None

    yy, mm, dd = read_exact(stream, 3, "read last update date")
    (record_count,) = struct.unpack("<I", read_exact(stream, 4, "read records count"))
    (header_length,) = struct.unpack("<H", read_exact(stream, 2, "read header size"))
    (record_length,) = struct.unpack("<H", read_exact(stream, 2, "read record size"))
    reserved = read_exact(stream, 20, "read reserved bytes")

    header = FileHeader(
        file_type=file_type,
        last_update=compose_date(yy + 1900, mm, dd),
        record_count=record_count,
        header_length=header_length,
        record_length=record_length,
        reserved=reserved,
    )
    log.debug(
        "header: type=0x%02X records=%d header_length=%d record_length=%d ldid=0x%02X",
        tag, record_count, header_length, record_length, header.language_driver_id,
    )
    return header


def resolve_decoder(header: FileHeader, explicit: ITextDecoder | None) -> ITextDecoder:
    """Pick the text decoder: an explicit one always wins over the header hint."""
    if explicit is not None:
        log.debug("using explicit decoder %r", explicit)
        return explicit

    ldid = header.language_driver_id
    decoder = decoder_for_language_driver(ldid)
    if decoder is None:
        raise EncodingUndeterminedError(ldid)
    log.debug("language driver id 0x%02X -> %r", ldid, decoder)
    return decoder
