"""Open dBase/FoxPro tables from streams or paths."""

from __future__ import annotations

import io
import os

from pydantic import ValidationError

from tabledbf.core.config import ReaderSettings
from tabledbf.core.exceptions import EncodingUndeterminedError, TruncatedError
from tabledbf.core.logging import get_logger, set_log_level
from tabledbf.core.protocols import IByteStream
from tabledbf.parsing.header_parser import parse_header, resolve_decoder
from tabledbf.parsing.schema_parser import parse_fields
from tabledbf.reader.table_reader import TableReader

log = get_logger(__name__)


def open_stream(stream: IByteStream, settings: ReaderSettings | None = None) -> TableReader:
    """Parse header and schema from ``stream`` and return a ready reader.

    The stream must be positioned at the start of the table. It is wrapped in
    a buffer when it is a raw (unbuffered) stream; the caller keeps ownership
    and closes it.

    Raises:
        InvalidFormatError, TruncatedError, EncodingUndeterminedError,
        InvalidSchemaError: nothing usable could be opened.
    """
    if settings is None:
        try:
            settings = ReaderSettings()
        except ValidationError as exc:
            raise EncodingUndeterminedError(codec=str(exc.errors()[0].get("input"))) from exc
    if settings.log_level:
        set_log_level(settings.log_level)

    if isinstance(stream, io.RawIOBase):
        stream = io.BufferedReader(stream)

    try:
        header = parse_header(stream)
    except TruncatedError as exc:
        raise TruncatedError(f"read metadata: {exc}") from exc

    decoder = resolve_decoder(header, settings.explicit_decoder())

    try:
        fields = parse_fields(stream, header.field_count, decoder)
    except TruncatedError as exc:
        raise TruncatedError(f"read fields: {exc}") from exc

    reader = TableReader(stream, header, fields, decoder)
    log.debug("opened %r", reader)
    return reader


def open_path(path: str | os.PathLike[str], settings: ReaderSettings | None = None) -> TableReader:
    """Open the table stored at ``path``.

    The file is read into memory and closed before this returns.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise TruncatedError(f"open file: {exc}") from exc
    return open_stream(io.BytesIO(data), settings)


__all__ = ["ReaderSettings", "TableReader", "open_path", "open_stream"]
