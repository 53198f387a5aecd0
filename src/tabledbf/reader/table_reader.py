"""TableReader: streaming and bulk access to the records of one table."""

from __future__ import annotations

from datetime import date
from typing import Iterator

from tabledbf.core.exceptions import PartialReadError, RecordDecodeError, TableError, TruncatedError
from tabledbf.core.logging import get_logger
from tabledbf.core.protocols import IByteStream, ITextDecoder
from tabledbf.models.field import FieldDescriptor
from tabledbf.models.header import FileHeader, FileType
from tabledbf.models.record import ReaderState, Record
from tabledbf.parsing.record_decoder import decode_record
from tabledbf.parsing.stream import read_exact

log = get_logger(__name__)


class TableReader:
    """Reads records from a stream positioned just after the field terminator.

    Streaming use::

        while reader.advance():
            record = reader.read()
        if reader.error is not None:
            ...

    The first read failure is latched: the reader moves to ``FAILED``, every
    later ``read()`` re-raises the same error without touching the stream and
    ``advance()`` keeps returning False. Running past the last declared record
    is ``EXHAUSTED``, which is not an error.

    A reader is not safe to share between threads. The caller owns the stream.
    """

    def __init__(
        self,
        stream: IByteStream,
        header: FileHeader,
        fields: list[FieldDescriptor],
        decoder: ITextDecoder,
    ) -> None:
        self._stream = stream
        self._header = header
        self._fields = list(fields)
        self._decoder = decoder
        self._cursor = 0
        self._state = ReaderState.READY
        self._error: TableError | None = None

    # --- header accessors ---

    @property
    def header(self) -> FileHeader:
        return self._header

    @property
    def file_type(self) -> FileType:
        return self._header.file_type

    @property
    def last_update(self) -> date:
        return self._header.last_update

    @property
    def records_count(self) -> int:
        """Declared record count, deleted records included."""
        return self._header.record_count

    @property
    def fields(self) -> list[FieldDescriptor]:
        return list(self._fields)

    @property
    def fields_count(self) -> int:
        return len(self._fields)

    @property
    def decoder(self) -> ITextDecoder:
        return self._decoder

    # --- iteration state ---

    @property
    def state(self) -> ReaderState:
        return self._state

    @property
    def cursor(self) -> int:
        """Number of records advanced past so far."""
        return self._cursor

    @property
    def error(self) -> TableError | None:
        """The latched read error; None while ready or after a clean pass."""
        if self._state is ReaderState.FAILED:
            return self._error
        return None

    def advance(self) -> bool:
        """Move to the next record; False once exhausted or failed."""
        if self._cursor >= self._header.record_count:
            if self._state is ReaderState.READY:
                self._state = ReaderState.EXHAUSTED
            return False
        self._cursor += 1
        return self._state is ReaderState.READY

    def read(self) -> Record:
        """Read the current record. Call after ``advance()`` returned True."""
        if self._state is ReaderState.FAILED:
            raise self._error

        try:
            raw = read_exact(self._stream, self._header.record_length, "read record bytes")
        except TruncatedError as exc:
            self._fail(exc)
            raise
        try:
            return decode_record(raw, self._fields, self._decoder)
        except Exception as exc:
            error = RecordDecodeError(self._cursor, exc)
            self._fail(error)
            raise error from exc

    def read_all(self) -> list[Record]:
        """Read every remaining record into memory.

        Raises:
            PartialReadError: a read failed; ``records`` holds those read before it.
        """
        records: list[Record] = []
        while self.advance():
            try:
                records.append(self.read())
            except TableError:
                break
        if self._state is ReaderState.FAILED:
            raise PartialReadError(records, self._error) from self._error
        return records

    def __iter__(self) -> Iterator[Record]:
        while self.advance():
            yield self.read()
        if self._state is ReaderState.FAILED:
            raise self._error

    def _fail(self, error: TableError) -> None:
        log.warning("record %d of %d: %s", self._cursor, self._header.record_count, error)
        self._error = error
        self._state = ReaderState.FAILED

    def __str__(self) -> str:
        h = self._header
        return (
            "DBF Reader:\n"
            f"  File Type: {h.file_type.description}\n"
            f"  Last Update: {h.last_update.isoformat()}\n"
            f"  Records Count: {h.record_count}\n"
            f"  Fields Count: {h.field_count}\n"
            f"  Header Size: {h.header_length} bytes\n"
            f"  Record Size: {h.record_length} bytes"
        )

    def __repr__(self) -> str:
        return (
            f"TableReader(file_type={self._header.file_type.name}, "
            f"records={self._header.record_count}, fields={len(self._fields)}, "
            f"state={self._state})"
        )
