"""tabledbf exception hierarchy."""

from __future__ import annotations

from typing import Any


class TableError(Exception):
    """Base exception for all tabledbf errors."""


class InvalidFormatError(TableError):
    """The header carries a file type tag this reader does not know."""

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"unknown file type: 0x{tag:02X}")


class TruncatedError(TableError, OSError):
    """The stream ended early or the underlying read failed."""


class EncodingUndeterminedError(TableError):
    """No usable encoding.

    Either the language driver id is unknown, or ``codec`` names a codec that
    does not exist.
    """

    def __init__(self, language_driver_id: int | None = None, codec: str | None = None) -> None:
        self.language_driver_id = language_driver_id
        self.codec = codec
        if codec is not None:
            reason = f"unknown encoding {codec!r}"
        else:
            reason = f"language driver id 0x{language_driver_id or 0:02X}"
        super().__init__(
            f"unable to determine encoding ({reason}): "
            "please specify encoding explicitly using with_cp866(), "
            "with_cp1251() or with_encoding()"
        )


class InvalidSchemaError(TableError):
    """The field descriptor array is not closed by the 0x0D terminator."""

    def __init__(self, terminator: int) -> None:
        self.terminator = terminator
        super().__init__(
            f"invalid field descriptor terminator: 0x{terminator:02X}, expected 0x0D"
        )


class PartialReadError(TableError):
    """Bulk read stopped on a latched error; holds the records read before it."""

    def __init__(self, records: list[Any], error: TableError) -> None:
        self.records = records
        self.error = error
        super().__init__(f"read stopped after {len(records)} records: {error}")


class RecordDecodeError(TableError):
    """The text decoder failed on a record in a way that has no raw fallback."""

    def __init__(self, position: int, cause: BaseException) -> None:
        self.position = position
        super().__init__(f"decode record {position}: {type(cause).__name__}: {cause}")
