"""Reader configuration using pydantic-settings.

Text decoding is resolved in this order when a table is opened:

1. ``decoder``: set through one of the ``with_*`` helpers. Every helper
   writes the same slot, so the helper applied last wins. The slot is a
   private attribute and is never read from the environment.
2. ``encoding``: a Python codec name, typically from ``TABLEDBF_ENCODING``.
   Unknown names are rejected when the settings are built.
3. The language driver id stored in the table header.
"""

from __future__ import annotations

import codecs
from typing import Any, Optional

from pydantic import PrivateAttr, field_validator
from pydantic_settings import BaseSettings

from tabledbf.charsets.codepages import CodecDecoder
from tabledbf.core.protocols import ITextDecoder


def _ensure_decoder(value: Any) -> Any:
    if value is not None and not isinstance(value, ITextDecoder):
        raise ValueError(f"decoder must provide decode(bytes) -> str, got {type(value).__name__}")
    return value


class ReaderSettings(BaseSettings):
    """Options applied when opening a table."""

    model_config = {"env_prefix": "TABLEDBF_"}

    encoding: Optional[str] = None
    log_level: Optional[str] = None

    _decoder: Optional[ITextDecoder] = PrivateAttr(default=None)

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: Optional[str]) -> Optional[str]:
        if value:
            try:
                codecs.lookup(value)
            except LookupError:
                raise ValueError(f"unknown encoding: {value!r}") from None
        return value

    @property
    def decoder(self) -> ITextDecoder | None:
        return self._decoder

    def explicit_decoder(self) -> ITextDecoder | None:
        """Return the caller-chosen decoder, or None to fall back to the header."""
        if self._decoder is not None:
            return self._decoder
        if self.encoding:
            return CodecDecoder(self.encoding)
        return None

    # --- option helpers (each returns a new settings object) ---

    def with_decoder(self, decoder: ITextDecoder) -> ReaderSettings:
        copy = self.model_copy()
        copy._decoder = _ensure_decoder(decoder)
        return copy

    def with_encoding(self, codec: str) -> ReaderSettings:
        return self.with_decoder(CodecDecoder(codec))

    def with_cp866(self) -> ReaderSettings:
        """Russian MS-DOS."""
        return self.with_encoding("cp866")

    def with_cp1251(self) -> ReaderSettings:
        """Russian Windows."""
        return self.with_encoding("cp1251")

    def with_cp1252(self) -> ReaderSettings:
        """Windows ANSI, Western European."""
        return self.with_encoding("cp1252")

    def with_cp437(self) -> ReaderSettings:
        """US MS-DOS."""
        return self.with_encoding("cp437")

    def with_cp850(self) -> ReaderSettings:
        """International MS-DOS."""
        return self.with_encoding("cp850")
