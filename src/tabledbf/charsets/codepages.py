"""Code page decoders and the language driver id lookup."""

from __future__ import annotations

import codecs

from tabledbf.core.protocols import ITextDecoder
from tabledbf.core.types import CodecName, LanguageDriverId

# Language driver id (header byte 29) -> Python codec name.
LANGUAGE_DRIVER_CODECS: dict[LanguageDriverId, CodecName] = {
    0x26: "cp866",   # Russian MS-DOS
    0x64: "cp1251",  # Russian Windows
    0x65: "cp1251",
    0xC9: "cp1251",
    0x03: "cp1252",  # Windows ANSI
    0x01: "cp437",   # US MS-DOS
    0x02: "cp850",   # International MS-DOS
}


class CodecDecoder:
    """ITextDecoder backed by a Python codec; strict, so bad bytes raise."""

    def __init__(self, codec: CodecName) -> None:
        # Fail fast on a misspelt codec name instead of on the first field.
        self._codec = codecs.lookup(codec).name

    @property
    def codec(self) -> CodecName:
        return self._codec

    def decode(self, data: bytes) -> str:
        return data.decode(self._codec)

    def __repr__(self) -> str:
        return f"CodecDecoder({self._codec!r})"


def decoder_for_language_driver(ldid: LanguageDriverId) -> ITextDecoder | None:
    """Map a language driver id to a decoder, or None when it is not known."""
    codec = LANGUAGE_DRIVER_CODECS.get(ldid)
    if codec is None:
        return None
    return CodecDecoder(codec)


def raw_text(data: bytes) -> str:
    """Render bytes as text one code point per byte; never fails."""
    return data.decode("latin-1")


def decode_or_raw(decoder: ITextDecoder, data: bytes) -> str:
    """Decode through ``decoder``; on failure return the raw bytes as text."""
    try:
        return decoder.decode(data)
    except ValueError:
        return raw_text(data)
