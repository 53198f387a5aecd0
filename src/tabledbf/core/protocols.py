"""Protocol interfaces for the collaborators a table reader depends on.

Structural typing only: any object with the right methods plugs in, which
keeps test doubles free of inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Text transcoding
# ---------------------------------------------------------------------------

@runtime_checkable
class ITextDecoder(Protocol):
    """Turns bytes of one code page into text.

    Implementations raise ``UnicodeDecodeError`` (or ``ValueError``) when the
    input is not valid in their code page; callers decide how to fall back.
    """

    def decode(self, data: bytes) -> str: ...


# ---------------------------------------------------------------------------
# Byte source
# ---------------------------------------------------------------------------

@runtime_checkable
class IByteStream(Protocol):
    """Readable binary stream, e.g. an open file or ``io.BytesIO``."""

    def read(self, size: int = -1, /) -> bytes: ...
