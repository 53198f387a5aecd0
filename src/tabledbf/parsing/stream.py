"""Exact-length reads over a binary stream."""

from __future__ import annotations

from tabledbf.core.exceptions import TruncatedError
from tabledbf.core.protocols import IByteStream


def read_exact(stream: IByteStream, size: int, step: str) -> bytes:
    """Read exactly ``size`` bytes or raise TruncatedError naming ``step``.

    Any failure raised by the stream itself (``OSError``, ``ValueError`` from a
    closed file, ...) is reported as TruncatedError too.
    """
    chunks: list[bytes] = []
    remaining = size
    try:
        while remaining > 0:
            chunk = stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    except Exception as exc:
        raise TruncatedError(f"{step}: {exc}") from exc

    data = b"".join(chunks)
    if remaining > 0:
        raise TruncatedError(
            f"{step}: unexpected end of stream (wanted {size} bytes, got {len(data)})"
        )
    return data


def read_byte(stream: IByteStream, step: str) -> int:
    return read_exact(stream, 1, step)[0]
