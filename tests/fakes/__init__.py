"""Shared test doubles: table image builders and decoders."""

from __future__ import annotations

import io
import struct


def field_descriptor(name: str, type_: str, length: int, decimals: int = 0,
                     memory_address: int = 0) -> bytes:
    """Build one 32-byte field descriptor."""
    raw_name = name.encode("ascii")
    return (
        raw_name.ljust(11, b"\x00")
        + type_.encode("ascii")
        + struct.pack("<I", memory_address)
        + bytes([length, decimals])
        + bytes(14)
    )


def build_table(
    fields: list[tuple[str, str, int]],
    records: list[bytes],
    *,
    file_type: int = 0x03,
    date: tuple[int, int, int] = (124, 1, 15),
    ldid: int = 0x00,
    record_count: int | None = None,
    terminator: int = 0x0D,
) -> bytes:
    """Assemble a table image.

    ``fields`` are (name, type, length); each entry of ``records`` is a full
    record body including its deletion flag.
    """
    reserved = bytearray(20)
    reserved[17] = ldid
    record_length = 1 + sum(length for _, _, length in fields)
    header = (
        bytes([file_type, *date])
        + struct.pack("<I", len(records) if record_count is None else record_count)
        + struct.pack("<H", 32 + 32 * len(fields) + 1)
        + struct.pack("<H", record_length)
        + bytes(reserved)
    )
    descriptors = b"".join(field_descriptor(n, t, l) for n, t, l in fields)
    return header + descriptors + bytes([terminator]) + b"".join(records)


def minimal_table(**kwargs) -> bytes:
    """Two records of one character field NAME(10); the second is deleted."""
    return build_table(
        [("NAME", "C", 10)],
        [b" John Doe  ", b"*Jane Smith"],
        **kwargs,
    )


def multi_field_table(**kwargs) -> bytes:
    """One record with NAME C(10), AGE N(3), BIRTHDATE D(8); ldid CP866."""
    kwargs.setdefault("date", (124, 6, 15))
    kwargs.setdefault("ldid", 0x26)
    return build_table(
        [("NAME", "C", 10), ("AGE", "N", 3), ("BIRTHDATE", "D", 8)],
        [b" " + b"Alice     " + b" 25" + b"19990115"],
        **kwargs,
    )


class StrictAsciiDecoder:
    """ITextDecoder that rejects any byte above 0x7F."""

    def decode(self, data: bytes) -> str:
        return data.decode("ascii")


class RecordingDecoder:
    """ITextDecoder that records every input and decodes as latin-1."""

    def __init__(self) -> None:
        self.calls: list[bytes] = []

    def decode(self, data: bytes) -> str:
        self.calls.append(data)
        return data.decode("latin-1")


class CrashingDecoder:
    """ITextDecoder that raises RuntimeError on any input containing ``trigger``."""

    def __init__(self, trigger: bytes) -> None:
        self._trigger = trigger

    def decode(self, data: bytes) -> str:
        if self._trigger in data:
            raise RuntimeError("decoder crashed")
        return data.decode("latin-1")


class ClosingStream(io.BytesIO):
    """In-memory stream that behaves as closed once ``limit`` bytes were consumed."""

    def __init__(self, data: bytes, limit: int) -> None:
        super().__init__(data)
        self._limit = limit

    def read(self, size: int | None = -1, /) -> bytes:
        if self.tell() >= self._limit:
            raise ValueError("I/O operation on closed file.")
        return super().read(size)


class FailingStream(io.RawIOBase):
    """Raw stream that serves ``data`` then raises OSError."""

    def __init__(self, data: bytes) -> None:
        self._data = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        chunk = self._data.read(len(buffer))
        if not chunk:
            raise OSError("device not ready")
        buffer[:len(chunk)] = chunk
        return len(chunk)


__all__ = [
    "ClosingStream",
    "CrashingDecoder",
    "FailingStream",
    "RecordingDecoder",
    "StrictAsciiDecoder",
    "build_table",
    "field_descriptor",
    "minimal_table",
    "multi_field_table",
]
