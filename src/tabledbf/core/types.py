"""Type aliases used across tabledbf."""

from __future__ import annotations

RecordData = dict[str, str]
LanguageDriverId = int
CodecName = str
