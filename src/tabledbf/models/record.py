"""Record and reader state models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ReaderState(StrEnum):
    READY = "READY"
    EXHAUSTED = "EXHAUSTED"
    FAILED = "FAILED"


class Record(BaseModel):
    """A single table row; ``data`` follows field order."""

    deleted: bool = False
    data: dict[str, str] = Field(default_factory=dict)
