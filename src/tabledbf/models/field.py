"""Field descriptor models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class FieldType(StrEnum):
    CHARACTER = "C"
    NUMERIC = "N"
    DATE = "D"
    LOGICAL = "L"
    MEMO = "M"
    FLOAT = "F"


_TYPE_NAMES = {
    FieldType.CHARACTER: "Character",
    FieldType.NUMERIC: "Numeric",
    FieldType.DATE: "Date",
    FieldType.LOGICAL: "Logical",
    FieldType.MEMO: "Memo",
    FieldType.FLOAT: "Float",
}


class FieldDescriptor(BaseModel):
    """One 32-byte column definition.

    ``type`` is kept verbatim; tags outside FieldType are legal here and are
    decoded as character data.
    """

    name: str
    type: str
    memory_address: int = 0  # reserved, not used by file-based tables
    length: int
    decimal_count: int = 0

    model_config = {"frozen": True}

    @property
    def type_string(self) -> str:
        try:
            return _TYPE_NAMES[FieldType(self.type)]
        except ValueError:
            return f"Unknown ({self.type})"
