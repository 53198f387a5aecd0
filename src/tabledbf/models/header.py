"""Table header models."""

from __future__ import annotations

from datetime import date
from enum import IntEnum

from pydantic import BaseModel

HEADER_LENGTH = 32
DESCRIPTOR_LENGTH = 32
LANGUAGE_DRIVER_OFFSET = 17  # within the 20 reserved bytes


class FileType(IntEnum):
    FOXBASE = 0x02
    FOXBASE_PLUS_NO_MEMO = 0x03
    VISUAL_FOXPRO = 0x30
    VISUAL_FOXPRO_AUTOINCREMENT = 0x31
    VISUAL_FOXPRO_VARCHAR = 0x32
    DBASE_IV_SQL_TABLE = 0x43
    DBASE_IV_SQL_SYSTEM = 0x63
    FOXBASE_PLUS_MEMO = 0x83
    DBASE_IV_MEMO = 0x8B
    DBASE_IV_SQL_TABLE_MEMO = 0xCB
    FOXPRO_2 = 0xF5
    HIPER_SIX = 0xE5

    @property
    def description(self) -> str:
        return _FILE_TYPE_DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.description


_FILE_TYPE_DESCRIPTIONS = {
    FileType.FOXBASE: "FoxBASE",
    FileType.FOXBASE_PLUS_NO_MEMO: "FoxBASE+/Dbase III plus, no memo",
    FileType.VISUAL_FOXPRO: "Visual FoxPro",
    FileType.VISUAL_FOXPRO_AUTOINCREMENT: "Visual FoxPro, autoincrement enabled",
    FileType.VISUAL_FOXPRO_VARCHAR: "Visual FoxPro with field type Varchar or Varbinary",
    FileType.DBASE_IV_SQL_TABLE: "dBASE IV SQL table files, no memo",
    FileType.DBASE_IV_SQL_SYSTEM: "dBASE IV SQL system files, no memo",
    FileType.FOXBASE_PLUS_MEMO: "FoxBASE+/dBASE III PLUS, with memo",
    FileType.DBASE_IV_MEMO: "dBASE IV with memo",
    FileType.DBASE_IV_SQL_TABLE_MEMO: "dBASE IV SQL table files with memo",
    FileType.FOXPRO_2: "FoxPro 2.x (or earlier) with memo",
    FileType.HIPER_SIX: "HiPer-Six format with SMT memo file",
}


class FileHeader(BaseModel):
    """The fixed 32-byte table header."""

    file_type: FileType
    last_update: date
    record_count: int
    header_length: int
    record_length: int  # includes the deletion flag
    reserved: bytes = b"\x00" * 20

    model_config = {"frozen": True}

    @property
    def field_count(self) -> int:
        """Descriptor count implied by header_length; any remainder is dropped."""
        return max(self.header_length - HEADER_LENGTH, 0) // DESCRIPTOR_LENGTH

    @property
    def language_driver_id(self) -> int:
        return self.reserved[LANGUAGE_DRIVER_OFFSET]
