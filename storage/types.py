"""
Storage Data Type System
========================
Defines the column types a tuple field can hold: INT, FLOAT, STRING,
BOOLEAN, DATE. Every type occupies a fixed number of bytes inside a tuple,
so a tuple's physical size is known from its schema alone.

Teaching note:
  Fixed-width slots keep tuple layout trivial: the byte offset of field i is
  the sum of the lengths of fields 0..i-1. The cost is padding for STRING,
  which always reserves STRING_LEN bytes regardless of the value stored.
"""

from enum import Enum
from typing import Optional


# Maximum payload of a STRING field, excluding its length prefix
STRING_LEN = 128


class DataType(Enum):
    """Supported column types."""
    INT = "INT"
    FLOAT = "FLOAT"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"

    @property
    def length(self) -> int:
        """Number of bytes a field of this type occupies in a tuple."""
        return FIXED_SIZES[self]

    def __str__(self) -> str:
        return self.value


# ─── Size constants ─────────────────────────────────────────────────────────

FIXED_SIZES: dict[DataType, int] = {
    DataType.INT: 4,                    # int32 big-endian
    DataType.FLOAT: 8,                  # IEEE 754 double
    DataType.STRING: STRING_LEN + 4,    # int32 length prefix + padded payload
    DataType.BOOLEAN: 1,                # 0x00 / 0x01
    DataType.DATE: 4,                   # int32 days since epoch
}

_ALIASES: dict[str, DataType] = {
    "INTEGER": DataType.INT,
    "VARCHAR": DataType.STRING,
    "TEXT": DataType.STRING,
    "BOOL": DataType.BOOLEAN,
}


def fixed_size(dtype: DataType) -> Optional[int]:
    """Return the byte size of a type, or None for an unknown value."""
    return FIXED_SIZES.get(dtype)


def type_from_string(type_str: str) -> DataType:
    """Convert a string like 'INT' or 'varchar' to a DataType enum member."""
    normalized = type_str.strip().upper()
    if normalized in _ALIASES:
        return _ALIASES[normalized]
    try:
        return DataType(normalized)
    except ValueError:
        raise ValueError(f"Unknown data type: {type_str!r}. "
                         f"Valid types: {[t.value for t in DataType]}")
