"""
Storage Schema Layer
====================
Public API for tuple schema descriptors.

Usage:
    from storage import DataType, SchemaDescriptor, FieldDescriptor, merge
"""

from storage.types import DataType, STRING_LEN, FIXED_SIZES, fixed_size, type_from_string
from storage.schema import (
    FieldDescriptor, SchemaDescriptor, merge,
    SchemaError, InvalidSchemaError, FieldIndexError, FieldNotFoundError,
)

__all__ = [
    "DataType", "STRING_LEN", "FIXED_SIZES", "fixed_size", "type_from_string",
    "FieldDescriptor", "SchemaDescriptor", "merge",
    "SchemaError", "InvalidSchemaError", "FieldIndexError", "FieldNotFoundError",
]
