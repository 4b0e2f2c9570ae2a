"""
Tuple Schema Descriptor
=======================
Describes the layout of a tuple: an ordered, non-empty list of fields, each
with a DataType and an optional name. Catalog code builds one per table,
tuple code reads sizes and field types from it, and operators such as joins
derive their output schema with merge().

Descriptors are immutable. The field list is a tuple fixed at construction,
so a descriptor can be shared between readers without locking.

Name lookup
===========
field_name_to_index() scans every field and keeps the LAST match. After a
self-join both sides contribute an "id" field; the lookup resolves to the
right-hand one.

Teaching note:
  PostgreSQL keeps the equivalent information in a TupleDesc built from
  pg_attribute rows. Our version carries only type and name, because
  nullability and defaults belong to the catalog's column definitions.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from storage.types import DataType

log = logging.getLogger(__name__)


class SchemaError(Exception):
    """Base class for schema descriptor errors."""
    pass


class InvalidSchemaError(SchemaError, ValueError):
    """Raised when a descriptor would be empty or its names don't line up."""
    pass


class FieldIndexError(SchemaError, IndexError):
    """Raised when a field position is outside [0, num_fields())."""
    def __init__(self, index: int, num_fields: int):
        super().__init__(
            f"Field index {index} out of range; valid range is [0, {num_fields})"
        )
        self.index = index


class FieldNotFoundError(SchemaError, KeyError):
    """Raised when no field carries the requested name."""
    def __init__(self, name: Optional[str], available: list[Optional[str]]):
        self.message = f"Field {name!r} not found in schema. Available: {available}"
        super().__init__(self.message)
        self.name = name

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class FieldDescriptor:
    """One (type, optional name) slot of a tuple."""
    field_type: DataType
    field_name: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.field_name}({self.field_type})"


class SchemaDescriptor:
    """
    Ordered, immutable list of FieldDescriptors.

    SchemaDescriptor(types)         -- fields named "f0", "f1", ...
    SchemaDescriptor(types, names)  -- names zipped positionally, may be None
    """

    __slots__ = ("_fields",)

    def __init__(self, types: Sequence[DataType],
                 names: Optional[Sequence[Optional[str]]] = None):
        types = list(types)
        if names is None:
            names = [f"f{i}" for i in range(len(types))]
        else:
            names = list(names)
            if len(names) != len(types):
                raise InvalidSchemaError(
                    f"Expected {len(types)} field names, got {len(names)}"
                )
        self._fields = self._check_fields(
            FieldDescriptor(t, n) for t, n in zip(types, names)
        )

    @staticmethod
    def _check_fields(fields: Iterable[FieldDescriptor]) -> tuple:
        fields = tuple(fields)
        if not fields:
            raise InvalidSchemaError("A schema must contain at least one field")
        return fields

    @classmethod
    def from_fields(cls, fields: Iterable[FieldDescriptor]) -> "SchemaDescriptor":
        """Build a descriptor from existing FieldDescriptors, in order."""
        desc = cls.__new__(cls)
        desc._fields = cls._check_fields(fields)
        return desc

    # ─── Field access ───────────────────────────────────────────────

    @property
    def fields(self) -> tuple:
        return self._fields

    def num_fields(self) -> int:
        return len(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def _field_at(self, i: int) -> FieldDescriptor:
        if not 0 <= i < len(self._fields):
            raise FieldIndexError(i, len(self._fields))
        return self._fields[i]

    def get_field_name(self, i: int) -> Optional[str]:
        """Name of the i-th field (may be None). Raises FieldIndexError."""
        return self._field_at(i).field_name

    def get_field_type(self, i: int) -> DataType:
        """Type of the i-th field. Raises FieldIndexError."""
        return self._field_at(i).field_type

    def field_names(self) -> list[Optional[str]]:
        return [f.field_name for f in self._fields]

    def field_types(self) -> list[DataType]:
        return [f.field_type for f in self._fields]

    def field_name_to_index(self, name: Optional[str]) -> int:
        """
        Index of the last field named exactly `name` (case-sensitive).
        A None name never matches. Raises FieldNotFoundError.
        """
        index = -1
        if name is not None:
            for i, f in enumerate(self._fields):
                if f.field_name == name:
                    index = i
        if index == -1:
            raise FieldNotFoundError(name, self.field_names())
        return index

    def get_size(self) -> int:
        """Size in bytes of any tuple laid out by this descriptor."""
        return sum(f.field_type.length for f in self._fields)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields)

    def iterator(self) -> Iterator[FieldDescriptor]:
        """Fresh iterator over the fields; each call starts from field 0."""
        return iter(self._fields)

    # ─── Composition ────────────────────────────────────────────────

    @staticmethod
    def merge(first: "SchemaDescriptor", second: "SchemaDescriptor") -> "SchemaDescriptor":
        """New descriptor with first's fields followed by second's."""
        merged = SchemaDescriptor.from_fields(first.fields + second.fields)
        log.debug("merged schemas %s and %s into %d fields",
                  first.field_names(), second.field_names(), len(merged))
        return merged

    # ─── Comparison & display ───────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaDescriptor):
            return NotImplemented
        if len(self._fields) != len(other._fields):
            return False
        return all(a == b for a, b in zip(self._fields, other._fields))

    def __hash__(self) -> int:
        return hash(self._fields)

    def __str__(self) -> str:
        items = ",".join(
            f"{{fieldName:{f.field_name},fieldType:{f.field_type}}}"
            for f in self._fields
        )
        return f"{{list:[{items}]}}"

    def __repr__(self) -> str:
        return f"SchemaDescriptor([{', '.join(str(f) for f in self._fields)}])"


def merge(first: SchemaDescriptor, second: SchemaDescriptor) -> SchemaDescriptor:
    """Concatenate two descriptors; see SchemaDescriptor.merge."""
    return SchemaDescriptor.merge(first, second)
