"""
Data Type Tests
===============
  ✔ fixed byte length per type
  ✔ string parsing, aliases, errors
"""

import os
import sys

import pytest

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from storage.types import DataType, STRING_LEN, FIXED_SIZES, fixed_size, type_from_string


class TestDataTypeLengths:

    def test_int_length(self):
        assert DataType.INT.length == 4

    def test_string_length_includes_prefix(self):
        assert STRING_LEN == 128
        assert DataType.STRING.length == 132

    def test_every_type_has_a_size(self):
        for dtype in DataType:
            assert fixed_size(dtype) == FIXED_SIZES[dtype] == dtype.length
            assert dtype.length > 0

    def test_str_is_value(self):
        assert str(DataType.BOOLEAN) == "BOOLEAN"


class TestTypeFromString:

    @pytest.mark.parametrize("text,expected", [
        ("INT", DataType.INT),
        ("  float ", DataType.FLOAT),
        ("date", DataType.DATE),
        ("integer", DataType.INT),
        ("VARCHAR", DataType.STRING),
        ("text", DataType.STRING),
        ("bool", DataType.BOOLEAN),
    ])
    def test_parses(self, text, expected):
        assert type_from_string(text) is expected

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown data type"):
            type_from_string("BLOB")
