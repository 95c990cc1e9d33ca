"""Validation helper tests."""

import pytest

from pyspanscan._constants import MAX_PROPERTY_NAME_LENGTH
from pyspanscan._errors import (
    BufferNotWritableError,
    InvalidLengthError,
    InvalidPropertyNameError,
)
from pyspanscan._utils import (
    require_writable,
    resolve_length,
    terminated_length,
    to_bytes,
    validate_property_name,
)


class TestRequireWritable:
    def test_bytearray_returned(self):
        buf = bytearray(b"abc")
        assert require_writable(buf) is buf

    @pytest.mark.parametrize("value", [b"abc", "abc", memoryview(b"abc"), None])
    def test_rejected(self, value):
        with pytest.raises(BufferNotWritableError):
            require_writable(value)


class TestResolveLength:
    def test_default_is_whole_buffer(self):
        assert resolve_length(b"abcd", None) == 4

    def test_zero(self):
        assert resolve_length(b"abcd", 0) == 0

    def test_exact_length(self):
        assert resolve_length(b"abcd", 4) == 4

    def test_one_past_end(self):
        with pytest.raises(InvalidLengthError, match="exceeds"):
            resolve_length(b"abcd", 5)

    def test_negative(self):
        with pytest.raises(InvalidLengthError):
            resolve_length(b"abcd", -1)

    def test_empty_buffer(self):
        assert resolve_length(b"", None) == 0


class TestTerminatedLength:
    def test_no_nul(self):
        assert terminated_length(b"abc") == 3

    def test_stops_at_first_nul(self):
        assert terminated_length(b"ab\x00c\x00") == 2

    def test_nul_at_start(self):
        assert terminated_length(b"\x00abc") == 0

    def test_empty(self):
        assert terminated_length(b"") == 0

    def test_bounded_range(self):
        assert terminated_length(b"ab\x00cd", 3, 5) == 5

    def test_nul_inside_range(self):
        assert terminated_length(b"abc\x00d", 1, 5) == 3

    def test_nul_past_end_ignored(self):
        assert terminated_length(b"abc\x00", 0, 3) == 3


class TestToBytes:
    def test_str_encoded(self):
        assert to_bytes("é") == b"\xc3\xa9"

    def test_bytearray_copied(self):
        buf = bytearray(b"ab")
        result = to_bytes(buf)
        assert result == b"ab"
        assert isinstance(result, bytes)


class TestValidatePropertyName:
    def test_valid_name(self):
        validate_property_name(b"rate")

    def test_empty_name(self):
        validate_property_name(b"")

    def test_max_length(self):
        validate_property_name(b"a" * MAX_PROPERTY_NAME_LENGTH)

    def test_too_long(self):
        with pytest.raises(InvalidPropertyNameError):
            validate_property_name(b"a" * (MAX_PROPERTY_NAME_LENGTH + 1))

    def test_null_byte(self):
        with pytest.raises(InvalidPropertyNameError, match="null bytes"):
            validate_property_name(b"a\x00")
