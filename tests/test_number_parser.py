"""Integer conversion tests.

Covers the tagged result core, the try_parse_* functions and the per-type
sentinel table of the parse_* functions.

Usage:
    pytest tests/test_number_parser.py -v
"""

import pytest

from parsing_strings import (
    InvalidArgumentError,
    NumberFormatError,
    NumberOverflowError,
    NumericType,
    ParseOutcome,
    parse_byte,
    parse_integer,
    parse_integer_result,
    parse_long,
    parse_short,
    parse_signed_byte,
    parse_unsigned_integer,
    parse_unsigned_long,
    parse_unsigned_short,
    try_parse_byte,
    try_parse_integer,
    try_parse_long,
    try_parse_short,
    try_parse_signed_byte,
    try_parse_unsigned_integer,
    try_parse_unsigned_long,
    try_parse_unsigned_short,
)

TRY_FUNCTIONS = [
    try_parse_integer,
    try_parse_unsigned_integer,
    try_parse_byte,
    try_parse_signed_byte,
    try_parse_short,
    try_parse_unsigned_short,
    try_parse_long,
    try_parse_unsigned_long,
]

SENTINEL_FUNCTIONS = [
    parse_integer,
    parse_unsigned_integer,
    parse_byte,
    parse_signed_byte,
    parse_short,
    parse_unsigned_short,
    parse_long,
    parse_unsigned_long,
]


# =============================================================================
# Result Core Tests
# =============================================================================


class TestParseIntegerResult:
    """Outcome tagging shared by every integer type."""

    def test_success_carries_value(self):
        result = parse_integer_result("123", NumericType.INTEGER)
        assert result.outcome == ParseOutcome.SUCCESS
        assert result.success is True
        assert result.value == 123
        assert result.numeric_type == NumericType.INTEGER

    def test_malformed(self):
        result = parse_integer_result("12a", NumericType.INTEGER)
        assert result.outcome == ParseOutcome.MALFORMED
        assert result.value == 0

    def test_overflow(self):
        result = parse_integer_result("300", NumericType.BYTE)
        assert result.outcome == ParseOutcome.OVERFLOW
        assert result.value == 0

    def test_negative_unsigned_is_overflow(self):
        result = parse_integer_result("-1", NumericType.UNSIGNED_INTEGER)
        assert result.outcome == ParseOutcome.OVERFLOW

    def test_negative_zero_unsigned(self):
        assert parse_integer_result("-0", NumericType.UNSIGNED_LONG).as_tuple() == (True, 0)

    def test_leading_zeros_ignored(self):
        result = parse_integer_result("00000000000000000000000042", NumericType.BYTE)
        assert result.as_tuple() == (True, 42)

    def test_huge_literal_is_overflow(self):
        result = parse_integer_result("9" * 5000, NumericType.UNSIGNED_LONG)
        assert result.outcome == ParseOutcome.OVERFLOW

    def test_none_is_malformed(self):
        result = parse_integer_result(None, NumericType.LONG)
        assert result.outcome == ParseOutcome.MALFORMED

    @pytest.mark.parametrize(
        "numeric_type", [NumericType.FLOAT, NumericType.DOUBLE, NumericType.DECIMAL, "int32"]
    )
    def test_rejects_non_integer_type(self, numeric_type):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_integer_result("1", numeric_type)
        assert exc_info.value.param_name == "numeric_type"

    @pytest.mark.parametrize(
        "numeric_type",
        [t for t in NumericType if t.is_integer],
    )
    def test_bounds_are_inclusive(self, numeric_type):
        low = str(numeric_type.min_value)
        high = str(numeric_type.max_value)
        assert parse_integer_result(low, numeric_type).as_tuple() == (True, numeric_type.min_value)
        assert parse_integer_result(high, numeric_type).as_tuple() == (True, numeric_type.max_value)
        assert parse_integer_result(str(numeric_type.max_value + 1), numeric_type).outcome == ParseOutcome.OVERFLOW
        assert parse_integer_result(str(numeric_type.min_value - 1), numeric_type).outcome == ParseOutcome.OVERFLOW


# =============================================================================
# Try-Parse Tests
# =============================================================================


class TestTryParse:
    """try_parse_* never raises and returns (success, value)."""

    @pytest.mark.parametrize("func", TRY_FUNCTIONS)
    @pytest.mark.parametrize("text", ["", None, "   ", "\t\n"])
    def test_empty_input_fails(self, func, text):
        assert func(text) == (False, 0)

    @pytest.mark.parametrize("func", TRY_FUNCTIONS)
    def test_valid_literal(self, func):
        assert func("42") == (True, 42)
        assert func("+42") == (True, 42)

    @pytest.mark.parametrize("func", TRY_FUNCTIONS)
    def test_whitespace_does_not_change_outcome(self, func):
        assert func("  17\t") == func("17") == (True, 17)

    @pytest.mark.parametrize("func", TRY_FUNCTIONS)
    @pytest.mark.parametrize(
        "text", ["abc", "1.0", "1e3", "1_000", "1,000", "0x10", "１２", "1 2", "--1", "+", "-"]
    )
    def test_malformed_fails(self, func, text):
        assert func(text) == (False, 0)

    def test_non_string_fails(self):
        assert try_parse_integer(42) == (False, 0)

    def test_int32(self):
        assert try_parse_integer(" -2147483648 ") == (True, -2147483648)
        assert try_parse_integer("2147483648") == (False, 0)

    def test_uint32(self):
        assert try_parse_unsigned_integer("4294967295") == (True, 4294967295)
        assert try_parse_unsigned_integer("-1") == (False, 0)

    def test_uint8(self):
        assert try_parse_byte("255") == (True, 255)
        assert try_parse_byte("256") == (False, 0)

    def test_int8(self):
        assert try_parse_signed_byte("-128") == (True, -128)
        assert try_parse_signed_byte("128") == (False, 0)

    def test_int16(self):
        assert try_parse_short("-32768") == (True, -32768)
        assert try_parse_short("32768") == (False, 0)

    def test_uint16(self):
        assert try_parse_unsigned_short("65535") == (True, 65535)
        assert try_parse_unsigned_short("65536") == (False, 0)

    def test_int64(self):
        assert try_parse_long("-9223372036854775808") == (True, -(2**63))
        assert try_parse_long("9223372036854775808") == (False, 0)

    def test_uint64(self):
        assert try_parse_unsigned_long("18446744073709551615") == (True, 2**64 - 1)
        assert try_parse_unsigned_long("18446744073709551616") == (False, 0)


# =============================================================================
# Sentinel Tests
# =============================================================================


class TestParseSentinels:
    """parse_* fallback values, one type at a time."""

    @pytest.mark.parametrize("func", SENTINEL_FUNCTIONS)
    def test_none_raises_invalid_argument(self, func):
        with pytest.raises(InvalidArgumentError) as exc_info:
            func(None)
        assert exc_info.value.param_name == "text"

    @pytest.mark.parametrize("func", SENTINEL_FUNCTIONS)
    def test_valid_literal(self, func):
        assert func(" 100 ") == 100

    def test_int32(self):
        assert parse_integer("99999999999999999999") == -1
        assert parse_integer("abc") == 0
        assert parse_integer("") == 0
        assert parse_integer("   ") == 0
        assert parse_integer("-2147483648") == -2147483648

    def test_uint32(self):
        assert parse_unsigned_integer("abc") == 0
        assert parse_unsigned_integer("4294967296") == 4294967295
        assert parse_unsigned_integer("-5") == 4294967295

    def test_uint8(self):
        assert parse_byte("abc") == 255
        assert parse_byte("256") == 0
        assert parse_byte("-1") == 0
        assert parse_byte("200") == 200

    def test_int8(self):
        assert parse_signed_byte("abc") == 127
        assert parse_signed_byte("128") == 127
        assert parse_signed_byte("-129") == 127
        assert parse_signed_byte("-128") == -128

    def test_int16(self):
        assert parse_short("40000") == 32767
        assert parse_short("abc") == 32767
        assert parse_short("-32768") == -32768

    def test_uint16(self):
        assert parse_unsigned_short("abc") == 0
        assert parse_unsigned_short("65536") == 65535
        assert parse_unsigned_short("65535") == 65535

    def test_int64(self):
        assert parse_long("abc") == -(2**63)
        assert parse_long("9223372036854775808") == -1
        assert parse_long("-9223372036854775808") == -(2**63)


class TestParseUnsignedLong:
    """uint64 raises instead of returning sentinels."""

    def test_valid(self):
        assert parse_unsigned_long("18446744073709551615") == 2**64 - 1

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1.5"])
    def test_malformed_raises_format_error(self, text):
        with pytest.raises(NumberFormatError) as exc_info:
            parse_unsigned_long(text)
        assert exc_info.value.numeric_type == "uint64"
        assert exc_info.value.text == text

    @pytest.mark.parametrize("text", ["99999999999999999999999", "18446744073709551616", "-1"])
    def test_overflow_raises_overflow_error(self, text):
        with pytest.raises(NumberOverflowError):
            parse_unsigned_long(text)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_unsigned_long("abc")

    def test_none_raises_invalid_argument(self):
        with pytest.raises(InvalidArgumentError):
            parse_unsigned_long(None)


# =============================================================================
# Round-trip Tests
# =============================================================================


@pytest.mark.parametrize("func", SENTINEL_FUNCTIONS)
@pytest.mark.parametrize("text", ["0", "007", "+99", "127"])
def test_reparse_is_stable(func, text):
    value = func(text)
    assert func(str(value)) == value
