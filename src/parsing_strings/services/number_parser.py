"""Text to integer conversions for 8, 16, 32 and 64-bit types.

Every type has three entry points:

- ``parse_integer_result``: tagged ``ParseResult`` (success/malformed/overflow).
- ``try_parse_<type>``: ``(success, value)``, never raises for bad data.
- ``parse_<type>``: the value, or a fixed per-type sentinel on failure.

The sentinels are kept for existing callers only. A sentinel cannot be told
apart from a parsed value that happens to equal it, so new code should use
``parse_integer_result`` or the try_parse_* functions instead.

Sentinel table (malformed / overflow):

    int32   0           / -1
    uint32  0           / 4294967295
    uint8   255         / 0
    int8    127         / 127
    int16   32767       / 32767
    uint16  0           / 65535
    int64   -2**63      / -1
    uint64  raises NumberFormatError / raises NumberOverflowError
"""

from ..core.enums import MAX_INTEGER_DIGITS, NumericType, ParseOutcome
from ..core.exceptions import InvalidArgumentError, NumberFormatError, NumberOverflowError
from ..core.logging import log_parse_failure
from ..models.result import ParseResult
from ..utils.converters import match_integer, normalize_input, require_text


# =============================================================================
# RESULT CORE
# =============================================================================


def parse_integer_result(text: str | None, numeric_type: NumericType) -> ParseResult:
    """Convert text to an integer of the given type.

    Args:
        text: Text to convert; surrounding whitespace is ignored
        numeric_type: One of the integer NumericType members

    Returns:
        ParseResult with outcome SUCCESS and the value, or MALFORMED/OVERFLOW
        with value 0

    Raises:
        InvalidArgumentError: If numeric_type is not an integer type

    Examples:
        >>> parse_integer_result(" 42 ", NumericType.INTEGER).value
        42
        >>> parse_integer_result("300", NumericType.BYTE).outcome
        <ParseOutcome.OVERFLOW: 'overflow'>
    """
    if not isinstance(numeric_type, NumericType) or not numeric_type.is_integer:
        raise InvalidArgumentError(
            "numeric_type", f"{numeric_type!r} is not an integer numeric type"
        )

    normalized = normalize_input(text)
    parts = match_integer(normalized) if normalized is not None else None
    if parts is None:
        return _failure(numeric_type, ParseOutcome.MALFORMED, text)

    negative, digits = parts
    if len(digits) > MAX_INTEGER_DIGITS:
        return _failure(numeric_type, ParseOutcome.OVERFLOW, text)

    value = -int(digits) if negative else int(digits)
    if not numeric_type.min_value <= value <= numeric_type.max_value:
        return _failure(numeric_type, ParseOutcome.OVERFLOW, text)

    return ParseResult(numeric_type=numeric_type, outcome=ParseOutcome.SUCCESS, value=value)


def _failure(numeric_type: NumericType, outcome: ParseOutcome, text: object) -> ParseResult:
    log_parse_failure(numeric_type.value, outcome.value, text)
    return ParseResult(numeric_type=numeric_type, outcome=outcome, value=0)


# =============================================================================
# INT32
# =============================================================================


def try_parse_integer(text: str | None) -> tuple[bool, int]:
    """Convert text to a 32-bit signed integer; ``(False, 0)`` on failure."""
    return parse_integer_result(text, NumericType.INTEGER).as_tuple()


def parse_integer(text: str) -> int:
    """Convert text to a 32-bit signed integer.

    Returns 0 for malformed text and -1 on overflow.
    """
    result = parse_integer_result(require_text(text), NumericType.INTEGER)
    if result.outcome is ParseOutcome.OVERFLOW:
        return -1
    if result.outcome is ParseOutcome.MALFORMED:
        return 0
    return result.value


# =============================================================================
# UINT32
# =============================================================================


def try_parse_unsigned_integer(text: str | None) -> tuple[bool, int]:
    """Convert text to a 32-bit unsigned integer; ``(False, 0)`` on failure."""
    return parse_integer_result(text, NumericType.UNSIGNED_INTEGER).as_tuple()


def parse_unsigned_integer(text: str) -> int:
    """Convert text to a 32-bit unsigned integer.

    Returns the minimum value (0) for malformed text and the maximum value on
    overflow.
    """
    numeric_type = NumericType.UNSIGNED_INTEGER
    result = parse_integer_result(require_text(text), numeric_type)
    if result.outcome is ParseOutcome.OVERFLOW:
        return numeric_type.max_value
    if result.outcome is ParseOutcome.MALFORMED:
        return numeric_type.min_value
    return result.value


# =============================================================================
# UINT8
# =============================================================================


def try_parse_byte(text: str | None) -> tuple[bool, int]:
    """Convert text to an 8-bit unsigned integer; ``(False, 0)`` on failure."""
    return parse_integer_result(text, NumericType.BYTE).as_tuple()


def parse_byte(text: str) -> int:
    """Convert text to an 8-bit unsigned integer.

    Returns 255 for malformed text and 0 on overflow (the reverse of uint32).
    """
    numeric_type = NumericType.BYTE
    result = parse_integer_result(require_text(text), numeric_type)
    if result.outcome is ParseOutcome.MALFORMED:
        return numeric_type.max_value
    if result.outcome is ParseOutcome.OVERFLOW:
        return numeric_type.min_value
    return result.value


# =============================================================================
# INT8
# =============================================================================


def try_parse_signed_byte(text: str | None) -> tuple[bool, int]:
    """Convert text to an 8-bit signed integer; ``(False, 0)`` on failure."""
    return parse_integer_result(text, NumericType.SIGNED_BYTE).as_tuple()


def parse_signed_byte(text: str) -> int:
    """Convert text to an 8-bit signed integer.

    Malformed text and overflow both return 127. Earlier versions let an
    overflow error escape here; it is now folded into the sentinel.
    """
    numeric_type = NumericType.SIGNED_BYTE
    result = parse_integer_result(require_text(text), numeric_type)
    if not result.success:
        return numeric_type.max_value
    return result.value


# =============================================================================
# INT16
# =============================================================================


def try_parse_short(text: str | None) -> tuple[bool, int]:
    """Convert text to a 16-bit signed integer; ``(False, 0)`` on failure."""
    return parse_integer_result(text, NumericType.SHORT).as_tuple()


def parse_short(text: str) -> int:
    """Convert text to a 16-bit signed integer.

    Only overflow has a sentinel (32767); malformed text is handled the same way.
    Earlier versions let a format error escape here; it now returns the
    sentinel so that parse_unsigned_long stays the only raising parse_*.
    """
    numeric_type = NumericType.SHORT
    result = parse_integer_result(require_text(text), numeric_type)
    if not result.success:
        return numeric_type.max_value
    return result.value


# =============================================================================
# UINT16
# =============================================================================


def try_parse_unsigned_short(text: str | None) -> tuple[bool, int]:
    """Convert text to a 16-bit unsigned integer; ``(False, 0)`` on failure."""
    return parse_integer_result(text, NumericType.UNSIGNED_SHORT).as_tuple()


def parse_unsigned_short(text: str) -> int:
    """Convert text to a 16-bit unsigned integer.

    Returns 0 for malformed text and 65535 on overflow.
    """
    numeric_type = NumericType.UNSIGNED_SHORT
    result = parse_integer_result(require_text(text), numeric_type)
    if result.outcome is ParseOutcome.MALFORMED:
        return 0
    if result.outcome is ParseOutcome.OVERFLOW:
        return numeric_type.max_value
    return result.value


# =============================================================================
# INT64
# =============================================================================


def try_parse_long(text: str | None) -> tuple[bool, int]:
    """Convert text to a 64-bit signed integer; ``(False, 0)`` on failure."""
    return parse_integer_result(text, NumericType.LONG).as_tuple()


def parse_long(text: str) -> int:
    """Convert text to a 64-bit signed integer.

    Returns the minimum value (-2**63) for malformed text and -1 on overflow.
    """
    numeric_type = NumericType.LONG
    result = parse_integer_result(require_text(text), numeric_type)
    if result.outcome is ParseOutcome.MALFORMED:
        return numeric_type.min_value
    if result.outcome is ParseOutcome.OVERFLOW:
        return -1
    return result.value


# =============================================================================
# UINT64
# =============================================================================


def try_parse_unsigned_long(text: str | None) -> tuple[bool, int]:
    """Convert text to a 64-bit unsigned integer; ``(False, 0)`` on failure."""
    return parse_integer_result(text, NumericType.UNSIGNED_LONG).as_tuple()


def parse_unsigned_long(text: str) -> int:
    """Convert text to a 64-bit unsigned integer.

    Unlike its siblings this has no sentinels: every failure is raised.

    Raises:
        InvalidArgumentError: If text is None
        NumberFormatError: If text is empty, whitespace-only or malformed
        NumberOverflowError: If the value is outside 0..2**64-1
    """
    numeric_type = NumericType.UNSIGNED_LONG
    result = parse_integer_result(require_text(text), numeric_type)
    if result.outcome is ParseOutcome.MALFORMED:
        raise NumberFormatError(text, numeric_type.value)
    if result.outcome is ParseOutcome.OVERFLOW:
        raise NumberOverflowError(text, numeric_type.value)
    return result.value
