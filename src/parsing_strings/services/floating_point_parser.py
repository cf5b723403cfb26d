"""Text to floating-point and fixed-point decimal conversions.

## Types
    float32  IEEE single precision, returned as a Python float
    float64  IEEE double precision
    decimal  96-bit coefficient with scale 0..28 (max magnitude 2**96 - 1)

## Range behaviour
    float32/float64: out-of-range magnitudes round to +/-inf or 0.0 and still
    count as success, so these types never report overflow.
    decimal: extra precision is rounded half-to-even to 28 fractional digits
    and a 96-bit coefficient; magnitudes still above 2**96 - 1 after rounding
    are overflow.

## Sentinels returned by parse_* (malformed / overflow)
    float32  nan     / (never overflows)
    float64  5e-324  / (never overflows)
    decimal  -1.1    / -2.2 (only via the integer pre-check in parse_decimal)

Sentinels are kept for existing callers; use the *_result functions or the
try_parse_* functions in new code.
"""

import math
import struct
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext

from ..core.enums import (
    DECIMAL_MALFORMED_SENTINEL,
    DECIMAL_MAX,
    DECIMAL_MAX_COEFFICIENT,
    DECIMAL_MAX_SCALE,
    DECIMAL_OVERFLOW_SENTINEL,
    DECIMAL_ROUNDING_LIMIT,
    DOUBLE_EPSILON,
    NumericType,
    ParseOutcome,
)
from ..core.logging import log_parse_failure
from ..models.result import ParseResult
from ..utils.converters import (
    is_float_literal,
    match_float,
    match_float_symbol,
    normalize_input,
    require_text,
)

# Enough digits for any in-range decimal quantized to scale 28
_DECIMAL_WORKING_PRECISION = 64

# Integral and above DECIMAL_MAX
_EXPONENT_OVERFLOW = Decimal("1E+29")


# =============================================================================
# HELPERS
# =============================================================================


def _read_double(text: str | None) -> float | None:
    """Read a float literal or symbol as a double, or None if malformed."""
    normalized = normalize_input(text)
    if normalized is None:
        return None
    symbol = match_float_symbol(normalized)
    if symbol is not None:
        return symbol
    if not is_float_literal(normalized):
        return None
    return float(normalized)


def _round_to_single(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        # Rounds past FLT_MAX
        return math.copysign(math.inf, value)


def _read_decimal(text: str | None) -> Decimal | None:
    """Read a float literal as an exact Decimal, or None if malformed.

    Literals whose exponent is beyond what the decimal module can hold come
    back as zero (negative exponent or zero mantissa) or as an integral
    stand-in just outside the fixed-point range (positive exponent).
    """
    normalized = normalize_input(text)
    parts = match_float(normalized) if normalized is not None else None
    if parts is None:
        return None
    try:
        value = Decimal(normalized)
    except (InvalidOperation, ValueError):
        value = None
    if value is not None and value.is_finite():
        return value

    negative, mantissa, exponent = parts
    if exponent.startswith("-") or not mantissa.strip("0."):
        return Decimal(0)
    return _EXPONENT_OVERFLOW.copy_negate() if negative else _EXPONENT_OVERFLOW


def _is_integral(value: Decimal) -> bool:
    """Check whether a finite Decimal has no non-zero fractional digits."""
    _, digits, exponent = value.as_tuple()
    if exponent >= 0:
        return True
    return not any(digits[exponent:])


def _coefficient(value: Decimal) -> int:
    return int("".join(str(digit) for digit in value.as_tuple().digits))


def _fit_decimal(value: Decimal) -> Decimal:
    """Round an in-range Decimal to scale <= 28 and a 96-bit coefficient."""
    # Below 1E-29 everything rounds to zero at scale 28
    if value.adjusted() < -DECIMAL_MAX_SCALE - 1:
        return Decimal(0).scaleb(-DECIMAL_MAX_SCALE)

    target = min(max(value.as_tuple().exponent, -DECIMAL_MAX_SCALE), 0)

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_WORKING_PRECISION
        ctx.rounding = ROUND_HALF_EVEN

        fitted = value.quantize(Decimal(1).scaleb(target))
        # Always round from the exact value so digits are rounded only once
        while target < 0 and _coefficient(fitted) > DECIMAL_MAX_COEFFICIENT:
            target += 1
            fitted = value.quantize(Decimal(1).scaleb(target))

    if fitted.is_zero():
        return fitted.copy_abs()
    return fitted


# =============================================================================
# RESULT CORE
# =============================================================================


def parse_float_result(text: str | None) -> ParseResult:
    """Convert text to a single-precision float.

    Examples:
        >>> parse_float_result("1.5").value
        1.5
        >>> parse_float_result("abc").outcome
        <ParseOutcome.MALFORMED: 'malformed'>
    """
    value = _read_double(text)
    if value is None:
        log_parse_failure(NumericType.FLOAT.value, ParseOutcome.MALFORMED.value, text)
        return ParseResult(numeric_type=NumericType.FLOAT, outcome=ParseOutcome.MALFORMED, value=0.0)
    return ParseResult(
        numeric_type=NumericType.FLOAT,
        outcome=ParseOutcome.SUCCESS,
        value=_round_to_single(value),
    )


def parse_double_result(text: str | None) -> ParseResult:
    """Convert text to a double-precision float."""
    value = _read_double(text)
    if value is None:
        log_parse_failure(NumericType.DOUBLE.value, ParseOutcome.MALFORMED.value, text)
        return ParseResult(numeric_type=NumericType.DOUBLE, outcome=ParseOutcome.MALFORMED, value=0.0)
    return ParseResult(numeric_type=NumericType.DOUBLE, outcome=ParseOutcome.SUCCESS, value=value)


def parse_decimal_result(text: str | None) -> ParseResult:
    """Convert text to a 96-bit fixed-point decimal.

    Args:
        text: Float literal without NaN/Infinity symbols

    Returns:
        ParseResult with the rounded Decimal on success; MALFORMED or OVERFLOW
        with Decimal("0") otherwise

    Examples:
        >>> parse_decimal_result(" 42.5 ").value
        Decimal('42.5')
        >>> parse_decimal_result("1e400").outcome
        <ParseOutcome.OVERFLOW: 'overflow'>
    """
    value = _read_decimal(text)
    if value is None:
        outcome = ParseOutcome.MALFORMED
    elif value.copy_abs() >= DECIMAL_ROUNDING_LIMIT:
        outcome = ParseOutcome.OVERFLOW
    else:
        fitted = _fit_decimal(value)
        # Rounding up at the last digit can still cross the limit
        if fitted.copy_abs() <= DECIMAL_MAX:
            return ParseResult(
                numeric_type=NumericType.DECIMAL,
                outcome=ParseOutcome.SUCCESS,
                value=fitted,
            )
        outcome = ParseOutcome.OVERFLOW

    log_parse_failure(NumericType.DECIMAL.value, outcome.value, text)
    return ParseResult(numeric_type=NumericType.DECIMAL, outcome=outcome, value=Decimal(0))


# =============================================================================
# FLOAT32
# =============================================================================


def try_parse_float(text: str | None) -> tuple[bool, float]:
    """Convert text to a single-precision float; ``(False, 0.0)`` on failure."""
    return parse_float_result(text).as_tuple()


def parse_float(text: str) -> float:
    """Convert text to a single-precision float, or NaN if it cannot be parsed."""
    result = parse_float_result(require_text(text))
    if not result.success:
        return math.nan
    return result.value


# =============================================================================
# FLOAT64
# =============================================================================


def try_parse_double(text: str | None) -> tuple[bool, float]:
    """Convert text to a double-precision float; ``(False, 0.0)`` on failure."""
    return parse_double_result(text).as_tuple()


def parse_double(text: str) -> float:
    """Convert text to a double-precision float.

    Returns the smallest positive subnormal double (5e-324) if the text cannot
    be parsed.
    """
    result = parse_double_result(require_text(text))
    if not result.success:
        return DOUBLE_EPSILON
    return result.value


# =============================================================================
# DECIMAL
# =============================================================================


def try_parse_decimal(text: str | None) -> tuple[bool, Decimal]:
    """Convert text to a fixed-point decimal; ``(False, Decimal("0"))`` on failure."""
    return parse_decimal_result(text).as_tuple()


def parse_decimal(text: str) -> Decimal:
    """Convert text to a fixed-point decimal.

    The text is first read as an arbitrary-precision integer. If that works
    and the integer is outside the decimal range, Decimal("-2.2") is returned.
    Any other failure, including a non-integral value out of range, returns
    Decimal("-1.1").

    Raises:
        InvalidArgumentError: If text is None
    """
    require_text(text)

    exact = _read_decimal(text)
    if exact is not None and _is_integral(exact) and exact.copy_abs() > DECIMAL_MAX:
        log_parse_failure(NumericType.DECIMAL.value, ParseOutcome.OVERFLOW.value, text)
        return DECIMAL_OVERFLOW_SENTINEL

    result = parse_decimal_result(text)
    if not result.success:
        return DECIMAL_MALFORMED_SENTINEL
    return result.value
