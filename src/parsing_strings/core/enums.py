"""Enums and limits for the supported numeric types."""

from decimal import Decimal
from enum import Enum


class NumericType(str, Enum):
    """Target types a text value can be converted to."""

    SIGNED_BYTE = "int8"
    BYTE = "uint8"
    SHORT = "int16"
    UNSIGNED_SHORT = "uint16"
    INTEGER = "int32"
    UNSIGNED_INTEGER = "uint32"
    LONG = "int64"
    UNSIGNED_LONG = "uint64"
    FLOAT = "float32"
    DOUBLE = "float64"
    DECIMAL = "decimal"

    @property
    def is_integer(self) -> bool:
        return self in INTEGER_RANGES

    @property
    def min_value(self) -> int:
        return INTEGER_RANGES[self][0]

    @property
    def max_value(self) -> int:
        return INTEGER_RANGES[self][1]


class ParseOutcome(str, Enum):
    """Result tag of a single conversion."""

    SUCCESS = "success"
    MALFORMED = "malformed"
    OVERFLOW = "overflow"


# Inclusive integer ranges
INTEGER_RANGES: dict[NumericType, tuple[int, int]] = {
    NumericType.SIGNED_BYTE: (-(2**7), 2**7 - 1),
    NumericType.BYTE: (0, 2**8 - 1),
    NumericType.SHORT: (-(2**15), 2**15 - 1),
    NumericType.UNSIGNED_SHORT: (0, 2**16 - 1),
    NumericType.INTEGER: (-(2**31), 2**31 - 1),
    NumericType.UNSIGNED_INTEGER: (0, 2**32 - 1),
    NumericType.LONG: (-(2**63), 2**63 - 1),
    NumericType.UNSIGNED_LONG: (0, 2**64 - 1),
}

# No supported integer type has more significant digits than this
MAX_INTEGER_DIGITS = 20

# Fixed-point decimal: 96-bit coefficient, scale 0..28
DECIMAL_MAX_COEFFICIENT = 2**96 - 1
DECIMAL_MAX_SCALE = 28
DECIMAL_MAX = Decimal(DECIMAL_MAX_COEFFICIENT)
# Magnitudes below this may still round down to DECIMAL_MAX
DECIMAL_ROUNDING_LIMIT = Decimal(2**96)

# Smallest positive subnormal double
DOUBLE_EPSILON = 5e-324

# Compatibility sentinels returned by parse_* on failure
DECIMAL_MALFORMED_SENTINEL = Decimal("-1.1")
DECIMAL_OVERFLOW_SENTINEL = Decimal("-2.2")
