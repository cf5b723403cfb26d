"""Locale-independent string to number conversions.

Each numeric type has a non-raising ``try_parse_*`` function returning
``(success, value)``, a ``parse_*`` function returning the value or a fixed
per-type sentinel, and a tagged ``*_result`` core returning a ``ParseResult``.
"""

from .core.config import Settings, get_settings, validate_settings
from .core.enums import NumericType, ParseOutcome
from .core.exceptions import (
    InvalidArgumentError,
    NumberFormatError,
    NumberOverflowError,
    NumberParseError,
)
from .models.result import ParseResult
from .services import (
    parse_byte,
    parse_decimal,
    parse_decimal_result,
    parse_double,
    parse_double_result,
    parse_float,
    parse_float_result,
    parse_integer,
    parse_integer_result,
    parse_long,
    parse_short,
    parse_signed_byte,
    parse_unsigned_integer,
    parse_unsigned_long,
    parse_unsigned_short,
    try_parse_byte,
    try_parse_decimal,
    try_parse_double,
    try_parse_float,
    try_parse_integer,
    try_parse_long,
    try_parse_short,
    try_parse_signed_byte,
    try_parse_unsigned_integer,
    try_parse_unsigned_long,
    try_parse_unsigned_short,
)

__all__ = [
    "Settings",
    "get_settings",
    "validate_settings",
    "NumericType",
    "ParseOutcome",
    "ParseResult",
    "InvalidArgumentError",
    "NumberParseError",
    "NumberFormatError",
    "NumberOverflowError",
    "parse_integer_result",
    "try_parse_integer",
    "parse_integer",
    "try_parse_unsigned_integer",
    "parse_unsigned_integer",
    "try_parse_byte",
    "parse_byte",
    "try_parse_signed_byte",
    "parse_signed_byte",
    "try_parse_short",
    "parse_short",
    "try_parse_unsigned_short",
    "parse_unsigned_short",
    "try_parse_long",
    "parse_long",
    "try_parse_unsigned_long",
    "parse_unsigned_long",
    "parse_float_result",
    "try_parse_float",
    "parse_float",
    "parse_double_result",
    "try_parse_double",
    "parse_double",
    "parse_decimal_result",
    "try_parse_decimal",
    "parse_decimal",
]
