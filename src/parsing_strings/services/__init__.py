"""Integer and floating-point conversion services."""

from .floating_point_parser import (
    parse_decimal,
    parse_decimal_result,
    parse_double,
    parse_double_result,
    parse_float,
    parse_float_result,
    try_parse_decimal,
    try_parse_double,
    try_parse_float,
)
from .number_parser import (
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

__all__ = [
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
