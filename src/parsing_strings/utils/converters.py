"""Fixed numeric grammar shared by every conversion.

This module is the single source of truth for what counts as a numeric literal.
It never consults the host locale: the decimal separator is always ``.``, the
sign is an optional leading ``+`` or ``-``, digits are ASCII ``0-9`` and there
are no grouping separators.

## Integer literal
    [+|-] digit+

## Float literal (float32, float64, decimal)
    [+|-] ( digit+ [ "." digit* ] | "." digit+ ) [ (e|E) [+|-] digit+ ]

## Float symbols (float32, float64 only; case-insensitive)
    [+|-] ( NaN | Infinity | ∞ )
"""

import math
import re
from typing import Any

from ..core.exceptions import InvalidArgumentError

# =============================================================================
# GRAMMAR PATTERNS
# =============================================================================

# [0-9] rather than \d, which would also match non-ASCII digits
INTEGER_LITERAL = re.compile(r"(?P<sign>[+-]?)0*(?P<digits>[0-9]+)")

FLOAT_LITERAL = re.compile(
    r"(?P<sign>[+-]?)(?P<mantissa>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
    r"(?:[eE](?P<exponent>[+-]?[0-9]+))?"
)

FLOAT_SYMBOL = re.compile(r"(?P<sign>[+-]?)(?P<symbol>nan|infinity|∞)", re.IGNORECASE)


# =============================================================================
# INPUT HANDLING
# =============================================================================


def normalize_input(text: Any) -> str | None:
    """Trim surrounding whitespace, or return None if there is nothing to parse.

    Examples:
        >>> normalize_input("  42 ")
        '42'
        >>> normalize_input("   ") is None
        True
        >>> normalize_input(None) is None
        True
    """
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    return stripped or None


def require_text(text: Any, param_name: str = "text") -> str:
    """Return ``text`` unchanged, raising if it is absent or not a string."""
    if text is None:
        raise InvalidArgumentError(param_name)
    if not isinstance(text, str):
        raise InvalidArgumentError(
            param_name,
            f"Expected str for parameter '{param_name}', got {type(text).__name__}",
        )
    return text


# =============================================================================
# LITERAL MATCHING
# =============================================================================


def match_integer(text: str) -> tuple[bool, str] | None:
    """Split an integer literal into (negative, significant digits).

    Leading zeros are dropped, so ``"-007"`` gives ``(True, "7")`` and ``"000"``
    gives ``(False, "0")``. Returns None if ``text`` is not an integer literal.
    """
    match = INTEGER_LITERAL.fullmatch(text)
    if match is None:
        return None
    return match.group("sign") == "-", match.group("digits")


def is_float_literal(text: str) -> bool:
    """Check whether ``text`` is a float literal (symbols excluded)."""
    return FLOAT_LITERAL.fullmatch(text) is not None


def match_float(text: str) -> tuple[bool, str, str] | None:
    """Split a float literal into (negative, mantissa, exponent).

    The exponent keeps its sign and is ``""`` when absent, so ``"-1.5e-3"``
    gives ``(True, "1.5", "-3")``. Returns None if ``text`` is not a float
    literal.
    """
    match = FLOAT_LITERAL.fullmatch(text)
    if match is None:
        return None
    return match.group("sign") == "-", match.group("mantissa"), match.group("exponent") or ""


def match_float_symbol(text: str) -> float | None:
    """Map a NaN/Infinity symbol to its float value, or None if not a symbol."""
    match = FLOAT_SYMBOL.fullmatch(text)
    if match is None:
        return None
    if match.group("symbol").lower() == "nan":
        return math.nan
    return -math.inf if match.group("sign") == "-" else math.inf
