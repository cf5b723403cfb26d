"""Result models."""

from .result import ParseResult

__all__ = ["ParseResult"]
