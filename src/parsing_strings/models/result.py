from decimal import Decimal
from typing import Union

from pydantic import BaseModel, ConfigDict

from ..core.enums import NumericType, ParseOutcome

NumericValue = Union[int, float, Decimal]


class ParseResult(BaseModel):
    """Tagged outcome of converting one text value.

    ``value`` holds the parsed number on success and the type's zero-equivalent
    (``0``, ``0.0`` or ``Decimal("0")``) on any failure.
    """

    model_config = ConfigDict(frozen=True)

    numeric_type: NumericType
    outcome: ParseOutcome
    value: NumericValue = 0

    @property
    def success(self) -> bool:
        return self.outcome is ParseOutcome.SUCCESS

    def as_tuple(self) -> tuple[bool, NumericValue]:
        """Return ``(success, value)`` as the try_parse_* functions do."""
        return self.success, self.value
