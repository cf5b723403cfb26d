"""Exceptions raised by the conversion functions."""


class InvalidArgumentError(ValueError):
    """Raised when a required argument is absent or of the wrong type.

    This is a programming error on the caller's side, never a data error.
    """

    def __init__(self, param_name: str, message: str | None = None) -> None:
        self.param_name = param_name
        super().__init__(message or f"Value cannot be None. (Parameter '{param_name}')")


class NumberParseError(ValueError):
    """Base class for text that could not be converted to a number."""

    def __init__(self, text: str, numeric_type: str, message: str) -> None:
        self.text = text
        self.numeric_type = numeric_type
        super().__init__(message)


class NumberFormatError(NumberParseError):
    """Raised when text is not a literal of the target numeric grammar."""

    def __init__(self, text: str, numeric_type: str) -> None:
        super().__init__(
            text,
            numeric_type,
            f"Input string {text!r} was not in a correct format for {numeric_type}",
        )


class NumberOverflowError(NumberParseError):
    """Raised when a valid literal lies outside the target type's range."""

    def __init__(self, text: str, numeric_type: str) -> None:
        super().__init__(
            text,
            numeric_type,
            f"Value {text!r} was either too large or too small for {numeric_type}",
        )
