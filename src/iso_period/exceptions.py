class IsoPeriodError(Exception):
    """Base class for custom errors in the iso-period package."""


class PeriodError(IsoPeriodError):
    """Base exception for all period-related errors."""


class PeriodFormatError(PeriodError, ValueError):
    """Raised when a period string cannot be parsed."""


class MissingPrefixError(PeriodFormatError):
    """Raised when a period string is too short or does not start with the "P" designator."""

    def __init__(self, msg: str | None = None):
        if not msg:
            msg = "invalid period format: must start with P"
        super().__init__(msg)


class InvalidNumberError(PeriodFormatError):
    """Raised when the numeral in front of a unit designator is not a valid decimal number."""

    def __init__(self, number: str, msg: str | None = None):
        if not msg:
            msg = f"invalid number format: {number}"
        self.number = number
        super().__init__(msg)


class InvalidCharacterError(PeriodFormatError):
    """Raised when a period string contains a character outside the period grammar."""

    def __init__(self, character: str, position: int | None = None, msg: str | None = None):
        if not msg:
            msg = f"invalid character in period: {character}"
        self.character = character
        self.position = position
        super().__init__(msg)


class InvalidQuotedLengthError(PeriodFormatError):
    """Raised when a quoted document token is too short to hold even an empty string."""

    def __init__(self, msg: str | None = None):
        if not msg:
            msg = "invalid JSON string length"
        super().__init__(msg)


class PeriodValidationError(PeriodError):
    """Raised when a validation on objects in the period module fails."""
