"""Exception hierarchy for the formatting engine."""

from __future__ import annotations


class FormattingError(Exception):
    """Base error for formatting failures."""


class NotANumberError(FormattingError, ValueError):
    """Input text does not match the decimal grammar."""

    def __init__(self, text: str):
        super().__init__(f"Number expected, got {text!r}")
        self.text = text


class CurrencyTableError(FormattingError):
    """The currency configuration resource is malformed."""


class MissingArgumentError(FormattingError, TypeError):
    """A filter was invoked without one of its required arguments."""

    def __init__(self, argument: str):
        super().__init__(f"required argument {argument} is missing")
        self.argument = argument
