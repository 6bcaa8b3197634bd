"""
Error types for dictionary setup.

Everything here is a startup failure: the game cannot begin without a
valid dictionary, so callers surface these and stop rather than retry.
Storage problems are left as the builtin OSError family.
"""

from __future__ import annotations


class HangmanError(Exception):
    """Base class for all game setup errors."""


class FetchError(HangmanError):
    """The book description could not be downloaded or understood."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DictionaryError(HangmanError):
    """A dictionary failed one of the validation rules."""


class UndersizeError(DictionaryError):
    pass


class InvalidRangeError(DictionaryError):
    pass


class UnbalancedError(DictionaryError):
    pass
