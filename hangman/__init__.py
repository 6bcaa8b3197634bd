from .config import GameConfig, DEFAULT_CONFIG
from .errors import (
    HangmanError,
    FetchError,
    DictionaryError,
    UndersizeError,
    InvalidRangeError,
    UnbalancedError,
)

__all__ = [
    "GameConfig",
    "DEFAULT_CONFIG",
    "HangmanError",
    "FetchError",
    "DictionaryError",
    "UndersizeError",
    "InvalidRangeError",
    "UnbalancedError",
]
