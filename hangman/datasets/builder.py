"""
Turn raw description text into a candidate word set.

Tokens are the pieces left after splitting on runs of non-word characters
(`\\W+`; word chars are letters, digits and underscore). Tokens shorter than
`min_word_length` are dropped; the rest are deduplicated exactly as they
appear, with no case folding.
"""

from __future__ import annotations

import re
from typing import Set

from hangman.config import DEFAULT_CONFIG

TOKEN_SPLIT_RE = re.compile(r"\W+")


def build_wordset(text: str, min_word_length: int = DEFAULT_CONFIG.min_word_length) -> Set[str]:
    """
    Tokenize `text` and keep the unique tokens of length >= min_word_length.

    Example:
      build_wordset("Brewing, brewing... BREWING!", 6) -> {"Brewing", "brewing", "BREWING"}
    """
    return {tok for tok in TOKEN_SPLIT_RE.split(text) if len(tok) >= min_word_length}
