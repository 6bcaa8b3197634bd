"""
Dictionary cache.

A dictionary for book <id> lives at `<cache_dir>/hangman_<id>.txt`, one word
per line. `DictionaryStore.load`:

  file exists -> read it, validate
  otherwise   -> fetch description, build word set, validate, save

Validation runs on both paths, and nothing is written unless the freshly
built set passes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Set, Tuple

from hangman.config import GameConfig, DEFAULT_CONFIG
from .builder import build_wordset
from .io import load_words, save_words
from .source import fetch_raw_text
from .validator import validate_dictionary


class DictionaryStore:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config

    def path_for(self, identifier: str) -> Path:
        return Path(self.config.cache_dir) / f"hangman_{identifier}.txt"

    def load(self, identifier: str) -> Set[str]:
        words, _ = self.load_with_source(identifier)
        return words

    def load_with_source(self, identifier: str) -> Tuple[Set[str], str]:
        """
        Like `load`, also reporting where the words came from:
        "cache" or "network".
        """
        path = self.path_for(identifier)
        if path.exists():
            words = load_words(path)
            validate_dictionary(words, self.config)
            return words, "cache"

        text = fetch_raw_text(identifier, self.config)
        words = build_wordset(text, self.config.min_word_length)
        validate_dictionary(words, self.config)
        save_words(path, words)
        return words, "network"
