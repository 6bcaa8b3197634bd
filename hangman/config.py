"""
Game configuration.

One frozen dataclass carries every policy value the dictionary subsystem
and the player bookkeeping need. Callers that want different values build
a variant with `dataclasses.replace(DEFAULT_CONFIG, ...)` and pass it down;
nothing reads process-wide settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class GameConfig:
    """
    Attributes
    ----------
    min_word_length : int
        Shortest token the builder keeps and the validator accepts.
    min_dictionary_size : int
        Fewest unique words a usable dictionary may hold.
    long_word_length : int
        Length at which a word counts as "long" for the balance check.
    long_word_ratio : float
        Minimum fraction of long words in the dictionary.
    lives : int
        Lives a new player starts with.
    cache_dir : Path
        Directory holding cached dictionaries (one file per book id).
    works_url : str
        Template for the book description endpoint; `{identifier}` is
        substituted with the book id.
    timeout : float
        Seconds to wait on the description request.
    """

    min_word_length: int = 6
    min_dictionary_size: int = 20
    long_word_length: int = 9
    long_word_ratio: float = 0.2
    lives: int = 6
    cache_dir: Path = field(default_factory=lambda: Path(".medialab"))
    works_url: str = "https://openlibrary.org/works/{identifier}.json"
    timeout: float = 120.0


DEFAULT_CONFIG = GameConfig()
