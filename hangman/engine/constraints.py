"""
Candidate filtering.

Two steps turn a dictionary into the live candidate set of a round:
  - `filter_by_length`: keep only words as long as the secret word.
  - `narrow_candidates`: after each guess, keep only words consistent
    with its outcome at that position.

Narrowing is strict: a hit keeps words that HAVE the char at the position,
a miss keeps words that do NOT. Neither step can add words.
"""

from typing import Iterable, Set


def filter_by_length(words: Iterable[str], N: int) -> Set[str]:
    """Return the words of exactly length N (a new set)."""
    return {w for w in words if len(w) == N}


def narrow_candidates(candidates: Iterable[str], position: int, char: str,
                      success: bool) -> Set[str]:
    """
    Keep only candidates consistent with one positional guess outcome.

    Args:
      candidates : words of equal length (all longer than `position`)
      position   : 0-based slot the guess was made at
      char       : guessed character
      success    : whether the secret word has `char` at `position`

    Returns:
      Set[str] of surviving candidates.
    """
    if success:
        return {w for w in candidates if w[position] == char}
    return {w for w in candidates if w[position] != char}
