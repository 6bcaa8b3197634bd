"""
Round state machine.

A Round owns one secret word and everything derived from guessing at it:
  - candidates     : dictionary words still consistent with every outcome
  - probabilities  : per-position char distribution over `candidates`
  - revealed       : per-position flag, True once guessed correctly
  - past guesses   : chars guessed, in order (display only)

Each call to `play(position, char)` is one transition:
  1) a position that is already revealed scores 0 and changes nothing
  2) record the guess and whether it hit
  3) score it against the table as it stood BEFORE this guess
  4) narrow the candidates, then rebuild the table

The secret word is tracked on its own and does not need to be in the
dictionary. If the candidates run dry the round is still winnable by
direct hits; those score as rare (p = 0).
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Set

from .constraints import filter_by_length, narrow_candidates
from .probabilities import ProbabilityTable, positional_probabilities
from .scoring import points_for
from .validation import validate_guess


class Round:
    def __init__(self, word: str, dictionary: Iterable[str]):
        if not word:
            raise ValueError("secret word must be non-empty")
        self._word: str = word
        self._N: int = len(word)

        # Own copy; never shared with the caller or another round.
        self._candidates: Set[str] = filter_by_length(dictionary, self._N)
        self._probabilities: ProbabilityTable = [{} for _ in range(self._N)]
        self._revealed: List[bool] = [False] * self._N
        self._past_guesses: List[str] = []
        self._total_guesses = 0
        self._correct_guesses = 0

        self.recompute_probabilities()

    # ---- transitions ----

    def play(self, position: int, guessed_char: str) -> int:
        """
        Guess `guessed_char` at `position` and return the points earned.

        Raises IndexError / TypeError / ValueError on a malformed guess
        (see engine.validation); the round is left untouched in that case.
        """
        validate_guess(position, guessed_char, self._N)

        # Already solved: no double scoring, no side effects.
        if self._revealed[position]:
            return 0

        self._past_guesses.append(guessed_char)
        self._total_guesses += 1

        success = guessed_char == self._word[position]
        if success:
            self._revealed[position] = True
            self._correct_guesses += 1

        points = self.score(position, guessed_char, success)
        self._candidates = narrow_candidates(self._candidates, position, guessed_char, success)
        self.recompute_probabilities()
        return points

    def recompute_probabilities(self) -> None:
        """Rebuild the whole table from the current candidates."""
        self._probabilities = positional_probabilities(self._candidates, self._N)

    def score(self, position: int, char: str, success: bool) -> int:
        """
        Points for a guess, read off the CURRENT table.

        `play` calls this before narrowing, so the probability used is the
        pre-guess one. A char absent from the table has probability 0.
        """
        p = self._probabilities[position].get(char, 0.0)
        return points_for(p, success)

    def end_of_game(self) -> bool:
        # Each position can hit at most once (revealed short-circuit), so
        # this is "every position revealed".
        return self._correct_guesses >= self._N

    # ---- read-only views ----

    @property
    def word_length(self) -> int:
        return self._N

    @property
    def candidates(self) -> Set[str]:
        return set(self._candidates)

    def probabilities(self, position: int) -> Dict[str, float]:
        return dict(self._probabilities[position])

    @property
    def revealed(self) -> List[bool]:
        return list(self._revealed)

    @property
    def past_guesses(self) -> List[str]:
        return list(self._past_guesses)

    @property
    def total_guesses(self) -> int:
        return self._total_guesses

    @property
    def correct_guesses(self) -> int:
        return self._correct_guesses

    def masked_word(self, placeholder: str = "_") -> str:
        """Secret word with unrevealed positions replaced, e.g. 'B_EW___'."""
        return "".join(ch if shown else placeholder
                       for ch, shown in zip(self._word, self._revealed))

    def __repr__(self) -> str:
        return (f"Round(word={self.masked_word()!r}, candidates={len(self._candidates)}, "
                f"guesses={self._total_guesses})")
