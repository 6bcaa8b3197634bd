"""
Dictionary validator.

What this module does:
- Enforce the rules a dictionary must meet before a round can use it:
    1. at least `min_dictionary_size` unique words    -> UndersizeError
    2. every word at least `min_word_length` long     -> InvalidRangeError
    3. at least `long_word_ratio` of the words are
       `long_word_length` or longer                   -> UnbalancedError
  Checks run in that order and the first failure is raised.
- Produce a machine-readable report (for the CLI banner) and a one-line
  summary of it.

The rules are re-checked on every dictionary, including ones loaded from
the cache, since a cache file can be edited by hand.

Typical use:
    from hangman.datasets import validate_dictionary, dictionary_report, pretty_summary
    validate_dictionary(words)
    print(pretty_summary(dictionary_report(words)))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List

from hangman.config import GameConfig, DEFAULT_CONFIG
from hangman.errors import UndersizeError, InvalidRangeError, UnbalancedError


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics for one dictionary."""
    size: int            # unique words
    short_words: int     # words below min_word_length
    long_words: int      # words at or above long_word_length
    long_ratio: float    # long_words / size (0.0 for an empty dictionary)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(words: Iterable[str], config: GameConfig = DEFAULT_CONFIG) -> None:
    """
    Raise the first rule violation found in `words`; return None if valid.

    Raises:
      UndersizeError, InvalidRangeError, UnbalancedError
    """
    words = set(words)
    size = len(words)
    if size < config.min_dictionary_size:
        raise UndersizeError(
            f"The dictionary has to include at least {config.min_dictionary_size} "
            f"candidate words; got {size}")

    long_words = 0
    for w in words:
        if len(w) < config.min_word_length:
            raise InvalidRangeError(
                f"All words in the dictionary need at least {config.min_word_length} "
                f"characters; got {w!r}")
        if len(w) >= config.long_word_length:
            long_words += 1

    ratio = long_words / size if size else 0.0
    if ratio < config.long_word_ratio:
        raise UnbalancedError(
            f"{config.long_word_ratio:.0%} of the dictionary's words need at least "
            f"{config.long_word_length} characters; got {long_words}/{size}")


def dictionary_report(words: Iterable[str], config: GameConfig = DEFAULT_CONFIG) -> Dict:
    """
    Check every rule (without raising) and return a JSON-serializable dict
    (see DictionaryReport).
    """
    words = set(words)
    size = len(words)
    short = sum(1 for w in words if len(w) < config.min_word_length)
    long_ = sum(1 for w in words if len(w) >= config.long_word_length)
    ratio = long_ / size if size else 0.0

    issues: List[str] = []
    if size < config.min_dictionary_size:
        issues.append(f"only {size} words (need {config.min_dictionary_size})")
    if short:
        issues.append(f"{short} word(s) shorter than {config.min_word_length}")
    if ratio < config.long_word_ratio:
        issues.append(
            f"long-word ratio {ratio:.2f} below {config.long_word_ratio:.2f}")

    rep = DictionaryReport(
        size=size,
        short_words=short,
        long_words=long_,
        long_ratio=ratio,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        words=42 | long=11 (26.2%) | short=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL: " + "; ".join(report["issues"])
    return (
        f"words={report['size']} | long={report['long_words']} "
        f"({report['long_ratio']:.1%}) | short={report['short_words']} | {status}"
    )
