"""
Per-position character probabilities over a candidate set.

For each position i, the table maps char -> fraction of candidates with
that char at i. The table is always rebuilt from scratch; the sets involved
are small (tens to low hundreds of words).
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

ProbabilityTable = List[Dict[str, float]]


def positional_probabilities(candidates: Iterable[str], N: int) -> ProbabilityTable:
    """
    Build the probability table for words of length N.

    An empty candidate set yields N empty mappings (no division by zero).
    """
    words = list(candidates)
    counts = [Counter() for _ in range(N)]
    for w in words:
        for i, ch in enumerate(w):
            counts[i][ch] += 1

    if not words:
        return [{} for _ in range(N)]

    total = float(len(words))
    return [{ch: c / total for ch, c in counts[i].items()} for i in range(N)]
