from __future__ import annotations
from pathlib import Path
from typing import Iterable, Set


def load_words(p: Path | str) -> Set[str]:
    """
    Read a one-word-per-line UTF-8 file into a set. Every line is kept as-is
    (blank ones included) so validation sees exactly what the file holds.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return set(p.read_text(encoding="utf-8").splitlines())


def save_words(p: Path | str, words: Iterable[str]) -> str:
    """
    Write words one per line (sorted, newline-terminated), creating parent
    directories as needed. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(w + "\n" for w in sorted(words)), encoding="utf-8")
    return str(p)
