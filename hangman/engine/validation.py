"""
Guess validation.

A guess is a (position, char) pair. Out-of-range positions are programming
errors, not game events, so these checks raise instead of returning False.
Negative positions are rejected even though Python would index them.
"""


def validate_guess(position: int, char: str, N: int) -> None:
    """
    Raise if (position, char) is not a legal guess for a word of length N.

    Raises:
      TypeError  : position is not an int, or char is not a str
      IndexError : position outside 0 <= position < N
      ValueError : char is not exactly one character
    """
    if isinstance(position, bool) or not isinstance(position, int):
        raise TypeError(f"position must be an int; got {type(position).__name__}")
    if not 0 <= position < N:
        raise IndexError(f"position must be in [0, {N}); got {position}")
    if not isinstance(char, str):
        raise TypeError(f"guessed char must be a str; got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"guess must be a single character; got {char!r}")
