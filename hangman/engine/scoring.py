"""
Points for a single positional guess.

Scoring table (p = probability of the guessed char at that position over
the candidate set, taken BEFORE the guess narrows it):

  success, p >= 0.60          ->   5
  success, 0.40 <= p < 0.60   ->  10
  success, 0.25 <= p < 0.40   ->  15
  success, p < 0.25           ->  30
  failure (any p)             -> -15

Rarer correct guesses pay more: a surprising hit carries more information
than one the candidate set already predicted.
"""

from typing import Tuple

FAILURE_POINTS = -15

# (lower bound on p, points), checked top-down; first match wins.
POINT_BANDS: Tuple[Tuple[float, int], ...] = (
    (0.6, 5),
    (0.4, 10),
    (0.25, 15),
)
RARE_POINTS = 30


def points_for(probability: float, success: bool) -> int:
    """
    Map a pre-guess probability and the guess outcome to points.

    Examples:
      points_for(0.6, True)   -> 5
      points_for(0.24, True)  -> 30
      points_for(0.9, False)  -> -15
    """
    if not success:
        return FAILURE_POINTS
    for lower, pts in POINT_BANDS:
        if probability >= lower:
            return pts
    return RARE_POINTS
