from .scoring import points_for
from .constraints import filter_by_length, narrow_candidates
from .validation import validate_guess
from .probabilities import positional_probabilities
from .round import Round

__all__ = [
    "points_for",
    "filter_by_length",
    "narrow_candidates",
    "validate_guess",
    "positional_probabilities",
    "Round",
]
