from .correctness import WORD_LENGTH, Correctness, Guess, Mask, check_word
from .scoring import score, is_solved, format_mask, parse_mask
from .constraints import is_consistent, filter_candidates
from .pool import CandidatePool
from .validation import validate_guess, require_in_dictionary

__all__ = [
    "WORD_LENGTH", "Correctness", "Guess", "Mask", "check_word",
    "score", "is_solved", "format_mask", "parse_mask",
    "is_consistent", "filter_candidates",
    "CandidatePool",
    "validate_guess", "require_in_dictionary",
]
