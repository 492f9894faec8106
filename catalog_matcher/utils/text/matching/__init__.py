"""Matching package (edit distance / similarity / token matching)."""

from .similarity import edit_distance, similarity_ratio
from .token_match import token_matches

__all__ = [
    "edit_distance",
    "similarity_ratio",
    "token_matches",
]
