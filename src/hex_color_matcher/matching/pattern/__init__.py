"""
pattern.
=======

Does: Structural and lexical analysis of hex strings (paired, repeating,
      palindrome, AxBxCx; wildcard word patterns).
"""

from .detector import (
    AXBXCX_PREFIX,
    PAIRED,
    PALINDROME,
    REPEATING,
    WILDCARD,
    detect_pattern,
    detect_word_match,
    effective_length,
    matches_pattern,
    pieces_with_pattern,
    pieces_with_words,
)

__all__ = [
    "PAIRED",
    "REPEATING",
    "PALINDROME",
    "AXBXCX_PREFIX",
    "WILDCARD",
    "detect_pattern",
    "matches_pattern",
    "effective_length",
    "detect_word_match",
    "pieces_with_pattern",
    "pieces_with_words",
]

__docformat__ = "google"
