"""
detector.py
===========

Does: Tag a hex with a structural pattern (paired, repeating, palindrome,
      AxBxCx) and find the best word from a word → pattern dictionary.
Returns: Pattern tag or None; matched word or None; id sets for bulk queries.
Used by: ColorMatcher.tags(), highlighting hosts, demo CLI.

Word patterns are uppercase hex characters plus the wildcard 'X' and may be
shorter than six characters, in which case they match at any offset.
"""

from __future__ import annotations

from collections.abc import Mapping

from hex_color_matcher.matching.color.utils import canonical_hex
from hex_color_matcher.matching.general.utils import debug

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

PAIRED = "paired"
REPEATING = "repeating"
PALINDROME = "palindrome"
AXBXCX_PREFIX = "axbxcx_"
WILDCARD = "X"


# =============================================================================
# 1) STRUCTURAL PATTERNS
# =============================================================================

def detect_pattern(hexcode: str | None) -> str | None:
    """
    Does: First matching structural pattern, checked in order
    paired (AABBCC) → repeating (ABCABC) → palindrome (ABCCBA) → AxBxCx.

    Returns:
        'paired', 'repeating', 'palindrome', 'axbxcx_<char>' or None
        (also None for anything that is not six characters).
    """
    if hexcode is None:
        return None
    h = canonical_hex(hexcode)
    if len(h) != 6:
        return None

    if h[0] == h[1] and h[2] == h[3] and h[4] == h[5]:
        return PAIRED
    if h[0] == h[3] and h[1] == h[4] and h[2] == h[5]:
        return REPEATING
    if h[0] == h[5] and h[1] == h[4] and h[2] == h[3]:
        return PALINDROME
    if h[0] == h[2] == h[4]:
        return f"{AXBXCX_PREFIX}{h[0]}"
    return None


# =============================================================================
# 2) WORD PATTERNS
# =============================================================================

def matches_pattern(hexcode: str, pattern: str) -> bool:
    """
    Does: True if pattern occurs in hexcode. 'X' matches any character;
    wildcard-free patterns use plain substring containment.
    """
    if WILDCARD not in pattern:
        return pattern in hexcode

    width = len(pattern)
    for start in range(len(hexcode) - width + 1):
        window = hexcode[start:start + width]
        if all(p == WILDCARD or p == c for p, c in zip(pattern, window)):
            return True
    return False


def effective_length(pattern: str) -> int:
    """Does: Number of non-wildcard characters."""
    return len(pattern) - pattern.count(WILDCARD)


def detect_word_match(
    hexcode: str,
    words: Mapping[str, str],
    *,
    enabled: bool = True,
) -> str | None:
    """
    Does: Word whose pattern matches hexcode with the most literal characters.
    Ties keep the earliest entry in iteration order.
    Returns: The word, or None (also when enabled is False).
    """
    if not enabled:
        return None
    h = canonical_hex(hexcode)

    best_word: str | None = None
    best_length = 0
    for word, pattern in words.items():
        upper = pattern.upper()
        if not matches_pattern(h, upper):
            continue
        length = effective_length(upper)
        if length > best_length:
            best_word, best_length = word, length

    if best_word is not None:
        debug("%s spells %r (%d literal chars)", h, best_word, best_length, topic="pattern")
    return best_word


# =============================================================================
# 3) BULK QUERIES
# =============================================================================

def pieces_with_pattern(pattern_type: str, hexcodes: Mapping[str, str]) -> set[str]:
    """Does: Ids (keys of hexcodes) whose hex carries exactly pattern_type."""
    return {pid for pid, h in hexcodes.items() if detect_pattern(h) == pattern_type}


def pieces_with_words(hexcodes: Mapping[str, str], words: Mapping[str, str]) -> set[str]:
    """Does: Ids whose hex spells any word in words."""
    return {pid for pid, h in hexcodes.items() if detect_word_match(h, words) is not None}
