"""
pieces.py
=========

Does: Infer the armor piece type from an item name and decide whether a
      reference color name may be suggested for that piece.
Returns: piece type string or None; booleans for the two name filters.
Used by: ranking pipeline (candidate gathering).
"""

from __future__ import annotations

from hex_color_matcher.matching.color.constants import (
    ANY_PIECE_KEYWORDS,
    COLOR_NAME_KEYWORDS,
    HELMET,
    ITEM_NAME_KEYWORDS,
    THREE_PIECE_TAG,
    TOP_HAT,
)

__all__ = ["detect_piece_type", "can_match_piece", "passes_three_piece_filter"]


def detect_piece_type(item_name: str | None) -> str | None:
    """
    Does: Keyword search (case-insensitive) over the item name.
    Returns: 'helmet', 'chestplate', 'leggings', 'boots' or None.
    """
    if not item_name:
        return None
    upper = item_name.upper()
    for piece, keywords in ITEM_NAME_KEYWORDS.items():
        if any(kw in upper for kw in keywords):
            return piece
    return None


def can_match_piece(color_name: str, piece_type: str | None) -> bool:
    """
    Does: True if color_name is usable on piece_type.

    Names without any piece keyword are generic and fit everything; names
    with keywords must mention the current piece. No piece type → True.
    """
    if piece_type is None:
        return True
    lower = color_name.lower()
    if any(kw in lower for kw in COLOR_NAME_KEYWORDS.get(piece_type, ())):
        return True
    return not any(kw in lower for kw in ANY_PIECE_KEYWORDS)


def passes_three_piece_filter(color_name: str, piece_type: str | None) -> bool:
    """Does: On helmets, drop '3p' set colors unless they are the top hat."""
    if piece_type != HELMET:
        return True
    return THREE_PIECE_TAG not in color_name or TOP_HAT in color_name.lower()
