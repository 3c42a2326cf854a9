"""
logic.
=====

Does: Matching logic over reference colors: piece inference and filters,
      ΔE tiering, and the ranking pipeline.
"""

from .pieces import can_match_piece, detect_piece_type, passes_three_piece_filter
from .ranking import analyze_color, find_matches_in_map, gather_candidates, rank_matches
from .tiering import calculate_tier, match_priority

__all__ = [
    # pieces
    "detect_piece_type",
    "can_match_piece",
    "passes_three_piece_filter",
    # tiering
    "calculate_tier",
    "match_priority",
    # ranking
    "find_matches_in_map",
    "gather_candidates",
    "rank_matches",
    "analyze_color",
]

__docformat__ = "google"
