"""
color.
=====

Does: Aggregate the color-domain constants and result types shared by the
      cache, tiering and ranking modules.
Returns: Pure data structures; no side effects.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    CANDIDATE_POOL_SIZE,
    EXACT_MATCH_DELTA_E,
    HIGH_FADE_DELTA_E,
    PIECE_TYPES,
    TOP_MATCHES,
)

# ── Types ────────────────────────────────────────────────────────────────────
from .types import AnalysisResult, ColorMatch

__all__ = [
    # constants
    "CANDIDATE_POOL_SIZE",
    "EXACT_MATCH_DELTA_E",
    "HIGH_FADE_DELTA_E",
    "PIECE_TYPES",
    "TOP_MATCHES",
    # types
    "ColorMatch",
    "AnalysisResult",
]
