"""
tiering.py
==========

Does: Bucket a ΔE into a quality tier (0 best … 3 worst) and map a scored
      match onto its MatchPriority category.
Used by: ranking pipeline.
"""

from __future__ import annotations

from hex_color_matcher.matching.color.constants import (
    TIER_0_MAX,
    TIER_1_MAX,
    TIER_2_MAX,
    WORST_TIER,
)
from hex_color_matcher.matching.color.types import ColorMatch
from hex_color_matcher.matching.settings import MatchPriority

__all__ = ["calculate_tier", "match_priority"]

_CUSTOM_PRIORITIES = {1: MatchPriority.CUSTOM_T1, 2: MatchPriority.CUSTOM_T2}
_FADE_PRIORITIES = {0: MatchPriority.FADE_T0, 1: MatchPriority.FADE_T1, 2: MatchPriority.FADE_T2}
_NORMAL_PRIORITIES = {
    0: MatchPriority.NORMAL_T0,
    1: MatchPriority.NORMAL_T1,
    2: MatchPriority.NORMAL_T2,
}


def calculate_tier(delta_e: float, is_custom: bool = False, is_fade: bool = False) -> int:
    """
    Does: Tier from ΔE. Custom colors start at tier 1; fades and normal
    colors share the same bands.
    """
    if is_custom:
        if delta_e <= TIER_1_MAX:
            return 1
        if delta_e <= TIER_2_MAX:
            return 2
        return WORST_TIER

    if delta_e <= TIER_0_MAX:
        return 0
    if delta_e <= TIER_1_MAX:
        return 1
    if delta_e <= TIER_2_MAX:
        return 2
    return WORST_TIER


def match_priority(match: ColorMatch) -> MatchPriority:
    """Does: Category used to rank a tier 0–2 match. Unmapped → NORMAL_T2."""
    if match.is_custom and match.tier in _CUSTOM_PRIORITIES:
        return _CUSTOM_PRIORITIES[match.tier]
    if match.is_fade and match.tier in _FADE_PRIORITIES:
        return _FADE_PRIORITIES[match.tier]
    return _NORMAL_PRIORITIES.get(match.tier, MatchPriority.NORMAL_T2)
