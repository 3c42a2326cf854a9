"""
ranking.py
==========

Does: Score an input hex against every enabled reference color, filter by
      piece type / 3-piece sets / high fades, tier each candidate, and rank
      them: exact matches first, then tier 0–2 by user priority (ΔE breaks
      ties), then tier 3 by ΔE.
Returns: AnalysisResult (best match, top 3, tier) or None when nothing is left.
Used By: ColorMatcher, demo CLI.

Pipeline (one pass, no state beyond the shared LabCache):
    gather → sort by ΔE, keep 10 → split exact / prioritized / unprioritized
           → sort each → concat → top 3
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from hex_color_matcher.matching.color.cache import LabCache
from hex_color_matcher.matching.color.constants import (
    CANDIDATE_POOL_SIZE,
    EXACT_MATCH_DELTA_E,
    HIGH_FADE_DELTA_E,
    TOP_MATCHES,
)
from hex_color_matcher.matching.color.logic.pieces import (
    can_match_piece,
    detect_piece_type,
    passes_three_piece_filter,
)
from hex_color_matcher.matching.color.logic.tiering import calculate_tier, match_priority
from hex_color_matcher.matching.color.types import AnalysisResult, ColorMatch
from hex_color_matcher.matching.color.utils import (
    LAB,
    absolute_distance,
    canonical_hex,
    delta_e,
)
from hex_color_matcher.matching.database import ColorDatabase
from hex_color_matcher.matching.general.utils import debug
from hex_color_matcher.matching.settings import MatcherSettings, MatchPriority

__all__ = [
    "find_matches_in_map",
    "gather_candidates",
    "rank_matches",
    "analyze_color",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# =============================================================================
# 1) CANDIDATE GATHERING
# =============================================================================

def find_matches_in_map(
    item_hex: str,
    item_lab: LAB,
    piece_type: str | None,
    color_map: Mapping[str, str],
    *,
    is_custom: bool,
    is_fade: bool,
    settings: MatcherSettings,
    cache: LabCache,
) -> list[ColorMatch]:
    """Does: Score one category of reference colors, applying name/fade filters."""
    matches: list[ColorMatch] = []
    for name, target_hex in color_map.items():
        if settings.piece_specific_enabled and not can_match_piece(name, piece_type):
            continue
        if settings.three_piece_sets_enabled and not passes_three_piece_filter(name, piece_type):
            continue

        d_e = delta_e(item_lab, cache.get(target_hex))

        if is_fade and not settings.show_high_fades and d_e > HIGH_FADE_DELTA_E:
            continue

        matches.append(
            ColorMatch(
                name=name,
                target_hex=target_hex,
                delta_e=d_e,
                absolute_distance=absolute_distance(item_hex, target_hex),
                tier=calculate_tier(d_e, is_custom, is_fade),
                is_custom=is_custom,
                is_fade=is_fade,
            )
        )
    return matches


def gather_candidates(
    hexcode: str,
    piece_type: str | None,
    database: ColorDatabase,
    settings: MatcherSettings,
    cache: LabCache,
) -> list[ColorMatch]:
    """Does: Custom (if enabled), then target, then fade (if enabled) candidates."""
    item_hex = canonical_hex(hexcode)
    item_lab = cache.get(item_hex)

    categories: list[tuple[Mapping[str, str], bool, bool]] = []
    if settings.custom_colors_enabled:
        categories.append((database.custom_colors, True, False))
    categories.append((database.target_colors, False, False))
    if settings.fade_dyes_enabled:
        categories.append((database.fade_dyes, False, True))

    candidates: list[ColorMatch] = []
    for color_map, is_custom, is_fade in categories:
        candidates.extend(
            find_matches_in_map(
                item_hex,
                item_lab,
                piece_type,
                color_map,
                is_custom=is_custom,
                is_fade=is_fade,
                settings=settings,
                cache=cache,
            )
        )
    return candidates


# =============================================================================
# 2) RANKING
# =============================================================================

def rank_matches(
    candidates: Iterable[ColorMatch],
    priority_index: Mapping[MatchPriority, int],
) -> list[ColorMatch]:
    """
    Does: Order candidates for display.
    Returns: At most CANDIDATE_POOL_SIZE matches, exact ones first.
    """
    # stable sort: equal ΔE keeps gathering order (custom, target, fade)
    pool = sorted(candidates, key=lambda m: m.delta_e)[:CANDIDATE_POOL_SIZE]

    exact = [m for m in pool if m.delta_e < EXACT_MATCH_DELTA_E]
    regular = [m for m in pool if m.delta_e >= EXACT_MATCH_DELTA_E]

    prioritized = [m for m in regular if m.tier <= 2]
    unprioritized = [m for m in regular if m.tier > 2]

    prioritized.sort(key=lambda m: (priority_index[match_priority(m)], m.delta_e))
    unprioritized.sort(key=lambda m: m.delta_e)

    return exact + prioritized + unprioritized


# =============================================================================
# 3) ENTRY POINT
# =============================================================================

def analyze_color(
    hexcode: str,
    item_name: str | None = None,
    *,
    database: ColorDatabase,
    settings: MatcherSettings | None = None,
    cache: LabCache | None = None,
) -> AnalysisResult | None:
    """
    Does: Find the best reference colors for hexcode.

    Args:
        hexcode: 6-digit hex, '#' optional, any case. Malformed input is
            scored as black rather than rejected.
        item_name: Used to infer the piece type for piece-specific filtering.
        database: Reference colors; read as-is for the whole call.
        settings: Flags + priority order; defaults when omitted.
        cache: Shared Lab cache; a private one is used when omitted.

    Returns:
        AnalysisResult, or None when no candidate survives (logged as warning).
    """
    settings = settings or MatcherSettings()
    cache = cache if cache is not None else LabCache()
    # one snapshot of the order for the whole call
    priority_index = settings.priority_index()

    piece_type = detect_piece_type(item_name)
    candidates = gather_candidates(hexcode, piece_type, database, settings, cache)
    debug(
        "%s piece=%s candidates=%d",
        canonical_hex(hexcode),
        piece_type,
        len(candidates),
        topic="ranking",
    )

    top = rank_matches(candidates, priority_index)[:TOP_MATCHES]
    if not top:
        logger.warning("No matches found for hex: %s", hexcode)
        return None

    best = top[0]
    debug("best=%s ΔE=%.3f tier=%d", best.name, best.delta_e, best.tier, topic="ranking")
    return AnalysisResult(
        best_match=best,
        top_matches=tuple(top),
        tier=calculate_tier(best.delta_e, best.is_custom, best.is_fade),
    )
