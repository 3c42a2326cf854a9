"""
orchestrator.py
===============

Does: Tie the engine together for a host application: a ColorMatcher that
      owns the current database, settings and Lab cache; pattern/word tags
      for one hex; and multi-hex comparison (average color and distances).
Returns: AnalysisResult | None, HexTags, HexComparison, NameHit lists.
Used By: demo CLI, scanners / renderers living outside this package.

The matcher never mutates what it was given. Swapping the database or the
settings replaces the reference; the Lab cache is only invalidated when the
host asks for it (`set_database(..., refresh_cache=True)` or `invalidate()`).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from itertools import combinations
from typing import Any

from hex_color_matcher.matching.color.cache import LabCache
from hex_color_matcher.matching.color.logic import analyze_color
from hex_color_matcher.matching.color.types import AnalysisResult
from hex_color_matcher.matching.color.utils import (
    RGB,
    absolute_distance,
    canonical_hex,
    delta_e,
    hex_to_rgb,
    is_valid_hex,
    rgb_to_hex,
)
from hex_color_matcher.matching.database import ColorDatabase
from hex_color_matcher.matching.general.fuzzy import NameHit, search_color_names
from hex_color_matcher.matching.pattern import detect_pattern, detect_word_match
from hex_color_matcher.matching.settings import MatcherSettings

__all__ = [
    "ColorMatcher",
    "HexTags",
    "HexComparison",
    "NotEnoughHexesError",
    "analyze_hex_tags",
    "compare_hexes",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# =============================================================================
# 1) TAGS
# =============================================================================

@dataclass(frozen=True)
class HexTags:
    """Auxiliary highlight tags for one hex."""

    hexcode: str
    pattern: str | None
    word: str | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def analyze_hex_tags(
    hexcode: str,
    words: Mapping[str, str],
    settings: MatcherSettings | None = None,
) -> HexTags:
    """Does: Pattern tag and word match for hexcode, honouring the patterns/words flags."""
    settings = settings or MatcherSettings()
    pattern = detect_pattern(hexcode) if settings.patterns_enabled else None
    word = detect_word_match(hexcode, words, enabled=settings.words_enabled)
    return HexTags(canonical_hex(hexcode), pattern, word)


# =============================================================================
# 2) COMPARISON
# =============================================================================

class NotEnoughHexesError(ValueError):
    """Raise when fewer than two valid hex codes are given to compare."""


@dataclass(frozen=True)
class HexComparison:
    """Average color and average pairwise distances of several hexes."""

    hexes: tuple[str, ...]
    invalid: tuple[str, ...]
    average_hex: str
    average_rgb: RGB
    average_absolute_distance: float
    average_delta_e: float

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["average_rgb"] = list(self.average_rgb)
        return out


def compare_hexes(hexes: Iterable[str], cache: LabCache | None = None) -> HexComparison:
    """
    Does: Validate hexes, then compute the integer-mean color and the mean
    absolute (RGB Manhattan) and ΔE distance over all pairs.

    Invalid tokens are reported in `invalid`, not raised.
    Raises: NotEnoughHexesError if fewer than two tokens are valid.
    """
    cache = cache if cache is not None else LabCache()
    valid: list[str] = []
    invalid: list[str] = []
    for token in hexes:
        stripped = token.strip()
        if not stripped:
            continue
        clean = canonical_hex(stripped)
        if is_valid_hex(clean):
            valid.append(clean)
        else:
            invalid.append(token)

    if len(valid) < 2:
        raise NotEnoughHexesError(
            f"Please provide at least 2 valid hex codes (got {len(valid)}; invalid: {invalid})"
        )

    rgbs = [hex_to_rgb(h) for h in valid]
    n = len(rgbs)
    avg = RGB(*(sum(channel) // n for channel in zip(*rgbs)))

    pairs = list(combinations(valid, 2))
    avg_abs = sum(absolute_distance(a, b) for a, b in pairs) / len(pairs)
    avg_de = sum(delta_e(cache.get(a), cache.get(b)) for a, b in pairs) / len(pairs)

    return HexComparison(
        hexes=tuple(valid),
        invalid=tuple(invalid),
        average_hex=rgb_to_hex(avg),
        average_rgb=avg,
        average_absolute_distance=avg_abs,
        average_delta_e=avg_de,
    )


# =============================================================================
# 3) MATCHER
# =============================================================================

class ColorMatcher:
    """
    Host-facing entry point.

    Usage:

        matcher = ColorMatcher(load_database(), load_settings())
        result = matcher.analyze("FF0000", "Leather Boots")
        tags = matcher.tags("AABBCC")
    """

    def __init__(
        self,
        database: ColorDatabase | None = None,
        settings: MatcherSettings | None = None,
        cache: LabCache | None = None,
    ):
        self._database = database if database is not None else ColorDatabase()
        self._settings = settings if settings is not None else MatcherSettings()
        self._cache = cache if cache is not None else LabCache()
        self._swap_lock = threading.Lock()

    @property
    def database(self) -> ColorDatabase:
        return self._database

    @property
    def settings(self) -> MatcherSettings:
        return self._settings

    @property
    def cache(self) -> LabCache:
        return self._cache

    # ── configuration changes ────────────────────────────────────────────────
    def set_database(self, database: ColorDatabase, *, refresh_cache: bool = True) -> None:
        """Does: Replace the database; by default rebuild the Lab cache from it."""
        with self._swap_lock:
            self._database = database
        logger.info("Reference database replaced: %r", database)
        if refresh_cache:
            self._cache.rebuild(database.all_hexes())

    def set_settings(self, settings: MatcherSettings) -> None:
        with self._swap_lock:
            self._settings = settings

    def invalidate(self) -> None:
        """Does: Drop cached Lab values (call after editing reference colors)."""
        self._cache.clear()

    def warm_up(self) -> int:
        """Does: Pre-convert every reference hex. Returns cache size."""
        return self._cache.rebuild(self._database.all_hexes())

    # ── queries ──────────────────────────────────────────────────────────────
    def _snapshot(self) -> tuple[ColorDatabase, MatcherSettings]:
        with self._swap_lock:
            return self._database, self._settings

    def analyze(self, hexcode: str, item_name: str | None = None) -> AnalysisResult | None:
        """Does: Ranked matches for hexcode (see ranking.analyze_color)."""
        database, settings = self._snapshot()
        return analyze_color(
            hexcode, item_name, database=database, settings=settings, cache=self._cache
        )

    def tags(self, hexcode: str) -> HexTags:
        database, settings = self._snapshot()
        return analyze_hex_tags(hexcode, database.word_list, settings)

    def compare(self, hexes: Iterable[str]) -> HexComparison:
        return compare_hexes(hexes, cache=self._cache)

    def search(self, query: str, *, limit: int = 10) -> list[NameHit]:
        database, _settings = self._snapshot()
        return search_color_names(query, database, limit=limit)
