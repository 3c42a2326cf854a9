# src/hex_color_matcher/matching/general/fuzzy/name_search.py
from __future__ import annotations

"""
name_search.py

Does: Fuzzy lookup of reference color names across custom, target and fade
      categories (typo-tolerant database search).
Returns: Ranked NameHit tuples (category, name, hex, score 0–100).
Used by: ColorMatcher.search(), demo CLI.
"""

import logging
from typing import NamedTuple

from rapidfuzz import fuzz, process, utils

from hex_color_matcher.matching.database import ColorDatabase

__all__ = ["NameHit", "search_color_names", "DEFAULT_CUTOFF"]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_CUTOFF = 70
DEFAULT_LIMIT = 10


class NameHit(NamedTuple):
    category: str
    name: str
    hexcode: str
    score: float


def search_color_names(
    query: str,
    database: ColorDatabase,
    *,
    limit: int = DEFAULT_LIMIT,
    cutoff: float = DEFAULT_CUTOFF,
) -> list[NameHit]:
    """
    Does: Score every reference name against query with WRatio
    (case/punctuation-insensitive) and keep those at or above cutoff.
    Returns: Best first; equal scores keep database order.
    """
    if not query or not query.strip():
        return []

    entries = list(database.entries())
    names = [name for _cat, name, _hex in entries]
    hits = process.extract(
        query,
        names,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=limit,
        score_cutoff=cutoff,
    )
    log.debug("Name search %r: %d hit(s) over %d names", query, len(hits), len(names))
    return [
        NameHit(entries[idx][0], entries[idx][1], entries[idx][2], float(score))
        for _choice, score, idx in hits
    ]
