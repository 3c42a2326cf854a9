# constants.py
# ============

"""
constants.
=========

Does: Define the immutable tuning values of the matcher: ΔE tier bands,
      exact-match epsilon, candidate caps, and piece-type keyword tables.
Used By: tiering, piece filtering, ranking pipeline.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

from types import MappingProxyType

# ── 1) ΔE bands ──────────────────────────────────────────────────────────────

# Upper bound (inclusive) for tiers 0, 1, 2; anything above is tier 3
TIER_0_MAX = 1.0
TIER_1_MAX = 2.0
TIER_2_MAX = 5.0
WORST_TIER = 3

# Below this ΔE a candidate counts as the same color
EXACT_MATCH_DELTA_E = 0.01

# Fade dyes above this ΔE are hidden unless show_high_fades is on
HIGH_FADE_DELTA_E = 2.0


# ── 2) Candidate caps ────────────────────────────────────────────────────────
CANDIDATE_POOL_SIZE = 10
TOP_MATCHES = 3


# ── 3) Piece types ───────────────────────────────────────────────────────────
HELMET = "helmet"
CHESTPLATE = "chestplate"
LEGGINGS = "leggings"
BOOTS = "boots"

PIECE_TYPES: tuple[str, ...] = (HELMET, CHESTPLATE, LEGGINGS, BOOTS)

# Keywords looked up (uppercased) in the *item* name, checked in this order
ITEM_NAME_KEYWORDS = MappingProxyType(
    {
        HELMET: ("HAT", "HELM", "CROWN", "HOOD", "CAP", "MASK"),
        CHESTPLATE: ("JACKET", "CHEST", "TUNIC", "SHIRT", "VEST", "ROBE", "COAT", "PLATE"),
        LEGGINGS: ("TROUSERS", "LEGGINGS", "PANTS", "LEGS", "SHORTS"),
        BOOTS: ("SHOES", "BOOTS", "SNEAKERS", "FEET", "SANDALS"),
    }
)

# Keywords looked up (lowercased) in a *reference color* name.
# "Leggings+Boots" style names hit several pieces.
COLOR_NAME_KEYWORDS = MappingProxyType(
    {
        HELMET: ("helmet", "hat", "hood", "cap", "crown", "mask"),
        CHESTPLATE: ("chestplate", "chest", "tunic", "jacket", "shirt", "vest", "robe"),
        LEGGINGS: ("leggings", "pants", "trousers"),
        BOOTS: ("boots", "shoes", "sandals", "sneakers"),
    }
)

# A color name with none of these is generic and fits every piece
ANY_PIECE_KEYWORDS: frozenset[str] = frozenset(
    {kw for kws in COLOR_NAME_KEYWORDS.values() for kw in kws} | {"3p"}
)

# 3-piece sets: names tagged "3p" never fit a helmet unless they are a top hat
THREE_PIECE_TAG = "3p"
TOP_HAT = "top hat"


# ── 4) Fade dyes ─────────────────────────────────────────────────────────────
FADE_STAGE_MARKER = " - Stage"
FADE_FAMILY_SEPARATOR = " - "
