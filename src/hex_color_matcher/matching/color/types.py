"""
types.py.

Does: Define the value objects produced by the ranking pipeline.
Used by: tiering, ranking, orchestrator, demo CLI.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ColorMatch:
    """One reference color scored against the input hex."""

    name: str
    target_hex: str
    delta_e: float
    absolute_distance: int  # RGB Manhattan, display only
    tier: int
    is_custom: bool = False
    is_fade: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AnalysisResult:
    """Best match, the ranked short-list (≤ 3) and the best match's tier."""

    best_match: ColorMatch
    top_matches: tuple[ColorMatch, ...]
    tier: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "best_match": self.best_match.to_dict(),
            "top_matches": [m.to_dict() for m in self.top_matches],
            "tier": self.tier,
        }


__all__ = ["ColorMatch", "AnalysisResult"]

__docformat__ = "google"
