"""
hex_color_matcher
=================

Does: Root package for the hex color matcher. Re-exports the host-facing
      entry points so callers can write `from hex_color_matcher import ColorMatcher`.
Returns: ColorMatcher, loaders for the reference database and settings,
         and the result/settings types.
Used by: demo CLI, host applications (scanners, tooltips, highlighters).
"""

from hex_color_matcher.matching.color.logic import analyze_color
from hex_color_matcher.matching.color.types import AnalysisResult, ColorMatch
from hex_color_matcher.matching.database import ColorDatabase, load_database
from hex_color_matcher.matching.orchestrator import (
    ColorMatcher,
    analyze_hex_tags,
    compare_hexes,
)
from hex_color_matcher.matching.settings import MatcherSettings, MatchPriority, load_settings

__all__ = [
    "ColorMatcher",
    "ColorDatabase",
    "MatcherSettings",
    "MatchPriority",
    "ColorMatch",
    "AnalysisResult",
    "analyze_color",
    "analyze_hex_tags",
    "compare_hexes",
    "load_database",
    "load_settings",
]
__docformat__ = "google"
