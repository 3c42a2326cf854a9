"""
settings.py
===========

Does: Define MatchPriority, the user-ordered ranking of match categories,
      and MatcherSettings, the immutable record of feature flags + priority
      order handed to every match call.
Returns: MatcherSettings (frozen), helpers to normalise priority lists and
         to load the settings JSON (`config.json` in the data dir).
Used by: ranking pipeline, ColorMatcher, demo CLI.

Changing a flag means building a new record (`settings.replace(...)`);
nothing here is mutated after construction.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from hex_color_matcher.matching.general.utils import (
    ConfigFileNotFound,
    ConfigTypeError,
    DataDirNotFound,
    load_config,
)

__all__ = [
    "MatchPriority",
    "DEFAULT_PRIORITIES",
    "normalize_priorities",
    "MatcherSettings",
    "load_settings",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class MatchPriority(Enum):
    """Categories a highlighted match can fall into. Declaration order matters:
    values missing from a user ordering are appended in this order."""

    DUPE = ("Duplicate", "Same hex, different item (black)")
    SEARCH = ("Search Match", "Hex matches current search (green)")
    WORD = ("Word Match", "Hex spells a word (brown)")
    PATTERN = ("Pattern Match", "Palindrome, repeating, etc. (purple)")
    CUSTOM_T1 = ("Custom T1", "Custom color ΔE ≤ 2.00 (dark olive)")
    CUSTOM_T2 = ("Custom T2", "Custom color 2.01 ≤ ΔE ≤ 5.00 (olive)")
    FADE_T0 = ("Fade T0", "Fade ΔE ≤ 1.00 (blue)")
    FADE_T1 = ("Fade T1", "Fade 1.01 ≤ ΔE ≤ 2.00 (sky blue)")
    FADE_T2 = ("Fade T2", "Fade 2.01 ≤ ΔE ≤ 5.00 (yellow)")
    NORMAL_T0 = ("Normal T0", "Normal ΔE ≤ 1.00 (red)")
    NORMAL_T1 = ("Normal T1", "Normal 1.01 ≤ ΔE ≤ 2.00 (hot pink)")
    NORMAL_T2 = ("Normal T2", "Normal 2.01 ≤ ΔE ≤ 5.00 (orange)")

    @property
    def display_name(self) -> str:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> MatchPriority | None:
        """Does: Case-insensitive lookup by member name; None if unknown."""
        return cls.__members__.get(name.strip().upper())


DEFAULT_PRIORITIES: tuple[MatchPriority, ...] = (
    MatchPriority.SEARCH,
    MatchPriority.DUPE,
    MatchPriority.WORD,
    MatchPriority.PATTERN,
    MatchPriority.CUSTOM_T1,
    MatchPriority.CUSTOM_T2,
    MatchPriority.NORMAL_T0,
    MatchPriority.NORMAL_T1,
    MatchPriority.NORMAL_T2,
    MatchPriority.FADE_T0,
    MatchPriority.FADE_T1,
    MatchPriority.FADE_T2,
)


def normalize_priorities(
    items: Iterable[MatchPriority | str],
) -> tuple[MatchPriority, ...]:
    """
    Does: Turn a user ordering into a total order over MatchPriority.
    Unknown names and repeats are dropped (first occurrence wins); missing
    members are appended in declaration order.
    """
    seen: dict[MatchPriority, None] = {}
    for item in items:
        prio = item if isinstance(item, MatchPriority) else MatchPriority.from_name(str(item))
        if prio is None:
            logger.warning("Ignoring unknown match priority %r", item)
            continue
        seen.setdefault(prio, None)
    for prio in MatchPriority:
        seen.setdefault(prio, None)
    return tuple(seen)


# JSON key → dataclass field. Keys follow the persisted config.json names.
_FLAG_KEYS: dict[str, str] = {
    "infoBoxEnabled": "info_box_enabled",
    "highlightsEnabled": "highlights_enabled",
    "wordsEnabled": "words_enabled",
    "patternsEnabled": "patterns_enabled",
    "dupesEnabled": "dupes_enabled",
    "fadeDyesEnabled": "fade_dyes_enabled",
    "customColorsEnabled": "custom_colors_enabled",
    "showHighFades": "show_high_fades",
    "threePieceSetsEnabled": "three_piece_sets_enabled",
    "pieceSpecificEnabled": "piece_specific_enabled",
    "itemFramesEnabled": "item_frames_enabled",
}


@dataclass(frozen=True)
class MatcherSettings:
    """Feature flags + priority order, read once per match call."""

    # consumed by the matcher
    custom_colors_enabled: bool = True
    fade_dyes_enabled: bool = True
    show_high_fades: bool = True
    piece_specific_enabled: bool = False
    three_piece_sets_enabled: bool = True
    words_enabled: bool = True
    patterns_enabled: bool = True
    # consumed only by rendering / scanning hosts
    info_box_enabled: bool = True
    highlights_enabled: bool = True
    dupes_enabled: bool = True
    item_frames_enabled: bool = False
    match_priorities: tuple[MatchPriority, ...] = field(default=DEFAULT_PRIORITIES)

    def __post_init__(self) -> None:
        object.__setattr__(self, "match_priorities", normalize_priorities(self.match_priorities))

    def replace(self, **changes: Any) -> MatcherSettings:
        """Does: Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def priority_index(self) -> dict[MatchPriority, int]:
        """Does: Snapshot the order as {priority: rank}; lower rank wins."""
        return {prio: i for i, prio in enumerate(self.match_priorities)}

    # ── (de)serialisation ────────────────────────────────────────────────────
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatcherSettings:
        """
        Does: Build from config.json-shaped data; unknown keys are ignored.
        Raises: ConfigTypeError if a flag is not a JSON boolean or
        matchPriorities is not a list.
        """
        kwargs: dict[str, Any] = {}
        for key, attr in _FLAG_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, bool):
                raise ConfigTypeError(f"{key} must be true or false, got {value!r}")
            kwargs[attr] = value
        if "matchPriorities" in data:
            raw = data["matchPriorities"]
            if not isinstance(raw, list):
                raise ConfigTypeError(f"matchPriorities must be a list, got {type(raw).__name__}")
            kwargs["match_priorities"] = raw
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {key: getattr(self, attr) for key, attr in _FLAG_KEYS.items()}
        out["matchPriorities"] = [p.name for p in self.match_priorities]
        return out


def load_settings(file: str = "config", *, base_dir: Path | None = None) -> MatcherSettings:
    """
    Does: Load settings from <data>/<file>.json.
    Returns: Defaults when the file does not exist.
    """
    try:
        data = load_config(file, "validated_dict", base_dir=base_dir)
    except (ConfigFileNotFound, DataDirNotFound):
        logger.info("No %s settings file found, using defaults.", file)
        return MatcherSettings()
    return MatcherSettings.from_dict(data)
