"""
database.py
===========

Does: Hold the reference colors (target colors, fade dyes, user custom colors)
      and the user word list as one immutable value, with fade-family lookup
      and copy-on-write edits.
Returns: ColorDatabase instances; `load_database()` builds one from the data dir.
Used by: ranking pipeline, pattern word matching, name search, ColorMatcher.

Every mapping is a read-only view over a private dict, so a database handed to
a match call can never change underneath it. Edits return a new database; the
host swaps its reference and tells the Lab cache explicitly.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from hex_color_matcher.matching.color.constants import (
    FADE_FAMILY_SEPARATOR,
    FADE_STAGE_MARKER,
)
from hex_color_matcher.matching.color.utils import canonical_hex, is_valid_hex
from hex_color_matcher.matching.general.utils import (
    ConfigFileNotFound,
    DataDirNotFound,
    load_config,
)

__all__ = [
    "TARGET",
    "FADE",
    "CUSTOM",
    "CATEGORIES",
    "ColorDatabase",
    "fade_family",
    "InvalidHexError",
    "InvalidWordPatternError",
    "DuplicateEntryError",
    "EntryNotFoundError",
    "load_database",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

TARGET = "target"
FADE = "fade"
CUSTOM = "custom"
CATEGORIES: tuple[str, ...] = (CUSTOM, TARGET, FADE)

_WORD_PATTERN = re.compile(r"[0-9A-FX]{1,6}")


# ── Exceptions ───────────────────────────────────────────────────────────────
class InvalidHexError(ValueError):
    """Raise when a custom color hex is not six hex digits."""


class InvalidWordPatternError(ValueError):
    """Raise when a word pattern is not 1–6 chars of 0-9, A-F or X."""


class DuplicateEntryError(ValueError):
    """Raise when adding a word that already exists."""


class EntryNotFoundError(KeyError):
    """Raise when removing a custom color or word that does not exist."""


def _frozen(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


def fade_family(name: str) -> str:
    """Does: 'Aurora - Stage 3' → 'Aurora'."""
    return name.split(FADE_FAMILY_SEPARATOR)[0]


class ColorDatabase:
    """Immutable reference database."""

    __slots__ = ("_target", "_fade", "_custom", "_words")

    def __init__(
        self,
        target_colors: Mapping[str, str] | None = None,
        fade_dyes: Mapping[str, str] | None = None,
        custom_colors: Mapping[str, str] | None = None,
        word_list: Mapping[str, str] | None = None,
    ):
        self._target = _frozen(target_colors)
        self._fade = _frozen(fade_dyes)
        self._custom = _frozen(custom_colors)
        self._words = _frozen(word_list)

    # ── views ────────────────────────────────────────────────────────────────
    @property
    def target_colors(self) -> Mapping[str, str]:
        return self._target

    @property
    def fade_dyes(self) -> Mapping[str, str]:
        return self._fade

    @property
    def custom_colors(self) -> Mapping[str, str]:
        return self._custom

    @property
    def word_list(self) -> Mapping[str, str]:
        return self._words

    @property
    def fade_families(self) -> frozenset[str]:
        """Does: Family names derived from the fade dye names (not stored)."""
        return frozenset(fade_family(name) for name in self._fade)

    def category(self, name: str) -> Mapping[str, str]:
        """Does: Mapping for 'target' / 'fade' / 'custom'."""
        if name == TARGET:
            return self._target
        if name == FADE:
            return self._fade
        if name == CUSTOM:
            return self._custom
        raise KeyError(f"Unknown category: {name}. Available: {', '.join(CATEGORIES)}")

    def entries(self) -> Iterator[tuple[str, str, str]]:
        """Does: Yield (category, name, hex) for every reference color: custom, target, fade."""
        for cat in CATEGORIES:
            for name, hexcode in self.category(cat).items():
                yield cat, name, hexcode

    def all_hexes(self) -> list[str]:
        """Does: Every reference hex (duplicates kept), for cache warm-up."""
        return [hexcode for _cat, _name, hexcode in self.entries()]

    def is_fade_dye(self, name: str) -> bool:
        """Does: True if name looks like '<known family> - Stage …'."""
        return any(
            name.startswith(f"{fade_family(fade)}{FADE_STAGE_MARKER}") for fade in self._fade
        )

    def __len__(self) -> int:
        return len(self._target) + len(self._fade) + len(self._custom)

    def __repr__(self) -> str:
        return (
            f"ColorDatabase(target={len(self._target)}, fade={len(self._fade)}, "
            f"custom={len(self._custom)}, words={len(self._words)})"
        )

    # ── copy-on-write edits ──────────────────────────────────────────────────
    def _evolve(self, **changes: Mapping[str, str]) -> ColorDatabase:
        fields: dict[str, Mapping[str, str]] = {
            "target_colors": self._target,
            "fade_dyes": self._fade,
            "custom_colors": self._custom,
            "word_list": self._words,
        }
        fields.update(changes)
        return ColorDatabase(**fields)

    def with_custom_color(self, name: str, hexcode: str) -> ColorDatabase:
        """Does: Add or overwrite a custom color. Raises InvalidHexError."""
        clean = canonical_hex(hexcode)
        if not is_valid_hex(clean):
            raise InvalidHexError(f"Invalid hex code {hexcode!r}: must be 6 characters (0-9, A-F)")
        custom = dict(self._custom)
        custom[name] = clean
        return self._evolve(custom_colors=custom)

    def without_custom_color(self, name: str) -> ColorDatabase:
        if name not in self._custom:
            raise EntryNotFoundError(f"Custom color not found: {name}")
        custom = {k: v for k, v in self._custom.items() if k != name}
        return self._evolve(custom_colors=custom)

    def with_word(self, word: str, pattern: str) -> ColorDatabase:
        """Does: Add WORD → PATTERN (both uppercased). Raises on bad pattern or duplicate."""
        key = word.upper()
        clean = canonical_hex(pattern)
        if _WORD_PATTERN.fullmatch(clean) is None:
            raise InvalidWordPatternError(
                f"Invalid pattern {pattern!r}: must be 1-6 characters of 0-9, A-F or X"
            )
        if key in self._words:
            raise DuplicateEntryError(
                f"Word {key!r} already exists with pattern {self._words[key]!r}"
            )
        words = dict(self._words)
        words[key] = clean
        return self._evolve(word_list=words)

    def without_word(self, word: str) -> ColorDatabase:
        key = word.upper()
        if key not in self._words:
            raise EntryNotFoundError(f"Word not found: {key}")
        words = {k: v for k, v in self._words.items() if k != key}
        return self._evolve(word_list=words)

    # ── construction ─────────────────────────────────────────────────────────
    @classmethod
    def from_dict(
        cls,
        colors: Mapping[str, Any] | None = None,
        user_data: Mapping[str, Any] | None = None,
    ) -> ColorDatabase:
        """
        Does: Build from the persisted shapes:
            colors.json → {"TARGET_COLORS": {...}, "FADE_DYES": {...}}
            data.json   → {"customColors": {...}, "wordList": {...}}
        Missing sections are empty.
        """
        colors = colors or {}
        user_data = user_data or {}
        return cls(
            target_colors=_string_map(colors.get("TARGET_COLORS"), "TARGET_COLORS"),
            fade_dyes=_string_map(colors.get("FADE_DYES"), "FADE_DYES"),
            custom_colors=_string_map(user_data.get("customColors"), "customColors"),
            word_list=_string_map(user_data.get("wordList"), "wordList"),
        )

    def user_data(self) -> dict[str, dict[str, str]]:
        """Does: data.json-shaped dict of the user-editable parts."""
        return {"customColors": dict(self._custom), "wordList": dict(self._words)}


def _string_map(raw: Any, section: str) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise TypeError(f"{section}: expected an object, got {type(raw).__name__}")
    return {str(k): str(v) for k, v in raw.items()}


def _load_optional(file: str, base_dir: Path | None) -> dict[str, Any]:
    try:
        return load_config(file, "validated_dict", base_dir=base_dir)
    except (ConfigFileNotFound, DataDirNotFound) as e:
        logger.warning("Reference data %r unavailable, continuing empty: %s", file, e)
        return {}


def load_database(
    colors_file: str = "colors",
    user_file: str = "data",
    *,
    base_dir: Path | None = None,
) -> ColorDatabase:
    """
    Does: Load <data>/colors.json and <data>/data.json into a ColorDatabase.
    Returns: A database with empty sections for any file that is missing.
    Raises: ConfigParseError / ConfigTypeError on malformed files.
    """
    db = ColorDatabase.from_dict(
        _load_optional(colors_file, base_dir),
        _load_optional(user_file, base_dir),
    )
    logger.info(
        "Loaded %d target colors, %d fade dyes, %d custom colors and %d words",
        len(db.target_colors),
        len(db.fade_dyes),
        len(db.custom_colors),
        len(db.word_list),
    )
    return db
