"""
cache.py
========

Does: Thread-safe memo of canonical hex → Lab, filled on demand.
Returns: LAB values; rebuild/clear for when the reference set changes.
Used by: ranking pipeline (input hex and every candidate hex), ColorMatcher.

Invalidation is explicit: whoever edits the reference colors calls
`clear()` or `rebuild()`. Calls already running keep whatever entries they
read; every value handed out is one full conversion of its hex.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from hex_color_matcher.matching.color.utils import LAB, canonical_hex, hex_to_lab

__all__ = ["LabCache"]
__docformat__ = "google"

log = logging.getLogger(__name__)


class LabCache:
    """Concurrent get-or-compute cache keyed by uppercase hex."""

    def __init__(self, converter: Callable[[str], LAB] = hex_to_lab):
        self._convert = converter
        self._lock = threading.RLock()
        self._entries: dict[str, LAB] = {}

    def get(self, hexcode: str) -> LAB:
        """Does: Return the cached Lab for hexcode, computing it if absent."""
        key = canonical_hex(hexcode)
        lab = self._entries.get(key)
        if lab is not None:
            return lab
        computed = self._convert(key)
        with self._lock:
            # first writer wins; late computations are discarded
            return self._entries.setdefault(key, computed)

    def rebuild(self, hexcodes: Iterable[str]) -> int:
        """Does: Drop everything, then eagerly convert hexcodes. Returns entry count."""
        fresh: dict[str, LAB] = {}
        for hexcode in hexcodes:
            key = canonical_hex(hexcode)
            if key not in fresh:
                fresh[key] = self._convert(key)
        with self._lock:
            self._entries = fresh
        log.debug("Lab cache rebuilt with %d entries.", len(fresh))
        return len(fresh)

    def clear(self) -> None:
        """Does: Drop all entries."""
        with self._lock:
            self._entries = {}
        log.debug("Lab cache cleared.")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, hexcode: object) -> bool:
        return isinstance(hexcode, str) and canonical_hex(hexcode) in self._entries
