"""
fuzzy.
=====

Does: Typo-tolerant search over reference color names (rapidfuzz).
"""

from .name_search import DEFAULT_CUTOFF, NameHit, search_color_names

__all__ = ["NameHit", "search_color_names", "DEFAULT_CUTOFF"]

__docformat__ = "google"
