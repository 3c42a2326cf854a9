"""
general.
=======

Does: Domain-agnostic helpers for the matcher: config loading, debug
      tracing, and fuzzy name search.
"""

__all__: list[str] = []
__docformat__ = "google"
