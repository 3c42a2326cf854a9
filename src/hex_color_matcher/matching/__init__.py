"""
matching.
=========

Does: Namespace for the matching engine: color math and ranking (`color`),
      hex pattern/word tags (`pattern`), config/log/search helpers
      (`general`), plus the reference database, settings and orchestrator.
Used by: `hex_color_matcher` root package, demo CLI, tests.
"""

__all__: list[str] = []
__docformat__ = "google"
