# hex_color_matcher/matching/general/utils/__init__.py
"""
utils.
=====

Does: Provide config loading and lightweight debug logging utilities for the matcher.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Database and settings loaders, ranking pipeline, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
    temp_data_dir,
)
from .log import (
    active_topics,
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "resolve_data_dir",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enabled",
    "active_topics",
    "reload_topics",
]
