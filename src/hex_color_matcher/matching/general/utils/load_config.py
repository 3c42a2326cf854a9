# src/hex_color_matcher/matching/general/utils/load_config.py

"""Read the matcher's JSON files (reference colors, user data, settings)
from a <data/> directory, with an mtime-keyed cache.

Modes:
- "raw"             -> parsed JSON as-is (any top-level type)
- "validated_dict"  -> top-level object required, then an optional validator

The data directory is, in order: the explicit `base_dir`, the
HEXMATCH_DATA_DIR / DATA_DIR environment variables, or the first `data/`
folder found walking up from this module (the packaged reference data).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

import json5

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]
__all__ = [
    "Mode",
    "load_config",
    "resolve_data_dir",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "HEXMATCH_DATA_DIR"
_DATA_DIR_ENV_VARS = (DATA_DIR_ENV, "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory can be located."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when a config file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON or fails its validator."""


class ConfigTypeError(TypeError):
    """Raise when the top-level JSON value has the wrong type for the mode."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# (path, mtime, mode, encoding, allow_comments) → parsed value
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Forget every cached file (tests, hot reload after editing data/)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


# =============================================================================
# 1) DATA DIRECTORY
# =============================================================================

def _discover_data_dir(start: Path) -> Path:
    tried: list[Path] = []
    for folder in (start, *start.parents):
        cand = folder / "data"
        if cand.is_dir():
            return cand.resolve()
        tried.append(cand)
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in tried)
    )


def _env_data_dir() -> Path | None:
    for var in _DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()
    return None


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Explicit > env override > discovery from this module."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    return _env_data_dir() or _discover_data_dir(Path(__file__).resolve().parent)


def _config_path(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith((".json", ".json5")):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


# =============================================================================
# 2) PARSING
# =============================================================================

def _parse(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding) as f:
            # json5 accepts comments and trailing commas
            return json5.load(f) if allow_comments else json.load(f)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    except ValueError as e:
        # JSONDecodeError, json5 syntax errors and bad encodings all land here
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
    allow_comments: bool = False,
) -> Any:
    """
    Load <data>/<file>.json.

    Results are cached per (path, mtime, mode, ...) unless a validator is
    given, since a validator may reshape the data.

    Raises: DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    data_dir = resolve_data_dir(base_dir)
    path = _config_path(data_dir, file)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    key = (path, mtime, mode, encoding, allow_comments)
    if validator is None:
        with _CACHE_LOCK:
            if key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[key]

    data = _parse(path, encoding, allow_comments)

    if mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected a JSON object, got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
            log.debug("Config loaded with validator (not cached): %s", path.name)
            return data

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return data


# ── Context manager to temporarily point at another data directory ────────────
class temp_data_dir:
    """Set HEXMATCH_DATA_DIR for the duration of a block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = os.fspath(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV)
        os.environ[DATA_DIR_ENV] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV, None)
        else:
            os.environ[DATA_DIR_ENV] = self._old
        clear_config_cache()
