# src/xcolor_expressions/utils/load_config.py

"""Read JSON object files (preset tables) from the package <data/> directory.

The data directory is picked in this order: an explicit `base_dir`, then the
XCOLOR_DATA_DIR / DATA_DIR environment variables, then the first `data/`
folder found walking up from this module. Parsed files are cached per
(path, mtime) so an edited file is re-read on next access.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

__all__ = [
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("XCOLOR_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory exists above the package."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when a data file is missing, unreadable or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a data file is not valid JSON."""


class ConfigTypeError(TypeError):
    """Raise when a data file holds something other than a JSON object."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Drop every cached file (tests, hot reload)."""
    with _CACHE_LOCK:
        _CACHE.clear()
    log.debug("Data cache cleared.")


# ── Data directory ───────────────────────────────────────────────────────────
def _discover_data_dir() -> Path:
    here = Path(__file__).resolve()
    tried = [(p / "data") for p in here.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Pick the data dir: explicit > env override > discovery from this package."""
    if base_dir is not None:
        return base_dir.resolve()
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()
    return _discover_data_dir()


# ── Loading ──────────────────────────────────────────────────────────────────
def load_config(file: str, *, base_dir: Path | None = None) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, served from cache while unchanged.

    Raises:
        ConfigFileNotFound: missing/unreadable file, or a path leaving the data dir.
        ConfigParseError: invalid JSON.
        ConfigTypeError: top-level value is not an object.
    """
    data_dir = resolve_data_dir(base_dir)
    name = file if file.endswith(".json") else f"{file}.json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to access file outside data dir: {path} (base={data_dir})")

    try:
        key = (path, path.stat().st_mtime)
    except OSError as e:
        raise ConfigFileNotFound(f"Data file not found: {path}") from e

    with _CACHE_LOCK:
        cached = _CACHE.get(key)
    if cached is not None:
        log.debug("Data cache HIT: %s", path.name)
        return cached

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    with _CACHE_LOCK:
        _CACHE[key] = data
    log.debug("Data cache MISS → STORED: %s", path.name)
    return data
