"""
presets.py
==========

Does: Load named-color preset tables (data/presets/<id>.json) and turn their
      entries into color values. Web color strings go through webcolors.
Used By: ColorRegistry.load_preset, CLI listing.
Returns: dict[str, Color] per preset id; available preset ids.

Entry forms:
- "#RRGGBB" / "#RGB" hex string, or a CSS3 keyword such as "aliceblue"
- {"model": "gray" | "rgb" | "cmyk", "params": [numbers...]}
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import webcolors

from xcolor_expressions.color import Color, find_model, from_params, rgb
from xcolor_expressions.errors import PresetFormatError, UnknownModelName, UnknownPreset
from xcolor_expressions.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    load_config,
    resolve_data_dir,
)

__all__ = [
    "PRESET_SUBDIR",
    "available_presets",
    "load_preset_table",
    "color_from_entry",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

PRESET_SUBDIR = "presets"
_PRESET_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


# =============================================================================
# 1) ENTRY DECODING
# =============================================================================

def _web_color(value: str) -> Color:
    """Does: Resolve '#hex' or a CSS3 keyword into an rgb color via webcolors."""
    try:
        if value.startswith("#"):
            triple = webcolors.hex_to_rgb(value)
        else:
            triple = webcolors.name_to_rgb(value)
    except ValueError as e:
        raise PresetFormatError(f"Unrecognized web color {value!r}: {e}") from e
    return rgb(triple.red / 255, triple.green / 255, triple.blue / 255)


def color_from_entry(name: str, entry: Any) -> Color:
    """Does: Decode one preset entry.

    Raises:
        PresetFormatError: on any shape/model/arity problem.
    """
    if isinstance(entry, str):
        return _web_color(entry.strip())
    if not isinstance(entry, dict) or "model" not in entry or "params" not in entry:
        raise PresetFormatError(f"{name}: expected web color string or {{model, params}}")
    try:
        model = find_model(str(entry["model"]))
    except UnknownModelName as e:
        raise PresetFormatError(f"{name}: {e}") from e
    params = entry["params"]
    if not isinstance(params, list) or not all(
        isinstance(p, (int, float)) and not isinstance(p, bool) for p in params
    ):
        raise PresetFormatError(f"{name}: params must be a list of numbers")
    try:
        return from_params(model, [float(p) for p in params])
    except ValueError as e:
        raise PresetFormatError(f"{name}: {e}") from e


# =============================================================================
# 2) TABLE LOADING
# =============================================================================

def available_presets(base_dir: Path | None = None) -> list[str]:
    """Does: List preset ids present in the data directory (sorted)."""
    folder = resolve_data_dir(base_dir) / PRESET_SUBDIR
    if not folder.is_dir():
        return []
    return sorted(p.stem for p in folder.glob("*.json"))


def load_preset_table(preset_id: str, *, base_dir: Path | None = None) -> dict[str, Color]:
    """Does: Read presets/<preset_id>.json and decode all entries.

    Raises:
        UnknownPreset: if the id is malformed or no such table exists.
        PresetFormatError: if the file is not a JSON object or an entry cannot be decoded.
    """
    if not _PRESET_ID_RE.match(preset_id or ""):
        raise UnknownPreset(preset_id)
    try:
        raw = load_config(f"{PRESET_SUBDIR}/{preset_id}", base_dir=base_dir)
    except ConfigFileNotFound as e:
        raise UnknownPreset(preset_id) from e
    except (ConfigParseError, ConfigTypeError) as e:
        raise PresetFormatError(f"Preset {preset_id!r}: {e}") from e

    table = {str(name): color_from_entry(str(name), entry) for name, entry in raw.items()}
    log.debug("Decoded preset %r (%d colors)", preset_id, len(table))
    return table
