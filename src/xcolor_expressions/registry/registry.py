"""
registry.py
===========

Does: Hold the name → color table used by expression parsing, seed it with the
      "current color" entry, merge preset tables into it, and suggest close
      names (rapidfuzz) when a lookup misses.
Used By: parsing.simple / parsing.extended, package facade, CLI.
Returns: ColorRegistry, the lazily-built process-wide default registry.

Notes:
- Names are trimmed of surrounding spaces and matched case-sensitively.
- Mutation (define/load_preset) is single-writer: finish loading before
  parsing from several threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from rapidfuzz import fuzz, process

from xcolor_expressions import config
from xcolor_expressions.color import Color, gray
from xcolor_expressions.errors import UnknownColorName
from xcolor_expressions.registry.presets import load_preset_table
from xcolor_expressions.utils import debug

__all__ = [
    "CURRENT_COLOR_NAME",
    "ColorRegistry",
    "get_default_registry",
    "reset_default_registry",
    "load_preset",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

# "current" color is always assumed to be black
CURRENT_COLOR_NAME = "."
MAX_SUGGESTIONS = 3


def _key(name: str) -> str:
    return name.strip(" ")


class ColorRegistry:
    """Name → color table with preset loading.

    Args:
        presets: preset ids to load, in order (later ones overwrite).
        base_dir: optional data directory holding presets/<id>.json.
    """

    def __init__(self, presets: Iterable[str] = (), *, base_dir: Path | None = None):
        self._base_dir = base_dir
        self._colors: dict[str, Color] = {CURRENT_COLOR_NAME: gray(0)}
        for preset_id in presets:
            self.load_preset(preset_id)

    # ── Mutation ─────────────────────────────────────────────────────────────
    def define(self, name: str, color: Color) -> None:
        """Does: Insert or overwrite one entry."""
        self._colors[_key(name)] = color

    def update(self, colors: Mapping[str, Color]) -> None:
        for name, color in colors.items():
            self.define(name, color)

    def load_preset(self, preset_id: str) -> None:
        """Does: Merge a preset table into the registry, overwriting same names.

        Raises:
            UnknownPreset: if no table exists for `preset_id`.
        """
        table = load_preset_table(preset_id, base_dir=self._base_dir)
        overwritten = sum(1 for name in table if name in self._colors)
        self.update(table)
        log.debug(
            "Loaded preset %r: %d colors (%d overwritten)", preset_id, len(table), overwritten
        )
        debug(f"preset '{preset_id}' → {len(table)} names", topic="registry")

    # ── Lookup ───────────────────────────────────────────────────────────────
    def find(self, name: str) -> Color | None:
        return self._colors.get(_key(name))

    def lookup(self, name: str) -> Color:
        """Does: Resolve a name.

        Raises:
            UnknownColorName: with close-match suggestions when available.
        """
        key = _key(name)
        color = self._colors.get(key)
        if color is None:
            raise UnknownColorName(key, self.suggest(key))
        return color

    def suggest(self, name: str, limit: int = MAX_SUGGESTIONS) -> list[str]:
        """Does: Return up to `limit` registered names close to `name`."""
        if not name:
            return []
        matches = process.extract(
            name,
            list(self._colors),
            scorer=fuzz.ratio,
            limit=limit,
            score_cutoff=config.get_suggestion_cutoff(),
        )
        return [match for match, _score, _idx in matches]

    def names(self) -> list[str]:
        return sorted(self._colors)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} colors)"


# =============================================================================
# Process-wide default registry (lazy)
# =============================================================================

_DEFAULT_REGISTRY: ColorRegistry | None = None


def get_default_registry() -> ColorRegistry:
    """Does: Return the shared registry, building it on first call from XCOLOR_PRESETS."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = ColorRegistry(config.get_default_presets())
    return _DEFAULT_REGISTRY


def reset_default_registry() -> None:
    """Does: Drop the shared registry so the next access rebuilds it."""
    global _DEFAULT_REGISTRY
    _DEFAULT_REGISTRY = None


def load_preset(preset_id: str) -> None:
    """Does: Merge a preset into the shared registry (raises UnknownPreset)."""
    get_default_registry().load_preset(preset_id)
