"""
registry.

Does: Facade for the named color registry and its preset tables.
Used by: Expression parsing, package facade, CLI.
"""

from __future__ import annotations

from .presets import available_presets, color_from_entry, load_preset_table
from .registry import (
    CURRENT_COLOR_NAME,
    ColorRegistry,
    get_default_registry,
    load_preset,
    reset_default_registry,
)

__all__ = [
    "CURRENT_COLOR_NAME",
    "ColorRegistry",
    "get_default_registry",
    "reset_default_registry",
    "load_preset",
    "available_presets",
    "load_preset_table",
    "color_from_entry",
]

__docformat__ = "google"
