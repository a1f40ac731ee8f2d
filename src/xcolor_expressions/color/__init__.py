# src/xcolor_expressions/color/__init__.py
"""
color.

Does: Facade over the color values, model enum, conversion and blending engines.
Returns: Public API for building, converting, complementing and blending colors.
Used by: Registry presets, expression grammars, rendering, CLI.
"""

from __future__ import annotations

# ── Values & model ───────────────────────────────────────────────────────────
from .model import Model, find_model
from .values import (
    CmykColor,
    Color,
    GrayColor,
    RgbColor,
    clamp_unit,
    cmyk,
    from_params,
    gray,
    rgb,
)

# ── Engines ──────────────────────────────────────────────────────────────────
from .blending import blend, mix_value
from .conversion import (
    complement,
    convert,
    denormal_form,
    normal_form,
    to_cmyk,
    to_gray,
    to_rgb,
)

__all__ = [
    # Values & model
    "Model",
    "find_model",
    "Color",
    "GrayColor",
    "RgbColor",
    "CmykColor",
    "clamp_unit",
    "gray",
    "rgb",
    "cmyk",
    "from_params",
    # Engines
    "convert",
    "complement",
    "normal_form",
    "denormal_form",
    "to_gray",
    "to_rgb",
    "to_cmyk",
    "blend",
    "mix_value",
]

__docformat__ = "google"
