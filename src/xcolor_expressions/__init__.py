"""
xcolor_expressions
==================

Does: Root package initializer. Resolves xcolor-style color expressions
      ('red!40!blue', 'cmyk,2:red,1;blue,1') into gray/rgb/cmyk values and
      exposes their conversion, complement and blending.
Returns: Re-exports the stable public API of the subpackages.
Used by: All higher-level imports starting from `xcolor_expressions.*`.
"""

from __future__ import annotations

from .color import (
    CmykColor,
    Color,
    GrayColor,
    Model,
    RgbColor,
    blend,
    cmyk,
    complement,
    convert,
    gray,
    rgb,
)
from .errors import (
    ColorExpressionError,
    DoubledBang,
    EmptyMixture,
    MissingComma,
    NonPositiveDivisor,
    NotANumber,
    PresetFormatError,
    TooManyColons,
    UnknownColorName,
    UnknownModelName,
    UnknownPreset,
)
from .parsing import parse
from .registry import ColorRegistry, available_presets, get_default_registry, load_preset
from .render import css_code, html_code, parse_to_rgb8, tex_code, to_bytes, to_rgb8

__all__: list[str] = [
    # Values
    "Color",
    "GrayColor",
    "RgbColor",
    "CmykColor",
    "Model",
    "gray",
    "rgb",
    "cmyk",
    "convert",
    "complement",
    "blend",
    # Parsing & registry
    "parse",
    "ColorRegistry",
    "get_default_registry",
    "load_preset",
    "available_presets",
    # Rendering
    "to_bytes",
    "to_rgb8",
    "html_code",
    "css_code",
    "tex_code",
    "parse_to_rgb8",
    # Errors
    "ColorExpressionError",
    "UnknownColorName",
    "UnknownModelName",
    "NotANumber",
    "NonPositiveDivisor",
    "MissingComma",
    "DoubledBang",
    "TooManyColons",
    "EmptyMixture",
    "UnknownPreset",
    "PresetFormatError",
]
__docformat__ = "google"
