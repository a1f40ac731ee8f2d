"""
conversion.py
=============

Does: Convert colors between gray, rgb and cmyk, compute complements, and
      hold the cmyk normal/denormal transforms that make round trips exact.
Used By: Color.convert/complement, blending (operand alignment), extended grammar.
Returns: New color values; converting to a color's own model returns it as-is.

Notes:
- Every cmyk produced here (from rgb, gray excepted, or by complement) is in
  normal form: min(c, m, y) == 0 with the shared amount moved into k.
- Colors built directly through `cmyk()` are not forced into normal form.
"""

from __future__ import annotations

import logging

from xcolor_expressions.color.model import Model
from xcolor_expressions.color.values import (
    CmykColor,
    Color,
    GrayColor,
    RgbColor,
    clamp_unit,
)

__all__ = [
    "LUMA_WEIGHTS",
    "normal_form",
    "denormal_form",
    "to_gray",
    "to_rgb",
    "to_cmyk",
    "convert",
    "complement",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

LUMA_WEIGHTS = (0.3, 0.59, 0.11)


# =============================================================================
# 1) CMYK NORMAL / DENORMAL FORMS
# =============================================================================

def normal_form(color: CmykColor) -> CmykColor:
    """Does: Extract the largest common amount of c, m, y into k."""
    dk = min(color.c, color.m, color.y)
    return CmykColor(color.c - dk, color.m - dk, color.y - dk, color.k + dk)


def denormal_form(color: CmykColor) -> CmykColor:
    """Does: Fold k into c, m, y (re-clamped); the result has k == 0."""
    return CmykColor(
        clamp_unit(color.c + color.k),
        clamp_unit(color.m + color.k),
        clamp_unit(color.y + color.k),
        0.0,
    )


# =============================================================================
# 2) PAIRWISE CONVERSIONS
# =============================================================================

def to_rgb(color: Color) -> RgbColor:
    if isinstance(color, RgbColor):
        return color
    if isinstance(color, GrayColor):
        return RgbColor(color.gray, color.gray, color.gray)
    if isinstance(color, CmykColor):
        d = denormal_form(color)
        return RgbColor(1 - d.c, 1 - d.m, 1 - d.y)
    raise TypeError(f"Not a color value: {color!r}")


def to_cmyk(color: Color) -> CmykColor:
    if isinstance(color, CmykColor):
        return color
    if isinstance(color, GrayColor):
        return CmykColor(0.0, 0.0, 0.0, 1 - color.gray)
    if isinstance(color, RgbColor):
        return normal_form(CmykColor(1 - color.r, 1 - color.g, 1 - color.b, 0.0))
    raise TypeError(f"Not a color value: {color!r}")


def to_gray(color: Color) -> GrayColor:
    if isinstance(color, GrayColor):
        return color
    # cmyk has no direct formula: go through rgb
    c = to_rgb(color)
    wr, wg, wb = LUMA_WEIGHTS
    return GrayColor(c.r * wr + c.g * wg + c.b * wb)


_CONVERTERS = {
    Model.GRAY: to_gray,
    Model.RGB: to_rgb,
    Model.CMYK: to_cmyk,
}


def convert(color: Color, model: Model) -> Color:
    """Does: Convert `color` into `model` (identity when already there)."""
    if color.model is model:
        return color
    return _CONVERTERS[model](color)


# =============================================================================
# 3) COMPLEMENT
# =============================================================================

def complement(color: Color) -> Color:
    """Does: Return the complementary color in the same model."""
    if isinstance(color, GrayColor):
        return GrayColor(1 - color.gray)
    if isinstance(color, RgbColor):
        return RgbColor(1 - color.r, 1 - color.g, 1 - color.b)
    if isinstance(color, CmykColor):
        d = denormal_form(color)
        return normal_form(CmykColor(1 - d.c, 1 - d.m, 1 - d.y, 0.0))
    raise TypeError(f"Not a color value: {color!r}")
