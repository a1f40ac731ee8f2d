"""
values.py
=========

Does: Immutable color values for the three models (gray, rgb, cmyk) with
      components clamped to [0, 1] at construction, plus the public constructors.
Used By: Conversion/blending engines, registry presets, both expression grammars.
Returns: GrayColor / RgbColor / CmykColor instances (value equality, hashable).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, fields
from typing import ClassVar

from xcolor_expressions.color.model import Model

__all__ = [
    "Color",
    "GrayColor",
    "RgbColor",
    "CmykColor",
    "clamp_unit",
    "gray",
    "rgb",
    "cmyk",
    "from_params",
]
__docformat__ = "google"


def clamp_unit(p: float) -> float:
    """Does: Clamp a component into [0, 1]; NaN maps to 0."""
    if math.isnan(p) or p <= 0:
        return 0.0
    if p >= 1:
        return 1.0
    return float(p)


# =============================================================================
# 1) VALUE TYPES
# =============================================================================

@dataclass(frozen=True)
class Color:
    """Common base of the three model variants.

    Subclasses declare their components as float dataclass fields, in the
    order they are reported by `params`. Construction clamps every field.
    """

    model: ClassVar[Model]

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, clamp_unit(getattr(self, f.name)))

    @property
    def params(self) -> tuple[float, ...]:
        """Does: Return the components in model order (1, 3 or 4 values)."""
        return tuple(getattr(self, f.name) for f in fields(self))

    # ── Algebra (engines live in conversion.py / blending.py) ────────────────
    def convert(self, model: Model) -> Color:
        from xcolor_expressions.color.conversion import convert

        return convert(self, model)

    def complement(self) -> Color:
        from xcolor_expressions.color.conversion import complement

        return complement(self)

    def blend(self, ratio: float, other: Color) -> Color:
        """Does: Mix `ratio` of this color with `1 - ratio` of `other`."""
        from xcolor_expressions.color.blending import blend

        return blend(self, ratio, other)

    def __str__(self) -> str:
        from xcolor_expressions.render.formatting import tex_code

        return tex_code(self)


@dataclass(frozen=True)
class GrayColor(Color):
    gray: float

    model: ClassVar[Model] = Model.GRAY


@dataclass(frozen=True)
class RgbColor(Color):
    r: float
    g: float
    b: float

    model: ClassVar[Model] = Model.RGB


@dataclass(frozen=True)
class CmykColor(Color):
    c: float
    m: float
    y: float
    k: float

    model: ClassVar[Model] = Model.CMYK


# =============================================================================
# 2) CONSTRUCTORS (never fail on range)
# =============================================================================

def gray(w: float) -> GrayColor:
    return GrayColor(w)


def rgb(r: float, g: float, b: float) -> RgbColor:
    return RgbColor(r, g, b)


def cmyk(c: float, m: float, y: float, k: float) -> CmykColor:
    return CmykColor(c, m, y, k)


_BY_MODEL: dict[Model, type[Color]] = {
    Model.GRAY: GrayColor,
    Model.RGB: RgbColor,
    Model.CMYK: CmykColor,
}


def from_params(model: Model, params: Sequence[float]) -> Color:
    """Does: Build a color of `model` from a component vector.

    Raises:
        ValueError: if the vector length does not match the model.
    """
    if len(params) != model.arity:
        raise ValueError(
            f"{model} expects {model.arity} component(s), got {len(params)}: {list(params)!r}"
        )
    return _BY_MODEL[model](*params)
