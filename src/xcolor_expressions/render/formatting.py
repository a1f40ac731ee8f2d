"""
formatting.py
=============

Does: Present colors outside the core: 8-bit channel values, HTML hex codes,
      CSS-style 'model(p%,...)' strings and the '[model]{v,...}' debug form.
Used By: Color.__str__, CLI output, callers handing colors to graphics code.
Returns: Strings and 8-bit integer tuples.
"""

from __future__ import annotations

import webcolors

from xcolor_expressions import config
from xcolor_expressions.color import Color, to_rgb

__all__ = [
    "to_8bit",
    "to_bytes",
    "to_rgb8",
    "html_code",
    "css_code",
    "tex_code",
    "parse_to_rgb8",
]
__docformat__ = "google"


# =============================================================================
# 1) 8-BIT CHANNELS
# =============================================================================

def to_8bit(value: float) -> int:
    """Does: Map [0, 1] to 0..255 (x <= 0 → 0, x >= 1 → 255, else int(x*255 + .5))."""
    if value <= 0:
        return 0
    if value >= 1:
        return 255
    return int(value * 255 + 0.5)


def to_bytes(color: Color) -> tuple[int, ...]:
    """Does: 8-bit components in the color's own model (1, 3 or 4 values)."""
    return tuple(to_8bit(p) for p in color.params)


def to_rgb8(color: Color) -> tuple[int, int, int]:
    c = to_rgb(color)
    return to_8bit(c.r), to_8bit(c.g), to_8bit(c.b)


def html_code(color: Color) -> str:
    """Does: '#RRGGBB' (uppercase) of the rgb conversion."""
    return webcolors.rgb_to_hex(to_rgb8(color)).upper()


# =============================================================================
# 2) TEXT FORMS
# =============================================================================

def _trim(s: str) -> str:
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _param_str(value: float, precision: int) -> str:
    return _trim(f"{value:.{precision}f}")


def _percent_str(value: float, precision: int) -> str:
    return _trim(f"{value * 100:.{precision - 2}f}") + "%"


def _precision(precision: int | None) -> int:
    if precision is None:
        return config.get_precision()
    return max(precision, config.MIN_PRECISION)


def css_code(color: Color, precision: int | None = None) -> str:
    """Does: 'rgb(100%,50%,0%)'-style literal; percentages keep precision-2 decimals."""
    prec = _precision(precision)
    body = ",".join(_percent_str(p, prec) for p in color.params)
    return f"{color.model}({body})"


def tex_code(color: Color, precision: int | None = None) -> str:
    """Does: '[rgb]{1,0.5,0}'-style debug literal."""
    prec = _precision(precision)
    body = ",".join(_param_str(p, prec) for p in color.params)
    return f"[{color.model}]{{{body}}}"


def parse_to_rgb8(expression: str) -> tuple[int, int, int]:
    """Does: Parse with the shared registry and return the 8-bit rgb triple."""
    from xcolor_expressions.parsing import parse

    return to_rgb8(parse(expression))
