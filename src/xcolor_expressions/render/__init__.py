"""
render.

Does: Facade for presentation helpers (8-bit channels, HTML/CSS/debug strings).
"""

from __future__ import annotations

from .formatting import (
    css_code,
    html_code,
    parse_to_rgb8,
    tex_code,
    to_8bit,
    to_bytes,
    to_rgb8,
)

__all__ = [
    "to_8bit",
    "to_bytes",
    "to_rgb8",
    "html_code",
    "css_code",
    "tex_code",
    "parse_to_rgb8",
]
