"""
parser.py

Does: Entry point for color expressions; dispatches on the number of ':'.
Returns: parse() → Color.
Used by: Package facade, render.parse_to_rgb8, CLI.
"""

from __future__ import annotations

import logging

from xcolor_expressions.color import Color
from xcolor_expressions.errors import TooManyColons
from xcolor_expressions.parsing.extended import parse_extended
from xcolor_expressions.parsing.simple import parse_simple
from xcolor_expressions.registry import ColorRegistry, get_default_registry

__all__ = ["parse"]

log = logging.getLogger(__name__)


def parse(expression: str, registry: ColorRegistry | None = None) -> Color:
    """Does: Turn 'red!40!blue' or 'cmyk,2:red,1;blue,1' into a color.

    No ':' selects the blend-chain grammar, one ':' the weighted-mixture
    grammar (model prefix before it), more than one raises TooManyColons.
    `registry` defaults to the process-wide registry.
    """
    if registry is None:
        registry = get_default_registry()
    parts = expression.split(":")
    if len(parts) == 1:
        return parse_simple(expression, registry)
    if len(parts) == 2:
        return parse_extended(parts[0], parts[1], registry)
    log.debug("Rejected expression with %d colons: %r", len(parts) - 1, expression)
    raise TooManyColons(expression)
