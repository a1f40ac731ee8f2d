"""
simple.py
=========

Does: Resolve blend-chain expressions `name!r1!name1!r2!name2...` into a color.
Used By: parse() for colon-free input, and every term of the extended grammar.
Returns: A color value taken from (or blended out of) registry entries.

Grammar:
- Fields are split on '!'. The first field is a registered name.
- The rest come in pairs (percent, name); a trailing percent without a name
  blends with white.
- The running result is always the blend receiver:
  acc = acc.blend(percent / 100, name).
- An empty field between two '!' (e.g. 'red!!blue') is rejected.
"""

from __future__ import annotations

from xcolor_expressions.color import Color, gray
from xcolor_expressions.errors import DoubledBang
from xcolor_expressions.parsing.tokens import parse_number
from xcolor_expressions.registry import ColorRegistry
from xcolor_expressions.utils import debug

__all__ = ["WHITE", "parse_simple"]
__docformat__ = "google"

WHITE = gray(1)


def parse_simple(expr: str, registry: ColorRegistry) -> Color:
    """Does: Evaluate one blend chain against `registry`.

    Raises:
        DoubledBang: for an empty field strictly inside the chain.
        UnknownColorName: for any unresolvable name.
        NotANumber: for a malformed percentage.
    """
    fields = expr.split("!")
    if any(f == "" for f in fields[1:-1]):
        raise DoubledBang(expr)

    acc = registry.lookup(fields[0])
    for k in range(1, len(fields), 2):
        percent = parse_number(fields[k])
        other = registry.lookup(fields[k + 1]) if k + 1 < len(fields) else WHITE
        acc = acc.blend(percent / 100, other)
        debug(f"{expr!r}: step {k // 2 + 1} ({percent:g}%) → {acc}", topic="parse")
    return acc
