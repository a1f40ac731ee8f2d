"""
tokens.py

Does: Numeric literal parsing shared by both grammars.
Returns: parse_number().
"""

from __future__ import annotations

import re

from xcolor_expressions.errors import NotANumber

__all__ = ["parse_number"]

# ASCII decimal floats only: no '_' separators, no inner whitespace, no hex.
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?)",
    re.ASCII | re.IGNORECASE,
)


def parse_number(text: str) -> float:
    """Does: Parse a real number after trimming surrounding spaces.
    Raises: NotANumber for empty, non-numeric or NaN literals.
    """
    text = text.strip(" ")
    if not _NUMBER_RE.fullmatch(text):
        raise NotANumber(text)
    return float(text)
