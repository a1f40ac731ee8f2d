"""
parsing.

Does: Facade over the two expression grammars and their shared number parser.
Returns: parse(), parse_simple(), parse_extended(), parse_number().
Used by: Package facade, rendering helpers, CLI.
"""

from __future__ import annotations

from .extended import parse_extended, parse_prefix
from .parser import parse
from .simple import WHITE, parse_simple
from .tokens import parse_number

__all__ = [
    "parse",
    "parse_simple",
    "parse_extended",
    "parse_prefix",
    "parse_number",
    "WHITE",
]

__docformat__ = "google"
