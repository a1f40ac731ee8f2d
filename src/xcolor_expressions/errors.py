"""
errors.py.

Does: Define the typed failures raised by expression parsing and preset loading.
Returns: Exception classes only (no side effects).
Used by: color.model (model names), registry (names, presets), parsing (all grammars).
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
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


# ── Parse errors ─────────────────────────────────────────────────────────────
class ColorExpressionError(ValueError):
    """Base for every malformed color expression; `expression` holds the offending text."""

    def __init__(self, message: str, expression: str | None = None):
        super().__init__(message)
        self.expression = expression


class UnknownColorName(ColorExpressionError, LookupError):
    """Raise when a name is not in the registry."""

    def __init__(self, name: str, suggestions: Sequence[str] = ()):
        self.name = name
        self.suggestions = tuple(suggestions)
        message = f"Unknown color name '{name}'"
        if self.suggestions:
            message += " (did you mean " + ", ".join(f"'{s}'" for s in self.suggestions) + "?)"
        super().__init__(message, name)


class UnknownModelName(ColorExpressionError, LookupError):
    """Raise when an extended prefix names no known color model."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown model name '{name}'", name)


class NotANumber(ColorExpressionError):
    """Raise when a ratio, weight or divisor literal is not a real number."""

    def __init__(self, text: str):
        super().__init__(f"Not a number ('{text}')", text)


class NonPositiveDivisor(ColorExpressionError):
    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Non-positive div value ({value:g})")


class MissingComma(ColorExpressionError):
    def __init__(self, term: str):
        super().__init__(f"Missing ',' in '{term}'", term)


class DoubledBang(ColorExpressionError):
    def __init__(self, expression: str):
        super().__init__("Postfix ('!!') is not supported", expression)


class TooManyColons(ColorExpressionError):
    def __init__(self, expression: str):
        super().__init__("Too many ':' in expression", expression)


class EmptyMixture(ColorExpressionError):
    """Raise when an extended mixture has no terms or its weights sum to zero."""


# ── Preset errors ────────────────────────────────────────────────────────────
class UnknownPreset(LookupError):
    def __init__(self, preset_id: str):
        self.preset_id = preset_id
        super().__init__(f"Unknown preset name: {preset_id}")


class PresetFormatError(ValueError):
    """Raise when a preset data file holds an entry that cannot become a color."""
