"""
blending.py

Does: Weighted blend of two colors, choosing the receiver's model except when a
      gray receiver meets a richer color (roles swap so no channel is lost).
Returns: blend(), mix_value().
Used by: Color.blend and the simple expression grammar.
"""

from __future__ import annotations

from xcolor_expressions.color.conversion import convert
from xcolor_expressions.color.values import Color, GrayColor, clamp_unit, from_params

__all__ = ["blend", "mix_value"]


def mix_value(p1: float, p2: float, ratio: float) -> float:
    """Does: ratio * p1 + (1 - ratio) * p2 with ratio clamped to [0, 1]."""
    ratio = clamp_unit(ratio)
    return p1 * ratio + p2 * (1 - ratio)


def blend(receiver: Color, ratio: float, other: Color) -> Color:
    """Does: Mix `ratio` of `receiver` with `1 - ratio` of `other`.

    `ratio <= 0` hands back `other` verbatim and `ratio >= 1` hands back
    `receiver`; otherwise the result is in the receiver's model. A gray
    receiver blended with a non-gray color delegates to
    `other.blend(1 - ratio, receiver)`.
    """
    if ratio <= 0:
        return other
    if ratio >= 1:
        return receiver
    if isinstance(receiver, GrayColor) and not isinstance(other, GrayColor):
        return blend(other, 1 - ratio, receiver)
    aligned = convert(other, receiver.model)
    return from_params(
        receiver.model,
        [mix_value(p1, p2, ratio) for p1, p2 in zip(receiver.params, aligned.params)],
    )
