"""
extended.py
===========

Does: Resolve weighted mixtures `model[,div]:expr1,w1;expr2,w2;...` where each
      expr is a blend chain (see simple.py).
Used By: parse() when the input holds exactly one ':'.
Returns: A fresh color in the requested model.

Semantics:
- Each term's color is converted to the target model, scaled by its weight
  and summed component-wise.
- The sum is divided by `div` when given (must be > 0), else by the total of
  the weights.
"""

from __future__ import annotations

import math

from xcolor_expressions.color import Color, Model, find_model, from_params
from xcolor_expressions.errors import EmptyMixture, MissingComma, NonPositiveDivisor, NotANumber
from xcolor_expressions.parsing.simple import parse_simple
from xcolor_expressions.parsing.tokens import parse_number
from xcolor_expressions.registry import ColorRegistry
from xcolor_expressions.utils import debug

__all__ = ["parse_prefix", "parse_extended"]
__docformat__ = "google"


def parse_prefix(prefix: str) -> tuple[Model, float | None]:
    """Does: Split 'model[,div]' into the target model and optional divisor.

    Raises:
        UnknownModelName, NonPositiveDivisor.
        NotANumber: for a malformed or infinite divisor.
    """
    model_name, sep, div_text = prefix.partition(",")
    model = find_model(model_name)
    if not sep:
        return model, None
    div = parse_number(div_text)
    if not math.isfinite(div):
        raise NotANumber(div_text.strip(" "))
    if div <= 0:
        raise NonPositiveDivisor(div)
    return model, div


def parse_extended(prefix: str, body: str, registry: ColorRegistry) -> Color:
    """Does: Evaluate a weighted mixture against `registry`.

    Raises:
        UnknownModelName, NotANumber, NonPositiveDivisor: from the prefix.
        MissingComma: for a term with no ',' between expression and weight.
        NotANumber: for an infinite weight, or weights whose sum overflows.
        EmptyMixture: for a blank body, or weights summing to 0 with no divisor.
        Any simple-grammar error raised by a term.
    """
    model, div = parse_prefix(prefix)
    if not body.strip(" "):
        raise EmptyMixture("Extended expression has no terms", f"{prefix}:{body}")

    total: list[float] | None = None
    weight_sum = 0.0
    for term in body.split(";"):
        expr, sep, weight_text = term.partition(",")
        if not sep:
            raise MissingComma(term)
        color = parse_simple(expr, registry)
        weight = parse_number(weight_text)
        if not math.isfinite(weight):
            raise NotANumber(weight_text.strip(" "))
        weight_sum += weight
        scaled = [p * weight for p in color.convert(model).params]
        total = scaled if total is None else [a + b for a, b in zip(total, scaled)]

    if div is None:
        if not math.isfinite(weight_sum):
            raise NotANumber(f"{weight_sum}")
        if weight_sum == 0:
            raise EmptyMixture("Mixture weights sum to zero", f"{prefix}:{body}")
        div = weight_sum
    debug(f"{model}:{body!r} sum={total} div={div:g}", topic="parse")
    return from_params(model, [p / div for p in total])
