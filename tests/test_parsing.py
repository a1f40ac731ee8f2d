# tests/test_parsing.py
"""Expression parsing: top-level dispatch, blend-chain and weighted-mixture grammars."""

from __future__ import annotations

import pytest

from xcolor_expressions import parse
from xcolor_expressions.color import CmykColor, GrayColor, Model, RgbColor, gray, rgb
from xcolor_expressions.errors import (
    ColorExpressionError,
    DoubledBang,
    EmptyMixture,
    MissingComma,
    NonPositiveDivisor,
    NotANumber,
    TooManyColons,
    UnknownColorName,
    UnknownModelName,
)
from xcolor_expressions.parsing import WHITE, parse_number, parse_prefix
from xcolor_expressions.render import html_code


def params(expr, registry):
    return parse(expr, registry).params


# ──────────────────────────────────────────────────────────────────────────────
# Numbers & dispatch
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,expect",
    [("50", 50.0), (" 12.5 ", 12.5), ("-3", -3.0), ("1e2", 100.0), (".5", 0.5), ("+2.", 2.0)],
)
def test_parse_number_ok(text, expect):
    assert parse_number(text) == expect


@pytest.mark.parametrize(
    "text",
    ["", "  ", "abc", "nan", "1,5", "\t50", "50\n", "5_0", "0x10", "\u0665\u0660", "1 0"],
)
def test_parse_number_rejects(text):
    with pytest.raises(NotANumber):
        parse_number(text)


def test_parse_number_keeps_infinities():
    assert parse_number(" inf ") == float("inf")
    assert parse_number("-Infinity") == float("-inf")


def test_too_many_colons(registry):
    with pytest.raises(TooManyColons):
        parse("a:b:c", registry)


def test_errors_share_a_base_class(registry):
    with pytest.raises(ColorExpressionError):
        parse("red!!blue", registry)
    with pytest.raises(ValueError):
        parse("a:b:c", registry)


def test_parse_uses_shared_registry_by_default():
    assert parse("red") == RgbColor(1, 0, 0)


# ──────────────────────────────────────────────────────────────────────────────
# Blend-chain grammar
# ──────────────────────────────────────────────────────────────────────────────
def test_plain_name(registry):
    assert parse("red", registry) == registry.lookup("red")
    assert parse(".", registry) == GrayColor(0)


def test_half_red_half_blue(registry):
    assert parse("red!50!blue", registry) == rgb(0.5, 0, 0.5)


def test_spaces_around_fields_are_ignored(registry):
    assert parse(" red ! 50 ! blue ", registry) == rgb(0.5, 0, 0.5)


def test_trailing_percent_blends_with_white(registry):
    assert params("red!30", registry) == pytest.approx((1, 0.7, 0.7))
    out = parse("white!30", registry)
    assert isinstance(out, GrayColor)
    assert out.gray == pytest.approx(1.0)
    assert WHITE == gray(1)


def test_accumulator_is_the_receiver(registry):
    assert params("red!60!blue!20!green", registry) == pytest.approx((0.12, 0.8, 0.08))
    assert params("red!50!blue!50", registry) == pytest.approx((0.75, 0.5, 0.75))


def test_percent_bounds(registry):
    assert parse("red!100!blue", registry) == RgbColor(1, 0, 0)
    assert parse("red!0!blue", registry) == RgbColor(0, 0, 1)
    assert parse("red!150!blue", registry) == RgbColor(1, 0, 0)
    assert parse("red!-20!blue", registry) == RgbColor(0, 0, 1)


def test_gray_start_takes_model_of_richer_color(registry):
    assert parse("black!50", registry) == GrayColor(0.5)
    out = parse("black!50!red", registry)
    assert out.model is Model.RGB
    assert out.params == pytest.approx((0.5, 0, 0))


def test_mixed_model_chain(registry):
    out = parse("cyan!50!red!50!gray", registry)
    assert out.model is Model.CMYK
    # cyan ⊕ red in cmyk = (0.5, 0.5, 0.5, 0); then half with gray k=0.5
    assert out.params == pytest.approx((0.25, 0.25, 0.25, 0.25))


@pytest.mark.parametrize("expr", ["red!!blue", "red!!", "red!50!!30", "red!50!blue!!green"])
def test_doubled_bang(registry, expr):
    with pytest.raises(DoubledBang):
        parse(expr, registry)


@pytest.mark.parametrize("expr", ["red!", "red!abc!blue", "red!50!blue!x", "red!\t50_0\t!blue"])
def test_bad_percent(registry, expr):
    with pytest.raises(NotANumber):
        parse(expr, registry)


@pytest.mark.parametrize("expr,name", [("nope", "nope"), ("red!50!nope", "nope"), ("red!50!", "")])
def test_unknown_names(registry, expr, name):
    with pytest.raises(UnknownColorName) as exc:
        parse(expr, registry)
    assert exc.value.name == name


# ──────────────────────────────────────────────────────────────────────────────
# Weighted-mixture grammar
# ──────────────────────────────────────────────────────────────────────────────
def test_cmyk_mixture_divides_by_weight_sum(registry):
    out = parse("cmyk:red,1;blue,1", registry)
    assert out == CmykColor(0.5, 1, 0.5, 0)


def test_rgb_mixture_weights(registry):
    assert params("rgb:red,1;blue,3", registry) == pytest.approx((0.25, 0, 0.75))


def test_explicit_divisor(registry):
    assert params("rgb,2:red,1;blue,1", registry) == pytest.approx((0.5, 0, 0.5))
    assert parse("rgb,1:red,1;blue,1", registry) == RgbColor(1, 0, 1)
    assert parse("rgb,1:red,1;blue,-1", registry) == RgbColor(1, 0, 0)


def test_gray_mixture(registry):
    assert parse("gray:white,1;black,1", registry) == GrayColor(0.5)


def test_terms_are_blend_chains(registry):
    out = parse("rgb:red!50!blue,2;green,2", registry)
    assert out.params == pytest.approx((0.25, 0.5, 0.25))


def test_single_term_is_fresh_value(registry):
    assert parse("rgb:red,1", registry) == RgbColor(1, 0, 0)
    assert parse("gray:red,1", registry).params == pytest.approx((0.3,))


def test_prefix_is_trimmed(registry):
    assert params(" rgb , 2 :red,1;blue,1", registry) == pytest.approx((0.5, 0, 0.5))
    assert parse_prefix("cmyk") == (Model.CMYK, None)
    assert parse_prefix("rgb,4") == (Model.RGB, 4.0)


@pytest.mark.parametrize(
    "expr,error",
    [
        ("hsb:red,1", UnknownModelName),
        ("RGB:red,1", UnknownModelName),
        ("rgb,0:red,1", NonPositiveDivisor),
        ("rgb,-2:red,1", NonPositiveDivisor),
        ("rgb,x:red,1", NotANumber),
        ("rgb:red", MissingComma),
        ("rgb:red,1;blue", MissingComma),
        ("rgb:red,1;", MissingComma),
        ("rgb:red,x", NotANumber),
        ("rgb:nope,1", UnknownColorName),
        ("rgb:red!!blue,1", DoubledBang),
        ("rgb:", EmptyMixture),
        ("rgb:   ", EmptyMixture),
        ("rgb:red,1;blue,-1", EmptyMixture),
        ("gray:white,inf", NotANumber),
        ("rgb:red,-inf;blue,1", NotANumber),
        ("rgb:red,1e308;red,1e308", NotANumber),
        ("rgb,inf:red,1", NotANumber),
    ],
)
def test_mixture_errors(registry, expr, error):
    with pytest.raises(error):
        parse(expr, registry)


def test_overflowing_sum_with_divisor_stays_in_range(registry):
    out = parse("rgb,1:red,1e308;red,1e308", registry)
    assert out.params == (1.0, 0.0, 0.0)
    assert html_code(out) == "#FF0000"


def test_infinite_percent_clamps_in_chains(registry):
    assert parse("red!inf!blue", registry) == RgbColor(1, 0, 0)
    assert parse("red!-inf!blue", registry) == RgbColor(0, 0, 1)


def test_numeric_terms_are_names_not_params(registry):
    # '255,0,0' splits on its first comma: '255' is looked up as a color name
    with pytest.raises(UnknownColorName) as exc:
        parse("rgb,255:255,0,0;0,0,255,1", registry)
    assert exc.value.name == "255"


def test_mixture_with_dvips_names(registry):
    registry.load_preset("dvips")
    out = parse("cmyk:Red,1;Yellow,1", registry)
    assert out == CmykColor(0, 0.5, 1, 0)
