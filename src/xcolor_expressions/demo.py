# src/xcolor_expressions/demo.py
import argparse
import json
import logging
import sys


def describe(color, precision=None):
    """Build the JSON-friendly view of a color: model, params and rendered forms."""
    from .render import css_code, html_code, tex_code, to_bytes

    return {
        "model": str(color.model),
        "params": list(color.params),
        "tex": tex_code(color, precision),
        "css": css_code(color, precision),
        "html": html_code(color),
        "bytes": list(to_bytes(color)),
    }


def build_parser():
    parser = argparse.ArgumentParser(
        prog="xcolor-demo",
        description="Resolve xcolor-style color expressions (e.g. red!40!blue, cmyk:red,1;blue,1).",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Color expressions to resolve (default: red!50!blue)",
    )
    parser.add_argument(
        "--preset",
        action="append",
        default=[],
        help="Extra preset to load into the registry (repeatable: dvips, svg)",
    )
    parser.add_argument("--convert", choices=["gray", "rgb", "cmyk"], help="Convert results to a model")
    parser.add_argument("--complement", action="store_true", help="Output the complementary colors")
    parser.add_argument("--precision", type=int, default=None, help="Decimals for tex/css output")
    parser.add_argument("--list-presets", action="store_true", help="List available presets and exit")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI demo: parse color expressions, optionally convert/complement, print JSON."""
    from .color import find_model
    from .errors import ColorExpressionError, UnknownPreset
    from .parsing import parse
    from .registry import available_presets, get_default_registry

    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    if args.list_presets:
        print("\n".join(available_presets()))
        return 0

    expressions = args.expressions or ["red!50!blue"]
    try:
        registry = get_default_registry()
        for preset_id in args.preset:
            registry.load_preset(preset_id)

        result = {}
        for expr in expressions:
            color = parse(expr, registry)
            if args.convert:
                color = color.convert(find_model(args.convert))
            if args.complement:
                color = color.complement()
            result[expr] = describe(color, args.precision)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except (ColorExpressionError, UnknownPreset) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
