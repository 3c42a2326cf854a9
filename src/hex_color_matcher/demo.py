# src/hex_color_matcher/demo.py
import argparse
import json
import logging
import os
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexmatch-demo",
        description="Match hex colors against the reference database, tag patterns, compare hexes.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        dest="data_dir",
        help="Directory holding colors.json / data.json / config.json",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Best reference matches for one hex")
    analyze.add_argument("hex", help="Hex code, e.g. FF0000 or #ff0000")
    analyze.add_argument("--item", default=None, help="Item name, used to infer the piece type")

    compare = sub.add_parser("compare", help="Average color and distances of several hexes")
    compare.add_argument("hexes", nargs="+", help="Two or more hex codes")

    pattern = sub.add_parser("pattern", help="Pattern and word tags for one hex")
    pattern.add_argument("hex", help="Hex code")

    search = sub.add_parser("search", help="Fuzzy search over reference color names")
    search.add_argument("query", nargs="+", help="Name to look for")
    search.add_argument("--limit", type=int, default=10, help="Max hits to return")

    return parser


def _run(args: argparse.Namespace) -> object:
    from .matching.color.utils import canonical_hex, is_dark
    from .matching.database import load_database
    from .matching.orchestrator import ColorMatcher
    from .matching.settings import load_settings

    matcher = ColorMatcher(
        load_database(base_dir=args.data_dir),
        load_settings(base_dir=args.data_dir),
    )

    if args.command == "analyze":
        result = matcher.analyze(args.hex, args.item)
        return {
            "hex": canonical_hex(args.hex),
            "is_dark": is_dark(args.hex),
            "result": result.to_dict() if result else None,
            "tags": matcher.tags(args.hex).to_dict(),
        }
    if args.command == "compare":
        return matcher.compare(args.hexes).to_dict()
    if args.command == "pattern":
        return matcher.tags(args.hex).to_dict()
    hits = matcher.search(" ".join(args.query), limit=args.limit)
    return [hit._asdict() for hit in hits]


def main(argv=None):
    """CLI demo: analyze a hex, compare hexes, tag patterns or search names; prints JSON."""
    args = _build_parser().parse_args(argv)

    if args.debug:
        os.environ["HEXMATCH_DEBUG_TOPICS"] = "all"
        from .matching.general.utils import reload_topics

        reload_topics()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        output = _run(args)
    except (ValueError, TypeError, OSError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
