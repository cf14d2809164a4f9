#!/usr/bin/env python3
"""
wktshapes - Main Entry Point

Parse Well Known Text shape definitions from the command line.
"""

import argparse
import logging
import sys


def build_parser(use_extensions: bool):
    """Create a WKT parser bound to the reference factory."""
    from wktshapes import SimpleShapeFactory, WKTShapeParser

    if use_extensions:
        return WKTShapeParser.with_extensions(SimpleShapeFactory())
    return WKTShapeParser(SimpleShapeFactory())


def run_parse(args):
    """Parse and display a WKT shape."""
    from wktshapes import MalformedInput, WKTWriter

    wkt_parser = build_parser(args.extensions)
    try:
        shape = wkt_parser.parse(args.wkt)
    except MalformedInput as e:
        print(f"Error: {e}")
        print(f"  {args.wkt}")
        print(f"  {' ' * e.offset}^")
        return 1
    print(WKTWriter.format_for_display(shape))
    return 0


def run_keywords(args):
    """List the shape keywords the parser understands."""
    wkt_parser = build_parser(args.extensions)
    print("Supported shape keywords:")
    print()
    for keyword in wkt_parser.registry.keywords:
        print(f"  {keyword.upper()}")
    return 0


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="wktshapes - Parse Well Known Text shape definitions"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parser activity to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse and display a WKT shape")
    parse_parser.add_argument("wkt", help="WKT text, e.g. 'POINT (1 2)'")
    parse_parser.add_argument(
        "-x", "--extensions",
        action="store_true",
        help="Also accept LINESTRING, POLYGON, MULTIPOINT and GEOMETRYCOLLECTION"
    )

    # List keywords command
    keywords_parser = subparsers.add_parser("keywords", help="List supported shape keywords")
    keywords_parser.add_argument(
        "-x", "--extensions",
        action="store_true",
        help="Include the extension shape types"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "parse":
        return run_parse(args)
    elif args.command == "keywords":
        return run_keywords(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
