#!/usr/bin/env python3
"""Parse a tag catalog file and print its groups as JSON.

Usage:
    # All groups with their tags
    python3 scripts/tag_catalog_reader.py catalogs/tags.txt

    # One group, by header name
    python3 scripts/tag_catalog_reader.py catalogs/tags.txt --group Generic

    # Group names only, written to a file
    python3 scripts/tag_catalog_reader.py catalogs/tags.txt --names-only \
      --output out/group_names.json
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from tag_catalog.group_parser import GroupParser
from tag_catalog.io_utils import dump_json, save_json
from tag_catalog.tag_types import ParserOptions, TagCatalogError

log = logging.getLogger("tag_catalog_reader")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse a tag catalog and print its groups as JSON."
    )
    parser.add_argument("path", type=Path, help="Path to the tag catalog file")
    parser.add_argument(
        "--group",
        default=None,
        help="Only output the first group with this name.",
    )
    parser.add_argument(
        "--names-only",
        action="store_true",
        help="Output the list of group names instead of full groups.",
    )
    parser.add_argument(
        "--keep-unnamed-tail",
        action="store_true",
        help="Also emit the trailing group when no header named it.",
    )
    parser.add_argument(
        "--options",
        type=Path,
        default=None,
        help="Parser options JSON file (flags on the command line win).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    return parser


def resolve_options(args: argparse.Namespace) -> ParserOptions:
    options = ParserOptions.from_json(args.options) if args.options else ParserOptions()
    if args.keep_unnamed_tail:
        options = dataclasses.replace(options, keep_unnamed_tail=True)
    return options


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        options = resolve_options(args)
        parser = GroupParser.construct_from_path(args.path, options)
        parser.parse()
    except (TagCatalogError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    groups = parser.groups()
    log.info(
        "Parsed %d groups, %d tags from %s",
        len(groups),
        sum(len(g.tags) for g in groups),
        args.path,
    )

    result: object
    if args.group is not None:
        match = next((g for g in groups if g.name == args.group), None)
        if match is None:
            print(f"Error: group not found: {args.group}", file=sys.stderr)
            return 1
        result = match.name if args.names_only else match.to_dict()
    elif args.names_only:
        result = [g.name for g in groups]
    else:
        result = [g.to_dict() for g in groups]

    if args.output is not None:
        save_json(result, args.output)
        log.info("Wrote %s", args.output)
    else:
        sys.stdout.buffer.write(dump_json(result))
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
