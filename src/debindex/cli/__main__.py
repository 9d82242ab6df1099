#!/usr/bin/env python3

import argparse
import sys

from debindex.core.app import get_context
from debindex.cli import catalog, config, inspect_deb, readback


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="debindex", description="Debian package metadata indexing tools")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    inspect_deb.register(subparsers)
    readback.register(subparsers)
    catalog.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        ctx = get_context()  # built once
        sys.exit(args.func(args, ctx))
    parser.print_help()
    sys.exit(1)


if __name__ == "__main__":
    main()
