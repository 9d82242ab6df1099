#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

import yaml

from debindex.core.app_context import AppContext
from debindex.core.document import IndexDocument


def readback(args, ctx: AppContext) -> int:
    try:
        doc = IndexDocument.from_file(Path(args.file))
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"{args.file}: {e}", file=sys.stderr)
        return 1

    result = ctx.mapper.to_metadata(doc)
    if not result.recognized:
        print(f"{args.file}: not a {ctx.mapper.package_type!r} document", file=sys.stderr)
        return 1

    payload = {"attributes": result.attributes, "checksum": result.checksum}
    print(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), end="")
    return 0


def register(subparser):
    parser = subparser.add_parser("readback", help="Recover package metadata from stored document fields (YAML).")
    parser.add_argument("file", help="YAML mapping of stored key -> value.")
    parser.set_defaults(func=readback)
