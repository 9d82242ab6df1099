#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

import yaml

from debindex.core.app_context import AppContext
from debindex.core.constants import FILENAME_FIELD
from debindex.core.control.parser import ParseError, parse_control_file
from debindex.core.document import IndexDocument
from debindex.core.indexer import ArtifactContext
from debindex.core.mapping.artifact import ArtifactInfo
from debindex.io.deb_archive import DebArchiveError


def inspect(args, ctx: AppContext) -> int:
    path = Path(args.file)
    if not path.is_file():
        print(f"{path}: file not found", file=sys.stderr)
        return 1

    info = ArtifactInfo(
        group_id=args.group_id,
        artifact_id=args.artifact_id or path.name.split("_")[0],
        version=args.version or "",
        packaging=ctx.mapper.package_type,
        file_name=path.name,
    )

    try:
        if args.control:
            # raw control file: parse it directly, no archive or checksum involved
            info.attributes = {**parse_control_file(path), FILENAME_FIELD: info.relative_path}
            errors = []
        else:
            actx = ArtifactContext(info=info, artifact_path=path)
            ctx.creator.populate_artifact_info(actx)
            errors = list(actx.errors)
    except (ParseError, DebArchiveError) as e:
        print(f"{path}: {e}", file=sys.stderr)
        return 1

    doc = IndexDocument()
    ctx.creator.update_document(info, doc)
    print(doc.to_yaml(), end="")

    if args.all_attributes:
        print(yaml.safe_dump({"attributes": info.attributes}, sort_keys=False, allow_unicode=True), end="")

    for err in errors:
        print(f"{path}: {err}", file=sys.stderr)
    return 0


def register(subparser):
    parser = subparser.add_parser("inspect", help="Show the index document fields of a Debian package.")
    parser.add_argument("file", help="A .deb package (or a control file with --control).")
    parser.add_argument("--control", action="store_true", help="Treat FILE as a raw control file.")
    parser.add_argument("--group-id", default="local", help="Group id used for the relative path.")
    parser.add_argument("--artifact-id", default=None, help="Artifact id (default: package name from FILE).")
    parser.add_argument("--version", default=None, help="Artifact version used for the relative path.")
    parser.add_argument(
        "--all-attributes",
        action="store_true",
        help="Also print every parsed attribute, including ones not stored in the index.",
    )
    parser.set_defaults(func=inspect)
