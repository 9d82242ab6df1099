#!/usr/bin/env python3
from debindex.core.app_context import AppContext


def register(subparsers):
    sp = subparsers.add_parser("catalog", help="Schema catalog utilities")
    sps = sp.add_subparsers(dest="catalog_cmd")

    showp = sps.add_parser("show", help="List the fields stored in index documents")
    showp.set_defaults(func=show_catalog)


def show_catalog(args, ctx: AppContext) -> int:
    rows = [f.as_row() for f in ctx.catalog] + [ctx.mapper.checksum_field.as_row()]
    width = max(len(r["name"]) for r in rows)
    key_width = max(len(r["key"]) for r in rows)
    for r in rows:
        print(f"{r['name']:<{width}}  {r['key']:<{key_width}}  {r['description']}")
    return 0
