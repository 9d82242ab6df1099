#!/usr/bin/env python3
import json

import yaml

from debindex.core.app_context import AppContext


def register(subparsers):
    sp = subparsers.add_parser("config", help="Config utilities")
    sps = sp.add_subparsers(dest="config_cmd")

    showp = sps.add_parser("show", help="Show effective config")
    showp.add_argument("--format", choices=("json", "yaml"), default="json", help="Output format.")
    showp.set_defaults(func=show_config)


def show_config(args, ctx: AppContext) -> int:
    if getattr(args, "format", "json") == "yaml":
        print(yaml.safe_dump(ctx.config, sort_keys=False), end="")
    else:
        print(json.dumps(ctx.config, indent=2))
    return 0
