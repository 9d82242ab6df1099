#!/usr/bin/env python3
"""
debindex configuration loader.
"""

import os
from pathlib import Path
from typing import Any, Dict, Final

from debindex.core.constants import CHECKSUM_SUFFIX, DEB_EXTENSION, DEB_PACKAGE_TYPE
from debindex.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "package_type": DEB_PACKAGE_TYPE,
    "extension": DEB_EXTENSION,
    "checksum_suffix": CHECKSUM_SUFFIX,
    "extra_fields": [],
    "logging": {"level": "WARNING"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "debindex" / "config.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load debindex configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/debindex/config.json)
        3. Project config (./debindex.json)
        4. Environment overrides:
           - DEBINDEX_PACKAGE_TYPE
           - DEBINDEX_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = dict(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "debindex.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    package_type_env = os.getenv("DEBINDEX_PACKAGE_TYPE")
    if package_type_env:
        config["package_type"] = package_type_env.strip()

    log_level_env = os.getenv("DEBINDEX_LOG_LEVEL")
    if log_level_env:
        config["logging"] = {**config.get("logging", {}), "level": log_level_env}

    return config
