#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as name validation, path
    derivation, dictionary merge, and file I/O utilities for debindex.
"""

import json
from pathlib import Path
from typing import Dict, Any, List

from debindex.core.constants import (
    CONTROL_FIELD_NAME_RE, STORED_KEY_ALLOWED_RE, DEFAULT_TEXT_ENCODING
)


# --- Validation Helpers --- #

def is_valid_control_field_name(name: str) -> bool:
    """Return True if the name is a legal control field name (e.g. 'Pre-Depends')."""
    return bool(CONTROL_FIELD_NAME_RE.fullmatch(name)) and name[0] not in "#-"


def is_valid_stored_key(key: str) -> bool:
    """Return True if the key fully matches the stored-key pattern (e.g. 'deb_version')."""
    return bool(STORED_KEY_ALLOWED_RE.fullmatch(key))


# --- Artifact Path Helpers --- #

def derive_relative_path(group_id: str, artifact_id: str, version: str, file_name: str) -> str:
    """
    Build the repository-relative path of an artifact.

    Example:
        ("org.example", "hello", "1.0", "hello_1.0_amd64.deb")
            -> "./org/example/hello/1.0/hello_1.0_amd64.deb"
    """
    return "./" + "/".join([group_id.replace(".", "/"), artifact_id, version, file_name])


# --- Text Helpers --- #

def split_lines(text: str) -> List[str]:
    r"""
    Split text on "\n" only, dropping a trailing "\r" from each line.

    Unlike `str.splitlines()`, form feeds and Unicode separators (U+0085,
    U+2028, ...) stay inside the line. A final terminator does not produce a
    trailing empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def read_text(path: Path) -> str:
    """Read a whole text file using the default encoding."""
    return Path(path).read_text(encoding=DEFAULT_TEXT_ENCODING)


def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
