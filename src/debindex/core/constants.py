#!/usr/bin/env python3
"""
Core constants used across debindex.

- Package format: packaging label and canonical file extension for Debian packages.
- Stored fields: prefix shared by every stored key written into index documents.
- File handling: default text encoding and checksum file suffix.
- Regular expressions: compiled patterns used by validators.
"""

import re
from typing import Final

# --- Debian package format --- #

# Packaging label carried by artifacts of this format
DEB_PACKAGE_TYPE: Final[str] = "deb"

# Canonical file extension of a Debian binary package
DEB_EXTENSION: Final[str] = ".deb"

# Identifier of the index creator
DEB_CREATOR_ID: Final[str] = "debian-package"

# Every stored key written by this format starts with this prefix
STORED_KEY_PREFIX: Final[str] = "deb_"

# Control field carrying the synthesized relative path of the package
FILENAME_FIELD: Final[str] = "Filename"


# --- File handling --- #

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"

# Suffix of the companion checksum file (e.g. foo_1.0_amd64.deb.md5)
CHECKSUM_SUFFIX: Final[str] = ".md5"


# --- Regular Expressions --- #
# Control field names: printable ASCII except space and colon
CONTROL_FIELD_NAME_RE: re.Pattern[str] = re.compile(r"^[!-9;-~]+$")

# Stored keys: lowercase letter, then lowercase letters/digits/underscores
STORED_KEY_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9_]*$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if not DEB_EXTENSION.startswith("."):
        raise RuntimeError(f"DEB_EXTENSION must start with '.', got {DEB_EXTENSION!r}")
    if not STORED_KEY_ALLOWED_RE.fullmatch(STORED_KEY_PREFIX.rstrip("_")):
        raise RuntimeError(f"STORED_KEY_PREFIX is not a valid stored key stem: {STORED_KEY_PREFIX!r}")

validate_constants()
