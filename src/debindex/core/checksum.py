#!/usr/bin/env python3
"""
Purpose:
    Checksum acquisition guard. A missing checksum file is not an error; an
    unreadable one is recorded against the artifact and processing continues.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from debindex.core.diagnostics import Diagnostics, Outcome
from debindex.core.utils import read_text

logger = logging.getLogger(__name__)


def acquire_checksum(
    path: Optional[Path],
    diagnostics: Diagnostics,
    *,
    reader: Callable[[Path], str] = read_text,
) -> Optional[str]:
    """
    Read the checksum stored in `path`, if there is one.

    The file holds `md5sum` output (`<hash>  <file name>`) or a bare hash;
    only the first whitespace-separated token is returned.

    Returns:
        The checksum, or None when the file is absent, empty, or unreadable.
    """
    if path is None or not Path(path).exists():
        return None
    try:
        content = reader(Path(path))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read checksum file %s: %s", path, e)
        diagnostics.add(f"{path}: unreadable checksum file ({e})")
        return None
    tokens = content.strip().split()
    return tokens[0] if tokens else None


def checksum_outcome(path: Optional[Path], *, reader: Callable[[Path], str] = read_text) -> Outcome[Optional[str]]:
    """Like `acquire_checksum`, but returns the value together with its diagnostics."""
    diagnostics = Diagnostics()
    value = acquire_checksum(path, diagnostics, reader=reader)
    return Outcome(value=value, diagnostics=diagnostics)
