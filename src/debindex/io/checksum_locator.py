#!/usr/bin/env python3
"""Locates the companion checksum file of an artifact on disk."""
from pathlib import Path
from typing import Union

from debindex.core.constants import CHECKSUM_SUFFIX


def locate_checksum(artifact_path: Union[str, Path], suffix: str = CHECKSUM_SUFFIX) -> Path:
    """Return `<artifact><suffix>` next to the artifact. The file may not exist."""
    p = Path(artifact_path)
    return p.with_name(p.name + suffix)
