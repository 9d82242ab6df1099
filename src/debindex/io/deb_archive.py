#!/usr/bin/env python3
"""
Purpose:
    Reads the control file out of a Debian binary package.

    A .deb is an `ar` archive holding `debian-binary`, `control.tar[.gz|.xz|.bz2]`
    and `data.tar.*`. The control record is the `./control` member of the
    control tarball.
"""
from __future__ import annotations

import io
import tarfile
from pathlib import Path
from typing import Dict, List, Union

from debindex.core.constants import DEFAULT_TEXT_ENCODING
from debindex.core.utils import split_lines

AR_MAGIC = b"!<arch>\n"
AR_HEADER_SIZE = 60
AR_FMAG = b"`\n"

CONTROL_MEMBERS = ("control.tar", "control.tar.gz", "control.tar.xz", "control.tar.bz2", "control.tar.zst")
CONTROL_FILE_NAMES = ("./control", "control")


class DebArchiveError(ValueError):
    """The file is not a readable Debian package."""


# --- Public API --- #

def read_control_lines(path: Union[str, Path]) -> List[str]:
    """
    Return the lines of the control file inside the package at `path`.

    Raises:
        FileNotFoundError: if the package does not exist
        DebArchiveError: if the archive is malformed or has no control file
    """
    p = Path(path)
    members = _read_ar_members(p.read_bytes(), p.name)

    name = next((n for n in CONTROL_MEMBERS if n in members), None)
    if name is None:
        raise DebArchiveError(f"{p.name}: no control tarball found")

    text = _extract_control(members[name], f"{p.name}:{name}")
    return split_lines(text)


# --- Internals --- #

def _read_ar_members(data: bytes, label: str) -> Dict[str, bytes]:
    """Split an `ar` archive into {member name: bytes}."""
    if not data.startswith(AR_MAGIC):
        raise DebArchiveError(f"{label}: not an ar archive")

    members: Dict[str, bytes] = {}
    offset = len(AR_MAGIC)
    while offset + AR_HEADER_SIZE <= len(data):
        header = data[offset:offset + AR_HEADER_SIZE]
        if header[58:60] != AR_FMAG:
            raise DebArchiveError(f"{label}: corrupt member header at offset {offset}")
        name = header[0:16].decode("ascii", errors="replace").strip().rstrip("/")
        try:
            size = int(header[48:58].decode("ascii").strip())
        except ValueError as e:
            raise DebArchiveError(f"{label}: bad member size at offset {offset}") from e

        start = offset + AR_HEADER_SIZE
        end = start + size
        if end > len(data):
            raise DebArchiveError(f"{label}: member {name!r} is truncated")
        members[name] = data[start:end]
        offset = end + (size % 2)  # members are 2-byte aligned
    return members


def _extract_control(tar_bytes: bytes, label: str) -> str:
    try:
        with tarfile.open(fileobj=io.BytesIO(tar_bytes), mode="r:*") as tar:
            for candidate in CONTROL_FILE_NAMES:
                try:
                    member = tar.getmember(candidate)
                except KeyError:
                    continue
                fh = tar.extractfile(member)
                if fh is None:
                    break
                return fh.read().decode(DEFAULT_TEXT_ENCODING)
    except (tarfile.TarError, EOFError, OSError, UnicodeDecodeError) as e:
        raise DebArchiveError(f"{label}: cannot read control tarball ({e})") from e
    raise DebArchiveError(f"{label}: no control file in tarball")
