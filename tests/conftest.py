#!/usr/bin/env python3
import io
import tarfile
from pathlib import Path

import pytest


def _ar_member(name: str, data: bytes) -> bytes:
    header = (
        f"{name + '/':<16}"
        f"{0:<12}"
        f"{0:<6}"
        f"{0:<6}"
        f"{100644:<8}"
        f"{len(data):<10}"
    ).encode("ascii") + b"`\n"
    pad = b"\n" if len(data) % 2 else b""
    return header + data + pad


def _control_tarball(control_text: str, mode: str, member_name: str) -> bytes:
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode=mode) as tar:
        payload = control_text.encode("utf-8")
        info = tarfile.TarInfo(member_name)
        info.size = len(payload)
        tar.addfile(info, io.BytesIO(payload))
    return buf.getvalue()


def build_deb_bytes(
    control_text: str,
    *,
    compression: str = "gz",
    member_name: str = "./control",
    include_control: bool = True,
) -> bytes:
    """Assemble a minimal .deb: debian-binary, control.tar[.gz|.xz|.bz2], data.tar.gz."""
    suffix = {"": "control.tar", "gz": "control.tar.gz", "xz": "control.tar.xz", "bz2": "control.tar.bz2"}[compression]
    mode = f"w:{compression}" if compression else "w"
    parts = [b"!<arch>\n", _ar_member("debian-binary", b"2.0\n")]
    if include_control:
        parts.append(_ar_member(suffix, _control_tarball(control_text, mode, member_name)))
    parts.append(_ar_member("data.tar.gz", _control_tarball("", "w:gz", "./placeholder")))
    return b"".join(parts)


@pytest.fixture
def make_deb(tmp_path: Path):
    """Write a .deb file under tmp_path and return its path."""
    def _make(name: str, control_text: str, **kwargs) -> Path:
        path = tmp_path / name
        path.write_bytes(build_deb_bytes(control_text, **kwargs))
        return path
    return _make


HELLO_CONTROL = (
    "Package: hello\n"
    "Version: 2.10-3\n"
    "Architecture: amd64\n"
    "Maintainer: Santiago Vila <sanvila@debian.org>\n"
    "Installed-Size: 280\n"
    "Depends: libc6 (>= 2.34)\n"
    "Section: devel\n"
    "Priority: optional\n"
    "Homepage: https://www.gnu.org/software/hello/\n"
    "Description: example package based on GNU hello\n"
    " The GNU hello program produces a familiar, friendly greeting.\n"
)


@pytest.fixture
def hello_control() -> str:
    return HELLO_CONTROL
