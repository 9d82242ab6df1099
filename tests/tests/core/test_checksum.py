#!/usr/bin/env python3
import logging
from pathlib import Path

import pytest

from debindex.core.checksum import acquire_checksum, checksum_outcome
from debindex.core.diagnostics import Diagnostics


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# --- Present and readable --- #

@pytest.mark.parametrize("content,expected", [
    ("d41d8cd98f00b204e9800998ecf8427e\n", "d41d8cd98f00b204e9800998ecf8427e"),
    ("d41d8cd98f00b204e9800998ecf8427e  hello_2.10_amd64.deb\n", "d41d8cd98f00b204e9800998ecf8427e"),
    ("  abc123 \r\n", "abc123"),
    ("abc\tfile.deb", "abc"),
])
def test_reads_first_token(tmp_path: Path, content, expected):
    diags = Diagnostics()
    path = _write(tmp_path / "pkg.deb.md5", content)
    assert acquire_checksum(path, diags) == expected
    assert diags.is_ok()


def test_empty_file_gives_none(tmp_path: Path):
    diags = Diagnostics()
    assert acquire_checksum(_write(tmp_path / "x.md5", "  \n"), diags) is None
    assert diags.is_ok()


# --- Missing: not an error --- #

def test_none_path_gives_none():
    diags = Diagnostics()
    assert acquire_checksum(None, diags) is None
    assert len(diags) == 0


def test_missing_file_gives_none(tmp_path: Path):
    diags = Diagnostics()
    assert acquire_checksum(tmp_path / "missing.md5", diags) is None
    assert diags.is_ok()


# --- Unreadable: recorded, not raised --- #

def test_unreadable_file_is_recorded(tmp_path: Path, caplog):
    path = _write(tmp_path / "x.md5", "abc")

    def _boom(p):
        raise PermissionError("denied")

    diags = Diagnostics()
    with caplog.at_level(logging.WARNING, logger="debindex.core.checksum"):
        assert acquire_checksum(path, diags, reader=_boom) is None
    assert len(diags) == 1
    assert "unreadable checksum file" in list(diags)[0]
    assert "denied" in caplog.text


def test_undecodable_file_is_recorded(tmp_path: Path):
    path = tmp_path / "x.md5"
    path.write_bytes(b"\xff\xfe\xfa")
    diags = Diagnostics()
    assert acquire_checksum(path, diags) is None
    assert not diags.is_ok()


def test_other_reader_errors_propagate(tmp_path: Path):
    path = _write(tmp_path / "x.md5", "abc")

    def _bug(p):
        raise KeyError("bug")

    with pytest.raises(KeyError):
        acquire_checksum(path, Diagnostics(), reader=_bug)


# --- Outcome wrapper --- #

def test_checksum_outcome(tmp_path: Path):
    ok = checksum_outcome(_write(tmp_path / "a.md5", "abc"))
    assert ok.value == "abc"
    assert ok.ok

    bad = checksum_outcome(_write(tmp_path / "b.md5", "abc"), reader=lambda p: (_ for _ in ()).throw(OSError("io")))
    assert bad.value is None
    assert not bad.ok
