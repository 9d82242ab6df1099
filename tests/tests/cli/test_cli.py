#!/usr/bin/env python3
import importlib
import json
from pathlib import Path

import pytest
import yaml

from debindex.core.app_context import build_context
from debindex.core.config import DEFAULT_CONFIG

cli_main = importlib.import_module("debindex.cli.__main__")

MD5 = "5d41402abc4b2a76b9719d911017c592"


@pytest.fixture
def run(monkeypatch):
    ctx = build_context(config=dict(DEFAULT_CONFIG), setup_logging=False)
    monkeypatch.setattr(cli_main, "get_context", lambda: ctx)

    def _run(*argv) -> int:
        with pytest.raises(SystemExit) as ei:
            cli_main.main(list(argv))
        return ei.value.code
    return _run


# --- inspect --- #

def test_inspect_deb(run, make_deb, hello_control, capsys):
    deb = make_deb("hello_2.10-3_amd64.deb", hello_control)
    (deb.parent / (deb.name + ".md5")).write_text(MD5 + "\n", encoding="utf-8")

    code = run("inspect", str(deb), "--group-id", "org.gnu", "--version", "2.10-3")

    out = yaml.safe_load(capsys.readouterr().out)
    assert code == 0
    assert out["deb_package"] == "hello"
    assert out["deb_installed_size"] == "280"
    assert out["deb_filename"] == "./org/gnu/hello/2.10-3/hello_2.10-3_amd64.deb"
    assert out["deb_md5"] == MD5
    assert "deb_homepage" not in out


def test_inspect_reports_checksum_problem_on_stderr(run, make_deb, hello_control, capsys):
    deb = make_deb("hello_2.10-3_amd64.deb", hello_control)
    (deb.parent / (deb.name + ".md5")).mkdir()

    assert run("inspect", str(deb)) == 0

    captured = capsys.readouterr()
    out = yaml.safe_load(captured.out)
    assert out["deb_package"] == "hello"
    assert "deb_md5" not in out
    assert "unreadable checksum file" in captured.err


def test_inspect_control_file_with_all_attributes(run, tmp_path: Path, capsys):
    control = tmp_path / "control"
    control.write_text("Package: foo\nVersion: 1\nHomepage: https://x\n", encoding="utf-8")

    code = run("inspect", str(control), "--control", "--all-attributes")

    out = capsys.readouterr().out
    assert code == 0
    docs = out.split("attributes:")
    assert yaml.safe_load(docs[0])["deb_package"] == "foo"
    assert "Homepage: https://x" in docs[1]


def test_inspect_malformed_control(run, tmp_path: Path, capsys):
    control = tmp_path / "control"
    control.write_text(" orphan\n", encoding="utf-8")
    assert run("inspect", str(control), "--control") == 1
    assert "continuation line before any field" in capsys.readouterr().err


def test_inspect_missing_file(run, tmp_path: Path, capsys):
    assert run("inspect", str(tmp_path / "nope.deb")) == 1
    assert "file not found" in capsys.readouterr().err


def test_inspect_not_a_deb(run, tmp_path: Path, capsys):
    p = tmp_path / "x.deb"
    p.write_bytes(b"garbage")
    assert run("inspect", str(p)) == 1
    assert "not an ar archive" in capsys.readouterr().err


# --- readback --- #

def test_readback_recognized(run, tmp_path: Path, capsys):
    doc = tmp_path / "doc.yaml"
    doc.write_text(yaml.safe_dump({
        "deb_filename": "./a/b/foo_1_all.deb",
        "deb_package": "foo",
        "deb_md5": MD5,
    }), encoding="utf-8")

    assert run("readback", str(doc)) == 0
    out = yaml.safe_load(capsys.readouterr().out)
    assert out == {
        "attributes": {"Package": "foo", "Filename": "./a/b/foo_1_all.deb"},
        "checksum": MD5,
    }


def test_readback_not_recognized(run, tmp_path: Path, capsys):
    doc = tmp_path / "doc.yaml"
    doc.write_text(yaml.safe_dump({"deb_filename": "foo.jar"}), encoding="utf-8")
    assert run("readback", str(doc)) == 1
    assert "not a 'deb' document" in capsys.readouterr().err


def test_readback_missing_file(run, tmp_path: Path):
    assert run("readback", str(tmp_path / "none.yaml")) == 1


# --- catalog / config / help --- #

def test_catalog_show(run, capsys):
    assert run("catalog", "show") == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 19
    assert lines[0].split()[:2] == ["Package", "deb_package"]
    assert lines[-1].split()[:2] == ["MD5sum", "deb_md5"]


@pytest.mark.parametrize("fmt,loader", [("json", json.loads), ("yaml", yaml.safe_load)])
def test_config_show(run, capsys, fmt, loader):
    assert run("config", "show", "--format", fmt) == 0
    assert loader(capsys.readouterr().out)["package_type"] == "deb"


def test_no_command_prints_help(run, capsys):
    assert run() == 1
    assert "usage: debindex" in capsys.readouterr().out
