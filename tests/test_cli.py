import json
import os
import sys

import pytest

from extension_count.cli import main

from helpers import write_file


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_file(tmp_path / "src" / "a.ts")
    write_file(tmp_path / "src" / "b.ts")
    write_file(tmp_path / "src" / "c.rs")
    write_file(tmp_path / "src" / "LICENSE")
    return tmp_path


def test_json_output(workdir, capsys):
    write_file(workdir / "labels.json", '{"ts": "TypeScript"}')
    assert main(["src", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data) == 1
    table = data[0]
    assert table["title"] == "src"
    assert table["total_files"] == 4
    assert [r["extension"] for r in table["rows"]] == ["", ".rs", ".ts"]
    assert table["rows"][2]["label"] == "TypeScript"


def test_text_output(workdir, capsys):
    assert main(["src", "--ci"]) == 0
    out = capsys.readouterr().out
    assert "Results for: src" in out
    assert "Total files: 4" in out
    assert ".ts" in out
    assert "\x1b[" not in out


def test_limit_truncates_file_list(workdir, capsys):
    assert main(["src", "--ci", "--limit", "1"]) == 0
    assert "1 more files" in capsys.readouterr().out


def test_missing_path_fails(workdir, capsys):
    assert main(["does-not-exist", "--json"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR:" in captured.err
    assert "does-not-exist" in captured.err


def test_keep_going_reports_remaining_roots(workdir, capsys):
    assert main(["does-not-exist", "src", "--json", "--keep-going"]) == 1
    captured = capsys.readouterr()
    data = json.loads(captured.out)
    assert [t["title"] for t in data] == ["src"]
    assert "does-not-exist" in captured.err


def test_invalid_labels_file_fails_before_scan(workdir, capsys):
    write_file(workdir / "labels.json", "{")
    assert main(["src", "--json"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid label data" in captured.err


def test_explicit_labels_path(workdir, capsys):
    write_file(workdir / "conf" / "names.json", '{"rs": "Rust"}')
    assert main(["src", "--json", "--labels", "conf/names.json"]) == 0
    rows = json.loads(capsys.readouterr().out)[0]["rows"]
    assert {r["extension"]: r["label"] for r in rows}[".rs"] == "Rust"


def test_config_file_supplies_defaults(workdir, capsys):
    write_file(workdir / ".extension-count.json", json.dumps({"exclude": ["*.rs"], "ci": True}))
    assert main(["src", "--json"]) == 0
    table = json.loads(capsys.readouterr().out)[0]
    assert table["total_files"] == 3

    assert main(["src", "--json", "--no-config"]) == 0
    table = json.loads(capsys.readouterr().out)[0]
    assert table["total_files"] == 4


def test_malformed_config_is_ignored(workdir, capsys):
    write_file(workdir / ".extension-count.json", "not json")
    assert main(["src", "--json"]) == 0
    captured = capsys.readouterr()
    assert json.loads(captured.out)[0]["total_files"] == 4
    assert "WARNING:" in captured.err


def test_out_writes_file(workdir, capsys):
    assert main(["src", "--json", "--out", "reports/out.json"]) == 0
    assert capsys.readouterr().out == ""
    data = json.loads((workdir / "reports" / "out.json").read_text(encoding="utf-8"))
    assert data[0]["total_files"] == 4


def test_requires_inputs(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_negative_limit_rejected(workdir):
    with pytest.raises(SystemExit) as excinfo:
        main(["src", "--limit", "-1"])
    assert excinfo.value.code == 2


@pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that accepts non-UTF-8 names")
def test_undecodable_file_name_is_rendered_lossily(workdir, capsys):
    with open(os.path.join(os.fsencode(workdir / "src"), b"\xff.txt"), "wb"):
        pass

    assert main(["src", "--ci", "--limit", "0"]) == 0
    assert "\ufffd.txt" in capsys.readouterr().out

    assert main(["src", "--ci", "--limit", "0", "--out", "out.txt"]) == 0
    text = (workdir / "out.txt").read_text(encoding="utf-8")
    assert "\ufffd.txt" in text
    assert "Total files: 5" in text
