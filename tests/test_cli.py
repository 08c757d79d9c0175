# tests/test_cli.py
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from csvdetect.cli import main


def test_cli_detects_file(tmp_path: Path):
    f = tmp_path / "test.csv"
    f.write_text("a;b;c\n1;2;3\n4;5;6\n")
    result = subprocess.run(
        [sys.executable, "-m", "csvdetect.cli", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "delimiter semicolon with score" in result.stdout


def test_cli_stdin():
    result = subprocess.run(
        [sys.executable, "-m", "csvdetect.cli", "--minimal"],
        input=b"a\tb\n1\t2\n",
        capture_output=True,
    )
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "tab"


def test_cli_version():
    result = subprocess.run(
        [sys.executable, "-m", "csvdetect.cli", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "1.0.0" in result.stdout


def test_cli_minimal_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.csv"
    f.write_text("a|b\nc|d\n")
    main(["--minimal", str(f)])
    assert capsys.readouterr().out.strip() == "pipe"


def test_cli_header_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.csv"
    f.write_text('name,site,score\nalice,example.com,3.5\n"bob, jr",example.org,4\n')
    main(["--header", str(f)])
    out = capsys.readouterr().out
    assert "delimiter comma" in out
    assert "header: yes" in out


def test_cli_header_without_evidence(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.csv"
    f.write_text("a,b\nc,d\n")
    main(["--minimal", "--header", str(f)])
    assert capsys.readouterr().out.strip() == "comma unknown"


def test_cli_multiple_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f1 = tmp_path / "a.csv"
    f2 = tmp_path / "b.csv"
    f1.write_text("a,b\nc,d\n")
    f2.write_text("a;b\nc;d\n")
    main([str(f1), str(f2)])
    lines = capsys.readouterr().out.strip().split("\n")
    assert len(lines) == 2
    assert "comma" in lines[0]
    assert "semicolon" in lines[1]


def test_cli_nonexistent_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    f = tmp_path / "ok.csv"
    f.write_text("a,b\n")
    with pytest.raises(SystemExit, match="1"):
        main(["nonexistent_file_xyz.csv", str(f)])
    captured = capsys.readouterr()
    assert "nonexistent_file_xyz.csv" in captured.err
    assert "comma" in captured.out


def test_cli_undecodable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    f = tmp_path / "latin1.csv"
    f.write_bytes("caf\xe9,b\n".encode("latin-1"))
    with pytest.raises(SystemExit, match="1"):
        main([str(f)])
    assert "latin1.csv" in capsys.readouterr().err
    main(["--encoding", "latin-1", str(f)])
    assert "comma" in capsys.readouterr().out


def test_cli_verbose_logs_scores(tmp_path: Path):
    f = tmp_path / "test.csv"
    f.write_text("a,b\nc,d\n")
    result = subprocess.run(
        [sys.executable, "-m", "csvdetect.cli", "-v", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "pattern score" in result.stderr
