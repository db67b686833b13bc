from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from mdbuild.cli import app
from tests.fixtures import read_page, write_tree

runner = CliRunner()


def test_cli_builds_site(tmp_path: Path) -> None:
    src = write_tree(tmp_path / "src", {"a.md": "_A_", "logo.svg": "<svg/>"})
    dst = tmp_path / "dst"

    result = runner.invoke(app, [str(src), str(dst)])

    assert result.exit_code == 0, result.output
    assert "<em>A</em>" in read_page(dst / "a.html")
    assert (dst / "logo.svg").exists()


def test_cli_extension_option(tmp_path: Path) -> None:
    src = write_tree(tmp_path / "src", {"a.foo": "_a_", "b.md": "_b_"})
    dst = tmp_path / "dst"

    result = runner.invoke(app, [str(src), str(dst), "-e", ".foo"])

    assert result.exit_code == 0, result.output
    assert (dst / "a.html").exists()
    assert (dst / "b.md").exists()


def test_cli_reports_missing_source(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "nope"), str(tmp_path / "dst")])

    assert result.exit_code == 1
    assert "Error: Source directory not found" in result.output
    assert "Traceback" not in result.output


def test_cli_debug_prints_traceback(tmp_path: Path) -> None:
    result = runner.invoke(
        app, [str(tmp_path / "nope"), str(tmp_path / "dst"), "--debug"]
    )

    assert result.exit_code == 1
    assert "Traceback" in result.output


def test_cli_requires_arguments() -> None:
    result = runner.invoke(app, [])

    assert result.exit_code != 0
