from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from kickoff.cli import build_parser, main


def test_parser_defaults_to_working_directory(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    args = build_parser().parse_args([])
    assert args.root.resolve() == tmp_path.resolve()
    assert args.template is None
    assert args.verbose is False


def test_main_initializes_project(template_root: Path):
    stdout = io.StringIO()
    exit_code = main(
        ["--root", str(template_root)],
        stdin=io.StringIO("shop\nA tool\n\nn\n"),
        stdout=stdout,
    )

    assert exit_code == 0
    assert json.loads((template_root / "package.json").read_text(encoding="utf-8"))["name"] == "shop"
    assert (template_root / "README.md").read_text(encoding="utf-8").startswith("# shop")
    assert "Setup complete!" in stdout.getvalue()


def test_main_accepts_template_override(template_root: Path, tmp_path: Path):
    template = tmp_path / "custom.md"
    template.write_text("custom {{PROJECT_NAME}}\n", encoding="utf-8")

    exit_code = main(
        ["--root", str(template_root), "--template", str(template), "--verbose"],
        stdin=io.StringIO("shop\n\n\nn\n"),
        stdout=io.StringIO(),
    )

    assert exit_code == 0
    assert (template_root / "README.md").read_text(encoding="utf-8") == "custom shop\n"


def test_main_rejects_invalid_name(template_root: Path, capsys: pytest.CaptureFixture[str]):
    original = (template_root / "package.json").read_text(encoding="utf-8")

    exit_code = main(
        ["--root", str(template_root)],
        stdin=io.StringIO("Bad Name\n"),
        stdout=io.StringIO(),
    )

    assert exit_code == 1
    assert "lowercase alphanumeric with hyphens only" in capsys.readouterr().err
    assert (template_root / "package.json").read_text(encoding="utf-8") == original
    assert not (template_root / "README.md").exists()


def test_main_reports_unexpected_failure(template_root: Path, capsys: pytest.CaptureFixture[str]):
    (template_root / "package.json").write_text("{broken", encoding="utf-8")

    exit_code = main(
        ["--root", str(template_root)],
        stdin=io.StringIO("shop\n\n\nn\n"),
        stdout=io.StringIO(),
    )

    assert exit_code == 1
    assert "Setup failed:" in capsys.readouterr().err


def test_main_reports_missing_readme_template(template_root: Path, capsys: pytest.CaptureFixture[str]):
    (template_root / "scripts" / "README.template.md").unlink()

    exit_code = main(
        ["--root", str(template_root)],
        stdin=io.StringIO("shop\n\n\nn\n"),
        stdout=io.StringIO(),
    )

    assert exit_code == 1
    assert "Setup failed:" in capsys.readouterr().err


def test_main_reports_non_utf8_manifest(template_root: Path, capsys: pytest.CaptureFixture[str]):
    (template_root / "apps" / "web" / "package.json").write_bytes(b'{"name": "\xff"}')

    exit_code = main(
        ["--root", str(template_root)],
        stdin=io.StringIO("shop\n\n\nn\n"),
        stdout=io.StringIO(),
    )

    assert exit_code == 1
    assert "Setup failed:" in capsys.readouterr().err


def test_main_reports_non_utf8_readme_template(template_root: Path, capsys: pytest.CaptureFixture[str]):
    (template_root / "scripts" / "README.template.md").write_bytes(b"# \xff {{PROJECT_NAME}}\n")

    exit_code = main(
        ["--root", str(template_root)],
        stdin=io.StringIO("shop\n\n\nn\n"),
        stdout=io.StringIO(),
    )

    assert exit_code == 1
    assert "Setup failed:" in capsys.readouterr().err
