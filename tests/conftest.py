from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


README_TEMPLATE = """# {{PROJECT_NAME}}

{{DESCRIPTION}}

## Getting started

Run `pnpm dev` to start {{PROJECT_NAME}}.
"""

PYPROJECT = """[project]
name = "claude-tanstack-python-starter-api"
version = "0.1.0"
dependencies = ["fastapi"]

[tool.ruff]
line-length = 100
"""


def write_json(path: Path, content: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(content, indent=2) + "\n", encoding="utf-8")


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    """A copy of the starter layout, in a folder still named after the template."""

    root = tmp_path / "claude-tanstack-python-starter"
    write_json(
        root / "package.json",
        {
            "name": "claude-tanstack-python-starter",
            "version": "0.0.0",
            "private": True,
            "description": "Starter template",
            "scripts": {"dev": "turbo dev", "init-project": "node scripts/setup.mjs"},
        },
    )
    write_json(
        root / "apps" / "web" / "package.json",
        {"name": "claude-tanstack-python-starter-web", "version": "0.0.0", "type": "module"},
    )
    write_json(
        root / "apps" / "api" / "package.json",
        {"name": "claude-tanstack-python-starter-api", "version": "0.0.0"},
    )
    (root / "apps" / "api" / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
    template = root / "scripts" / "README.template.md"
    template.parent.mkdir(parents=True)
    template.write_text(README_TEMPLATE, encoding="utf-8")
    return root


@pytest.fixture()
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let ``git commit`` run without touching the user's git configuration."""

    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for prefix in ("GIT_AUTHOR", "GIT_COMMITTER"):
        monkeypatch.setenv(f"{prefix}_NAME", "CI Bot")
        monkeypatch.setenv(f"{prefix}_EMAIL", "ci@example.com")
