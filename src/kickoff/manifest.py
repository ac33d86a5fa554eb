"""Rewrite the template's package manifests in place."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping

from .config import ProjectIdentity
from .errors import ManifestError

__all__ = [
    "manifest_updates",
    "remove_script",
    "update_json_manifest",
    "update_pyproject_name",
]


LOGGER = logging.getLogger(__name__)

_PYPROJECT_NAME = re.compile(r'^name = ".*"(?=\r?$)', re.MULTILINE)


def _load_manifest(path: Path) -> dict[str, Any]:
    try:
        content = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ManifestError(f"{path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(content, dict):
        raise ManifestError(f"{path} must contain a JSON object")
    return content


def _dump_manifest(path: Path, content: Mapping[str, Any]) -> None:
    path.write_text(json.dumps(content, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def manifest_updates(
    identity: ProjectIdentity,
    name: str,
    *,
    label: str | None = None,
    include_author: bool = False,
) -> dict[str, str]:
    """Return the fields to merge into a manifest for ``identity``.

    ``description`` and ``author`` are only included when the user supplied
    them. ``label`` is appended to the description as ``"<description> -
    <label>"`` for the per-app manifests.
    """

    updates = {"name": name}
    if identity.description:
        updates["description"] = (
            f"{identity.description} - {label}" if label else identity.description
        )
    if include_author and identity.author:
        updates["author"] = identity.author
    return updates


def update_json_manifest(path: str | Path, updates: Mapping[str, Any]) -> bool:
    """Merge ``updates`` into the JSON object stored at ``path``.

    Returns ``False`` without creating anything when the file does not exist.
    Keys not named in ``updates`` keep their values and position.
    """

    path = Path(path)
    if not path.is_file():
        LOGGER.info("manifest %s not found, skipping", path)
        return False

    content = _load_manifest(path)
    content.update(updates)
    _dump_manifest(path, content)
    LOGGER.debug("merged %s into %s", sorted(updates), path)
    return True


def update_pyproject_name(path: str | Path, project_name: str) -> bool:
    """Point the ``name = "..."`` line of a pyproject at ``<project_name>-api``.

    Only the first matching line changes; every other byte, line endings
    included, is written back untouched.
    """

    path = Path(path)
    if not path.is_file():
        LOGGER.info("pyproject %s not found, skipping", path)
        return False

    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise ManifestError(f"{path} is not valid UTF-8: {exc}") from exc

    replacement = f'name = "{project_name}-api"'
    updated, count = _PYPROJECT_NAME.subn(lambda _match: replacement, text, count=1)
    if not count:
        LOGGER.debug("no name line in %s, leaving content unchanged", path)

    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(updated)
    return True


def remove_script(path: str | Path, script: str) -> bool:
    """Delete ``scripts[script]`` from the manifest at ``path``.

    A missing entry or ``scripts`` map is not an error. Returns ``False`` only
    when the manifest itself is absent.
    """

    path = Path(path)
    if not path.is_file():
        LOGGER.info("manifest %s not found, nothing to clean up", path)
        return False

    content = _load_manifest(path)
    scripts = content.get("scripts")
    if isinstance(scripts, dict) and scripts.pop(script, None) is not None:
        LOGGER.debug("removed script %r from %s", script, path)
    _dump_manifest(path, content)
    return True
