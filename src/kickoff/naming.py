"""Project name rules shared by the prompt flow and the CLI."""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

from .errors import InvalidProjectNameError

__all__ = [
    "PROJECT_NAME_PATTERN",
    "is_valid_project_name",
    "slugify",
    "suggest_project_name",
    "validate_project_name",
]


PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")
INVALID_NAME_MESSAGE = "Project name must be lowercase alphanumeric with hyphens only"

_SEPARATORS = re.compile(r"[\s_\-]+")
_DISALLOWED = re.compile(r"[^a-z0-9\- ]")


def slugify(value: str) -> str:
    """Return a lowercase, hyphen separated ASCII form of ``value``.

    Accents are folded to their closest ASCII letter, anything else outside
    ``[a-z0-9]`` is dropped and runs of whitespace, underscores or hyphens
    collapse into a single hyphen. The result may be empty.
    """

    text = unicodedata.normalize("NFKD", value)
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = _SEPARATORS.sub(" ", text)
    text = _DISALLOWED.sub("", text).strip()
    return _SEPARATORS.sub("-", text).strip("-")


def is_valid_project_name(name: str) -> bool:
    return PROJECT_NAME_PATTERN.fullmatch(name) is not None


def validate_project_name(name: str) -> str:
    """Return ``name`` unchanged or raise :class:`InvalidProjectNameError`."""

    if is_valid_project_name(name):
        return name

    message = INVALID_NAME_MESSAGE
    hint = slugify(name)
    if hint and hint != name:
        message = f"{message} (try '{hint}')"
    raise InvalidProjectNameError(message)


def suggest_project_name(directory: str | Path, *, template_name: str, fallback: str) -> str:
    """Suggest a default project name from the folder the user is working in.

    A folder still carrying the template's own name is not a useful
    suggestion, so ``fallback`` is returned instead.
    """

    folder_name = Path(directory).name
    if not folder_name or folder_name == template_name:
        return fallback
    return folder_name
