"""Literal placeholder rendering for the project README."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .config import ProjectIdentity

__all__ = [
    "DESCRIPTION_TOKEN",
    "PROJECT_NAME_TOKEN",
    "ReadmeRenderer",
    "readme_replacements",
]


LOGGER = logging.getLogger(__name__)

PROJECT_NAME_TOKEN = "{{PROJECT_NAME}}"
DESCRIPTION_TOKEN = "{{DESCRIPTION}}"


def readme_replacements(identity: ProjectIdentity, default_description: str) -> dict[str, str]:
    """Map README tokens to values, using ``default_description`` when none was given."""

    return {
        PROJECT_NAME_TOKEN: identity.name,
        DESCRIPTION_TOKEN: identity.description or default_description,
    }


@dataclass(slots=True)
class ReadmeRenderer:
    """Replace fixed tokens such as ``{{PROJECT_NAME}}`` with literal values.

    Tokens are matched verbatim: no whitespace inside the braces, no filters,
    no nesting. Text that merely looks like a token is left alone.
    """

    encoding: str = "utf-8"

    def render_string(self, template: str, replacements: Mapping[str, str]) -> str:
        rendered = template
        for token, value in replacements.items():
            rendered = rendered.replace(token, value)
        return rendered

    def render_file(
        self,
        template_path: str | Path,
        replacements: Mapping[str, str],
        *,
        target: str | Path | None = None,
    ) -> str:
        """Render ``template_path`` and optionally overwrite ``target`` with the result."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        text = template_path.read_text(encoding=self.encoding)
        rendered = self.render_string(text, replacements)

        if target is not None:
            target_path = Path(target)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(rendered, encoding=self.encoding)
            LOGGER.debug("rendered %s into %s", template_path, target_path)

        return rendered
