"""Identity and layout settings shared by the initializer and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import validate_project_name

__all__ = ["InitializerSettings", "ProjectIdentity"]


TEMPLATE_NAME = "claude-tanstack-python-starter"
FALLBACK_NAME = "my-project"
DEFAULT_DESCRIPTION = "A fullstack application with React frontend and Python FastAPI backend."
SETUP_SCRIPT = "init-project"
COMMIT_MESSAGE = "Initial commit from template"
README_TEMPLATE = Path("scripts") / "README.template.md"
NEXT_STEPS = (
    "pnpm install",
    "cp apps/web/.env.example apps/web/.env",
    "cp apps/api/.env.example apps/api/.env",
    "pnpm dev",
)


class ProjectIdentity(BaseModel):
    """Answers collected from the user for a single run.

    An empty ``description`` or ``author`` means the user skipped the
    question; manifests keep whatever value they already had.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Lowercase alphanumeric and hyphen project name.")
    description: str = Field("", description="Optional one line summary of the project.")
    author: str = Field("", description="Optional author written to the root manifest.")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_project_name(value)

    @property
    def web_name(self) -> str:
        return f"{self.name}-web"

    @property
    def api_name(self) -> str:
        return f"{self.name}-api"


@dataclass(frozen=True, slots=True)
class InitializerSettings:
    """Paths and fixed values describing the template being initialized.

    Attributes
    ----------
    root:
        Repository root every target path is resolved against.
    readme_template:
        Template rendered into ``README.md``. Relative paths are resolved
        against :attr:`root`.
    template_name:
        The template's own project name. A working directory with this name
        yields :attr:`fallback_name` as the suggested project name.
    setup_script:
        Entry removed from the root manifest's ``scripts`` by the cleanup step.
    """

    root: Path
    readme_template: Path = README_TEMPLATE
    template_name: str = TEMPLATE_NAME
    fallback_name: str = FALLBACK_NAME
    default_description: str = DEFAULT_DESCRIPTION
    setup_script: str = SETUP_SCRIPT
    commit_message: str = COMMIT_MESSAGE
    next_steps: tuple[str, ...] = field(default=NEXT_STEPS)

    @classmethod
    def for_root(
        cls,
        root: str | Path,
        *,
        readme_template: str | Path | None = None,
    ) -> "InitializerSettings":
        """Build settings for ``root``, optionally overriding the README template."""

        root_path = Path(root).expanduser().resolve()
        template = Path(readme_template) if readme_template is not None else README_TEMPLATE
        if not template.is_absolute():
            template = root_path / template
        return cls(root=root_path, readme_template=template)

    @property
    def root_manifest(self) -> Path:
        return self.root / "package.json"

    @property
    def web_manifest(self) -> Path:
        return self.root / "apps" / "web" / "package.json"

    @property
    def api_manifest(self) -> Path:
        return self.root / "apps" / "api" / "package.json"

    @property
    def api_pyproject(self) -> Path:
        return self.root / "apps" / "api" / "pyproject.toml"

    @property
    def readme(self) -> Path:
        return self.root / "README.md"

    @property
    def template_path(self) -> Path:
        if self.readme_template.is_absolute():
            return self.readme_template
        return self.root / self.readme_template
