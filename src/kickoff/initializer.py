"""Interactive, top to bottom initialization of a freshly cloned template."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import InitializerSettings, ProjectIdentity
from .manifest import manifest_updates, remove_script, update_json_manifest, update_pyproject_name
from .naming import suggest_project_name, validate_project_name
from .prompt import Prompter
from .template import ReadmeRenderer, readme_replacements
from .vcs import GitResetter, has_repository

__all__ = ["ProjectInitializer"]


LOGGER = logging.getLogger(__name__)


class ProjectInitializer:
    """Collect the project identity and rewrite the template files with it.

    Every step runs in order and blocks on the previous one. Files are edited
    one at a time, so an error part way through leaves earlier files updated
    and later ones untouched.
    """

    def __init__(
        self,
        settings: InitializerSettings,
        prompter: Prompter | None = None,
        *,
        resetter: GitResetter | None = None,
        renderer: ReadmeRenderer | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.settings = settings
        self.prompter = prompter or Prompter()
        self.resetter = resetter or GitResetter()
        self.renderer = renderer or ReadmeRenderer()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def run(self) -> ProjectIdentity:
        self.prompter.say("\n🚀 Project Setup\n")

        identity = self.ask_identity()
        reinit_git = False
        if has_repository(self.settings.root):
            reinit_git = self.prompter.confirm("Reinitialize git history? (y/N): ")

        self.prompter.say("\n📝 Updating project files...\n")
        self.update_manifests(identity)
        self.write_readme(identity)

        if reinit_git:
            self.prompter.say("\n🔄 Reinitializing git...\n")
            self.resetter.reinitialize(self.settings.root, self.settings.commit_message)

        if self.prompter.confirm(
            f"\nRemove {self.settings.setup_script} script from package.json? (y/N): "
        ):
            self.remove_setup_script()

        self.print_next_steps()
        return identity

    def ask_identity(self) -> ProjectIdentity:
        """Ask for name, description and author; the name is checked before anything else."""

        suggested = suggest_project_name(
            self.cwd,
            template_name=self.settings.template_name,
            fallback=self.settings.fallback_name,
        )
        name = validate_project_name(self.prompter.ask(f"Project name ({suggested}): ", suggested))
        description = self.prompter.ask("Description (optional): ")
        author = self.prompter.ask("Author (optional): ")
        LOGGER.debug("collected identity for %s", name)
        return ProjectIdentity(name=name, description=description, author=author)

    def update_manifests(self, identity: ProjectIdentity) -> None:
        settings = self.settings
        targets = [
            (settings.root_manifest, manifest_updates(identity, identity.name, include_author=True)),
            (settings.web_manifest, manifest_updates(identity, identity.web_name, label="Web Frontend")),
            (settings.api_manifest, manifest_updates(identity, identity.api_name, label="API Backend")),
        ]
        for path, updates in targets:
            self._report(path, update_json_manifest(path, updates))

        self._report(settings.api_pyproject, update_pyproject_name(settings.api_pyproject, identity.name))

    def write_readme(self, identity: ProjectIdentity) -> None:
        replacements = readme_replacements(identity, self.settings.default_description)
        self.renderer.render_file(
            self.settings.template_path,
            replacements,
            target=self.settings.readme,
        )
        self._report(self.settings.readme, True)

    def remove_setup_script(self) -> None:
        script = self.settings.setup_script
        if remove_script(self.settings.root_manifest, script):
            self.prompter.say(f"  Removed {script} script from package.json")
        else:
            self.prompter.say(f"  Skipping {self.settings.root_manifest} (not found)")

    def print_next_steps(self) -> None:
        self.prompter.say("\n✅ Setup complete!\n")
        self.prompter.say("Next steps:")
        for index, step in enumerate(self.settings.next_steps, start=1):
            self.prompter.say(f"  {index}. {step}")
        self.prompter.say()

    def _report(self, path: Path, updated: bool) -> None:
        if updated:
            self.prompter.say(f"  Updated {path}")
        else:
            self.prompter.say(f"  Skipping {path} (not found)")
