"""Replace a template's git history with a single fresh commit."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Any, Callable, Sequence

from .errors import VersionControlError

__all__ = ["GitResetter", "has_repository"]


LOGGER = logging.getLogger(__name__)

Runner = Callable[..., Any]


def has_repository(root: str | Path) -> bool:
    return (Path(root) / ".git").exists()


class GitResetter:
    """Delete ``.git`` and commit the working tree into a new repository.

    Commands run one after another in the repository root with the parent's
    standard streams. The first failure raises :class:`VersionControlError`;
    nothing is restored, so a failure after the delete leaves the tree
    without any repository metadata.
    """

    def __init__(self, runner: Runner | None = None, *, executable: str = "git") -> None:
        self._runner = runner or subprocess.run
        self._executable = executable

    def commands(self, message: str) -> list[list[str]]:
        return [
            [self._executable, "init"],
            [self._executable, "add", "."],
            [self._executable, "commit", "-m", message],
        ]

    def reinitialize(self, root: str | Path, message: str) -> None:
        root = Path(root)
        git_dir = root / ".git"
        LOGGER.info("removing %s", git_dir)
        if git_dir.is_dir() and not git_dir.is_symlink():
            shutil.rmtree(git_dir)
        else:
            # worktrees and submodules use a ".git" file pointing elsewhere
            git_dir.unlink(missing_ok=True)

        for command in self.commands(message):
            self._run(command, root)

    def _run(self, command: Sequence[str], cwd: Path) -> None:
        LOGGER.debug("running %s in %s", " ".join(command), cwd)
        try:
            self._runner(list(command), cwd=cwd, check=True)
        except subprocess.CalledProcessError as exc:
            raise VersionControlError(
                f"'{' '.join(command)}' exited with status {exc.returncode}"
            ) from exc
        except FileNotFoundError as exc:
            raise VersionControlError(f"{command[0]} executable not found") from exc
