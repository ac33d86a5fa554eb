"""Initialize a project cloned from the fullstack starter template.

The package asks for a project name, description and author, rewrites the
template's ``package.json`` manifests, its API ``pyproject.toml`` and its
README, and can replace the template's git history with a single commit. The
pieces are usable on their own or through the ``kickoff`` command.
"""

from __future__ import annotations

from .config import InitializerSettings, ProjectIdentity
from .errors import InvalidProjectNameError, KickoffError, ManifestError, VersionControlError
from .initializer import ProjectInitializer
from .manifest import remove_script, update_json_manifest, update_pyproject_name
from .naming import is_valid_project_name, suggest_project_name, validate_project_name
from .prompt import Prompter
from .template import ReadmeRenderer
from .vcs import GitResetter

__all__ = [
    "GitResetter",
    "InitializerSettings",
    "InvalidProjectNameError",
    "KickoffError",
    "ManifestError",
    "ProjectIdentity",
    "ProjectInitializer",
    "Prompter",
    "ReadmeRenderer",
    "VersionControlError",
    "is_valid_project_name",
    "remove_script",
    "suggest_project_name",
    "update_json_manifest",
    "update_pyproject_name",
    "validate_project_name",
]

__version__ = "0.1.0"
