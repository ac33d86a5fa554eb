"""Custom exception types raised while initializing a project."""

from __future__ import annotations


class KickoffError(RuntimeError):
    """Base class for failures that abort the initializer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidProjectNameError(KickoffError, ValueError):
    """Raised when a project name does not match the accepted format."""


class ManifestError(KickoffError):
    """Raised when a manifest exists but cannot be interpreted."""


class VersionControlError(KickoffError):
    """Raised when reinitializing the git repository fails."""


__all__ = [
    "InvalidProjectNameError",
    "KickoffError",
    "ManifestError",
    "VersionControlError",
]
