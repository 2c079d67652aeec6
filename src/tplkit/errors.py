"""Exception types raised while scaffolding a project.

Every error is fatal: it propagates to :func:`tplkit.cli.main`, which prints
the message and exits with a non-zero status.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "FilesystemError",
    "InputCanceled",
    "InstallationRootNotFound",
    "InvalidProjectName",
    "OverwriteDeclined",
    "ScaffoldError",
    "UnsupportedSelection",
]


class ScaffoldError(RuntimeError):
    """Base class for fatal scaffolding errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InputCanceled(ScaffoldError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(self, message: str = "Operation canceled") -> None:
        super().__init__(message)


class OverwriteDeclined(ScaffoldError):
    """Raised when the user refuses to clear a non-empty target directory."""

    def __init__(self, message: str = "Operation canceled") -> None:
        super().__init__(message)


class InvalidProjectName(ScaffoldError):
    """Raised when a normalised project name violates the package grammar."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid project name: {name!r}")
        self.name = name


class FilesystemError(ScaffoldError):
    """Raised when reading, writing or deleting a filesystem entry fails."""

    def __init__(self, action: str, path: str | Path, cause: BaseException) -> None:
        super().__init__(f"failed to {action} {path}: {cause}")
        self.path = Path(path)


class UnsupportedSelection(ScaffoldError):
    """Raised when a menu selection maps to no known template."""


class InstallationRootNotFound(ScaffoldError):
    """Raised when the bundled templates cannot be located."""
