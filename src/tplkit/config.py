"""Selections and derived values describing a single scaffolding run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnsupportedSelection

__all__ = [
    "CURRENT_DIRECTORY",
    "DEFAULT_TARGET",
    "MANIFEST_MARKER",
    "RENAMED_FILES",
    "VCS_DIRECTORY",
    "Framework",
    "Language",
    "PackageManager",
    "ProjectConfig",
    "TemplateSelection",
]


CURRENT_DIRECTORY = "."
DEFAULT_TARGET = "default_project"
MANIFEST_MARKER = "package.json"
VCS_DIRECTORY = ".git"

# Template packaging cannot ship dot-files, so they are stored under a placeholder.
RENAMED_FILES = {"_gitignore": ".gitignore"}


class Language(str, Enum):
    """Languages offered by the template menu."""

    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"


class Framework(str, Enum):
    """Frameworks offered by the template menu, in menu order."""

    VUE = "Vue"
    VUE2 = "Vue2"
    REACT = "React"
    ANGULAR = "Angular"
    SVELTE = "Svelte"


class PackageManager(str, Enum):
    """Package managers echoed in the next-step instructions."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class TemplateSelection(BaseModel):
    """A language and framework pair picked from the menus."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    language: Language = Field(..., description="Language variant of the template.")
    framework: Framework = Field(..., description="Framework the template targets.")

    @property
    def template_name(self) -> str:
        """Directory name of the template, e.g. ``template-vue-ts``."""

        base = f"template-{self.framework.value.lower()}"
        if self.language is Language.TYPESCRIPT:
            return f"{base}-ts"
        if self.language is Language.JAVASCRIPT:
            return base
        raise UnsupportedSelection(f"Not supported now: {self.language!r}")


@dataclass(slots=True)
class ProjectConfig:
    """Values gathered by the interactive flow.

    Attributes
    ----------
    target:
        Directory the template is copied into, as typed by the user with any
        trailing slashes removed. ``"."`` denotes the working directory.
    project_name:
        Normalised package name derived from :attr:`target`. It is only
        validated and displayed; the directory is never renamed.
    selection:
        The template chosen from the language and framework menus.
    package_manager:
        Manager shown in the next-step instructions. It is never invoked.
    """

    target: str
    project_name: str
    selection: TemplateSelection
    package_manager: PackageManager = PackageManager.NPM

    @staticmethod
    def project_name_for(target: str, cwd: str | Path | None = None) -> str:
        """Return the raw project name for ``target`` before normalisation."""

        if target == CURRENT_DIRECTORY:
            return Path(cwd if cwd is not None else Path.cwd()).resolve().name
        return Path(target).name

    @property
    def is_current_directory(self) -> bool:
        return self.target == CURRENT_DIRECTORY
