"""Locate the bundled template directories."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from .config import MANIFEST_MARKER, TemplateSelection
from .errors import FilesystemError, InstallationRootNotFound

__all__ = [
    "available_templates",
    "find_installation_root",
    "find_upwards",
    "installation_root",
    "resolve_template",
]


def find_upwards(start: str | Path, predicate: Callable[[Path], bool]) -> Path | None:
    """Return the nearest parent of ``start`` accepted by ``predicate``.

    ``start`` itself is never tested, so passing a file path searches from the
    directory that contains it. ``None`` is returned once the filesystem root
    has been checked without a match.
    """

    for candidate in Path(start).parents:
        if predicate(candidate):
            return candidate
    return None


def _has_manifest(directory: Path) -> bool:
    return (directory / MANIFEST_MARKER).is_file()


def find_installation_root(start: str | Path | None = None) -> Path | None:
    """Find the directory holding the templates, starting from this module."""

    origin = Path(start) if start is not None else Path(__file__).resolve()
    return find_upwards(origin, _has_manifest)


def installation_root(start: str | Path | None = None) -> Path:
    """Like :func:`find_installation_root` but raise when nothing is found."""

    root = find_installation_root(start)
    if root is None:
        raise InstallationRootNotFound(
            f"could not find a directory containing {MANIFEST_MARKER} above "
            f"{start or Path(__file__).resolve()}; the templates are not installed alongside the tool"
        )
    return root


def resolve_template(selection: TemplateSelection, root: str | Path) -> Path:
    """Return the template path for ``selection``. Existence is not checked."""

    return Path(root) / selection.template_name


def available_templates(root: str | Path) -> list[str]:
    """List the ``template-*`` directories bundled under ``root``."""

    root = Path(root)
    try:
        if not root.is_dir():
            return []
        return sorted(
            entry.name for entry in root.iterdir() if entry.is_dir() and entry.name.startswith("template-")
        )
    except OSError as exc:
        raise FilesystemError("read directory", root, exc) from exc
