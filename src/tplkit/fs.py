"""Filesystem helpers used to prepare the target and copy templates."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .config import RENAMED_FILES, VCS_DIRECTORY
from .errors import FilesystemError

__all__ = ["clear_directory", "copy_tree", "is_effectively_empty", "path_exists"]


LOGGER = logging.getLogger(__name__)


def path_exists(path: str | Path) -> bool:
    """Return whether ``path`` exists, raising :class:`FilesystemError` if it cannot be inspected."""

    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        raise FilesystemError("inspect", path, exc) from exc
    return True


def is_effectively_empty(path: str | Path) -> bool:
    """Return ``True`` when ``path`` holds nothing but an optional ``.git`` folder.

    ``path`` must exist; a missing or unreadable directory raises
    :class:`FilesystemError`.
    """

    try:
        with os.scandir(path) as entries:
            seen = 0
            for entry in entries:
                if entry.name.lower() != VCS_DIRECTORY or seen:
                    return False
                seen += 1
    except OSError as exc:
        raise FilesystemError("read directory", path, exc) from exc
    return True


def clear_directory(path: str | Path) -> None:
    """Delete every child of ``path`` while keeping ``path`` itself."""

    root = Path(path)
    try:
        children = list(root.iterdir())
    except OSError as exc:
        raise FilesystemError("read directory", root, exc) from exc

    for child in children:
        try:
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
        except OSError as exc:
            raise FilesystemError("remove", child, exc) from exc
        LOGGER.debug("removed %s", child)

    LOGGER.info("cleared %d entries from %s", len(children), root)


def copy_tree(source: str | Path, destination: str | Path) -> None:
    """Mirror ``source`` into ``destination``.

    Regular files and directories are copied; placeholder names listed in
    :data:`~tplkit.config.RENAMED_FILES` are restored on the way. Symlinks and
    special files are skipped. A failure leaves whatever was already copied.
    """

    source = Path(source)
    destination = Path(destination)
    try:
        with os.scandir(source) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError("copy", source, exc) from exc

    for entry in entries:
        target = destination / RENAMED_FILES.get(entry.name, entry.name)
        try:
            if entry.is_file(follow_symlinks=False):
                shutil.copy(entry.path, target)
                LOGGER.debug("copied %s -> %s", entry.path, target)
            elif entry.is_dir(follow_symlinks=False):
                target.mkdir(parents=True, exist_ok=True)
            else:
                LOGGER.debug("skipping special entry %s", entry.path)
                continue
        except OSError as exc:
            raise FilesystemError("copy", entry.path, exc) from exc

        if entry.is_dir(follow_symlinks=False):
            copy_tree(entry.path, target)

