"""Package name normalisation and validation."""

from __future__ import annotations

import re

from .errors import InvalidProjectName

__all__ = ["is_valid_package_name", "normalize_package_name", "validated_package_name"]


_LEADING_DOTS = re.compile(r"^[._]+")
_INVALID_CHARACTER = re.compile(r"[^a-z0-9\-~]")
_PACKAGE_NAME = re.compile(r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*")


def normalize_package_name(raw: str) -> str:
    """Turn ``raw`` into a candidate package name.

    Surrounding whitespace is removed, the text is lowercased, spaces become
    hyphens, any leading run of ``.`` or ``_`` is dropped and every remaining
    character outside ``[a-z0-9-~]`` is replaced with a hyphen. The function
    is idempotent.
    """

    candidate = raw.strip().lower().replace(" ", "-")
    candidate = _LEADING_DOTS.sub("", candidate)
    return _INVALID_CHARACTER.sub("-", candidate)


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` when ``name`` is a valid, optionally scoped, package name."""

    return _PACKAGE_NAME.fullmatch(name) is not None


def validated_package_name(raw: str) -> str:
    """Normalise ``raw`` and raise :class:`InvalidProjectName` if it is still invalid."""

    name = normalize_package_name(raw)
    if not is_valid_package_name(name):
        raise InvalidProjectName(name)
    return name
