"""Upward search for the nearest package manifest."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import InvalidSearchRoot, ManifestNotFound

logger = logging.getLogger(__name__)

# Checked in order at every directory level; the first name listed wins.
MANIFEST_FILENAMES = ("package.json5", "package.json")


@dataclass(frozen=True)
class ManifestLocation:
    """Absolute manifest path and the directory that holds it."""

    path: str
    directory: str


def caller_directory(caller: Any) -> str:
    """Return the directory of the file a caller lives in.

    ``caller`` may be a module (or any object exposing ``__file__`` or
    ``filename``) or a file path. An empty string is returned when no file
    location is known, which :func:`find_manifest` rejects.
    """

    if isinstance(caller, (str, os.PathLike)):
        filename: Optional[str] = os.fspath(caller)
    else:
        filename = getattr(caller, "__file__", None) or getattr(caller, "filename", None)

    if not filename:
        return ""
    return os.path.dirname(filename)


def _validate_start(start_dir: Optional[str]) -> str:
    if start_dir is None:
        raise InvalidSearchRoot("Cannot find package.json5 or package.json from unspecified directory")

    start = os.fspath(start_dir)
    if not start or start == ".":
        raise InvalidSearchRoot(
            "Cannot find package.json5 or package.json from unspecified directory",
            path=start or None,
        )
    if not os.path.isabs(start):
        raise InvalidSearchRoot("Search directory must be absolute", path=start)
    return os.path.normpath(start)


def find_manifest(start_dir: Optional[str]) -> ManifestLocation:
    """Find the nearest manifest at or above ``start_dir``.

    Parameters
    ----------
    start_dir:
        Absolute directory the search starts from.

    Returns
    -------
    ManifestLocation
        Location of ``package.json5`` or ``package.json`` in the closest
        directory that contains one.

    Raises
    ------
    InvalidSearchRoot
        ``start_dir`` is empty, ``.`` or relative.
    ManifestNotFound
        No manifest exists up to the filesystem root, or a directory on the
        way could not be listed.
    """

    search_root = _validate_start(start_dir)
    current = search_root

    while True:
        logger.debug("Looking for manifest in %s", current)
        try:
            entries = set(os.listdir(current))
        except OSError as e:
            raise ManifestNotFound(search_root, MANIFEST_FILENAMES, original_exception=e) from e

        for filename in MANIFEST_FILENAMES:
            if filename in entries:
                path = os.path.join(current, filename)
                logger.debug("Found manifest %s", path)
                return ManifestLocation(path=path, directory=current)

        parent = os.path.dirname(current)
        if parent == current:
            raise ManifestNotFound(search_root, MANIFEST_FILENAMES)
        current = parent
