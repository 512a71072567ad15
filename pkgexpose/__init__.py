"""Expose properties of the nearest package.json5 / package.json."""

from .api import attach, expose, find, read
from .exceptions import (
    InvalidSearchRoot,
    ManifestNotFound,
    ManifestParseError,
    ManifestReadError,
    PkgExposeError,
)
from .locator import MANIFEST_FILENAMES, ManifestLocation, find_manifest
from .options import SelectionOptions, normalise_options
from .reader import ManifestInfo, load_manifest, read_manifest
from .selector import select_properties

__all__ = [
    "expose",
    "attach",
    "find",
    "read",
    "SelectionOptions",
    "normalise_options",
    "MANIFEST_FILENAMES",
    "ManifestLocation",
    "find_manifest",
    "ManifestInfo",
    "load_manifest",
    "read_manifest",
    "select_properties",
    "PkgExposeError",
    "InvalidSearchRoot",
    "ManifestNotFound",
    "ManifestReadError",
    "ManifestParseError",
]
