"""Utilities for reading package manifests."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import json5

from .exceptions import ManifestParseError, ManifestReadError

logger = logging.getLogger(__name__)

# json5 reports failures as "<string>:LINE Unexpected ... at column COL"
_POSITION_RE = re.compile(r":(\d+) .*\bat column (\d+)")


@dataclass(frozen=True)
class ManifestInfo:
    """A resolved manifest path and its parsed top-level mapping."""

    dir: str
    package: Dict[str, Any]


def _position(message: str) -> Tuple[Optional[int], Optional[int]]:
    match = _POSITION_RE.search(message)
    if not match:
        return None, None
    return int(match.group(1)), int(match.group(2))


def load_manifest(path: str) -> Dict[str, Any]:
    """Read and parse the manifest at ``path``.

    Both strict JSON (``package.json``) and the relaxed JSON5 dialect
    (``package.json5``) are accepted: comments, trailing commas, unquoted
    keys and single-quoted strings all parse.

    Raises
    ------
    ManifestReadError
        The file could not be opened or read.
    ManifestParseError
        The content is not UTF-8, not valid JSON5, or not an object.
    """

    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ManifestReadError(path, original_exception=e) from e

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ManifestParseError(path, f"content is not valid UTF-8 ({e.reason})", original_exception=e) from e

    try:
        data = json5.loads(text)
    except ValueError as e:
        line, column = _position(str(e))
        raise ManifestParseError(path, str(e), line=line, column=column, original_exception=e) from e

    if not isinstance(data, dict):
        raise ManifestParseError(path, f"top-level value must be an object, got {type(data).__name__}")

    logger.debug("Parsed %d keys from %s", len(data), path)
    return data


def read_manifest(path: str) -> ManifestInfo:
    """Return a :class:`ManifestInfo` for the manifest at ``path``."""

    return ManifestInfo(dir=path, package=load_manifest(path))
