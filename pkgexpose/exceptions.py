"""
Exception hierarchy for manifest discovery and parsing.

Every failure surfaces to the caller immediately. Each exception includes:
- Clear error message
- Path context (search root or manifest file)
- Suggested user action
- Original exception preserved for debugging
"""

from typing import Optional, Sequence


class PkgExposeError(Exception):
    """
    Base exception for all pkgexpose errors.

    Catch this to handle any failure raised while locating, reading or
    parsing a package manifest.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize PkgExposeError.

        Args:
            message: Human-readable error message
            path: Directory or file the error refers to
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.path = path
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if path:
            error_parts.append(f"Path: {path}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class InvalidSearchRoot(PkgExposeError):
    """
    Raised when the starting directory of a search is unusable.

    This happens before any filesystem access when the directory is:
    - Empty (the caller has no file location)
    - The current-directory marker ``.``
    - Any other relative path
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message=message,
            path=path,
            suggested_action="Pass an absolute directory via the 'dir' option",
        )


class ManifestNotFound(PkgExposeError):
    """
    Raised when the upward search reaches the filesystem root without
    finding a manifest.
    """

    def __init__(
        self,
        search_root: str,
        filenames: Sequence[str] = (),
        original_exception: Optional[Exception] = None,
    ):
        self.search_root = search_root
        self.filenames = tuple(filenames)

        names = " or ".join(self.filenames) or "a manifest"
        super().__init__(
            message=f"Could not find {names} up from: {search_root}",
            path=search_root,
            original_exception=original_exception,
            suggested_action="Run from inside a package or pass an explicit 'dir'",
        )


class ManifestReadError(PkgExposeError):
    """
    Raised when a located manifest cannot be opened or fully read.

    This typically indicates:
    - Insufficient permissions
    - The file disappeared between locating and reading it
    - The located entry is not a regular file
    """

    def __init__(self, path: str, original_exception: Optional[Exception] = None):
        super().__init__(
            message="Could not read manifest",
            path=path,
            original_exception=original_exception,
            suggested_action="Check that the file exists and is readable",
        )


class ManifestParseError(PkgExposeError):
    """
    Raised when manifest content is not valid JSON or JSON5, or does not
    hold an object at the top level.
    """

    def __init__(
        self,
        path: str,
        detail: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize ManifestParseError.

        Args:
            path: Manifest file that failed to parse
            detail: Parser diagnostic message
            line: 1-based line reported by the parser, if any
            column: 1-based column reported by the parser, if any
            original_exception: The original parser exception
        """
        self.detail = detail
        self.line = line
        self.column = column

        message = f"Invalid manifest content: {detail}"
        if line is not None and column is not None:
            message += f" (line {line}, column {column})"

        super().__init__(
            message=message,
            path=path,
            suggested_action="Fix the JSON/JSON5 syntax of the manifest",
            original_exception=original_exception,
        )


__all__ = [
    "PkgExposeError",
    "InvalidSearchRoot",
    "ManifestNotFound",
    "ManifestReadError",
    "ManifestParseError",
]
