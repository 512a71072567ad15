"""
Public entry points.

Each call performs its own search and read; nothing is cached between calls.

Valid usage::

    expose(sys.modules[__name__])
    expose(__file__, "version", "author")
    expose(__file__, ["version", "author"])
    expose(__file__, {"include": ["version", "author"], "dir": "/some/path"})
"""

from typing import Any, Dict, Optional

from .locator import caller_directory, find_manifest
from .options import OptionsArg, normalise_options
from .reader import ManifestInfo, read_manifest
from .selector import select_properties


def find(caller: Any, dir: Optional[str] = None) -> str:
    """Return the path of the manifest nearest to ``dir`` or to the caller."""
    start = dir or caller_directory(caller)
    return find_manifest(start).path


def read(caller: Any, dir: Optional[str] = None) -> ManifestInfo:
    """Locate the manifest for ``caller`` and return its path and contents."""
    return read_manifest(find(caller, dir))


def expose(caller: Any, options: OptionsArg = None, *names: Any) -> Dict[str, Any]:
    """Return the selected manifest properties for ``caller``.

    Args:
        caller: Module, object with ``__file__``/``filename``, or file path
            whose directory seeds the search.
        options: Key name, list of key names, mapping with ``include``/``dir``,
            or a ``SelectionOptions``. Omit to expose every key.
        names: Further key names to expose.

    Returns:
        A new dict of the selected keys, in manifest order.
    """
    selection = normalise_options(options, *names)
    info = read(caller, selection.dir)
    return select_properties(info.package, selection.include)


def attach(module: Any, options: OptionsArg = None, *names: Any) -> Dict[str, Any]:
    """Expose manifest properties as attributes of ``module``.

    Attributes that already exist on the module are left untouched.
    """
    exposed = expose(module, options, *names)
    for key, value in exposed.items():
        if not hasattr(module, key):
            setattr(module, key, value)
    return exposed
