"""Selection of manifest keys."""

from typing import Any, Dict, Iterable, Mapping


def select_properties(manifest: Mapping[str, Any], include: Iterable[str] = ()) -> Dict[str, Any]:
    """Copy the requested top-level keys of ``manifest`` into a new dict.

    An empty ``include`` selects every key. The result follows the key order
    of ``manifest``, not the order of ``include``; names in ``include`` that
    the manifest lacks are ignored. Values are copied by reference.
    """

    wanted = frozenset(include)
    selected: Dict[str, Any] = {}
    for key, value in manifest.items():
        if wanted and key not in wanted:
            continue
        selected.setdefault(key, value)
    return selected
