"""Normalisation of the flexible ``expose`` call signature."""

import os
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class SelectionOptions:
    """Canonical selection settings for one ``expose`` call.

    ``include`` lists the manifest keys to expose; an empty tuple exposes
    every key. ``dir`` overrides the directory the search starts from.
    """

    include: Tuple[str, ...] = ()
    dir: Optional[str] = None


OptionsArg = Union[None, str, Sequence[str], Mapping[str, Any], SelectionOptions]


def _strings(values: Iterable[Any]) -> Tuple[str, ...]:
    return tuple(value for value in values if isinstance(value, str))


def _include_from(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return _strings(value)
    return ()


def normalise_options(options: OptionsArg = None, *names: Any) -> SelectionOptions:
    """Resolve any supported call shape into a :class:`SelectionOptions`.

    Parameters
    ----------
    options:
        ``None``, a single key name, a list/tuple of key names, a mapping with
        ``include`` and/or ``dir`` entries, or a ready ``SelectionOptions``.
        Anything else is treated as ``None``.
    names:
        Extra key names appended to ``include`` in order. Non-strings are
        dropped.

    Returns
    -------
    SelectionOptions
        ``include`` as a flat tuple of strings and the optional ``dir``.
    """

    directory = None
    if isinstance(options, SelectionOptions):
        include = _include_from(options.include)
        directory = options.dir
    elif isinstance(options, Mapping):
        include = _include_from(options.get("include"))
        directory = options.get("dir") or None
        if isinstance(directory, (str, os.PathLike)):
            directory = os.fspath(directory)
        else:
            directory = None
    else:
        include = _include_from(options)

    return SelectionOptions(include=include + _strings(names), dir=directory)
