"""Public relative path operations built on the splitter and joiner.

Laws:

- (Idempotency) ``normalize(normalize(p)) == normalize(p)``
- (Uniqueness) two paths normalize to the same string iff they point to the
  same file when no symlinks are involved, i.e. iff ``realpath -ms`` agrees
"""

from __future__ import annotations
from typing import Any, Sequence
from relnorm.errors import RelativePathError
from relnorm.joiner import join_relative
from relnorm.splitter import split_relative

__all__ = [
    "normalize",
    "is_valid",
    "components",
    "join_subpaths",
]


def normalize(path: Any, context: str = "relnorm.normalize") -> str:
    """Normalize a relative path string.

    - Limits repeating ``/`` to a single one
    - Removes redundant ``.`` components
    - Removes trailing ``/`` and ``/.``
    - Adds a leading ``./``
    - Errors on empty strings, absolute paths and ``..`` components

    Examples::

        normalize("foo//bar")    -> "./foo/bar"
        normalize("foo/./bar")   -> "./foo/bar"
        normalize("foo/bar/.")   -> "./foo/bar"
        normalize(".")           -> "./."
        normalize("foo/../bar")  -> ParentComponentError
    """
    return join_relative(split_relative(path, context))


def is_valid(value: Any) -> bool:
    """Return True if *value* would normalize without error."""
    try:
        split_relative(value, "relnorm.is_valid")
    except RelativePathError:
        return False
    return True


def components(path: Any, context: str = "relnorm.components") -> list[str]:
    """Return the normalized components of *path* (``[]`` for the current directory)."""
    return split_relative(path, context)


def join_subpaths(paths: Sequence[Any], context: str = "relnorm.join_subpaths") -> str:
    """Join relative path strings into a single normalized one.

    ``join_subpaths(["foo", "./bar/"]) -> "./foo/bar"``; an empty list gives ``"./."``.
    """
    if not isinstance(paths, (list, tuple)):
        raise TypeError(f"{context}: Expected a list of relative path strings, got {type(paths).__name__}")

    joined: list[str] = []
    for index, path in enumerate(paths):
        joined.extend(split_relative(path, f"{context}: element at index {index}"))
    return join_relative(joined)
