from __future__ import annotations
from pathlib import PurePath
from typing import Any
from relnorm.normalize import normalize
from relnorm.splitter import split_relative

__all__ = ["append", "has_prefix", "remove_prefix"]


def _require_absolute(value: Any, context: str, what: str) -> PurePath:
    # Absolute paths are the host's type and are taken as already normalized
    if not isinstance(value, PurePath):
        raise TypeError(f"{context}: The {what} is not a path object, got {type(value).__name__}")
    if not value.is_absolute():
        raise ValueError(f"{context}: The {what} {str(value)!r} is not an absolute path")
    return value


def append(base: PurePath, subpath: Any, context: str = "relnorm.append") -> PurePath:
    """Append a relative path string to an absolute host path.

    ``append(PurePosixPath("/foo"), "bar//baz/.") -> PurePosixPath("/foo/bar/baz")``
    """
    base = _require_absolute(base, context, "first argument")
    return base.joinpath(*split_relative(subpath, f"{context}: second argument"))


def has_prefix(prefix: PurePath, path: PurePath, context: str = "relnorm.has_prefix") -> bool:
    """Whether *prefix* is a component-wise prefix of *path*.

    ``/foo`` is a prefix of ``/foo`` and ``/foo/bar`` but not of ``/foobar``.
    """
    prefix = _require_absolute(prefix, context, "first argument")
    path = _require_absolute(path, context, "second argument")
    return path.parts[: len(prefix.parts)] == prefix.parts


def remove_prefix(prefix: PurePath, path: PurePath, context: str = "relnorm.remove_prefix") -> str:
    """Return the normalized relative path leading from *prefix* to *path*.

    ``remove_prefix(PurePosixPath("/foo"), PurePosixPath("/foo/bar")) -> "./bar"``
    """
    if not has_prefix(prefix, path, context):
        raise ValueError(f"{context}: The first argument {str(prefix)!r} is not a component-wise prefix of {str(path)!r}")
    # Host paths may still hold ".." parts, which the normalizer rejects
    return normalize("/".join(path.parts[len(prefix.parts):]) or ".", context)
