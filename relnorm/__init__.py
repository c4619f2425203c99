"""relnorm top-level package.

Pure normalization of relative path strings to the canonical ``./a/b`` form,
plus helpers to compose them with absolute ``pathlib`` paths.
"""

from relnorm.errors import (
    AbsolutePathError,
    EmptyStringError,
    NotAStringError,
    ParentComponentError,
    RelativePathError,
)
from relnorm.normalize import components, is_valid, join_subpaths, normalize
from relnorm.utils.paths import append, has_prefix, remove_prefix

__all__ = [
    "normalize",
    "is_valid",
    "components",
    "join_subpaths",
    "append",
    "has_prefix",
    "remove_prefix",
    "RelativePathError",
    "NotAStringError",
    "EmptyStringError",
    "AbsolutePathError",
    "ParentComponentError",
]
