from __future__ import annotations
import re
from relnorm.errors import ParentComponentError
from relnorm.validate import validate_relative_string

__all__ = ["split_relative"]

# One separator: a run of "/" optionally followed by repeated "./" groups,
# e.g. "/", "//", "/./", "/.//./"
_SEPARATOR_RE = re.compile(r"/+(?:\./+)*")

CURRENT = "."
PARENT = ".."


def split_relative(path: str, context: str) -> list[str]:
    """Split a relative path string into its normalized components.

    - A leading ``./`` is dropped, so ``"./foo"`` gives ``["foo"]``
    - A trailing ``/`` or ``/.`` is dropped, so ``"foo/."`` gives ``["foo"]``
    - ``"."`` on its own is the current directory and gives ``[]``
    - A ``..`` component raises `ParentComponentError`

    These are the only places where ``"."`` and ``""`` parts can come out of
    the separator split, so no other filtering is needed.
    """
    validate_relative_string(path, context)

    if path == CURRENT:
        return []

    parts = _SEPARATOR_RE.split(path)
    start = 1 if parts[0] == CURRENT else 0
    end = len(parts) - 1 if parts[-1] in (CURRENT, "") else len(parts)

    components = parts[start:end]
    # ".." would need symlink-aware resolution to be handled correctly
    if PARENT in components:
        raise ParentComponentError(path, context)
    return components
