from __future__ import annotations
from typing import Any

__all__ = [
    "RelativePathError",
    "NotAStringError",
    "EmptyStringError",
    "AbsolutePathError",
    "ParentComponentError",
]

# Message prefixes for the two stages that can reject an input
INVALID_PREFIX = "is not a valid relative path string"
UNNORMALISABLE_PREFIX = "can't be normalised"

_JSON_SCALARS = (str, int, float, bool, type(None))


class RelativePathError(ValueError):
    """Base class for every rejected relative path.

    Carries the original offending *value* and the *context* label of the
    operation the caller invoked, so the message points at the real call site.
    """

    kind = "relative_path"
    prefix = INVALID_PREFIX

    def __init__(self, value: Any, context: str, reason: str):
        self.value = value
        self.context = context
        self.reason = reason
        super().__init__(f"{context}: Argument {value!r} {self.prefix}: {reason}")

    def to_dict(self) -> dict:
        """JSON-friendly description, used by the API and the CLI."""
        return {
            "kind": self.kind,
            "message": str(self),
            "value": self.value if isinstance(self.value, _JSON_SCALARS) else repr(self.value),
            "context": self.context,
        }


class NotAStringError(RelativePathError, TypeError):
    kind = "not_a_string"

    def __init__(self, value: Any, context: str):
        super().__init__(value, context, "Not a string")


class EmptyStringError(RelativePathError):
    kind = "empty_string"

    def __init__(self, value: Any, context: str):
        super().__init__(value, context, "The string is empty")


class AbsolutePathError(RelativePathError):
    kind = "absolute_path"

    def __init__(self, value: Any, context: str):
        super().__init__(value, context, "The string is an absolute path because it starts with `/`")


class ParentComponentError(RelativePathError):
    kind = "parent_component"
    prefix = UNNORMALISABLE_PREFIX

    def __init__(self, value: Any, context: str):
        super().__init__(value, context, "Path string contains a `..` component, which is not supported")
