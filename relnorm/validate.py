from __future__ import annotations
from typing import Any
from relnorm.errors import AbsolutePathError, EmptyStringError, NotAStringError, RelativePathError

__all__ = ["validate_relative_string", "is_relative_string"]


def validate_relative_string(value: Any, context: str) -> None:
    """Raise a `RelativePathError` unless *value* may be processed as a relative path.

    Only checks eligibility: the value must be a non-empty ``str`` that does not
    start with ``/``. Nothing is transformed.
    """
    if not isinstance(value, str):
        raise NotAStringError(value, context)
    if value == "":
        raise EmptyStringError(value, context)
    if value.startswith("/"):
        raise AbsolutePathError(value, context)


def is_relative_string(value: Any) -> bool:
    try:
        validate_relative_string(value, "relnorm.is_relative_string")
    except RelativePathError:
        return False
    return True
