from __future__ import annotations
from typing import Sequence

__all__ = ["join_relative"]


def join_relative(components: Sequence[str]) -> str:
    """Render components as ``./a/b``; no components is the current directory ``./.``.

    Components are expected to come from `split_relative` and are not re-checked.
    """
    if not components:
        return "./."
    return "./" + "/".join(components)
