"""Lexical collapsing of ``.`` and ``..`` segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

CURRENT = "."
PARENT = ".."


def normalize_segments(parts: Iterable[str], allow_above_root: bool) -> list[str]:
    """Resolve ``.`` and ``..`` in a sequence of segments.

    Segments must not contain slashes. The result carries no root marker, so
    the caller decides whether the path is absolute.

    :param parts: Raw segments, typically ``path.split("/")``.
    :param allow_above_root: Keep leading ``..`` segments that cannot be
        cancelled. ``True`` for relative paths, ``False`` for absolute ones.
    """
    res: list[str] = []
    for part in parts:
        if not part or part == CURRENT:
            continue
        if part == PARENT:
            if res and res[-1] != PARENT:
                res.pop()
            elif allow_above_root:
                res.append(PARENT)
        else:
            res.append(part)
    return res
