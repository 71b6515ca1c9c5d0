"""Split a path into root, dir, base and ext with a single pattern match."""

from __future__ import annotations

import re
from typing import Final

from lexpath._errors import InvalidArgumentType, MalformedSplit

# root: "/" or nothing
# dir:  lazily everything up to the base, trailing slash included
# base: "." / ".." as a whole, otherwise a name with an optional ".ext"
# trailing slashes belong to no group
_SPLIT_RE: Final = re.compile(r"^(/?|)([\s\S]*?)((?:\.{1,2}|[^/]+?|)(\.[^./]*|))(?:/*)\Z")


def split_path(path: str) -> tuple[str, str, str, str]:
    """Return ``(root, dir, base, ext)`` for *path*.

    Example: ``split_path("/a/b/c.txt")`` returns ``("/", "a/b/", "c.txt", ".txt")``.

    :raises InvalidArgumentType: If *path* is not a string.
    :raises MalformedSplit: If the pattern does not yield four groups.
    """
    if not isinstance(path, str):
        raise InvalidArgumentType(f"Path must be a string, not {type(path).__name__}")
    match = _SPLIT_RE.match(path)
    if match is None:
        raise MalformedSplit("Path did not match the split pattern", path=path)
    groups = match.groups()
    if len(groups) != 4:
        raise MalformedSplit(f"Expected 4 path components, got {len(groups)}", path=path)
    root, dir_, base, ext = (g or "" for g in groups)
    return root, dir_, base, ext
