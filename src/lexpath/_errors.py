"""Error hierarchy for lexpath."""

from __future__ import annotations

from typing import Optional


class PathError(Exception):
    """Base class for all lexpath errors.

    :param message: Human-readable error description.
    :param path: The path (or offending value, as text) involved, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.path is not None:
            return f"{base} | path={self.path!r}"
        return base

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(super().__str__())]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        return f"{cls}({', '.join(args)})"


class InvalidArgumentType(PathError, TypeError):
    """Raised when a path string, path record, or record field has the wrong type."""


class MalformedSplit(PathError):
    """Raised when a path cannot be split into root, dir, base and ext."""
