"""Configuration model: immutable settings for a :class:`~lexpath.PathContext`."""

from __future__ import annotations

import dataclasses
from typing import Optional


@dataclasses.dataclass(frozen=True)
class PathConfig:
    """Settings for path resolution.

    :param cwd: Fixed working directory for ``resolve`` and ``relative``.
        ``None`` uses the process working directory.
    """

    cwd: Optional[str] = None

    def validate(self) -> None:
        """Check that a configured working directory is absolute.

        :raises TypeError: If ``cwd`` is set and is not a string.
        :raises ValueError: If ``cwd`` is set and does not start with ``/``.
        """
        if self.cwd is None:
            return
        if not isinstance(self.cwd, str):
            msg = f"'cwd' must be a string, not {type(self.cwd).__name__}"
            raise TypeError(msg)
        if not self.cwd.startswith("/"):
            raise ValueError(f"Working directory must be an absolute path, got {self.cwd!r}")

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> PathConfig:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with an optional ``cwd`` key.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys {sorted(unknown)}. Known keys: {sorted(known)}")

        cwd = data.get("cwd")
        if not (cwd is None or isinstance(cwd, str)):
            msg = f"'cwd' must be a string, not {type(cwd).__name__}"
            raise TypeError(msg)

        return cls(cwd=cwd)
