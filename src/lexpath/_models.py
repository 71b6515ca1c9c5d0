"""Immutable record of a parsed path."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class ParsedPath:
    """Components of a path as returned by :func:`lexpath.parse`.

    :param root: ``"/"`` for absolute paths, else ``""``.
    :param dir: Everything before the base, root included, no trailing slash.
    :param base: Final path component, extension included.
    :param ext: Extension of ``base`` including the dot, or ``""``.
    :param name: ``base`` without ``ext``.
    """

    root: str = ""
    dir: str = ""
    base: str = ""
    ext: str = ""
    name: str = ""

    def to_dict(self) -> dict[str, str]:
        """Plain dict form, accepted back by :func:`lexpath.format`."""
        return dataclasses.asdict(self)
