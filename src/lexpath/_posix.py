"""POSIX path operations composed from the segment normalizer and the splitter.

Every function is pure: the only outside input is the working directory that
:func:`resolve` and :func:`relative` read from a supplier when no absolute
segment is given.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Final

from lexpath._cwd import default_cwd
from lexpath._errors import InvalidArgumentType
from lexpath._models import ParsedPath
from lexpath._normalizer import PARENT, normalize_segments
from lexpath._splitter import split_path

if TYPE_CHECKING:
    from collections.abc import Iterator

    from lexpath._types import CwdSupplier, PathRecord

log = logging.getLogger(__name__)

sep: Final = "/"
delimiter: Final = ":"


def _require_str(value: object, what: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentType(f"{what} must be a string, not {type(value).__name__}")


def is_absolute(path: str) -> bool:
    """Whether *path* starts at the root. The empty string is relative."""
    _require_str(path, "Path")
    return path.startswith(sep)


def normalize(path: str) -> str:
    """Collapse ``.``, ``..`` and repeated slashes in *path*.

    A trailing slash survives, an empty relative result becomes ``"."``, and
    ``..`` never climbs above the root of an absolute path::

        normalize("/a/b/../../c")  # "/c"
        normalize("a/../../b")  # "../b"
        normalize("a/b/")  # "a/b/"
    """
    absolute = is_absolute(path)
    trailing_slash = path[-1:] == sep

    path = sep.join(normalize_segments(path.split(sep), not absolute))

    if not path and not absolute:
        path = "."
    if path and trailing_slash:
        path += sep

    return (sep if absolute else "") + path


def join(*segments: str) -> str:
    """Join *segments* with ``/`` and normalize. Empty segments are ignored.

    :raises InvalidArgumentType: If any segment is not a string.
    """
    for segment in segments:
        _require_str(segment, "Arguments to join")
    return normalize(sep.join(segment for segment in segments if segment))


def _resolve_candidates(segments: tuple[str, ...], cwd: CwdSupplier) -> Iterator[str]:
    # right to left, then the working directory as the last resort
    yield from reversed(segments)
    working_dir = cwd()
    _require_str(working_dir, "Working directory")
    log.debug("No absolute segment in %r, resolving against %r", segments, working_dir)
    yield working_dir


def resolve(*segments: str, cwd: CwdSupplier | None = None) -> str:
    """Resolve *segments* into an absolute path.

    Segments are prepended right to left until one is absolute. If none is,
    the working directory from *cwd* (default :func:`default_cwd`) is used as
    the base. The supplier is called at most once.

    :param cwd: Zero-argument callable returning an absolute path.
    :raises InvalidArgumentType: If any segment, or the working directory, is
        not a string.
    """
    for segment in segments:
        _require_str(segment, "Arguments to resolve")

    resolved = ""
    resolved_absolute = False
    for segment in _resolve_candidates(segments, cwd or default_cwd):
        if not segment:
            continue
        resolved = f"{segment}{sep}{resolved}"
        resolved_absolute = segment.startswith(sep)
        if resolved_absolute:
            break

    # Still relative only if the supplier returned a relative path.
    resolved = sep.join(normalize_segments(resolved.split(sep), not resolved_absolute))
    return ((sep if resolved_absolute else "") + resolved) or "."


def _trim(parts: list[str]) -> list[str]:
    start = 0
    while start < len(parts) and parts[start] == "":
        start += 1
    end = len(parts)
    while end > start and parts[end - 1] == "":
        end -= 1
    return parts[start:end]


def relative(from_: str, to: str, *, cwd: CwdSupplier | None = None) -> str:
    """Path that leads from *from_* to *to*, both resolved first.

    Example: ``relative("/a/b/c", "/a/b/d/e")`` returns ``"../d/e"``.
    Identical locations give ``""``.
    """
    from_parts = _trim(resolve(from_, cwd=cwd)[1:].split(sep))
    to_parts = _trim(resolve(to, cwd=cwd)[1:].split(sep))

    same = 0
    for from_part, to_part in zip(from_parts, to_parts):
        if from_part != to_part:
            break
        same += 1

    output = [PARENT] * (len(from_parts) - same)
    output.extend(to_parts[same:])
    return sep.join(output)


def dirname(path: str) -> str:
    """Directory portion of *path*: ``dirname("/a/b/") == "/a"``, ``dirname("a") == "."``."""
    root, dir_, _, _ = split_path(path)
    if not root and not dir_:
        return "."
    if dir_:
        dir_ = dir_[:-1]
    return root + dir_


def basename(path: str, ext: str | None = None) -> str:
    """Final component of *path*, with *ext* removed when it ends with it."""
    base = split_path(path)[2]
    if ext is not None:
        _require_str(ext, "Extension")
    if ext and base.endswith(ext):
        base = base[: len(base) - len(ext)]
    return base


def extname(path: str) -> str:
    """Extension of the final component, dot included; ``""`` for ``.gitignore``."""
    return split_path(path)[3]


def parse(path: str) -> ParsedPath:
    """Split *path* into a :class:`ParsedPath`.

    :raises InvalidArgumentType: If *path* is not a string.
    :raises MalformedSplit: If the path cannot be decomposed.
    """
    _require_str(path, "Parameter 'path'")
    root, dir_, base, ext = split_path(path)
    return ParsedPath(
        root=root,
        dir=root + dir_[:-1],
        base=base,
        ext=ext,
        name=base[: len(base) - len(ext)],
    )


def _field(record: PathRecord, key: str) -> str:
    value = record.get(key) if isinstance(record, Mapping) else getattr(record, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgumentType(f"'{key}' must be a string or None, not {type(value).__name__}")
    return value


def format(record: PathRecord) -> str:  # noqa: A001
    """Build a path string from a :class:`ParsedPath` or a mapping with the same keys.

    Only ``dir`` and ``base`` contribute: ``root`` is type-checked but not
    used, so ``format({"root": "/", "base": "x"})`` returns ``"x"``.

    :raises InvalidArgumentType: If *record* is neither, or a field is not text.
    """
    if not isinstance(record, (ParsedPath, Mapping)):
        raise InvalidArgumentType(f"Path record must be a ParsedPath or a mapping, not {type(record).__name__}")
    _field(record, "root")
    dir_ = _field(record, "dir")
    base = _field(record, "base")
    return f"{dir_}{sep}{base}" if dir_ else base
