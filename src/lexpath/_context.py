"""PathContext: the path API bound to one working-directory supplier."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lexpath import _posix
from lexpath._config import PathConfig
from lexpath._cwd import default_cwd

if TYPE_CHECKING:
    from lexpath._models import ParsedPath
    from lexpath._types import CwdSupplier, PathRecord

log = logging.getLogger(__name__)


class PathContext:
    """Path operations that resolve against a chosen working directory.

    The supplier is picked in order: explicit *cwd*, ``config.cwd``, then the
    process working directory.

    :param config: Optional configuration. Validates immediately.
    :param cwd: Zero-argument callable returning an absolute path.
    :raises ValueError: If config is invalid.
    """

    sep = _posix.sep
    delimiter = _posix.delimiter

    def __init__(self, config: PathConfig | None = None, *, cwd: CwdSupplier | None = None) -> None:
        self._config = config or PathConfig()
        self._config.validate()
        self._explicit_cwd = cwd
        self._cwd: CwdSupplier
        if cwd is not None:
            self._cwd = cwd
        elif self._config.cwd is not None:
            self._cwd = self._fixed_cwd
        else:
            self._cwd = default_cwd
        log.debug("PathContext created with cwd=%r", self._config.cwd)

    def _fixed_cwd(self) -> str:
        return str(self._config.cwd)

    def __repr__(self) -> str:
        return f"PathContext(cwd={self._config.cwd!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathContext):
            return self._config == other._config and self._explicit_cwd == other._explicit_cwd
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._config)

    @property
    def config(self) -> PathConfig:
        """The configuration this context was built from."""
        return self._config

    def cwd(self) -> str:
        """Working directory that relative paths resolve against."""
        return self._cwd()

    def is_absolute(self, path: str) -> bool:
        return _posix.is_absolute(path)

    def normalize(self, path: str) -> str:
        return _posix.normalize(path)

    def join(self, *segments: str) -> str:
        return _posix.join(*segments)

    def resolve(self, *segments: str) -> str:
        return _posix.resolve(*segments, cwd=self._cwd)

    def relative(self, from_: str, to: str) -> str:
        return _posix.relative(from_, to, cwd=self._cwd)

    def dirname(self, path: str) -> str:
        return _posix.dirname(path)

    def basename(self, path: str, ext: str | None = None) -> str:
        return _posix.basename(path, ext)

    def extname(self, path: str) -> str:
        return _posix.extname(path)

    def parse(self, path: str) -> ParsedPath:
        return _posix.parse(path)

    def format(self, record: PathRecord) -> str:
        return _posix.format(record)
