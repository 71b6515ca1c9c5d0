"""Lexical POSIX path manipulation: parse, normalize, join, resolve, relative."""

from lexpath._config import PathConfig
from lexpath._context import PathContext
from lexpath._cwd import default_cwd
from lexpath._errors import InvalidArgumentType, MalformedSplit, PathError
from lexpath._models import ParsedPath
from lexpath._posix import (
    basename,
    delimiter,
    dirname,
    extname,
    format,
    is_absolute,
    join,
    normalize,
    parse,
    relative,
    resolve,
    sep,
)

__version__ = "0.1.0"

__all__ = [
    # Operations
    "is_absolute",
    "normalize",
    "join",
    "resolve",
    "relative",
    "dirname",
    "basename",
    "extname",
    "parse",
    "format",
    # Constants
    "sep",
    "delimiter",
    # Models & context
    "ParsedPath",
    "PathContext",
    "PathConfig",
    "default_cwd",
    # Errors
    "PathError",
    "InvalidArgumentType",
    "MalformedSplit",
    # Version
    "__version__",
]
