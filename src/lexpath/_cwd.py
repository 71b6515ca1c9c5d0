"""Working-directory lookup used by ``resolve``."""

from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)

_FALLBACK_CWD = "/"


def default_cwd() -> str:
    """Current working directory of the process, or ``"/"`` if it has none."""
    try:
        return os.getcwd()
    except OSError as exc:
        log.warning("Working directory unavailable (%s), resolving against %r", exc, _FALLBACK_CWD)
        return _FALLBACK_CWD
