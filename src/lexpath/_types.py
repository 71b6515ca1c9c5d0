"""Type aliases used throughout lexpath."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from lexpath._models import ParsedPath

CwdSupplier = Callable[[], str]
PathRecord = Union["ParsedPath", Mapping[str, object]]  # noqa: UP007
