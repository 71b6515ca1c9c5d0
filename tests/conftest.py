"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable

import pytest

WORKING_DIR = "/home/user"


@pytest.fixture
def cwd() -> Callable[[], str]:
    """Working-directory supplier pinned to ``/home/user``."""
    return lambda: WORKING_DIR


@pytest.fixture
def process_cwd(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the process working directory seen by ``default_cwd``."""
    monkeypatch.setattr(os, "getcwd", lambda: "/work")
    return "/work"
