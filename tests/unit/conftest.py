"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_selectk_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SELECTK_* variables from the outer environment out of tests."""
    for name in ("SELECTK_K", "SELECTK_DIRECTION", "SELECTK_SORTED", "SELECTK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
