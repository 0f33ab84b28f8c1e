"""selectk - bounded Top-K / Bottom-K selection over streams.

Keeps the K best-scoring candidates seen so far in O(K) memory and
O(N log K) time.

Note: version is sourced from package metadata (pyproject.toml).
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from selectk.core import Direction, SelectionState
from selectk.engine import ScoredCandidate, SelectEngine, SelectionStats
from selectk.env_parse import ConfigError
from selectk.errors import InvalidBoundError, SelectKError
from selectk.policies import Bottom, Top, compute, selector_for


def _pkg_version() -> str:
    try:
        return version("selectk")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _pkg_version()

__all__ = [
    "Bottom",
    "ConfigError",
    "Direction",
    "InvalidBoundError",
    "ScoredCandidate",
    "SelectEngine",
    "SelectKError",
    "SelectionState",
    "SelectionStats",
    "Top",
    "__version__",
    "compute",
    "selector_for",
]
