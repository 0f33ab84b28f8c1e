"""selectk exception hierarchy.

Exception hierarchy:
- SelectKError (base)
  - InvalidBoundError (k is negative or not an integer; also a ValueError)
  - ConfigError (invalid environment configuration, see env_parse)

Degenerate inputs (k == 0, empty input) are defined behaviour and never raise.
Exceptions from a caller's scoring function are not wrapped.
"""

from __future__ import annotations

from typing import Any


class SelectKError(Exception):
    """Base exception for all selectk errors."""

    pass


class InvalidBoundError(SelectKError, ValueError):
    """Retention bound is not a non-negative integer.

    Attributes:
        k: The rejected value
    """

    def __init__(self, k: Any, message: str | None = None) -> None:
        self.k = k
        msg = message or f"k must be a non-negative integer, got {k!r}"
        super().__init__(msg)


def validate_k(k: Any) -> int:
    """Return k unchanged if it is a valid retention bound, else raise.

    bool is rejected even though it subclasses int.
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidBoundError(k)
    if k < 0:
        raise InvalidBoundError(k)
    return k
