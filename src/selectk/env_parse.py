"""Parsing of ``SELECTK_*`` environment variables.

Every variable read by SelectConfig.from_env goes through this module:
    - Unset, empty or whitespace-only values yield the caller's default.
    - strict=True (default): unrecognised values raise ``ConfigError``.
    - strict=False: unrecognised values log a warning and yield the default.
"""

from __future__ import annotations

import logging
import os

from selectk.core import Direction
from selectk.errors import SelectKError

logger = logging.getLogger(__name__)

TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})
FALSEY: frozenset[str] = frozenset({"0", "false", "no", "off"})

LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


class ConfigError(SelectKError):
    """Raised when a SELECTK_* variable has an invalid value (strict mode)."""


def _read(name: str) -> str | None:
    """Stripped value of ``name``, or None when unset or blank."""
    raw = os.environ.get(name)
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _reject(name: str, message: str, default: object, *, strict: bool) -> None:
    if strict:
        raise ConfigError(message)
    logger.warning("%s, using default %s for %s", message, default, name)


def parse_bool(name: str, default: bool, *, strict: bool = True) -> bool:
    """Parse ``1/true/yes/on`` or ``0/false/no/off`` (case-insensitive)."""
    value = _read(name)
    if value is None:
        return default
    lowered = value.lower()
    if lowered in TRUTHY:
        return True
    if lowered in FALSEY:
        return False
    _reject(name, f"invalid boolean value for {name}: {value!r}", default, strict=strict)
    return default


def parse_int(name: str, default: int, *, min_value: int = 0, strict: bool = True) -> int:
    """Parse an integer no smaller than ``min_value``.

    In non-strict mode a value below the minimum is clamped to it.
    """
    value = _read(name)
    if value is None:
        return default
    try:
        result = int(value)
    except ValueError:
        _reject(name, f"invalid integer value for {name}: {value!r}", default, strict=strict)
        return default
    if result < min_value:
        _reject(name, f"{name}={result} is below minimum {min_value}", min_value, strict=strict)
        return min_value
    return result


def _parse_choice(name: str, allowed: frozenset[str], default: str, *, strict: bool) -> str:
    value = _read(name)
    if value is None:
        return default
    upper = value.upper()
    if upper in allowed:
        return upper
    _reject(
        name,
        f"invalid value for {name}: {value!r} (allowed: {sorted(allowed)})",
        default,
        strict=strict,
    )
    return default


def parse_direction(
    name: str, default: Direction = Direction.TOP, *, strict: bool = True
) -> Direction:
    """Parse ``TOP`` or ``BOTTOM`` (case-insensitive)."""
    allowed = frozenset(d.value for d in Direction)
    return Direction(_parse_choice(name, allowed, default.value, strict=strict))


def parse_log_level(name: str, default: str = "WARNING", *, strict: bool = True) -> str:
    """Parse a logging level name from LOG_LEVELS (case-insensitive)."""
    return _parse_choice(name, LOG_LEVELS, default, strict=strict)
