"""Selection configuration.

Defaults can be overridden through the environment:
    SELECTK_K          retention bound (int >= 0, default 3)
    SELECTK_DIRECTION  TOP or BOTTOM (default TOP)
    SELECTK_SORTED     emit best first (bool, default true)
    SELECTK_LOG_LEVEL  DEBUG / INFO / WARNING / ERROR (default WARNING)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from selectk.core import Direction
from selectk.env_parse import parse_bool, parse_direction, parse_int, parse_log_level
from selectk.errors import validate_k

DEFAULT_K = 3


@dataclass(frozen=True)
class SelectConfig:
    """Configuration for building a selector.

    Attributes:
        k: Retention bound
        direction: TOP keeps the highest scores, BOTTOM the lowest
        sorted: Whether results are emitted best first
        log_level: Root logging level name used by the CLI
    """

    k: int = DEFAULT_K
    direction: Direction = Direction.TOP
    sorted: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        validate_k(self.k)

    @classmethod
    def from_env(cls, *, strict: bool = True) -> SelectConfig:
        """Read SELECTK_* variables, falling back to defaults when unset."""
        return cls(
            k=parse_int("SELECTK_K", DEFAULT_K, min_value=0, strict=strict),
            direction=parse_direction("SELECTK_DIRECTION", Direction.TOP, strict=strict),
            sorted=parse_bool("SELECTK_SORTED", True, strict=strict),
            log_level=parse_log_level("SELECTK_LOG_LEVEL", "WARNING", strict=strict),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "k": self.k,
            "direction": self.direction.value,
            "sorted": self.sorted,
            "log_level": self.log_level,
        }
