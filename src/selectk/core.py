"""Core enums for selectk."""

from enum import Enum


class Direction(Enum):
    """Which end of the score range is retained."""

    TOP = "TOP"  # Keep the K highest scores
    BOTTOM = "BOTTOM"  # Keep the K lowest scores


class SelectionState(Enum):
    """Engine state machine states."""

    ACCUMULATING = "ACCUMULATING"  # Fewer than K retained, every offer accepted
    SATURATED = "SATURATED"  # Exactly K retained, offers may evict the worst
