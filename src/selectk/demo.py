"""Sample selections over integers and 2-D points.

Each runner returns a JSON-serializable report so the CLI (or a test) can
render it however it likes.
"""

from __future__ import annotations

from typing import Any

from selectk.policies import Bottom, Top

Point = tuple[int, int]

DEMO_INTS: tuple[int, ...] = (1, 4, 2, 30, 5, 6, 11, 10, 9, 100)

# 3x3 grid, row-major from x=3 down to x=1, then x=2 (offer order matters for ties)
DEMO_POINTS: tuple[Point, ...] = (
    (3, 1),
    (3, 2),
    (3, 3),
    (1, 1),
    (1, 2),
    (1, 3),
    (2, 1),
    (2, 2),
    (2, 3),
)


def identity(value: Any) -> Any:
    return value


def squared_distance(point: Point) -> int:
    """Square of the euclidean distance from the origin."""
    x, y = point
    return x * x + y * y


def run_ints(k: int = 3, inputs: tuple[int, ...] = DEMO_INTS) -> dict[str, Any]:
    """Stream the same integers through a Top and a Bottom selector."""
    top: Top[int, int] = Top(k, identity)
    bottom: Bottom[int, int] = Bottom(k, identity)
    for value in inputs:
        top.offer(value)
        bottom.offer(value)
    return {
        "k": k,
        "inputs": list(inputs),
        "top": top.results(sorted=True),
        "bottom": bottom.results(sorted=True),
    }


def run_points(k: int = 4, inputs: tuple[Point, ...] = DEMO_POINTS) -> dict[str, Any]:
    """Find the k points nearest the origin, streaming and one-shot."""
    nearest: Bottom[Point, int] = Bottom(k, squared_distance)
    nearest.offer_all(inputs)
    scored = nearest.scored_results(sorted=True)
    one_shot = Bottom.compute(k, inputs, squared_distance)
    return {
        "k": k,
        "inputs": [list(p) for p in inputs],
        "streaming": [list(s.candidate) for s in scored],
        "scores": [s.score for s in scored],
        "one_shot": [list(p) for p in one_shot],
    }
