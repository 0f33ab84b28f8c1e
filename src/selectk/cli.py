"""Project CLI entrypoint.

Provides CLI commands for selectk:
- selectk demo-ints: Top/Bottom K over a fixed list of integers
- selectk demo-points: K points nearest the origin
- selectk select: Top/Bottom K over numbers from argv or stdin
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from selectk.config import SelectConfig
from selectk.core import Direction
from selectk.env_parse import LOG_LEVELS
from selectk.errors import SelectKError
from selectk.policies import selector_for

logger = logging.getLogger(__name__)


def _pkg_version() -> str:
    try:
        return version("selectk")
    except PackageNotFoundError:
        return "0.0.0"


def _parse_number(raw: str) -> int | float:
    """Parse an int or a finite float; NaN and infinities raise ValueError."""
    try:
        return int(raw)
    except ValueError:
        value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value: {raw!r}")
    return value


def _emit(report: dict[str, Any], as_json: bool, lines: list[str]) -> None:
    if as_json:
        print(json.dumps(report, indent=2))
        return
    for line in lines:
        print(line)


def _cmd_demo_ints(args: argparse.Namespace) -> None:
    from selectk.demo import run_ints  # noqa: PLC0415 - lazy import for fast CLI startup

    report = run_ints(args.k)
    lines = [f"Inputs : {report['inputs']}", "Top =>"]
    lines += [f"  => {v}" for v in report["top"]]
    lines.append("Bottom =>")
    lines += [f"  => {v}" for v in report["bottom"]]
    _emit(report, args.json, lines)


def _cmd_demo_points(args: argparse.Namespace) -> None:
    from selectk.demo import run_points  # noqa: PLC0415 - lazy import for fast CLI startup

    report = run_points(args.k)
    lines = [f"finding k-nearest points to origin k={report['k']} ...", "Streaming =>"]
    lines += [f"  => {x},{y}" for x, y in report["streaming"]]
    lines.append("One-shot =>")
    lines += [f"  => {x},{y}" for x, y in report["one_shot"]]
    _emit(report, args.json, lines)


def _cmd_select(args: argparse.Namespace, config: SelectConfig) -> None:
    from selectk.demo import identity  # noqa: PLC0415 - lazy import for fast CLI startup

    raw_values = args.values or sys.stdin.read().split()
    try:
        values = [_parse_number(v) for v in raw_values]
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        raise SystemExit(2) from None

    k = config.k if args.k is None else args.k
    direction = config.direction if args.direction is None else Direction(args.direction.upper())
    is_sorted = config.sorted and not args.unsorted

    selector = selector_for(direction, k, identity)
    selector.offer_all(values)
    stats = selector.stats
    selected = selector.results(sorted=is_sorted, preserve_selection=False)
    logger.info(
        "Selected %d of %d values (k=%d direction=%s)",
        len(selected),
        len(values),
        k,
        direction.value,
    )

    report = {
        "k": k,
        "direction": direction.value,
        "sorted": is_sorted,
        "selected": selected,
        "stats": stats.to_dict(),
    }
    _emit(report, args.json, [str(v) for v in selected])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="selectk", description="selectk CLI")
    parser.add_argument("--version", action="version", version=f"selectk {_pkg_version()}")
    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS),
        help="Logging level (default: SELECTK_LOG_LEVEL or WARNING)",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_ints = sub.add_parser("demo-ints", help="Top/Bottom K over a fixed list of integers")
    p_ints.add_argument("--k", type=int, default=3, help="Number of values to keep")
    p_ints.add_argument("--json", action="store_true", help="Print a JSON report")

    p_points = sub.add_parser("demo-points", help="K points nearest the origin")
    p_points.add_argument("--k", type=int, default=4, help="Number of points to keep")
    p_points.add_argument("--json", action="store_true", help="Print a JSON report")

    p_select = sub.add_parser("select", help="Top/Bottom K over numbers (argv or stdin)")
    p_select.add_argument("values", nargs="*", help="Numbers to select from (default: stdin)")
    p_select.add_argument("--k", type=int, help="Number of values to keep (default: SELECTK_K)")
    p_select.add_argument(
        "--direction",
        choices=["top", "bottom"],
        help="Keep highest (top) or lowest (bottom) values (default: SELECTK_DIRECTION)",
    )
    p_select.add_argument("--unsorted", action="store_true", help="Skip best-first ordering")
    p_select.add_argument("--json", action="store_true", help="Print a JSON report")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SelectConfig.from_env()
    except SelectKError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        raise SystemExit(2) from None

    logging.basicConfig(
        level=args.log_level or config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        if args.cmd == "demo-ints":
            _cmd_demo_ints(args)
            return

        if args.cmd == "demo-points":
            _cmd_demo_points(args)
            return

        if args.cmd == "select":
            _cmd_select(args, config)
            return
    except SelectKError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        raise SystemExit(2) from None

    raise SystemExit(2)
