"""Command-line interface."""

from __future__ import annotations

import argparse
import json
from typing import Any, Sequence
from uuid import uuid4

from pydantic import ValidationError

from andorsearch.config import Settings
from andorsearch.examples.vacuum import ErraticVacuumWorld
from andorsearch.problem import NondeterministicProblem
from andorsearch.search import AndOrSearch
from andorsearch.table import ProblemTableError, load_problem
from andorsearch.trace import SearchTrace
from andorsearch.util.logging import get_logger

BUILTIN_PROBLEMS = {"vacuum": ErraticVacuumWorld}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="AND-OR search for conditional plans")
    parser.add_argument(
        "problem",
        type=str,
        help="Path to a problem table (JSON/YAML) or a builtin name: "
        + ", ".join(sorted(BUILTIN_PROBLEMS)),
    )
    parser.add_argument("--json", action="store_true", dest="json_output")
    parser.add_argument("--log-level", dest="log_level")
    parser.add_argument("--trace-dir", dest="trace_dir")
    parser.add_argument("--recursion-limit", type=int, dest="recursion_limit")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    data: dict[str, Any] = settings.model_dump()
    if args.log_level:
        data["log_level"] = args.log_level
    if args.trace_dir:
        data["trace_dir"] = args.trace_dir
    if args.recursion_limit:
        data["recursion_limit"] = args.recursion_limit
    return Settings(**data)


def resolve_problem(name: str) -> NondeterministicProblem:
    factory = BUILTIN_PROBLEMS.get(name)
    if factory is not None:
        return factory()
    return load_problem(name)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = apply_overrides(Settings(), args)
    except ValidationError as exc:
        get_logger("andorsearch").error("invalid settings: %s", exc)
        return 2
    logger = get_logger("andorsearch", settings.log_level)
    try:
        problem = resolve_problem(args.problem)
    except ProblemTableError as exc:
        logger.error("invalid problem: %s", exc)
        return 2
    trace = SearchTrace(trace_id=uuid4().hex) if settings.trace_dir else None
    engine = AndOrSearch(trace=trace, settings=settings)
    plan = engine.search(problem)
    metrics = engine.metrics()
    if trace is not None:
        trace_path = trace.finalize(settings.trace_dir, dict(metrics))
        logger.info("trace written to %s", trace_path)
    if args.json_output:
        print(
            json.dumps(
                {"plan": plan.to_dict() if plan is not None else None, "metrics": dict(metrics)},
                indent=2,
            )
        )
    elif plan is None:
        print("No plan found")
    else:
        print("Plan:", plan)
    if not args.json_output:
        print("Expanded nodes:", metrics.get_int("expandedNodes"))
    return 0 if plan is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
