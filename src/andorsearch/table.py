"""Declarative problems described by a transition table."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from andorsearch.problem import NondeterministicProblem


class ProblemTableError(ValueError):
    pass


class ProblemTable(BaseModel):
    """State -> action -> ordered outcome list, plus the initial and goal states."""

    initial: str
    goals: list[str] = Field(default_factory=list)
    transitions: dict[str, dict[str, list[str]]] = Field(default_factory=dict)

    @field_validator("initial")
    @classmethod
    def _initial_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("initial state must not be empty")
        return value


class TableProblem(NondeterministicProblem):
    def __init__(self, table: ProblemTable) -> None:
        self.table = table
        self._goals = set(table.goals)

    def initial_state(self) -> str:
        return self.table.initial

    def is_goal(self, state: str) -> bool:
        return state in self._goals

    def actions(self, state: str) -> list[str]:
        return list(self.table.transitions.get(state, {}))

    def results(self, state: str, action: str) -> list[str]:
        return list(self.table.transitions.get(state, {}).get(action, []))


def parse_problem(payload: Any) -> TableProblem:
    """Validate a raw payload and wrap it as a problem."""
    try:
        table = ProblemTable.model_validate(payload)
    except ValidationError as exc:
        raise ProblemTableError(str(exc)) from exc
    return TableProblem(table)


def load_problem(path: str | Path) -> TableProblem:
    path_obj = Path(path)
    try:
        text = path_obj.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProblemTableError(f"Cannot read problem file {path_obj}: {exc}") from exc
    if path_obj.suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional
            raise ProblemTableError("Install andorsearch[yaml] to load YAML problems.") from exc
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ProblemTableError(f"Invalid YAML in {path_obj}: {exc}") from exc
    else:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ProblemTableError(f"Invalid JSON in {path_obj}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ProblemTableError("Problem table must be a JSON object.")
    return parse_problem(payload)
