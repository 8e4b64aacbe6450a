"""Conditional plan structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Union


@dataclass(frozen=True)
class ActionStep:
    """Perform a single action."""

    action: Any

    def __str__(self) -> str:
        return str(self.action)


@dataclass(frozen=True)
class BranchStep:
    """Pick a sub-plan according to the outcome state actually observed.

    Entries keep the order in which the outcomes were enumerated.
    """

    entries: tuple[tuple[Any, "Plan"], ...] = ()

    @property
    def states(self) -> list[Any]:
        return [state for state, _ in self.entries]

    def plan_for(self, state: Any) -> Plan | None:
        for candidate, plan in self.entries:
            if candidate == state:
                return plan
        return None

    def __str__(self) -> str:
        if not self.entries:
            return "if true then []"
        parts = [f"if {state} then {plan}" for state, plan in self.entries[:-1]]
        last_state, last_plan = self.entries[-1]
        if not parts:
            return f"if {last_state} then {last_plan}"
        return " else ".join(parts) + f" else {last_plan}"


Step = Union[ActionStep, BranchStep]


@dataclass(frozen=True)
class Plan:
    """Immutable sequence of steps; the empty plan means the goal already holds.

    An empty plan is falsy, yet it is a success; failure is ``None``.
    """

    steps: tuple[Step, ...] = field(default_factory=tuple)

    def prepend(self, action: Any) -> Plan:
        return Plan((ActionStep(action),) + self.steps)

    def is_empty(self) -> bool:
        return not self.steps

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]

    def __str__(self) -> str:
        return "[" + ", ".join(str(step) for step in self.steps) + "]"

    def to_dict(self) -> dict[str, Any]:
        steps: list[dict[str, Any]] = []
        for step in self.steps:
            if isinstance(step, ActionStep):
                steps.append({"action": _jsonable(step.action)})
            else:
                steps.append(
                    {
                        "branch": [
                            {"state": _jsonable(state), "plan": plan.to_dict()}
                            for state, plan in step.entries
                        ]
                    }
                )
        return {"steps": steps}


class BranchTable:
    """Mutable builder for a branch step, filled one outcome at a time."""

    def __init__(self) -> None:
        self._entries: list[tuple[Any, Plan | None]] = []

    def add(self, state: Any, plan: Plan | None) -> None:
        self._entries.append((state, plan))

    def __len__(self) -> int:
        return len(self._entries)

    def to_step(self) -> BranchStep:
        if any(plan is None for _, plan in self._entries):
            raise ValueError("branch table contains a failed outcome")
        return BranchStep(tuple(self._entries))  # type: ignore[arg-type]


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
