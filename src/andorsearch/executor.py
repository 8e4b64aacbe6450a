"""Step through a conditional plan as the environment reveals outcomes."""

from __future__ import annotations

from typing import Any

from andorsearch.plan import ActionStep, Plan


class PlanExecutionError(RuntimeError):
    pass


class PlanExecutor:
    """Feed observed states in, get the next action out.

    A branch step is resolved against the state observed when it is reached,
    and execution continues inside the selected sub-plan.
    """

    def __init__(self, plan: Plan) -> None:
        self._steps = list(plan.steps)

    @property
    def done(self) -> bool:
        return not self._steps

    def next_action(self, observed_state: Any) -> Any | None:
        while self._steps:
            step = self._steps.pop(0)
            if isinstance(step, ActionStep):
                return step.action
            branch = step.plan_for(observed_state)
            if branch is None:
                if not step.entries:
                    continue
                raise PlanExecutionError(f"No branch for observed state {observed_state}")
            self._steps = list(branch.steps) + self._steps
        return None
