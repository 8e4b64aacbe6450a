"""AND-OR search producing conditional plans for nondeterministic problems."""

from __future__ import annotations

import sys
from typing import Any, Iterable

from andorsearch.config import Settings
from andorsearch.failures import FailureReason
from andorsearch.metrics import EXPANDED_NODES, Metrics
from andorsearch.path import Path
from andorsearch.plan import BranchTable, Plan
from andorsearch.problem import NondeterministicProblem
from andorsearch.trace import SearchTrace
from andorsearch.util.logging import get_logger


class AndOrSearch:
    """Depth-first AND-OR search returning the first workable conditional plan.

    ``choice_search`` is the OR node: the agent picks one action and the first
    action whose every outcome is solvable wins. ``outcome_search`` is the AND
    node: every outcome of the chosen action must be solvable. A state that
    recurs on the current path fails the branch. Both return ``None`` on
    failure; the empty ``Plan`` is a success meaning the goal already holds.

    The expansion counter is per instance, so concurrent searches need their
    own engines.

    Unset options default from ``Settings``, i.e. the ANDOR_* environment.
    """

    def __init__(
        self,
        recursion_limit: int | None = None,
        trace: SearchTrace | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or Settings()
        self.recursion_limit = recursion_limit or settings.recursion_limit
        self.trace = trace
        self.expanded_nodes = 0
        self._logger = get_logger("andorsearch", settings.log_level)

    def search(self, problem: NondeterministicProblem) -> Plan | None:
        self.expanded_nodes = 0
        initial = problem.initial_state()
        self._logger.info("search started from %s", initial)
        previous_limit = sys.getrecursionlimit()
        if self.recursion_limit > previous_limit:
            sys.setrecursionlimit(self.recursion_limit)
        try:
            plan = self.choice_search(initial, problem, Path())
        finally:
            sys.setrecursionlimit(previous_limit)
        self._logger.info(
            "search finished: %s after %d expansions",
            "plan found" if plan is not None else "no plan",
            self.expanded_nodes,
        )
        return plan

    def choice_search(
        self, state: Any, problem: NondeterministicProblem, path: Path
    ) -> Plan | None:
        self.expanded_nodes += 1
        depth = len(path)
        self._logger.debug("choice at depth %d: %s", depth, state)
        if self.trace is not None:
            self.trace.record_choice(state, depth)
        if problem.is_goal(state):
            return Plan()
        if state in path:
            self._fail(state, FailureReason.CYCLE, depth)
            return None
        actions = list(problem.actions(state))
        extended = path.prepend(state)
        for action in actions:
            plan = self.outcome_search(problem.results(state, action), problem, extended)
            if plan is not None:
                if self.trace is not None:
                    self.trace.record_success(state, action, depth)
                return plan.prepend(action)
        reason = FailureReason.EXHAUSTED if actions else FailureReason.NO_ACTIONS
        self._fail(state, reason, depth)
        return None

    def outcome_search(
        self, states: Iterable[Any], problem: NondeterministicProblem, path: Path
    ) -> Plan | None:
        self.expanded_nodes += 1
        states = list(states)
        if self.trace is not None:
            self.trace.record_outcomes(states, len(path))
        table = BranchTable()
        for state in states:
            plan = self.choice_search(state, problem, path)
            table.add(state, plan)
            if plan is None:
                self._fail(state, FailureReason.OUTCOME_FAILED, len(path))
                return None
        return Plan((table.to_step(),))

    def metrics(self) -> Metrics:
        """Return a snapshot of the counters of the last search."""
        return Metrics({EXPANDED_NODES: self.expanded_nodes})

    def _fail(self, state: Any, reason: FailureReason, depth: int) -> None:
        self._logger.debug("failure at depth %d: %s (%s)", depth, state, reason.value)
        if self.trace is not None:
            self.trace.record_failure(state, reason, depth)
