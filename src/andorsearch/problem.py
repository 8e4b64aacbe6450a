"""Nondeterministic problem contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Sequence

State = Any
Action = Any

ActionsFunction = Callable[[State], Sequence[Action]]
ResultsFunction = Callable[[State, Action], Sequence[State]]
GoalTest = Callable[[State], bool]


class NondeterministicProblem(ABC):
    """Problem whose actions may lead to any one of several outcome states.

    ``actions`` and ``results`` must enumerate in a stable order; plan shape
    follows that order.
    """

    @abstractmethod
    def initial_state(self) -> State:
        raise NotImplementedError

    @abstractmethod
    def is_goal(self, state: State) -> bool:
        raise NotImplementedError

    @abstractmethod
    def actions(self, state: State) -> Sequence[Action]:
        raise NotImplementedError

    @abstractmethod
    def results(self, state: State, action: Action) -> Sequence[State]:
        raise NotImplementedError


class FunctionProblem(NondeterministicProblem):
    """Problem assembled from plain callables.

    ``goal_test`` is a predicate, a collection of goal states, or a single
    string goal state.
    """

    def __init__(
        self,
        initial_state: State,
        actions_fn: ActionsFunction,
        results_fn: ResultsFunction,
        goal_test: GoalTest | Iterable[State],
    ) -> None:
        self._initial_state = initial_state
        self._actions_fn = actions_fn
        self._results_fn = results_fn
        if callable(goal_test):
            self._goal_test = goal_test
        else:
            goals = [goal_test] if isinstance(goal_test, str) else list(goal_test)
            self._goal_test = lambda state: state in goals

    def initial_state(self) -> State:
        return self._initial_state

    def is_goal(self, state: State) -> bool:
        return bool(self._goal_test(state))

    def actions(self, state: State) -> Sequence[Action]:
        return self._actions_fn(state)

    def results(self, state: State, action: Action) -> Sequence[State]:
        return self._results_fn(state, action)
