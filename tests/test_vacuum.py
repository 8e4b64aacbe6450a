from __future__ import annotations

from itertools import product

import pytest

from andorsearch.examples.vacuum import ErraticVacuumWorld, VacuumState
from andorsearch.plan import ActionStep, BranchStep, Plan
from andorsearch.search import AndOrSearch


def _always_reaches_goal(problem: ErraticVacuumWorld, state: VacuumState, plan: Plan) -> bool:
    steps = list(plan.steps)
    if not steps:
        return problem.is_goal(state)
    step, rest = steps[0], Plan(tuple(steps[1:]))
    if isinstance(step, BranchStep):
        chosen = step.plan_for(state)
        if chosen is None:
            return False
        return _always_reaches_goal(problem, state, Plan(chosen.steps + rest.steps))
    assert isinstance(step, ActionStep)
    return all(
        _always_reaches_goal(problem, outcome, rest)
        for outcome in problem.results(state, step.action)
    )


def test_suck_on_dirty_square_may_clean_both() -> None:
    world = ErraticVacuumWorld()
    outcomes = world.results(VacuumState("A", True, True), "Suck")
    assert outcomes == [VacuumState("A", False, True), VacuumState("A", False, False)]


def test_suck_on_clean_square_may_deposit_dirt() -> None:
    world = ErraticVacuumWorld()
    outcomes = world.results(VacuumState("B", True, False), "Suck")
    assert outcomes == [VacuumState("B", True, False), VacuumState("B", True, True)]


def test_duplicate_outcomes_are_collapsed() -> None:
    world = ErraticVacuumWorld()
    outcomes = world.results(VacuumState("A", True, False), "Suck")
    assert outcomes == [VacuumState("A", False, False)]


def test_unknown_action_is_rejected() -> None:
    with pytest.raises(ValueError):
        ErraticVacuumWorld().results(VacuumState("A", True, True), "Mop")


def test_plan_from_both_dirty_starts_with_suck() -> None:
    world = ErraticVacuumWorld()
    plan = AndOrSearch().search(world)
    assert plan is not None
    assert plan[0] == ActionStep("Suck")
    assert str(plan) == (
        "[Suck, if A:clean/dirty then [Right, if B:clean/dirty then "
        "[Suck, if B:clean/clean then []]] else []]"
    )


@pytest.mark.parametrize(
    "location,dirt_a,dirt_b", list(product("AB", [True, False], [True, False]))
)
def test_every_start_state_has_a_guaranteed_plan(location: str, dirt_a: bool, dirt_b: bool) -> None:
    start = VacuumState(location, dirt_a, dirt_b)
    world = ErraticVacuumWorld(start)
    plan = AndOrSearch().search(world)
    assert plan is not None
    assert _always_reaches_goal(world, start, plan)
