from __future__ import annotations

import pytest

from andorsearch.problem import FunctionProblem, NondeterministicProblem
from andorsearch.search import AndOrSearch


def test_function_problem_accepts_goal_collection() -> None:
    problem = FunctionProblem(
        "A",
        lambda state: ["act"] if state == "A" else [],
        lambda state, action: ["B"],
        ["B"],
    )
    assert problem.is_goal("B")
    assert not problem.is_goal("A")
    assert str(AndOrSearch().search(problem)) == "[act, if B then []]"


def test_problem_contract_is_abstract() -> None:
    with pytest.raises(TypeError):
        NondeterministicProblem()  # type: ignore[abstract]


def test_string_goal_is_a_single_state() -> None:
    problem = FunctionProblem("S", lambda state: [], lambda state, action: [], "AB")
    assert problem.is_goal("AB")
    assert not problem.is_goal("A")
    assert not problem.is_goal("B")
