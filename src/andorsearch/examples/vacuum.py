"""The erratic vacuum world.

Two squares, ``A`` on the left and ``B`` on the right. Sucking a dirty square
cleans it and sometimes the other square as well; sucking a clean square
sometimes deposits dirt on it. Moving is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from andorsearch.problem import NondeterministicProblem

SUCK = "Suck"
RIGHT = "Right"
LEFT = "Left"


@dataclass(frozen=True)
class VacuumState:
    location: str
    dirt_a: bool
    dirt_b: bool

    def is_dirty(self, square: str) -> bool:
        return self.dirt_a if square == "A" else self.dirt_b

    def with_dirt(self, square: str, dirty: bool) -> VacuumState:
        if square == "A":
            return replace(self, dirt_a=dirty)
        return replace(self, dirt_b=dirty)

    def __str__(self) -> str:
        a = "dirty" if self.dirt_a else "clean"
        b = "dirty" if self.dirt_b else "clean"
        return f"{self.location}:{a}/{b}"


class ErraticVacuumWorld(NondeterministicProblem):
    def __init__(self, initial: VacuumState | None = None) -> None:
        self._initial = initial or VacuumState("A", True, True)

    def initial_state(self) -> VacuumState:
        return self._initial

    def is_goal(self, state: VacuumState) -> bool:
        return not state.dirt_a and not state.dirt_b

    def actions(self, state: VacuumState) -> list[str]:
        return [SUCK, RIGHT, LEFT]

    def results(self, state: VacuumState, action: str) -> list[VacuumState]:
        if action == LEFT:
            return [replace(state, location="A")]
        if action == RIGHT:
            return [replace(state, location="B")]
        if action != SUCK:
            raise ValueError(f"Unknown action: {action}")
        here = state.location
        other = "B" if here == "A" else "A"
        if state.is_dirty(here):
            cleaned = state.with_dirt(here, False)
            outcomes = [cleaned, cleaned.with_dirt(other, False)]
        else:
            outcomes = [state, state.with_dirt(here, True)]
        return list(dict.fromkeys(outcomes))
