from __future__ import annotations

import pytest

from andorsearch.path import Path


def test_prepend_does_not_mutate_parent() -> None:
    root = Path().prepend("A")
    left = root.prepend("L")
    right = root.prepend("R")
    assert list(root) == ["A"]
    assert list(left) == ["L", "A"]
    assert list(right) == ["R", "A"]
    assert "L" not in right
    assert "R" not in left


def test_tail_is_shared() -> None:
    root = Path().prepend("A")
    child = root.prepend("B")
    assert child.tail is root
    assert child.head == "B"


def test_membership_uses_equality_for_unhashable_states() -> None:
    path = Path().prepend([1, 2]).prepend({"x": 1})
    assert [1, 2] in path
    assert {"x": 1} in path
    assert [2, 1] not in path
    assert len(path) == 2


def test_empty_path() -> None:
    path = Path()
    assert path.is_empty()
    assert len(path) == 0
    assert "A" not in path
    with pytest.raises(IndexError):
        path.head
    with pytest.raises(IndexError):
        path.tail


def test_paths_compare_by_contents() -> None:
    assert Path().prepend("A").prepend("B") == Path().prepend("A").prepend("B")
    assert Path().prepend("A") != Path().prepend("B")
