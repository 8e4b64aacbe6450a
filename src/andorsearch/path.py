"""Prepend-only trail of states visited on the current search branch."""

from __future__ import annotations

from typing import Any, Iterator


class Path:
    """Immutable cons list of states, most recent first.

    ``prepend`` returns a new path sharing this one as its tail, so sibling
    branches holding the same parent path never see each other's entries.
    Membership uses ``==`` only; states do not need to be hashable.
    """

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self) -> None:
        self._head: Any = None
        self._tail: Path | None = None
        self._size = 0

    def prepend(self, state: Any) -> Path:
        path = Path.__new__(Path)
        path._head = state
        path._tail = self
        path._size = self._size + 1
        return path

    @property
    def head(self) -> Any:
        if not self._size:
            raise IndexError("head of empty path")
        return self._head

    @property
    def tail(self) -> Path:
        if self._tail is None:
            raise IndexError("tail of empty path")
        return self._tail

    def is_empty(self) -> bool:
        return self._size == 0

    def __iter__(self) -> Iterator[Any]:
        node = self
        while node._size:
            yield node._head
            node = node._tail  # type: ignore[assignment]

    def __contains__(self, state: object) -> bool:
        return any(entry == state for entry in self)

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Path({list(self)!r})"
