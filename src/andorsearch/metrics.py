"""Read-only search metrics."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterator

EXPANDED_NODES = "expandedNodes"


class Metrics(Mapping[str, int]):
    """Snapshot of named counters taken after a search."""

    def __init__(self, values: Mapping[str, int] | None = None) -> None:
        self._values = dict(values or {})

    def get_int(self, name: str) -> int:
        return self._values.get(name, 0)

    def __getitem__(self, name: str) -> int:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Metrics({self._values!r})"
