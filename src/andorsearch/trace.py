"""Trace recorder for search runs."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from andorsearch.failures import FailureReason


@dataclass
class SearchTrace:
    trace_id: str
    started_at: float = field(default_factory=time.time)
    events: list[dict[str, Any]] = field(default_factory=list)

    def record(self, event_type: str, payload: dict[str, Any]) -> None:
        self.events.append(
            {
                "type": event_type,
                "timestamp": time.time(),
                "payload": payload,
            }
        )

    def record_choice(self, state: Any, depth: int) -> None:
        self.record("choice", {"state": str(state), "depth": depth})

    def record_outcomes(self, states: list[Any], depth: int) -> None:
        self.record("outcome", {"states": [str(s) for s in states], "depth": depth})

    def record_failure(self, state: Any, reason: FailureReason, depth: int) -> None:
        self.record(
            "failure",
            {"state": str(state), "reason": reason.value, "depth": depth},
        )

    def record_success(self, state: Any, action: Any, depth: int) -> None:
        self.record(
            "success",
            {"state": str(state), "action": str(action), "depth": depth},
        )

    def failures(self) -> list[dict[str, Any]]:
        return [event["payload"] for event in self.events if event["type"] == "failure"]

    def finalize(self, trace_dir: str | Path, stats: dict[str, Any]) -> str:
        target = Path(trace_dir) / "traces"
        target.mkdir(parents=True, exist_ok=True)
        trace_path = target / f"{self.trace_id}.json"
        payload = {
            "trace_id": self.trace_id,
            "started_at": self.started_at,
            "ended_at": time.time(),
            "stats": stats,
            "events": self.events,
        }
        trace_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return str(trace_path)
