"""Failure taxonomy for search traces."""

from __future__ import annotations

from enum import Enum


class FailureReason(str, Enum):
    """Why a branch of the search failed.

    Callers of the search only ever see ``None``; these tags exist for traces.
    """

    CYCLE = "CYCLE"
    NO_ACTIONS = "NO_ACTIONS"
    EXHAUSTED = "EXHAUSTED"
    OUTCOME_FAILED = "OUTCOME_FAILED"
