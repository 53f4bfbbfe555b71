"""Outcome of an interactive flow (create, set path, mark, delete)."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeStatus(Enum):
    """How a flow ended."""
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class FlowOutcome:
    status: OutcomeStatus
    reason: Optional[str] = None
    value: Optional[str] = None  # e.g. the created/switched-to path

    @classmethod
    def completed(cls, value: Optional[str] = None) -> "FlowOutcome":
        return cls(OutcomeStatus.COMPLETED, value=value)

    @classmethod
    def cancelled(cls) -> "FlowOutcome":
        return cls(OutcomeStatus.CANCELLED)

    @classmethod
    def failed(cls, reason: str) -> "FlowOutcome":
        return cls(OutcomeStatus.FAILED, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.COMPLETED
