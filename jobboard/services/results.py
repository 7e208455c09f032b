"""
Tagged results for store operations
A refused operation leaves state untouched and says why
"""
import enum
from dataclasses import dataclass
from typing import Any, Optional


class Outcome(str, enum.Enum):
    OK = "ok"
    DENIED = "denied"                # No session, wrong role, not owner
    NOT_FOUND = "not_found"          # Target entity does not exist
    CONFLICT = "conflict"            # Duplicate email / duplicate application
    INVALID_STATE = "invalid_state"  # e.g. applying to a job that is not active


@dataclass(frozen=True)
class OperationResult:
    outcome: Outcome
    reason: str = ""
    entity: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    def __bool__(self):
        return self.ok

    @classmethod
    def success(cls, entity: Any = None) -> "OperationResult":
        return cls(Outcome.OK, "", entity)

    @classmethod
    def denied(cls, reason: str) -> "OperationResult":
        return cls(Outcome.DENIED, reason)

    @classmethod
    def not_found(cls, reason: str) -> "OperationResult":
        return cls(Outcome.NOT_FOUND, reason)

    @classmethod
    def conflict(cls, reason: str) -> "OperationResult":
        return cls(Outcome.CONFLICT, reason)

    @classmethod
    def invalid_state(cls, reason: str) -> "OperationResult":
        return cls(Outcome.INVALID_STATE, reason)
