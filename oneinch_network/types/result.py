"""
Result type definitions for batch execution
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FailurePolicy(Enum):
    """How per-item failures affect the rest of the batch"""
    FAIL_FAST = "fail_fast"
    CONTINUE = "continue"

    @classmethod
    def from_flag(cls, continue_on_fail: bool) -> "FailurePolicy":
        return cls.CONTINUE if continue_on_fail else cls.FAIL_FAST


@dataclass(frozen=True)
class OutcomeRecord:
    """
    Per-item result, tagged with the originating item's index

    Attributes:
        index: Index of the originating work item
        json: Remote JSON payload, or {"error": message} on captured failure
        error: Captured error message (None on success)
        item: The originating item's payload, passed through untouched
    """
    index: int
    json: Any
    error: Optional[str] = None
    item: Any = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, index: int, payload: Any, item: Any = None) -> "OutcomeRecord":
        """Create successful record"""
        return cls(index=index, json=payload, item=item)

    @classmethod
    def failed(cls, index: int, message: str, item: Any = None) -> "OutcomeRecord":
        """Create captured-failure record"""
        return cls(index=index, json={"error": message}, error=message, item=item)

    def __str__(self) -> str:
        if self.is_success:
            return f"OutcomeRecord(#{self.index}, SUCCESS)"
        return f"OutcomeRecord(#{self.index}, error={self.error})"
