"""
Base Contracts and Shared Types

Foundational types shared by the generator core and its front-ends.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- This module imports nothing from the rest of the package
- Core and recipes import types from here, never the other way round
- All record types are frozen dataclasses
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple


# =============================================================================
# SEQUENCE LIFECYCLE
# =============================================================================

class SequenceStatus(Enum):
    """
    Explicit generator lifecycle states.

    READY is the initial state and the state after every successful pull.
    FAULTED is terminal: entered only when the transition fails.
    """
    READY = "ready"
    FAULTED = "faulted"


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes.
    Every failure the package can report is enumerated here.
    """
    # Raised by the user-supplied transition during a pull
    TRANSITION_FAILED = auto()

    # Pull attempted after a transition failure
    SEQUENCE_FAULTED = auto()

    # Front-end argument errors
    INVALID_BOUND = auto()

    # Recipe argument outside the recurrence's domain
    INVALID_DOMAIN = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data: they travel on exceptions and can be inspected
    without parsing messages.
    """
    code: ErrorCode
    message: str
    pull_index: Optional[int] = None
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
            pull_index=self.pull_index,
            context=self.context + ((key, value),)
        )

    def context_value(self, key: str) -> Optional[str]:
        for k, v in self.context:
            if k == key:
                return v
        return None


class SequenceFaulted(Exception):
    """Raised when a faulted sequence is pulled again."""

    def __init__(self, error: Error):
        super().__init__(error.message)
        self.error = error


# =============================================================================
# SNAPSHOTS
# =============================================================================

@dataclass(frozen=True)
class PullSnapshot:
    """Immutable view of a generator's progress. Never includes the state."""
    pull_count: int
    status: SequenceStatus

    @property
    def is_faulted(self) -> bool:
        return self.status is SequenceStatus.FAULTED

    def to_dict(self) -> dict:
        return {
            'pull_count': self.pull_count,
            'status': self.status.value,
        }
