"""
Unfold Sequence
===============

Endless lazy sequence driven by a seed and a pure transition.

INVARIANT: pull n emits the value component of the n-th application of the
transition, threaded from the seed. Exactly one state value exists at any
observable point.

ATOMICITY:
- The transition result is buffered and unpacked before it is committed
- A failing pull leaves the stored state and pull count untouched
- After a failure the sequence is FAULTED and refuses further pulls
"""

from __future__ import annotations
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

from ..contracts.base import (
    Error, ErrorCode, PullSnapshot, SequenceFaulted, SequenceStatus
)
from ..observability import get_logger

S = TypeVar("S")
T = TypeVar("T")

Transition = Callable[[S], Tuple[S, T]]

logger = get_logger(__name__)


class UnfoldSequence(Iterator[T], Generic[S, T]):
    """
    Infinite, single-pass iterator over the values a transition produces.

    Each pull calls ``transition(state)``, which must return a pair
    ``(next_state, value)``. The stored state becomes ``next_state`` and
    ``value`` is emitted. The iterator never raises StopIteration; bound it
    with ``itertools.islice``, ``itertools.takewhile`` or ``zip``.

    The sequence is not restartable. Build a new instance from the same
    seed to start over.
    """

    def __init__(self, transition: Transition, initial_state: S):
        if not callable(transition):
            raise TypeError(
                f"transition must be callable, got {type(transition).__name__}"
            )
        self._transition = transition
        self._state = initial_state
        self._pull_count = 0
        self._status = SequenceStatus.READY
        self._fault: Optional[Error] = None
        self._fault_cause: Optional[BaseException] = None

    def __iter__(self) -> UnfoldSequence[S, T]:
        return self

    def __next__(self) -> T:
        if self._status is SequenceStatus.FAULTED:
            logger.debug("Pull refused on faulted sequence (failed at pull %d)", self._fault.pull_index)
            raise SequenceFaulted(self._fault) from self._fault_cause

        try:
            result = self._transition(self._state)
            next_state, value = result
        except StopIteration as e:
            # Would otherwise read as exhaustion to every consumer
            failure = RuntimeError("transition raised StopIteration")
            self._record_fault(failure)
            raise failure from e
        except Exception as e:
            self._record_fault(e)
            raise

        self._state = next_state
        self._pull_count += 1
        return value

    def _record_fault(self, exc: BaseException) -> None:
        self._status = SequenceStatus.FAULTED
        self._fault_cause = exc
        self._fault = Error(
            code=ErrorCode.SEQUENCE_FAULTED,
            message=(
                f"Sequence faulted: transition failed at pull {self._pull_count} "
                f"with {type(exc).__name__}"
            ),
            pull_index=self._pull_count
        ).with_context(
            "cause_code", ErrorCode.TRANSITION_FAILED.name
        ).with_context(
            "exception_type", type(exc).__name__
        )
        logger.debug(
            "Transition failed at pull %d: %s: %s",
            self._pull_count, type(exc).__name__, exc
        )

    @property
    def status(self) -> SequenceStatus:
        return self._status

    @property
    def pull_count(self) -> int:
        """Number of successful pulls."""
        return self._pull_count

    @property
    def fault(self) -> Optional[Error]:
        """Error record of the failed pull, if the sequence has faulted."""
        return self._fault

    def snapshot(self) -> PullSnapshot:
        return PullSnapshot(pull_count=self._pull_count, status=self._status)

    def __repr__(self) -> str:
        return f"UnfoldSequence({self._status.name}, pulls={self._pull_count})"
