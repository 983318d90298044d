"""
Front-end Functions
===================

Thin helpers over UnfoldSequence for the common ways of consuming it.
All bounding is done with itertools; the sequence itself never ends.
"""

from __future__ import annotations
from itertools import islice
from typing import Callable, Iterator, List, TypeVar

from ..contracts.base import ErrorCode
from .sequence import Transition, UnfoldSequence

S = TypeVar("S")
T = TypeVar("T")


def _check_bound(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"[{ErrorCode.INVALID_BOUND.name}] {name} must be non-negative, got {value}")
    return value


def unfold(transition: Transition, initial_state: S) -> UnfoldSequence[S, T]:
    """
    Create a new endless sequence.

    >>> seq = unfold(lambda n: (n + 1, n * n), 0)
    >>> [next(seq) for _ in range(4)]
    [0, 1, 4, 9]
    """
    return UnfoldSequence(transition, initial_state)


def iterate_step(func: Callable[[S], S]) -> Transition:
    """Lift ``func`` into a transition that emits each state, then advances it."""
    def step(state: S):
        return func(state), state
    return step


def iterate(func: Callable[[S], S], seed: S) -> UnfoldSequence[S, S]:
    """
    The sequence ``seed, func(seed), func(func(seed)), ...``

    >>> list(islice(iterate(lambda x: 2 * x, 1), 5))
    [1, 2, 4, 8, 16]
    """
    return UnfoldSequence(iterate_step(func), seed)


def unfold_list(transition: Transition, initial_state: S, length: int) -> List[T]:
    """Collect the first ``length`` values into a list."""
    _check_bound("length", length)
    return list(islice(UnfoldSequence(transition, initial_state), length))


def unfold_nth(transition: Transition, initial_state: S, index: int) -> T:
    """
    Value emitted by pull number ``index`` (0-indexed).

    Pulls ``index + 1`` times from a fresh sequence.
    """
    _check_bound("index", index)
    seq = UnfoldSequence(transition, initial_state)
    for _ in range(index):
        next(seq)
    return next(seq)


def unfold_count(transition: Transition, initial_state: S, count: int) -> Iterator[T]:
    """
    Lazy iterator over the first ``count`` values.

    Nothing is computed until the result is iterated.
    """
    _check_bound("count", count)
    return islice(UnfoldSequence(transition, initial_state), count)
