"""
Property Tests for the Unfold Sequence Contract
Verifies threading, determinism, non-termination and failure placement.
"""

import itertools

from hypothesis import given, strategies as st
from hypothesis.strategies import composite

from unfold import UnfoldSequence, SequenceStatus, SequenceFaulted
import pytest

# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

@composite
def affine_transitions(draw):
    """Pure transitions s -> (a*s + b mod m, s*c - d) over integers."""
    a = draw(st.integers(min_value=-5, max_value=5))
    b = draw(st.integers(min_value=-100, max_value=100))
    c = draw(st.integers(min_value=-3, max_value=3))
    d = draw(st.integers(min_value=-10, max_value=10))
    m = draw(st.integers(min_value=1, max_value=10_007))

    def transition(s):
        return (a * s + b) % m, s * c - d

    return transition


seeds = st.integers(min_value=-10_000, max_value=10_000)
pull_counts = st.integers(min_value=0, max_value=200)


def thread_manually(transition, seed, n):
    """Reference: apply the transition n times, collecting value components."""
    state = seed
    values = []
    for _ in range(n):
        state, value = transition(state)
        values.append(value)
    return values


# =============================================================================
# PROPERTY TESTS
# =============================================================================

@given(affine_transitions(), seeds, pull_counts)
def test_nth_value_matches_threaded_application(transition, seed, n):
    """Pull i emits the value of the i-th application threaded from the seed."""
    seq = UnfoldSequence(transition, seed)
    assert list(itertools.islice(seq, n)) == thread_manually(transition, seed, n)
    assert seq.pull_count == n


@given(affine_transitions(), seeds, pull_counts)
def test_determinism_across_instances(transition, seed, n):
    run1 = list(itertools.islice(UnfoldSequence(transition, seed), n))
    run2 = list(itertools.islice(UnfoldSequence(transition, seed), n))
    assert run1 == run2


@given(affine_transitions(), seeds, pull_counts, pull_counts)
def test_split_consumption_equals_contiguous(transition, seed, k, j):
    """Pulling k then j from one instance equals pulling k + j from a fresh one."""
    seq = UnfoldSequence(transition, seed)
    head = list(itertools.islice(seq, k))
    tail = list(itertools.islice(seq, j))

    fresh = list(itertools.islice(UnfoldSequence(transition, seed), k + j))
    assert head + tail == fresh


@given(affine_transitions(), seeds)
def test_never_exhausted(transition, seed):
    seq = UnfoldSequence(transition, seed)
    assert sum(1 for _ in itertools.islice(seq, 1_000)) == 1_000
    assert seq.status is SequenceStatus.READY


@given(st.integers(min_value=0, max_value=50), st.integers(min_value=1, max_value=5))
def test_failure_observed_exactly_at_pull_k(k, extra):
    """Pulls 0..k-1 succeed, pull k fails, later pulls report the fault."""
    def transition(s):
        return s + 1, 100 // (k - s)

    seq = UnfoldSequence(transition, 0)
    before = [next(seq) for _ in range(k)]
    assert before == [100 // (k - s) for s in range(k)]

    with pytest.raises(ZeroDivisionError):
        next(seq)

    for _ in range(extra):
        with pytest.raises(SequenceFaulted):
            next(seq)

    assert seq.pull_count == k
    assert seq.fault.pull_index == k
