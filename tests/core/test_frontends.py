"""
Front-end Function Tests

unfold / iterate / unfold_list / unfold_nth / unfold_count.
"""

import itertools

import pytest

from unfold import (
    UnfoldSequence, unfold, iterate, iterate_step,
    unfold_list, unfold_nth, unfold_count
)


def fib_step(state):
    a, b = state
    return (b, a + b), state


class TestUnfold:

    def test_returns_unfold_sequence(self):
        seq = unfold(lambda n: (n - 1, n), 100)
        assert isinstance(seq, UnfoldSequence)
        assert list(itertools.islice(seq, 3)) == [100, 99, 98]


class TestIterate:
    """iterate(f, x) produces x, f(x), f(f(x)), ..."""

    def test_seed_emitted_first(self):
        seq = iterate(lambda x: x * 2, 1)
        assert list(itertools.islice(seq, 10)) == [1, 2, 4, 8, 16, 32, 64, 128, 256, 512]

    def test_fibonacci_pairs(self):
        pairs = iterate(lambda ab: (ab[1], ab[0] + ab[1]), (0, 1))
        firsts = [a for a, _ in itertools.islice(pairs, 8)]
        assert firsts == [0, 1, 1, 2, 3, 5, 8, 13]

    def test_iterate_step_shape(self):
        step = iterate_step(lambda x: x + 3)
        assert step(4) == (7, 4)

    def test_func_not_called_before_pull(self):
        calls = []
        iterate(lambda x: calls.append(x) or x, 0)
        assert calls == []


class TestUnfoldList:

    def test_counting(self):
        assert unfold_list(lambda x: (x + 1, x), 0, 10) == list(range(10))

    def test_zero_length(self):
        assert unfold_list(lambda x: (x + 1, x), 0, 0) == []

    def test_negative_length_rejected(self):
        with pytest.raises(ValueError, match="INVALID_BOUND"):
            unfold_list(lambda x: (x + 1, x), 0, -1)

    def test_non_int_length_rejected(self):
        with pytest.raises(TypeError):
            unfold_list(lambda x: (x + 1, x), 0, 2.5)
        with pytest.raises(TypeError):
            unfold_list(lambda x: (x + 1, x), 0, True)


class TestUnfoldNth:

    def test_zero_indexed(self):
        assert unfold_nth(lambda x: (x + 1, x), 0, 0) == 0
        assert unfold_nth(lambda x: (x + 1, x), 0, 9) == 9

    def test_fibonacci_index_seven(self):
        a, _ = unfold_nth(fib_step, (0, 1), 7)
        assert a == 13

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            unfold_nth(lambda x: (x + 1, x), 0, -3)

    def test_failure_propagates(self):
        def step(n):
            return n + 1, 10 // (3 - n)

        with pytest.raises(ZeroDivisionError):
            unfold_nth(step, 0, 5)


class TestUnfoldCount:

    def test_stops_after_count(self):
        odd = unfold_count(lambda x: (x + 2, x), 1, 3)
        assert next(odd) == 1
        assert next(odd) == 3
        assert next(odd) == 5
        with pytest.raises(StopIteration):
            next(odd)

    def test_is_lazy(self):
        calls = []

        def step(n):
            calls.append(n)
            return n + 1, n

        bounded = unfold_count(step, 0, 5)
        assert calls == []
        assert list(bounded) == [0, 1, 2, 3, 4]
        assert calls == [0, 1, 2, 3, 4]

    def test_square_root_takewhile(self):
        """Newton iterates bounded by count, then by residual."""
        n = 100.0
        iterates = unfold_count(lambda x: (((x * x) + n) / (2.0 * x), x), n, 100)
        coarse = list(itertools.takewhile(lambda x: abs(x * x - n) > 1e-8, iterates))
        assert abs(coarse[-1] - 10.0) < 1e-4

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            unfold_count(lambda x: (x + 1, x), 0, -1)
