"""
Ready-made Sequences
====================

Common recurrences expressed as pure transitions over UnfoldSequence.

Every recipe returns a fresh, endless sequence. Bound it before collecting:

    >>> from itertools import islice
    >>> list(islice(fibonacci(), 8))
    [0, 1, 1, 2, 3, 5, 8, 13]
"""

from __future__ import annotations
from itertools import islice
import math
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import get_config
from .contracts.base import ErrorCode
from .core.frontends import iterate
from .core.sequence import UnfoldSequence
from .observability import get_logger

logger = get_logger(__name__)


def _domain_error(message: str) -> ValueError:
    return ValueError(f"[{ErrorCode.INVALID_DOMAIN.name}] {message}")


# =============================================================================
# INTEGER SERIES
# =============================================================================

def counter(start: int = 0, step: int = 1) -> UnfoldSequence[int, int]:
    """start, start + step, start + 2*step, ..."""
    return UnfoldSequence(lambda n: (n + step, n), start)


def _fib_step(state: Tuple[int, int]) -> Tuple[Tuple[int, int], int]:
    a, b = state
    return (b, a + b), a


def fibonacci() -> UnfoldSequence[Tuple[int, int], int]:
    return UnfoldSequence(_fib_step, (0, 1))


def _collatz_step(n: int) -> Tuple[int, int]:
    successor = n // 2 if n % 2 == 0 else 3 * n + 1
    return successor, n


def collatz(n: int) -> UnfoldSequence[int, int]:
    """
    Collatz trajectory starting at ``n``.

    Once the trajectory reaches 1 it keeps cycling 4, 2, 1.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise _domain_error(f"collatz seed must be a positive int, got {n!r}")
    return UnfoldSequence(_collatz_step, n)


def lcg(
    seed: int,
    multiplier: int = 1103515245,
    increment: int = 12345,
    modulus: int = 2147483647
) -> UnfoldSequence[int, int]:
    """
    Linear congruential generator.

    Emits the seed reduced modulo ``modulus`` first. Fully deterministic:
    the same seed always yields the same stream.
    """
    if modulus <= 0:
        raise _domain_error(f"lcg modulus must be positive, got {modulus}")

    def step(x: int) -> Tuple[int, int]:
        return (multiplier * x + increment) % modulus, x

    return UnfoldSequence(step, seed % modulus)


# =============================================================================
# LINEAR RECURRENCES (numpy)
# =============================================================================

def _companion_matrix(coefficients: np.ndarray) -> np.ndarray:
    """
    Matrix that advances the window [x[n], ..., x[n+k-1]] by one step.
    """
    k = coefficients.shape[0]
    matrix = np.zeros((k, k), dtype=coefficients.dtype)
    matrix[:-1, 1:] = np.eye(k - 1, dtype=coefficients.dtype)
    # x[n+k] = c[0]*x[n+k-1] + ... + c[k-1]*x[n]
    matrix[-1, :] = coefficients[::-1]
    return matrix


def linear_recurrence(
    coefficients: Sequence[float],
    initial: Sequence[float]
) -> UnfoldSequence[np.ndarray, float]:
    """
    Order-k linear recurrence.

    ``x[n+k] = c[0]*x[n+k-1] + c[1]*x[n+k-2] + ... + c[k-1]*x[n]``
    starting from ``initial = [x[0], ..., x[k-1]]``.

    The state is a numpy window advanced by a companion matrix; each pull
    emits ``x[n]`` as a Python scalar. When every coefficient and initial
    term is an integer the window holds Python ints, so results stay exact
    at any size. Otherwise everything is computed in float64.

    >>> list(islice(linear_recurrence([1, 1], [0, 1]), 7))
    [0, 1, 1, 2, 3, 5, 8]
    """
    coeffs = np.array(coefficients, dtype=object)
    window = np.array(initial, dtype=object)

    if coeffs.ndim != 1 or coeffs.size == 0:
        raise _domain_error("coefficients must be a non-empty 1-d sequence")
    if window.shape != coeffs.shape:
        raise _domain_error(
            f"initial has {window.size} terms, recurrence of order {coeffs.size} needs {coeffs.size}"
        )

    terms = list(coeffs) + list(window)
    if all(_is_integer(v) for v in terms):
        coeffs = np.array([int(v) for v in coeffs], dtype=object)
        window = np.array([int(v) for v in window], dtype=object)
    elif all(_is_integer(v) or _is_real(v) for v in terms):
        try:
            coeffs = coeffs.astype(np.float64)
            window = window.astype(np.float64)
        except OverflowError:
            raise _domain_error("integer term too large for a float recurrence") from None
    else:
        raise _domain_error("recurrence terms must be integers or real numbers")

    matrix = _companion_matrix(coeffs)

    def step(state: np.ndarray) -> Tuple[np.ndarray, float]:
        return matrix @ state, _scalar(state[0])

    return UnfoldSequence(step, window)


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _is_real(value) -> bool:
    return isinstance(value, (float, np.floating))


def _scalar(value):
    """Unwrap numpy scalars; Python ints from object windows pass through."""
    item = getattr(value, "item", None)
    return item() if item is not None else value


# =============================================================================
# NEWTON'S METHOD
# =============================================================================

def newton_sqrt_steps(n: float, start: Optional[float] = None) -> UnfoldSequence[float, float]:
    """
    Newton iterates for the positive root of x*x - n.

    Starts at ``start`` (default: n itself). The step is written as
    0.5 * (x + n / x) so it never squares x and cannot overflow.
    """
    if n < 0:
        raise _domain_error(f"cannot take the square root of negative {n}")
    if n == 0:
        return iterate(lambda x: x, 0.0)
    x0 = float(n) if start is None else float(start)
    if not x0 > 0:
        raise _domain_error(f"newton start must be positive, got {start}")
    return iterate(lambda x: 0.5 * (x + n / x), x0)


def _initial_guess(n: float) -> float:
    """Power of two within a factor of two of sqrt(n)."""
    _, exponent = math.frexp(n)
    return math.ldexp(1.0, exponent // 2)


def newton_sqrt(
    n: float,
    tolerance: Optional[float] = None,
    max_steps: Optional[int] = None
) -> float:
    """
    Square root of ``n`` by Newton's method.

    Iteration starts from a power of two close to the root, so any finite
    double converges in a handful of steps. Returns the first iterate whose
    relative residual |x*x - n| / n is within ``tolerance``,
    the first iterate that repeats, or the last iterate examined after
    ``max_steps``. Unset arguments fall back to UNFOLD_NEWTON_TOLERANCE and
    UNFOLD_NEWTON_MAX_STEPS.

    Raises:
        ValueError: if n is negative or not finite, or if tolerance /
            max_steps are out of range
    """
    if n < 0:
        raise _domain_error(f"cannot take the square root of negative {n}")
    if not math.isfinite(n):
        raise _domain_error(f"cannot take the square root of {n}")
    if tolerance is not None and not tolerance > 0:
        raise ValueError(f"[{ErrorCode.INVALID_BOUND.name}] tolerance must be positive, got {tolerance}")
    if max_steps is not None and (
        isinstance(max_steps, bool) or not isinstance(max_steps, int) or max_steps < 1
    ):
        raise ValueError(f"[{ErrorCode.INVALID_BOUND.name}] max_steps must be an int >= 1, got {max_steps!r}")
    if n == 0 or n == 1:
        return float(n)

    if tolerance is None or max_steps is None:
        config = get_config()
        tolerance = config.newton_tolerance if tolerance is None else tolerance
        max_steps = config.newton_max_steps if max_steps is None else max_steps

    threshold = tolerance * n
    previous = None
    x = float(n)
    for step, x in enumerate(islice(newton_sqrt_steps(n, _initial_guess(n)), max_steps)):
        if abs(x * x - n) <= threshold or x == previous:
            logger.debug("newton_sqrt(%s) converged after %d steps", n, step)
            return x
        previous = x

    logger.debug("newton_sqrt(%s) did not reach tolerance %g in %d steps", n, tolerance, max_steps)
    return x
