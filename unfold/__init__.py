"""
unfold
======

Endless lazy sequences from a seed and a pure transition.

    >>> from itertools import islice
    >>> from unfold import UnfoldSequence
    >>> fib = UnfoldSequence(lambda ab: ((ab[1], ab[0] + ab[1]), ab), (0, 1))
    >>> [a for a, _ in islice(fib, 5)]
    [0, 1, 1, 2, 3]

PACKAGE STRUCTURE:
==================

1. CONTRACTS (contracts/)
   - Immutable types: SequenceStatus, ErrorCode, Error, PullSnapshot
   - SequenceFaulted, raised when a faulted sequence is pulled again

2. CORE (core/)
   - UnfoldSequence: the stateful, single-pass, never-ending iterator
   - Front-ends: unfold, iterate, unfold_list, unfold_nth, unfold_count

3. RECIPES (recipes.py)
   - counter, fibonacci, collatz, lcg, linear_recurrence, newton_sqrt

4. AMBIENT
   - config.py: UNFOLD_* environment settings
   - observability.py: logging under the "unfold" logger

The sequence never ends on its own. Bound it with itertools.islice,
itertools.takewhile, zip, or unfold_count before collecting.
"""

from .contracts.base import (
    SequenceStatus,
    ErrorCode,
    Error,
    SequenceFaulted,
    PullSnapshot,
)
from .core.sequence import UnfoldSequence
from .core.frontends import (
    unfold,
    iterate,
    iterate_step,
    unfold_list,
    unfold_nth,
    unfold_count,
)
from .config import UnfoldConfig
from .observability import configure_logging

__version__ = "0.1.0"

__all__ = [
    'UnfoldSequence',
    'SequenceStatus',
    'SequenceFaulted',
    'ErrorCode',
    'Error',
    'PullSnapshot',
    'unfold',
    'iterate',
    'iterate_step',
    'unfold_list',
    'unfold_nth',
    'unfold_count',
    'UnfoldConfig',
    'configure_logging',
    '__version__',
]
