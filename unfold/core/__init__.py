"""
Generator Core
==============

The endless unfold sequence and its front-ends.

INVARIANTS:
- The transition is never called before the first pull
- One pull = one transition application
- A failed pull commits nothing

Modules:
- sequence: UnfoldSequence, the stateful lazy producer
- frontends: unfold / iterate / unfold_list / unfold_nth / unfold_count
"""

from .sequence import UnfoldSequence, Transition
from .frontends import (
    unfold,
    iterate,
    iterate_step,
    unfold_list,
    unfold_nth,
    unfold_count,
)

__all__ = [
    'UnfoldSequence',
    'Transition',
    'unfold',
    'iterate',
    'iterate_step',
    'unfold_list',
    'unfold_nth',
    'unfold_count',
]
