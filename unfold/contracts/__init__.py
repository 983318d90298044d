"""
Contracts Package

Immutable types shared across the package.
"""

from .base import (
    SequenceStatus,
    ErrorCode,
    Error,
    SequenceFaulted,
    PullSnapshot,
)

__all__ = [
    'SequenceStatus',
    'ErrorCode',
    'Error',
    'SequenceFaulted',
    'PullSnapshot',
]
