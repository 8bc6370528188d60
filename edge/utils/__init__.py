"""Utilities module for common helper functions.

This module contains:
- Atomic file writes
- The repository lock file
"""

from edge.utils.fs import atomic_write
from edge.utils.lock import repository_lock

__all__ = [
    'atomic_write', 'repository_lock',
]
