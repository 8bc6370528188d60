"""Core functionality for Edge.

This module contains the core data structures:
- Edge objects (Blob, Commit, StagingEntry)
- Repository management and the content store
- Index/staging area
- HEAD management
- Configuration management
- Hashing utilities
- Error types

For commit, history and diff operations, see edge.operations
"""

from edge.core.objects import EdgeObject, Blob, Commit, StagingEntry
from edge.core.repository import Repository
from edge.core.hash import hash_object, is_valid_id
from edge.core.index import StagingIndex
from edge.core.refs import HeadRef
from edge.core.config import Config, get_config
from edge.core.errors import (EdgeError, NotFoundError, CorruptHistoryError,
                              CorruptObjectError, NothingToCommitError,
                              AlreadyInitializedError, RepositoryLockedError)

__all__ = [
    'EdgeObject',
    'Blob',
    'Commit',
    'StagingEntry',
    'Repository',
    'StagingIndex',
    'HeadRef',
    'Config',
    'get_config',
    'hash_object',
    'is_valid_id',
    'EdgeError',
    'NotFoundError',
    'CorruptHistoryError',
    'CorruptObjectError',
    'NothingToCommitError',
    'AlreadyInitializedError',
    'RepositoryLockedError',
]
