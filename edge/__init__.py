"""Edge - a minimal content-addressable version control system."""

__version__ = '0.1.0'

from edge.core.repository import Repository
from edge.core.objects import EdgeObject, Blob, Commit, StagingEntry

__all__ = [
    'Repository',
    'EdgeObject',
    'Blob',
    'Commit',
    'StagingEntry',
]
