"""Operations module for high-level Edge operations.

This module contains the business logic for:
- Creating commits from the staging index
- Walking commit history
- Reconstructing per-file diffs of a commit
"""

from edge.operations.commit import CommitChain
from edge.operations.history import HistoryWalker
from edge.operations.diff import DiffReconstructor, FileChange, Span, diff_lines

__all__ = [
    'CommitChain',
    'HistoryWalker',
    'DiffReconstructor', 'FileChange', 'Span', 'diff_lines',
]
