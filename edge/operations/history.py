"""History walker: iterate commits from HEAD back to the root."""

from typing import Iterator, Optional, Tuple

from edge.core.errors import CorruptHistoryError, NotFoundError
from edge.core.objects import Commit


class HistoryWalker:
    """Reads the commit chain newest first. Never mutates the repository."""

    def __init__(self, repo):
        self.repo = repo

    def walk(self, max_count: Optional[int] = None) -> Iterator[Tuple[str, Commit]]:
        """
        Walk commit history from the live HEAD.

        HEAD is read when iteration starts. Every call starts a fresh walk.

        Args:
            max_count: Stop after this many commits (None for all)

        Yields:
            (commit_hash, commit) tuples in reverse chronological order

        Raises:
            NotFoundError: If HEAD names a missing commit
            CorruptHistoryError: If a parent reference cannot be resolved
        """
        commit_hash = self.repo.refs.resolve_head()
        child_hash = None
        count = 0

        while commit_hash and (max_count is None or count < max_count):
            try:
                commit = self.repo.read_commit(commit_hash)
            except NotFoundError:
                if child_hash is None:
                    raise
                raise CorruptHistoryError(child_hash, commit_hash) from None

            yield commit_hash, commit
            count += 1
            child_hash, commit_hash = commit_hash, commit.parent
