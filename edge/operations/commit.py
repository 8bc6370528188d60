"""Commit chain: turns the staging index into linked commit records."""

import logging
from typing import Optional

from edge.core.errors import NothingToCommitError
from edge.core.objects import Commit
from edge.utils.lock import repository_lock

logger = logging.getLogger(__name__)


class CommitChain:
    """
    Creates commits and exposes the current head.

    Each commit records the staged entries and the previous HEAD as its
    single parent, so history is a singly-linked list.
    """

    def __init__(self, repo):
        """
        Initialize commit chain.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def head(self) -> Optional[str]:
        """Current HEAD commit id, or None before the first commit."""
        return self.repo.refs.resolve_head()

    def commit(self, message: str) -> str:
        """
        Record the staged entries as a new commit.

        Runs under the repository lock in this order: store commit object,
        move HEAD, clear the index. A failure before HEAD moves leaves only
        an unreferenced object behind.

        Args:
            message: Commit message

        Returns:
            str: Identifier of the new commit

        Raises:
            ValueError: If the message is empty
            NothingToCommitError: If nothing is staged
            RepositoryLockedError: If another process is committing
        """
        if not message or not message.strip():
            raise ValueError("Commit message required")

        with repository_lock(self.repo.lock_file):
            entries = self.repo.index.current_entries()
            if not entries:
                raise NothingToCommitError()

            parent = self.head()
            commit = Commit.create(message=message, files=entries, parent=parent)

            commit_hash = self.repo.write_object(commit)
            self.repo.refs.update_head(commit_hash)
            self.repo.index.clear()

        logger.debug("Created commit %s (parent %s, %d file(s))",
                     commit_hash, parent, len(entries))
        return commit_hash
