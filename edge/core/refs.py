"""HEAD reference management for Edge."""

import logging
from typing import Optional

from .errors import NotFoundError
from .hash import is_valid_id
from edge.utils.fs import atomic_write

logger = logging.getLogger(__name__)


class HeadRef:
    """
    Manages the HEAD file.

    HEAD holds the identifier of the most recent commit followed by a
    newline, or nothing at all before the first commit.
    """

    def __init__(self, repo):
        self.repo = repo
        self.head_file = repo.head_file

    def resolve_head(self) -> Optional[str]:
        """
        Resolve HEAD to a commit hash.

        Returns:
            Commit hash or None if no commit has been made
        """
        if not self.head_file.exists():
            return None

        content = self.head_file.read_text(encoding='utf-8').strip()
        return content or None

    def update_head(self, commit_hash: str) -> None:
        """
        Point HEAD at a commit.

        The commit must already be stored; HEAD is replaced atomically.

        Raises:
            NotFoundError: If the commit is not in the object store
        """
        if not is_valid_id(commit_hash) or not self.repo.object_exists(commit_hash):
            raise NotFoundError(commit_hash, f"Cannot move HEAD to missing commit {commit_hash}")

        atomic_write(self.head_file, commit_hash + '\n')
        logger.debug("HEAD -> %s", commit_hash)

    def resolve_reference(self, ref: str) -> Optional[str]:
        """
        Resolve a user-supplied commit reference.

        Accepts 'HEAD', a full identifier, or an unambiguous prefix of at
        least 4 characters.

        Returns:
            Full commit hash or None if nothing matches
        """
        if ref == 'HEAD':
            return self.resolve_head()

        ref = ref.lower()
        if is_valid_id(ref):
            return ref

        if len(ref) < 4 or not self.repo.objects_dir.exists():
            return None

        matches = [p.name for p in self.repo.objects_dir.iterdir()
                   if p.is_file() and p.name.startswith(ref) and is_valid_id(p.name)]
        if len(matches) == 1:
            return matches[0]
        return None
