"""Repository management for Edge."""

import logging
from pathlib import Path
from typing import Optional

from .errors import AlreadyInitializedError, CorruptObjectError, NotFoundError
from .hash import hash_object, is_valid_id
from .objects import EdgeObject, Blob, Commit
from edge.utils.fs import atomic_write

logger = logging.getLogger(__name__)

REPO_DIR_NAME = '.edge'


class Repository:
    """
    Represents an Edge repository.

    A repository manages the .edge directory structure and is the content
    store: every blob and commit lives under objects/, addressed by the
    SHA-1 of its bytes.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.edge_dir = self.work_tree / REPO_DIR_NAME
        self.objects_dir = self.edge_dir / 'objects'
        self.head_file = self.edge_dir / 'HEAD'
        self.index_file = self.edge_dir / 'index'
        self.config_file = self.edge_dir / 'config'
        self.lock_file = self.edge_dir / 'lock'

        # Lazy loading to avoid circular import
        self._index = None
        self._refs = None
        self._chain = None
        self._history = None
        self._diff = None

    @property
    def index(self):
        """Get StagingIndex instance."""
        if self._index is None:
            from .index import StagingIndex
            self._index = StagingIndex(self)
        return self._index

    @property
    def refs(self):
        """Get HeadRef instance."""
        if self._refs is None:
            from .refs import HeadRef
            self._refs = HeadRef(self)
        return self._refs

    @property
    def chain(self):
        """Get CommitChain instance."""
        if self._chain is None:
            from edge.operations.commit import CommitChain
            self._chain = CommitChain(self)
        return self._chain

    @property
    def history(self):
        """Get HistoryWalker instance."""
        if self._history is None:
            from edge.operations.history import HistoryWalker
            self._history = HistoryWalker(self)
        return self._history

    @property
    def diff(self):
        """Get DiffReconstructor instance with the default line differ."""
        if self._diff is None:
            from edge.operations.diff import DiffReconstructor
            self._diff = DiffReconstructor(self)
        return self._diff

    def is_initialized(self) -> bool:
        return self.head_file.exists() and self.index_file.exists()

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .edge directory structure:
        .edge/
        ├── objects/       # Object database (one file per blob or commit)
        ├── HEAD           # Current head commit id, empty before first commit
        └── index          # Staging area, a JSON array

        Creating objects/ is idempotent. HEAD and index are created
        exclusively, so existing history is never overwritten.

        Returns:
            Repository: self for method chaining

        Raises:
            AlreadyInitializedError: If HEAD or index already exist
        """
        self.objects_dir.mkdir(parents=True, exist_ok=True)

        created = []
        try:
            for path, content in ((self.head_file, ''), (self.index_file, '[]')):
                with open(path, 'x', encoding='utf-8') as f:
                    f.write(content)
                created.append(path)
        except FileExistsError:
            # Leave the repository exactly as we found it
            for path in created:
                path.unlink()
            raise AlreadyInitializedError(self.edge_dir)

        logger.debug("Initialized repository at %s", self.edge_dir)
        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / REPO_DIR_NAME).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def object_path(self, object_id: str) -> Path:
        """
        Get filesystem path for an object.

        Objects are stored flat: objects/<40-char id>.

        Raises:
            NotFoundError: If object_id is not a well-formed identifier
        """
        if not is_valid_id(object_id):
            raise NotFoundError(object_id, f"Invalid object id: {object_id!r}")
        return self.objects_dir / object_id

    def put(self, content: bytes) -> str:
        """
        Store raw bytes and return their content identifier.

        Writing content that is already stored is a no-op.

        Args:
            content: Bytes to store verbatim

        Returns:
            str: SHA-1 hash of content
        """
        object_id = hash_object(content)
        path = self.object_path(object_id)

        if path.exists():
            logger.debug("Object %s already stored", object_id)
            return object_id

        self.objects_dir.mkdir(parents=True, exist_ok=True)
        atomic_write(path, content)
        logger.debug("Wrote object %s (%d bytes)", object_id, len(content))
        return object_id

    def get(self, object_id: str) -> bytes:
        """
        Read raw bytes of a stored object.

        Raises:
            NotFoundError: If no object with that identifier exists
        """
        path = self.object_path(object_id)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(object_id) from None

    def object_exists(self, object_id: str) -> bool:
        """Check if object exists in repository."""
        return is_valid_id(object_id) and self.object_path(object_id).exists()

    def write_object(self, obj: EdgeObject) -> str:
        """Store an Edge object and return its identifier."""
        logger.debug("Storing %s object", obj.type)
        return self.put(obj.serialize())

    def read_blob(self, object_id: str) -> Blob:
        """
        Read a stored object as a blob.

        Raises:
            NotFoundError: If the object does not exist
        """
        return Blob(self.get(object_id))

    def read_commit(self, commit_id: str) -> Commit:
        """
        Read and decode a commit.

        Raises:
            NotFoundError: If the commit does not exist
            CorruptObjectError: If the object is not a commit
        """
        data = self.get(commit_id)
        try:
            return Commit.from_bytes(data)
        except CorruptObjectError as e:
            raise CorruptObjectError(f"Object {commit_id} is not a commit") from e

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
