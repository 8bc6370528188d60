"""Exception types raised by the Edge core."""


class EdgeError(Exception):
    """Base class for all Edge errors."""


class NotFoundError(EdgeError):
    """A content or commit identifier is absent from the object store."""
    
    def __init__(self, object_id: str, message: str = None):
        self.object_id = object_id
        super().__init__(message or f"Object {object_id} not found")


class CorruptHistoryError(EdgeError):
    """A parent reference cannot be resolved while reading history."""
    
    def __init__(self, commit_id: str, parent_id: str):
        self.commit_id = commit_id
        self.parent_id = parent_id
        super().__init__(
            f"Commit {commit_id} references missing parent {parent_id}"
        )


class CorruptObjectError(EdgeError):
    """A stored object or the index cannot be decoded."""


class NothingToCommitError(EdgeError):
    """Commit attempted with an empty staging index."""
    
    def __init__(self):
        super().__init__("Nothing to commit (staging area is empty)")


class AlreadyInitializedError(EdgeError):
    """Init attempted on an existing repository."""
    
    def __init__(self, path):
        self.path = path
        super().__init__(f"Repository already initialized at {path}")


class RepositoryLockedError(EdgeError):
    """Another process holds the repository lock."""
    
    def __init__(self, lock_file, pid: int = 0):
        self.lock_file = lock_file
        self.pid = pid
        holder = f" by process {pid}" if pid else ""
        super().__init__(f"Repository is locked{holder} ({lock_file})")
