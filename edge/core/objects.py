"""Edge objects: blobs, staging entries and commits."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, List
from .hash import hash_object
from .errors import CorruptObjectError


class EdgeObject(ABC):
    """Base class for objects kept in the content store."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Exact bytes written to the object store
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Bytes read from the object store
        """
        pass

    @property
    def type(self) -> str:
        """Object type name (blob, commit)."""
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache the object's content identifier.

        The identifier is the SHA-1 of the serialized bytes, so an object's
        address is the same as that of a raw blob with identical content.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """Content identifier of this object."""
        return self.compute_hash()


class Blob(EdgeObject):
    """
    Raw content of a single tracked file.

    A blob stores bytes verbatim, without filename or other metadata.
    """

    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """Create blob from the bytes of a file."""
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def text(self) -> str:
        """Blob content decoded as UTF-8."""
        return self.data.decode('utf-8', errors='replace')

    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


@dataclass(frozen=True)
class StagingEntry:
    """A single (path, content identifier) pair queued for commit."""
    path: str
    hash: str

    def to_dict(self) -> dict:
        # Key order is part of the commit hash
        return {'path': self.path, 'hash': self.hash}

    @classmethod
    def from_dict(cls, data: dict) -> 'StagingEntry':
        try:
            return cls(path=str(data['path']), hash=str(data['hash']))
        except (KeyError, TypeError) as e:
            raise CorruptObjectError(f"Invalid staging entry: {data!r}") from e

    def __repr__(self) -> str:
        return f"StagingEntry({self.hash[:7]} {self.path})"


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as ISO-8601 UTC with millisecond precision.

    Example: 2026-10-19T08:15:02.417Z
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class Commit(EdgeObject):
    """
    Immutable record linking a file snapshot to its parent commit.

    A commit captures:
    - Timestamp (ISO-8601, UTC)
    - Commit message
    - The staged entries, in staging order
    - The parent commit identifier, or None for the first commit

    Commits are serialized as compact JSON with a fixed key order so the
    same record always hashes to the same identifier.
    """

    def __init__(self):
        super().__init__()
        self.timestamp: str = ''
        self.message: str = ''
        self.files: List[StagingEntry] = []
        self.parent: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'timestamp': self.timestamp,
            'message': self.message,
            'files': [entry.to_dict() for entry in self.files],
            'parent': self.parent,
        }

    def serialize(self) -> bytes:
        """
        Serialize commit to JSON.

        Format:
        {"timestamp":...,"message":...,"files":[{"path":...,"hash":...}],"parent":...}

        Returns:
            bytes: UTF-8 encoded JSON
        """
        return json.dumps(
            self.to_dict(), separators=(',', ':'), ensure_ascii=False
        ).encode('utf-8')

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from JSON.

        Raises:
            CorruptObjectError: If the bytes are not a commit record
        """
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise CorruptObjectError("Object is not a commit") from e

        if not isinstance(record, dict) or not all(
                key in record for key in ('timestamp', 'message', 'files')):
            raise CorruptObjectError("Object is not a commit")
        if not isinstance(record['files'], list):
            raise CorruptObjectError("Commit files must be a list")

        self.timestamp = record['timestamp']
        self.message = record['message']
        self.files = [StagingEntry.from_dict(item) for item in record['files']]
        self.parent = record.get('parent') or None
        self._hash = None

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Commit':
        commit = cls()
        commit.deserialize(data)
        return commit

    @classmethod
    def create(
        cls,
        message: str,
        files: List[StagingEntry],
        parent: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message
            files: Staged entries captured by this commit
            parent: Parent commit identifier (None for the first commit)
            timestamp: ISO-8601 timestamp (defaults to now)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.files = list(files)
        commit.parent = parent
        commit.timestamp = timestamp or utc_timestamp()
        return commit

    def find_file(self, path: str) -> Optional[StagingEntry]:
        """Return the first entry recorded for path, or None."""
        for entry in self.files:
            if entry.path == path:
                return entry
        return None

    def __repr__(self) -> str:
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
