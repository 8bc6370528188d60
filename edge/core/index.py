"""Index (staging area) implementation."""

import json
import logging
from pathlib import Path
from typing import List

from .errors import CorruptObjectError
from .objects import Blob, StagingEntry
from edge.utils.fs import atomic_write

logger = logging.getLogger(__name__)


class StagingIndex:
    """
    Edge index (staging area) implementation.

    The index is an append-only list of (path, content id) entries queued
    for the next commit, persisted as a JSON array. The same path may be
    staged several times. Nothing is cached in memory: every operation
    reads the file, so separate process invocations always agree.
    """

    def __init__(self, repo):
        """
        Initialize staging index.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.index_file = repo.index_file

    def _read(self) -> List[StagingEntry]:
        if not self.index_file.exists():
            return []

        try:
            records = json.loads(self.index_file.read_text(encoding='utf-8') or '[]')
        except ValueError as e:
            raise CorruptObjectError(f"Index file is not valid JSON: {e}") from e

        if not isinstance(records, list):
            raise CorruptObjectError("Index file must contain a JSON array")

        return [StagingEntry.from_dict(record) for record in records]

    def _write(self, entries: List[StagingEntry]) -> None:
        atomic_write(
            self.index_file,
            json.dumps([entry.to_dict() for entry in entries], separators=(',', ':'))
        )

    def stage(self, path: str, object_id: str) -> StagingEntry:
        """
        Append an entry to the persisted index.

        Args:
            path: Logical file path
            object_id: Content identifier of the staged blob

        Returns:
            StagingEntry: The appended entry
        """
        entries = self._read()
        entry = StagingEntry(path=path, hash=object_id)
        entries.append(entry)
        self._write(entries)
        logger.debug("Staged %s as %s", path, object_id)
        return entry

    def current_entries(self) -> List[StagingEntry]:
        """Return the full index content, in staging order."""
        return self._read()

    def clear(self) -> None:
        """Replace the index with an empty list."""
        self._write([])
        logger.debug("Cleared staging index")

    def logical_path(self, file_path: Path) -> str:
        """
        Path recorded in the index for a file.

        Files inside the work tree are recorded relative to it with forward
        slashes; anything else is recorded as given.
        """
        try:
            return file_path.resolve().relative_to(self.repo.work_tree).as_posix()
        except ValueError:
            return file_path.as_posix()

    def add_file(self, filepath) -> StagingEntry:
        """
        Store a file's content and stage it.

        Args:
            filepath: Path to file (absolute or relative to the work tree)

        Returns:
            StagingEntry: The appended entry

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the path is not a regular file
        """
        file_path = Path(filepath)

        if not file_path.is_absolute():
            file_path = self.repo.work_tree / file_path

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        if not file_path.is_file():
            raise ValueError(f"Not a file: {filepath}")

        object_id = self.repo.write_object(Blob.from_file(str(file_path)))
        return self.stage(self.logical_path(file_path), object_id)

    def __len__(self) -> int:
        return len(self._read())

    def __repr__(self) -> str:
        return f"StagingIndex(path={self.index_file})"
