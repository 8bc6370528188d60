"""Diff reconstruction: compare each file of a commit with its parent."""

import logging
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Callable, List, Optional

from edge.core.errors import CorruptHistoryError, NotFoundError

logger = logging.getLogger(__name__)

# Span kinds
ADDED = 'added'
REMOVED = 'removed'
UNCHANGED = 'unchanged'

# File classifications
DIFFED = 'diffed'
NEW = 'new'
FIRST_COMMIT = 'first-commit'
ERROR = 'error'


@dataclass
class Span:
    """A fragment of diff output tagged added, removed or unchanged."""
    kind: str
    text: str

    def __repr__(self) -> str:
        return f"Span({self.kind}:{self.text!r})"


@dataclass
class FileChange:
    """
    Change report for one staged entry of a commit.

    spans is only set for DIFFED files. error is only set for ERROR files,
    where after_content may also be missing.
    """
    path: str
    after_content: Optional[str]
    spans: Optional[List[Span]]
    classification: str
    error: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return self.classification == NEW

    @property
    def is_first_commit(self) -> bool:
        return self.classification == FIRST_COMMIT

    @property
    def failed(self) -> bool:
        return self.classification == ERROR


LineDiff = Callable[[str, str], List[Span]]


def diff_lines(old_text: str, new_text: str) -> List[Span]:
    """
    Line-granular diff of two texts.

    Consecutive lines of the same kind are merged into one span; a replaced
    region yields its removed span before its added span.

    Example:
        diff_lines("hello\\n", "hello\\nworld\\n")
        -> [Span(unchanged:'hello\\n'), Span(added:'world\\n')]
    """
    old_lines = old_text.splitlines(keepends=True)
    new_lines = new_text.splitlines(keepends=True)
    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    spans: List[Span] = []

    def emit(kind: str, lines: List[str]) -> None:
        if not lines:
            return
        text = ''.join(lines)
        if spans and spans[-1].kind == kind:
            spans[-1].text += text
        else:
            spans.append(Span(kind, text))

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            emit(UNCHANGED, old_lines[i1:i2])
        else:
            emit(REMOVED, old_lines[i1:i2])
            emit(ADDED, new_lines[j1:j2])

    return spans


class DiffReconstructor:
    """
    Rebuilds what a commit changed relative to its parent.

    The line diff is injected so the reconstruction does not depend on a
    particular diff algorithm.
    """

    def __init__(self, repo, line_diff: LineDiff = diff_lines):
        """
        Initialize diff reconstructor.

        Args:
            repo: Repository instance
            line_diff: Function from (old_text, new_text) to spans
        """
        self.repo = repo
        self.line_diff = line_diff

    def diff_commit(self, commit_id: str) -> List[FileChange]:
        """
        Reconstruct per-file changes of a commit, in staging order.

        Each file is compared with the first entry of the same path in the
        parent commit. Files of a root commit are FIRST_COMMIT; files the
        parent does not record are NEW. A missing blob only fails its own
        file, reported as ERROR.

        Raises:
            NotFoundError: If the commit does not exist
            CorruptHistoryError: If the parent commit cannot be resolved
        """
        commit = self.repo.read_commit(commit_id)

        parent = None
        if commit.parent:
            try:
                parent = self.repo.read_commit(commit.parent)
            except NotFoundError:
                raise CorruptHistoryError(commit_id, commit.parent) from None

        changes = []
        for entry in commit.files:
            try:
                after = self.repo.read_blob(entry.hash).text()
            except NotFoundError as e:
                changes.append(self._failed(entry.path, None, e))
                continue

            if parent is None:
                changes.append(FileChange(entry.path, after, None, FIRST_COMMIT))
                continue

            previous = parent.find_file(entry.path)
            if previous is None:
                changes.append(FileChange(entry.path, after, None, NEW))
                continue

            try:
                before = self.repo.read_blob(previous.hash).text()
            except NotFoundError as e:
                changes.append(self._failed(entry.path, after, e))
                continue

            changes.append(FileChange(entry.path, after, self.line_diff(before, after), DIFFED))

        return changes

    def _failed(self, path: str, after: Optional[str], exc: Exception) -> FileChange:
        logger.warning("Cannot reconstruct %s: %s", path, exc)
        return FileChange(path, after, None, ERROR, error=str(exc))

    def format_change(self, change: FileChange, color: bool = True) -> str:
        """
        Render one file change as text.

        Added spans are prefixed '++', removed spans '--'.
        """
        from colorama import Fore, Style

        def paint(text: str, tint: str) -> str:
            return f"{tint}{text}{Style.RESET_ALL}" if color else text

        output = [paint(f"File : {change.path}", Fore.YELLOW)]

        if change.after_content is not None:
            output.append(change.after_content)

        if change.failed:
            output.append(paint(f"Error : {change.error}", Fore.RED))
        elif change.is_first_commit:
            output.append("First commit")
        elif change.is_new:
            output.append(paint("New file in this commit", Fore.GREEN))
        else:
            output.append("Diff :")
            parts = []
            for span in change.spans:
                if span.kind == ADDED:
                    parts.append(paint('++' + span.text, Fore.GREEN))
                elif span.kind == REMOVED:
                    parts.append(paint('--' + span.text, Fore.RED))
                else:
                    parts.append(paint(span.text, Style.DIM + Fore.WHITE))
            output.append(''.join(parts))

        return '\n'.join(output)
