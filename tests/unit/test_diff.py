"""Unit tests for diff reconstruction."""

import pytest
from edge.core.errors import CorruptHistoryError, CorruptObjectError, NotFoundError
from edge.core.objects import Commit, StagingEntry
from edge.operations.diff import (DiffReconstructor, FileChange, Span, diff_lines,
                                  ADDED, REMOVED, UNCHANGED,
                                  DIFFED, NEW, FIRST_COMMIT, ERROR)


def test_diff_lines_append():
    assert diff_lines('hello\n', 'hello\nworld\n') == [
        Span(UNCHANGED, 'hello\n'),
        Span(ADDED, 'world\n'),
    ]


def test_diff_lines_replace_removed_before_added():
    assert diff_lines('a\nb\nc\n', 'a\nB\nc\n') == [
        Span(UNCHANGED, 'a\n'),
        Span(REMOVED, 'b\n'),
        Span(ADDED, 'B\n'),
        Span(UNCHANGED, 'c\n'),
    ]


def test_diff_lines_merges_adjacent_lines():
    assert diff_lines('', 'one\ntwo\n') == [Span(ADDED, 'one\ntwo\n')]
    assert diff_lines('one\ntwo\n', '') == [Span(REMOVED, 'one\ntwo\n')]


def test_diff_lines_identical():
    assert diff_lines('same\n', 'same\n') == [Span(UNCHANGED, 'same\n')]
    assert diff_lines('', '') == []


def test_first_commit_files_are_not_diffed(two_commits):
    repo, first, _ = two_commits

    changes = repo.diff.diff_commit(first)

    assert changes == [FileChange('a.txt', 'hello\n', None, FIRST_COMMIT)]
    assert changes[0].is_first_commit


def test_second_commit_diff_and_new_file(two_commits):
    repo, _, second = two_commits

    changes = repo.diff.diff_commit(second)

    assert [c.path for c in changes] == ['a.txt', 'b.txt']
    modified, added = changes
    assert modified.classification == DIFFED
    assert modified.after_content == 'hello\nworld\n'
    assert modified.spans == [Span(UNCHANGED, 'hello\n'), Span(ADDED, 'world\n')]
    assert added.classification == NEW
    assert added.is_new
    assert added.spans is None
    assert added.after_content == 'x\n'


def test_missing_commit_raises(repo):
    with pytest.raises(NotFoundError):
        repo.diff.diff_commit('f' * 40)


def test_non_commit_object_raises(repo):
    blob_id = repo.put(b'plain text\n')
    with pytest.raises(CorruptObjectError):
        repo.diff.diff_commit(blob_id)


def test_missing_parent_raises_corrupt_history(repo):
    blob_id = repo.put(b'x\n')
    commit = Commit.create('orphan', [StagingEntry('a.txt', blob_id)], parent='e' * 40)
    commit_id = repo.write_object(commit)

    with pytest.raises(CorruptHistoryError):
        repo.diff.diff_commit(commit_id)


def test_missing_blob_fails_only_that_file(repo, stage_file):
    lost = stage_file('lost.txt', 'gone\n')
    stage_file('kept.txt', 'still here\n')
    commit_id = repo.chain.commit('first')
    repo.object_path(lost.hash).unlink()

    changes = repo.diff.diff_commit(commit_id)

    assert changes[0].classification == ERROR
    assert changes[0].failed
    assert lost.hash in changes[0].error
    assert changes[0].after_content is None
    assert changes[1].classification == FIRST_COMMIT
    assert changes[1].after_content == 'still here\n'


def test_missing_parent_blob_fails_only_that_file(two_commits):
    repo, first, second = two_commits
    parent_entry = repo.read_commit(first).files[0]
    repo.object_path(parent_entry.hash).unlink()

    changes = repo.diff.diff_commit(second)

    assert changes[0].classification == ERROR
    assert changes[0].after_content == 'hello\nworld\n'
    assert changes[1].classification == NEW


def test_parent_lookup_uses_first_matching_entry(repo, stage_file):
    stage_file('a.txt', 'one\n')
    stage_file('a.txt', 'two\n')
    repo.chain.commit('dupes')

    stage_file('a.txt', 'two\n')
    second = repo.chain.commit('second')

    change = repo.diff.diff_commit(second)[0]
    assert change.spans == [Span(REMOVED, 'one\n'), Span(ADDED, 'two\n')]


def test_injected_line_diff_is_used(two_commits):
    repo, _, second = two_commits
    calls = []

    def fake_diff(old, new):
        calls.append((old, new))
        return [Span(ADDED, 'fake')]

    changes = DiffReconstructor(repo, line_diff=fake_diff).diff_commit(second)

    assert calls == [('hello\n', 'hello\nworld\n')]
    assert changes[0].spans == [Span(ADDED, 'fake')]


def test_format_change_plain(two_commits):
    repo, first, second = two_commits
    modified, added = repo.diff.diff_commit(second)

    text = repo.diff.format_change(modified, color=False)
    assert text.startswith('File : a.txt')
    assert 'Diff :' in text
    assert 'hello\n++world\n' in text

    assert 'New file in this commit' in repo.diff.format_change(added, color=False)

    first_change = repo.diff.diff_commit(first)[0]
    assert 'First commit' in repo.diff.format_change(first_change, color=False)
