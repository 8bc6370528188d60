"""History walker tests."""

import pytest
from edge.core.errors import CorruptHistoryError, NotFoundError
from edge.core.objects import Commit, StagingEntry


def test_walk_empty_repository(repo):
    assert list(repo.history.walk()) == []


def test_walk_yields_all_commits_newest_first(repo, stage_file):
    created = []
    for i in range(4):
        stage_file('a.txt', f'v{i}\n')
        created.append(repo.chain.commit(f'commit {i}'))

    history = list(repo.history.walk())

    assert [h for h, _ in history] == list(reversed(created))
    assert [c.message for _, c in history] == ['commit 3', 'commit 2', 'commit 1', 'commit 0']
    timestamps = [c.timestamp for _, c in history]
    assert all(a >= b for a, b in zip(timestamps, timestamps[1:]))
    assert history[-1][1].parent is None


def test_walk_max_count(two_commits):
    repo, first, second = two_commits
    assert [h for h, _ in repo.history.walk(max_count=1)] == [second]


def test_walk_is_lazy_and_reads_live_head(two_commits, stage_file):
    repo, first, second = two_commits
    walker = repo.history.walk()

    stage_file('c.txt', 'c\n')
    third = repo.chain.commit('third')

    # HEAD is read when iteration starts
    assert next(walker)[0] == third
    assert [h for h, _ in repo.history.walk()] == [third, second, first]


def test_walk_missing_parent_raises(repo):
    orphan = Commit.create('orphan', [StagingEntry('a.txt', 'a' * 40)], parent='f' * 40)
    orphan_id = repo.write_object(orphan)
    repo.refs.update_head(orphan_id)

    walker = repo.history.walk()
    assert next(walker)[0] == orphan_id
    with pytest.raises(CorruptHistoryError) as exc_info:
        next(walker)
    assert exc_info.value.parent_id == 'f' * 40


def test_walk_head_missing_raises_not_found(repo):
    repo.head_file.write_text('a' * 40 + '\n')
    with pytest.raises(NotFoundError):
        list(repo.history.walk())
