"""HEAD reference tests."""

import pytest
from edge.core.errors import NotFoundError


def test_head_empty_after_init(repo):
    assert repo.refs.resolve_head() is None


def test_update_head_requires_existing_object(repo):
    with pytest.raises(NotFoundError):
        repo.refs.update_head('a' * 40)
    assert repo.refs.resolve_head() is None


def test_update_head_writes_id(repo):
    object_id = repo.put(b'anything')
    repo.refs.update_head(object_id)

    assert repo.head_file.read_text() == object_id + '\n'
    assert repo.refs.resolve_head() == object_id


def test_resolve_reference(two_commits):
    repo, first, second = two_commits

    assert repo.refs.resolve_reference('HEAD') == second
    assert repo.refs.resolve_reference(first) == first
    assert repo.refs.resolve_reference(first[:10]) == first
    assert repo.refs.resolve_reference(first[:10].upper()) == first
    assert repo.refs.resolve_reference('abc') is None
    assert repo.refs.resolve_reference('not-a-hash') is None
