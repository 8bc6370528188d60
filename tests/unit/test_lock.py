"""Repository lock tests."""

import os
import pytest
from edge.core.errors import RepositoryLockedError
from edge.utils.lock import repository_lock


def test_lock_created_and_removed(tmp_path):
    lock_file = tmp_path / 'lock'
    with repository_lock(lock_file):
        assert lock_file.read_text() == str(os.getpid())
    assert not lock_file.exists()


def test_lock_released_on_error(tmp_path):
    lock_file = tmp_path / 'lock'
    with pytest.raises(RuntimeError):
        with repository_lock(lock_file):
            raise RuntimeError('boom')
    assert not lock_file.exists()


def test_live_lock_raises(tmp_path):
    lock_file = tmp_path / 'lock'
    lock_file.write_text(str(os.getpid()))

    with pytest.raises(RepositoryLockedError) as exc_info:
        with repository_lock(lock_file):
            pass
    assert exc_info.value.pid == os.getpid()
    assert lock_file.exists()


@pytest.mark.parametrize('content', ['', '0', 'garbage'])
def test_stale_lock_is_replaced(tmp_path, content):
    lock_file = tmp_path / 'lock'
    lock_file.write_text(content)

    with repository_lock(lock_file):
        assert lock_file.read_text() == str(os.getpid())
    assert not lock_file.exists()
