"""Shared pytest fixtures for Edge tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from edge.core.config import Config
from edge.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests away from the user's ~/.edgeconfig and EDGE_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.edgeconfig')
    for name in ('EDGE_COLOR_UI', 'EDGE_CORE_LOGLEVEL'):
        monkeypatch.delenv(name, raising=False)
    return home / '.edgeconfig'


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    return Repository(str(temp_dir)).init()


@pytest.fixture
def stage_file(repo):
    """Write a file into the work tree and stage it."""
    def _stage(name, content):
        path = repo.work_tree / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return repo.index.add_file(name)
    return _stage


@pytest.fixture
def two_commits(repo, stage_file):
    """
    Repository with two commits.

    first:  a.txt = "hello\\n"
    second: a.txt = "hello\\nworld\\n", b.txt = "x\\n"
    """
    stage_file('a.txt', 'hello\n')
    first = repo.chain.commit('first')

    stage_file('a.txt', 'hello\nworld\n')
    stage_file('b.txt', 'x\n')
    second = repo.chain.commit('second')

    return repo, first, second
