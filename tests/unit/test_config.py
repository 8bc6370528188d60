"""Configuration tests."""

import pytest
from edge.core.config import Config, get_config


def test_defaults(repo):
    config = get_config(repo)
    assert config.get('color', 'ui') == 'auto'
    assert config.get('core', 'loglevel') == 'WARNING'
    assert config.get('missing', 'key') is None
    assert config.get('missing', 'key', fallback='x') == 'x'


def test_repo_overrides_global(repo, isolated_config):
    Config().set('color', 'ui', 'always', global_config=True)
    assert get_config(repo).get('color', 'ui') == 'always'

    get_config(repo).set('color', 'ui', 'never')
    assert get_config(repo).get('color', 'ui') == 'never'
    assert isolated_config.exists()


def test_env_overrides_files(repo, monkeypatch):
    get_config(repo).set('core', 'loglevel', 'INFO')
    monkeypatch.setenv('EDGE_CORE_LOGLEVEL', 'DEBUG')
    assert get_config(repo).get('core', 'loglevel') == 'DEBUG'


def test_unset(repo):
    config = get_config(repo)
    config.set('color', 'ui', 'never')
    assert config.unset('color', 'ui') is True
    assert config.unset('color', 'ui') is False
    assert get_config(repo).get('color', 'ui') == 'auto'


def test_set_without_repo_path_fails():
    with pytest.raises(ValueError):
        Config().set('color', 'ui', 'never')


def test_list_all(repo):
    Config().set('core', 'loglevel', 'INFO', global_config=True)
    get_config(repo).set('color', 'ui', 'never')

    assert get_config(repo).list_all() == {
        'core': {'loglevel': 'INFO'},
        'color': {'ui': 'never'},
    }


@pytest.mark.parametrize('mode,isatty,expected', [
    ('auto', True, True),
    ('auto', False, False),
    ('always', False, True),
    ('never', True, False),
])
def test_use_color(repo, mode, isatty, expected):
    config = get_config(repo)
    config.set('color', 'ui', mode)
    assert config.use_color(isatty) is expected
