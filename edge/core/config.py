"""Configuration management for Edge.

Reads and writes both repository-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

DEFAULTS = {
    ('color', 'ui'): 'auto',
    ('core', 'loglevel'): 'WARNING',
}


class Config:
    """
    Manages Edge configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.edgeconfig
    - Repository config: .edge/config

    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.edgeconfig'

    def __init__(self, repo_config_path: Optional[Path] = None,
                 global_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
            global_config_path: Override for the global config location
        """
        self.repo_config_path = repo_config_path
        self.global_config_path = global_config_path or self.GLOBAL_CONFIG_PATH
        self._global_config = None
        self._repo_config = None

    @staticmethod
    def _load(path: Optional[Path]) -> configparser.ConfigParser:
        parser = configparser.ConfigParser()
        if path and path.exists():
            parser.read(path)
        return parser

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = self._load(self.global_config_path)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = self._load(self.repo_config_path)
        return self._repo_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (EDGE_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value, then built-in default

        Returns:
            Configuration value or fallback
        """
        env_value = os.environ.get(f"EDGE_{section.upper()}_{key.upper()}")
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get((section, key))

    def _target(self, global_config: bool):
        if global_config:
            return self.global_config, self.global_config_path
        if not self.repo_config_path:
            raise ValueError("No repository config path available")
        return self.repo_config, self.repo_config_path

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config
        """
        config, config_path = self._target(global_config)

        if not config.has_section(section):
            config.add_section(section)
        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        config, config_path = self._target(global_config)

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)
        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)
        return True

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values, repository values overriding global.

        Returns:
            Dict of sections to key-value dicts
        """
        result: Dict[str, Dict[str, str]] = {}
        sources = [self.global_config]
        if self.repo_config:
            sources.append(self.repo_config)

        for parser in sources:
            for section in parser.sections():
                result.setdefault(section, {}).update(parser.items(section))
        return result

    def use_color(self, isatty: bool) -> bool:
        """Decide whether output should be colored according to color.ui."""
        mode = (self.get('color', 'ui') or 'auto').lower()
        if mode in ('always', 'true'):
            return True
        if mode in ('never', 'false'):
            return False
        return isatty


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config
    """
    if repo:
        return Config(repo.config_file)
    return Config()
