"""CLI commands for Edge."""

from edge.cli.commands.init import init_cmd
from edge.cli.commands.add import add_cmd
from edge.cli.commands.commit import commit_cmd
from edge.cli.commands.log import log_cmd
from edge.cli.commands.show import show_cmd
from edge.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'show_cmd', 'config_cmd']
