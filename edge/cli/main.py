"""Main CLI entry point for Edge."""

import configparser

import click
from colorama import init

from edge import __version__
from edge.cli.output import BANNER, setup_logging, warning
from edge.cli.commands import init_cmd, add_cmd, commit_cmd, log_cmd, show_cmd, config_cmd
from edge.core.config import get_config
from edge.core.repository import Repository

# Initialize colorama for cross-platform colored output.
# click strips ANSI codes on non-tty output unless color is forced.
init(autoreset=True, strip=False)


class EdgeGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=EdgeGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose):
    if verbose:
        level = 'DEBUG'
    else:
        try:
            level = get_config(Repository.find_repository()).get('core', 'loglevel')
        except configparser.Error as e:
            click.echo(warning(f"Ignoring unreadable config: {e}"), err=True)
            level = 'WARNING'
    setup_logging(level)


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(show_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
