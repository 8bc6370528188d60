"""Log command - show commit history."""

import click
from edge.core.errors import EdgeError
from edge.core.repository import Repository
from edge.cli.output import error, info


@click.command('log')
@click.option('-n', '--max-count', type=click.IntRange(min=1), help='Limit number of commits')
def log_cmd(max_count):
    """
    Show commit history, newest first.

    Examples:
        edge log
        edge log -n 5
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not an edge repository"))
        raise click.Abort()

    shown = 0
    try:
        for commit_hash, commit in repo.history.walk(max_count=max_count):
            click.echo("----------------------------")
            click.echo(f"Commit : {commit_hash}")
            click.echo(f"Date : {commit.timestamp}")
            click.echo(f"Message : {commit.message}")
            click.echo()
            shown += 1
    except (EdgeError, OSError) as e:
        click.echo(error(f"Log failed: {e}"))
        raise click.Abort()

    if not shown:
        click.echo(info("No commits yet"))
