"""Show command - display the changes introduced by a commit."""

import configparser
import sys

import click
from edge.core.config import get_config
from edge.core.errors import EdgeError
from edge.core.repository import Repository
from edge.cli.output import error, info


@click.command('show')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('commit', required=False, default='HEAD')
def show_cmd(no_color, commit):
    """
    Show each file of a commit with its diff against the parent.

    Files absent from the parent are reported as new; files of the first
    commit have no diff.

    Examples:
        edge show                # Show HEAD
        edge show abc123         # Show commit by id or unique prefix
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not an edge repository"))
        raise click.Abort()

    isatty = sys.stdout.isatty()
    try:
        use_color = not no_color and get_config(repo).use_color(isatty)
    except configparser.Error:
        use_color = not no_color and isatty

    commit_hash = repo.refs.resolve_reference(commit)
    if not commit_hash:
        click.echo(error(f"Not a valid reference: {commit}"))
        raise click.Abort()

    try:
        changes = repo.diff.diff_commit(commit_hash)
    except (EdgeError, OSError) as e:
        click.echo(error(f"Show failed: {e}"))
        raise click.Abort()

    click.echo(f"Changes in the commit {commit_hash} :")
    click.echo()

    if not changes:
        click.echo(info("(no files)"))
        return

    for change in changes:
        click.echo(repo.diff.format_change(change, color=use_color), color=use_color)
        click.echo()

    failed = [change for change in changes if change.failed]
    if failed:
        click.echo(error(f"Could not reconstruct {len(failed)} file(s)"))
        raise click.Abort()
