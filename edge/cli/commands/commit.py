"""Commit command - create a commit from staged changes."""

import click
from edge.core.errors import EdgeError, NothingToCommitError
from edge.core.repository import Repository
from edge.cli.output import success, error, info


@click.command('commit')
@click.argument('message', required=False)
@click.option('-m', '--message', 'message_opt', help='Commit message')
def commit_cmd(message, message_opt):
    """
    Record staged changes to the repository.

    The new commit's parent is the current HEAD. HEAD then moves to the
    new commit and the staging area is emptied.

    Examples:
        edge commit "Initial commit"
        edge commit -m "Add feature"
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not an edge repository"))
        raise click.Abort()

    message = message_opt or message
    if not message or not message.strip():
        click.echo(error("Commit message required"))
        raise click.Abort()

    try:
        commit_hash = repo.chain.commit(message)
    except NothingToCommitError as e:
        click.echo(error(str(e)))
        click.echo(info("Use 'edge add <file>' to stage changes"))
        raise click.Abort()
    except (EdgeError, OSError, ValueError) as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()

    click.echo(success(f"Commit successfully created : {commit_hash}"))
