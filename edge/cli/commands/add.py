"""Add command - stage files for commit."""

import click
from pathlib import Path
from edge.core.errors import EdgeError
from edge.core.repository import Repository
from edge.cli.output import success, error, info


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Each file's content is stored and appended to the index. Adding the
    same file again appends a new entry.

    Examples:
        edge add file.txt
        edge add a.txt b.txt
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not an edge repository"))
        raise click.Abort()

    failed_files = []

    for path_arg in paths:
        path = Path(path_arg)
        if not path.is_absolute():
            path = Path.cwd() / path

        try:
            entry = repo.index.add_file(path)
        except (OSError, ValueError, EdgeError) as e:
            failed_files.append((path_arg, str(e)))
            continue

        click.echo(info(entry.hash))
        click.echo(success(f"Added {entry.path}"))

    if failed_files:
        click.echo(error(f"Failed to add {len(failed_files)} file(s):"))
        for file, reason in failed_files:
            click.echo(error(f"  {file}: {reason}"))
        raise click.Abort()
