"""Initialize a new Edge repository."""

import click
from pathlib import Path
from edge.core.errors import AlreadyInitializedError
from edge.core.repository import Repository
from edge.cli.output import success, error, info, warning


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Edge repository.

    Creates a .edge directory with an object store, an empty HEAD and an
    empty staging index. Running it again on an existing repository only
    reports that it is already initialized.

    Examples:
        edge init                    # Initialize in current directory
        edge init my-project         # Initialize in my-project directory
    """
    try:
        repo_path = Path(path).resolve()

        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))

        repo = Repository(str(repo_path))
        repo.init()

    except AlreadyInitializedError:
        click.echo(warning("Repository already initialized"))
        return
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()
    except OSError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()

    click.echo(success(f"Initialized empty Edge repository in {repo.edge_dir}"))
    click.echo(info("Stage files with 'edge add <file>'"))
