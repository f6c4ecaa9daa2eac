"""Main CLI entry point.

    tasktrack serve       # run the HTTP API
    tasktrack init-db     # create the tasks table
"""

import sys

import click
from rich.console import Console

from tasktrack.cli.commands.db_cmd import init_db
from tasktrack.cli.commands.serve_cmd import serve
from tasktrack.foundation.errors import TaskTrackError

console = Console(stderr=True)


def cli_entrypoint() -> None:
    """Wrapped entrypoint with global error handling.

    Shows TaskTrackError as a one-line message instead of a traceback.
    Called from pyproject.toml [project.scripts].
    """
    try:
        main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        console.print("\n[dim]Aborted[/dim]")
        sys.exit(130)
    except TaskTrackError as e:
        console.print(f"[red]{e.error_id}[/red] {e.message}")
        if e.cause:
            console.print(f"[dim]{e.cause}[/dim]")
        sys.exit(1)


@click.group()
@click.version_option(package_name="tasktrack", prog_name="tasktrack")
def main() -> None:
    """tasktrack - minimal task-tracking API."""


main.add_command(serve)
main.add_command(init_db)
