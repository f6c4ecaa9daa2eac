"""Database maintenance command."""

import click
from rich.console import Console

from tasktrack.foundation.config import get_config
from tasktrack.store.database import Database
from tasktrack.store.task_store import TaskStore

console = Console()


@click.command("init-db")
@click.option("--database-url", default=None, help="SQLAlchemy database URL (default: config)")
@click.option("--reset", is_flag=True, help="Drop and recreate the tasks table")
def init_db(database_url: str | None, reset: bool) -> None:
    """Create the tasks table if it does not exist."""
    config = get_config()
    database = Database(database_url or config.database.url, echo=config.database.echo)
    try:
        if reset:
            database.reset()
        else:
            database.init()
        total = TaskStore(database).count()
    finally:
        database.shutdown()

    action = "Reset" if reset else "Initialized"
    console.print(f"[green]✓[/green] {action} {database.url} ({total} tasks)", soft_wrap=True)
