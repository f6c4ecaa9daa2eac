"""HTTP server command.

Usage:
    tasktrack serve                  # Start on 127.0.0.1:3000
    tasktrack serve --port 8080      # Custom port
    tasktrack serve --database-url sqlite:///tasks.db
"""

import dataclasses
import logging

import click
import uvicorn
from rich.console import Console

from tasktrack.foundation.config import get_config
from tasktrack.foundation.logging import configure_logging
from tasktrack.store.database import is_memory_sqlite

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.option("--port", type=int, default=None, help="Port to listen on (default: config)")
@click.option("--host", default=None, help="Host to bind to (127.0.0.1 for local only)")
@click.option("--database-url", default=None, help="SQLAlchemy database URL (default: config)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def serve(port: int | None, host: str | None, database_url: str | None, debug: bool) -> None:
    """Start the tasktrack HTTP server.

    \b
    Examples:
        tasktrack serve
        tasktrack serve --port 8080
        tasktrack serve --database-url postgresql+psycopg://localhost/tasks
    """
    from tasktrack.server import create_app

    config = get_config()
    if database_url:
        config = dataclasses.replace(
            config, database=dataclasses.replace(config.database, url=database_url)
        )
    host = host if host is not None else config.server.host
    port = port if port is not None else config.server.port

    configure_logging(debug=debug or config.debug)

    app = create_app(config=config)

    console.print()
    console.print("[bold green]tasktrack[/bold green]")
    console.print(f"   URL: http://{host}:{port}")
    console.print(f"   Database: {config.database.url}", soft_wrap=True)
    if is_memory_sqlite(config.database.url):
        logger.warning("Serving an in-memory database; data is lost on exit")
        console.print(
            "[yellow]Warning: in-memory SQLite is for tests only. "
            "Concurrent requests share one transaction and nothing is persisted.[/yellow]",
            soft_wrap=True,
        )
    console.print()
    console.print("[dim]Press Ctrl+C to stop[/dim]")
    console.print()

    uvicorn.run(app, host=host, port=port, log_level="debug" if debug else "info")
