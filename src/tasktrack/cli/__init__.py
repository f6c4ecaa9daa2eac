"""Command line interface."""

from tasktrack.cli.main import cli_entrypoint, main

__all__ = ["cli_entrypoint", "main"]
