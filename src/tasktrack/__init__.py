"""tasktrack - a minimal task-tracking HTTP service."""

__version__ = "0.1.0"
