"""HTTP server for the tasktrack API.

Usage:
    tasktrack serve

Architecture:
    Client ←JSON/HTTP→ FastAPI routes → TaskStore → SQLAlchemy
"""

from tasktrack.server.main import create_app

__all__ = ["create_app"]
