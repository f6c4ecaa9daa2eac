"""Route modules for the tasktrack API.

Each module defines an APIRouter for a specific domain:
- tasks: Task CRUD
- misc: Health
"""

from tasktrack.server.routes.misc import router as misc_router
from tasktrack.server.routes.tasks import router as tasks_router

__all__ = [
    "misc_router",
    "tasks_router",
]
