"""
Controllers Package - The 'C' in MVC

Controllers handle requests and coordinate between:
- Models (data access through repositories)
- Views (templates rendered by the view resolver)

Page controllers register their actions on the shared ``request_handler``
route table when imported. The JSON API is a regular FastAPI APIRouter.
"""

from birdwatch.controllers import birds  # noqa: F401  registers page routes
from birdwatch.controllers.api import router as api_router
from birdwatch.routing import request_handler

__all__ = ["api_router", "request_handler"]
