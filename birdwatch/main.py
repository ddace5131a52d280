"""
Bird Watching - Application Entry Point

FastAPI application wired in the MVC style:

- Models (birdwatch/models/): the Bird entity, its schemas and repository
- Views (birdwatch/views/): Jinja2 templates named <namespace>/<action>.html
- Controllers (birdwatch/controllers/): page actions on the route table
  plus a small JSON API router

Request Flow (pages):
====================
1. Any request not claimed by the API, docs or health routes reaches ``page``
2. The request handler matches the exact (method, path) to an action
3. The action reads birds through the repository
4. The view resolver renders the action's template with those values
5. The HTML is returned; errors map to 404 / 500 / 503

Run with:

    uvicorn birdwatch.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from birdwatch import __version__
from birdwatch.config import Settings, get_settings
from birdwatch.controllers import api_router, request_handler
from birdwatch.database import get_db, init_db, init_engine, make_session_factory, ping
from birdwatch.errors import NoRouteMatch, StoreUnavailable, TemplateNotFound
from birdwatch.logging_config import setup_logging
from birdwatch.seed import seed_birds
from birdwatch.views import ViewResolver

logger = logging.getLogger(__name__)

# Every method goes to the route table so unmapped pairs become 404, not 405
PAGE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def _startup(app: FastAPI, settings: Settings) -> None:
    """Create the schema and load seed data before the first request."""
    init_db(app.state.engine)
    if settings.seed_on_startup:
        db = app.state.session_factory()
        try:
            seed_birds(db)
        finally:
            db.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _startup(app, settings)
        yield
        app.state.engine.dispose()

    app = FastAPI(
        title=settings.app_title,
        description="Bird sightings served through a small MVC pipeline.",
        version=__version__,
        # API docs are FastAPI routes, not pages in the route table
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = init_engine(settings)
    app.state.session_factory = make_session_factory(app.state.engine)
    app.state.view_resolver = ViewResolver(settings.templates_dir)

    # ============================================
    # Error Handlers
    # ============================================

    @app.exception_handler(NoRouteMatch)
    async def no_route_match_handler(request: Request, exc: NoRouteMatch):
        return HTMLResponse("<h1>Not Found</h1>", status_code=404)

    @app.exception_handler(TemplateNotFound)
    async def template_not_found_handler(request: Request, exc: TemplateNotFound):
        logger.error(f"Misconfigured view: {exc}")
        return HTMLResponse("<h1>Internal Server Error</h1>", status_code=500)

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
        logger.error(f"Store unavailable: {exc}")
        return HTMLResponse("<h1>Service Unavailable</h1>", status_code=503)

    # ============================================
    # Health Check Endpoints
    # ============================================

    @app.get("/", tags=["health"])
    def root():
        """Basic health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_title,
            "version": __version__,
        }

    @app.get("/health", tags=["health"])
    def health_check(db: Session = Depends(get_db)):
        """Detailed health check including a database ping."""
        database_ok = ping(db)
        return {
            "status": "healthy" if database_ok else "degraded",
            "database": "ok" if database_ok else "unavailable",
        }

    # JSON API
    app.include_router(api_router)

    # ============================================
    # Pages (must stay last: catches every other path)
    # ============================================

    @app.api_route("/{path:path}", methods=PAGE_METHODS, response_class=HTMLResponse, tags=["pages"])
    def page(request: Request, db: Session = Depends(get_db)):
        """Dispatch through the route table and render the action's view."""
        namespace, action, produced = request_handler.handle(request.url.path, request.method, db)
        return request.app.state.view_resolver.resolve_and_render(namespace, action, produced)

    return app


app = create_app()
