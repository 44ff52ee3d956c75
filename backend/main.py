"""
Gym listings FastAPI applications.

Two apps share this process:
- api_app: the listing API (GET /gyms)
- web_app: the listing pages, which read from the listing API over HTTP

Both are built by factories from an explicit Settings object. The module-level
instances use the environment-derived settings and are what uvicorn serves:

    uvicorn backend.main:api_app --port 5176
    uvicorn backend.main:web_app --port 8000
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from backend import config
from backend.config import Settings
from backend.middleware.request_id import RequestIdMiddleware
from backend.routes import gyms as gym_routes
from backend.routes import home as home_routes
from backend.services.gym_client import GymClient

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Set the root log level from LOG_LEVEL."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(settings.LOG_LEVEL)


def _lifespan(name: str):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(app.state.settings)
        logger.info("%s started (environment=%s)", name, app.state.settings.ENVIRONMENT)
        yield
        logger.info("%s stopped", name)

    return lifespan


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(RequestIdMiddleware)
    # Added last so it runs first
    if settings.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)


def _add_health(app: FastAPI) -> None:
    @app.get("/health")
    async def health():
        """Health check endpoint for uptime monitoring."""
        return {"status": "ok"}


def create_api_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the listing API.

    OpenAPI docs are served only in development.
    """
    settings = settings or config.settings
    dev = settings.is_development

    app = FastAPI(
        title="Gym Listings API",
        openapi_url="/openapi.json" if dev else None,
        docs_url="/docs" if dev else None,
        redoc_url=None,
        lifespan=_lifespan("Gym listings API"),
    )
    app.state.settings = settings

    _install_middleware(app, settings)
    app.include_router(gym_routes.router)
    _add_health(app)
    return app


def create_web_app(settings: Settings | None = None, gym_client: GymClient | None = None) -> FastAPI:
    """
    Build the listing pages app.

    Args:
        settings: Settings to build from (defaults to the environment)
        gym_client: Client for the listing API (defaults to one built from settings)
    """
    settings = settings or config.settings

    app = FastAPI(
        title="Gym Listings",
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        lifespan=_lifespan("Gym listings web"),
    )
    app.state.settings = settings
    app.state.gym_client = gym_client or GymClient(
        url=settings.GYMS_API_URL,
        timeout=settings.GYMS_API_TIMEOUT,
    )

    _install_middleware(app, settings)
    app.include_router(home_routes.router)
    _add_health(app)
    return app


api_app = create_api_app()
web_app = create_web_app()
