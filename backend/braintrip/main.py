"""BrainTrip FastAPI application.

Main entry point for the backend API server. ``create_app`` builds the
app; the module-level ``app`` is what uvicorn serves::

    uvicorn braintrip.main:app --app-dir backend
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from braintrip import __version__
from braintrip.api import router
from braintrip.api.errors import error_response, validation_message
from braintrip.config import Settings
from braintrip.db import Database
from braintrip.models import ErrorCode
from braintrip.services import AppServices

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    services: Optional[AppServices] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """Build the application.

    ``services`` and ``database`` default to ones built from ``settings``
    (itself read from the environment) when the app starts.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        owns_services = services is None
        app.state.services = services or AppServices.build(settings)
        app.state.db = database or Database(settings.database_url)
        app.state.db.init()
        logger.info(
            f"[APP] Started (places={'on' if settings.has_places_credential else 'off'}, "
            f"ai={app.state.services.ai.provider_name if app.state.services.ai else 'off'})"
        )
        yield
        # Shutdown
        if owns_services:
            await app.state.services.close()
        if database is None:
            app.state.db.dispose()

    app = FastAPI(
        title="BrainTrip API",
        description="POI-grounded travel trivia and itinerary suggestions",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global exception handlers
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Missing or ill-typed input → 400."""
        message = validation_message(exc.errors())
        logger.info(f"[API] {request.method} {request.url.path} rejected: {message}")
        return error_response(400, ErrorCode.VALIDATION_ERROR, message)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors."""
        logger.exception(f"[API] Unhandled error on {request.method} {request.url.path}")
        return error_response(500, ErrorCode.API_ERROR, "Something went wrong. Please try again.")

    # Include API routes
    app.include_router(router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
