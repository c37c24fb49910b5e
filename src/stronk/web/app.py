"""FastAPI application for the stronk JSON API."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..config import Settings, get_settings
from ..data.routine_loader import load_routine
from ..db.engine import Database
from ..errors import LiftNotFoundError, RoutinePositionError, StronkError, ValidationError
from ..logging_config import configure_logging
from ..models.routine import Routine
from ..services.tracker import Tracker
from .routers import lifts, training_maxes

logger = structlog.get_logger(__name__)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        logger.info("bad_request", path=request.url.path, error=str(exc))
        return _error(400, exc)

    @app.exception_handler(LiftNotFoundError)
    async def lift_not_found(request: Request, exc: LiftNotFoundError):
        logger.info("lift_not_found", path=request.url.path, lift_id=exc.lift_id)
        return _error(404, exc)

    @app.exception_handler(RoutinePositionError)
    async def routine_position(request: Request, exc: RoutinePositionError):
        # Recorded history points outside the loaded routine
        logger.error("routine_position_error", path=request.url.path, error=str(exc))
        return _error(500, exc)

    @app.exception_handler(StronkError)
    async def stronk_error(request: Request, exc: StronkError):
        logger.error("request_failed", path=request.url.path, error=str(exc))
        return _error(500, exc)


def create_app(settings: Settings | None = None, routine: Routine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment
        routine: Routine to use instead of loading one from disk
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database on startup and close it on shutdown."""
        configure_logging(settings.log_level, settings.log_json)
        loaded = routine or load_routine(settings.routine_file)
        db = await Database(settings.db_path).connect()
        app.state.tracker = Tracker(db, loaded)
        logger.info("server_started", db_path=str(settings.db_path), routine=loaded.name)
        try:
            yield
        finally:
            await db.close()

    app = FastAPI(
        title="stronk",
        description="5/3/1 workout tracker",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    app.include_router(training_maxes.router)
    app.include_router(lifts.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Frontend is optional; mounted last so it doesn't shadow the API
    if settings.frontend_dir is not None and settings.frontend_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")
    else:

        @app.get("/", include_in_schema=False)
        async def root():
            """Root redirect to API docs."""
            return RedirectResponse(url="/docs", status_code=302)

    return app
