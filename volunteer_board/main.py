# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Ramadan Volunteer Board
=======================
Visitors sign up for daily volunteer slots during Ramadan (three per day)
and for a separate, uncapped Eid day. An administrator lists, exports and
deletes registrations behind a shared password.

Port: 8000
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from volunteer_board import __version__
from volunteer_board.controllers import admin_controller, system_controller, volunteer_controller
from volunteer_board.core.config import Settings, settings
from volunteer_board.core.database import build_engine, create_schema
from volunteer_board.core.dependencies import build_container
from volunteer_board.core.exceptions import StoreError, VolunteerBoardError
from volunteer_board.core.logging import get_logger
from volunteer_board.middleware import MetricsMiddleware, RequestIDMiddleware
from volunteer_board.migrations import migrate_full_name

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    engine = application.state.container.engine
    migrate_full_name(engine)
    create_schema(engine)
    logger.info("Schema ready")
    yield
    engine.dispose()
    logger.info("Shutting down: connection pool disposed")


def build_app(engine: Optional[Engine] = None, cfg: Optional[Settings] = None) -> FastAPI:
    """Assemble the application around an explicit database engine."""
    cfg = cfg or settings
    engine = engine or build_engine(cfg)

    application = FastAPI(
        title="Ramadan Volunteer Board",
        description="Daily volunteer sign-up for Ramadan and Eid al-Fitr.",
        version=__version__,
        lifespan=lifespan,
    )
    application.state.settings = cfg
    application.state.container = build_container(engine, cfg)

    application.add_middleware(MetricsMiddleware)
    application.add_middleware(RequestIDMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.exception_handler(VolunteerBoardError)
    async def board_error_handler(request: Request, exc: VolunteerBoardError):
        if isinstance(exc, StoreError):
            logger.exception("Store failure on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": exc.reason})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.reason, "detail": exc.message},
        )

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception")
        return JSONResponse(status_code=500, content={"error": "internal_server_error"})

    application.include_router(system_controller.router)
    application.include_router(volunteer_controller.router)
    application.include_router(admin_controller.router)
    return application


app = build_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
