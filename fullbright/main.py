"""FastAPI application factory and process entrypoint. No business logic; only wiring.

Run with:

  python -m fullbright.main

or under uvicorn directly:

  uvicorn fullbright.main:create_app --factory
"""

import logging
import sys

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy import Engine

from fullbright.api.routes import router
from fullbright.core.config import Settings, get_settings
from fullbright.core.database import build_engine, build_session_factory
from fullbright.core.errors import ServiceError

logger = logging.getLogger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status, "message": exc.message},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or mistyped bodies are client errors (400), same shape as other errors."""
    errors = exc.errors()
    first = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"status": "error", "message": str(first)},
    )


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Build the application around an explicitly constructed storage client.

    The engine (connection pool) and session factory live on app.state; each
    request gets its own session through get_db.
    """
    settings = settings or get_settings()
    engine = engine or build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

    app = FastAPI(
        title="FullBright API",
        version="0.1.0",
        docs_url="/docs" if settings.APP_ENV == "dev" else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(router)
    return app


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def main() -> int:
    """Load settings, then serve until interrupted. Invalid configuration is fatal."""
    load_dotenv()
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging("ERROR")
        logger.error("Invalid configuration, refusing to start: %s", e)
        return 1

    configure_logging(settings.LOG_LEVEL)

    import uvicorn

    app = create_app(settings)
    logger.info(
        "Server starting",
        extra={"host": settings.HOST, "port": settings.PORT, "env": settings.APP_ENV},
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
