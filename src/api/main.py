import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.adapters.tz_database import get_timezone_database
from src.api.deps import Settings, get_settings
from src.api.envelope import failure, success
from src.api.routes import calculator, clock
from src.api.schemas import RootResponse
from src.domain.errors import ApiInputError
from src.shell.http.health import (
    create_health_router,
    mark_startup_complete,
    setup_default_health_checks,
)

logger = logging.getLogger(__name__)

API_TITLE = "DateTime & Timezone API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API for getting current datetime and timezone information, with a calculator"
ROOT_MESSAGE = "DateTime & Timezone API with Calculator"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load the timezone snapshot up front so the first request doesn't pay for it
    tz_db = get_timezone_database()
    setup_default_health_checks(lambda: len(get_timezone_database()))
    mark_startup_complete()
    logger.info("Startup complete (%d timezones)", len(tz_db))

    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        lifespan=lifespan,
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
    )

    # --- Errors ---
    @app.exception_handler(ApiInputError)
    async def handle_input_error(request: Request, exc: ApiInputError) -> JSONResponse:
        logger.debug(
            "%s %s rejected (%s): %s", request.method, request.url.path, exc.code, exc.message
        )
        return failure(exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("%s %s malformed body: %s", request.method, request.url.path, exc.errors())
        return failure("Invalid request body")

    # --- Routers ---
    app.include_router(clock.router, prefix="/api", tags=["DateTime"])
    app.include_router(calculator.router, prefix="/api/calculate", tags=["Calculator"])
    app.include_router(create_health_router(version=API_VERSION))

    @app.get("/", responses={200: {"model": RootResponse}}, tags=["Root"])
    def root() -> JSONResponse:
        """Service banner pointing at the interactive documentation."""
        return success({"message": ROOT_MESSAGE, "documentation": settings.docs_url})

    # CORS (only when origins are configured)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    return app


app = create_app()
