"""FastAPI application entrypoint for the users sample API."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models.schemas import REQUIRED_FIELDS_MESSAGE, HealthResponse, WelcomeResponse
from api.routes.users import router as users_router
from api.services.clock import iso_timestamp, uptime_seconds
from core.logging import configure_logging
from core.settings import get_settings

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"
WELCOME_MESSAGE = "Welcome to the GitHub Actions Sample API"
ROUTE_NOT_FOUND = "Route not found"
INTERNAL_ERROR = "Something went wrong!"


def create_app() -> FastAPI:
    """Build the application with its routes and error handlers."""

    app = FastAPI(
        title="Users Sample API",
        version=APP_VERSION,
        description="Sample REST API used as a CI/CD pipeline fixture.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    @app.get("/", response_model=WelcomeResponse)
    def welcome() -> WelcomeResponse:
        return WelcomeResponse(message=WELCOME_MESSAGE, version=APP_VERSION, timestamp=iso_timestamp())

    @app.get("/health", response_model=HealthResponse)
    @app.get("/health/", response_model=HealthResponse, include_in_schema=False)
    def healthcheck() -> HealthResponse:
        """Simple readiness probe used by deployment tooling."""

        return HealthResponse(status="healthy", uptime=uptime_seconds(), timestamp=iso_timestamp())

    app.include_router(users_router)

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _internal_error)
    return app


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing misses (unknown path or method) are raised by Starlette itself;
    # handler errors use FastAPI's subclass and carry their own message.
    if not isinstance(exc, HTTPException) and exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": ROUTE_NOT_FOUND})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": REQUIRED_FIELDS_MESSAGE})


async def _internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


app = create_app()


def serve() -> None:
    """Run the API under uvicorn unless configured for tests."""

    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.is_test:
        logger.info("APP_ENV=test, not starting the server")
        return

    import uvicorn

    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()
