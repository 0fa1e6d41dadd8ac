from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weatherstats.api.router import api_router
from weatherstats.core.config import get_settings
from weatherstats.core.http import create_http_client, set_http_client
from weatherstats.core.logging import setup_logging


logger = logging.getLogger(__name__)

INVALID_REQUEST_STATUSES = {404, 405}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Setup HTTP client
    client = create_http_client(settings)
    set_http_client(client)

    app.state.settings = settings
    logger.info("Server started...")

    try:
        yield
    finally:
        await client.aclose()
        set_http_client(None)


async def invalid_request_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in INVALID_REQUEST_STATUSES:
        return PlainTextResponse("Invalid request", status_code=exc.status_code)
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    app = FastAPI(
        title="weatherstats",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.add_exception_handler(StarletteHTTPException, invalid_request_handler)

    @app.middleware("http")
    async def log_processed(request: Request, call_next):
        response = await call_next(request)
        logger.info("Request processed: %s", request.url)
        return response

    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
