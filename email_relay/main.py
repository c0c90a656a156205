import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from email_relay.application.record_emails import EmailLogRecorder
from email_relay.infrastructure.email.http_upstream_adapter import (
    HttpUpstreamEmailAdapter,
)
from email_relay.infrastructure.http.client import (
    close_http_client,
    get_http_client,
    open_http_client,
)
from email_relay.infrastructure.redis_cache.email_log import RedisEmailLog
from email_relay.infrastructure.redis_cache.pool import close_redis, get_redis
from email_relay.logging import setup_logging
from email_relay.presentation.api import api
from email_relay.presentation.responses import error_response
from email_relay.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # startup
    await open_http_client(timeout=settings.http_timeout_seconds)

    # One shared upstream adapter on the shared HTTP client
    email_adapter = HttpUpstreamEmailAdapter(
        settings.upstream_url,
        client=get_http_client(),
    )
    log_recorder = EmailLogRecorder(
        RedisEmailLog(
            get_redis(settings.redis_url, timeout=settings.redis_timeout_seconds),
            key_prefix=settings.email_log_key_prefix,
        )
    )
    app.state.email_adapter = email_adapter
    app.state.log_recorder = log_recorder

    if not settings.token:
        logger.warning("TOKEN is not set; every email request will be rejected")
    logger.info(
        "email relay started",
        extra={"upstream_url": settings.upstream_url, "app_env": settings.app_env},
    )

    try:
        yield
    finally:
        # shutdown: let in-flight log writes land before the store goes away
        await log_recorder.drain()
        await email_adapter.aclose()  # it won't close the shared client
        await close_http_client()
        await close_redis()


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # a method the catch-all does not list still means "no such route"
    if exc.status_code in (404, 405):
        return error_response("Not Found", 404)
    return error_response(str(exc.detail), exc.status_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled error",
        extra={"path": request.url.path},
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return error_response("Internal Server Error", 500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(
        title="Email Relay",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(api)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "email_relay.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
