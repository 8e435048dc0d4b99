from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from signup_api.core.config import get_settings
from signup_api.core.logging_config import configure_logging
from signup_api.db.create_tables import create_all
from signup_api.db.session import dispose_engine
from signup_api.routers import signup as signup_router

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers for a JSON-only API."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Cache-Control", "no-store")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.auto_create_tables:
        create_all()
    logger.info("Signup API started (env=%s)", settings.app_env)
    try:
        yield
    finally:
        dispose_engine()


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Signup API", lifespan=lifespan)

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update({"http://localhost:8000", "http://127.0.0.1:8000"})
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(signup_router.router)
    return app
