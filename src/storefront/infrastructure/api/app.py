"""Storefront FastAPI application.

Usage:
    uvicorn --factory storefront.infrastructure.api.app:create_app --port 8000
    storefront serve
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.service.coupon_redemption_service import Clock, utc_now
from storefront.infrastructure.api.routes import cart_router, coupon_router, order_router
from storefront.infrastructure.bootstrap import Repositories, repositories
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.logging import configure_logging

logger = structlog.get_logger(__name__)


def _status_for(exc: DomainException) -> int:
    if isinstance(exc, EntityNotFoundError):
        return 404
    if isinstance(exc, ValidationError):
        return 400
    return 500


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status = _status_for(exc)
    logger.info(
        "Request rejected",
        path=request.url.path,
        status=status,
        error=type(exc).__name__,
        detail=str(exc),
    )
    return JSONResponse(
        status_code=status,
        content={"error": str(exc), "code": type(exc).__name__},
    )


def create_app(
    repos: Repositories | None = None,
    settings: Settings | None = None,
    clock: Clock = utc_now,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, json=settings.log_json)

    app = FastAPI(
        title="Storefront API",
        description="Cart, coupon and checkout endpoints",
    )
    app.state.repositories = repos or repositories(settings)
    app.state.clock = clock

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DomainException, domain_exception_handler)

    app.include_router(cart_router)
    app.include_router(coupon_router)
    app.include_router(order_router)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
