"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fridge_insights.api.accounts import router as accounts_router
from fridge_insights.api.insights import router as insights_router
from fridge_insights.api.items import router as items_router
from fridge_insights.app_logging import configure_logging
from fridge_insights.config import parse_allowed_origins
from fridge_insights.containers import AppContainer
from fridge_insights.errors import (
    FridgeInsightsError,
    InvalidCredentialError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)

_ERROR_STATUS: dict[type[FridgeInsightsError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UpstreamError: status.HTTP_502_BAD_GATEWAY,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to close collaborator clients")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FridgeInsightsError)
    async def handle_app_error(
        request: Request, exc: FridgeInsightsError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Upstream failure on %s %s: %s", request.method, request.url.path, exc
            )
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    app.include_router(accounts_router)
    app.include_router(items_router)
    app.include_router(insights_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: FridgeInsightsError) -> int:
    """Map an application error onto an HTTP status code."""
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
