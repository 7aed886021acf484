"""
AI Market Backend - FastAPI Application

Storefront and checkout demo for AI agent modules: catalog, PayPal orders,
activation tokens, briefs and in-memory metrics.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging

import httpx

from .config import Settings, settings as default_settings
from .exceptions import MarketError, ExternalProviderError
from .services.state import build_market_state
from .api.catalog import router as catalog_router
from .api.activations import router as activations_router
from .api.briefs import router as briefs_router
from .api.orders import router as orders_router
from .api.metrics import router as metrics_router
from .web import router as web_router


# Configure logging
logging.basicConfig(
    level=getattr(logging, default_settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    - Startup: report PayPal mode
    - Shutdown: close the PayPal HTTP client
    """
    state = app.state.market
    logger.info("Starting AI Market server...")
    logger.info(f"PayPal API base: {state.settings.paypal_api_base}")
    if not state.settings.is_live:
        logger.warning(
            "Missing PAYPAL_CLIENT_ID or PAYPAL_CLIENT_SECRET. "
            "Running in demo-only mode; set them in your environment."
        )
    logger.info("Server startup complete")

    yield

    logger.info("Shutting down AI Market server...")
    await state.paypal.aclose()


def create_app(
    settings: Optional[Settings] = None,
    paypal_transport: Optional[httpx.AsyncBaseTransport] = None
) -> FastAPI:
    """
    Build the FastAPI application with a fresh market state.

    Args:
        settings: Settings override (defaults to the environment-loaded instance)
        paypal_transport: Transport override for the PayPal client (tests)
    """
    settings = settings or default_settings

    app = FastAPI(
        title="AI Market API",
        description="Storefront and PayPal checkout for AI agent modules",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.market = build_market_state(settings, transport=paypal_transport)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MarketError)
    async def market_error_handler(request: Request, exc: MarketError):
        """Translate storefront errors to `{"error": message}` with the mapped status."""
        if isinstance(exc, ExternalProviderError):
            logger.error(f"Provider error: {exc.error_code} - {exc.message}")
        else:
            logger.warning(
                f"Request error: {exc.error_code} - {exc.message}",
                extra={"details": exc.details}
            )

        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON or wrongly typed body fields."""
        logger.warning(f"Invalid request body: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unmatched routes answer with a plain-text 404."""
        if exc.status_code == 404:
            return PlainTextResponse("Not found", status_code=404)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        """Catch-all for unexpected errors."""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/api/health")
    async def health_check():
        """
        Health check endpoint for monitoring and load balancers.

        Returns:
            {"status": "ok", "uptime": float seconds, "now": ISO timestamp,
             "paypalConfigured": bool}
        """
        state = app.state.market
        return {
            "status": "ok",
            "uptime": round(state.uptime, 3),
            "now": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "paypalConfigured": state.settings.is_live,
        }

    app.include_router(web_router, tags=["Storefront"])
    app.include_router(catalog_router, prefix="/api", tags=["Catalog"])
    app.include_router(activations_router, prefix="/api", tags=["Activations"])
    app.include_router(briefs_router, prefix="/api", tags=["Briefs"])
    app.include_router(orders_router, prefix="/api", tags=["Orders"])
    app.include_router(metrics_router, prefix="/api", tags=["Metrics"])

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn
    uvicorn.run(
        "aimarket.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
