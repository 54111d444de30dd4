"""FastAPI application factory"""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from rent_vs_buy.api.middleware import RequestIDMiddleware, MetricsMiddleware
from rent_vs_buy.api.v1 import projection
from rent_vs_buy.infrastructure.observability.logging import setup_logging
from rent_vs_buy.infrastructure.observability.metrics import record_rejection
from rent_vs_buy.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Rent vs Buy Calculator",
        description="Compares the total cost of renting against buying a home",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Malformed or out-of-range bodies are rejected before the endpoint runs
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        record_rejection("invalid_input")
        return await request_validation_exception_handler(request, exc)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(projection.router, prefix="/v1", tags=["projections"])

    return app


app = create_app()
