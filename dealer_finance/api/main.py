"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from dealer_finance.api.middleware import RequestIDMiddleware, MetricsMiddleware
from dealer_finance.api.v1 import aging, calculators, fx, operations
from dealer_finance.infrastructure.observability.logging import setup_logging
from dealer_finance.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Dealer Finance",
        description="Sales ledger, debt aging and financial calculators for a vehicle dealership",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added runs first
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(operations.router, prefix="/v1", tags=["operations"])
    app.include_router(aging.router, prefix="/v1", tags=["aging"])
    app.include_router(calculators.router, prefix="/v1", tags=["calculators"])
    app.include_router(fx.router, prefix="/v1", tags=["fx"])

    return app


app = create_app()
