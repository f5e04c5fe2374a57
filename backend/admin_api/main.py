"""
Admin API main application.
Entry point for the FastAPI server.

Run with:
    uvicorn admin_api.main:app --reload
"""

from fastapi import FastAPI

from shared.config.settings import settings
from shared.infrastructure.correlation import CorrelationIdMiddleware
from admin_api.core import configure_cors, lifespan, register_exception_handlers
from admin_api.routers.admin import router as admin_router


app = FastAPI(
    title="Airline Admin API",
    description="Administrative catalog API: airlines, countries, fares, price offers and users",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

register_exception_handlers(app)
configure_cors(app)
app.add_middleware(CorrelationIdMiddleware)


@app.get("/api/health")
def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "admin-api",
        "environment": settings.environment,
    }


app.include_router(admin_router, prefix="/api/admin")
