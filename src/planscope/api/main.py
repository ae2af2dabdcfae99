"""
Planscope API Main Application

Entry point for the FastAPI application.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from planscope.platform.config import settings
from planscope.platform.logging import configure_logging, get_logger
from planscope.api.routers import conflicts

# Configure logging on import
configure_logging()
logger = get_logger(__name__)


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="Allocation conflict analysis for resource planning",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(",") if settings.CORS_ORIGINS else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# OBSERVABILITY
# =============================================================================

if settings.METRICS_ENABLED:
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================


@app.get("/health/live", tags=["Health"])
async def liveness() -> dict:
    """Liveness probe - is the service running?"""
    return {"status": "alive"}


@app.get("/health/ready", tags=["Health"])
async def readiness() -> dict:
    """
    Readiness probe - is the service ready to accept traffic?
    The engine has no external dependencies, so a running app is ready.
    """
    return {
        "status": "ready",
        "version": settings.VERSION,
    }


# =============================================================================
# API ROUTERS
# =============================================================================

app.include_router(conflicts.router, prefix="/api/v1/conflicts", tags=["Conflicts"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "planscope.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
