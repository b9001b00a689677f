"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from video_producer import __version__
from video_producer.api.deps import get_registry
from video_producer.api.routes import health, productions, scripts, visual_plans
from video_producer.config import settings
from video_producer.logging import get_logger, setup_logging

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info(
        "application_starting",
        version=__version__,
        provider=settings.producer_provider,
        producer_api=settings.producer_api_base_url,
    )

    yield

    # Shutdown: stop productions that are still running
    logger.info("application_shutting_down")
    await app.dependency_overrides.get(get_registry, get_registry)().shutdown()


# Create FastAPI app
app = FastAPI(
    title="AI Video Producer",
    description="Brief-to-video production pipeline with quality gating",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health.router)
app.include_router(productions.router, prefix="/api/v1")
app.include_router(scripts.router, prefix="/api/v1")
app.include_router(visual_plans.router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Root endpoint redirect to docs."""
    return {
        "name": "AI Video Producer",
        "version": __version__,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "video_producer.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
