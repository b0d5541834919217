"""
Resume Roast API - Main FastAPI Application

Rule-based resume scoring, roasting and improvement suggestions.
No AI/LLM is involved: every response is a deterministic function of the text.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from resumeroast.api.routes import router
from resumeroast.config import get_settings
from resumeroast.services.rate_limit import limiter, rate_limit_exceeded_handler

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    if settings.rate_limit_enabled:
        backend = "redis" if settings.redis_url else "memory"
        logger.info(
            f"Rate limit: {settings.rate_limit_requests} requests per "
            f"{settings.rate_limit_period}s ({backend} store)"
        )

    yield

    # Shutdown
    logger.info("Shutting down Resume Roast API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
## Resume Roast API

Deterministic, rule-based resume feedback. No AI/LLM is used anywhere.

### Features

- **Analyze**: 1-10 score with a six-category breakdown, strengths and red flags
- **Roast**: Comedic roast at light, medium or spicy intensity
- **Improve**: Priority fixes, bullet rewrites, a summary draft and ATS tips
- **Extract**: Pull text out of a PDF resume

### Quick Start

1. Upload a PDF to `/api/extract` or paste your text directly
2. Send the text to `/api/analyze` for a score
3. Get roasted at `/api/roast`
4. Get a fix list from `/api/improve`

Identical text always yields identical output.
        """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Add global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An internal error occurred",
                "detail": str(exc) if settings.debug else "Please try again later"
            }
        )

    # Include API routes
    app.include_router(router, prefix="/api")

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
            "api": "/api"
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "resumeroast.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
