# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Portfolio API.
# It configures the FastAPI application with middleware, routers, handlers
# and the static mount that serves the public asset directory.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.dependencies import build_profile_picture_service
from app.exceptions import (
    PortfolioException,
    http_exception_handler,
    portfolio_exception_handler,
    validation_exception_handler,
)
from app.routers import achievements, health, profile_picture

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Make sure the profile picture directory exists
    - Shutdown: Nothing to release, just log
    """
    # Startup
    logger.info(f"Starting Portfolio API in {settings.ENVIRONMENT} mode")
    logger.info(f"Storage backend: {settings.STORAGE_BACKEND}, public dir: {settings.PUBLIC_DIR}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    if settings.STORAGE_BACKEND == "filesystem":
        build_profile_picture_service(settings).ensure_directory()

    yield

    # Shutdown
    logger.info("Shutting down Portfolio API")


# Create FastAPI application
app = FastAPI(
    title="Portfolio API",
    description="""
## Portfolio Website Backend

Backs the personal portfolio site with two small services.

### Endpoints

| Service | Role |
|---------|------|
| **Achievements** | Lists the award images placed in the public achievements directory |
| **Profile Picture** | Stores the single site avatar and reports whether one exists |

### Quick Start

```bash
# List achievement images
curl http://localhost:8000/api/v1/achievements

# Upload a profile picture
curl -X POST http://localhost:8000/api/v1/profile-picture \\
  -F "file=@avatar.jpg;type=image/jpeg"

# Check the profile picture
curl http://localhost:8000/api/v1/profile-picture
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Achievements",
            "description": "Achievement image gallery",
        },
        {
            "name": "Profile Picture",
            "description": "Upload and look up the site profile picture",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(PortfolioException)
async def handle_portfolio_exception(request: Request, exc: PortfolioException):
    """Handle custom portfolio exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message} {exc.details}")
    else:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.code}")
    return await portfolio_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed requests."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Handle routing and body-parsing errors raised by the framework."""
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Achievement gallery endpoints
app.include_router(
    achievements.router,
    prefix="/api/v1",
    tags=["Achievements"]
)

# Profile picture endpoints
app.include_router(
    profile_picture.router,
    prefix="/api/v1",
    tags=["Profile Picture"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/api", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Portfolio API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


# =============================================================================
# Static Assets
# =============================================================================
# Mounted last so the API routes above take precedence. Serves the public
# paths returned by the endpoints (/achievements/..., /profile/avatar.jpg).

if settings.SERVE_STATIC:
    app.mount(
        "/",
        StaticFiles(directory=settings.PUBLIC_DIR, check_dir=False),
        name="public",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
