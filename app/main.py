# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Real Estate Projects API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload --port 3001
#   poetry run python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    ProjectsApiException,
    projects_api_exception_handler,
    validation_exception_handler,
)
from app.routers import health, media, projects
from lib.supabase_client import SupabaseClient, SupabaseClientError

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

    - Startup: Log configuration, probe the Supabase connection
    - Shutdown: Log shutdown
    """
    logger.info(f"Server running on port {settings.API_PORT}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Supabase URL: {settings.SUPABASE_URL}")

    # The probe only logs; the API starts even if Supabase is unreachable
    SupabaseClient.check_connection()

    yield

    logger.info("Server shutting down...")


# Create FastAPI application
app = FastAPI(
    title="Real Estate Projects API",
    description="""
## Real Estate Project Records

Create projects, attach partners, brokerages and agents, upload media to
Supabase Storage and read everything back as one aggregate.

### Quick Start

```bash
# 1. Create a project
curl -X POST http://localhost:3001/api/projects \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Palm Heights"}'

# 2. Attach partners
curl -X POST http://localhost:3001/api/projects/{id}/partners \\
  -H "Content-Type: application/json" \\
  -d '{"partners": [{"name": "Acme Capital", "type": "investor"}]}'

# 3. Upload media
curl -X POST http://localhost:3001/api/projects/{id}/media \\
  -F "files=@front.jpg" -F "files=@tour.mp4"

# 4. Read the project
curl http://localhost:3001/api/projects/{id}
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Projects",
            "description": "Create, list and read projects; attach related parties",
        },
        {
            "name": "Media",
            "description": "Upload project images and videos",
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

@app.exception_handler(ProjectsApiException)
async def handle_projects_api_exception(request: Request, exc: ProjectsApiException):
    """Handle custom API exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: [{exc.code}] {exc.message}")
    return await projects_api_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_supabase_client_error(request: Request, exc: SupabaseClientError):
    """Handle a Supabase client that could not be created."""
    logger.error(f"Supabase client unavailable: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": exc.message,
            "code": exc.code,
            "suggestion": exc.suggestion,
        }
    )


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
    prefix="/api",
    tags=["Health"]
)

# Project endpoints
app.include_router(
    projects.router,
    prefix="/api/projects",
    tags=["Projects"]
)

# Media upload endpoints
app.include_router(
    media.router,
    prefix="/api/projects",
    tags=["Media"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "message": "Real Estate Backend API is running!",
        "endpoints": {
            "health": "/api/health",
            "projects": "/api/projects",
            "createProject": "POST /api/projects",
        },
    }


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development and settings.DEBUG,
    )
