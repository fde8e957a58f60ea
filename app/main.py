import os
import subprocess
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config.logger import app_logger, log_request_start, log_request_end, log_request_error
from app.config.settings import settings
from app.api.content.router import router as content_router
from app.services.content_canon import get_catalog
from app.utils.responses import error_response


_git_sha_cache: Optional[str] = None


def get_git_sha() -> str:
    """Get the current Git commit SHA (cached to avoid blocking)."""
    global _git_sha_cache
    if _git_sha_cache is not None:
        return _git_sha_cache

    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
            timeout=1.0
        )
        _git_sha_cache = result.stdout.strip()[:8]
        return _git_sha_cache
    except (subprocess.CalledProcessError, FileNotFoundError, subprocess.TimeoutExpired):
        _git_sha_cache = "local-dev"
        return _git_sha_cache


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager for startup and shutdown events."""
    app_logger.info(f"{settings.APP_NAME} API starting up")
    app_logger.info(
        f"Similarity floor {settings.SIMILARITY_FLOOR}, auto-apply threshold {settings.AUTO_APPLY_THRESHOLD}"
    )

    # Load reference data once so a broken catalog file shows up at startup
    try:
        catalog = get_catalog()
        app_logger.info(f"Catalog ready: {len(catalog.definitions)} categories, {len(catalog.corpus)} records")
    except Exception as e:
        app_logger.error(f"Catalog initialization failed: {e}")
        app_logger.warning("Recommendation endpoints will answer with errors until CATALOG_PATH is fixed")

    app_logger.info("Application initialized successfully")

    yield

    app_logger.info(f"{settings.APP_NAME} API shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    license_info={
        "name": "MIT License",
        "url": "https://opensource.org/licenses/MIT",
    },
    servers=[
        {
            "url": "http://localhost:8000",
            "description": "Development server",
        },
    ],
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests with timing information using Loguru."""
    start_time = datetime.now()

    log_request_start(request)

    try:
        response = await call_next(request)

        process_time = (datetime.now() - start_time).total_seconds()
        log_request_end(request, response.status_code, process_time)

        return response

    except Exception as e:
        process_time = (datetime.now() - start_time).total_seconds()
        log_request_error(request, e, process_time)
        raise


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Answer unexpected failures with a generic error body."""
    app_logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    body = error_response(error="Internal server error", detail="An unexpected error occurred.")
    return JSONResponse(status_code=500, content=body.model_dump(mode="json"))


@app.get("/", tags=["health"])
async def root():
    """Root endpoint with basic API information."""
    app_logger.info("Root endpoint accessed")
    return {
        "message": f"Welcome to {settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "status": "operational",
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/status", tags=["health"])
async def status():
    """Status endpoint with build information for CI/CD monitoring."""
    app_logger.info("Status endpoint accessed")

    # Get build information from environment variables (CI-injected)
    build_number = os.getenv("BUILD_NUMBER", "local-dev")
    git_sha = os.getenv("GIT_SHA", os.getenv("GITHUB_SHA", get_git_sha()))
    environment = os.getenv("ENVIRONMENT", os.getenv("ENV", "development"))

    return {
        "status": "ok",
        "build": build_number,
        "sha": git_sha,
        "env": environment
    }


# Include API routers
app.include_router(content_router)


if __name__ == "__main__":
    import uvicorn

    app_logger.info(f"Starting {settings.APP_NAME} API server")

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_config=None  # Use our custom logger
    )
