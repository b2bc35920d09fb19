"""
Social Feed Backend API - Main Application
"""
import logging
import sys
import traceback
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import uvicorn

from .core.config import settings
from .core.exceptions import (
    AlreadyLikedError,
    ConsistencyFault,
    DuplicateRequestError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
    SelfRequestError,
    SocialError,
    UnknownUserError,
    UserBannedError,
    ValidationError,
)
from .core.rate_limit import limiter
from .database import init_store
from .api.v1 import api_router
from .utils.time_utils import to_utc_isoformat, utc_now

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)

logger = logging.getLogger(__name__)

# HTTP status for each service error kind
ERROR_STATUS_CODES = {
    NotFoundError: 404,
    UnknownUserError: 404,
    DuplicateRequestError: 400,
    SelfRequestError: 400,
    AlreadyLikedError: 400,
    ValidationError: 400,
    DuplicateUsernameError: 409,
    InvalidCredentialsError: 401,
    UserBannedError: 403,
    ConsistencyFault: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Social Feed Backend API...")
    app.state.store = init_store()
    logger.info("Entity store initialized")
    logger.info(f"Debug mode: {settings.DEBUG}")

    yield  # Application runs here

    # Shutdown
    logger.info(f"Shutting down, store held {app.state.store.stats()}")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Social feed backend: posts, likes, comments, friends and moderation",
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
    redirect_slashes=False
)

# Rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SocialError)
async def social_error_handler(request: Request, exc: SocialError):
    """Translate service errors into JSON responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 400)

    if isinstance(exc, ConsistencyFault):
        logger.error(f"Consistency fault on {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "detail": exc.message,
            "code": exc.code
        }
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unexpected errors."""
    # Generate a unique error ID for tracking
    error_id = str(uuid.uuid4())[:8]

    # Always log the full error on the server
    logger.error(
        f"[ERROR_ID: {error_id}] Unhandled exception on {request.method} {request.url.path}",
        exc_info=True
    )

    if settings.DEBUG:
        # Development: return detailed error for debugging
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "detail": str(exc),
                "error_id": error_id,
                "type": type(exc).__name__,
                "path": str(request.url.path),
                "traceback": traceback.format_exc()
            }
        )
    else:
        # Production: return generic error, hide internal details
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "detail": "An internal server error occurred. Please try again later.",
                "error_id": error_id
            }
        )


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": settings.PROJECT_NAME,
        "version": "1.0.0",
        "status": "running",
        "environment": settings.ENVIRONMENT,
        "docs_url": "/docs" if settings.DEBUG else "disabled",
        "features": [
            "JWT authentication",
            "Posts, likes and comments",
            "Friend requests",
            "Personalised feed",
            "Moderation"
        ]
    }


# Health check endpoint
@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "timestamp": to_utc_isoformat(utc_now()),
        "service": "social-feed-api",
        "version": "1.0.0",
        "store": request.app.state.store.stats()
    }


app.include_router(api_router, prefix=settings.API_V1_PREFIX)


if __name__ == "__main__":
    # Run the application
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
