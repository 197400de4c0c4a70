"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api import reset_email
from app.api.errors import AuthHTTPException
from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import setup_logging

setup_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Accounts, password reset and calorie recommendations for IGC Fitness.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthHTTPException)
async def auth_error_handler(request: Request, exc: AuthHTTPException):
    return JSONResponse(status_code=exc.status_code, content={ "detail": exc.detail, "code": exc.code },
                        headers=exc.headers)


# Include API routers
app.include_router(api_router, prefix="/api/v1")
app.include_router(reset_email.router, prefix="/api", tags=["Email"])

if settings.STORAGE_BACKEND == "local":
    app.mount(settings.MEDIA_URL, StaticFiles(directory=settings.MEDIA_ROOT, check_dir=False), name="media")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "IGC Fitness API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "igc-fitness-api",
        "version": settings.VERSION
    }
