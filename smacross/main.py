"""
SMA Crossover Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from smacross.core.config import settings
from smacross.api.errors import pipeline_error_handler, request_validation_handler
from smacross.api.v1 import router as api_v1_router
from smacross.services.base import PipelineError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"History lookback: {settings.history_lookback_days} days")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    SMA Crossover Analysis API

    ## Pipeline
    - **Provider Adapters**: Alpha Vantage, Polygon, Yahoo Finance
    - **Normalizer**: Ascending, one close per trading day
    - **Indicator Engine**: Short and long simple moving averages (NumPy)
    - **Crossover Detector**: Bullish / bearish SMA crossings
    - **Window Selector**: Most recent N trading days for the chart
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware - allow the frontend dev server
cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
# Add any additional origins from settings
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(PipelineError, pipeline_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "SMA Crossover Backend API",
        "docs": "/docs",
        "health": "/health",
    }
