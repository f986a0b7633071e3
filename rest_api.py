"""
Storage Costs REST API

FastAPI application serving the cloud storage cost engine.
API endpoints are organized into separate router modules in the api/ directory.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storage_costs.config import settings
from storage_costs.logger import logger

# Import API routers
from api import calculation, health, pricing


# =============================================================================
# Lifespan Context Manager
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    logger.info("🚀 Starting Storage Costs API...")
    if settings.debug_mode:
        logger.debug("Debug mode is active.")
    logger.info("✅ API ready.")

    yield


# =============================================================================
# FastAPI App Initialization
# =============================================================================

app = FastAPI(
    title="Storage Costs REST API",
    version="1.0",
    description=(
        "API backend for estimating and comparing the monthly cost of cloud object storage. "
        "Covers **Azure Data Lake Storage** and **Azure Blob Storage** (LRS / GRS) as well as "
        "**AWS S3**, across hot, cold and archive tiers with slab-based capacity pricing, "
        "per-operation charges, retrieval fees and early-deletion penalties."
    ),
    openapi_tags=[
        {"name": "Calculation", "description": "Endpoints related to storage cost calculation."},
        {"name": "Pricing", "description": "Endpoints exposing the static pricing catalog."},
        {"name": "Health", "description": "Service health."},
    ],
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health.router)
app.include_router(pricing.router)
app.include_router(calculation.router)
