"""
Pricing API endpoints exposing the static pricing catalog.
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from storage_costs.logger import logger
from storage_costs.pricing import DEFAULT_CATALOG, PricingConfigurationError

router = APIRouter(tags=["Pricing"])


# --------------------------------------------------
# Azure
# --------------------------------------------------

@router.get(
    "/api/pricing/azure/{storage_type}/{replication}",
    summary="Get Azure Storage Pricing",
    responses={
        404: {"description": "No pricing configured for this storage type / replication pair."},
    },
)
def get_azure_pricing(storage_type: str, replication: str):
    """
    Returns the Azure pricing record for one storage option.

    - **storage_type**: `data-lake` or `blob`
    - **replication**: `LRS` or `GRS`

    **Returns**: Slab prices per tier, operation prices, retrieval prices,
    early-deletion parameters and reserved capacity.
    """
    try:
        config = DEFAULT_CATALOG.azure(storage_type, replication)
    except PricingConfigurationError as e:
        logger.warning(f"Pricing lookup failed: {e}")
        return JSONResponse(status_code=404, content={"error": str(e)})
    return config.to_dict()


# --------------------------------------------------
# AWS
# --------------------------------------------------

@router.get("/api/pricing/aws", summary="Get AWS S3 Pricing")
def get_aws_pricing():
    """
    Returns the AWS S3 pricing record
    (Standard, Standard-IA, Glacier Flexible Retrieval).
    """
    return DEFAULT_CATALOG.aws().to_dict()
