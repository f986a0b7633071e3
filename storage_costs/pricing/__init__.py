"""
Pricing Package
===============

Static pricing catalog for Azure (Data Lake / Blob, LRS / GRS) and AWS S3.
"""

from .types import (
    StorageTier,
    StorageType,
    ReplicationType,
    Provider,
    RetrievalType,
)
from .models import (
    StoragePricingSlab,
    TierPricing,
    S3TierPricing,
    RetrievalPrices,
    ReservedCapacity,
    TierPricingSet,
    StorageConfig,
    S3PricingConfig,
)
from .catalog import (
    PricingCatalog,
    PricingConfigurationError,
    DEFAULT_CATALOG,
    get_pricing_config,
    get_aws_pricing_config,
)

__all__ = [
    "StorageTier",
    "StorageType",
    "ReplicationType",
    "Provider",
    "RetrievalType",
    "StoragePricingSlab",
    "TierPricing",
    "S3TierPricing",
    "RetrievalPrices",
    "ReservedCapacity",
    "TierPricingSet",
    "StorageConfig",
    "S3PricingConfig",
    "PricingCatalog",
    "PricingConfigurationError",
    "DEFAULT_CATALOG",
    "get_pricing_config",
    "get_aws_pricing_config",
]
