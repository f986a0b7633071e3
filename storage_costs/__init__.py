"""
Storage Costs
=============

Monthly cost estimation and comparison for cloud object storage:
Azure Data Lake Storage / Blob Storage (LRS, GRS) and AWS S3, across the
hot, cold and archive tiers.

    >>> from storage_costs import TierAllocation, calculate_all_storage_options
    >>> options = calculate_all_storage_options(
    ...     1536, TierAllocation(hot=512, cold=512, archive=512), number_of_databases=2
    ... )
    >>> [option.label for option in options][-1]
    'AWS S3'
"""

from .pricing import (
    StorageTier,
    StorageType,
    ReplicationType,
    Provider,
    RetrievalType,
    StoragePricingSlab,
    TierPricing,
    S3TierPricing,
    RetrievalPrices,
    ReservedCapacity,
    TierPricingSet,
    StorageConfig,
    S3PricingConfig,
    PricingCatalog,
    PricingConfigurationError,
    DEFAULT_CATALOG,
    get_pricing_config,
    get_aws_pricing_config,
)
from .calculation import (
    TierAllocation,
    TierTransactionInputs,
    TransactionInputs,
    AWSTierTransactionInputs,
    AWSTransactionInputs,
    DatabaseConfig,
    StorageOnlyBreakdown,
    IncrementalCostBreakdown,
    StorageComparisonResult,
    TierCostBreakdown,
    DatabaseCostBreakdown,
    TierTotals,
    AggregateCosts,
    calculate_storage_only_costs,
    calculate_aws_storage_only_costs,
    calculate_all_storage_options,
    calculate_incremental_costs,
    calculate_aws_incremental_costs,
    calculate_tier_transaction_costs,
    calculate_aws_tier_request_costs,
    calculate_database_costs,
    calculate_aggregate_costs,
)
from .calculation.formulas import calculate_storage_cost

__version__ = "1.0.0"

__all__ = [
    # Enums
    "StorageTier",
    "StorageType",
    "ReplicationType",
    "Provider",
    "RetrievalType",
    # Pricing
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
    # Inputs
    "TierAllocation",
    "TierTransactionInputs",
    "TransactionInputs",
    "AWSTierTransactionInputs",
    "AWSTransactionInputs",
    "DatabaseConfig",
    # Results
    "StorageOnlyBreakdown",
    "IncrementalCostBreakdown",
    "StorageComparisonResult",
    "TierCostBreakdown",
    "DatabaseCostBreakdown",
    "TierTotals",
    "AggregateCosts",
    # Operations
    "calculate_storage_cost",
    "calculate_storage_only_costs",
    "calculate_aws_storage_only_costs",
    "calculate_all_storage_options",
    "calculate_incremental_costs",
    "calculate_aws_incremental_costs",
    "calculate_tier_transaction_costs",
    "calculate_aws_tier_request_costs",
    "calculate_database_costs",
    "calculate_aggregate_costs",
]
