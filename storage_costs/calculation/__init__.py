"""
Calculation Package
===================

Component-level cost engine for cloud storage.

Structure:
- formulas/: Provider-independent cost formulas (slabs, operations, early deletion)
- components/: Per-provider component calculators (Azure, AWS S3)
- tiers/: Tier aggregators composing the components
- engine.py: Public orchestration functions
"""

from .models import (
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
)
from .engine import (
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

__all__ = [
    "TierAllocation",
    "TierTransactionInputs",
    "TransactionInputs",
    "AWSTierTransactionInputs",
    "AWSTransactionInputs",
    "DatabaseConfig",
    "StorageOnlyBreakdown",
    "IncrementalCostBreakdown",
    "StorageComparisonResult",
    "TierCostBreakdown",
    "DatabaseCostBreakdown",
    "TierTotals",
    "AggregateCosts",
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
