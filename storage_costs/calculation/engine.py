"""
Cost Calculation Engine
=======================

Orchestration module of the storage cost engine.

This module provides the public interface:
- calculate_storage_only_costs / calculate_aws_storage_only_costs
- calculate_all_storage_options
- calculate_incremental_costs / calculate_aws_incremental_costs
- calculate_database_costs / calculate_aggregate_costs

Internally it uses the tier calculators, which in turn use the component
calculators and core formulas. Every function is a pure transform of its
inputs and the immutable pricing catalog; nothing is cached.

Scaling convention: storage-only breakdowns are per database, while
incremental breakdowns are returned already multiplied by the number of
databases.
"""

from typing import Dict, List, Sequence, Union

from storage_costs.logger import logger
from storage_costs.pricing.catalog import DEFAULT_CATALOG, PricingCatalog
from storage_costs.pricing.types import Provider, ReplicationType, StorageTier, StorageType
import storage_costs.constants as CONSTANTS

from .models import (
    AggregateCosts,
    AWSTransactionInputs,
    DatabaseConfig,
    DatabaseCostBreakdown,
    IncrementalCostBreakdown,
    StorageComparisonResult,
    StorageOnlyBreakdown,
    TierAllocation,
    TierCostBreakdown,
    TierTotals,
    TransactionInputs,
)
from .tiers import AWSTierCalculators, AzureTierCalculators


# =============================================================================
# Calculator Instances
# =============================================================================

_azure_calc = AzureTierCalculators()
_aws_calc = AWSTierCalculators()


StorageTypeArg = Union[StorageType, str]
ReplicationArg = Union[ReplicationType, str]


# =============================================================================
# Storage-Only Costs
# =============================================================================

def calculate_storage_only_costs(
    total_size_gb: float,
    tier_allocation: TierAllocation,
    storage_type: StorageTypeArg,
    replication: ReplicationArg,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> StorageOnlyBreakdown:
    """
    Calculate Azure storage-only costs for a single database.

    The tier allocation is authoritative; ``total_size_gb`` is accepted for
    interface parity only. Data Lake index costs of hot and cold are summed
    into ``index`` and included in ``total``.

    Raises:
        PricingConfigurationError: For an unsupported storage type / replication pair.
    """
    config = catalog.azure(storage_type, replication)
    breakdown = StorageOnlyBreakdown()
    total_index = 0.0

    for tier in StorageTier:
        result = _azure_calc.calculate_storage_cost(
            tier=tier,
            size_gb=tier_allocation[tier],
            storage_type=config.storage_type,
            pricing=config.tiers[tier],
        )
        setattr(breakdown, tier.value, result.get("storage"))
        total_index += result.get("index")

    breakdown.total = breakdown.hot + breakdown.cold + breakdown.archive
    if total_index > 0:
        breakdown.index = total_index
        breakdown.total += total_index

    logger.debug(
        f"Storage-only cost {config.key}: hot={breakdown.hot:.4f} cold={breakdown.cold:.4f} "
        f"archive={breakdown.archive:.4f} index={total_index:.4f} total={breakdown.total:.4f}"
    )
    return breakdown


def calculate_aws_storage_only_costs(
    total_size_gb: float,
    tier_allocation: TierAllocation,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> StorageOnlyBreakdown:
    """Calculate AWS S3 storage-only costs for a single database."""
    config = catalog.aws()
    breakdown = StorageOnlyBreakdown()

    for tier in StorageTier:
        result = _aws_calc.calculate_storage_cost(
            tier=tier,
            size_gb=tier_allocation[tier],
            pricing=config.tiers[tier],
        )
        setattr(breakdown, tier.value, result.total_cost)

    breakdown.total = breakdown.hot + breakdown.cold + breakdown.archive

    logger.debug(f"Storage-only cost aws-s3: total={breakdown.total:.4f}")
    return breakdown


def _option_label(storage_type: StorageType, replication: ReplicationType) -> str:
    return f"{CONSTANTS.STORAGE_TYPE_LABELS[storage_type.value]} ({replication.value})"


def calculate_all_storage_options(
    total_size_gb: float,
    tier_allocation: TierAllocation,
    number_of_databases: float,
    include_aws: bool = True,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> List[StorageComparisonResult]:
    """
    Calculate storage-only costs for every option of the comparison view.

    Order: data-lake/LRS, data-lake/GRS, blob/LRS, blob/GRS, then AWS S3
    (when ``include_aws``). Consumers may index the list positionally.
    """
    results = []

    for storage_type, replication in catalog.options():
        breakdown = calculate_storage_only_costs(
            total_size_gb, tier_allocation, storage_type, replication, catalog=catalog
        )
        results.append(StorageComparisonResult(
            provider=Provider.AZURE,
            storage_type=storage_type,
            replication=replication,
            breakdown=breakdown,
            total_for_all_databases=breakdown.total * number_of_databases,
            label=_option_label(storage_type, replication),
        ))

    if include_aws:
        aws_breakdown = calculate_aws_storage_only_costs(total_size_gb, tier_allocation, catalog=catalog)
        results.append(StorageComparisonResult(
            provider=Provider.AWS,
            breakdown=aws_breakdown,
            total_for_all_databases=aws_breakdown.total * number_of_databases,
            label=CONSTANTS.AWS_LABEL,
        ))

    logger.debug(f"Compared {len(results)} storage options for {number_of_databases} database(s)")
    return results


# =============================================================================
# Incremental Costs
# =============================================================================

def calculate_incremental_costs(
    tier_allocation: TierAllocation,
    transactions: TransactionInputs,
    storage_type: StorageTypeArg,
    replication: ReplicationArg,
    number_of_databases: float,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> IncrementalCostBreakdown:
    """
    Calculate Azure incremental costs (transactions, retrieval, query
    acceleration, early deletion) for the whole fleet.

    Every returned field is already multiplied by ``number_of_databases``.
    """
    config = catalog.azure(storage_type, replication)
    per_database = IncrementalCostBreakdown()

    for tier in StorageTier:
        result = _azure_calc.calculate_incremental_cost(
            tier=tier,
            size_gb=tier_allocation[tier],
            usage=transactions[tier],
            pricing=config.tiers[tier],
        )
        per_database.transactions += result.get("transactions")
        per_database.retrieval += result.get("retrieval")
        per_database.query_acceleration += result.get("query_acceleration")
        per_database.early_deletion += result.get("early_deletion")

    per_database.total = (
        per_database.transactions
        + per_database.retrieval
        + per_database.query_acceleration
        + per_database.early_deletion
    )

    breakdown = per_database.scaled(number_of_databases)
    logger.debug(
        f"Incremental cost {config.key} x{number_of_databases}: total={breakdown.total:.4f}"
    )
    return breakdown


def calculate_aws_incremental_costs(
    tier_allocation: TierAllocation,
    aws_transactions: AWSTransactionInputs,
    number_of_databases: float,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> IncrementalCostBreakdown:
    """
    Calculate AWS S3 incremental costs (requests, retrieval, early deletion)
    for the whole fleet.

    ``requests`` mirrors ``transactions``; S3 has no query acceleration.
    Every returned field is already multiplied by ``number_of_databases``.
    """
    config = catalog.aws()
    total_requests = 0.0
    total_retrieval = 0.0
    total_early_deletion = 0.0

    for tier in StorageTier:
        result = _aws_calc.calculate_incremental_cost(
            tier=tier,
            size_gb=tier_allocation[tier],
            usage=aws_transactions[tier],
            pricing=config.tiers[tier],
        )
        total_requests += result.get("requests")
        total_retrieval += result.get("retrieval")
        total_early_deletion += result.get("early_deletion")

    per_database = IncrementalCostBreakdown(
        transactions=total_requests,
        retrieval=total_retrieval,
        query_acceleration=0.0,
        early_deletion=total_early_deletion,
        total=total_requests + total_retrieval + total_early_deletion,
        requests=total_requests,
    )

    breakdown = per_database.scaled(number_of_databases)
    logger.debug(f"Incremental cost aws-s3 x{number_of_databases}: total={breakdown.total:.4f}")
    return breakdown


def calculate_tier_transaction_costs(
    transactions: TransactionInputs,
    storage_type: StorageTypeArg,
    replication: ReplicationArg,
    number_of_databases: float,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> Dict[StorageTier, float]:
    """Azure transaction cost per tier, scaled to the fleet."""
    config = catalog.azure(storage_type, replication)
    return {
        tier: _azure_calc.transactions.calculate_cost(tier, transactions[tier], config.tiers[tier])
        * number_of_databases
        for tier in StorageTier
    }


def calculate_aws_tier_request_costs(
    aws_transactions: AWSTransactionInputs,
    number_of_databases: float,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> Dict[StorageTier, float]:
    """S3 request cost per tier, scaled to the fleet."""
    config = catalog.aws()
    return {
        tier: _aws_calc.requests.calculate_cost(aws_transactions[tier], config.tiers[tier])
        * number_of_databases
        for tier in StorageTier
    }


# =============================================================================
# Per-Database and Aggregate Costs
# =============================================================================

def calculate_database_costs(
    database: DatabaseConfig,
    storage_type: StorageTypeArg,
    replication: ReplicationArg,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> DatabaseCostBreakdown:
    """
    Calculate the full Azure cost breakdown of one database.

    The database's tier allocation is in TB and converted to GB.
    """
    config = catalog.azure(storage_type, replication)
    breakdown = DatabaseCostBreakdown(database_id=database.id)

    for tier in StorageTier:
        size_gb = database.tier_allocation[tier] * CONSTANTS.GB_PER_TB
        result = _azure_calc.calculate_tier_cost(
            tier=tier,
            size_gb=size_gb,
            usage=database.transactions[tier],
            storage_type=config.storage_type,
            pricing=config.tiers[tier],
        )
        setattr(breakdown, tier.value, TierCostBreakdown(
            storage=result.get("storage"),
            transactions=result.get("transactions"),
            retrieval=result.get("retrieval"),
            query_acceleration=result.components.get("query_acceleration"),
            index=result.components.get("index"),
            total=result.total_cost,
        ))

    breakdown.total = breakdown.hot.total + breakdown.cold.total + breakdown.archive.total
    return breakdown


def calculate_aggregate_costs(
    databases: Sequence[DatabaseConfig],
    storage_type: StorageTypeArg,
    replication: ReplicationArg,
    *,
    catalog: PricingCatalog = DEFAULT_CATALOG
) -> AggregateCosts:
    """Calculate costs across many heterogeneous databases."""
    # an empty fleet must still reject an unknown configuration
    catalog.azure(storage_type, replication)

    by_database = [
        calculate_database_costs(db, storage_type, replication, catalog=catalog)
        for db in databases
    ]

    by_tier = TierTotals(
        hot=sum(db.hot.total for db in by_database),
        cold=sum(db.cold.total for db in by_database),
        archive=sum(db.archive.total for db in by_database),
    )

    aggregate = AggregateCosts(
        total_monthly=sum(db.total for db in by_database),
        by_tier=by_tier,
        by_database=by_database,
    )
    logger.debug(f"Aggregate cost of {len(by_database)} database(s): {aggregate.total_monthly:.4f}")
    return aggregate
