"""
Azure Tier Calculators
======================

Aggregates Azure component costs into tier-level costs (hot, cold, archive).
"""

from typing import Dict
from dataclasses import dataclass, field

from storage_costs.pricing.models import TierPricing
from storage_costs.pricing.types import Provider, StorageTier, StorageType
from ..components.azure import (
    AzureStorageCalculator,
    AzureIndexCalculator,
    AzureEarlyDeletionCalculator,
    AzureTransactionCalculator,
    AzureRetrievalCalculator,
    AzureQueryAccelerationCalculator,
)
from ..models import TierTransactionInputs


@dataclass
class TierResult:
    """Result of a tier cost calculation for one database."""
    provider: Provider
    tier: StorageTier
    total_cost: float
    size_gb: float = 0.0
    components: Dict[str, float] = field(default_factory=dict)

    def get(self, component: str) -> float:
        return self.components.get(component, 0.0)


class AzureTierCalculators:
    """
    Azure tier cost calculators.

    Component keys used in ``TierResult.components``:
    storage, index, transactions, retrieval, query_acceleration, early_deletion.
    A key is only present when the component applies to the tier.
    """

    def __init__(self):
        self.storage = AzureStorageCalculator()
        self.index = AzureIndexCalculator()
        self.early_deletion = AzureEarlyDeletionCalculator()
        self.transactions = AzureTransactionCalculator()
        self.retrieval = AzureRetrievalCalculator()
        self.query_acceleration = AzureQueryAccelerationCalculator()

    def calculate_storage_cost(
        self,
        tier: StorageTier,
        size_gb: float,
        storage_type: StorageType,
        pricing: TierPricing
    ) -> TierResult:
        """
        Capacity-only cost of a tier.

        Components:
            - Storage (slabs)
            - Index (Data Lake hot/cold only)
        """
        components = {"storage": self.storage.calculate_cost(size_gb, pricing)}

        if self.index.applies_to(storage_type, tier, pricing):
            components["index"] = self.index.calculate_cost(
                tier=tier, size_gb=size_gb, storage_type=storage_type, pricing=pricing
            )

        return TierResult(
            provider=Provider.AZURE,
            tier=tier,
            total_cost=sum(components.values()),
            size_gb=size_gb,
            components=components,
        )

    def calculate_incremental_cost(
        self,
        tier: StorageTier,
        size_gb: float,
        usage: TierTransactionInputs,
        pricing: TierPricing
    ) -> TierResult:
        """
        Usage-driven cost of a tier on top of capacity.

        Components:
            - Transactions
            - Retrieval
            - Query acceleration (hot/cold only)
            - Early deletion (cold/archive only)
        """
        components = {
            "transactions": self.transactions.calculate_cost(tier, usage, pricing),
            "retrieval": self.retrieval.calculate_cost(tier, usage, pricing),
        }

        if tier is not StorageTier.ARCHIVE:
            components["query_acceleration"] = self.query_acceleration.calculate_cost(tier, usage, pricing)

        if tier is not StorageTier.HOT:
            components["early_deletion"] = self.early_deletion.calculate_cost(
                tier=tier,
                size_gb=size_gb,
                storage_duration_days=usage.storage_duration_days,
                pricing=pricing,
            )

        return TierResult(
            provider=Provider.AZURE,
            tier=tier,
            total_cost=sum(components.values()),
            size_gb=size_gb,
            components=components,
        )

    def calculate_tier_cost(
        self,
        tier: StorageTier,
        size_gb: float,
        usage: TierTransactionInputs,
        storage_type: StorageType,
        pricing: TierPricing
    ) -> TierResult:
        """
        Complete monthly cost of a tier for the per-database breakdown.

        Components:
            - Storage
            - Transactions
            - Retrieval
            - Query acceleration (hot/cold only)
            - Index (Data Lake hot/cold only)
        """
        components = {
            "storage": self.storage.calculate_cost(size_gb, pricing),
            "transactions": self.transactions.calculate_cost(tier, usage, pricing),
            "retrieval": self.retrieval.calculate_cost(tier, usage, pricing),
        }

        if tier is not StorageTier.ARCHIVE:
            components["query_acceleration"] = self.query_acceleration.calculate_cost(tier, usage, pricing)

        if self.index.applies_to(storage_type, tier, pricing):
            components["index"] = self.index.calculate_cost(
                tier=tier, size_gb=size_gb, storage_type=storage_type, pricing=pricing
            )

        return TierResult(
            provider=Provider.AZURE,
            tier=tier,
            total_cost=sum(components.values()),
            size_gb=size_gb,
            components=components,
        )
