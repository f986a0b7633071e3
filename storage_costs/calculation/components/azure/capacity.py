"""
Azure Capacity Cost Calculators
===============================

Size-driven Azure costs for a single tier:

    - Storage (CS formula, volume slabs)
    - Data Lake index (flat per GB-month, hot/cold only)
    - Early deletion penalty (CED formula, cold/archive only)
"""

from typing import Optional

from storage_costs.pricing.models import TierPricing
from storage_costs.pricing.types import StorageTier, StorageType
from ..types import AzureComponent, FormulaType
from ...formulas import calculate_storage_cost, storage_based_cost, early_deletion_penalty


class AzureStorageCalculator:
    """
    Azure capacity storage cost.

    Pricing keys:
        - TierPricing.storage
    """

    component_type = AzureComponent.STORAGE
    formula_type = FormulaType.CS

    def calculate_cost(self, size_gb: float, pricing: TierPricing) -> float:
        """
        Args:
            size_gb: Capacity of the tier in GB
            pricing: Pricing record of the tier

        Returns:
            Monthly storage cost in USD
        """
        return calculate_storage_cost(size_gb, pricing.storage)


class AzureIndexCalculator:
    """
    Hierarchical namespace index cost of Azure Data Lake Storage.

    Only the Data Lake storage type is indexed, and only its hot and cold
    tiers carry an index price. Blob Storage and archive never pay it.

    Pricing keys:
        - TierPricing.index
    """

    component_type = AzureComponent.INDEX
    formula_type = FormulaType.CF

    @staticmethod
    def applies_to(storage_type: StorageType, tier: StorageTier, pricing: TierPricing) -> bool:
        """Whether an index cost line exists for this storage type and tier."""
        return (
            storage_type is StorageType.DATA_LAKE
            and tier is not StorageTier.ARCHIVE
            and bool(pricing.index)
        )

    def calculate_cost(
        self,
        tier: StorageTier,
        size_gb: float,
        storage_type: StorageType,
        pricing: TierPricing
    ) -> float:
        if not self.applies_to(storage_type, tier, pricing):
            return 0.0
        return storage_based_cost(
            price_per_gb_month=pricing.index,
            volume_gb=size_gb,
        )


class AzureEarlyDeletionCalculator:
    """
    Prorated penalty for moving data out of cold/archive before the
    tier's minimum storage duration (90 / 180 days) has elapsed.

    Pricing keys:
        - TierPricing.minimum_storage_duration_days
        - TierPricing.early_deletion_penalty
    """

    component_type = AzureComponent.EARLY_DELETION
    formula_type = FormulaType.CED

    def calculate_cost(
        self,
        tier: StorageTier,
        size_gb: float,
        storage_duration_days: Optional[float],
        pricing: TierPricing
    ) -> float:
        if tier is StorageTier.HOT:
            return 0.0
        return early_deletion_penalty(
            size_gb=size_gb,
            minimum_storage_duration_days=pricing.minimum_storage_duration_days,
            penalty_per_gb=pricing.early_deletion_penalty,
            storage_duration_days=storage_duration_days,
        )
