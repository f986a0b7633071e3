"""
AWS S3 Capacity Cost Calculators
================================

Size-driven S3 costs for a single tier:

    - Storage (CS formula, volume slabs)
    - Early deletion penalty (CED formula)

Tiers:
    - hot:     S3 Standard
    - cold:    S3 Standard-IA (30 day minimum)
    - archive: S3 Glacier Flexible Retrieval (90 day minimum)
"""

from typing import Optional

from storage_costs.pricing.models import S3TierPricing
from ..types import AWSComponent, FormulaType
from ...formulas import calculate_storage_cost, early_deletion_penalty


class AWSS3StorageCalculator:
    """
    S3 capacity storage cost.

    Pricing keys:
        - S3TierPricing.storage
    """

    component_type = AWSComponent.STORAGE
    formula_type = FormulaType.CS

    def calculate_cost(self, size_gb: float, pricing: S3TierPricing) -> float:
        return calculate_storage_cost(size_gb, pricing.storage)


class AWSS3EarlyDeletionCalculator:
    """
    S3 minimum storage duration charge, prorated over the days left.

    Applies to every tier whose pricing defines a minimum duration
    (S3 Standard has none).

    Pricing keys:
        - S3TierPricing.minimum_storage_duration_days
        - S3TierPricing.early_deletion_penalty
    """

    component_type = AWSComponent.EARLY_DELETION
    formula_type = FormulaType.CED

    def calculate_cost(
        self,
        size_gb: float,
        storage_duration_days: Optional[float],
        pricing: S3TierPricing
    ) -> float:
        return early_deletion_penalty(
            size_gb=size_gb,
            minimum_storage_duration_days=pricing.minimum_storage_duration_days,
            penalty_per_gb=pricing.early_deletion_penalty,
            storage_duration_days=storage_duration_days,
        )
