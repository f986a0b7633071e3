"""
AWS Tier Calculators
====================

Aggregates S3 component costs into tier-level costs
(hot = Standard, cold = Standard-IA, archive = Glacier Flexible Retrieval).
"""

from storage_costs.pricing.models import S3TierPricing
from storage_costs.pricing.types import Provider, StorageTier
from ..components.aws import (
    AWSS3StorageCalculator,
    AWSS3EarlyDeletionCalculator,
    AWSS3RequestCalculator,
    AWSS3RetrievalCalculator,
)
from ..models import AWSTierTransactionInputs
from .azure_tiers import TierResult


class AWSTierCalculators:
    """
    AWS S3 tier cost calculators.

    Component keys used in ``TierResult.components``:
    storage, requests, retrieval, early_deletion.
    """

    def __init__(self):
        self.storage = AWSS3StorageCalculator()
        self.early_deletion = AWSS3EarlyDeletionCalculator()
        self.requests = AWSS3RequestCalculator()
        self.retrieval = AWSS3RetrievalCalculator()

    def calculate_storage_cost(
        self,
        tier: StorageTier,
        size_gb: float,
        pricing: S3TierPricing
    ) -> TierResult:
        """Capacity-only cost of a tier (no index concept on S3)."""
        storage_cost = self.storage.calculate_cost(size_gb, pricing)
        return TierResult(
            provider=Provider.AWS,
            tier=tier,
            total_cost=storage_cost,
            size_gb=size_gb,
            components={"storage": storage_cost},
        )

    def calculate_incremental_cost(
        self,
        tier: StorageTier,
        size_gb: float,
        usage: AWSTierTransactionInputs,
        pricing: S3TierPricing
    ) -> TierResult:
        """
        Usage-driven cost of a tier on top of capacity.

        Components:
            - Requests (PUT/COPY/POST/LIST, GET/SELECT)
            - Retrieval (Standard-IA, Glacier)
            - Early deletion (tiers with a minimum duration)
        """
        components = {
            "requests": self.requests.calculate_cost(usage, pricing),
            "retrieval": self.retrieval.calculate_cost(tier, usage, pricing),
            "early_deletion": self.early_deletion.calculate_cost(
                size_gb=size_gb,
                storage_duration_days=usage.storage_duration_days,
                pricing=pricing,
            ),
        }

        return TierResult(
            provider=Provider.AWS,
            tier=tier,
            total_cost=sum(components.values()),
            size_gb=size_gb,
            components=components,
        )
