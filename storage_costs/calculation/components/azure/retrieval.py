"""
Azure Data Access Cost Calculators
==================================

Per-GB data access charges using the CV (Volume-Based) formula:

    - Data retrieval (cold / archive)
    - Query acceleration (hot / cold)
"""

from storage_costs.pricing.models import TierPricing
from storage_costs.pricing.types import StorageTier
from ..types import AzureComponent, FormulaType
from ...formulas import is_billable, volume_based_cost
from ...models import TierTransactionInputs


class AzureRetrievalCalculator:
    """
    Azure data retrieval cost.

    Hot data is read for free. Cold retrieval is billed per GB. Archive
    distinguishes high-priority rehydration from standard rehydration;
    when a priced high-priority volume is present it takes precedence
    over the standard volume.

    Pricing keys:
        - TierPricing.data_retrieval
        - TierPricing.archive_high_priority_retrieval
    """

    component_type = AzureComponent.RETRIEVAL
    formula_type = FormulaType.CV

    def calculate_cost(
        self,
        tier: StorageTier,
        usage: TierTransactionInputs,
        pricing: TierPricing
    ) -> float:
        if tier is StorageTier.HOT:
            return 0.0

        if tier is StorageTier.ARCHIVE and is_billable(usage.archive_high_priority_retrieval_gb) \
                and is_billable(pricing.archive_high_priority_retrieval):
            return volume_based_cost(
                pricing.archive_high_priority_retrieval,
                usage.archive_high_priority_retrieval_gb,
            )

        return volume_based_cost(pricing.data_retrieval, usage.data_retrieval_gb)


class AzureQueryAccelerationCalculator:
    """
    Azure query acceleration cost: data scanned and data returned are
    billed independently. Archive data cannot be queried in place.

    Pricing keys:
        - TierPricing.query_acceleration_scanned
        - TierPricing.query_acceleration_returned
    """

    component_type = AzureComponent.QUERY_ACCELERATION
    formula_type = FormulaType.CV

    def calculate_cost(
        self,
        tier: StorageTier,
        usage: TierTransactionInputs,
        pricing: TierPricing
    ) -> float:
        if tier is StorageTier.ARCHIVE:
            return 0.0

        scanned = volume_based_cost(pricing.query_acceleration_scanned, usage.query_acceleration_scanned_gb)
        returned = volume_based_cost(pricing.query_acceleration_returned, usage.query_acceleration_returned_gb)
        return scanned + returned
