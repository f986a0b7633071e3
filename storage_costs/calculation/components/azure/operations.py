"""
Azure Transaction Cost Calculator
=================================

Per-operation charges of Azure Data Lake / Blob Storage using the
CO (Operation-Based) formula.

Billing granularity:
    - write / read / iterative read / other:  per 10,000 operations
    - iterative write:                         per 100 operations
    - archive high-priority read:              per 10,000 operations (archive only)
"""

from storage_costs.pricing.models import TierPricing
from storage_costs.pricing.types import StorageTier
import storage_costs.constants as CONSTANTS
from ..types import AzureComponent, FormulaType
from ...formulas import operation_based_cost
from ...models import TierTransactionInputs


class AzureTransactionCalculator:
    """
    Azure transaction cost for one tier.

    Pricing keys:
        - TierPricing.write_operations
        - TierPricing.read_operations
        - TierPricing.iterative_read_operations
        - TierPricing.iterative_write_operations
        - TierPricing.other_operations
        - TierPricing.archive_high_priority_read
    """

    component_type = AzureComponent.TRANSACTIONS
    formula_type = FormulaType.CO

    def calculate_cost(
        self,
        tier: StorageTier,
        usage: TierTransactionInputs,
        pricing: TierPricing
    ) -> float:
        """
        Args:
            tier: Tier the operations hit
            usage: Raw operation counts for the billing period
            pricing: Pricing record of the tier

        Returns:
            Monthly transaction cost in USD
        """
        per_10k = CONSTANTS.AZURE_OPERATIONS_PER_UNIT

        cost = (
            operation_based_cost(pricing.write_operations, usage.write_operations, per_10k)
            + operation_based_cost(pricing.read_operations, usage.read_operations, per_10k)
            + operation_based_cost(pricing.iterative_read_operations, usage.iterative_read_operations, per_10k)
            + operation_based_cost(
                pricing.iterative_write_operations,
                usage.iterative_write_operations,
                CONSTANTS.AZURE_ITERATIVE_WRITES_PER_UNIT,
            )
            + operation_based_cost(pricing.other_operations, usage.other_operations, per_10k)
        )

        if tier is StorageTier.ARCHIVE:
            cost += operation_based_cost(
                pricing.archive_high_priority_read,
                usage.archive_high_priority_read,
                CONSTANTS.AZURE_HIGH_PRIORITY_READS_PER_UNIT,
            )

        return cost
