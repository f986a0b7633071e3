"""
AWS S3 Retrieval Cost Calculator
================================

Data retrieval charges of S3 Standard-IA and Glacier Flexible Retrieval.

    - Standard-IA: per GB at the standard price
    - Glacier:     per GB plus per 1,000 retrieval requests, both at the
                   price of the requested speed class (standard / expedited)
    - Standard:    no retrieval fees
"""

from storage_costs.pricing.models import S3TierPricing
from storage_costs.pricing.types import StorageTier, RetrievalType
import storage_costs.constants as CONSTANTS
from ..types import AWSComponent, FormulaType
from ...formulas import is_billable, operation_based_cost, volume_based_cost
from ...models import AWSTierTransactionInputs


class AWSS3RetrievalCalculator:
    """
    S3 retrieval cost for one tier.

    Nothing is charged unless data is actually retrieved
    (``data_retrieval_gb > 0``); retrieval requests alone are free.

    Pricing keys:
        - S3TierPricing.data_retrieval.{standard, expedited}
        - S3TierPricing.data_retrieval_requests.{standard, expedited}
    """

    component_type = AWSComponent.RETRIEVAL
    formula_type = FormulaType.CV

    def calculate_cost(
        self,
        tier: StorageTier,
        usage: AWSTierTransactionInputs,
        pricing: S3TierPricing
    ) -> float:
        if not is_billable(usage.data_retrieval_gb) or pricing.data_retrieval is None:
            return 0.0

        if tier is StorageTier.COLD:
            return volume_based_cost(pricing.data_retrieval.standard, usage.data_retrieval_gb)

        if tier is StorageTier.ARCHIVE:
            retrieval_type = RetrievalType(usage.retrieval_type or RetrievalType.STANDARD)
            cost = volume_based_cost(
                pricing.data_retrieval.for_type(retrieval_type), usage.data_retrieval_gb
            )
            if pricing.data_retrieval_requests is not None:
                cost += operation_based_cost(
                    pricing.data_retrieval_requests.for_type(retrieval_type),
                    usage.data_retrieval_requests,
                    CONSTANTS.AWS_RETRIEVAL_REQUESTS_PER_UNIT,
                )
            return cost

        return 0.0
