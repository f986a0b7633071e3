"""
AWS S3 Request Cost Calculator
==============================

PUT/COPY/POST/LIST and GET/SELECT request charges, CO formula,
billed per 1,000 requests.
"""

from storage_costs.pricing.models import S3TierPricing
import storage_costs.constants as CONSTANTS
from ..types import AWSComponent, FormulaType
from ...formulas import operation_based_cost
from ...models import AWSTierTransactionInputs


class AWSS3RequestCalculator:
    """
    S3 request cost for one tier.

    Pricing keys:
        - S3TierPricing.put_copy_post_list_requests
        - S3TierPricing.get_select_requests
    """

    component_type = AWSComponent.REQUESTS
    formula_type = FormulaType.CO

    def calculate_cost(
        self,
        usage: AWSTierTransactionInputs,
        pricing: S3TierPricing
    ) -> float:
        per_1k = CONSTANTS.AWS_REQUESTS_PER_UNIT
        write_cost = operation_based_cost(
            pricing.put_copy_post_list_requests, usage.put_copy_post_list_requests, per_1k
        )
        read_cost = operation_based_cost(
            pricing.get_select_requests, usage.get_select_requests, per_1k
        )
        return write_cost + read_cost
