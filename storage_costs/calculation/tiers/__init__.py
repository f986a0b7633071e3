"""
Tiers Package
=============

Tier aggregators that compose component calculators to calculate
costs for each storage tier (hot, cold, archive).
"""

from .azure_tiers import AzureTierCalculators, TierResult
from .aws_tiers import AWSTierCalculators

__all__ = [
    "AzureTierCalculators",
    "AWSTierCalculators",
    "TierResult",
]
