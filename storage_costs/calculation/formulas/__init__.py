"""
Core Formulas Package
=====================

Provider-independent cost formulas.

This package exports all formula functions:
- calculate_storage_cost (CS, slab storage)
- storage_based_cost (CF, flat per GB-month)
- volume_based_cost (CV)
- operation_based_cost (CO)
- early_deletion_penalty (CED)
"""

from .core_formulas import (
    is_billable,
    calculate_storage_cost,
    storage_based_cost,
    volume_based_cost,
    operation_based_cost,
    early_deletion_penalty,
)

__all__ = [
    "is_billable",
    "calculate_storage_cost",
    "storage_based_cost",
    "volume_based_cost",
    "operation_based_cost",
    "early_deletion_penalty",
]
