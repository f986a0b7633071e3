"""
Component Types
===============

Enums for the component-level cost calculators.

This module defines:
- FormulaType: The formula types from core_formulas.py
- AzureComponent, AWSComponent: Provider-specific cost components
"""

from enum import Enum, auto


class FormulaType(Enum):
    """
    Formula types.

    These correspond to the mathematical formulas in core_formulas.py.
    """
    CS = auto()         # Slab Storage: Σ GB_in_slab × c_slab
    CF = auto()         # Flat Storage: c_s × V
    CV = auto()         # Volume-Based: c_gb × V
    CO = auto()         # Operation-Based: c_unit × N_ops / unit_size
    CED = auto()        # Early Deletion: V × c_penalty × (D_min - D_stored) / D_min


# =============================================================================
# PROVIDER-SPECIFIC COMPONENT ENUMS
# =============================================================================
#
# Components are separated per provider because they read different
# pricing records, even when using the same formula.
#
# Example: Azure transactions and S3 requests both use CO, but:
#   - Azure: TierPricing.write_operations (per 10,000)
#   - AWS:   S3TierPricing.put_copy_post_list_requests (per 1,000)
# =============================================================================


class AzureComponent(Enum):
    """Azure Data Lake / Blob Storage cost components."""
    STORAGE = auto()                # TierPricing.storage (slabs)
    INDEX = auto()                  # TierPricing.index (Data Lake hot/cold)
    TRANSACTIONS = auto()           # TierPricing.*_operations
    RETRIEVAL = auto()              # TierPricing.data_retrieval / archive_high_priority_retrieval
    QUERY_ACCELERATION = auto()     # TierPricing.query_acceleration_* (hot/cold)
    EARLY_DELETION = auto()         # TierPricing.early_deletion_penalty (cold/archive)


class AWSComponent(Enum):
    """AWS S3 cost components."""
    STORAGE = auto()                # S3TierPricing.storage (slabs)
    REQUESTS = auto()               # S3TierPricing.put_copy_post_list / get_select
    RETRIEVAL = auto()              # S3TierPricing.data_retrieval / data_retrieval_requests
    EARLY_DELETION = auto()         # S3TierPricing.early_deletion_penalty
