"""
Provider-Independent Cost Formulas
===================================

Pure mathematical formulas shared by the Azure and AWS calculators.
Each formula takes generic pricing parameters and returns a cost value.

The formulas are:
- CS (Slab Storage): Σ GB_in_slab × c_slab
- CF (Flat Storage): c_s × V
- CV (Volume-Based): c_gb × V
- CO (Operation-Based): c_unit × N_ops / unit_size
- CED (Early Deletion): V × c_penalty × (D_min - D_stored) / D_min

Usage values that are missing, zero or negative never add cost, and
neither do prices that are missing or zero. There are no minimum
charges and no fixed fees.
"""

from typing import Optional, Sequence

from storage_costs.pricing.models import StoragePricingSlab


def is_billable(value: Optional[float]) -> bool:
    """True when a usage or price value should contribute to cost."""
    return bool(value) and value > 0


def calculate_storage_cost(
    size_gb: float,
    slabs: Sequence[StoragePricingSlab]
) -> float:
    """
    CS: Volume-tiered (slab) storage cost.

    Formula: Σ min(remaining, slab_max - slab_min) × price_per_gb

    Marginal billing: the GB that fall inside a band are billed at that
    band's rate. Exactly ``slab_max - slab_min`` GB fit into a bounded band,
    so a size equal to a boundary is billed entirely by the lower band.

    Args:
        size_gb: Stored volume in GB
        slabs: Contiguous slabs ordered by range_min, last one open-ended

    Returns:
        Monthly storage cost
    """
    if size_gb <= 0:
        return 0.0

    remaining_gb = size_gb
    total_cost = 0.0

    for slab in slabs:
        if remaining_gb <= 0:
            break

        capacity = slab.capacity_gb
        gb_in_slab = remaining_gb if capacity is None else min(remaining_gb, capacity)

        if gb_in_slab > 0:
            total_cost += gb_in_slab * slab.price_per_gb
            remaining_gb -= gb_in_slab

    return total_cost


def storage_based_cost(
    price_per_gb_month: float,
    volume_gb: float
) -> float:
    """
    CF: Flat per-GB-month cost.

    Formula: c_s × V

    Used by: Data Lake index (hierarchical namespace metadata)

    Args:
        price_per_gb_month: Cost per GB per month (c_s)
        volume_gb: Volume in GB (V)
    """
    if not is_billable(price_per_gb_month) or not is_billable(volume_gb):
        return 0.0
    return price_per_gb_month * volume_gb


def volume_based_cost(
    price_per_gb: Optional[float],
    volume_gb: Optional[float]
) -> float:
    """
    CV: Volume-based cost formula.

    Formula: c_gb × V

    Used by:
        - Data retrieval (Azure cold/archive, S3 Standard-IA/Glacier)
        - Query acceleration scanned / returned data (Azure hot/cold)

    Args:
        price_per_gb: Cost per GB (c_gb), ``None`` when not priced
        volume_gb: Volume in GB (V), ``None`` when not used
    """
    if not is_billable(price_per_gb) or not is_billable(volume_gb):
        return 0.0
    return volume_gb * price_per_gb


def operation_based_cost(
    price_per_unit: Optional[float],
    num_operations: Optional[float],
    operations_per_unit: int
) -> float:
    """
    CO: Operation-based cost formula.

    Formula: c_unit × N_ops / unit_size

    Providers bill operations in blocks (per 10,000 Azure operations,
    per 1,000 S3 requests, ...). The caller passes raw counts; partial
    blocks are prorated, not rounded up.

    Args:
        price_per_unit: Cost per block of operations (c_unit)
        num_operations: Raw operation count (N_ops)
        operations_per_unit: Block size (unit_size)
    """
    if not is_billable(price_per_unit) or not is_billable(num_operations):
        return 0.0
    return (num_operations / operations_per_unit) * price_per_unit


def early_deletion_penalty(
    size_gb: float,
    minimum_storage_duration_days: Optional[float],
    penalty_per_gb: Optional[float],
    storage_duration_days: Optional[float]
) -> float:
    """
    CED: Prorated early-deletion penalty.

    Formula: V × c_penalty × (D_min - D_stored) / D_min

    The full per-GB penalty is scaled by the fraction of the minimum
    retention commitment that has not been honoured yet.

    Args:
        size_gb: Volume leaving the tier (V)
        minimum_storage_duration_days: Committed minimum (D_min)
        penalty_per_gb: Full penalty per GB (c_penalty)
        storage_duration_days: Days actually stored (D_stored); ``None`` = unknown

    Returns:
        Penalty, 0 when the duration is unknown, negative or the minimum
        was reached
    """
    if storage_duration_days is None or storage_duration_days < 0:
        return 0.0
    if not is_billable(minimum_storage_duration_days) or not is_billable(penalty_per_gb):
        return 0.0
    if not is_billable(size_gb):
        return 0.0

    remaining_days = minimum_storage_duration_days - storage_duration_days
    if remaining_days <= 0:
        return 0.0

    return size_gb * penalty_per_gb * (remaining_days / minimum_storage_duration_days)
