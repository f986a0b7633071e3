"""
Pricing Records
===============

Immutable, typed pricing records for both provider models.

Every optional price defaults to ``None``. A missing price means the
operation is free for that tier, it is never treated as an error. All
prices are raw USD floats; nothing is rounded here.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from .types import Provider, ReplicationType, StorageTier, StorageType, RetrievalType
from storage_costs.utils import dataclass_to_dict


@dataclass(frozen=True)
class StoragePricingSlab:
    """
    One volume band of storage pricing.

    Attributes:
        range_min: First GB of the band
        range_max: End of the band in GB, ``None`` for the open-ended last band
        price_per_gb: USD per GB-month inside the band
    """
    range_min: float
    range_max: Optional[float]
    price_per_gb: float

    @property
    def capacity_gb(self) -> Optional[float]:
        """Width of the band, ``None`` when unbounded."""
        if self.range_max is None:
            return None
        return self.range_max - self.range_min

    def to_dict(self) -> Dict:
        return {
            "range": {"min": self.range_min, "max": self.range_max},
            "pricePerGB": self.price_per_gb,
        }


def flat_rate(price_per_gb: float) -> Tuple[StoragePricingSlab, ...]:
    """Single open-ended slab, for tiers without volume discounts."""
    return (StoragePricingSlab(0, None, price_per_gb),)


def volume_slabs(*bands: Tuple[float, Optional[float], float]) -> Tuple[StoragePricingSlab, ...]:
    """
    Build a validated slab tuple from ``(min, max, price)`` bands.

    Raises:
        ValueError: If the bands are not contiguous, ascending and open-ended.
    """
    slabs = tuple(StoragePricingSlab(lo, hi, price) for lo, hi, price in bands)
    validate_slabs(slabs)
    return slabs


def validate_slabs(slabs: Tuple[StoragePricingSlab, ...]) -> None:
    """Check the slab invariants: starts at 0, contiguous, last one unbounded."""
    if not slabs:
        raise ValueError("A slab list needs at least one slab")
    if slabs[0].range_min != 0:
        raise ValueError(f"First slab must start at 0 GB, got {slabs[0].range_min}")
    for current, following in zip(slabs, slabs[1:]):
        if current.range_max is None:
            raise ValueError("Only the last slab may be open-ended")
        if current.range_max != following.range_min:
            raise ValueError(
                f"Slabs are not contiguous: {current.range_max} != {following.range_min}"
            )
    if slabs[-1].range_max is not None:
        raise ValueError("The last slab must be open-ended (range_max=None)")


# =============================================================================
# Azure (tiered model)
# =============================================================================

@dataclass(frozen=True)
class TierPricing:
    """
    Azure pricing for one tier of one storage type / replication pair.

    Operation prices are USD per 10,000 operations, except
    ``iterative_write_operations`` which is per 100 operations.
    Retrieval, write, query acceleration and index prices are per GB.
    """
    storage: Tuple[StoragePricingSlab, ...]
    write_operations: float
    read_operations: float
    data_retrieval: float = 0.0
    data_write: float = 0.0
    iterative_read_operations: Optional[float] = None
    iterative_write_operations: Optional[float] = None
    other_operations: Optional[float] = None
    archive_high_priority_read: Optional[float] = None
    archive_high_priority_retrieval: Optional[float] = None
    query_acceleration_scanned: Optional[float] = None
    query_acceleration_returned: Optional[float] = None
    index: Optional[float] = None
    minimum_storage_duration_days: Optional[int] = None
    early_deletion_penalty: Optional[float] = None

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


@dataclass(frozen=True)
class ReservedCapacity:
    """Monthly price of a reserved-capacity commitment (informational)."""
    per_100_tb: float
    per_1_pb: float

    def to_dict(self) -> Dict:
        return {"100TB": self.per_100_tb, "1PB": self.per_1_pb}


# =============================================================================
# AWS (S3-like model)
# =============================================================================

@dataclass(frozen=True)
class RetrievalPrices:
    """Prices split by Glacier retrieval speed class."""
    expedited: Optional[float] = None
    standard: Optional[float] = None

    def for_type(self, retrieval_type: RetrievalType) -> Optional[float]:
        if retrieval_type is RetrievalType.EXPEDITED:
            return self.expedited
        return self.standard

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


@dataclass(frozen=True)
class S3TierPricing:
    """
    S3 pricing for one tier.

    Request prices are USD per 1,000 requests, retrieval per GB.
    """
    storage: Tuple[StoragePricingSlab, ...]
    put_copy_post_list_requests: float
    get_select_requests: float
    data_retrieval_requests: Optional[RetrievalPrices] = None
    data_retrieval: Optional[RetrievalPrices] = None
    minimum_storage_duration_days: Optional[int] = None
    early_deletion_penalty: Optional[float] = None

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


AnyTierPricing = Union[TierPricing, S3TierPricing]


@dataclass(frozen=True)
class TierPricingSet:
    """Pricing for the three tiers of one configuration, indexable by tier."""
    hot: AnyTierPricing
    cold: AnyTierPricing
    archive: AnyTierPricing

    def __getitem__(self, tier: StorageTier) -> AnyTierPricing:
        return getattr(self, StorageTier(tier).value)

    def to_dict(self) -> Dict:
        return {tier.value: self[tier].to_dict() for tier in StorageTier}


@dataclass(frozen=True)
class StorageConfig:
    """Complete Azure pricing for one storage type / replication pair."""
    storage_type: StorageType
    replication: ReplicationType
    tiers: TierPricingSet
    reserved_capacity: Optional[ReservedCapacity] = None

    @property
    def key(self) -> str:
        return f"{self.storage_type.value}-{self.replication.value}"

    def to_dict(self) -> Dict:
        data = {"type": self.storage_type.value, "replication": self.replication.value,
                "tiers": self.tiers.to_dict()}
        if self.reserved_capacity is not None:
            data["reservedCapacity"] = self.reserved_capacity.to_dict()
        return data


@dataclass(frozen=True)
class S3PricingConfig:
    """Complete S3 pricing (Standard / Standard-IA / Glacier Flexible Retrieval)."""
    tiers: TierPricingSet
    provider: Provider = Provider.AWS

    def to_dict(self) -> Dict:
        return {"provider": self.provider.value, "tiers": self.tiers.to_dict()}
