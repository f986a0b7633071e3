"""
Calculation Models
==================

Input and result value objects of the cost engine.

Inputs are frozen: a calculation never mutates what the caller passed in.
Results are plain dataclasses, created fresh by every call.
All money values are monthly USD.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from storage_costs.pricing.types import (
    Provider,
    ReplicationType,
    RetrievalType,
    StorageTier,
    StorageType,
)
from storage_costs.utils import dataclass_to_dict


# =============================================================================
# Inputs
# =============================================================================

@dataclass(frozen=True)
class TierAllocation:
    """Capacity per tier in GB (TB only inside DatabaseConfig)."""
    hot: float = 0.0
    cold: float = 0.0
    archive: float = 0.0

    def __getitem__(self, tier: StorageTier) -> float:
        return getattr(self, StorageTier(tier).value)

    @property
    def total(self) -> float:
        return self.hot + self.cold + self.archive


@dataclass(frozen=True)
class TierTransactionInputs:
    """
    Azure usage for one tier over one billing period.

    Operation fields are raw operation counts; the calculators divide them
    by the billing granularity. ``storage_duration_days`` is how long the
    data has actually been stored and only feeds the early-deletion penalty.
    """
    read_operations: Optional[float] = None
    write_operations: Optional[float] = None
    iterative_read_operations: Optional[float] = None
    iterative_write_operations: Optional[float] = None
    other_operations: Optional[float] = None
    archive_high_priority_read: Optional[float] = None
    query_acceleration_scanned_gb: Optional[float] = None
    query_acceleration_returned_gb: Optional[float] = None
    data_retrieval_gb: Optional[float] = None
    archive_high_priority_retrieval_gb: Optional[float] = None
    storage_duration_days: Optional[float] = None


@dataclass(frozen=True)
class TransactionInputs:
    """Azure usage keyed by tier."""
    hot: TierTransactionInputs = field(default_factory=TierTransactionInputs)
    cold: TierTransactionInputs = field(default_factory=TierTransactionInputs)
    archive: TierTransactionInputs = field(default_factory=TierTransactionInputs)

    def __getitem__(self, tier: StorageTier) -> TierTransactionInputs:
        return getattr(self, StorageTier(tier).value)


@dataclass(frozen=True)
class AWSTierTransactionInputs:
    """S3 usage for one tier over one billing period (raw request counts)."""
    put_copy_post_list_requests: Optional[float] = None
    get_select_requests: Optional[float] = None
    data_retrieval_gb: Optional[float] = None
    data_retrieval_requests: Optional[float] = None
    retrieval_type: RetrievalType = RetrievalType.STANDARD
    storage_duration_days: Optional[float] = None


@dataclass(frozen=True)
class AWSTransactionInputs:
    """S3 usage keyed by tier."""
    hot: AWSTierTransactionInputs = field(default_factory=AWSTierTransactionInputs)
    cold: AWSTierTransactionInputs = field(default_factory=AWSTierTransactionInputs)
    archive: AWSTierTransactionInputs = field(default_factory=AWSTierTransactionInputs)

    def __getitem__(self, tier: StorageTier) -> AWSTierTransactionInputs:
        return getattr(self, StorageTier(tier).value)


@dataclass(frozen=True)
class DatabaseConfig:
    """
    One independently configured database.

    ``tier_allocation`` is expressed in TB here, matching ``total_size_tb``;
    the engine converts it to GB.
    """
    id: str
    tier_allocation: TierAllocation
    transactions: TransactionInputs = field(default_factory=TransactionInputs)
    name: str = ""
    total_size_tb: float = 0.0


# =============================================================================
# Results
# =============================================================================

@dataclass
class StorageOnlyBreakdown:
    """Capacity cost of one database for one month, no transactions."""
    hot: float = 0.0
    cold: float = 0.0
    archive: float = 0.0
    total: float = 0.0
    index: Optional[float] = None

    def __getitem__(self, tier: StorageTier) -> float:
        return getattr(self, StorageTier(tier).value)

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


@dataclass
class IncrementalCostBreakdown:
    """
    Costs on top of capacity storage, already scaled to the whole fleet.

    ``requests`` is only set for AWS, where it mirrors ``transactions``.
    """
    transactions: float = 0.0
    retrieval: float = 0.0
    query_acceleration: float = 0.0
    early_deletion: float = 0.0
    total: float = 0.0
    requests: Optional[float] = None

    def scaled(self, factor: float) -> "IncrementalCostBreakdown":
        """Copy with every money field multiplied by ``factor``."""
        return replace(
            self,
            transactions=self.transactions * factor,
            retrieval=self.retrieval * factor,
            query_acceleration=self.query_acceleration * factor,
            early_deletion=self.early_deletion * factor,
            total=self.total * factor,
            requests=None if self.requests is None else self.requests * factor,
        )

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


@dataclass
class StorageComparisonResult:
    """One enumerated provider / storage type / replication option."""
    provider: Provider
    breakdown: StorageOnlyBreakdown
    total_for_all_databases: float
    label: str
    storage_type: Optional[StorageType] = None
    replication: Optional[ReplicationType] = None

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


@dataclass
class TierCostBreakdown:
    """Full cost of one tier of one database."""
    storage: float = 0.0
    transactions: float = 0.0
    retrieval: float = 0.0
    query_acceleration: Optional[float] = None
    index: Optional[float] = None
    total: float = 0.0

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


@dataclass
class DatabaseCostBreakdown:
    """Full cost of one database, per tier."""
    database_id: str
    hot: TierCostBreakdown = field(default_factory=TierCostBreakdown)
    cold: TierCostBreakdown = field(default_factory=TierCostBreakdown)
    archive: TierCostBreakdown = field(default_factory=TierCostBreakdown)
    total: float = 0.0

    def __getitem__(self, tier: StorageTier) -> TierCostBreakdown:
        return getattr(self, StorageTier(tier).value)

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


@dataclass
class TierTotals:
    hot: float = 0.0
    cold: float = 0.0
    archive: float = 0.0

    def __getitem__(self, tier: StorageTier) -> float:
        return getattr(self, StorageTier(tier).value)

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)


@dataclass
class AggregateCosts:
    """Costs across many heterogeneous databases."""
    total_monthly: float
    by_tier: TierTotals
    by_database: List[DatabaseCostBreakdown]

    def to_dict(self) -> Dict:
        return dataclass_to_dict(self)
