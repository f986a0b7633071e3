"""
Pricing Catalog
===============

Static pricing tables for Azure Data Lake / Blob Storage and AWS S3,
plus the lookup functions used by the calculators.

All prices in USD, pay-as-you-go, single region. The catalog is built
once at import time (DEFAULT_CATALOG) and never mutated afterwards.

Revision: the tables carry early-deletion parameters
(Azure: cold = 90 days, archive = 180 days; AWS: Standard-IA = 30 days,
Glacier Flexible Retrieval = 90 days). The early-deletion penalty per GB
equals the tier's storage price.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple, Union

from .models import (
    RetrievalPrices,
    ReservedCapacity,
    S3PricingConfig,
    S3TierPricing,
    StorageConfig,
    TierPricing,
    TierPricingSet,
    flat_rate,
    volume_slabs,
)
from .types import ReplicationType, StorageType

# Volume band boundaries in GB
FIRST_50_TB = 51_200
FIRST_500_TB = 512_000


class PricingConfigurationError(ValueError):
    """Raised when pricing is requested for an unsupported storage type / replication pair."""


# =============================================================================
# Azure Data Lake Storage Gen2
# =============================================================================

_DATA_LAKE_LRS = StorageConfig(
    storage_type=StorageType.DATA_LAKE,
    replication=ReplicationType.LRS,
    tiers=TierPricingSet(
        hot=TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.021),
                (FIRST_50_TB, FIRST_500_TB, 0.020),
                (FIRST_500_TB, None, 0.020),
            ),
            write_operations=0.065,
            read_operations=0.0052,
            iterative_read_operations=0.065,
            iterative_write_operations=0.065,
            other_operations=0.0052,
            query_acceleration_scanned=0.002,
            query_acceleration_returned=0.0007,
            index=0.0297,
        ),
        cold=TierPricing(
            storage=flat_rate(0.0036),
            write_operations=0.234,
            read_operations=0.13,
            iterative_write_operations=0.065,
            data_retrieval=0.03,
            query_acceleration_scanned=0.002,
            query_acceleration_returned=0.01,
            index=0.0297,
            minimum_storage_duration_days=90,
            early_deletion_penalty=0.0036,
        ),
        archive=TierPricing(
            storage=flat_rate(0.001),
            write_operations=0.13,
            read_operations=6.50,
            archive_high_priority_read=65.00,
            iterative_write_operations=0.065,
            data_retrieval=0.02,
            archive_high_priority_retrieval=0.10,
            minimum_storage_duration_days=180,
            early_deletion_penalty=0.001,
        ),
    ),
    reserved_capacity=ReservedCapacity(per_100_tb=1747, per_1_pb=17013),
)

_DATA_LAKE_GRS = StorageConfig(
    storage_type=StorageType.DATA_LAKE,
    replication=ReplicationType.GRS,
    tiers=TierPricingSet(
        hot=TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.046),
                (FIRST_50_TB, FIRST_500_TB, 0.044),
                (FIRST_500_TB, None, 0.043),
            ),
            write_operations=0.13,
            read_operations=0.0052,
            iterative_read_operations=0.13,
            iterative_write_operations=0.13,
            other_operations=0.0052,
            query_acceleration_scanned=0.002,
            query_acceleration_returned=0.0007,
            index=0.0655,
        ),
        cold=TierPricing(
            storage=flat_rate(0.0081),
            write_operations=0.468,
            read_operations=0.13,
            iterative_write_operations=0.13,
            data_retrieval=0.01,
            query_acceleration_scanned=0.002,
            query_acceleration_returned=0.01,
            index=0.0655,
            minimum_storage_duration_days=90,
            early_deletion_penalty=0.0081,
        ),
        archive=TierPricing(
            storage=flat_rate(0.003),
            write_operations=0.273,
            read_operations=6.50,
            archive_high_priority_read=65.00,
            iterative_write_operations=0.13,
            data_retrieval=0.02,
            archive_high_priority_retrieval=0.10,
            minimum_storage_duration_days=180,
            early_deletion_penalty=0.003,
        ),
    ),
    reserved_capacity=ReservedCapacity(per_100_tb=3846, per_1_pb=37460),
)


# =============================================================================
# Azure Blob Storage
# =============================================================================

_BLOB_LRS = StorageConfig(
    storage_type=StorageType.BLOB,
    replication=ReplicationType.LRS,
    tiers=TierPricingSet(
        hot=TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.021),
                (FIRST_50_TB, FIRST_500_TB, 0.02),
                (FIRST_500_TB, None, 0.0191),
            ),
            write_operations=0.065,
            read_operations=0.005,
            iterative_read_operations=0.0052,
            iterative_write_operations=0.065,
            other_operations=0.005,
        ),
        cold=TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.0036),
                (FIRST_50_TB, FIRST_500_TB, 0.0036),
                (FIRST_500_TB, None, 0.0036),
            ),
            write_operations=0.234,
            read_operations=0.13,
            iterative_read_operations=0.0052,
            iterative_write_operations=0.065,
            other_operations=0.005,
            data_retrieval=0.03,
            minimum_storage_duration_days=90,
            early_deletion_penalty=0.0036,
        ),
        archive=TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.00099),
                (FIRST_50_TB, FIRST_500_TB, 0.00099),
                (FIRST_500_TB, None, 0.00099),
            ),
            write_operations=0.13,
            read_operations=6.50,
            archive_high_priority_read=65.00,
            iterative_read_operations=0.0052,
            iterative_write_operations=0.065,
            other_operations=0.005,
            data_retrieval=0.02,
            archive_high_priority_retrieval=0.10,
            minimum_storage_duration_days=180,
            early_deletion_penalty=0.00099,
        ),
    ),
    reserved_capacity=ReservedCapacity(per_100_tb=1747, per_1_pb=17013),
)

_BLOB_GRS = StorageConfig(
    storage_type=StorageType.BLOB,
    replication=ReplicationType.GRS,
    tiers=TierPricingSet(
        hot=TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.046),
                (FIRST_50_TB, FIRST_500_TB, 0.044),
                (FIRST_500_TB, None, 0.0421),
            ),
            write_operations=0.13,
            read_operations=0.005,
            iterative_read_operations=0.0052,
            iterative_write_operations=0.13,
            other_operations=0.005,
        ),
        cold=TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.0081),
                (FIRST_50_TB, FIRST_500_TB, 0.0081),
                (FIRST_500_TB, None, 0.0081),
            ),
            write_operations=0.468,
            read_operations=0.13,
            iterative_read_operations=0.0052,
            iterative_write_operations=0.13,
            other_operations=0.005,
            data_retrieval=0.03,
            minimum_storage_duration_days=90,
            early_deletion_penalty=0.0081,
        ),
        archive=TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.00299),
                (FIRST_50_TB, FIRST_500_TB, 0.00299),
                (FIRST_500_TB, None, 0.00299),
            ),
            write_operations=0.273,
            read_operations=6.50,
            archive_high_priority_read=65.00,
            iterative_read_operations=0.0052,
            iterative_write_operations=0.065,
            other_operations=0.005,
            data_retrieval=0.02,
            archive_high_priority_retrieval=0.10,
            minimum_storage_duration_days=180,
            early_deletion_penalty=0.00299,
        ),
    ),
    reserved_capacity=ReservedCapacity(per_100_tb=3846, per_1_pb=37460),
)


# =============================================================================
# AWS S3
# =============================================================================

_AWS_S3 = S3PricingConfig(
    tiers=TierPricingSet(
        # S3 Standard (no retrieval fees)
        hot=S3TierPricing(
            storage=volume_slabs(
                (0, FIRST_50_TB, 0.023),             # First 50 TB
                (FIRST_50_TB, FIRST_500_TB, 0.022),  # Next 450 TB
                (FIRST_500_TB, None, 0.021),         # Over 500 TB
            ),
            put_copy_post_list_requests=0.005,
            get_select_requests=0.0004,
        ),
        # S3 Standard-IA
        cold=S3TierPricing(
            storage=flat_rate(0.0125),
            put_copy_post_list_requests=0.01,
            get_select_requests=0.0001,
            data_retrieval=RetrievalPrices(standard=0.01),
            minimum_storage_duration_days=30,
            early_deletion_penalty=0.0125,
        ),
        # S3 Glacier Flexible Retrieval
        archive=S3TierPricing(
            storage=flat_rate(0.0036),
            put_copy_post_list_requests=0.03,
            get_select_requests=0.0004,
            data_retrieval_requests=RetrievalPrices(expedited=10.00, standard=0.05),
            data_retrieval=RetrievalPrices(expedited=0.03, standard=0.01),
            minimum_storage_duration_days=90,
            early_deletion_penalty=0.0036,
        ),
    ),
)


# =============================================================================
# Catalog
# =============================================================================

@dataclass(frozen=True)
class PricingCatalog:
    """
    Immutable bundle of every pricing configuration the engine knows.

    Azure configurations are keyed by ``(StorageType, ReplicationType)``;
    iteration order of ``options()`` is the comparison order
    (data-lake before blob, LRS before GRS).
    """
    azure_configs: Tuple[StorageConfig, ...]
    aws_config: S3PricingConfig
    _index: Dict[Tuple[StorageType, ReplicationType], StorageConfig] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        index = {(cfg.storage_type, cfg.replication): cfg for cfg in self.azure_configs}
        object.__setattr__(self, "_index", index)

    def azure(
        self,
        storage_type: Union[StorageType, str],
        replication: Union[ReplicationType, str],
    ) -> StorageConfig:
        """
        Look up an Azure configuration.

        Raises:
            PricingConfigurationError: For any pair not in the catalog.
        """
        key = (_coerce(StorageType, storage_type), _coerce(ReplicationType, replication))
        if None in key or key not in self._index:
            raise PricingConfigurationError(
                f"No pricing configured for storage type '{storage_type}' "
                f"with replication '{replication}'"
            )
        return self._index[key]

    def aws(self) -> S3PricingConfig:
        return self.aws_config

    def options(self) -> Iterator[Tuple[StorageType, ReplicationType]]:
        """Supported Azure combinations in comparison order."""
        for storage_type in StorageType:
            for replication in ReplicationType:
                if (storage_type, replication) in self._index:
                    yield storage_type, replication


def _coerce(enum_cls, value):
    """Convert a string to ``enum_cls``; ``None`` when it is not a member."""
    try:
        return enum_cls(value)
    except ValueError:
        return None


DEFAULT_CATALOG = PricingCatalog(
    azure_configs=(_DATA_LAKE_LRS, _DATA_LAKE_GRS, _BLOB_LRS, _BLOB_GRS),
    aws_config=_AWS_S3,
)


def get_pricing_config(
    storage_type: Union[StorageType, str],
    replication: Union[ReplicationType, str],
) -> StorageConfig:
    """Get Azure pricing for a storage type and replication pair."""
    return DEFAULT_CATALOG.azure(storage_type, replication)


def get_aws_pricing_config() -> S3PricingConfig:
    """Get AWS S3 pricing."""
    return DEFAULT_CATALOG.aws()
