"""
Test Engine
===========

Orchestration tests: storage-only breakdowns, option enumeration,
incremental costs and per-database aggregation.
"""

import pytest
from unittest.mock import patch

from storage_costs import (
    AWSTierTransactionInputs,
    AWSTransactionInputs,
    DatabaseConfig,
    PricingConfigurationError,
    Provider,
    ReplicationType,
    RetrievalType,
    StorageTier,
    StorageType,
    TierAllocation,
    TierTransactionInputs,
    TransactionInputs,
    calculate_aggregate_costs,
    calculate_all_storage_options,
    calculate_aws_incremental_costs,
    calculate_aws_storage_only_costs,
    calculate_aws_tier_request_costs,
    calculate_database_costs,
    calculate_incremental_costs,
    calculate_storage_only_costs,
    calculate_tier_transaction_costs,
)


@pytest.fixture
def allocation():
    return TierAllocation(hot=600, cold=300, archive=100)


@pytest.fixture
def azure_usage():
    """Mixed workload touching every Azure component."""
    return TransactionInputs(
        hot=TierTransactionInputs(read_operations=1_000_000, write_operations=100_000),
        cold=TierTransactionInputs(data_retrieval_gb=50, storage_duration_days=30),
        archive=TierTransactionInputs(archive_high_priority_retrieval_gb=10),
    )


@pytest.fixture
def aws_usage():
    return AWSTransactionInputs(
        hot=AWSTierTransactionInputs(put_copy_post_list_requests=1_000),
        archive=AWSTierTransactionInputs(
            data_retrieval_gb=10,
            data_retrieval_requests=500,
            retrieval_type=RetrievalType.EXPEDITED,
        ),
    )


class TestStorageOnlyCosts:

    def test_data_lake_includes_index(self, allocation):
        result = calculate_storage_only_costs(1_000, allocation, "data-lake", "LRS")
        assert result.hot == pytest.approx(12.6)
        assert result.cold == pytest.approx(1.08)
        assert result.archive == pytest.approx(0.1)
        # (600 + 300) × 0.0297
        assert result.index == pytest.approx(26.73)
        assert result.total == pytest.approx(40.51)

    def test_blob_has_no_index(self, allocation):
        """Index exclusivity: blob never reports an index cost."""
        for replication in ReplicationType:
            result = calculate_storage_only_costs(1_000, allocation, StorageType.BLOB, replication)
            assert result.index is None
            assert result.total == pytest.approx(result.hot + result.cold + result.archive)

    def test_data_lake_archive_only_has_no_index(self):
        result = calculate_storage_only_costs(1_000, TierAllocation(archive=1_000), "data-lake", "GRS")
        assert result.index is None
        assert result.total == pytest.approx(3.0)

    def test_boundary_scenario(self):
        result = calculate_storage_only_costs(51_200, TierAllocation(hot=51_200), "data-lake", "LRS")
        assert result.hot == pytest.approx(1075.20)

    def test_zero_allocation(self):
        result = calculate_storage_only_costs(0, TierAllocation(), "data-lake", "LRS")
        assert result.total == 0.0
        assert result.index is None

    def test_total_size_does_not_override_allocation(self, allocation):
        """The allocation is authoritative, the total size is informational."""
        small = calculate_storage_only_costs(1, allocation, "blob", "LRS")
        large = calculate_storage_only_costs(1_000_000, allocation, "blob", "LRS")
        assert small.total == large.total

    def test_unknown_configuration(self, allocation):
        with pytest.raises(PricingConfigurationError):
            calculate_storage_only_costs(1_000, allocation, "premium", "LRS")

    def test_aws(self, allocation):
        result = calculate_aws_storage_only_costs(1_000, allocation)
        assert result.hot == pytest.approx(13.8)
        assert result.cold == pytest.approx(3.75)
        assert result.archive == pytest.approx(0.36)
        assert result.total == pytest.approx(17.91)
        assert result.index is None


class TestAllStorageOptions:

    def test_five_options_in_order(self, allocation):
        results = calculate_all_storage_options(1_000, allocation, 5, True)

        assert len(results) == 5
        assert [(r.storage_type, r.replication) for r in results[:4]] == [
            (StorageType.DATA_LAKE, ReplicationType.LRS),
            (StorageType.DATA_LAKE, ReplicationType.GRS),
            (StorageType.BLOB, ReplicationType.LRS),
            (StorageType.BLOB, ReplicationType.GRS),
        ]
        assert results[-1].provider is Provider.AWS
        assert results[-1].storage_type is None
        for result in results:
            assert result.total_for_all_databases == pytest.approx(result.breakdown.total * 5)

    def test_labels(self, allocation):
        labels = [r.label for r in calculate_all_storage_options(1_000, allocation, 1)]
        assert labels == [
            "Azure Data Lake Storage (LRS)",
            "Azure Data Lake Storage (GRS)",
            "Azure Blob Storage (LRS)",
            "Azure Blob Storage (GRS)",
            "AWS S3",
        ]

    def test_without_aws(self, allocation):
        results = calculate_all_storage_options(1_000, allocation, 1, include_aws=False)
        assert len(results) == 4
        assert all(r.provider is Provider.AZURE for r in results)

    def test_to_dict(self, allocation):
        data = calculate_all_storage_options(1_000, allocation, 2)[0].to_dict()
        assert data["provider"] == "azure"
        assert data["storageType"] == "data-lake"
        assert data["totalForAllDatabases"] == pytest.approx(81.02)
        assert data["breakdown"]["index"] == pytest.approx(26.73)


class TestIncrementalCosts:

    def test_azure_breakdown(self, allocation, azure_usage):
        result = calculate_incremental_costs(allocation, azure_usage, "data-lake", "LRS", 1)
        # 100 × 0.0052 + 10 × 0.065
        assert result.transactions == pytest.approx(1.17)
        # cold 50 × 0.03 + archive high priority 10 × 0.10
        assert result.retrieval == pytest.approx(2.5)
        # 300 × 0.0036 × 60 / 90
        assert result.early_deletion == pytest.approx(0.72)
        assert result.query_acceleration == 0.0
        assert result.total == pytest.approx(4.39)
        assert result.requests is None

    def test_scaling_is_linear(self, allocation, azure_usage):
        single = calculate_incremental_costs(allocation, azure_usage, "data-lake", "LRS", 1)
        fleet = calculate_incremental_costs(allocation, azure_usage, "data-lake", "LRS", 3)
        for field in ("transactions", "retrieval", "query_acceleration", "early_deletion", "total"):
            assert getattr(fleet, field) == pytest.approx(getattr(single, field) * 3)

    def test_zero_databases(self, allocation, azure_usage):
        result = calculate_incremental_costs(allocation, azure_usage, "blob", "GRS", 0)
        assert result.total == 0.0

    def test_archive_query_acceleration_excluded(self):
        usage = TransactionInputs(
            archive=TierTransactionInputs(query_acceleration_scanned_gb=1_000, query_acceleration_returned_gb=1_000)
        )
        result = calculate_incremental_costs(TierAllocation(archive=1_000), usage, "data-lake", "LRS", 1)
        assert result.query_acceleration == 0.0

    def test_hot_query_acceleration(self):
        usage = TransactionInputs(
            hot=TierTransactionInputs(query_acceleration_scanned_gb=100, query_acceleration_returned_gb=10)
        )
        result = calculate_incremental_costs(TierAllocation(hot=100), usage, "data-lake", "LRS", 2)
        assert result.query_acceleration == pytest.approx(0.414)

    @pytest.mark.parametrize("days,expected", [
        (None, 0.0),
        (-180, 0.0),
        (0, 1.0),
        (90, 0.5),
        (180, 0.0),
        (365, 0.0),
    ])
    def test_archive_early_deletion_boundaries(self, days, expected):
        usage = TransactionInputs(archive=TierTransactionInputs(storage_duration_days=days))
        result = calculate_incremental_costs(TierAllocation(archive=1_000), usage, "data-lake", "LRS", 1)
        assert result.early_deletion == pytest.approx(expected)

    def test_empty_usage(self, allocation):
        result = calculate_incremental_costs(allocation, TransactionInputs(), "blob", "LRS", 10)
        assert result.total == 0.0

    def test_aws(self, allocation, aws_usage):
        result = calculate_aws_incremental_costs(allocation, aws_usage, 2)
        assert result.transactions == pytest.approx(0.01)
        assert result.requests == result.transactions
        # expedited: (10 × 0.03 + 0.5 × 10.00) × 2
        assert result.retrieval == pytest.approx(10.6)
        assert result.query_acceleration == 0.0
        assert result.total == pytest.approx(10.61)

    def test_aws_early_deletion(self):
        usage = AWSTransactionInputs(cold=AWSTierTransactionInputs(storage_duration_days=0))
        result = calculate_aws_incremental_costs(TierAllocation(cold=1_000), usage, 1)
        assert result.early_deletion == pytest.approx(12.5)

    def test_to_dict_camel_case(self, allocation, aws_usage):
        data = calculate_aws_incremental_costs(allocation, aws_usage, 1).to_dict()
        assert set(data) == {"transactions", "retrieval", "queryAcceleration", "earlyDeletion", "total", "requests"}


class TestTierSplits:

    def test_azure_per_tier(self, azure_usage):
        costs = calculate_tier_transaction_costs(azure_usage, "data-lake", "LRS", 2)
        assert costs[StorageTier.HOT] == pytest.approx(2.34)
        assert costs[StorageTier.COLD] == 0.0
        assert costs[StorageTier.ARCHIVE] == 0.0

    def test_aws_per_tier(self, aws_usage):
        costs = calculate_aws_tier_request_costs(aws_usage, 3)
        assert costs[StorageTier.HOT] == pytest.approx(0.015)
        assert costs[StorageTier.ARCHIVE] == 0.0


class TestDatabaseCosts:

    @pytest.fixture
    def database(self):
        return DatabaseConfig(id="db-1", tier_allocation=TierAllocation(hot=1))

    def test_tb_converted_to_gb(self, database):
        result = calculate_database_costs(database, "data-lake", "LRS")
        assert result.database_id == "db-1"
        # 1024 GB × 0.021 and 1024 GB × 0.0297
        assert result.hot.storage == pytest.approx(21.504)
        assert result.hot.index == pytest.approx(30.4128)
        assert result.hot.total == pytest.approx(51.9168)
        assert result.total == pytest.approx(51.9168)

    def test_optional_components(self, database):
        result = calculate_database_costs(database, "data-lake", "LRS")
        assert result.hot.query_acceleration == 0.0
        assert result.cold.query_acceleration == 0.0
        assert result.archive.query_acceleration is None
        assert result.cold.index == 0.0
        assert result.archive.index is None

    def test_blob_has_no_index(self, database):
        result = calculate_database_costs(database, StorageType.BLOB, ReplicationType.LRS)
        assert all(result[tier].index is None for tier in StorageTier)

    def test_usage_included(self):
        database = DatabaseConfig(
            id="db-2",
            tier_allocation=TierAllocation(archive=1),
            transactions=TransactionInputs(archive=TierTransactionInputs(data_retrieval_gb=100)),
        )
        result = calculate_database_costs(database, "blob", "LRS")
        assert result.archive.retrieval == pytest.approx(2.0)
        assert result.archive.storage == pytest.approx(1024 * 0.00099)


class TestAggregateCosts:

    def test_sums(self):
        databases = [
            DatabaseConfig(id="a", tier_allocation=TierAllocation(hot=1, cold=2, archive=5)),
            DatabaseConfig(id="b", tier_allocation=TierAllocation(hot=0.5, archive=10)),
        ]
        result = calculate_aggregate_costs(databases, "blob", "GRS")

        assert [db.database_id for db in result.by_database] == ["a", "b"]
        assert result.total_monthly == pytest.approx(sum(db.total for db in result.by_database))
        assert result.by_tier.hot == pytest.approx(sum(db.hot.total for db in result.by_database))
        assert result.total_monthly == pytest.approx(
            result.by_tier.hot + result.by_tier.cold + result.by_tier.archive
        )

    def test_empty(self):
        result = calculate_aggregate_costs([], "blob", "LRS")
        assert result.total_monthly == 0
        assert result.by_database == []

    def test_unknown_configuration(self):
        with pytest.raises(PricingConfigurationError):
            calculate_aggregate_costs([], "blob", "ZRS")

    def test_unknown_configuration_with_databases(self):
        database = DatabaseConfig(id="db-1", tier_allocation=TierAllocation(hot=1))
        with pytest.raises(PricingConfigurationError):
            calculate_aggregate_costs([database], "premium", "LRS")


class TestPurity:

    def test_repeated_calls_are_identical(self, allocation, azure_usage):
        first = calculate_incremental_costs(allocation, azure_usage, "data-lake", "GRS", 4)
        second = calculate_incremental_costs(allocation, azure_usage, "data-lake", "GRS", 4)
        assert first == second
        assert first is not second

    def test_debug_summary_logged(self, allocation):
        with patch("storage_costs.calculation.engine.logger") as mock_logger:
            calculate_storage_only_costs(1_000, allocation, "blob", "LRS")
        mock_logger.debug.assert_called_once()
