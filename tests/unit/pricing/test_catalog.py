"""
Tests for the static pricing catalog and its lookups.
"""

import dataclasses

import pytest

from storage_costs.pricing import (
    DEFAULT_CATALOG,
    PricingCatalog,
    PricingConfigurationError,
    Provider,
    ReplicationType,
    RetrievalType,
    StorageTier,
    StorageType,
    get_aws_pricing_config,
    get_pricing_config,
)
from storage_costs.pricing.models import validate_slabs


class TestAzureLookup:

    @pytest.mark.parametrize("storage_type,replication", [
        ("data-lake", "LRS"),
        ("data-lake", "GRS"),
        ("blob", "LRS"),
        ("blob", "GRS"),
    ])
    def test_all_combinations_resolve(self, storage_type, replication):
        config = get_pricing_config(storage_type, replication)
        assert config.storage_type == StorageType(storage_type)
        assert config.replication == ReplicationType(replication)

    def test_accepts_enum_members(self):
        config = get_pricing_config(StorageType.BLOB, ReplicationType.GRS)
        assert config.key == "blob-GRS"

    @pytest.mark.parametrize("storage_type,replication", [
        ("premium", "LRS"),
        ("blob", "ZRS"),
        ("", ""),
    ])
    def test_unknown_pair_raises(self, storage_type, replication):
        with pytest.raises(PricingConfigurationError):
            get_pricing_config(storage_type, replication)

    def test_configuration_error_is_value_error(self):
        assert issubclass(PricingConfigurationError, ValueError)

    def test_catalog_without_pair_raises(self):
        """A custom catalog only knows what it was built with."""
        catalog = PricingCatalog(
            azure_configs=(get_pricing_config("blob", "LRS"),),
            aws_config=get_aws_pricing_config(),
        )
        with pytest.raises(PricingConfigurationError):
            catalog.azure("data-lake", "LRS")
        assert list(catalog.options()) == [(StorageType.BLOB, ReplicationType.LRS)]


class TestCatalogContents:

    def test_options_order(self):
        assert list(DEFAULT_CATALOG.options()) == [
            (StorageType.DATA_LAKE, ReplicationType.LRS),
            (StorageType.DATA_LAKE, ReplicationType.GRS),
            (StorageType.BLOB, ReplicationType.LRS),
            (StorageType.BLOB, ReplicationType.GRS),
        ]

    def test_every_slab_list_is_valid(self):
        configs = [DEFAULT_CATALOG.azure(*option) for option in DEFAULT_CATALOG.options()]
        configs.append(DEFAULT_CATALOG.aws())
        for config in configs:
            for tier in StorageTier:
                validate_slabs(config.tiers[tier].storage)

    def test_index_only_on_data_lake(self):
        for storage_type, replication in DEFAULT_CATALOG.options():
            tiers = DEFAULT_CATALOG.azure(storage_type, replication).tiers
            if storage_type is StorageType.BLOB:
                assert all(tiers[tier].index is None for tier in StorageTier)
            else:
                assert tiers.hot.index and tiers.cold.index
                assert tiers.archive.index is None

    def test_early_deletion_minimums(self):
        data_lake = get_pricing_config("data-lake", "LRS").tiers
        assert data_lake.cold.minimum_storage_duration_days == 90
        assert data_lake.archive.minimum_storage_duration_days == 180

        s3 = get_aws_pricing_config().tiers
        assert s3.cold.minimum_storage_duration_days == 30
        assert s3.archive.minimum_storage_duration_days == 90

    def test_aws_retrieval_prices(self):
        archive = get_aws_pricing_config().tiers.archive
        assert archive.data_retrieval.for_type(RetrievalType.EXPEDITED) == 0.03
        assert archive.data_retrieval.for_type(RetrievalType.STANDARD) == 0.01
        assert archive.data_retrieval_requests.for_type(RetrievalType.EXPEDITED) == 10.00

    def test_records_are_immutable(self):
        config = get_pricing_config("blob", "LRS")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.tiers.hot.write_operations = 0.0


class TestSerialization:

    def test_azure_to_dict(self):
        data = get_pricing_config("data-lake", "LRS").to_dict()
        assert data["type"] == "data-lake"
        assert data["replication"] == "LRS"
        assert data["reservedCapacity"] == {"100TB": 1747, "1PB": 17013}
        hot = data["tiers"]["hot"]
        assert hot["storage"][0] == {"range": {"min": 0, "max": 51_200}, "pricePerGB": 0.021}
        assert hot["storage"][-1]["range"]["max"] is None
        assert hot["queryAccelerationScanned"] == 0.002
        assert "archiveHighPriorityRead" not in hot

    def test_aws_to_dict(self):
        data = get_aws_pricing_config().to_dict()
        assert data["provider"] == Provider.AWS.value
        assert data["tiers"]["archive"]["dataRetrievalRequests"] == {"expedited": 10.0, "standard": 0.05}
        assert data["tiers"]["cold"]["dataRetrieval"] == {"standard": 0.01}
