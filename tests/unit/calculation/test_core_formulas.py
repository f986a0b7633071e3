"""
Test Core Formulas
==================

Unit tests for the provider-independent cost formulas.
"""

import pytest
from storage_costs.calculation.formulas import (
    is_billable,
    calculate_storage_cost,
    storage_based_cost,
    volume_based_cost,
    operation_based_cost,
    early_deletion_penalty,
)
from storage_costs.pricing.models import StoragePricingSlab, flat_rate, volume_slabs


@pytest.fixture
def hot_slabs():
    """Data Lake LRS hot tier bands."""
    return volume_slabs(
        (0, 51_200, 0.021),
        (51_200, 512_000, 0.020),
        (512_000, None, 0.020),
    )


@pytest.fixture
def discount_slabs():
    """Strictly decreasing prices, so every band boundary is visible."""
    return volume_slabs(
        (0, 100, 0.10),
        (100, 1_000, 0.05),
        (1_000, None, 0.01),
    )


class TestIsBillable:
    """Zero, negative and missing values never contribute cost."""

    @pytest.mark.parametrize("value", [None, 0, 0.0, -1, -0.5])
    def test_not_billable(self, value):
        assert is_billable(value) is False

    @pytest.mark.parametrize("value", [1, 0.0001, 1_000_000])
    def test_billable(self, value):
        assert is_billable(value) is True


class TestSlabStorageCost:
    """Tests for CS formula."""

    def test_boundary_fills_first_slab_only(self, hot_slabs):
        """51,200 GB is billed entirely at the first band price."""
        assert calculate_storage_cost(51_200, hot_slabs) == pytest.approx(1075.20)

    def test_one_gb_past_boundary(self, hot_slabs):
        """The GB above the boundary moves to the second band."""
        assert calculate_storage_cost(51_201, hot_slabs) == pytest.approx(1075.20 + 0.020)

    def test_spans_all_slabs(self, hot_slabs):
        """Marginal billing across three bands."""
        expected = 51_200 * 0.021 + (512_000 - 51_200) * 0.020 + 88_000 * 0.020
        assert calculate_storage_cost(600_000, hot_slabs) == pytest.approx(expected)

    def test_flat_rate(self):
        assert calculate_storage_cost(300, flat_rate(0.0036)) == pytest.approx(1.08)

    @pytest.mark.parametrize("size", [0, -10, -0.001])
    def test_non_positive_size_is_free(self, hot_slabs, size):
        assert calculate_storage_cost(size, hot_slabs) == 0.0

    def test_monotonic(self, discount_slabs):
        """Adding capacity never reduces cost."""
        sizes = [0, 1, 50, 99.9, 100, 100.1, 500, 999, 1_000, 1_001, 5_000, 100_000]
        costs = [calculate_storage_cost(size, discount_slabs) for size in sizes]
        assert costs == sorted(costs)

    @pytest.mark.parametrize("boundary", [100, 1_000])
    def test_continuous_at_boundaries(self, discount_slabs, boundary):
        """No jump when crossing a band boundary."""
        epsilon = 1e-6
        below = calculate_storage_cost(boundary - epsilon, discount_slabs)
        above = calculate_storage_cost(boundary + epsilon, discount_slabs)
        assert abs(above - below) < 1e-6

    def test_marginal_not_whole_volume(self, discount_slabs):
        """Crossing into a cheaper band does not reprice the GB below it."""
        # 100 × 0.10 + 900 × 0.05 + 500 × 0.01
        assert calculate_storage_cost(1_500, discount_slabs) == pytest.approx(60.0)


class TestSlabValidation:
    """Slab lists must be contiguous, start at 0 and end open."""

    def test_gap_rejected(self):
        with pytest.raises(ValueError):
            volume_slabs((0, 100, 0.1), (200, None, 0.05))

    def test_bounded_last_slab_rejected(self):
        with pytest.raises(ValueError):
            volume_slabs((0, 100, 0.1), (100, 1_000, 0.05))

    def test_open_middle_slab_rejected(self):
        with pytest.raises(ValueError):
            volume_slabs((0, None, 0.1), (100, None, 0.05))

    def test_capacity(self):
        assert StoragePricingSlab(100, 1_000, 0.05).capacity_gb == 900
        assert StoragePricingSlab(1_000, None, 0.01).capacity_gb is None


class TestStorageBasedCost:
    """Flat per GB-month cost (Data Lake index)."""

    def test_basic_calculation(self):
        assert storage_based_cost(0.0297, 1_000) == pytest.approx(29.7)

    def test_zero_volume(self):
        assert storage_based_cost(0.0297, 0) == 0.0


class TestVolumeBasedCost:
    """Tests for CV formula."""

    def test_basic_calculation(self):
        """CV: c_gb × V"""
        assert volume_based_cost(0.03, 50) == pytest.approx(1.5)

    @pytest.mark.parametrize("price,volume", [(None, 50), (0, 50), (0.03, None), (0.03, 0), (0.03, -5)])
    def test_missing_or_zero_inputs(self, price, volume):
        assert volume_based_cost(price, volume) == 0.0


class TestOperationBasedCost:
    """Tests for CO formula."""

    def test_per_10k(self):
        """CO: c_unit × N / 10,000"""
        assert operation_based_cost(0.065, 20_000, 10_000) == pytest.approx(0.13)

    def test_per_100(self):
        assert operation_based_cost(0.065, 200, 100) == pytest.approx(0.13)

    def test_partial_unit_is_prorated(self):
        assert operation_based_cost(0.005, 500, 1_000) == pytest.approx(0.0025)

    def test_unpriced_operation_is_free(self):
        assert operation_based_cost(None, 1_000_000, 10_000) == 0.0

    def test_zero_operations(self):
        assert operation_based_cost(0.065, 0, 10_000) == 0.0


class TestEarlyDeletionPenalty:
    """Tests for CED formula."""

    def test_prorated(self):
        """CED: V × c × (D_min - D) / D_min"""
        result = early_deletion_penalty(
            size_gb=1_000,
            minimum_storage_duration_days=90,
            penalty_per_gb=0.0036,
            storage_duration_days=30,
        )
        assert result == pytest.approx(2.4)

    def test_zero_days_is_full_penalty(self):
        result = early_deletion_penalty(1_000, 90, 0.0036, 0)
        assert result == pytest.approx(3.6)

    def test_unknown_duration_is_free(self):
        assert early_deletion_penalty(1_000, 90, 0.0036, None) == 0.0

    @pytest.mark.parametrize("days", [-1, -90, -365])
    def test_negative_duration_is_free(self, days):
        """A negative stored duration is an anomaly, never more than the full penalty."""
        assert early_deletion_penalty(1_000, 90, 0.0036, days) == 0.0

    @pytest.mark.parametrize("days", [90, 91, 365])
    def test_minimum_reached(self, days):
        assert early_deletion_penalty(1_000, 90, 0.0036, days) == 0.0

    def test_no_minimum_duration(self):
        assert early_deletion_penalty(1_000, None, 0.0036, 10) == 0.0

    def test_empty_tier(self):
        assert early_deletion_penalty(0, 90, 0.0036, 10) == 0.0
