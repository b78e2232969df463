"""
Tests for the immutable input / result records.
"""

import dataclasses
import pytest

from emissions.calculator import calculate
from emissions.records import (
    BreakEvenStatus,
    InputRecord,
    Provided,
    TO_ESTIMATE,
    ToEstimate,
    optional_param,
)


class TestOptionalParam:

    def test_none_is_to_estimate(self):
        assert optional_param(None) is TO_ESTIMATE

    def test_zero_is_provided(self):
        assert optional_param(0) == Provided(0.0)

    def test_marker_is_singleton(self):
        assert ToEstimate() is TO_ESTIMATE

    def test_provided_passthrough(self):
        p = Provided(3.0)
        assert optional_param(p) is p


class TestInputRecord:

    def test_normalizes_distances_to_tuple(self):
        record = InputRecord(distances=[0, 100], ice_weight=1000, bev_weight=1200)
        assert record.distances == (0.0, 100.0)

    def test_defaults(self):
        record = InputRecord(distances=[0], ice_weight=1000, bev_weight=1200)
        assert record.alpha_fuel == 2.18
        assert record.alpha_grid == 0.45
        assert record.phi_grid == 8.5
        assert record.alpha_bat_per_kwh == 80
        assert len(record.missing_fields()) == 5

    def test_frozen(self):
        record = InputRecord(distances=[0], ice_weight=1000, bev_weight=1200)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.ice_weight = 2000

    def test_to_dict_optional_as_null(self):
        record = InputRecord(distances=[0], ice_weight=1000, bev_weight=1200,
                             bev_energy_use=15.5)
        data = record.to_dict()
        assert data["bev_energy_use"] == 15.5
        assert data["ice_fuel_economy"] is None


class TestCalculationResult:

    def test_to_dict_shape(self, reference_inputs):
        data = calculate(reference_inputs).to_dict()
        assert data["break_even_status"] == "finite"
        assert len(data["series"]) == 5
        assert set(data["series"][0]) == {
            "distance", "e_ice", "e_bev", "delta", "k_ice", "k_bev",
            "primary_energy_bev",
        }

    def test_derived_is_read_only(self, reference_inputs):
        result = calculate(reference_inputs)
        with pytest.raises(TypeError):
            result.derived["ice_fuel_economy"] = 1.0

    def test_status_values(self):
        assert BreakEvenStatus("no_advantage") is BreakEvenStatus.NO_ADVANTAGE
        assert BreakEvenStatus.IMMEDIATE_ADVANTAGE.value == "immediate_advantage"
