"""Tests for the efficiency database, cost model and equipment construction."""
import pytest
from pydantic import ValidationError

from estimator.config import AuditConfig, load_config
from estimator.efficiency_db import (
    DEFAULT_SPEC,
    CostModel,
    EfficiencyDatabase,
    build_equipment,
    payback_years,
)
from schemas.enums import AgeRange, ClimateZone, EquipmentType
from schemas.home import Equipment
from schemas.results import EfficiencySpec, EquipmentLabelResult

AC = EquipmentType.CENTRAL_AC
MODERATE = ClimateZone.MODERATE


class TestLookup:
    def test_packaged_table(self, db):
        spec = db.lookup(AC, AgeRange.YEARS_15_TO_20)
        assert spec.estimated == 10.0
        assert spec.best_in_class == 24.0
        assert spec.upgrade_cost == 7500
        assert spec.current_code_minimum == 14.0

    def test_every_type_and_age_present(self, db):
        for equipment_type in EquipmentType:
            for age in AgeRange:
                assert db.lookup(equipment_type, age) is not DEFAULT_SPEC

    def test_type_default_row(self):
        spec = EfficiencySpec(estimated=12, best_in_class=20, upgrade_cost=5000, current_code_minimum=14)
        db = EfficiencyDatabase({AC: {"default": spec}}, CostModel())
        assert db.lookup(AC, AgeRange.YEARS_0_TO_5) == spec

    def test_missing_key_degrades_to_default(self):
        db = EfficiencyDatabase({}, CostModel())
        assert db.lookup(AC, AgeRange.YEARS_0_TO_5) == DEFAULT_SPEC

    def test_current_efficiency(self, db):
        unknown = Equipment(type=AC, age_range=AgeRange.YEARS_10_TO_15)
        rated = Equipment(type=AC, age_range=AgeRange.YEARS_10_TO_15, estimated_efficiency=17)
        assert db.current_efficiency(unknown) == 12.0
        assert db.current_efficiency(rated) == 17


class TestCostModel:
    def test_reference_home(self, db, config):
        # 3000 kWh at the 13 SEER reference, $0.16/kWh
        assert db.estimate_annual_cost(AC, 13.0, 1500, MODERATE, config) == pytest.approx(480.0)

    def test_decreasing_in_efficiency(self, db, config):
        costs = [db.estimate_annual_cost(AC, seer, 1500, MODERATE, config) for seer in (10, 13, 16, 24)]
        assert costs == sorted(costs, reverse=True)
        assert db.estimate_annual_cost(AC, 26.0, 1500, MODERATE, config) == pytest.approx(240.0)

    def test_increasing_in_u_factor(self, db, config):
        low = db.estimate_annual_cost(EquipmentType.WINDOWS, 0.25, 1500, MODERATE, config)
        high = db.estimate_annual_cost(EquipmentType.WINDOWS, 0.50, 1500, MODERATE, config)
        assert high == pytest.approx(2 * low)

    def test_climate_and_area_scaling(self, db, config):
        base = db.estimate_annual_cost(AC, 13.0, 1500, MODERATE, config)
        assert db.estimate_annual_cost(AC, 13.0, 1500, ClimateZone.HOT, config) == pytest.approx(base * 1.6)
        assert db.estimate_annual_cost(AC, 13.0, 3000, MODERATE, config) == pytest.approx(base * 2)

    def test_water_heating_not_area_scaled(self, db, config):
        small = db.estimate_annual_cost(EquipmentType.WATER_HEATER, 0.6, 1000, MODERATE, config)
        large = db.estimate_annual_cost(EquipmentType.WATER_HEATER, 0.6, 4000, MODERATE, config)
        assert small == pytest.approx(large)

    def test_gas_equipment_uses_gas_rate(self, db):
        cheap_gas = AuditConfig(gas_rate=1.0)
        dear_gas = AuditConfig(gas_rate=2.0)
        low = db.estimate_annual_cost(EquipmentType.FURNACE, 80.0, 1500, MODERATE, cheap_gas)
        high = db.estimate_annual_cost(EquipmentType.FURNACE, 80.0, 1500, MODERATE, dear_gas)
        assert low == pytest.approx(600.0)
        assert high == pytest.approx(1200.0)

    def test_unknown_efficiency_uses_reference(self, db, config):
        assert db.estimate_annual_cost(AC, 0.0, 1500, MODERATE, config) == pytest.approx(480.0)

    def test_unknown_area_uses_default(self, db, config):
        assert db.estimate_annual_cost(AC, 13.0, 0, MODERATE, config) == pytest.approx(480.0)

    def test_savings_clamped(self, db, config):
        assert db.estimate_annual_savings(AC, 20.0, 16.0, 1500, MODERATE, config) == 0.0
        assert db.estimate_annual_savings(AC, 13.0, 26.0, 1500, MODERATE, config) == pytest.approx(240.0)


class TestPayback:
    def test_simple_payback(self):
        assert payback_years(3000, 600) == pytest.approx(5.0)

    def test_zero_savings_is_undefined(self):
        assert payback_years(3000, 0) is None
        assert payback_years(3000, -5) is None


class TestBuildEquipment:
    def test_from_age_only(self, db):
        furnace = build_equipment(EquipmentType.FURNACE, AgeRange.YEARS_5_TO_10, db=db)
        assert furnace.estimated_efficiency == 92.0
        assert furnace.best_in_class == 98.5
        assert furnace.current_code_minimum == 80.0

    def test_label_reading_used(self, db):
        label = EquipmentLabelResult(manufacturer="Carrier", efficiency_value=96.0, efficiency_type="AFUE")
        furnace = build_equipment(EquipmentType.FURNACE, AgeRange.YEARS_5_TO_10, label=label, db=db)
        assert furnace.estimated_efficiency == 96.0
        assert furnace.manufacturer == "Carrier"

    def test_mismatched_unit_ignored(self, db):
        label = EquipmentLabelResult(efficiency_value=16.0, efficiency_type="SEER")
        furnace = build_equipment(EquipmentType.FURNACE, AgeRange.YEARS_5_TO_10, label=label, db=db)
        assert furnace.estimated_efficiency == 92.0


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.electricity_rate == 0.16
        assert config.gas_rate == 1.50
        assert config.materiality_threshold == 10.0

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "audit.yaml"
        path.write_text("electricity_rate: 0.21\nphantom_threshold_kwh: 50\n")
        config = load_config(path)
        assert config.electricity_rate == 0.21
        assert config.phantom_threshold_kwh == 50
        assert config.gas_rate == 1.50

    def test_invalid_rate_rejected(self, tmp_path):
        path = tmp_path / "audit.yaml"
        path.write_text("electricity_rate: -1\n")
        with pytest.raises(ValidationError):
            load_config(path)
