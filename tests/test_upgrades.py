"""Tests for Good/Better/Best tiers and the whole-home upgrade list."""
import pytest

from estimator.config import AuditConfig
from estimator.upgrades import generate_upgrades, get_tier_table, prioritized_upgrades
from schemas.enums import AgeRange, ClimateZone, EquipmentType, UpgradeTier
from schemas.home import Equipment, Home

AC = EquipmentType.CENTRAL_AC
MODERATE = ClimateZone.MODERATE


class TestTierTable:
    def test_every_type_has_three_tiers(self):
        table = get_tier_table()
        for equipment_type in EquipmentType:
            assert list(table.tiers[equipment_type]) == list(UpgradeTier)

    def test_tiers_monotonic(self):
        table = get_tier_table()
        for equipment_type, options in table.tiers.items():
            good, better, best = (options[t] for t in UpgradeTier)
            assert good.cost_low <= better.cost_low <= best.cost_low
            if equipment_type == EquipmentType.WINDOWS:
                assert good.target >= better.target >= best.target
            else:
                assert good.target <= better.target <= best.target


class TestGenerateUpgrades:
    def test_central_ac_tiers(self, db, config):
        ac = Equipment(type=AC, age_range=AgeRange.YEARS_10_TO_15)
        good, better, best = generate_upgrades(ac, MODERATE, 1500, config, db)

        assert [r.tier for r in (good, better, best)] == list(UpgradeTier)
        # 12 SEER today: $520/yr; 16 SEER: $390/yr
        assert good.annual_savings == pytest.approx(130.0)
        assert good.payback_years == pytest.approx(6250 / 130.0)
        assert good.tax_credit_eligible is False
        assert good.effective_payback_years == pytest.approx(good.payback_years)

        assert good.annual_savings < better.annual_savings < best.annual_savings

    def test_tax_credit_capped(self, db, config):
        ac = Equipment(type=AC, age_range=AgeRange.YEARS_10_TO_15)
        _, better, best = generate_upgrades(ac, MODERATE, 1500, config, db)

        assert better.tax_credit_amount == pytest.approx(600.0)
        assert best.tax_credit_amount == pytest.approx(2000.0)
        assert best.effective_payback_years == pytest.approx((12000 - 2000) / best.annual_savings)
        assert best.effective_payback_years < best.payback_years

    def test_credit_below_cap(self, db, config):
        insulation = Equipment(type=EquipmentType.INSULATION, age_range=AgeRange.YEARS_20_PLUS)
        good, better, _ = generate_upgrades(insulation, MODERATE, 1500, config, db)
        # 30% of the $2000 and $2750 midpoints, both under the $1200 cap
        assert good.tax_credit_amount == pytest.approx(600.0)
        assert better.tax_credit_amount == pytest.approx(825.0)

    def test_already_meets_tier(self, db, config):
        ac = Equipment(type=AC, estimated_efficiency=20)
        good, better, best = generate_upgrades(ac, MODERATE, 1500, config, db)

        assert good.already_meets_this_tier and better.already_meets_this_tier
        assert good.annual_savings == 0.0
        assert good.payback_years is None
        assert good.effective_payback_years is None
        assert not best.already_meets_this_tier
        assert best.annual_savings > 0

    def test_windows_direction(self, db, config):
        windows = Equipment(type=EquipmentType.WINDOWS, estimated_efficiency=0.25)
        good, better, best = generate_upgrades(windows, MODERATE, 1500, config, db)
        assert good.already_meets_this_tier
        assert not better.already_meets_this_tier
        assert best.annual_savings > better.annual_savings > 0

    def test_cost_midpoint(self, db, config):
        ac = Equipment(type=AC)
        good = generate_upgrades(ac, MODERATE, 1500, config, db)[0]
        assert good.cost_midpoint == pytest.approx(6250.0)


class TestPrioritizedUpgrades:
    def test_sorted_by_payback(self, db, config):
        home = Home(
            total_sqft=1500,
            climate_zone=MODERATE,
            equipment=[
                Equipment(type=EquipmentType.WASHER, age_range=AgeRange.YEARS_5_TO_10),
                Equipment(type=AC, age_range=AgeRange.YEARS_15_TO_20),
                Equipment(type=EquipmentType.FURNACE, age_range=AgeRange.YEARS_20_PLUS),
            ],
        )
        items = prioritized_upgrades(home, config, db)

        assert [i.equipment_type for i in items] == [EquipmentType.FURNACE, AC, EquipmentType.WASHER]
        paybacks = [i.payback_years for i in items]
        assert paybacks == sorted(paybacks)
        ac_item = items[1]
        assert ac_item.current_efficiency == 10.0
        assert ac_item.target_efficiency == 24.0
        assert ac_item.upgrade_cost == 7500
        assert ac_item.payback_years == pytest.approx(7500 / ac_item.annual_savings)

    def test_immaterial_savings_dropped(self, db, config):
        home = Home(
            total_sqft=1500,
            equipment=[
                Equipment(type=EquipmentType.THERMOSTAT, estimated_efficiency=3),
                Equipment(type=AC, estimated_efficiency=24),
            ],
        )
        assert prioritized_upgrades(home, config, db) == []

    def test_threshold_from_config(self, db):
        home = Home(
            total_sqft=1500,
            equipment=[Equipment(type=EquipmentType.WASHER, age_range=AgeRange.YEARS_5_TO_10)],
        )
        assert len(prioritized_upgrades(home, AuditConfig(), db)) == 1
        assert prioritized_upgrades(home, AuditConfig(materiality_threshold=50), db) == []

    def test_equipment_id_recorded(self, db, config):
        ac = Equipment(type=AC, age_range=AgeRange.YEARS_20_PLUS)
        items = prioritized_upgrades(Home(total_sqft=1500, equipment=[ac]), config, db)
        assert items[0].equipment_id == str(ac.id)
