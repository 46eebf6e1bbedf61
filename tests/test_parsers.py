"""Tests for OCR text parsers and classifier label mapping."""
import pytest
from datetime import date

from parsers.bulb_label import parse_bulb_text
from parsers.classification import map_classifications, map_identifier
from parsers.common import contains_term, parse_number
from parsers.equipment_label import parse_equipment_label
from parsers.utility_bill import (
    extract_billing_dates,
    extract_rate,
    extract_total_cost,
    extract_utility_name,
    parse_bill_text,
)
from schemas.enums import ApplianceCategory

TODAY = date(2026, 3, 1)


class TestCommon:
    def test_parse_number_strips_commas(self):
        assert parse_number("1,234.5") == 1234.5

    def test_parse_number_failure(self):
        assert parse_number("1.2.3") is None

    def test_contains_term_is_plain_substring(self):
        assert contains_term("GE Appliances", "ge")
        assert contains_term("TRANE4TTR6036J1000A", "trane")
        assert not contains_term("Rheem", "ruud")


class TestEquipmentLabel:
    def test_full_rating_plate(self):
        result = parse_equipment_label(
            "TRANE XR16\nModel TUD2B080A9V3VB\nSEER 16.00\nCooling 36,000 BTU/h"
        )
        assert result.manufacturer == "Trane"
        assert result.model_number == "TUD2B080A9V3VB"
        assert result.efficiency_value == 16.0
        assert result.efficiency_type == "SEER"
        assert result.btu_capacity == 36000

    def test_pattern_order_beats_document_order(self):
        result = parse_equipment_label("EER 12.2  SEER 14.5")
        assert result.efficiency_type == "SEER"
        assert result.efficiency_value == 14.5

    def test_afue(self):
        result = parse_equipment_label("Carrier Weathermaker AFUE 96%")
        assert result.manufacturer == "Carrier"
        assert result.efficiency_type == "AFUE"
        assert result.efficiency_value == 96.0

    def test_seer2_reported_as_seer(self):
        result = parse_equipment_label("SEER2 15.2")
        assert result.efficiency_type == "SEER"
        assert result.efficiency_value == 15.2

    def test_manufacturer_in_run_on_token(self):
        result = parse_equipment_label("MODEL TRANE4TTR6036J1000A")
        assert result.manufacturer == "Trane"
        assert result.model_number == "TRANE4TTR6036J1000A"

    def test_manufacturer_list_order_wins(self):
        # "ge" is listed ahead of "general electric"
        assert parse_equipment_label("General Electric water heater").manufacturer == "Ge"

    def test_long_model_token_truncated(self):
        text = "ABCDEFGHIJ0123456789KLMNOPQR"
        assert parse_equipment_label(text).model_number == text[:20]

    def test_btu_with_period_separator(self):
        assert parse_equipment_label("24.000 BTU").btu_capacity == 24000

    def test_model_number_starts_at_first_letter(self):
        assert parse_equipment_label("4TTR6036J1000A").model_number == "TTR6036J1000A"
        assert parse_equipment_label("46036-1000").model_number is None

    def test_empty_text(self):
        result = parse_equipment_label("")
        assert result.manufacturer is None
        assert result.model_number is None
        assert result.efficiency_value is None
        assert result.btu_capacity is None


class TestUtilityBill:
    def test_labeled_total_and_derived_rate(self):
        result = parse_bill_text("Amount Due: $142.37\nTotal usage 1,234 kWh", today=TODAY)
        assert result.total_cost == 142.37
        assert result.total_kwh == 1234.0
        assert result.rate_per_kwh == pytest.approx(0.1154, abs=1e-4)

    def test_largest_amount_fallback(self):
        text = "Previous balance $98.10\nCurrent charges $120.55\nAccount $15,000.00"
        assert extract_total_cost(text) == 120.55

    def test_no_dollar_amounts(self):
        assert extract_total_cost("No charges this month") is None

    def test_cents_rate_preferred(self):
        assert extract_rate("Energy 13.5¢/kWh or $0.20/kWh") == pytest.approx(0.135)

    def test_dollar_rate(self):
        assert extract_rate("Energy charge $0.21 per kWh") == pytest.approx(0.21)

    def test_printed_rate_not_overridden(self):
        result = parse_bill_text("Amount Due $100.00\n500 kWh\n12 cents per kWh", today=TODAY)
        assert result.rate_per_kwh == pytest.approx(0.12)

    def test_utility_name(self):
        assert extract_utility_name("Pacific Gas and Electric Company") == "Pacific Gas and Electric"
        assert extract_utility_name("Your PG&Eaccount summary") == "PG&E"
        assert extract_utility_name("Monthly statement") is None

    def test_billing_dates_filtered_and_sorted(self):
        text = "Next read 12/01/2027. Service 02/04/2026 back to 01/05/2026. Paid 03/15/2020."
        start, end = extract_billing_dates(text, today=TODAY)
        assert start == date(2026, 1, 5)
        assert end == date(2026, 2, 4)

    def test_named_month_dates(self):
        start, end = extract_billing_dates("Billing period Jan 5, 2026 to Feb 4, 2026", today=TODAY)
        assert start == date(2026, 1, 5)
        assert end == date(2026, 2, 4)

    def test_single_date(self):
        start, end = extract_billing_dates("Statement date 02-10-2026", today=TODAY)
        assert start == date(2026, 2, 10)
        assert end is None

    def test_empty_text(self):
        result = parse_bill_text("", today=TODAY)
        assert result.total_kwh is None
        assert result.total_cost is None
        assert result.rate_per_kwh is None
        assert result.billing_period_start is None


class TestBulbLabel:
    def test_led_bulb(self):
        result = parse_bulb_text("LED 9W (60W equivalent) 800 lumens 2700K")
        assert result.wattage == 9.0
        assert result.lumens == 800
        assert result.color_temp == 2700
        assert result.bulb_type == ApplianceCategory.LED_BULB

    def test_color_temp_out_of_range(self):
        assert parse_bulb_text("1500K").color_temp is None

    def test_type_priority(self):
        # "led" wins even when halogen is also mentioned
        assert parse_bulb_text("Halogen replacement LED").bulb_type == ApplianceCategory.LED_BULB
        assert parse_bulb_text("Compact Fluorescent 13 watts").bulb_type == ApplianceCategory.CFL_BULB
        assert parse_bulb_text("Soft white incandescent").bulb_type == ApplianceCategory.INCANDESCENT_BULB

    def test_watts_word(self):
        assert parse_bulb_text("Compact Fluorescent 13 watts").wattage == 13.0

    def test_nothing_found(self):
        result = parse_bulb_text("")
        assert result.wattage is None
        assert result.bulb_type is None


class TestClassification:
    def test_exact_and_substring(self):
        assert map_identifier("refrigerator") == ApplianceCategory.REFRIGERATOR
        assert map_identifier("dishwasher, dish washing machine") == ApplianceCategory.DISHWASHER
        assert map_identifier("zebra") is None

    def test_top_results_deduplicated(self):
        results = map_classifications([
            ("television", 0.6),
            ("screen, CRT screen", 0.2),
            ("remote control", 0.1),
            ("loudspeaker", 0.08),
        ])
        assert [r.category for r in results] == [ApplianceCategory.TELEVISION, ApplianceCategory.SOUNDBAR]

    def test_low_confidence_skipped(self):
        results = map_classifications([("refrigerator", 0.9), ("microwave", 0.05)])
        assert [r.category for r in results] == [ApplianceCategory.REFRIGERATOR]

    def test_top_k_limit(self):
        results = map_classifications([
            ("refrigerator", 0.4),
            ("microwave", 0.3),
            ("toaster", 0.2),
            ("laptop", 0.1),
        ])
        assert len(results) == 3

    def test_fallback_to_other(self):
        results = map_classifications([("zebra", 0.9)])
        assert len(results) == 1
        assert results[0].category == ApplianceCategory.OTHER
        assert results[0].confidence == 0.0
        assert results[0].raw_identifier == "zebra"

    def test_empty_observations(self):
        results = map_classifications([])
        assert results[0].raw_identifier == "unknown"
