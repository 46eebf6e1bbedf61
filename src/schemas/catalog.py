"""Static reference catalogs for appliance categories and equipment types.

Each enum member maps to an immutable profile of constants. The tables are
built once at import time and never mutated.
"""
from dataclasses import dataclass
from typing import Dict

from .enums import ApplianceCategory, CategoryGroup, EquipmentType, Fuel, LoadKind


# ============================================================================
# Appliance Categories
# ============================================================================

@dataclass(frozen=True)
class ApplianceProfile:
    """Default operating assumptions for an appliance category."""
    default_wattage: float
    default_hours_per_day: float
    group: CategoryGroup
    phantom_load_relevant: bool = False
    phantom_watts: float = 0.0

    @property
    def is_lighting(self) -> bool:
        return self.group == CategoryGroup.LIGHTING


_A = ApplianceCategory
_G = CategoryGroup

APPLIANCE_PROFILES: Dict[ApplianceCategory, ApplianceProfile] = {
    _A.TELEVISION: ApplianceProfile(100, 5, _G.ENTERTAINMENT, True, 5),
    _A.GAMING_CONSOLE: ApplianceProfile(150, 2, _G.ENTERTAINMENT, True, 10),
    _A.SOUNDBAR: ApplianceProfile(30, 4, _G.ENTERTAINMENT, True, 3),
    _A.STREAMING_DEVICE: ApplianceProfile(5, 5, _G.ENTERTAINMENT, True, 2),
    _A.DESKTOP: ApplianceProfile(200, 6, _G.COMPUTING, True, 5),
    _A.LAPTOP: ApplianceProfile(50, 6, _G.COMPUTING, True, 2),
    _A.MONITOR: ApplianceProfile(30, 6, _G.COMPUTING, True, 2),
    # Always on, so it never sits in standby
    _A.ROUTER: ApplianceProfile(12, 24, _G.COMPUTING, True, 0),
    _A.REFRIGERATOR: ApplianceProfile(150, 24, _G.KITCHEN),
    _A.FREEZER: ApplianceProfile(100, 24, _G.KITCHEN),
    _A.DISHWASHER: ApplianceProfile(1800, 1, _G.KITCHEN),
    _A.MICROWAVE: ApplianceProfile(1100, 0.3, _G.KITCHEN, True, 3),
    _A.OVEN: ApplianceProfile(2500, 1, _G.KITCHEN),
    _A.COFFEE_MAKER: ApplianceProfile(900, 0.5, _G.KITCHEN, True, 2),
    _A.TOASTER: ApplianceProfile(1200, 0.2, _G.KITCHEN, True, 1),
    _A.LED_BULB: ApplianceProfile(9, 5, _G.LIGHTING),
    _A.CFL_BULB: ApplianceProfile(13, 5, _G.LIGHTING),
    _A.INCANDESCENT_BULB: ApplianceProfile(60, 5, _G.LIGHTING),
    _A.FLOODLIGHT: ApplianceProfile(65, 4, _G.LIGHTING),
    _A.LAMP_FIXTURE: ApplianceProfile(60, 5, _G.LIGHTING),
    _A.CEILING_FAN: ApplianceProfile(75, 8, _G.OTHER),
    _A.PORTABLE_HEATER: ApplianceProfile(1500, 4, _G.OTHER),
    _A.DEHUMIDIFIER: ApplianceProfile(300, 12, _G.OTHER),
    _A.POOL_PUMP: ApplianceProfile(1500, 8, _G.OTHER),
    _A.EV_CHARGER: ApplianceProfile(7200, 3, _G.OTHER),
    _A.OTHER: ApplianceProfile(100, 2, _G.OTHER),
}


def appliance_profile(category: ApplianceCategory) -> ApplianceProfile:
    """Profile for a category; unknown values fall back to ``OTHER``."""
    return APPLIANCE_PROFILES.get(category, APPLIANCE_PROFILES[ApplianceCategory.OTHER])


# ============================================================================
# Equipment Types
# ============================================================================

@dataclass(frozen=True)
class EquipmentProfile:
    """Rating unit, grading weight and load model for an equipment type.

    ``worst_case`` is the industry-worst rating used as the floor of the
    grading range. ``inverted`` marks units where a lower value is better
    (U-factor).
    """
    efficiency_unit: str
    energy_share_weight: float
    worst_case: float
    load_kind: LoadKind
    fuel: Fuel
    inverted: bool = False


_E = EquipmentType

EQUIPMENT_PROFILES: Dict[EquipmentType, EquipmentProfile] = {
    _E.CENTRAL_AC: EquipmentProfile("SEER", 0.45, 8.0, LoadKind.COOLING, Fuel.ELECTRIC),
    _E.HEAT_PUMP: EquipmentProfile("SEER", 0.45, 8.0, LoadKind.CONDITIONING, Fuel.ELECTRIC),
    _E.FURNACE: EquipmentProfile("% AFUE", 0.45, 60.0, LoadKind.HEATING, Fuel.GAS),
    _E.WATER_HEATER: EquipmentProfile("UEF", 0.18, 0.45, LoadKind.WATER, Fuel.GAS),
    _E.WATER_HEATER_TANKLESS: EquipmentProfile("UEF", 0.18, 0.80, LoadKind.WATER, Fuel.GAS),
    _E.WINDOW_UNIT: EquipmentProfile("SEER", 0.12, 7.0, LoadKind.COOLING, Fuel.ELECTRIC),
    _E.THERMOSTAT: EquipmentProfile("type", 0.12, 0.0, LoadKind.CONDITIONING, Fuel.ELECTRIC),
    _E.INSULATION: EquipmentProfile("R-value", 0.25, 5.0, LoadKind.CONDITIONING, Fuel.ELECTRIC),
    _E.WINDOWS: EquipmentProfile("U-factor", 0.25, 1.2, LoadKind.CONDITIONING, Fuel.ELECTRIC, inverted=True),
    _E.WASHER: EquipmentProfile("IMEF", 0.12, 0.8, LoadKind.LAUNDRY, Fuel.ELECTRIC),
    _E.DRYER: EquipmentProfile("CEF", 0.12, 2.0, LoadKind.LAUNDRY, Fuel.ELECTRIC),
}


def equipment_profile(equipment_type: EquipmentType) -> EquipmentProfile:
    return EQUIPMENT_PROFILES[equipment_type]


def meets_target(equipment_type: EquipmentType, current: float, target: float) -> bool:
    """Whether ``current`` already meets ``target`` in the unit's direction."""
    if EQUIPMENT_PROFILES[equipment_type].inverted:
        return current <= target
    return current >= target


# Efficiency label units recognized on rating plates, mapped to the types
# whose rating they describe.
LABEL_UNITS_BY_TYPE: Dict[EquipmentType, tuple] = {
    _E.CENTRAL_AC: ("SEER",),
    _E.HEAT_PUMP: ("SEER",),
    _E.WINDOW_UNIT: ("SEER", "EER", "CEER"),
    _E.FURNACE: ("AFUE",),
    _E.WATER_HEATER: ("UEF",),
    _E.WATER_HEATER_TANKLESS: ("UEF",),
    _E.THERMOSTAT: (),
    _E.INSULATION: ("R-value",),
    _E.WINDOWS: ("U-factor",),
    _E.WASHER: ("IMEF",),
    _E.DRYER: ("CEF",),
}
