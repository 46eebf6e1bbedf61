"""Shared enums used across the audit models, parsers and estimator."""
from enum import Enum


class ApplianceCategory(str, Enum):
    # Entertainment
    TELEVISION = "Television"
    GAMING_CONSOLE = "Gaming Console"
    SOUNDBAR = "Soundbar"
    STREAMING_DEVICE = "Streaming Device"

    # Computing
    DESKTOP = "Desktop Computer"
    LAPTOP = "Laptop"
    MONITOR = "Monitor"
    ROUTER = "Router/Modem"

    # Kitchen
    REFRIGERATOR = "Refrigerator"
    FREEZER = "Freezer"
    DISHWASHER = "Dishwasher"
    MICROWAVE = "Microwave"
    OVEN = "Oven/Range"
    COFFEE_MAKER = "Coffee Maker"
    TOASTER = "Toaster/Toaster Oven"

    # Lighting
    LED_BULB = "LED Bulb"
    CFL_BULB = "CFL Bulb"
    INCANDESCENT_BULB = "Incandescent Bulb"
    FLOODLIGHT = "Floodlight"
    LAMP_FIXTURE = "Lamp/Fixture"

    # Other
    CEILING_FAN = "Ceiling Fan"
    PORTABLE_HEATER = "Portable Heater"
    DEHUMIDIFIER = "Dehumidifier"
    POOL_PUMP = "Pool Pump"
    EV_CHARGER = "EV Charger"
    OTHER = "Other"


class CategoryGroup(str, Enum):
    ENTERTAINMENT = "Entertainment"
    COMPUTING = "Computing"
    KITCHEN = "Kitchen"
    LIGHTING = "Lighting"
    OTHER = "Other"


class EquipmentType(str, Enum):
    CENTRAL_AC = "Central AC"
    HEAT_PUMP = "Heat Pump"
    FURNACE = "Furnace"
    WATER_HEATER = "Water Heater (Tank)"
    WATER_HEATER_TANKLESS = "Water Heater (Tankless)"
    WINDOW_UNIT = "Window AC Unit"
    THERMOSTAT = "Thermostat"
    INSULATION = "Insulation"
    WINDOWS = "Windows"
    WASHER = "Washer"
    DRYER = "Dryer"


class LoadKind(str, Enum):
    """What part of the home's energy use a piece of equipment drives."""
    COOLING = "cooling"
    HEATING = "heating"
    CONDITIONING = "conditioning"
    WATER = "water"
    LAUNDRY = "laundry"


class Fuel(str, Enum):
    ELECTRIC = "electric"
    GAS = "gas"


class AgeRange(str, Enum):
    YEARS_0_TO_5 = "0 to 5 years"
    YEARS_5_TO_10 = "5 to 10 years"
    YEARS_10_TO_15 = "10 to 15 years"
    YEARS_15_TO_20 = "15 to 20 years"
    YEARS_20_PLUS = "20+ years"

    @property
    def short_label(self) -> str:
        return {
            AgeRange.YEARS_0_TO_5: "< 5 yr",
            AgeRange.YEARS_5_TO_10: "5-10 yr",
            AgeRange.YEARS_10_TO_15: "10-15 yr",
            AgeRange.YEARS_15_TO_20: "15-20 yr",
            AgeRange.YEARS_20_PLUS: "20+ yr",
        }[self]


class YearRange(str, Enum):
    PRE_1970 = "Pre-1970"
    Y1970_TO_1989 = "1970 to 1989"
    Y1990_TO_2005 = "1990 to 2005"
    Y2006_TO_2015 = "2006 to 2015"
    Y2016_PLUS = "2016+"


class ClimateZone(str, Enum):
    HOT = "Hot"
    MODERATE = "Moderate"
    COLD = "Cold"


class DetectionMethod(str, Enum):
    MANUAL = "manual"
    CAMERA = "camera"
    OCR = "ocr"


class WindowDirection(str, Enum):
    NORTH = "North"
    EAST = "East"
    SOUTH = "South"
    WEST = "West"


class InsulationQuality(str, Enum):
    POOR = "Poor"
    AVERAGE = "Average"
    GOOD = "Good"
    UNKNOWN = "Unknown"


class SealingRating(str, Enum):
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class BasementInsulation(str, Enum):
    UNINSULATED = "Uninsulated"
    PARTIAL = "Partial"
    FULL = "Full"


class UpgradeTier(str, Enum):
    GOOD = "Good"
    BETTER = "Better"
    BEST = "Best"


class RecommendationCategory(str, Enum):
    BEHAVIORAL = "behavioral"
    EQUIPMENT = "equipment"
    ENVELOPE = "envelope"


class EfficiencyGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def color(self) -> str:
        return GRADE_COLORS[self]

    @property
    def summary(self) -> str:
        return GRADE_SUMMARIES[self]


GRADE_COLORS = {
    EfficiencyGrade.A: "green",
    EfficiencyGrade.B: "blue",
    EfficiencyGrade.C: "yellow",
    EfficiencyGrade.D: "orange",
    EfficiencyGrade.F: "red",
}

GRADE_SUMMARIES = {
    EfficiencyGrade.A: "Excellent efficiency. Your home is near best-in-class.",
    EfficiencyGrade.B: "Good efficiency with some room for improvement.",
    EfficiencyGrade.C: "Average efficiency. Several upgrades would help.",
    EfficiencyGrade.D: "Below average. Significant upgrades recommended.",
    EfficiencyGrade.F: "Poor efficiency. Major upgrades needed for savings.",
}


# Fallback rates used when neither configuration nor a bill supplies one
DEFAULT_ELECTRICITY_RATE = 0.16  # $/kWh
DEFAULT_GAS_RATE = 1.50  # $/therm
