"""Home audit schemas - enums, reference catalogs and Pydantic models."""
from .enums import (
    AgeRange,
    ApplianceCategory,
    ClimateZone,
    DetectionMethod,
    EfficiencyGrade,
    EquipmentType,
    InsulationQuality,
    SealingRating,
    UpgradeTier,
    WindowDirection,
    YearRange,
)
from .catalog import APPLIANCE_PROFILES, EQUIPMENT_PROFILES, appliance_profile, equipment_profile
from .home import Appliance, EnergyBill, EnvelopeInfo, Equipment, Home, Room, WindowInfo
from .results import (
    BatterySynergy,
    BulbLabelResult,
    ClassificationResult,
    EfficiencySpec,
    EquipmentLabelResult,
    HomeRecommendation,
    HomeReport,
    ParsedBill,
    RoomRecommendations,
    UpgradeItem,
    UpgradeRecommendation,
)

__all__ = [
    # Enums
    "AgeRange",
    "ApplianceCategory",
    "ClimateZone",
    "DetectionMethod",
    "EfficiencyGrade",
    "EquipmentType",
    "InsulationQuality",
    "SealingRating",
    "UpgradeTier",
    "WindowDirection",
    "YearRange",
    # Catalogs
    "APPLIANCE_PROFILES",
    "EQUIPMENT_PROFILES",
    "appliance_profile",
    "equipment_profile",
    # Home entities
    "Appliance",
    "EnergyBill",
    "EnvelopeInfo",
    "Equipment",
    "Home",
    "Room",
    "WindowInfo",
    # Results
    "BatterySynergy",
    "BulbLabelResult",
    "ClassificationResult",
    "EfficiencySpec",
    "EquipmentLabelResult",
    "HomeRecommendation",
    "HomeReport",
    "ParsedBill",
    "RoomRecommendations",
    "UpgradeItem",
    "UpgradeRecommendation",
]
