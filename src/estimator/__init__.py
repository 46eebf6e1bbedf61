"""Home energy estimation: cost model, grading, upgrades and reports."""
from .config import AuditConfig, load_config
from .efficiency_db import EfficiencyDatabase, build_equipment, get_database, payback_years
from .energy import (
    actual_electricity_rate,
    appliance_upgrade_tip,
    bill_based_annual_kwh,
    effective_sqft,
    total_appliance_kwh,
    total_phantom_annual_kwh,
)
from .grading import grade, grade_from_ratio, weighted_efficiency_ratio
from .recommendations import generate_home_recommendations, generate_room_recommendations
from .report import battery_synergy, build_home_report, render_text_report, save_text_report
from .upgrades import generate_upgrades, prioritized_upgrades

__all__ = [
    "AuditConfig",
    "load_config",
    "EfficiencyDatabase",
    "build_equipment",
    "get_database",
    "payback_years",
    "actual_electricity_rate",
    "appliance_upgrade_tip",
    "bill_based_annual_kwh",
    "effective_sqft",
    "total_appliance_kwh",
    "total_phantom_annual_kwh",
    "grade",
    "grade_from_ratio",
    "weighted_efficiency_ratio",
    "generate_home_recommendations",
    "generate_room_recommendations",
    "battery_synergy",
    "build_home_report",
    "render_text_report",
    "save_text_report",
    "generate_upgrades",
    "prioritized_upgrades",
]
