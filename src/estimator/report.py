"""Whole-home report aggregation and plain-text rendering."""
import logging
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from schemas.home import Home
from schemas.results import BatterySynergy, HomeReport, RoomRecommendations
from .config import AuditConfig
from .efficiency_db import EfficiencyDatabase, get_database
from .energy import (
    actual_electricity_rate,
    bill_based_annual_kwh,
    effective_sqft,
    total_appliance_kwh,
    total_phantom_annual_kwh,
)
from .grading import grade, weighted_efficiency_ratio
from .recommendations import generate_home_recommendations, generate_room_recommendations
from .upgrades import prioritized_upgrades

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

# ~5 kW of base load per 1500 sq ft
BASE_LOAD_KW_PER_SQFT = 5.0 / 1500.0
DEFAULT_SAVINGS_RATIO = 0.15
LOAD_REDUCTION_FACTOR = 0.6
# ~50 grid-event hours a year at $2-$5/kWh
EXPORT_REVENUE_LOW_PER_KW = 50
EXPORT_REVENUE_HIGH_PER_KW = 250


def battery_synergy(sqft: float, total_current_cost: float, total_savings: float) -> BatterySynergy:
    """
    Base load freed by the upgrades, and its value as extra battery
    export capacity during grid price spikes.

    With no computed savings a 15% reduction is assumed.
    """
    current = sqft * BASE_LOAD_KW_PER_SQFT
    if total_savings > 0:
        ratio = total_savings / max(total_current_cost, 1.0)
    else:
        ratio = DEFAULT_SAVINGS_RATIO
    upgraded = current * (1.0 - ratio * LOAD_REDUCTION_FACTOR)
    gain = max(current - upgraded, 0.0)
    return BatterySynergy(
        current_base_load_kw=current,
        upgraded_base_load_kw=max(upgraded, 0.0),
        export_gain_kw=gain,
        export_revenue_low=int(gain * EXPORT_REVENUE_LOW_PER_KW),
        export_revenue_high=int(gain * EXPORT_REVENUE_HIGH_PER_KW),
    )


def build_home_report(
    home: Home,
    config: Optional[AuditConfig] = None,
    db: Optional[EfficiencyDatabase] = None,
) -> HomeReport:
    """
    Grade, cost totals, upgrade list and tips for a home.

    Current cost uses each item's resolved rating; upgraded cost assumes
    every item is replaced with best-in-class.
    """
    config = config or AuditConfig()
    db = db or get_database()
    sqft = effective_sqft(home, config)

    total_current = 0.0
    total_upgraded = 0.0
    for equipment in home.equipment:
        spec = db.lookup(equipment.type, equipment.age_range)
        total_current += db.estimate_annual_cost(
            equipment.type, db.current_efficiency(equipment), sqft, home.climate_zone, config
        )
        total_upgraded += db.estimate_annual_cost(
            equipment.type, spec.best_in_class, sqft, home.climate_zone, config
        )

    ratio = weighted_efficiency_ratio(home.equipment, db)
    total_savings = max(total_current - total_upgraded, 0.0)
    report = HomeReport(
        home_name=home.name,
        address=home.address,
        total_sqft=home.computed_total_sqft,
        climate_zone=home.climate_zone.value,
        grade=grade(home.equipment, db),
        efficiency_ratio=ratio,
        equipment_count=len(home.equipment),
        total_current_cost=total_current,
        total_upgraded_cost=total_upgraded,
        total_savings=total_savings,
        upgrades=prioritized_upgrades(home, config, db),
        recommendations=generate_home_recommendations(home, config),
        room_recommendations=[
            RoomRecommendations(room_name=room.name, recommendations=generate_room_recommendations(room))
            for room in home.rooms
        ],
        battery=battery_synergy(sqft, total_current, total_savings),
        appliance_annual_kwh=total_appliance_kwh(home),
        phantom_annual_kwh=total_phantom_annual_kwh(home),
        bill_based_annual_kwh=bill_based_annual_kwh(home),
        electricity_rate=actual_electricity_rate(home, config),
    )
    logger.info(
        f"Report for '{home.name}': grade {report.grade.value}, "
        f"${report.total_savings:.0f}/yr potential savings, {len(report.upgrades)} upgrade(s)"
    )
    return report


def format_payback(years: Optional[float]) -> str:
    if years is None:
        return "N/A"
    return f"{years:.1f} yr payback"


def render_text_report(report: HomeReport, template_dir: Optional[Path] = None) -> str:
    """
    Render the shareable plain-text report.

    Args:
        report: Aggregated home report
        template_dir: Directory containing Jinja2 templates.
                      Defaults to the templates directory in this package.
    """
    env = Environment(
        loader=FileSystemLoader(template_dir or TEMPLATE_DIR),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["payback"] = format_payback

    template = env.get_template("home-report.txt.j2")
    context = report.model_dump(mode="json")
    context["grade_summary"] = report.grade.summary
    return template.render(**context)


def save_text_report(report: HomeReport, output_path: Path) -> Path:
    text = render_text_report(report)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text)
    return output_path
