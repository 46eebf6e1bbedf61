"""Per-equipment Good/Better/Best upgrade options and the whole-home upgrade list.

Tier definitions come from upgrade_tiers.yaml. Savings are always measured
against the item's current rating; a tier whose target the item already
meets is kept in the output but marked and carries no savings.
"""
import logging
import math
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from schemas.catalog import meets_target
from schemas.enums import ClimateZone, EquipmentType, UpgradeTier
from schemas.home import Equipment, Home
from schemas.results import UpgradeItem, UpgradeRecommendation
from .config import AuditConfig
from .efficiency_db import SCHEMAS_DIR, EfficiencyDatabase, get_database, payback_years
from .energy import effective_sqft

logger = logging.getLogger(__name__)


# ============================================================================
# Tier Table
# ============================================================================

class TierOption(BaseModel):
    title: str
    upgrade_target: str
    target: float
    cost_low: float = Field(ge=0)
    cost_high: float = Field(ge=0)
    tax_credit_cap: Optional[float] = Field(default=None, ge=0)
    technology_note: Optional[str] = None

    @property
    def tax_credit_eligible(self) -> bool:
        return self.tax_credit_cap is not None


class TierTable(BaseModel):
    tax_credit_rate: float = Field(default=0.30, ge=0, le=1)
    tiers: Dict[EquipmentType, Dict[UpgradeTier, TierOption]] = Field(default_factory=dict)


def load_upgrade_tiers(path: Optional[Path] = None) -> TierTable:
    path = path or SCHEMAS_DIR / "upgrade_tiers.yaml"
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    # YAML keys are lowercase tier names
    tiers = {
        type_name: {UpgradeTier(name.title()): option for name, option in options.items()}
        for type_name, options in (raw.get("tiers") or {}).items()
    }
    return TierTable.model_validate({"tax_credit_rate": raw.get("tax_credit_rate", 0.30), "tiers": tiers})


@lru_cache(maxsize=1)
def get_tier_table() -> TierTable:
    return load_upgrade_tiers()


# ============================================================================
# Per-Equipment Tiers
# ============================================================================

def generate_upgrades(
    equipment: Equipment,
    climate_zone: ClimateZone,
    home_sqft: float,
    config: Optional[AuditConfig] = None,
    db: Optional[EfficiencyDatabase] = None,
    tier_table: Optional[TierTable] = None,
) -> List[UpgradeRecommendation]:
    """
    Good/Better/Best options for one piece of equipment.

    Args:
        equipment: Item to upgrade
        climate_zone: Home climate zone
        home_sqft: Conditioned floor area
        config: Rates; defaults to AuditConfig()
        db: Efficiency database; defaults to the packaged tables
        tier_table: Tier definitions; defaults to upgrade_tiers.yaml

    Returns:
        Recommendations in Good, Better, Best order. Empty when the type has
        no tier definitions.
    """
    config = config or AuditConfig()
    db = db or get_database()
    tier_table = tier_table or get_tier_table()

    options = tier_table.tiers.get(equipment.type)
    if not options:
        logger.warning(f"No upgrade tiers defined for {equipment.type.value}")
        return []

    current = db.current_efficiency(equipment)
    recommendations = []
    for tier in UpgradeTier:
        option = options.get(tier)
        if option is None:
            continue

        mid_cost = (option.cost_low + option.cost_high) / 2.0
        credit = 0.0
        if option.tax_credit_eligible:
            credit = min(tier_table.tax_credit_rate * mid_cost, option.tax_credit_cap)

        already_meets = meets_target(equipment.type, current, option.target)
        if already_meets:
            savings = 0.0
        else:
            savings = db.estimate_annual_savings(
                equipment.type, current, option.target, home_sqft, climate_zone, config
            )

        recommendations.append(UpgradeRecommendation(
            tier=tier,
            title=option.title,
            upgrade_target=option.upgrade_target,
            target_efficiency=option.target,
            cost_low=option.cost_low,
            cost_high=option.cost_high,
            annual_savings=savings,
            payback_years=payback_years(mid_cost, savings),
            tax_credit_eligible=option.tax_credit_eligible,
            tax_credit_amount=credit,
            effective_payback_years=payback_years(mid_cost - credit, savings),
            technology_note=option.technology_note,
            already_meets_this_tier=already_meets,
        ))

    return recommendations


# ============================================================================
# Whole-Home Upgrade List
# ============================================================================

def _payback_sort_key(item) -> float:
    return item.payback_years if item.payback_years is not None else math.inf


def prioritized_upgrades(
    home: Home,
    config: Optional[AuditConfig] = None,
    db: Optional[EfficiencyDatabase] = None,
) -> List[UpgradeItem]:
    """
    Best-in-class replacement for every piece of equipment, fastest payback
    first.

    Items saving no more than the materiality threshold are dropped. Items
    without a defined payback sort last.
    """
    config = config or AuditConfig()
    db = db or get_database()
    sqft = effective_sqft(home, config)

    items = []
    for equipment in home.equipment:
        spec = db.lookup(equipment.type, equipment.age_range)
        current = db.current_efficiency(equipment)
        savings = db.estimate_annual_savings(
            equipment.type, current, spec.best_in_class, sqft, home.climate_zone, config
        )
        if savings <= config.materiality_threshold:
            logger.debug(f"Skipping {equipment.type.value}: ${savings:.2f}/yr is below threshold")
            continue

        items.append(UpgradeItem(
            equipment_id=str(equipment.id),
            equipment_type=equipment.type,
            current_efficiency=current,
            target_efficiency=spec.best_in_class,
            annual_savings=savings,
            upgrade_cost=spec.upgrade_cost,
            payback_years=payback_years(spec.upgrade_cost, savings),
        ))

    items.sort(key=_payback_sort_key)
    return items
