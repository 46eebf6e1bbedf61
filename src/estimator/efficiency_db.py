"""Efficiency reference database and equipment operating cost model.

Reference data lives in YAML next to the schemas:
- efficiency_table.yaml: estimated / best-in-class / code-minimum ratings and
  upgrade cost per (equipment type, age band)
- cost_model.yaml: baseline annual energy use per type, climate multipliers
  and floor-area scaling per load kind

Lookups never fail: a missing (type, age) key falls back to the type's
`default` row, then to a neutral default spec.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field

from schemas.catalog import LABEL_UNITS_BY_TYPE, equipment_profile
from schemas.enums import AgeRange, ClimateZone, EquipmentType, Fuel, LoadKind
from schemas.home import Equipment
from schemas.results import EfficiencySpec, EquipmentLabelResult
from .config import AuditConfig

logger = logging.getLogger(__name__)

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"

DEFAULT_SPEC = EfficiencySpec(estimated=1.0, best_in_class=1.0, upgrade_cost=0.0, current_code_minimum=1.0)


# ============================================================================
# Cost Model
# ============================================================================

class Baseline(BaseModel):
    annual_use: float = Field(ge=0, description="kWh or therms per year for the reference home")
    reference_efficiency: float = Field(gt=0)


class LoadKindModel(BaseModel):
    area_scaled: bool = True
    climate: Dict[ClimateZone, float] = Field(default_factory=dict)


class CostModel(BaseModel):
    reference_sqft: float = Field(default=1500.0, gt=0)
    baselines: Dict[EquipmentType, Baseline] = Field(default_factory=dict)
    load_kinds: Dict[LoadKind, LoadKindModel] = Field(default_factory=dict)


def load_efficiency_table(path: Optional[Path] = None) -> Dict[EquipmentType, Dict[str, EfficiencySpec]]:
    """Load efficiency_table.yaml into {type: {age label or 'default': spec}}."""
    path = path or SCHEMAS_DIR / "efficiency_table.yaml"
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    table = {}
    for type_name, rows in raw.items():
        table[EquipmentType(type_name)] = {
            age: EfficiencySpec.model_validate(row) for age, row in rows.items()
        }
    return table


def load_cost_model(path: Optional[Path] = None) -> CostModel:
    path = path or SCHEMAS_DIR / "cost_model.yaml"
    with open(path, encoding="utf-8") as f:
        return CostModel.model_validate(yaml.safe_load(f) or {})


# ============================================================================
# Database
# ============================================================================

class EfficiencyDatabase:
    """Deterministic lookup of efficiency specs and annual cost estimates."""

    def __init__(self, table: Dict[EquipmentType, Dict[str, EfficiencySpec]], cost_model: CostModel):
        self.table = table
        self.cost_model = cost_model

    @classmethod
    def from_files(cls, table_path: Optional[Path] = None, cost_model_path: Optional[Path] = None) -> "EfficiencyDatabase":
        return cls(load_efficiency_table(table_path), load_cost_model(cost_model_path))

    def lookup(self, equipment_type: EquipmentType, age: AgeRange) -> EfficiencySpec:
        rows = self.table.get(equipment_type, {})
        spec = rows.get(age.value) or rows.get("default")
        if spec is None:
            logger.debug(f"No efficiency spec for {equipment_type.value} / {age.value}, using neutral default")
            return DEFAULT_SPEC
        return spec

    def current_efficiency(self, equipment: Equipment) -> float:
        """Recorded rating, or the age-band estimate when it is unknown (0)."""
        if equipment.estimated_efficiency > 0:
            return equipment.estimated_efficiency
        return self.lookup(equipment.type, equipment.age_range).estimated

    def estimate_annual_cost(
        self,
        equipment_type: EquipmentType,
        efficiency: float,
        home_sqft: float,
        climate_zone: ClimateZone,
        config: Optional[AuditConfig] = None,
    ) -> float:
        """
        Annual operating cost in dollars for one piece of equipment.

        Baseline use is scaled by floor area (for area-driven loads) and a
        climate multiplier, then divided by the rating relative to the
        reference rating. For inverted units (U-factor) the rating
        multiplies instead, so cost rises with U-factor.

        Args:
            equipment_type: Type of equipment
            efficiency: Rating in the type's unit; <= 0 means unknown and
                the reference rating is used
            home_sqft: Conditioned floor area; <= 0 uses the config default
            climate_zone: Home climate zone
            config: Rates; defaults to AuditConfig()

        Returns:
            Cost in $/yr, never negative
        """
        config = config or AuditConfig()
        baseline = self.cost_model.baselines.get(equipment_type)
        if baseline is None:
            logger.warning(f"No cost baseline for {equipment_type.value}; estimating $0")
            return 0.0

        profile = equipment_profile(equipment_type)
        load = self.cost_model.load_kinds.get(profile.load_kind, LoadKindModel())

        rating = efficiency if efficiency > 0 else baseline.reference_efficiency
        if profile.inverted:
            efficiency_factor = rating / baseline.reference_efficiency
        else:
            efficiency_factor = baseline.reference_efficiency / rating

        area_factor = 1.0
        if load.area_scaled:
            sqft = home_sqft if home_sqft > 0 else config.default_home_sqft
            area_factor = sqft / self.cost_model.reference_sqft

        climate_factor = load.climate.get(climate_zone, 1.0)
        annual_use = baseline.annual_use * area_factor * climate_factor * efficiency_factor
        rate = config.gas_rate if profile.fuel == Fuel.GAS else config.electricity_rate
        return max(annual_use * rate, 0.0)

    def estimate_annual_savings(
        self,
        equipment_type: EquipmentType,
        current_efficiency: float,
        target_efficiency: float,
        home_sqft: float,
        climate_zone: ClimateZone,
        config: Optional[AuditConfig] = None,
    ) -> float:
        """Cost at the current rating minus cost at the target, clamped to >= 0."""
        current = self.estimate_annual_cost(equipment_type, current_efficiency, home_sqft, climate_zone, config)
        target = self.estimate_annual_cost(equipment_type, target_efficiency, home_sqft, climate_zone, config)
        return max(current - target, 0.0)


def payback_years(upgrade_cost: float, annual_savings: float) -> Optional[float]:
    """Simple payback; None when there are no savings to recoup the cost."""
    if annual_savings <= 0:
        return None
    return upgrade_cost / annual_savings


@lru_cache(maxsize=1)
def get_database() -> EfficiencyDatabase:
    """Shared database built from the packaged YAML tables."""
    return EfficiencyDatabase.from_files()


# ============================================================================
# Equipment from a scan hand-off
# ============================================================================

def build_equipment(
    equipment_type: EquipmentType,
    age_range: AgeRange,
    label: Optional[EquipmentLabelResult] = None,
    db: Optional[EfficiencyDatabase] = None,
    notes: Optional[str] = None,
) -> Equipment:
    """
    Create an Equipment record with reference ratings filled in.

    The label's efficiency value is used when its unit describes this type
    (e.g. an AFUE reading for a furnace); otherwise the age-band estimate is.
    """
    db = db or get_database()
    spec = db.lookup(equipment_type, age_range)

    efficiency = spec.estimated
    manufacturer = model_number = None
    if label is not None:
        manufacturer = label.manufacturer
        model_number = label.model_number
        if label.efficiency_value and label.efficiency_type in LABEL_UNITS_BY_TYPE.get(equipment_type, ()):
            efficiency = label.efficiency_value
        elif label.efficiency_value:
            logger.info(
                f"Ignoring {label.efficiency_type} reading on a {equipment_type.value} label; "
                f"using age estimate {spec.estimated}"
            )

    return Equipment(
        type=equipment_type,
        manufacturer=manufacturer,
        model_number=model_number,
        age_range=age_range,
        estimated_efficiency=efficiency,
        current_code_minimum=spec.current_code_minimum,
        best_in_class=spec.best_in_class,
        notes=notes,
    )
