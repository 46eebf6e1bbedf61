"""Pydantic models for parser output and computed audit results.

Everything here is ephemeral: built on demand from the current Home state and
never persisted.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import (
    ApplianceCategory,
    EfficiencyGrade,
    EquipmentType,
    RecommendationCategory,
    UpgradeTier,
)


# ============================================================================
# Parser Output
# ============================================================================

class EquipmentLabelResult(BaseModel):
    """Fields recognized on an equipment rating plate or EnergyGuide label."""
    manufacturer: Optional[str] = Field(default=None, description="Title-cased manufacturer name")
    model_number: Optional[str] = Field(default=None)
    efficiency_value: Optional[float] = Field(default=None)
    efficiency_type: Optional[str] = Field(default=None, description="SEER, AFUE, UEF, etc.")
    btu_capacity: Optional[int] = Field(default=None)
    raw_text: str = Field(default="")


class ParsedBill(BaseModel):
    """Fields recognized on a utility bill."""
    utility_name: Optional[str] = Field(default=None)
    billing_period_start: Optional[date] = Field(default=None)
    billing_period_end: Optional[date] = Field(default=None)
    total_kwh: Optional[float] = Field(default=None)
    total_cost: Optional[float] = Field(default=None)
    rate_per_kwh: Optional[float] = Field(default=None)
    raw_text: str = Field(default="")


class BulbLabelResult(BaseModel):
    """Fields recognized on a light bulb base or packaging."""
    wattage: Optional[float] = Field(default=None)
    lumens: Optional[int] = Field(default=None)
    color_temp: Optional[int] = Field(default=None, description="Kelvin")
    bulb_type: Optional[ApplianceCategory] = Field(default=None)
    raw_text: str = Field(default="")


class ClassificationResult(BaseModel):
    """Image classifier label mapped onto an appliance category."""
    category: ApplianceCategory
    confidence: float = Field(ge=0, le=1)
    raw_identifier: str


# ============================================================================
# Efficiency Reference
# ============================================================================

class EfficiencySpec(BaseModel):
    """Reference ratings for one equipment type and age band."""
    estimated: float = Field(description="Typical rating for equipment of this age")
    best_in_class: float
    upgrade_cost: float = Field(ge=0, description="Installed cost of a best-in-class replacement")
    current_code_minimum: float


# ============================================================================
# Upgrades and Recommendations
# ============================================================================

class UpgradeRecommendation(BaseModel):
    """One Good/Better/Best upgrade option for a piece of equipment."""
    tier: UpgradeTier
    title: str
    upgrade_target: str = Field(description="Human label of the target rating")
    target_efficiency: float
    cost_low: float = Field(ge=0)
    cost_high: float = Field(ge=0)
    annual_savings: float = Field(default=0.0, ge=0)
    payback_years: Optional[float] = Field(default=None)
    tax_credit_eligible: bool = Field(default=False)
    tax_credit_amount: float = Field(default=0.0, ge=0)
    effective_payback_years: Optional[float] = Field(default=None)
    technology_note: Optional[str] = Field(default=None)
    already_meets_this_tier: bool = Field(default=False)

    @property
    def cost_midpoint(self) -> float:
        return (self.cost_low + self.cost_high) / 2.0


class UpgradeItem(BaseModel):
    """Whole-home upgrade list entry: replace one item with best-in-class."""
    equipment_id: str
    equipment_type: EquipmentType
    current_efficiency: float
    target_efficiency: float
    annual_savings: float
    upgrade_cost: float
    payback_years: Optional[float] = Field(default=None)


class HomeRecommendation(BaseModel):
    """Home-level tip not tied to a specific piece of equipment."""
    category: RecommendationCategory
    title: str
    detail: str
    estimated_savings: Optional[str] = Field(default=None, description="Display text, e.g. '$40/yr'")
    annual_savings: Optional[float] = Field(default=None)
    cost: Optional[float] = Field(default=None)
    payback_years: Optional[float] = Field(default=None)


class ApplianceUpgradeTip(BaseModel):
    """Replacement suggestion for a single appliance."""
    title: str
    detail: str
    annual_savings: float = Field(default=0.0, ge=0)
    savings_text: Optional[str] = Field(default=None)


# ============================================================================
# Report
# ============================================================================

class RoomRecommendations(BaseModel):
    room_name: str
    recommendations: List[HomeRecommendation] = Field(default_factory=list)


class BatterySynergy(BaseModel):
    """Base load freed up by upgrades and what it is worth as battery export."""
    current_base_load_kw: float = Field(ge=0)
    upgraded_base_load_kw: float = Field(ge=0)
    export_gain_kw: float = Field(ge=0)
    export_revenue_low: int = Field(default=0, ge=0, description="$/yr per battery")
    export_revenue_high: int = Field(default=0, ge=0, description="$/yr per battery")


class HomeReport(BaseModel):
    """Whole-home audit result handed to report rendering."""
    home_name: str
    address: Optional[str] = Field(default=None)
    total_sqft: float
    climate_zone: str
    grade: EfficiencyGrade
    efficiency_ratio: float = Field(ge=0, le=1)
    equipment_count: int = Field(default=0, ge=0)
    total_current_cost: float = Field(ge=0)
    total_upgraded_cost: float = Field(ge=0)
    total_savings: float = Field(ge=0)
    upgrades: List[UpgradeItem] = Field(default_factory=list)
    recommendations: List[HomeRecommendation] = Field(default_factory=list)
    room_recommendations: List[RoomRecommendations] = Field(default_factory=list)
    battery: Optional[BatterySynergy] = Field(default=None)
    appliance_annual_kwh: float = Field(default=0.0, ge=0)
    phantom_annual_kwh: float = Field(default=0.0, ge=0)
    bill_based_annual_kwh: Optional[float] = Field(default=None)
    electricity_rate: float
