"""Pydantic models for the audited home and everything recorded in it.

Home is the aggregate root: it owns rooms, equipment, appliances and energy
bills. Derived quantities (annual kWh, billing days, computed rate) are
properties recomputed on every access; nothing derived is stored.
"""
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from .catalog import appliance_profile, equipment_profile, ApplianceProfile, EquipmentProfile
from .enums import (
    AgeRange,
    ApplianceCategory,
    BasementInsulation,
    ClimateZone,
    DetectionMethod,
    EquipmentType,
    InsulationQuality,
    SealingRating,
    WindowDirection,
    YearRange,
    DEFAULT_ELECTRICITY_RATE,
)

DAYS_PER_YEAR = 365.0


# ============================================================================
# Appliances
# ============================================================================

class Appliance(BaseModel):
    """A plug load or light fixture found during the walkthrough.

    Missing name, wattage or hours are filled from the category defaults.
    """
    id: UUID = Field(default_factory=uuid4)
    category: ApplianceCategory = Field(default=ApplianceCategory.OTHER)
    name: str = Field(default="", description="Display name, defaults to the category label")
    wattage: float = Field(gt=0, description="Rated or estimated draw in watts")
    hours_per_day: float = Field(ge=0, le=24, description="Average daily on-time")
    quantity: int = Field(default=1, ge=1, description="Number of identical units")
    detection_method: DetectionMethod = Field(default=DetectionMethod.MANUAL)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="before")
    @classmethod
    def _fill_category_defaults(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        category = ApplianceCategory(data.get("category") or ApplianceCategory.OTHER)
        profile = appliance_profile(category)
        if data.get("wattage") is None:
            data["wattage"] = profile.default_wattage
        if data.get("hours_per_day") is None:
            data["hours_per_day"] = profile.default_hours_per_day
        if not data.get("name"):
            data["name"] = category.value
        return data

    @property
    def profile(self) -> ApplianceProfile:
        return appliance_profile(self.category)

    @property
    def annual_kwh(self) -> float:
        """Annual active-use energy in kWh."""
        return self.wattage * self.hours_per_day * DAYS_PER_YEAR / 1000.0 * self.quantity

    @property
    def phantom_annual_kwh(self) -> float:
        """Annual standby energy in kWh; zero for categories without phantom load."""
        profile = self.profile
        if not profile.phantom_load_relevant:
            return 0.0
        standby_hours = max(24.0 - self.hours_per_day, 0.0)
        return profile.phantom_watts * standby_hours * DAYS_PER_YEAR / 1000.0 * self.quantity

    @property
    def total_annual_kwh(self) -> float:
        return self.annual_kwh + self.phantom_annual_kwh

    def annual_cost(self, rate: float) -> float:
        """Annual active-use cost at ``rate`` $/kWh."""
        return self.annual_kwh * rate


# ============================================================================
# Equipment
# ============================================================================

class Equipment(BaseModel):
    """HVAC, water heating, envelope or laundry equipment.

    An ``estimated_efficiency`` of 0 means the rating is unknown and the
    efficiency database estimate for the age band is used instead.
    """
    id: UUID = Field(default_factory=uuid4)
    type: EquipmentType = Field(default=EquipmentType.CENTRAL_AC)
    manufacturer: Optional[str] = Field(default=None)
    model_number: Optional[str] = Field(default=None)
    age_range: AgeRange = Field(default=AgeRange.YEARS_5_TO_10)
    estimated_efficiency: float = Field(default=0.0, ge=0, description="Rating in the type's unit")
    current_code_minimum: float = Field(default=0.0, ge=0)
    best_in_class: float = Field(default=0.0, ge=0)
    notes: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def profile(self) -> EquipmentProfile:
        return equipment_profile(self.type)

    @property
    def efficiency_unit(self) -> str:
        return self.profile.efficiency_unit


# ============================================================================
# Energy Bills
# ============================================================================

class EnergyBill(BaseModel):
    """One electricity bill, typically handed over from the bill scanner."""
    id: UUID = Field(default_factory=uuid4)
    billing_period_start: Optional[date] = Field(default=None)
    billing_period_end: Optional[date] = Field(default=None)
    total_kwh: float = Field(default=0.0, ge=0)
    total_cost: float = Field(default=0.0, ge=0)
    rate_per_kwh: Optional[float] = Field(default=None, ge=0)
    utility_name: Optional[str] = Field(default=None)
    raw_ocr_text: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def billing_days(self) -> Optional[int]:
        if self.billing_period_start is None or self.billing_period_end is None:
            return None
        return (self.billing_period_end - self.billing_period_start).days

    @property
    def daily_average_kwh(self) -> Optional[float]:
        days = self.billing_days
        if days is None or days <= 0:
            return None
        return self.total_kwh / days

    @property
    def annualized_kwh(self) -> Optional[float]:
        daily = self.daily_average_kwh
        if daily is None:
            return None
        return daily * DAYS_PER_YEAR

    def computed_rate(self, default_rate: float = DEFAULT_ELECTRICITY_RATE) -> float:
        """Explicit rate, else cost / kWh, else ``default_rate``."""
        if self.rate_per_kwh is not None and self.rate_per_kwh > 0:
            return self.rate_per_kwh
        if self.total_kwh > 0 and self.total_cost > 0:
            return self.total_cost / self.total_kwh
        return default_rate


# ============================================================================
# Home
# ============================================================================

class EnvelopeInfo(BaseModel):
    """Walkthrough assessment of the building envelope."""
    attic_insulation: InsulationQuality = Field(default=InsulationQuality.UNKNOWN)
    wall_insulation: InsulationQuality = Field(default=InsulationQuality.UNKNOWN)
    basement_insulation: Optional[BasementInsulation] = Field(default=None)
    air_sealing: Optional[SealingRating] = Field(default=None)
    weatherstripping: Optional[SealingRating] = Field(default=None)
    notes: Optional[str] = Field(default=None)


class WindowInfo(BaseModel):
    direction: WindowDirection
    area_sqft: float = Field(gt=0)
    heat_gain_btu: float = Field(default=0.0, ge=0, description="Peak solar heat gain through this window")


class Room(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str = Field(default="Room")
    square_footage: float = Field(default=0.0, ge=0)
    ceiling_height_ft: float = Field(default=8.0, gt=0)
    insulation: InsulationQuality = Field(default=InsulationQuality.AVERAGE)
    windows: List[WindowInfo] = Field(default_factory=list)
    appliances: List[Appliance] = Field(default_factory=list)


class Home(BaseModel):
    """The audited home and everything recorded against it."""
    id: UUID = Field(default_factory=uuid4)
    name: str = Field(default="")
    address: Optional[str] = Field(default=None)
    year_built: YearRange = Field(default=YearRange.Y1990_TO_2005)
    total_sqft: Optional[float] = Field(default=None, ge=0, description="Manual override of floor area")
    climate_zone: ClimateZone = Field(default=ClimateZone.MODERATE)
    rooms: List[Room] = Field(default_factory=list)
    equipment: List[Equipment] = Field(default_factory=list)
    appliances: List[Appliance] = Field(default_factory=list, description="Appliances not tied to a room")
    energy_bills: List[EnergyBill] = Field(default_factory=list)
    envelope: Optional[EnvelopeInfo] = Field(default=None)

    @property
    def computed_total_sqft(self) -> float:
        """Manual override when positive, else the sum of room areas."""
        if self.total_sqft is not None and self.total_sqft > 0:
            return self.total_sqft
        return sum(room.square_footage for room in self.rooms)

    @property
    def all_appliances(self) -> List[Appliance]:
        """Home-level appliances followed by every room's appliances."""
        result = list(self.appliances)
        for room in self.rooms:
            result.extend(room.appliances)
        return result
