"""Home-level energy quantities and per-appliance upgrade tips."""
import logging
from statistics import mean
from typing import Optional

from schemas.enums import ApplianceCategory
from schemas.home import Appliance, DAYS_PER_YEAR, Home
from schemas.results import ApplianceUpgradeTip
from .config import AuditConfig

logger = logging.getLogger(__name__)


LED_SHARE_OF_INCANDESCENT = 0.15
LED_SHARE_OF_CFL = 0.70
FRIDGE_UPGRADE_WATTS = 120
ENERGY_STAR_FRIDGE_SAVED_KWH = 400
STRIP_TIP_MIN_PHANTOM_WATTS = 3


# ============================================================================
# Home Totals
# ============================================================================

def effective_sqft(home: Home, config: Optional[AuditConfig] = None) -> float:
    """Floor area used by the cost model; the configured default when unknown."""
    config = config or AuditConfig()
    sqft = home.computed_total_sqft
    return sqft if sqft > 0 else config.default_home_sqft


def total_appliance_kwh(home: Home) -> float:
    """Active-use kWh/yr over every appliance in the home."""
    return sum(appliance.annual_kwh for appliance in home.all_appliances)


def total_phantom_annual_kwh(home: Home) -> float:
    return sum(appliance.phantom_annual_kwh for appliance in home.all_appliances)


def bill_based_annual_kwh(home: Home) -> Optional[float]:
    """Mean annualized kWh over bills with a usable billing period."""
    annualized = [bill.annualized_kwh for bill in home.energy_bills if bill.annualized_kwh is not None]
    if not annualized:
        return None
    return mean(annualized)


def actual_electricity_rate(home: Home, config: Optional[AuditConfig] = None) -> float:
    """Mean rate across uploaded bills, or the configured rate without bills."""
    config = config or AuditConfig()
    if not home.energy_bills:
        return config.electricity_rate
    return mean(bill.computed_rate(config.electricity_rate) for bill in home.energy_bills)


# ============================================================================
# Appliance Upgrade Tips
# ============================================================================

def _led_savings(appliance: Appliance, led_share: float, rate: float) -> float:
    saved_watts = appliance.wattage * (1 - led_share)
    saved_kwh = saved_watts * appliance.hours_per_day * DAYS_PER_YEAR / 1000.0 * appliance.quantity
    return saved_kwh * rate


def appliance_upgrade_tip(
    appliance: Appliance, rate: float, config: Optional[AuditConfig] = None
) -> Optional[ApplianceUpgradeTip]:
    """Replacement suggestion for one appliance, or None when nothing applies."""
    config = config or AuditConfig()
    category = appliance.category

    if category == ApplianceCategory.INCANDESCENT_BULB:
        led_watts = appliance.wattage * LED_SHARE_OF_INCANDESCENT
        savings = _led_savings(appliance, LED_SHARE_OF_INCANDESCENT, rate)
        return ApplianceUpgradeTip(
            title="Switch to LED",
            detail=(
                f"Replace this {int(appliance.wattage)}W incandescent with a {int(led_watts)}W LED bulb "
                f"for the same brightness."
            ),
            annual_savings=savings,
            savings_text=f"Save ~${int(savings)}/yr and the bulb lasts 25x longer",
        )

    if category == ApplianceCategory.CFL_BULB:
        savings = _led_savings(appliance, LED_SHARE_OF_CFL, rate)
        return ApplianceUpgradeTip(
            title="Upgrade to LED",
            detail="LEDs use 30% less energy than CFLs, turn on instantly, and contain no mercury.",
            annual_savings=savings,
            savings_text=f"Save ~${int(savings)}/yr per bulb",
        )

    if category == ApplianceCategory.REFRIGERATOR:
        if appliance.wattage <= FRIDGE_UPGRADE_WATTS:
            return None
        savings = ENERGY_STAR_FRIDGE_SAVED_KWH * rate
        return ApplianceUpgradeTip(
            title="ENERGY STAR Refrigerator",
            detail=(
                "If your fridge is 15+ years old, it may use 800+ kWh/yr. "
                "New ENERGY STAR models use ~400 kWh/yr."
            ),
            annual_savings=savings,
            savings_text=f"Save ~${int(savings)}/yr with a new ENERGY STAR model",
        )

    if category == ApplianceCategory.POOL_PUMP:
        return ApplianceUpgradeTip(
            title="Variable-Speed Pool Pump",
            detail=(
                "Single-speed pool pumps are the second-largest energy user in many homes. "
                "A variable-speed pump runs slower for longer, using 70% less energy."
            ),
            annual_savings=appliance.annual_cost(rate) * 0.70,
            savings_text="Save $500-$1,200/yr",
        )

    if category == ApplianceCategory.PORTABLE_HEATER:
        return ApplianceUpgradeTip(
            title="Heating Zone Strategy",
            detail=(
                "Portable heaters at 1,500W are expensive to run. Use them to heat only occupied rooms "
                "and lower the central thermostat by 5-10°F."
            ),
        )

    profile = appliance.profile
    if profile.phantom_load_relevant and profile.phantom_watts > STRIP_TIP_MIN_PHANTOM_WATTS:
        savings = appliance.phantom_annual_kwh * config.smart_strip_savings * rate
        return ApplianceUpgradeTip(
            title="Smart Power Strip",
            detail="Use a smart power strip to cut standby power when devices are off.",
            annual_savings=savings,
            savings_text=f"Save ~${int(savings)}/yr across your {profile.group.value.lower()} setup",
        )

    return None
