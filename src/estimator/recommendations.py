"""Home and room recommendations not tied to a single piece of equipment."""
import logging
import math
from typing import List, Optional

from schemas.enums import (
    ApplianceCategory,
    InsulationQuality,
    RecommendationCategory,
    SealingRating,
    WindowDirection,
)
from schemas.home import DAYS_PER_YEAR, Home, Room
from schemas.results import HomeRecommendation
from .config import AuditConfig
from .efficiency_db import payback_years
from .energy import actual_electricity_rate, bill_based_annual_kwh, total_phantom_annual_kwh

logger = logging.getLogger(__name__)


# Incandescent ~60W -> LED ~9W
LED_SAVED_KW_PER_BULB = 0.051
LED_BULB_COST = 3.0
DEFAULT_BULB_HOURS = 5.0
SMART_STRIP_COST = 30.0

AIR_SEALING_COST = 525.0
AIR_SEALING_SAVINGS = 225.0
WEATHERSTRIPPING_COST = 105.0
WEATHERSTRIPPING_SAVINGS = 75.0


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def _envelope_recommendations(home: Home) -> List[HomeRecommendation]:
    env = home.envelope
    if env is None:
        return []

    recommendations = []
    if env.attic_insulation == InsulationQuality.POOR:
        recommendations.append(HomeRecommendation(
            category=RecommendationCategory.ENVELOPE,
            title="Upgrade Attic Insulation",
            detail=(
                "Your attic insulation is rated Poor. Upgrading to R-49 can reduce heating/cooling "
                "costs by 15-25% and improve comfort year-round."
            ),
            estimated_savings="15-25% HVAC savings",
        ))
    if env.air_sealing == SealingRating.POOR:
        recommendations.append(HomeRecommendation(
            category=RecommendationCategory.ENVELOPE,
            title="Professional Air Sealing",
            detail=(
                "Poor air sealing allows conditioned air to escape through gaps around pipes, wiring, "
                "and ductwork. Professional sealing typically costs $350-$700 and pays back in 1-2 years."
            ),
            estimated_savings="$150-$300/yr",
            annual_savings=AIR_SEALING_SAVINGS,
            cost=AIR_SEALING_COST,
            payback_years=payback_years(AIR_SEALING_COST, AIR_SEALING_SAVINGS),
        ))
    if env.weatherstripping == SealingRating.POOR:
        recommendations.append(HomeRecommendation(
            category=RecommendationCategory.ENVELOPE,
            title="Replace Weatherstripping",
            detail=(
                "Worn weatherstripping around doors and windows lets drafts in. Replacement is a "
                "low-cost DIY project ($20-$50 per door) with immediate comfort improvement."
            ),
            estimated_savings="$50-$100/yr",
            annual_savings=WEATHERSTRIPPING_SAVINGS,
            cost=WEATHERSTRIPPING_COST,
            payback_years=payback_years(WEATHERSTRIPPING_COST, WEATHERSTRIPPING_SAVINGS),
        ))
    return recommendations


def _led_swap(home: Home, rate: float) -> Optional[HomeRecommendation]:
    incandescents = [a for a in home.all_appliances if a.category == ApplianceCategory.INCANDESCENT_BULB]
    quantity = sum(a.quantity for a in incandescents)
    if quantity == 0:
        return None

    avg_hours = sum(a.hours_per_day for a in incandescents) / len(incandescents)
    savings = quantity * LED_SAVED_KW_PER_BULB * avg_hours * DAYS_PER_YEAR * rate
    cost = quantity * LED_BULB_COST
    suffix = _plural(quantity)
    return HomeRecommendation(
        category=RecommendationCategory.EQUIPMENT,
        title=f"Switch {quantity} Incandescent Bulb{suffix} to LED",
        detail=(
            f"LED bulbs use ~85% less energy and last 15-25x longer. Switching {quantity} incandescent "
            f"bulb{suffix} saves energy immediately with no comfort trade-off."
        ),
        estimated_savings=f"${int(savings)}/yr",
        annual_savings=savings,
        cost=cost,
        payback_years=payback_years(cost, savings),
    )


def _smart_strips(home: Home, rate: float, config: AuditConfig) -> Optional[HomeRecommendation]:
    phantom_kwh = total_phantom_annual_kwh(home)
    if phantom_kwh <= config.phantom_threshold_kwh:
        return None

    phantom_cost = phantom_kwh * rate
    savings = phantom_cost * config.smart_strip_savings
    return HomeRecommendation(
        category=RecommendationCategory.EQUIPMENT,
        title="Smart Power Strips for Phantom Loads",
        detail=(
            f"Your devices waste ~{int(phantom_kwh)} kWh/yr (${int(phantom_cost)}) on standby power. "
            f"Smart power strips cut phantom loads by up to {int(config.smart_strip_savings * 100)}% "
            f"by automatically disconnecting idle devices."
        ),
        estimated_savings=f"${int(savings)}/yr",
        annual_savings=savings,
        cost=SMART_STRIP_COST,
        payback_years=payback_years(SMART_STRIP_COST, savings),
    )


def _behavioral(home: Home, config: AuditConfig) -> List[HomeRecommendation]:
    recommendations = [HomeRecommendation(
        category=RecommendationCategory.BEHAVIORAL,
        title="Thermostat Setback Schedule",
        detail=(
            "Setting your thermostat back 7-10°F for 8 hours/day (while sleeping or away) can save up "
            "to 10% on heating and cooling annually, with no equipment purchase needed."
        ),
        estimated_savings="Up to 10% HVAC savings",
        cost=0.0,
    )]

    bill_kwh = bill_based_annual_kwh(home)
    if bill_kwh is not None and bill_kwh > config.time_of_use_threshold_kwh:
        recommendations.append(HomeRecommendation(
            category=RecommendationCategory.BEHAVIORAL,
            title="Shift Usage to Off-Peak Hours",
            detail=(
                f"With annual usage around {int(bill_kwh)} kWh, shifting laundry, dishwasher, and EV "
                f"charging to off-peak hours (typically 9pm-6am) can reduce costs if your utility "
                f"offers time-of-use rates."
            ),
            estimated_savings="5-15% bill reduction",
            cost=0.0,
        ))
    return recommendations


# Low-E film cuts south/west solar gain by 25-30%
LOW_E_FILM_REDUCTION = 0.275
GLAZING_SHARE_LIMIT = 0.30
FAN_CEILING_HEIGHT_FT = 10.0
HIGH_GAIN_DIRECTIONS = (WindowDirection.SOUTH, WindowDirection.WEST)


def generate_room_recommendations(room: Room) -> List[HomeRecommendation]:
    """
    Tips for one scanned room from its windows, ceiling height and
    insulation. Duct sealing is always included, last.
    """
    recommendations = []

    high_gain = [w for w in room.windows if w.direction in HIGH_GAIN_DIRECTIONS]
    if high_gain and room.insulation != InsulationQuality.GOOD:
        gain_btu = sum(w.heat_gain_btu for w in high_gain)
        saved_btu = int(gain_btu * LOW_E_FILM_REDUCTION)
        recommendations.append(HomeRecommendation(
            category=RecommendationCategory.ENVELOPE,
            title="Low-E Window Film",
            detail=(
                f"Your {len(high_gain)} south/west-facing window(s) contribute ~{int(gain_btu):,} BTU of "
                f"solar heat gain. Low-emissivity window film can reduce this by 25-30%."
            ),
            estimated_savings=f"Save ~{saved_btu:,} BTU/hr peak load",
        ))

    if room.insulation == InsulationQuality.POOR:
        recommendations.append(HomeRecommendation(
            category=RecommendationCategory.ENVELOPE,
            title="Upgrade to R-49 Attic Insulation",
            detail=(
                "Poor insulation adds a 30% BTU penalty to your load. Upgrading attic insulation to R-49 "
                "can reduce peak HVAC load by 1.0-1.5 kW and dramatically improve envelope efficiency."
            ),
            estimated_savings="1.0-1.5 kW peak load reduction",
        ))

    window_area = sum(w.area_sqft for w in room.windows)
    if window_area > room.square_footage * GLAZING_SHARE_LIMIT:
        recommendations.append(HomeRecommendation(
            category=RecommendationCategory.ENVELOPE,
            title="Reduce Thermal Glazing Exposure",
            detail=(
                f"Your window area ({int(window_area)} sq ft) exceeds 30% of your floor area "
                f"({int(room.square_footage)} sq ft). Thermal cellular shades or insulated curtains "
                f"can significantly cut heat gain/loss at the glass."
            ),
            estimated_savings="10-20% reduction in window-related load",
        ))

    if room.ceiling_height_ft > FAN_CEILING_HEIGHT_FT:
        recommendations.append(HomeRecommendation(
            category=RecommendationCategory.EQUIPMENT,
            title="Install Ceiling Fans for Destratification",
            detail=(
                f"At {room.ceiling_height_ft:g} ft ceiling height, hot air stratifies heavily. Ceiling fans "
                f"in winter (reverse/clockwise at low speed) push warm air back down, reducing thermostat "
                f"demand by 2-3°F."
            ),
            estimated_savings="5-10% heating season savings",
        ))

    recommendations.append(HomeRecommendation(
        category=RecommendationCategory.EQUIPMENT,
        title="Aerosol Duct Sealing",
        detail=(
            "Leaky ductwork (industry average: 20-30% loss) undermines HVAC efficiency. Aerosol duct "
            "sealing to <4% leakage rate can recover 15-20% of lost conditioned air."
        ),
        estimated_savings="15-20% conditioned air recovered",
    ))

    logger.debug(f"Generated {len(recommendations)} recommendation(s) for room '{room.name}'")
    return recommendations


def generate_home_recommendations(home: Home, config: Optional[AuditConfig] = None) -> List[HomeRecommendation]:
    """
    Envelope, equipment and behavioral tips for a home.

    Returned fastest payback first; tips without a computable payback keep
    their relative order at the end.
    """
    config = config or AuditConfig()
    rate = actual_electricity_rate(home, config)

    recommendations = _envelope_recommendations(home)
    for tip in (_led_swap(home, rate), _smart_strips(home, rate, config)):
        if tip is not None:
            recommendations.append(tip)
    recommendations.extend(_behavioral(home, config))

    recommendations.sort(key=lambda r: r.payback_years if r.payback_years is not None else math.inf)
    logger.debug(f"Generated {len(recommendations)} home recommendation(s) at ${rate:.3f}/kWh")
    return recommendations
