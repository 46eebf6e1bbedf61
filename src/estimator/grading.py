"""Weighted A-F efficiency grade for a home's equipment."""
import logging
from typing import Optional, Sequence

from schemas.catalog import equipment_profile
from schemas.enums import EfficiencyGrade
from schemas.home import Equipment
from .efficiency_db import EfficiencyDatabase, get_database

logger = logging.getLogger(__name__)


NEUTRAL_RATIO = 0.5

# Lower bound of each grade, checked from best to worst
GRADE_THRESHOLDS = [
    (0.85, EfficiencyGrade.A),
    (0.70, EfficiencyGrade.B),
    (0.55, EfficiencyGrade.C),
    (0.40, EfficiencyGrade.D),
]


def item_ratio(equipment: Equipment, db: Optional[EfficiencyDatabase] = None) -> float:
    """
    Position of one item's rating between industry-worst (0) and
    best-in-class (1), clamped to [0, 1].

    For inverted units (U-factor) the range runs the other way. A
    degenerate range scores 0.5.
    """
    db = db or get_database()
    profile = equipment_profile(equipment.type)
    spec = db.lookup(equipment.type, equipment.age_range)
    current = db.current_efficiency(equipment)
    worst, best = profile.worst_case, spec.best_in_class

    if profile.inverted:
        span = worst - best
        ratio = (worst - current) / span if span > 0 else NEUTRAL_RATIO
    else:
        span = best - worst
        ratio = (current - worst) / span if span > 0 else NEUTRAL_RATIO

    return min(max(ratio, 0.0), 1.0)


def weighted_efficiency_ratio(equipment: Sequence[Equipment], db: Optional[EfficiencyDatabase] = None) -> float:
    """Energy-share weighted mean of item ratios; 0.5 with no usable weight."""
    if not equipment:
        return NEUTRAL_RATIO

    db = db or get_database()
    weighted_sum = 0.0
    total_weight = 0.0
    for item in equipment:
        weight = equipment_profile(item.type).energy_share_weight
        weighted_sum += item_ratio(item, db) * weight
        total_weight += weight

    if total_weight <= 0:
        return NEUTRAL_RATIO
    return weighted_sum / total_weight


def grade_from_ratio(ratio: float) -> EfficiencyGrade:
    for threshold, grade in GRADE_THRESHOLDS:
        if ratio >= threshold:
            return grade
    return EfficiencyGrade.F


def grade(equipment: Sequence[Equipment], db: Optional[EfficiencyDatabase] = None) -> EfficiencyGrade:
    """Letter grade for a set of equipment; C when nothing is recorded."""
    if not equipment:
        return EfficiencyGrade.C

    ratio = weighted_efficiency_ratio(equipment, db)
    result = grade_from_ratio(ratio)
    logger.debug(f"Graded {len(equipment)} item(s): ratio={ratio:.3f} grade={result.value}")
    return result
