"""Map image classifier labels onto appliance categories."""
import logging
from typing import Dict, Iterable, List, Tuple

from schemas.enums import ApplianceCategory
from schemas.results import ClassificationResult

logger = logging.getLogger(__name__)


DEFAULT_TOP_K = 3
MIN_CONFIDENCE = 0.05

# Classifier identifier (or substring of one) -> category. Checked in
# insertion order for substring matches.
IDENTIFIER_MAPPING: Dict[str, ApplianceCategory] = {
    # Entertainment
    "television": ApplianceCategory.TELEVISION,
    "TV": ApplianceCategory.TELEVISION,
    "screen": ApplianceCategory.TELEVISION,
    "monitor": ApplianceCategory.MONITOR,
    "desktop computer": ApplianceCategory.DESKTOP,
    "computer": ApplianceCategory.DESKTOP,
    "laptop": ApplianceCategory.LAPTOP,
    "notebook": ApplianceCategory.LAPTOP,
    "joystick": ApplianceCategory.GAMING_CONSOLE,
    "loudspeaker": ApplianceCategory.SOUNDBAR,
    "speaker": ApplianceCategory.SOUNDBAR,

    # Kitchen
    "refrigerator": ApplianceCategory.REFRIGERATOR,
    "dishwasher": ApplianceCategory.DISHWASHER,
    "washer": ApplianceCategory.DISHWASHER,
    "microwave": ApplianceCategory.MICROWAVE,
    "oven": ApplianceCategory.OVEN,
    "stove": ApplianceCategory.OVEN,
    "toaster": ApplianceCategory.TOASTER,
    "coffee maker": ApplianceCategory.COFFEE_MAKER,
    "espresso maker": ApplianceCategory.COFFEE_MAKER,
    "coffeepot": ApplianceCategory.COFFEE_MAKER,

    # Lighting
    "table lamp": ApplianceCategory.LAMP_FIXTURE,
    "lampshade": ApplianceCategory.LAMP_FIXTURE,
    "lamp": ApplianceCategory.LAMP_FIXTURE,
    "spotlight": ApplianceCategory.FLOODLIGHT,

    # Computing
    "keyboard": ApplianceCategory.DESKTOP,
    "mouse": ApplianceCategory.DESKTOP,
    "modem": ApplianceCategory.ROUTER,

    # Other
    "electric fan": ApplianceCategory.CEILING_FAN,
    "space heater": ApplianceCategory.PORTABLE_HEATER,
}


def map_identifier(identifier: str):
    """Category for a classifier identifier: exact match, then substring."""
    if identifier in IDENTIFIER_MAPPING:
        return IDENTIFIER_MAPPING[identifier]

    lowered = identifier.lower()
    for key, category in IDENTIFIER_MAPPING.items():
        if key.lower() in lowered:
            return category
    return None


def map_classifications(
    observations: Iterable[Tuple[str, float]],
    top_k: int = DEFAULT_TOP_K,
    min_confidence: float = MIN_CONFIDENCE,
) -> List[ClassificationResult]:
    """
    Turn ranked classifier output into at most ``top_k`` distinct categories.

    Args:
        observations: ``(identifier, confidence)`` pairs, best first
        top_k: Maximum number of categories to return
        min_confidence: Observations at or below this are skipped

    Returns:
        Distinct categories in classifier order. When nothing maps, a single
        ``OTHER`` result with confidence 0 so the user can pick manually.
    """
    observations = list(observations)
    results: List[ClassificationResult] = []
    seen = set()

    for identifier, confidence in observations:
        if len(results) >= top_k:
            break
        if confidence <= min_confidence:
            continue
        category = map_identifier(identifier)
        if category is None or category in seen:
            continue
        seen.add(category)
        results.append(ClassificationResult(
            category=category,
            confidence=confidence,
            raw_identifier=identifier,
        ))

    if not results:
        raw = observations[0][0] if observations else "unknown"
        logger.debug(f"No appliance category for classifier output, top label '{raw}'")
        results.append(ClassificationResult(
            category=ApplianceCategory.OTHER,
            confidence=0.0,
            raw_identifier=raw,
        ))

    return results
