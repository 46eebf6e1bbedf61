"""Rating plate / EnergyGuide label parsing for HVAC and appliance equipment."""
import logging
import re
from typing import Optional

from schemas.results import EquipmentLabelResult
from .common import first_term, parse_int, parse_number

logger = logging.getLogger(__name__)


KNOWN_MANUFACTURERS = [
    "carrier", "trane", "lennox", "goodman", "rheem", "york",
    "daikin", "mitsubishi", "bosch", "ao smith", "a.o. smith",
    "bradford white", "navien", "rinnai", "amana", "bryant",
    "ruud", "heil", "payne", "coleman", "frigidaire", "lg",
    "samsung", "whirlpool", "ge", "general electric", "maytag",
    "kenmore", "speed queen", "electrolux", "honeywell", "ecobee",
    "nest", "emerson", "sensi", "pella", "andersen", "marvin",
    "milgard", "jeld-wen",
]

# Checked in order; the first pattern with a match wins.
EFFICIENCY_PATTERNS = [
    (r"SEER2?\s*[:=]?\s*(\d+\.?\d*)", "SEER"),
    (r"EER\s*[:=]?\s*(\d+\.?\d*)", "EER"),
    (r"CEER\s*[:=]?\s*(\d+\.?\d*)", "CEER"),
    (r"HSPF2?\s*[:=]?\s*(\d+\.?\d*)", "HSPF"),
    (r"AFUE\s*[:=]?\s*(\d+\.?\d*)\s*%?", "AFUE"),
    (r"UEF\s*[:=]?\s*(\d+\.?\d*)", "UEF"),
    (r"U-?factor\s*[:=]?\s*(\d+\.?\d*)", "U-factor"),
    (r"R-?value\s*[:=]?\s*R?-?(\d+\.?\d*)", "R-value"),
    (r"IMEF\s*[:=]?\s*(\d+\.?\d*)", "IMEF"),
    (r"CEF\s*[:=]?\s*(\d+\.?\d*)", "CEF"),
]

# Run of 8-20 uppercase letters, digits or dashes starting with a letter
MODEL_NUMBER_PATTERN = r"[A-Z][A-Z0-9\-]{7,19}"

BTU_PATTERN = r"(\d{1,3}[,.]?\d{3})\s*BTU"


def detect_manufacturer(text: str) -> Optional[str]:
    name = first_term(text, KNOWN_MANUFACTURERS)
    if name is None:
        return None
    return name.title()


def detect_efficiency(text: str):
    """Return ``(value, label)`` for the first efficiency pattern that matches."""
    for pattern, label in EFFICIENCY_PATTERNS:
        match = re.search(pattern, text, re.IGNORECASE)
        if not match:
            continue
        value = parse_number(match.group(1))
        if value is not None:
            return value, label
    return None, None


def detect_model_number(text: str) -> Optional[str]:
    match = re.search(MODEL_NUMBER_PATTERN, text)
    return match.group(0) if match else None


def detect_btu_capacity(text: str) -> Optional[int]:
    match = re.search(BTU_PATTERN, text, re.IGNORECASE)
    if not match:
        return None
    digits = match.group(1).replace(",", "").replace(".", "")
    return parse_int(digits)


def parse_equipment_label(text: str) -> EquipmentLabelResult:
    """Extract manufacturer, model, efficiency and capacity from label text.

    Every field is optional; unmatched patterns simply leave it unset.
    """
    efficiency_value, efficiency_type = detect_efficiency(text)
    result = EquipmentLabelResult(
        manufacturer=detect_manufacturer(text),
        model_number=detect_model_number(text),
        efficiency_value=efficiency_value,
        efficiency_type=efficiency_type,
        btu_capacity=detect_btu_capacity(text),
        raw_text=text,
    )
    logger.debug(
        f"Label parsed: manufacturer={result.manufacturer} model={result.model_number} "
        f"efficiency={result.efficiency_value} {result.efficiency_type or ''} btu={result.btu_capacity}"
    )
    return result
