"""Light bulb label parsing: wattage, lumens, color temperature and bulb type."""
import logging
import re
from typing import Optional

from schemas.enums import ApplianceCategory
from schemas.results import BulbLabelResult
from .common import first_number, parse_int

logger = logging.getLogger(__name__)


WATTAGE_PATTERN = r"(\d+\.?\d*)\s*[Ww](?:att)?(?:s)?\b"
LUMENS_PATTERN = r"(\d+)\s*(?:lm|lumens?)\b"
COLOR_TEMP_PATTERN = r"(\d{2,4})\s*[Kk]\b"

MIN_COLOR_TEMP = 1800
MAX_COLOR_TEMP = 7000

# Checked in order; the first keyword group found decides the type.
BULB_TYPE_KEYWORDS = [
    (("led",), ApplianceCategory.LED_BULB),
    (("cfl", "compact fluorescent"), ApplianceCategory.CFL_BULB),
    (("incandescent", "halogen"), ApplianceCategory.INCANDESCENT_BULB),
]


def extract_wattage(text: str) -> Optional[float]:
    return first_number(WATTAGE_PATTERN, text, flags=0)


def extract_lumens(text: str) -> Optional[int]:
    match = re.search(LUMENS_PATTERN, text, re.IGNORECASE)
    return parse_int(match.group(1)) if match else None


def extract_color_temp(text: str) -> Optional[int]:
    """First Kelvin reading, kept only inside the plausible 1800-7000K range."""
    match = re.search(COLOR_TEMP_PATTERN, text)
    if not match:
        return None
    value = parse_int(match.group(1))
    if value is None or not MIN_COLOR_TEMP <= value <= MAX_COLOR_TEMP:
        return None
    return value


def detect_bulb_type(text: str) -> Optional[ApplianceCategory]:
    lowered = text.lower()
    for keywords, category in BULB_TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return None


def parse_bulb_text(text: str) -> BulbLabelResult:
    result = BulbLabelResult(
        wattage=extract_wattage(text),
        lumens=extract_lumens(text),
        color_temp=extract_color_temp(text),
        bulb_type=detect_bulb_type(text),
        raw_text=text,
    )
    logger.debug(
        f"Bulb parsed: {result.wattage}W {result.lumens}lm {result.color_temp}K type={result.bulb_type}"
    )
    return result
