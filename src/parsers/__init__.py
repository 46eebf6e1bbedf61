"""OCR text parsers and classifier label mapping."""
from .equipment_label import parse_equipment_label
from .utility_bill import parse_bill_text, extract_billing_dates
from .bulb_label import parse_bulb_text
from .classification import map_classifications

__all__ = [
    "parse_equipment_label",
    "parse_bill_text",
    "extract_billing_dates",
    "parse_bulb_text",
    "map_classifications",
]
