"""Regex helpers shared by the OCR text parsers."""
import re
from typing import Optional


def parse_number(value: str) -> Optional[float]:
    """Parse a recognized number, dropping thousands commas.

    Returns None instead of raising on OCR noise like "1.2.3".
    """
    try:
        return float(value.replace(",", ""))
    except (ValueError, AttributeError):
        return None


def parse_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def first_number(pattern: str, text: str, flags: int = re.IGNORECASE) -> Optional[float]:
    """Number captured by group 1 of the first match in document order."""
    match = re.search(pattern, text, flags)
    if not match:
        return None
    return parse_number(match.group(1))


def contains_term(text: str, term: str) -> bool:
    """Case-insensitive substring match; OCR often runs tokens together."""
    return term.lower() in text.lower()


def first_term(text: str, terms) -> Optional[str]:
    """First entry of ``terms`` (in list order) found in ``text``."""
    for term in terms:
        if contains_term(text, term):
            return term
    return None
