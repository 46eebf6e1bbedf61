"""Utility bill text parsing.

Pulls usage, total cost, rate, utility name and billing period from OCR text
of an electricity bill. Fields that cannot be found are left as None.
"""
import logging
import re
from datetime import date, datetime
from typing import List, Optional, Tuple

from schemas.results import ParsedBill
from .common import first_number, first_term, parse_number

logger = logging.getLogger(__name__)


KNOWN_UTILITIES = [
    "PG&E", "Pacific Gas and Electric", "Pacific Gas & Electric",
    "SCE", "Southern California Edison",
    "SDG&E", "San Diego Gas & Electric", "San Diego Gas and Electric",
    "Con Edison", "Consolidated Edison", "ConEd",
    "Duke Energy", "Florida Power & Light", "FPL",
    "Dominion Energy", "Xcel Energy", "AEP", "American Electric Power",
    "National Grid", "Eversource", "Entergy",
    "ComEd", "Commonwealth Edison",
    "CenterPoint", "Oncor", "TXU Energy", "Reliant", "Gexa Energy",
    "Green Mountain Energy", "Direct Energy", "Cirro Energy",
    "APS", "Arizona Public Service", "Salt River Project", "SRP",
    "Georgia Power", "Alabama Power", "DTE Energy",
    "PECO", "PPL Electric", "Ameren",
]

KWH_PATTERN = r"(\d[\d,]*\.?\d*)\s*kWh"

LABELED_TOTAL_PATTERN = r"(?:Amount\s*Due|Total\s*(?:Due|Charges?|Amount))[:\s]*\$\s*(\d[\d,]*\.\d{2})"
DOLLAR_PATTERN = r"\$\s*(\d[\d,]*\.\d{2})"

# Dollar amounts at or above this are treated as account numbers or noise
# when falling back to the largest amount on the bill.
MAX_FALLBACK_TOTAL = 10_000

CENTS_RATE_PATTERN = r"(\d+\.?\d*)\s*(?:¢|cents?)\s*(?:/|per)\s*kWh"
DOLLAR_RATE_PATTERN = r"\$\s*(\d+\.\d+)\s*(?:/|per)\s*kWh"

# (regex, strptime formats tried in order)
DATE_PATTERNS = [
    (r"([A-Za-z]{3,9}\.?\s+\d{1,2},?\s+\d{4})",
     ["%b %d, %Y", "%b %d %Y", "%B %d, %Y", "%B %d %Y", "%b. %d, %Y", "%b. %d %Y"]),
    (r"(\d{1,2}/\d{1,2}/\d{2,4})", ["%m/%d/%Y", "%m/%d/%y"]),
    (r"(\d{1,2}-\d{1,2}-\d{2,4})", ["%m-%d-%Y", "%m-%d-%y"]),
]

LOOKBACK_YEARS = 2


def extract_kwh(text: str) -> Optional[float]:
    return first_number(KWH_PATTERN, text)


def extract_total_cost(text: str) -> Optional[float]:
    """Labeled "Amount Due"/"Total ..." first, else the largest dollar amount."""
    labeled = first_number(LABELED_TOTAL_PATTERN, text)
    if labeled is not None:
        return labeled

    largest = 0.0
    for match in re.finditer(DOLLAR_PATTERN, text, re.IGNORECASE):
        value = parse_number(match.group(1))
        if value is not None and largest < value < MAX_FALLBACK_TOTAL:
            largest = value
    return largest if largest > 0 else None


def extract_rate(text: str) -> Optional[float]:
    """Rate in $/kWh from a cents-per-kWh or dollars-per-kWh mention."""
    cents = first_number(CENTS_RATE_PATTERN, text)
    if cents is not None:
        return cents / 100.0
    return first_number(DOLLAR_RATE_PATTERN, text)


def extract_utility_name(text: str) -> Optional[str]:
    return first_term(text, KNOWN_UTILITIES)


def _parse_date(value: str, formats: List[str]) -> Optional[date]:
    value = re.sub(r"\s+", " ", value.strip())
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year - years, day=28)


def extract_billing_dates(text: str, today: Optional[date] = None) -> Tuple[Optional[date], Optional[date]]:
    """Earliest two plausible dates on the bill as (start, end).

    Dates more than two years old or in the future are ignored.
    """
    today = today or date.today()
    cutoff = _years_before(today, LOOKBACK_YEARS)

    found = []
    for pattern, formats in DATE_PATTERNS:
        for match in re.finditer(pattern, text):
            parsed = _parse_date(match.group(1), formats)
            if parsed is not None:
                found.append(parsed)

    recent = sorted(d for d in found if cutoff < d <= today)
    if len(recent) >= 2:
        return recent[0], recent[1]
    if len(recent) == 1:
        return recent[0], None
    return None, None


def parse_bill_text(text: str, today: Optional[date] = None) -> ParsedBill:
    """Parse OCR text of a utility bill into structured fields.

    When no rate is printed but both cost and usage are, the rate is derived
    as cost / kWh.
    """
    total_kwh = extract_kwh(text)
    total_cost = extract_total_cost(text)
    rate = extract_rate(text)
    start, end = extract_billing_dates(text, today=today)

    if rate is None and total_kwh and total_cost is not None:
        rate = total_cost / total_kwh

    result = ParsedBill(
        utility_name=extract_utility_name(text),
        billing_period_start=start,
        billing_period_end=end,
        total_kwh=total_kwh,
        total_cost=total_cost,
        rate_per_kwh=rate,
        raw_text=text,
    )
    logger.debug(
        f"Bill parsed: utility={result.utility_name} kwh={total_kwh} cost={total_cost} "
        f"rate={rate} period={start}..{end}"
    )
    return result
