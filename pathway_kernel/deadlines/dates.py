"""
Event date extraction from the free-text date fields of a complaint.

Tried in order on date_specific, then date_range:
  1. the whole text as one date (ISO or a common written form)
  2. a numeric date in the text: day/month/year in UK order ("14/03/2025",
     "3.2.25") or ISO year-month-day ("on 2025-03-14 at the ward")
  3. a month name with a year and an optional day before or after it
     ("March 2025", "14th March 2025", "March 14, 2025")

Text without a recognisable year is not a date. Impossible dates such as
31/02/2025 are skipped rather than guessed at.
"""

import re
from datetime import date, datetime
from typing import Iterator, Optional

from pathway_kernel.models.facts import ExtractedFacts

WRITTEN_FORMATS = (
    "%d %B %Y",
    "%d %b %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d/%m/%Y",
    "%Y/%m/%d",
)

MONTHS = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

_ORDINAL = re.compile(r"\b(\d{1,2})(st|nd|rd|th)\b", re.IGNORECASE)
_NUMERIC = re.compile(r"\b(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{4}|\d{2})\b")
_ISO = re.compile(r"\b(\d{4})-(\d{1,2})-(\d{1,2})\b")
_MONTH_NAME = re.compile(
    r"(?:\b(\d{1,2})\s+)?"
    r"\b(" + "|".join(sorted(MONTHS, key=len, reverse=True)) + r")\b\.?"
    r"(?:\s+(\d{1,2})\b)?,?\s+(\d{4})\b",
    re.IGNORECASE,
)


def _clean(text: str) -> str:
    text = _ORDINAL.sub(r"\1", text)
    text = text.replace(",", " ")
    return " ".join(text.split())


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_direct(text: str) -> Optional[date]:
    """Parse text that is nothing but a date."""
    cleaned = _clean(text)
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    for fmt in WRITTEN_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
    return None


def find_numeric(text: str) -> Optional[date]:
    """First valid numeric date in the text, by position; two-digit years are 20xx."""
    matches = []
    for match in _NUMERIC.finditer(text):
        day, month, year = match.groups()
        full_year = int(year) + 2000 if len(year) == 2 else int(year)
        matches.append((match.start(), full_year, int(month), int(day)))
    for match in _ISO.finditer(text):
        year, month, day = match.groups()
        matches.append((match.start(), int(year), int(month), int(day)))

    for _, year, month, day in sorted(matches):
        found = _safe_date(year, month, day)
        if found:
            return found
    return None


def find_month_name(text: str) -> Optional[date]:
    """First valid "[day] Month [day] year" in the text. A missing day means the 1st."""
    for leading, month, trailing, year in _MONTH_NAME.findall(_clean(text)):
        day = leading or trailing
        found = _safe_date(int(year), MONTHS[month.lower()], int(day) if day else 1)
        if found:
            return found
    return None



def _candidates(facts: ExtractedFacts) -> Iterator[str]:
    for text in (facts.date_specific, facts.date_range):
        if text and text.strip():
            yield text.strip()


def extract_event_date(facts: ExtractedFacts) -> Optional[date]:
    """Best-effort event date, or None when nothing date-like is present."""
    texts = list(_candidates(facts))
    for strategy in (parse_direct, find_numeric, find_month_name):
        for text in texts:
            found = strategy(text)
            if found:
                return found
    return None
