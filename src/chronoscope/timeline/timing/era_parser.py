"""
Era Parser

Turns free-form era text ("6th Century BC", "27 BC - 14 AD", "2400-2200")
into a numeric year interval on the astronomical axis.

Design:
- Never raises: hand-authored text that matches nothing degrades to a
  best-effort interval instead of an error
- Ordered cascade of patterns, first match wins
- BC/BCE and AD/CE are synonyms; hyphen and en-dash both separate ranges
"""

import re
from typing import Optional, Tuple

from ..types import ParsedEra
from ..logging import TimelineLog as Log

_ERA = r"(BC|AD|BCE|CE)"
_DASH = r"[-–]"

CENTURY_RANGE_PATTERN = re.compile(
    rf"(\d+)(?:st|nd|rd|th){_DASH}(\d+)(?:st|nd|rd|th)\s*Century\s*{_ERA}?", re.IGNORECASE
)
CENTURY_PATTERN = re.compile(rf"(\d+)(?:st|nd|rd|th)\s*Century\s*{_ERA}?", re.IGNORECASE)
YEAR_RANGE_PATTERN = re.compile(rf"(\d+)\s*{_ERA}?\s*{_DASH}\s*(\d+)\s*{_ERA}?", re.IGNORECASE)
SINGLE_YEAR_PATTERN = re.compile(rf"(\d+)\s*{_ERA}", re.IGNORECASE)
PLAIN_RANGE_PATTERN = re.compile(rf"(\d+)\s*{_DASH}\s*(\d+)")
NUMBER_PATTERN = re.compile(r"\d+")

# Plain "Y1-Y2" ranges with a magnitude above this are read as BC
ANCIENT_THRESHOLD = 1000


def _is_bc(era: Optional[str]) -> bool:
    return bool(era) and "BC" in era.upper()


def _signed_year(digits: str, era: Optional[str]) -> int:
    year = int(digits)
    return -year if _is_bc(era) else year


def century_bounds(century: int, era: Optional[str] = None) -> Tuple[int, int]:
    """
    Year bounds of an ordinal century.

    BC centuries count backwards: the 6th century BC is [-600, -500],
    the 6th century AD is [500, 600].
    """
    if _is_bc(era):
        return -(century * 100), -((century - 1) * 100)
    return (century - 1) * 100, century * 100


def _make(start: float, end: float, text: str) -> ParsedEra:
    return ParsedEra(start, end, (start + end) / 2, display=text)


def _parse_century_range(match: re.Match, text: str) -> ParsedEra:
    first, second, era = match.groups()
    first_start, first_end = century_bounds(int(first), era)
    second_start, second_end = century_bounds(int(second), era)
    return _make(min(first_start, second_start), max(first_end, second_end), text)


def _parse_century(match: re.Match, text: str) -> ParsedEra:
    century, era = match.groups()
    start, end = century_bounds(int(century), era)
    return _make(start, end, text)


def _parse_year_range(match: re.Match, normalized: str, text: str) -> ParsedEra:
    start, start_era, end, end_era = match.groups()

    # A single era token covers both ends ("2400-2200 BC")
    if not start_era and end_era:
        start_era = end_era
    if start_era and not end_era:
        end_era = start_era

    # No token at all: ancient collection, assume BC unless BC/AD appears elsewhere
    if not start_era and not end_era:
        upper = normalized.upper()
        if "BC" not in upper and "AD" not in upper:
            start_era = end_era = "BC"

    year_start = _signed_year(start, start_era)
    year_end = _signed_year(end, end_era)
    if year_start > year_end:
        year_start, year_end = year_end, year_start
    return _make(year_start, year_end, text)


def _parse_plain_range(match: re.Match, text: str) -> ParsedEra:
    first, second = (int(g) for g in match.groups())
    if first > ANCIENT_THRESHOLD or second > ANCIENT_THRESHOLD:
        return _make(-max(first, second), -min(first, second), text)
    return _make(min(first, second), max(first, second), text)


def parse_era(text: str) -> ParsedEra:
    """
    Parse era text into a ParsedEra.

    Cascade (first match wins):
        1. Century range   "6th-7th Century AD"
        2. Single century  "6th Century BC"
        3. Year range      "27 BC - 14 AD", "2400-2200 BC"
        4. Single year     "476 AD"
        5. Plain range     "2400-2200" (magnitudes over 1000 are BC)
        6. Fallback        first integer, negated; nothing -> year 0

    Args:
        text: Free-form era string (None is treated as empty)

    Returns:
        ParsedEra with year_start <= year_end and display == text
    """
    if text is None:
        text = ""
    normalized = text.strip()

    match = CENTURY_RANGE_PATTERN.search(normalized)
    if match:
        return _parse_century_range(match, text)

    match = CENTURY_PATTERN.search(normalized)
    if match:
        return _parse_century(match, text)

    match = YEAR_RANGE_PATTERN.search(normalized)
    if match:
        return _parse_year_range(match, normalized, text)

    match = SINGLE_YEAR_PATTERN.search(normalized)
    if match:
        year = _signed_year(*match.groups())
        return _make(year, year, text)

    # Shadowed by the year-range pattern today; kept so the BC heuristic
    # survives if that pattern is narrowed.
    match = PLAIN_RANGE_PATTERN.search(normalized)
    if match:
        return _parse_plain_range(match, text)

    match = NUMBER_PATTERN.search(normalized)
    year = -int(match.group(0)) if match else 0
    Log.debug(f"EraParser: no era pattern matched {text!r}, falling back to year {year}")
    return _make(year, year, text)


def format_year(year: float) -> str:
    """
    Render a signed year as "N BC" / "N AD".

    Year 0 renders as "1 AD" since the calendar has no year zero.
    """
    year = int(year)
    if year == 0:
        return "1 AD"
    if year < 0:
        return f"{abs(year)} BC"
    return f"{year} AD"
