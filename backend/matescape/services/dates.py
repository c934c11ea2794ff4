"""
Date parsing and en-US date rendering.

The locale is fixed: month names are English regardless of the host locale,
so nothing here goes through strftime's %B/%b.
"""
import re
from datetime import date
from typing import Optional

from matescape.errors import MalformedDateError

MONTH_NAMES = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

SHORT_MONTH_NAMES = [name[:3] for name in MONTH_NAMES]

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: object, tournament_id: Optional[int] = None) -> date:
    """Parse a strict YYYY-MM-DD string into a calendar date.

    Raises MalformedDateError for anything else, including valid-looking
    strings that name an impossible day ("2025-02-30").
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise MalformedDateError(value, tournament_id)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise MalformedDateError(value, tournament_id) from None


def month_year_label(d: date) -> str:
    """'June 2025'"""
    return f"{MONTH_NAMES[d.month - 1].capitalize()} {d.year}"


def _short(d: date, with_year: bool) -> str:
    text = f"{SHORT_MONTH_NAMES[d.month - 1].capitalize()} {d.day}"
    if with_year:
        text += f", {d.year}"
    return text


def format_date_range(start: date, end: date) -> str:
    """Display form used on tournament cards: 'Jun 20, 2025 - Jun 24, 2025'."""
    return f"{_short(start, True)} - {_short(end, True)}"


def format_facet_label(start: date, end: date) -> str:
    """Shorter form used in the date selector: 'Jun 20 - Jun 24, 2025'."""
    return f"{_short(start, False)} - {_short(end, True)}"
