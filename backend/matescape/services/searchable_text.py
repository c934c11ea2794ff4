"""
Searchable-text builder.

Every tournament gets one lowercase string holding its name, raw dates, type,
status and a fixed set of renderings of both dates, so that a plain substring
test finds "jun", "june 2025", "20/06", "06-20-2025" and so on.

Per date, 16 strings:
  year, month name, short month, 2-digit month, day (no leading zero),
  "{month} {year}", "{short} {year}", "{mm}/{year}", "{day}/{mm}",
  "{day}/{mm}/{year}", "{month} {day}", "{short} {day}", "{year}-{mm}",
  "{year}/{mm}", "{mm}-{day}-{year}", "{day}-{mm}-{year}"
"""
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from matescape.errors import MalformedDateError
from matescape.models.tournament import Tournament
from matescape.services.dates import MONTH_NAMES, SHORT_MONTH_NAMES, parse_iso_date

TOKENS_PER_DATE = 16


def date_tokens(d: date) -> List[str]:
    """All renderings of one date a user might type."""
    year = str(d.year)
    month_name = MONTH_NAMES[d.month - 1]
    short_month = SHORT_MONTH_NAMES[d.month - 1]
    month_number = f"{d.month:02d}"
    day = str(d.day)

    return [
        year,
        month_name,
        short_month,
        month_number,
        day,
        f"{month_name} {year}",
        f"{short_month} {year}",
        f"{month_number}/{year}",
        f"{day}/{month_number}",
        f"{day}/{month_number}/{year}",
        f"{month_name} {day}",
        f"{short_month} {day}",
        f"{year}-{month_number}",
        f"{year}/{month_number}",
        f"{month_number}-{day}-{year}",
        f"{day}-{month_number}-{year}",
    ]


def build_searchable_text(tournament: Tournament) -> str:
    """Build the lowercase search string for one tournament.

    Raises MalformedDateError if either date cannot be parsed.
    """
    start = parse_iso_date(tournament.start_date, tournament.id)
    end = parse_iso_date(tournament.end_date, tournament.id)

    parts = [
        tournament.name,
        tournament.start_date,
        tournament.end_date,
        tournament.type.value,
        tournament.status.value,
        *date_tokens(start),
        *date_tokens(end),
    ]
    return " ".join(parts).lower()


class SearchIndex:
    """Searchable text for a fixed set of tournaments.

    Built once per store snapshot. Entries for tournaments with bad dates are
    recorded as failures instead of text. Lookups for a tournament that is not
    the one the entry was built from fall back to building it fresh, so a
    stale index never yields a stale answer.
    """

    def __init__(self, tournaments: Iterable[Tournament]):
        self._entries: Dict[int, Tuple[Tournament, Optional[str]]] = {}
        self.failures: Dict[int, MalformedDateError] = {}
        for tournament in tournaments:
            self._entries[tournament.id] = (tournament, self._build(tournament))

    def _build(self, tournament: Tournament) -> Optional[str]:
        try:
            return build_searchable_text(tournament)
        except MalformedDateError as exc:
            self.failures[tournament.id] = exc
            return None

    def text_for(self, tournament: Tournament) -> str:
        """Return the searchable text, raising MalformedDateError on bad dates."""
        entry = self._entries.get(tournament.id)
        if entry is None or entry[0] != tournament:
            return build_searchable_text(tournament)
        if entry[1] is None:
            raise self.failures[tournament.id]
        return entry[1]

    def __len__(self) -> int:
        return len(self._entries)
