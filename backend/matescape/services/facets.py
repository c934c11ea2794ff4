"""
Facet index for the date and type selectors.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from matescape.errors import MalformedDateError
from matescape.models.tournament import Tournament
from matescape.services.dates import format_facet_label, parse_iso_date
from matescape.services.query_engine import TYPE_FILTER_VALUES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateFacet:
    start_date: str
    end_date: str
    label: str

    @property
    def key(self) -> str:
        return f"{self.start_date}_{self.end_date}"


def date_facets(tournaments: Sequence[Tournament]) -> List[DateFacet]:
    """Distinct (startDate, endDate) pairs, sorted by their "{start}_{end}" key.

    ISO date strings sort lexicographically in calendar order, so the key sort
    is also a chronological sort by start date. Pairs with an unparseable
    date are left out: they could not round-trip through a date filter key.
    """
    labels: Dict[Tuple[str, str], str] = {}
    for tournament in tournaments:
        pair = (tournament.start_date, tournament.end_date)
        if pair in labels:
            continue
        try:
            start = parse_iso_date(tournament.start_date, tournament.id)
            end = parse_iso_date(tournament.end_date, tournament.id)
        except MalformedDateError as exc:
            logger.warning("Leaving tournament %s out of the date facets: %s", tournament.id, exc)
            continue
        labels[pair] = format_facet_label(start, end)

    ordered = sorted(labels, key=lambda pair: f"{pair[0]}_{pair[1]}")
    return [DateFacet(start_date=start, end_date=end, label=labels[(start, end)]) for start, end in ordered]


def type_facets() -> List[str]:
    return list(TYPE_FILTER_VALUES)
