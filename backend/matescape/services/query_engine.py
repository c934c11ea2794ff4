"""
Query engine: free-text search plus type and date facets.

All active predicates must pass. The result keeps the input order; there is
no ranking.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from matescape.errors import InvalidFilterError, MalformedDateError
from matescape.models.tournament import Tournament, TournamentType
from matescape.services.searchable_text import SearchIndex, build_searchable_text

logger = logging.getLogger(__name__)

ALL = "all"

TYPE_FILTER_VALUES = [ALL] + [t.value for t in TournamentType]


@dataclass(frozen=True)
class TournamentQuery:
    search_term: str = ""
    type_filter: str = ALL
    date_filter: str = ALL


def search_terms(search_term: Optional[str]) -> List[str]:
    """Lowercase whitespace-separated terms; empty list means no search."""
    if not search_term:
        return []
    return search_term.lower().split()


def parse_type_filter(type_filter: Optional[str]) -> Optional[TournamentType]:
    """None for "all", otherwise the selected type."""
    if type_filter is None or type_filter == ALL:
        return None
    try:
        return TournamentType(type_filter)
    except ValueError:
        raise InvalidFilterError(
            f"Unknown tournament type {type_filter!r}; expected one of {', '.join(TYPE_FILTER_VALUES)}"
        ) from None


def parse_date_filter(date_filter: Optional[str]) -> Optional[Tuple[str, str]]:
    """None for "all", otherwise the (startDate, endDate) pair from "{start}_{end}"."""
    if date_filter is None or date_filter == ALL:
        return None
    parts = date_filter.split("_")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidFilterError(f"Date filter {date_filter!r} must look like 'YYYY-MM-DD_YYYY-MM-DD'")
    return parts[0], parts[1]


def matches_search(text: str, terms: Sequence[str]) -> bool:
    return all(term in text for term in terms)


def filter_tournaments(
    tournaments: Sequence[Tournament],
    search_term: Optional[str] = "",
    type_filter: Optional[str] = ALL,
    date_filter: Optional[str] = ALL,
    index: Optional[SearchIndex] = None,
) -> List[Tournament]:
    """
    Stable filter of tournaments by search term, type and date range.

    Args:
        tournaments: Snapshot to filter; never mutated
        search_term: Raw user input; split on whitespace, every term must match
        type_filter: "all" or a TournamentType value
        date_filter: "all" or "{startDate}_{endDate}"
        index: Prebuilt SearchIndex for the snapshot (optional)

    Returns:
        Matching tournaments in input order

    Raises:
        InvalidFilterError: type or date filter value is not recognised
    """
    terms = search_terms(search_term)
    selected_type = parse_type_filter(type_filter)
    selected_range = parse_date_filter(date_filter)

    filtered: List[Tournament] = []
    for tournament in tournaments:
        if selected_type is not None and tournament.type != selected_type:
            continue
        if selected_range is not None and (tournament.start_date, tournament.end_date) != selected_range:
            continue
        if terms:
            try:
                text = index.text_for(tournament) if index is not None else build_searchable_text(tournament)
            except MalformedDateError as exc:
                logger.warning("Excluding tournament %s from search: %s", tournament.id, exc)
                continue
            if not matches_search(text, terms):
                continue
        filtered.append(tournament)
    return filtered


def run_query(
    tournaments: Sequence[Tournament], query: TournamentQuery, index: Optional[SearchIndex] = None
) -> List[Tournament]:
    return filter_tournaments(tournaments, query.search_term, query.type_filter, query.date_filter, index=index)
