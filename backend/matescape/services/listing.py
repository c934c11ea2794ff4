"""
One full query cycle: filter, group and collect facets for a snapshot.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from matescape.models.tournament import Tournament
from matescape.services.facets import DateFacet, date_facets, type_facets
from matescape.services.grouping import GroupedResult, group_tournaments
from matescape.services.query_engine import TournamentQuery, run_query
from matescape.services.searchable_text import SearchIndex


@dataclass
class ListingResult:
    query: TournamentQuery
    total: int
    matched: int
    groups: GroupedResult
    date_facets: List[DateFacet]
    type_facets: List[str]


def build_listing(
    tournaments: Sequence[Tournament],
    query: TournamentQuery,
    index: Optional[SearchIndex] = None,
    facets: Optional[List[DateFacet]] = None,
) -> ListingResult:
    """Run the query against tournaments and group the matches.

    Facets always describe the whole snapshot, not the filtered subset.
    matched counts the grouped tournaments; ones dropped by grouping for a
    malformed start date are not counted.
    """
    filtered = run_query(tournaments, query, index=index)
    groups = group_tournaments(filtered)
    return ListingResult(
        query=query,
        total=len(tournaments),
        matched=sum(len(buckets) for buckets in groups.values()),
        groups=groups,
        date_facets=facets if facets is not None else date_facets(tournaments),
        type_facets=type_facets(),
    )
