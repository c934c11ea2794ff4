"""
Read-only tournament listing endpoints.

No auth. Used by the public tournament page: listing with search and
facets, the facet lists for the selectors, and a single tournament's detail.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from matescape.errors import InvalidFilterError, MalformedDateError
from matescape.models.tournament import Tournament, TournamentStatus, TournamentType, Winners
from matescape.services.dates import format_date_range, parse_iso_date
from matescape.services.facets import DateFacet, type_facets
from matescape.services.listing import build_listing
from matescape.services.query_engine import ALL, TournamentQuery
from matescape.store import TournamentStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Response models ──────────────────────────────────────────────────────

class TournamentItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    type: TournamentType
    status: TournamentStatus
    players: str
    date_range: Optional[str] = Field(default=None, alias="dateRange")


class TournamentDetail(TournamentItem):
    winners: Winners
    excel_link: str = Field(alias="excelLink")
    results_decided: bool = Field(alias="resultsDecided")


class MonthGroup(BaseModel):
    month: str
    ongoing: List[TournamentItem]
    upcoming: List[TournamentItem]
    completed: List[TournamentItem]


class DateFacetItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    label: str


class FacetsResponse(BaseModel):
    date_facets: List[DateFacetItem]
    type_facets: List[str]


class ListingResponse(FacetsResponse):
    total: int
    matched: int
    groups: List[MonthGroup]


# ── Helpers ──────────────────────────────────────────────────────────────

def _date_range(tournament: Tournament) -> Optional[str]:
    """'Jun 20, 2025 - Jun 24, 2025', or None when a date is malformed."""
    try:
        return format_date_range(parse_iso_date(tournament.start_date), parse_iso_date(tournament.end_date))
    except MalformedDateError:
        return None


def _item(tournament: Tournament) -> TournamentItem:
    return TournamentItem(
        id=tournament.id,
        name=tournament.name,
        start_date=tournament.start_date,
        end_date=tournament.end_date,
        type=tournament.type,
        status=tournament.status,
        players=tournament.players,
        date_range=_date_range(tournament),
    )


def _facet_item(facet: DateFacet) -> DateFacetItem:
    return DateFacetItem(key=facet.key, start_date=facet.start_date, end_date=facet.end_date, label=facet.label)


# ── Endpoints ────────────────────────────────────────────────────────────

@router.get("/tournaments", response_model=ListingResponse, response_model_by_alias=True)
def list_tournaments(
    search: str = Query(default=""),
    type_filter: str = Query(default=ALL, alias="type"),
    date_filter: str = Query(default=ALL, alias="date"),
    store: TournamentStore = Depends(get_store),
):
    """Search and filter tournaments, grouped by month then status"""
    snapshot = store.snapshot()
    query = TournamentQuery(search_term=search, type_filter=type_filter, date_filter=date_filter)
    try:
        listing = build_listing(
            snapshot.tournaments,
            query,
            index=store.search_index(snapshot),
            facets=store.date_facets(snapshot),
        )
    except InvalidFilterError as e:
        raise HTTPException(status_code=422, detail=str(e))

    groups = [
        MonthGroup(
            month=month,
            ongoing=[_item(t) for t in buckets.ongoing],
            upcoming=[_item(t) for t in buckets.upcoming],
            completed=[_item(t) for t in buckets.completed],
        )
        for month, buckets in listing.groups.items()
    ]
    return ListingResponse(
        total=listing.total,
        matched=listing.matched,
        groups=groups,
        date_facets=[_facet_item(f) for f in listing.date_facets],
        type_facets=listing.type_facets,
    )


@router.get("/tournaments/facets", response_model=FacetsResponse, response_model_by_alias=True)
def get_facets(store: TournamentStore = Depends(get_store)):
    """Values for the type and date selectors"""
    snapshot = store.snapshot()
    return FacetsResponse(
        date_facets=[_facet_item(f) for f in store.date_facets(snapshot)],
        type_facets=type_facets(),
    )


@router.get("/tournaments/{tournament_id}", response_model=TournamentDetail, response_model_by_alias=True)
def get_tournament(tournament_id: int, store: TournamentStore = Depends(get_store)):
    """Get a tournament by ID"""
    tournament = store.snapshot().get(tournament_id)
    if not tournament:
        raise HTTPException(status_code=404, detail="Tournament not found")
    return TournamentDetail(
        **_item(tournament).model_dump(),
        winners=tournament.winners,
        excel_link=tournament.excel_link,
        results_decided=tournament.winners.decided,
    )
