"""
Grouping engine: month sections split into lifecycle status buckets.

Month keys appear in the order their first tournament appears in the input,
not in calendar order. Callers that want chronological sections must sort
the tournaments first.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence

from matescape.errors import MalformedDateError
from matescape.models.tournament import Tournament, TournamentStatus
from matescape.services.dates import month_year_label, parse_iso_date

logger = logging.getLogger(__name__)


@dataclass
class StatusBuckets:
    ongoing: List[Tournament] = field(default_factory=list)
    upcoming: List[Tournament] = field(default_factory=list)
    completed: List[Tournament] = field(default_factory=list)

    def bucket_for(self, status: TournamentStatus) -> List[Tournament]:
        if status == TournamentStatus.ongoing:
            return self.ongoing
        if status == TournamentStatus.upcoming:
            return self.upcoming
        if status == TournamentStatus.completed:
            return self.completed
        raise ValueError(f"Unknown tournament status: {status!r}")

    def __iter__(self) -> Iterator[Tournament]:
        yield from self.ongoing
        yield from self.upcoming
        yield from self.completed

    def __len__(self) -> int:
        return len(self.ongoing) + len(self.upcoming) + len(self.completed)


GroupedResult = Dict[str, StatusBuckets]


def group_tournaments(tournaments: Sequence[Tournament]) -> GroupedResult:
    """Partition tournaments into {"June 2025": StatusBuckets(...), ...}.

    Tournaments whose start date cannot be parsed are skipped and logged.
    """
    grouped: GroupedResult = {}
    for tournament in tournaments:
        try:
            start = parse_iso_date(tournament.start_date, tournament.id)
        except MalformedDateError as exc:
            logger.warning("Skipping tournament %s in grouping: %s", tournament.id, exc)
            continue

        label = month_year_label(start)
        if label not in grouped:
            grouped[label] = StatusBuckets()
        grouped[label].bucket_for(tournament.status).append(tournament)
    return grouped
