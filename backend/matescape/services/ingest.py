"""
Ingestion: raw records (dicts from JSON or static data) into Tournament values.

Unknown types or statuses, missing fields and duplicate ids are validation
errors. Dates are not parsed here; a bad date only drops the tournament from
search and grouping later on.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Set

from pydantic import ValidationError

from matescape.errors import TournamentValidationError
from matescape.models.tournament import Tournament

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    tournaments: List[Tournament] = field(default_factory=list)
    rejected: List[TournamentValidationError] = field(default_factory=list)


def _describe(exc: ValidationError) -> str:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ())) or "record"
        errors.append(f"{loc}: {err.get('msg')}")
    return "; ".join(errors)


def load_tournaments(records: Iterable[Mapping[str, Any]], strict: bool = True) -> IngestResult:
    """
    Validate raw records in order.

    Args:
        records: Raw tournament records
        strict: Raise on the first invalid record instead of skipping it

    Returns:
        IngestResult with accepted tournaments (input order) and rejections

    Raises:
        TournamentValidationError: strict mode and a record is invalid
    """
    result = IngestResult()
    seen_ids: Set[int] = set()

    for index, record in enumerate(records):
        try:
            tournament = Tournament.model_validate(record)
            if tournament.id in seen_ids:
                raise TournamentValidationError(index, f"duplicate id {tournament.id}")
        except ValidationError as exc:
            error = TournamentValidationError(index, _describe(exc))
            if strict:
                raise error from exc
            logger.warning("Rejected tournament record: %s", error)
            result.rejected.append(error)
            continue
        except TournamentValidationError as error:
            if strict:
                raise
            logger.warning("Rejected tournament record: %s", error)
            result.rejected.append(error)
            continue

        seen_ids.add(tournament.id)
        result.tournaments.append(tournament)

    return result
