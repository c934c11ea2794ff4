"""
Error types raised by the tournament engine.

Per-item failures (a single tournament with a bad date) are isolated by the
callers that catch MalformedDateError; everything else propagates.
"""
from typing import Optional


class TournamentEngineError(Exception):
    """Base class for all engine errors."""


class MalformedDateError(TournamentEngineError, ValueError):
    """A tournament date string is not a valid ISO YYYY-MM-DD date."""

    def __init__(self, value: object, tournament_id: Optional[int] = None):
        self.value = value
        self.tournament_id = tournament_id
        where = f" on tournament {tournament_id}" if tournament_id is not None else ""
        super().__init__(f"Malformed date {value!r}{where}")


class InvalidFilterError(TournamentEngineError, ValueError):
    """A facet filter value is outside its allowed set."""


class TournamentValidationError(TournamentEngineError):
    """A raw tournament record failed validation at ingestion."""

    def __init__(self, index: int, message: str):
        self.index = index
        self.message = message
        super().__init__(f"Tournament record #{index} is invalid: {message}")
