from matescape.models.tournament import (
    TBD,
    Tournament,
    TournamentStatus,
    TournamentType,
    Winners,
)

__all__ = [
    "TBD",
    "Tournament",
    "TournamentStatus",
    "TournamentType",
    "Winners",
]
