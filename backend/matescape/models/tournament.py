from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TBD = "TBD"


class TournamentType(str, Enum):
    rapid = "rapid"
    blitz = "blitz"
    bullet = "bullet"
    classical = "classical"


class TournamentStatus(str, Enum):
    upcoming = "upcoming"
    ongoing = "ongoing"
    completed = "completed"


class Winners(BaseModel):
    model_config = ConfigDict(frozen=True)

    gold: str = TBD
    silver: str = TBD
    bronze: str = TBD

    @property
    def decided(self) -> bool:
        return TBD not in (self.gold, self.silver, self.bronze)


class Tournament(BaseModel):
    """A single tournament record.

    Dates are kept as the raw ISO strings the data source supplied; the engine
    parses them on demand so one bad date only affects its own record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    type: TournamentType
    status: TournamentStatus
    players: str = ""
    winners: Winners = Field(default_factory=Winners)
    excel_link: str = Field(default="#", alias="excelLink")

    @model_validator(mode="before")
    @classmethod
    def unify_single_date(cls, data: Any) -> Any:
        """Single-date records ({"date": ...}) become a one-day range."""
        if not isinstance(data, dict) or "date" not in data:
            return data
        data = dict(data)
        single = data.pop("date")
        if "startDate" not in data and "start_date" not in data:
            data["startDate"] = single
        if "endDate" not in data and "end_date" not in data:
            data["endDate"] = single
        return data

    @field_validator("players", mode="before")
    @classmethod
    def players_as_label(cls, v):
        if v is None:
            return ""
        return str(v)

    @property
    def date_key(self) -> str:
        """Date facet key, "{startDate}_{endDate}"."""
        return f"{self.start_date}_{self.end_date}"
