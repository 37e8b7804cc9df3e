"""Seasons grouping competitions."""

import datetime
from dataclasses import dataclass, field

from footballsim.competition import Competition
from footballsim.errors import DomainValidationError
from footballsim.ids import CompetitionId, SeasonId


@dataclass
class Season:
    """A season whose dates fall in its start and end years."""

    start_year: int
    end_year: int
    start_date: datetime.date
    end_date: datetime.date
    competitions: list[Competition]
    id: SeasonId = field(default_factory=SeasonId.generate)

    def __post_init__(self) -> None:
        if self.start_date >= self.end_date:
            raise DomainValidationError(
                "Season start date must be strictly before the end date."
            )
        if self.start_year > self.end_year:
            raise DomainValidationError(
                "Season start year cannot be greater than the end year."
            )
        if self.start_date.year != self.start_year:
            raise DomainValidationError(
                "Start date's year does not match start year."
            )
        if self.end_date.year != self.end_year:
            raise DomainValidationError("End date's year does not match end year.")

    def add_competition(self, competition: Competition) -> None:
        self.competitions.append(competition)

    def remove_competition(self, competition_id: CompetitionId) -> None:
        self.competitions = [c for c in self.competitions if c.id != competition_id]