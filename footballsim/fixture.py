"""Fixtures between two clubs."""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from footballsim.errors import DomainValidationError, UnknownDomainError
from footballsim.fixture_result import FixtureResult
from footballsim.ids import ClubId, CompetitionId, FixtureId


class FixtureStatus(Enum):
    PLAYED = "Played"
    SCHEDULED = "Scheduled"
    POSTPONED = "Postponed"


@dataclass
class Fixture:
    """A match between two different clubs, scheduled when created."""

    date: datetime.date
    home_club_id: ClubId
    away_club_id: ClubId
    competition_id: CompetitionId
    status: FixtureStatus = field(default=FixtureStatus.SCHEDULED, init=False)
    result: Optional[FixtureResult] = field(default=None, init=False)
    id: FixtureId = field(default_factory=FixtureId.generate)

    def __post_init__(self) -> None:
        if self.home_club_id == self.away_club_id:
            raise DomainValidationError("Home club and away club cannot be the same.")

    def record_result(self, final_result: FixtureResult) -> None:
        """Store the result and mark the fixture as played."""
        if self.status is FixtureStatus.PLAYED:
            raise UnknownDomainError("Cannot change the result of a played fixture.")
        self.result = final_result
        self.status = FixtureStatus.PLAYED

    def postpone(self) -> None:
        if self.status is FixtureStatus.PLAYED:
            raise UnknownDomainError(
                "Cannot postpone a game that has already been played."
            )
        self.status = FixtureStatus.POSTPONED