"""Competitions: leagues, cups and friendlies."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from footballsim.competition_values import CompetitionRules, Standing
from footballsim.errors import DomainValidationError
from footballsim.ids import ClubId, CompetitionId, FixtureId
from footballsim.names import CompetitionName


class CompetitionType(Enum):
    LEAGUE = "League"
    KNOCKOUT = "Knockout"
    GROUP_STAGE = "GroupStage"
    FRIENDLY = "Friendly"
    CUSTOM = "Custom"

    def __str__(self) -> str:
        return self.value


@dataclass
class Competition:
    """A competition; all but friendlies need at least two participants."""

    name: CompetitionName
    rules: CompetitionRules
    format: CompetitionType
    fixtures: list[FixtureId]
    participants: list[ClubId]
    standings: Optional[Standing] = None
    id: CompetitionId = field(default_factory=CompetitionId.generate)

    def __post_init__(self) -> None:
        if len(self.participants) < 2 and self.format is not CompetitionType.FRIENDLY:
            raise DomainValidationError(
                "Non-friendly competition must have at least two participants."
            )

    def add_participant(self, club_id: ClubId) -> None:
        if club_id not in self.participants:
            self.participants.append(club_id)

    def remove_participant(self, club_id: ClubId) -> None:
        self.participants = [p for p in self.participants if p != club_id]

    def update_standings(self, new_standings: Standing) -> None:
        self.standings = new_standings