"""Rules and standings of a competition."""

from dataclasses import dataclass, field

from footballsim.errors import DomainValidationError
from footballsim.ids import ClubId


@dataclass(frozen=True)
class CompetitionRules:
    """Points awarded per result and promotion/relegation slots."""

    points_for_win: int
    points_for_draw: int
    promotion_slots: int
    relegation_slots: int

    def __post_init__(self) -> None:
        if self.points_for_win < self.points_for_draw:
            raise DomainValidationError(
                "Points for win must be greater than or equal to points for draw."
            )


@dataclass
class StandingRow:
    """One club's line in a league table."""

    club_id: ClubId
    wins: int = 0
    draws: int = 0
    losses: int = 0
    points: int = 0
    goals_scored: int = 0
    goals_conceded: int = 0


@dataclass
class Standing:
    """A league table."""

    entries: list[StandingRow] = field(default_factory=list)