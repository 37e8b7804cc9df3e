"""Player contracts."""

import datetime
from dataclasses import dataclass, field

from footballsim.errors import DomainValidationError, UnknownDomainError
from footballsim.ids import ClubId, ContractId, PlayerId
from footballsim.money import Money


@dataclass
class Contract:
    """A contract between a club and a player with a weekly wage."""

    club_id: ClubId
    player_id: PlayerId
    end_date: datetime.date
    start_date: datetime.date
    weekly_wage: Money
    id: ContractId = field(default_factory=ContractId.generate)

    def __post_init__(self) -> None:
        if self.start_date >= self.end_date:
            raise DomainValidationError(
                "Contract start date must be strictly before the end date."
            )

    def extend_end_date(self, new_end_date: datetime.date) -> None:
        """Move the end date later; earlier or equal dates are refused."""
        if new_end_date <= self.end_date:
            raise UnknownDomainError(
                "New end date must be after the current contract end date."
            )
        self.end_date = new_end_date

    def update_wage(self, new_wage: Money) -> None:
        self.weekly_wage = new_wage