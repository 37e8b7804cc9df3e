"""Football clubs."""

from dataclasses import dataclass, field

from footballsim.ids import ClubId, ContractId, NationId
from footballsim.names import ClubAbbreviation, ClubName
from footballsim.reputation import Reputation


@dataclass
class Club:
    """A club with its squad of player contracts."""

    name: ClubName
    nation: NationId
    squad: list[ContractId]
    reputation: Reputation
    abbreviation: ClubAbbreviation
    id: ClubId = field(default_factory=ClubId.generate)

    def change_reputation(self, new_reputation: Reputation) -> None:
        self.reputation = new_reputation

    def add_player(self, contract: ContractId) -> None:
        """Add a contract to the squad unless it is already there."""
        if contract not in self.squad:
            self.squad.append(contract)

    def remove_player(self, contract: ContractId) -> None:
        self.squad = [member for member in self.squad if member != contract]