"""Commands, repository interfaces and use cases of the application layer."""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from footballsim.club import Club
from footballsim.errors import DomainError, EntityNotFoundError, from_domain_error
from footballsim.ids import ClubId, NationId, PlayerId
from footballsim.names import NationName
from footballsim.nation import Nation
from footballsim.player import Player
from footballsim.reputation import Reputation


@dataclass(frozen=True)
class CreateNationCommand:
    """Request to create a nation."""

    name: str
    reputation: int


@dataclass(frozen=True)
class FindNationByIdCommand:
    """Request to look up a nation by its identifier."""

    id: uuid.UUID


@dataclass(frozen=True)
class CreatePlayerCommand:
    """Request to create a player, with fields in their raw form."""

    last_name: str
    first_name: str
    nation: uuid.UUID
    position: str
    growth_potential: float
    birth_date: str
    attributes: str


class ClubRepository(ABC):
    """Storage for clubs."""

    @abstractmethod
    def save(self, club: Club) -> None:
        """Store a club."""

    @abstractmethod
    def find_by_id(self, club_id: ClubId) -> Optional[Club]:
        """The club with this identifier, or None."""

    @abstractmethod
    def list_by_nation(self, nation_id: NationId) -> list[Club]:
        """All clubs belonging to a nation."""


class NationRepository(ABC):
    """Storage for nations."""

    @abstractmethod
    def save(self, nation: Nation) -> None:
        """Store a nation."""

    @abstractmethod
    def find_by_id(self, nation_id: NationId) -> Optional[Nation]:
        """The nation with this identifier, or None."""

    @abstractmethod
    def list_all(self) -> list[Nation]:
        """Every stored nation."""


class PlayerRepository(ABC):
    """Storage for players."""

    @abstractmethod
    def save(self, player: Player) -> None:
        """Store a player."""

    @abstractmethod
    def find_by_id(self, player_id: PlayerId) -> Optional[Player]:
        """The player with this identifier, or None."""

    @abstractmethod
    def list_by_nation(self, nation_id: NationId) -> list[Player]:
        """All players of a nation."""


@dataclass(frozen=True)
class CreateNation:
    """Validate, create and store a new nation."""

    repo: NationRepository

    def execute(self, command: CreateNationCommand) -> NationId:
        """Create the nation and return its identifier."""
        try:
            name = NationName(command.name)
            reputation = Reputation(command.reputation)
            nation = Nation(name, reputation)
        except DomainError as error:
            raise from_domain_error(error) from error
        self.repo.save(nation)
        return nation.id


@dataclass(frozen=True)
class FindNationById:
    """Look up a nation, failing if it does not exist."""

    repo: NationRepository

    def execute(self, command: FindNationByIdCommand) -> Nation:
        nation_id = NationId(command.id)
        nation = self.repo.find_by_id(nation_id)
        if nation is None:
            raise EntityNotFoundError(
                f"A nation with ID {nation_id} was not found."
            )
        return nation


@dataclass(frozen=True)
class ListAllNations:
    """List every stored nation."""

    repo: NationRepository

    def execute(self) -> list[Nation]:
        return list(self.repo.list_all())