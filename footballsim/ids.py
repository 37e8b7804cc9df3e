"""Typed identifiers for domain entities."""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class EntityId:
    """A UUID-backed identifier; identifiers of different kinds never compare equal."""

    value: uuid.UUID

    @classmethod
    def generate(cls):
        """Create a fresh random identifier."""
        return cls(uuid.uuid4())

    def __str__(self) -> str:
        return str(self.value)


class ClubId(EntityId):
    pass


class CompetitionId(EntityId):
    pass


class FixtureId(EntityId):
    pass


class NationId(EntityId):
    pass


class PlayerId(EntityId):
    pass


class ContractId(EntityId):
    pass


class SeasonId(EntityId):
    pass