"""Players."""

import datetime
from dataclasses import dataclass, field

from footballsim.attributes import PlayerAttributes
from footballsim.growth_potential import GrowthPotential
from footballsim.ids import NationId, PlayerId
from footballsim.names import PlayerName
from footballsim.position import Position
from footballsim.weights import PositionWeights


@dataclass
class Player:
    """A player with a position, attributes and growth potential."""

    name: PlayerName
    nation: NationId
    position: Position
    growth_potential: GrowthPotential
    birth_date: datetime.date
    attributes: PlayerAttributes
    id: PlayerId = field(default_factory=PlayerId.generate)

    def calculate_market_value(self, current_date: datetime.date) -> float:
        """Value from current ability, highest at age 25 and never negative."""
        base = self.current_ability() * 1_000_000.0
        age_factor = 1.0 - abs(self.calculate_age(current_date) - 25.0) / 30.0
        return max(base * age_factor, 0.0)

    def calculate_age(self, current_date: datetime.date) -> int:
        """Whole years lived at the given date, as an 8-bit count."""
        age = (current_date.year - self.birth_date.year) & 0xFF
        if (current_date.month, current_date.day) < (
            self.birth_date.month,
            self.birth_date.day,
        ):
            age = max(age - 1, 0)
        return age

    def current_ability(self) -> float:
        weights = PositionWeights.for_position(self.position)
        return weights.calculate_ability(self.attributes)

    def potential_ability(self) -> float:
        """Current ability grown by the growth potential, capped at 1."""
        current = self.current_ability()
        return current + min(current * self.growth_potential.value, 1.0 - current)