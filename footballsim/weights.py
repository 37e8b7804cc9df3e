"""Per-position attribute weightings used to rate players."""

from dataclasses import dataclass

from footballsim.attributes import Attribute, PlayerAttributes
from footballsim.position import Position

_TOLERANCE = 1e-6

A = Attribute

_GK = {
    A.KICKING: 0.15, A.REFLEXES: 0.25, A.HANDLING: 0.20, A.STRENGTH: 0.05,
    A.COMPOSURE: 0.10, A.AERIAL_REACH: 0.10, A.POSITIONING: 0.15,
}
_CB = {
    A.TACKLING: 0.20, A.STRENGTH: 0.15, A.POSITIONING: 0.15, A.HEADING: 0.10,
    A.PASSING: 0.10, A.COMPOSURE: 0.10, A.PACE: 0.10, A.STAMINA: 0.05,
    A.VISION: 0.05,
}
_FULL_BACK = {
    A.PACE: 0.15, A.STAMINA: 0.15, A.TACKLING: 0.15, A.POSITIONING: 0.10,
    A.PASSING: 0.10, A.DRIBBLING: 0.10, A.COMPOSURE: 0.10, A.VISION: 0.05,
    A.STRENGTH: 0.05, A.FINISHING: 0.05,
}
_WING_BACK = {
    A.PACE: 0.15, A.STAMINA: 0.15, A.PASSING: 0.10, A.TACKLING: 0.10,
    A.DRIBBLING: 0.10, A.POSITIONING: 0.10, A.COMPOSURE: 0.10, A.VISION: 0.10,
    A.STRENGTH: 0.05, A.FINISHING: 0.05,
}
_DM = {
    A.TACKLING: 0.15, A.POSITIONING: 0.15, A.PASSING: 0.15, A.STRENGTH: 0.10,
    A.COMPOSURE: 0.10, A.STAMINA: 0.10, A.VISION: 0.10, A.PACE: 0.05,
    A.DRIBBLING: 0.05, A.HEADING: 0.05,
}
_CM = {
    A.PASSING: 0.15, A.VISION: 0.15, A.POSITIONING: 0.10, A.STAMINA: 0.10,
    A.COMPOSURE: 0.10, A.DRIBBLING: 0.10, A.STRENGTH: 0.10, A.PACE: 0.10,
    A.FINISHING: 0.05, A.HEADING: 0.05,
}
_AM = {
    A.VISION: 0.15, A.PASSING: 0.15, A.DRIBBLING: 0.15, A.FINISHING: 0.15,
    A.COMPOSURE: 0.10, A.POSITIONING: 0.10, A.PACE: 0.10, A.STAMINA: 0.05,
    A.STRENGTH: 0.05,
}
_WIDE_MID = {
    A.PACE: 0.15, A.DRIBBLING: 0.15, A.PASSING: 0.10, A.VISION: 0.10,
    A.FINISHING: 0.10, A.STAMINA: 0.10, A.POSITIONING: 0.10, A.COMPOSURE: 0.10,
    A.STRENGTH: 0.05, A.HEADING: 0.05,
}
_WINGER = {
    A.PACE: 0.20, A.DRIBBLING: 0.15, A.FINISHING: 0.15, A.VISION: 0.10,
    A.PASSING: 0.10, A.POSITIONING: 0.10, A.COMPOSURE: 0.10, A.STAMINA: 0.05,
    A.STRENGTH: 0.05,
}
_STRIKER = {
    A.FINISHING: 0.25, A.POSITIONING: 0.15, A.HEADING: 0.15, A.STRENGTH: 0.10,
    A.COMPOSURE: 0.10, A.PACE: 0.10, A.DRIBBLING: 0.05, A.PASSING: 0.05,
    A.VISION: 0.05,
}

_PROFILES = {
    Position.GK: _GK,
    Position.CB: _CB,
    Position.RB: _FULL_BACK,
    Position.LB: _FULL_BACK,
    Position.RWB: _WING_BACK,
    Position.LWB: _WING_BACK,
    Position.DM: _DM,
    Position.CM: _CM,
    Position.AM: _AM,
    Position.RM: _WIDE_MID,
    Position.LM: _WIDE_MID,
    Position.RW: _WINGER,
    Position.LW: _WINGER,
    Position.SS: _STRIKER,
    Position.ST: _STRIKER,
}


@dataclass
class PositionWeights:
    """Attribute weights for one position, keyed in canonical attribute order."""

    position: Position
    weights: dict[Attribute, float]

    def total_weights(self) -> float:
        return sum(self.weights.values())

    def is_valid(self) -> bool:
        """Whether the weights sum to 1 within a small tolerance."""
        return abs(self.total_weights() - 1.0) < _TOLERANCE

    @classmethod
    def for_position(cls, position: Position) -> "PositionWeights":
        weights = dict.fromkeys(Attribute, 0.0)
        weights.update(_PROFILES[position])
        return cls(position=position, weights=weights)

    def calculate_ability(self, attributes: PlayerAttributes) -> float:
        """Weighted rating in [0, 1] from attributes rated out of 100."""
        total = 0.0
        for attribute, weight in self.weights.items():
            value = attributes.get_attribute_value(attribute)
            if value is not None:
                total += (value / 100.0) * weight
        return total