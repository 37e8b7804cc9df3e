"""Composite ability ratings derived from player attributes."""

import math
from dataclasses import dataclass
from typing import Iterable, Mapping

from footballsim.attributes import FieldAttributes, GoalkeeperAttributes, PlayerAttributes


def _weighted_average(pairs: Iterable[tuple[float, float]]) -> float:
    pairs = list(pairs)
    sum_weights = sum(weight for _, weight in pairs)
    total = sum(value * weight for value, weight in pairs)
    return total / sum_weights if sum_weights > 0.0 else 0.0


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


_TECHNICAL_KEYS = (
    "passing",
    "heading",
    "kicking",
    "handling",
    "reflexes",
    "tackling",
    "finishing",
    "dribbling",
    "aerial_reach",
)


@dataclass(frozen=True)
class PlayerAbility:
    """Current ability, evolutionary potential and contextual impact index."""

    current: float
    potential: float
    impact: float

    @classmethod
    def calculate(
        cls,
        attributes: PlayerAttributes,
        weights: Mapping[str, float],
        player_age: int,
        tactic_context: float,
        consistency_training: float,
    ) -> "PlayerAbility":
        """Rate a player from attributes and weights keyed by attribute name."""
        mental = attributes.mental
        physical = attributes.physical

        technical_values = dict.fromkeys(_TECHNICAL_KEYS, 0)
        if isinstance(attributes, FieldAttributes):
            tech = attributes.technical
            technical_values.update(
                passing=tech.passing,
                heading=tech.heading,
                tackling=tech.tackling,
                dribbling=tech.dribbling,
                finishing=tech.finishing,
            )
        elif isinstance(attributes, GoalkeeperAttributes):
            tech = attributes.technical
            technical_values.update(
                kicking=tech.kicking,
                handling=tech.reflexes,
                reflexes=tech.handling,
                aerial_reach=tech.aerial_reach,
            )

        def weight(name: str) -> float:
            return weights.get(name, 0.0)

        technical_average = _weighted_average(
            (float(technical_values[key]), weight(key)) for key in _TECHNICAL_KEYS
        )
        mental_average = _weighted_average(
            [
                (float(mental.vision), weight("vision")),
                (float(mental.composure), weight("composure")),
                (float(mental.positioning), weight("positioning")),
            ]
        )
        physical_average = _weighted_average(
            [
                (float(physical.pace), weight("pace")),
                (float(physical.stamina), weight("stamina")),
                (float(physical.strength), weight("strength")),
            ]
        )

        phys_dominance = physical_average * (physical.stamina / 100.0)
        tech_consistency = technical_average * (1.0 + mental.composure / 100.0)
        game_reading = mental_average * ((mental.vision + mental.positioning) / 200.0)

        age_factor = max(27.0 - player_age, 0.0) / 27.0
        current = 0.6 * tech_consistency + 0.3 * game_reading + 0.1 * phys_dominance
        potential = min(
            0.4 * game_reading + 0.2 * phys_dominance + 0.4 * age_factor * 100.0,
            100.0,
        )
        impact = _divide(
            current * tactic_context + potential * consistency_training,
            tactic_context + consistency_training,
        )
        return cls(current=current, potential=potential, impact=impact)