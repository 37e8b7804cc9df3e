"""Growth potential of a player."""

from dataclasses import dataclass

from footballsim.errors import DomainValidationError


@dataclass(frozen=True)
class GrowthPotential:
    """A growth factor between 0.0 and 1.0 inclusive."""

    value: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.value <= 1.0:
            raise DomainValidationError(
                "Growth potential must be between 0.0 and 1.0."
            )

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)