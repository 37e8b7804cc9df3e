"""Reputation score for clubs and nations."""

from dataclasses import dataclass

from footballsim.errors import DomainValidationError


@dataclass(frozen=True, order=True)
class Reputation:
    """A reputation score between 1 and 100 inclusive."""

    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= 100:
            raise DomainValidationError("Reputation must be between 1 and 100.")

    def __int__(self) -> int:
        return self.value