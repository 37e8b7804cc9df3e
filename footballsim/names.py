"""Validated names for clubs, competitions, nations and players."""

from dataclasses import dataclass

from footballsim.errors import DomainValidationError

_MAX_NAME_BYTES = 100


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def _bounded_name(name: str, empty_message: str, long_message: str) -> str:
    trimmed = name.strip()
    if not trimmed:
        raise DomainValidationError(empty_message)
    if _byte_length(trimmed) > _MAX_NAME_BYTES:
        raise DomainValidationError(long_message)
    return trimmed


@dataclass(frozen=True)
class ClubName:
    """A club name, trimmed, non-empty and at most 100 bytes."""

    value: str

    def __post_init__(self) -> None:
        trimmed = _bounded_name(
            self.value,
            "The club name cannot be empty or null.",
            "The club name is too long.",
        )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClubAbbreviation:
    """A club abbreviation whose trimmed form is exactly 3 bytes long."""

    value: str

    def __post_init__(self) -> None:
        if _byte_length(self.value.strip()) != 3:
            raise DomainValidationError("Abbreviation must be exactly 3 characters.")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CompetitionName:
    """A competition name, trimmed, non-empty and at most 100 bytes."""

    value: str

    def __post_init__(self) -> None:
        trimmed = _bounded_name(
            self.value,
            "The competition name cannot be empty or null.",
            "The competition name is too long.",
        )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NationName:
    """A nation name, trimmed and non-empty."""

    value: str

    def __post_init__(self) -> None:
        trimmed = self.value.strip()
        if not trimmed:
            raise DomainValidationError(
                "The name of a nation cannot be empty or null."
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlayerName:
    """A player's first and last name, both trimmed and non-empty."""

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        first = self.first_name.strip()
        last = self.last_name.strip()
        if not first or not last:
            raise DomainValidationError(
                "Both first name and last name must be provided and cannot be empty."
            )
        object.__setattr__(self, "first_name", first)
        object.__setattr__(self, "last_name", last)

    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name()