"""Match statistics of a played fixture."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClubFixtureStatistics:
    """One side's statistics in a match."""

    goals: int
    shots: int
    fouls: int
    possession: float
    shots_on_target: int


@dataclass(frozen=True)
class FixtureResult:
    """Statistics for both sides of a match."""

    home_stats: ClubFixtureStatistics
    away_stats: ClubFixtureStatistics