"""Monetary amounts in whole currency units."""

import functools
import math
from dataclasses import dataclass
from enum import Enum


class Currency(Enum):
    EUR = "EUR"
    GBP = "GBP"
    USD = "USD"


_CURRENCY_RANK = {currency: rank for rank, currency in enumerate(Currency)}


def _round_half_away(value: float) -> int:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(-whole if value < 0 else whole)


@functools.total_ordering
@dataclass(frozen=True)
class Money:
    """An integer amount with a currency; ordered by amount, then currency."""

    amount: int
    currency: Currency

    def _key(self) -> tuple[int, int]:
        return self.amount, _CURRENCY_RANK[self.currency]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._key() < other._key()

    def add(self, other: "Money") -> "Money":
        """Sum of both amounts, in this amount's currency."""
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Difference of both amounts, in this amount's currency."""
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, factor: float) -> "Money":
        """Scale the amount, rounding halves away from zero."""
        return Money(_round_half_away(self.amount * factor), self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        return cls(0, currency)

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)