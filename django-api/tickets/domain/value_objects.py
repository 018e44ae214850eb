"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value <= 0:
            raise ValueError("Account ID must be a positive integer")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Money:
    """Whole-unit price representation with validation."""

    amount: int

    def __post_init__(self) -> None:
        if not _is_int(self.amount):
            raise ValueError("Money amount must be an integer")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=0)

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def times(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Quantity:
    """Non-negative ticket count."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise ValueError("Quantity must be an integer")
        if self.value < 0:
            raise ValueError("Quantity cannot be negative")
