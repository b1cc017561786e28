"""
Common Value Objects

Value objects used across multiple domains:
- Money: Represents a rupiah amount; catalog prices and booking totals
- ParticipantCount: Validated number of people in a hiking group
"""

from dataclasses import dataclass

CURRENCY_IDR = 'IDR'


@dataclass(frozen=True)
class Money:
    """
    Money value object

    Represents a whole-rupiah amount. Immutable and supports the arithmetic
    needed to price a booking: adding line items and multiplying a unit
    price by the number of participants.
    """
    amount: int
    currency: str = CURRENCY_IDR

    def __post_init__(self):
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise TypeError("Amount must be a whole number of rupiah")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if self.currency != CURRENCY_IDR:
            raise ValueError(f"Unsupported currency: {self.currency}")

    @classmethod
    def zero(cls) -> 'Money':
        return cls(0)

    def __add__(self, other: 'Money') -> 'Money':
        """Add two money objects"""
        if not isinstance(other, Money):
            raise TypeError("Can only add Money to Money")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> 'Money':
        """Multiply a unit price by a head count"""
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError("Can only multiply Money by a whole number")
        return Money(self.amount * factor, self.currency)

    __rmul__ = __mul__

    def __int__(self) -> int:
        return self.amount

    def __str__(self):
        from shared.formatting import format_rupiah

        return format_rupiah(self.amount)

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class ParticipantCount:
    """
    Number of people in a hiking group

    Parsed from form or JSON input; anything that is not a whole number
    of at least one is rejected.
    """
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("Participant count must be an integer")
        if self.value < 1:
            raise ValueError("At least one participant is required")

    @classmethod
    def parse(cls, raw) -> 'ParticipantCount':
        if raw is None or raw == '':
            raise ValueError("Participant count is required")
        if isinstance(raw, bool):
            raise ValueError("Participant count must be a number")
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            raise ValueError("Participant count must be a number")
        return cls(value)

    def __int__(self) -> int:
        return self.value
