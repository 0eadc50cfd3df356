"""Discount policies.

A policy turns a base price into a discounted price. New kinds of
discount are added by subclassing DiscountPolicy; neither CatalogEntry
nor Catalog needs to change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money

_HUNDRED = Decimal("100")


class DiscountPolicy(ABC):

    @abstractmethod
    def apply(self, price: Money) -> Money:
        """Return the discounted price for *price*.

        Must be total over non-negative prices and never produce a
        negative amount.
        """


@dataclass(frozen=True)
class NoDiscount(DiscountPolicy):
    """Identity policy: the price is left unchanged."""

    def apply(self, price: Money) -> Money:
        return price


@dataclass(frozen=True)
class PercentageDiscount(DiscountPolicy):
    """Takes ``percent`` percent off the price (``10`` means 10% off)."""

    percent: Decimal

    def __post_init__(self) -> None:
        try:
            percent = Decimal(str(self.percent))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid discount percentage: {self.percent!r}") from exc
        if not percent.is_finite():
            raise ValidationError(f"Invalid discount percentage: {self.percent!r}")
        if not Decimal("0") <= percent <= _HUNDRED:
            raise ValidationError(
                f"Discount percentage must be between 0 and 100, got {percent}"
            )
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "percent", percent)

    def apply(self, price: Money) -> Money:
        return Money(price.amount * (_HUNDRED - self.percent) / _HUNDRED, price.currency)

    def __str__(self) -> str:
        return f"{self.percent.normalize():f}% off"


@dataclass(frozen=True)
class FlatDiscount(DiscountPolicy):
    """Takes a fixed amount off the price, never going below zero."""

    amount: Money

    def apply(self, price: Money) -> Money:
        if self.amount >= price:
            return Money.zero(price.currency)
        return price - self.amount

    def __str__(self) -> str:
        return f"{self.amount} off"


class CallableDiscount(DiscountPolicy):
    """Adapts a plain function ``price -> discounted price``.

    The function may return Money or anything ``Money.of`` accepts;
    a negative result raises ValidationError.
    """

    def __init__(self, func: Callable[[Money], Money | Decimal | int | float | str]) -> None:
        if not callable(func):
            raise ValidationError("Discount function must be callable")
        self._func = func

    def apply(self, price: Money) -> Money:
        result = self._func(price)
        if isinstance(result, Money):
            return result
        return Money.of(result, price.currency)
