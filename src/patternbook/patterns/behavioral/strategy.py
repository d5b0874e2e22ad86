"""Strategy - make a family of algorithms interchangeable."""
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Iterable, Union

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript
from patternbook.domain.exceptions import ValidationError

Number = Union[int, float, str, Decimal]
CENT = Decimal("0.01")


def _money(value: Number) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class DiscountStrategy(ABC):
    name = ""

    @abstractmethod
    def apply(self, amount: Decimal) -> Decimal:
        """Return the discounted amount, never below zero."""


class NoDiscount(DiscountStrategy):
    name = "none"

    def apply(self, amount: Decimal) -> Decimal:
        return _money(amount)


class PercentageDiscount(DiscountStrategy):
    name = "percentage"

    def __init__(self, percent: Number):
        percent = Decimal(str(percent))
        if not Decimal(0) <= percent <= Decimal(100):
            raise ValidationError(
                f"Discount percentage must be between 0 and 100, got {percent}",
                {"percent": str(percent)},
            )
        self.percent = percent

    def apply(self, amount: Decimal) -> Decimal:
        return _money(amount * (Decimal(100) - self.percent) / Decimal(100))


class FixedAmountDiscount(DiscountStrategy):
    name = "fixed"

    def __init__(self, amount: Number):
        amount = _money(amount)
        if amount < 0:
            raise ValidationError(
                f"Discount amount must not be negative, got {amount}", {"amount": str(amount)}
            )
        self.amount = amount

    def apply(self, amount: Decimal) -> Decimal:
        return max(_money(amount) - self.amount, Decimal("0.00"))


class Checkout:
    """Context; prices a cart with whichever strategy it currently holds."""

    def __init__(self, strategy: DiscountStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> DiscountStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: DiscountStrategy) -> None:
        self._strategy = strategy

    def total(self, prices: Iterable[Number]) -> Decimal:
        subtotal = sum((_money(p) for p in prices), Decimal("0.00"))
        return self._strategy.apply(subtotal)


STRATEGIES: Dict[str, Callable[..., DiscountStrategy]] = {
    NoDiscount.name: NoDiscount,
    PercentageDiscount.name: PercentageDiscount,
    FixedAmountDiscount.name: FixedAmountDiscount,
}


def strategy_for(name: str, **kwargs) -> DiscountStrategy:
    """Resolve a discount strategy by name."""
    if name not in STRATEGIES:
        raise ValueError(
            f"Discount strategy '{name}' not registered. Available strategies: {sorted(STRATEGIES)}"
        )
    return STRATEGIES[name](**kwargs)


@catalog_pattern(
    slug="strategy",
    name="Strategy",
    category=PatternCategory.BEHAVIORAL,
    intent="Define a family of algorithms, encapsulate each one, and make them interchangeable.",
    participants=["DiscountStrategy", "NoDiscount", "PercentageDiscount", "FixedAmountDiscount", "Checkout"],
)
def demo(out: Transcript) -> None:
    cart = ["19.99", "5.01", "25.00"]
    checkout = Checkout(NoDiscount())
    out.emit(f"{checkout.strategy.name}: {checkout.total(cart)}")

    checkout.strategy = strategy_for("percentage", percent=10)
    out.emit(f"{checkout.strategy.name}: {checkout.total(cart)}")

    checkout.strategy = strategy_for("fixed", amount="7.50")
    out.emit(f"{checkout.strategy.name}: {checkout.total(cart)}")
