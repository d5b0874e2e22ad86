from decimal import Decimal

import pytest

from patternbook.domain.catalog import Transcript
from patternbook.domain.exceptions import ValidationError
from patternbook.patterns.behavioral.strategy import (
    Checkout,
    FixedAmountDiscount,
    NoDiscount,
    PercentageDiscount,
    demo,
    strategy_for,
)


def test_checkout_uses_current_strategy():
    checkout = Checkout(NoDiscount())
    assert checkout.total(["10.00", "5.50"]) == Decimal("15.50")

    checkout.strategy = PercentageDiscount(50)
    assert checkout.total(["10.00", "5.50"]) == Decimal("7.75")


def test_percentage_rounds_half_up_to_cents():
    assert PercentageDiscount(10).apply(Decimal("0.05")) == Decimal("0.05")
    assert PercentageDiscount("33.3").apply(Decimal("10")) == Decimal("6.67")


def test_fixed_discount_never_goes_below_zero():
    assert FixedAmountDiscount(20).apply(Decimal("5")) == Decimal("0.00")


def test_empty_cart_totals_zero():
    assert Checkout(FixedAmountDiscount(5)).total([]) == Decimal("0.00")


@pytest.mark.parametrize("percent", [-1, 101, "150"])
def test_percentage_out_of_range(percent):
    with pytest.raises(ValidationError):
        PercentageDiscount(percent)


def test_negative_fixed_amount_rejected():
    with pytest.raises(ValidationError):
        FixedAmountDiscount("-0.01")


def test_strategy_for_resolves_by_name():
    strategy = strategy_for("percentage", percent=25)
    assert isinstance(strategy, PercentageDiscount)
    assert strategy.percent == Decimal("25")


def test_strategy_for_unknown_name():
    with pytest.raises(ValueError) as exc_info:
        strategy_for("bogo")
    assert "['fixed', 'none', 'percentage']" in str(exc_info.value)


def test_demo_output():
    out = Transcript()
    demo(out)
    assert out.lines == ["none: 50.00", "percentage: 45.00", "fixed: 42.50"]
