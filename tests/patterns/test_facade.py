import pytest

from patternbook.domain.catalog import Transcript
from patternbook.domain.exceptions import ValidationError
from patternbook.patterns.structural.facade import (
    InventoryService,
    OrderFacade,
    PaymentService,
    ShippingService,
    demo,
)


@pytest.fixture
def facade():
    return OrderFacade(
        InventoryService(stock={"mug": 2}, prices={"mug": 1250}),
        PaymentService(),
        ShippingService(),
    )


def test_place_order_coordinates_subsystems(facade):
    receipt = facade.place_order("mug", 2, "Oslo")

    assert receipt.total_cents == 2500
    assert facade.inventory.available("mug") == 0
    assert facade.payments.charged_cents == 2500
    assert receipt.steps == [
        "inventory: reserved 2 x mug",
        "payment: charged 25.00",
        "shipping: 2 x mug to Oslo",
    ]


def test_insufficient_stock_charges_nothing(facade):
    with pytest.raises(ValidationError):
        facade.place_order("mug", 3, "Oslo")
    assert facade.payments.charged_cents == 0
    assert facade.inventory.available("mug") == 2
    assert facade.shipping.log == []


def test_unknown_sku_rejected(facade):
    with pytest.raises(ValidationError) as exc_info:
        facade.place_order("teapot", 1, "Oslo")
    assert "teapot" in str(exc_info.value)


def test_non_positive_quantity_rejected(facade):
    with pytest.raises(ValidationError):
        facade.place_order("mug", 0, "Oslo")


def test_demo_output():
    out = Transcript()
    demo(out)
    assert out.lines == [
        "inventory: reserved 2 x book-gof",
        "payment: charged 99.98",
        "shipping: 2 x book-gof to Berlin",
        "order total: 99.98 (trk-0001)",
    ]
