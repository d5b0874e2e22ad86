"""Facade - a single entry point in front of a set of subsystems."""
from dataclasses import dataclass, field
from typing import Dict, List

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript
from patternbook.domain.exceptions import ValidationError


class InventoryService:
    def __init__(self, stock: Dict[str, int], prices: Dict[str, int]):
        self._stock = dict(stock)
        self._prices = dict(prices)
        self.log: List[str] = []

    def price_of(self, sku: str) -> int:
        if sku not in self._prices:
            raise ValidationError(f"Unknown sku '{sku}'", {"sku": sku})
        return self._prices[sku]

    def available(self, sku: str) -> int:
        return self._stock.get(sku, 0)

    def reserve(self, sku: str, quantity: int) -> None:
        if self.available(sku) < quantity:
            raise ValidationError(
                f"Insufficient stock for '{sku}': requested {quantity}, available {self.available(sku)}",
                {"sku": sku, "requested": quantity},
            )
        self._stock[sku] -= quantity
        self.log.append(f"inventory: reserved {quantity} x {sku}")


class PaymentService:
    def __init__(self):
        self.charged_cents = 0
        self.log: List[str] = []

    def charge(self, amount_cents: int) -> str:
        self.charged_cents += amount_cents
        self.log.append(f"payment: charged {amount_cents / 100:.2f}")
        return f"txn-{len(self.log):04d}"


class ShippingService:
    def __init__(self):
        self.log: List[str] = []

    def ship(self, sku: str, quantity: int, destination: str) -> str:
        self.log.append(f"shipping: {quantity} x {sku} to {destination}")
        return f"trk-{len(self.log):04d}"


@dataclass(frozen=True)
class OrderReceipt:
    sku: str
    quantity: int
    total_cents: int
    transaction_id: str
    tracking_number: str
    steps: List[str] = field(default_factory=list)


class OrderFacade:
    """
    Places an order through the inventory, payment and shipping subsystems.

    Validation happens before any subsystem is touched, so a rejected order
    reserves and charges nothing.
    """

    def __init__(
        self,
        inventory: InventoryService,
        payments: PaymentService,
        shipping: ShippingService,
    ):
        self.inventory = inventory
        self.payments = payments
        self.shipping = shipping

    def place_order(self, sku: str, quantity: int, destination: str) -> OrderReceipt:
        if quantity <= 0:
            raise ValidationError("Quantity must be positive", {"quantity": quantity})

        unit_price = self.inventory.price_of(sku)
        if self.inventory.available(sku) < quantity:
            raise ValidationError(
                f"Insufficient stock for '{sku}'", {"sku": sku, "requested": quantity}
            )

        self.inventory.reserve(sku, quantity)
        total = unit_price * quantity
        transaction_id = self.payments.charge(total)
        tracking = self.shipping.ship(sku, quantity, destination)

        steps = self.inventory.log[-1:] + self.payments.log[-1:] + self.shipping.log[-1:]
        return OrderReceipt(sku, quantity, total, transaction_id, tracking, steps)


@catalog_pattern(
    slug="facade",
    name="Facade",
    category=PatternCategory.STRUCTURAL,
    intent="Provide a unified interface to a set of interfaces in a subsystem.",
    participants=["OrderFacade", "InventoryService", "PaymentService", "ShippingService"],
)
def demo(out: Transcript) -> None:
    facade = OrderFacade(
        InventoryService(stock={"book-gof": 3}, prices={"book-gof": 4999}),
        PaymentService(),
        ShippingService(),
    )
    receipt = facade.place_order("book-gof", 2, "Berlin")
    for step in receipt.steps:
        out.emit(step)
    out.emit(f"order total: {receipt.total_cents / 100:.2f} ({receipt.tracking_number})")
