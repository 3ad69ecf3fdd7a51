"""
The shopping cart.

A Cart accumulates lines before checkout. Each line carries a snapshot of
the menu item (id, name, price) taken when it was added, and totals are
computed from those snapshots without a catalog lookup. Checkout re-prices
everything from the catalog (see OrderService.create_order).
"""

import logging
import time
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from orders.calculators import OrderCalculator, quantize

from .storage import CartStorage

logger = logging.getLogger(__name__)


@dataclass
class CartMenuItem:
    id: int
    name: str
    price: Decimal
    image_url: str = ""

    @classmethod
    def from_menu_item(cls, menu_item):
        return cls(
            id=menu_item.pk,
            name=menu_item.name,
            price=quantize(menu_item.price),
            image_url=menu_item.image_url or "",
        )


@dataclass
class CartLine:
    id: int
    menu_item: CartMenuItem
    quantity: int
    special_instructions: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return quantize(self.menu_item.price * self.quantity)

    def to_storage(self):
        data = asdict(self)
        data["menu_item"]["price"] = str(self.menu_item.price)
        return data

    @classmethod
    def from_storage(cls, data):
        item = data["menu_item"]
        return cls(
            id=int(data["id"]),
            menu_item=CartMenuItem(
                id=int(item["id"]),
                name=item.get("name", ""),
                price=quantize(item["price"]),
                image_url=item.get("image_url", ""),
            ),
            quantity=int(data["quantity"]),
            special_instructions=data.get("special_instructions"),
        )


def _millis():
    return int(time.time() * 1000)


class Cart:
    """
    Lines are read from ``storage`` on construction and written back after
    every change. One cart has one owner; mutations are not synchronized.
    """

    def __init__(self, storage: CartStorage, fee_policy=None, clock=None):
        self.storage = storage
        self._fee_policy = fee_policy
        self._clock = clock or _millis
        self.lines: List[CartLine] = self._load()

    def _load(self):
        lines = []
        for data in self.storage.load():
            try:
                lines.append(CartLine.from_storage(data))
            except (KeyError, TypeError, ValueError, InvalidOperation):
                logger.warning(f"Dropping unreadable cart line: {data!r}")
        return lines

    def _save(self):
        self.storage.save([line.to_storage() for line in self.lines])

    @property
    def fee_policy(self):
        if self._fee_policy is not None:
            return self._fee_policy
        from settings.config import app_settings

        return app_settings.get_delivery_fee_policy()

    def _next_line_id(self):
        line_id = self._clock()
        taken = {line.id for line in self.lines}
        while line_id in taken:
            line_id += 1
        return line_id

    def get_line(self, line_id) -> Optional[CartLine]:
        for line in self.lines:
            if line.id == line_id:
                return line
        return None

    # --- Mutations ---

    def add_item(self, menu_item, quantity: int = 1, special_instructions: Optional[str] = None) -> CartLine:
        """
        Adds ``quantity`` of ``menu_item``. A second add of the same item
        increases the existing line; its note is replaced only when a new
        note is given.
        """
        if quantity < 1:
            raise ValueError("Quantity must be at least 1.")

        snapshot = menu_item if isinstance(menu_item, CartMenuItem) else CartMenuItem.from_menu_item(menu_item)
        for line in self.lines:
            if line.menu_item.id == snapshot.id:
                line.quantity += quantity
                if special_instructions:
                    line.special_instructions = special_instructions
                self._save()
                return line

        line = CartLine(
            id=self._next_line_id(),
            menu_item=snapshot,
            quantity=quantity,
            special_instructions=special_instructions or None,
        )
        self.lines.append(line)
        self._save()
        return line

    def update_quantity(self, line_id, quantity: int) -> Optional[CartLine]:
        """Sets a line's quantity; zero or less removes the line. Unknown ids are ignored."""
        line = self.get_line(line_id)
        if line is None:
            return None
        if quantity <= 0:
            self.remove_item(line_id)
            return None
        line.quantity = quantity
        self._save()
        return line

    def remove_item(self, line_id) -> bool:
        remaining = [line for line in self.lines if line.id != line_id]
        removed = len(remaining) != len(self.lines)
        self.lines = remaining
        if removed:
            self._save()
        return removed

    def clear(self):
        self.lines = []
        self.storage.clear()

    # --- Totals ---

    def subtotal(self) -> Decimal:
        return OrderCalculator.calculate_subtotal(
            (line.menu_item.price, line.quantity) for line in self.lines
        )

    def delivery_fee(self) -> Decimal:
        return self.fee_policy.fee_for(self.subtotal())

    def total(self) -> Decimal:
        return OrderCalculator(self.fee_policy).calculate_totals(
            (line.menu_item.price, line.quantity) for line in self.lines
        ).total

    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def free_delivery_threshold(self) -> Decimal:
        return self.fee_policy.free_threshold

    def as_order_items(self):
        """Lines in the shape OrderService.create_order accepts."""
        return [
            {
                "menu_item_id": line.menu_item.id,
                "quantity": line.quantity,
                "special_instructions": line.special_instructions or "",
            }
            for line in self.lines
        ]
