"""
Cart service layer for customer-facing cart operations.

This service handles:
- Loading the cart bound to a client session
- Adding catalog items (only orderable items can enter a cart)
- Converting the cart to an order
"""

import logging

from core_backend.exceptions import ValidationError
from orders.services import OrderService
from products.services import MenuCatalogService

from .cart import Cart
from .storage import SessionCartStorage

logger = logging.getLogger(__name__)


class CartService:
    """Service for managing cart operations."""

    @staticmethod
    def get_cart(request) -> Cart:
        return Cart(SessionCartStorage(request.session))

    @staticmethod
    def add_item(cart: Cart, menu_item_id, quantity=1, special_instructions=None, catalog=None):
        """
        Adds a catalog item to ``cart`` at its current price.

        Raises:
            ValidationError: the item does not exist or is not available
        """
        catalog = catalog or MenuCatalogService()
        menu_item = catalog.get_item(menu_item_id)
        if menu_item is None:
            raise ValidationError(
                f"Menu item {menu_item_id} does not exist or is not available.",
                details={"menu_item_id": menu_item_id},
            )
        return cart.add_item(menu_item, quantity=quantity, special_instructions=special_instructions)

    @staticmethod
    def checkout(cart: Cart, owner, customer_notes="", order_service=None, client_totals=None):
        """
        Places an order from the cart's lines. The cart is emptied only after
        the order is saved; any failure leaves it as it was.
        """
        if cart.is_empty():
            raise ValidationError("Cannot place an order without items.")

        order_service = order_service or OrderService()
        order = order_service.create_order(
            items=cart.as_order_items(),
            owner=owner,
            customer_notes=customer_notes,
            client_totals=client_totals,
        )
        cart.clear()
        logger.info(f"Cart checked out as order {order.order_number}")
        return order
