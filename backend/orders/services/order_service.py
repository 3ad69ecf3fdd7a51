import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, IntegrityError, transaction

from core_backend.exceptions import (
    ConflictError,
    InvalidStatusTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from orders.calculators import OrderCalculator
from orders.models import Order, OrderItem
from orders.numbering import get_default_generator
from orders.owners import OrderOwner, owner_fields
from products.services import MenuCatalogService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderLine:
    """One requested line of a new order."""

    menu_item_id: int
    quantity: int = 1
    special_instructions: str = ""

    @classmethod
    def coerce(cls, value: Union["OrderLine", Mapping]) -> "OrderLine":
        if isinstance(value, cls):
            return value
        try:
            return cls(
                menu_item_id=_as_whole_number(value["menu_item_id"]),
                quantity=_as_whole_number(value.get("quantity", 1)),
                special_instructions=value.get("special_instructions") or "",
            )
        except (KeyError, TypeError, ValueError):
            raise ValidationError("Each item needs a numeric menu_item_id and quantity.")


def _as_whole_number(value) -> int:
    """int() that refuses booleans and anything with a fractional part."""
    if isinstance(value, bool):
        raise TypeError("Booleans are not numbers here.")
    if isinstance(value, str):
        return int(value.strip())
    number = int(value)
    if number != value:
        raise ValueError(f"{value!r} is not a whole number.")
    return number


class OrderService:
    """
    Order Core: turns requested lines into a persisted order and drives the
    order status lifecycle.

    Collaborators are injected so callers (and tests) control catalog access,
    notification delivery, numbering and the delivery fee tier.
    """

    # Valid status transitions for the order state machine. Orders only move
    # forward along pending -> preparing -> ready -> completed (steps may be
    # skipped) and can be cancelled until they are finished.
    VALID_STATUS_TRANSITIONS = {
        Order.OrderStatus.PENDING: [
            Order.OrderStatus.PREPARING,
            Order.OrderStatus.READY,
            Order.OrderStatus.COMPLETED,
            Order.OrderStatus.CANCELLED,
        ],
        Order.OrderStatus.PREPARING: [
            Order.OrderStatus.READY,
            Order.OrderStatus.COMPLETED,
            Order.OrderStatus.CANCELLED,
        ],
        Order.OrderStatus.READY: [
            Order.OrderStatus.COMPLETED,
            Order.OrderStatus.CANCELLED,
        ],
        Order.OrderStatus.COMPLETED: [],
        Order.OrderStatus.CANCELLED: [],
    }

    def __init__(
        self,
        catalog=None,
        dispatcher=None,
        number_generator=None,
        fee_policy=None,
        strict_transitions: Optional[bool] = None,
        max_number_attempts: Optional[int] = None,
    ):
        if dispatcher is None:
            from notifications.services import TelegramNotificationService

            dispatcher = TelegramNotificationService()

        self.catalog = catalog or MenuCatalogService()
        self.dispatcher = dispatcher
        self.number_generator = number_generator or get_default_generator()
        self._fee_policy = fee_policy
        self.strict_transitions = (
            settings.ORDER_STRICT_STATUS_TRANSITIONS if strict_transitions is None else strict_transitions
        )
        self.max_number_attempts = max_number_attempts or settings.ORDER_NUMBER_MAX_RETRIES

    @property
    def fee_policy(self):
        if self._fee_policy is not None:
            return self._fee_policy
        from settings.config import app_settings

        return app_settings.get_delivery_fee_policy()

    # --- Creation ---

    def create_order(
        self,
        items: Iterable,
        owner: OrderOwner,
        customer_notes: str = "",
        telegram_chat_id: Optional[str] = None,
        client_totals: Optional[Mapping] = None,
    ) -> Order:
        """
        Creates an order and all of its lines in one transaction.

        Prices come from the catalog at the time of the call; client-supplied
        totals are only compared and logged, never stored.

        Raises:
            ValidationError: empty order, bad quantity, unknown or inactive item
            ConflictError: no free order number after the configured attempts
            StorageError: any other database failure (nothing is persisted)
        """
        lines = [OrderLine.coerce(item) for item in items or []]
        if not lines:
            raise ValidationError("Cannot place an order without items.")
        for line in lines:
            if line.quantity < 1:
                raise ValidationError(
                    f"Quantity for menu item {line.menu_item_id} must be at least 1.",
                    details={"menu_item_id": line.menu_item_id, "quantity": line.quantity},
                )

        fields = owner_fields(owner)

        resolved = self.catalog.resolve_items([line.menu_item_id for line in lines])
        for line in lines:
            if line.menu_item_id not in resolved:
                raise ValidationError(
                    f"Menu item {line.menu_item_id} does not exist or is not available.",
                    details={"menu_item_id": line.menu_item_id},
                )

        calculator = OrderCalculator(self.fee_policy)
        totals = calculator.calculate_totals(
            (resolved[line.menu_item_id].price, line.quantity) for line in lines
        )

        if client_totals:
            mismatched = totals.differs_from(**{
                key: client_totals.get(key) for key in ("subtotal", "delivery_fee", "total")
            })
            if mismatched:
                logger.warning(
                    f"Client totals differ from server totals ({', '.join(mismatched)}); "
                    f"client={dict(client_totals)} server={totals.as_dict()}"
                )

        order = self._persist(lines, resolved, totals, fields, customer_notes or "", telegram_chat_id or None)
        logger.info(
            f"Order {order.order_number} created for {owner.kind} owner: "
            f"{len(lines)} line(s), total {order.total}"
        )
        return order

    def _persist(self, lines, resolved, totals, fields, customer_notes, telegram_chat_id) -> Order:
        for attempt in range(1, self.max_number_attempts + 1):
            order_number = self.number_generator.next()
            try:
                with transaction.atomic():
                    order = Order.objects.create(
                        order_number=order_number,
                        status=Order.OrderStatus.PENDING,
                        subtotal=totals.subtotal,
                        delivery_fee=totals.delivery_fee,
                        total=totals.total,
                        customer_notes=customer_notes,
                        telegram_chat_id=telegram_chat_id,
                        **fields,
                    )
                    OrderItem.objects.bulk_create([
                        OrderItem(
                            order=order,
                            menu_item=resolved[line.menu_item_id],
                            quantity=line.quantity,
                            price=resolved[line.menu_item_id].price,
                            special_instructions=line.special_instructions,
                        )
                        for line in lines
                    ])
                return order
            except IntegrityError as e:
                if not Order.objects.filter(order_number=order_number).exists():
                    raise StorageError() from e
                logger.warning(
                    f"Order number {order_number} already taken (attempt {attempt}/{self.max_number_attempts})"
                )
            except DatabaseError as e:
                raise StorageError() from e

        raise ConflictError(
            "Could not allocate a unique order number. Please retry.",
            details={"attempts": self.max_number_attempts},
        )

    # --- Status lifecycle ---

    def validate_transition(self, current_status, new_status):
        if new_status not in Order.OrderStatus.values:
            raise ValidationError(
                f"'{new_status}' is not a valid order status.",
                details={"allowed": list(Order.OrderStatus.values)},
            )
        if not self.strict_transitions:
            return
        if new_status not in self.VALID_STATUS_TRANSITIONS.get(current_status, []):
            raise InvalidStatusTransitionError(current_status, new_status)

    def set_status(self, order_id, new_status) -> Order:
        """
        Moves an order to ``new_status`` and notifies the customer's chat, if
        the order has one. A failed notification never undoes the change.

        Raises:
            NotFoundError: no order with this id
            ValidationError: unknown status or disallowed transition
            StorageError: the update could not be written
        """
        try:
            with transaction.atomic():
                try:
                    order = Order.objects.select_for_update().get(pk=order_id)
                except (Order.DoesNotExist, ValueError, DjangoValidationError):
                    raise NotFoundError(f"Order {order_id} not found.")

                previous_status = order.status
                self.validate_transition(previous_status, new_status)

                order.status = new_status
                order.save(update_fields=["status", "updated_at"])
        except DatabaseError as e:
            raise StorageError() from e

        logger.info(f"Order {order.order_number} status: {previous_status} -> {new_status}")

        if order.telegram_chat_id:
            self._dispatch_status_update(order)
        return order

    def _dispatch_status_update(self, order):
        try:
            self.dispatcher.notify(order.telegram_chat_id, order.order_number, order.status)
        except Exception as e:
            # Dispatch is best effort; the status change is already committed.
            logger.error(
                f"Status notification for order {order.order_number} failed: {e}",
                exc_info=True,
            )

