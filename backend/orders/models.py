import uuid

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from products.models import MenuItem


class Order(models.Model):
    class OrderStatus(models.TextChoices):
        PENDING = "pending", _("Pending")
        PREPARING = "preparing", _("Preparing")
        READY = "ready", _("Ready")
        COMPLETED = "completed", _("Completed")
        CANCELLED = "cancelled", _("Cancelled")

    TERMINAL_STATUSES = (OrderStatus.COMPLETED, OrderStatus.CANCELLED)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=50, unique=True)

    # Exactly one kind of owner is expected; at least one is enforced.
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orders",
        null=True,
        blank=True,
    )
    channel_user_id = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        db_index=True,
        help_text=_("Telegram user id for orders placed without signing in."),
    )

    status = models.CharField(
        max_length=50, choices=OrderStatus.choices, default=OrderStatus.PENDING
    )

    subtotal = models.DecimalField(max_digits=10, decimal_places=2)
    delivery_fee = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    total = models.DecimalField(max_digits=10, decimal_places=2)

    customer_notes = models.TextField(blank=True)
    telegram_chat_id = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        help_text=_("Chat that receives status updates. Empty disables notifications."),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "order_number"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="order_status_created_idx"),
            models.Index(fields=["created_at"], name="order_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(user__isnull=False) | models.Q(channel_user_id__isnull=False),
                name="order_has_owner",
            ),
        ]

    def __str__(self):
        return f"Order {self.order_number} - {self.status}"

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    @property
    def owner(self):
        from .owners import owner_of

        return owner_of(self)

    def is_owned_by(self, user):
        if not user or not user.is_authenticated:
            return False
        if self.user_id is not None:
            return self.user_id == user.pk
        return bool(user.telegram_user_id) and self.channel_user_id == user.telegram_user_id


class OrderItem(models.Model):
    """
    One order line. ``price`` is the catalog price captured when the order
    was placed; lines are never modified afterwards.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    menu_item = models.ForeignKey(
        MenuItem, on_delete=models.PROTECT, related_name="order_items"
    )
    quantity = models.PositiveIntegerField()
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("Unit price at the time of sale."),
    )
    special_instructions = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gte=1), name="order_item_quantity_positive"),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.menu_item.name} in Order {self.order.order_number}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Order items cannot be modified once the order is placed.")
        super().save(*args, **kwargs)

    @property
    def line_total(self):
        return self.price * self.quantity
