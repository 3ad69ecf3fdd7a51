"""
Customer-facing order status messages.

Unknown statuses fall back to a generic "status changed" message instead of
raising, so a newly introduced status can never break dispatch.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusMessage:
    emoji: str
    title: str
    detail: str


DELIVERED = StatusMessage(
    "📦", "Delivered", "📦 Your order has been delivered! Enjoy your meal!"
)

STATUS_MESSAGES = {
    "pending": StatusMessage(
        "⏳", "Order Received", "🧾 We've received your order and will start on it shortly."
    ),
    "confirmed": StatusMessage(
        "✅", "Order Confirmed", "🍳 Your order has been confirmed and we're preparing it now!"
    ),
    "preparing": StatusMessage(
        "👨‍🍳", "Being Prepared", "👨‍🍳 Our chefs are preparing your delicious meal!"
    ),
    "ready": StatusMessage(
        "🍽️", "Ready for Pickup", "🍽️ Your order is ready! Come pick it up or delivery is on the way!"
    ),
    "completed": DELIVERED,
    "delivered": DELIVERED,
    "cancelled": StatusMessage(
        "❌", "Cancelled", "Your order has been cancelled. Contact us if you have any questions."
    ),
}


def get_status_message(status):
    message = STATUS_MESSAGES.get(status)
    if message is None:
        return StatusMessage("📋", str(status), "The status of your order has changed.")
    return message


def format_status_update(order_number, status):
    message = get_status_message(status)
    return (
        f"{message.emoji} Order Update!\n\n"
        f"Order #{order_number}\n"
        f"Status: {message.title}\n\n"
        f"{message.detail}"
    )
