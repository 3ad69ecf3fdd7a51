import logging

import requests
from django.conf import settings

from core_backend.exceptions import NotificationError
from .messages import format_status_update

logger = logging.getLogger(__name__)


class TelegramNotificationService:
    """
    Sends order status updates through the Telegram Bot API.

    ``notify`` is the dispatcher entry point used by order status changes: it
    never raises. ``send`` is the underlying call and raises NotificationError.
    """

    def __init__(self, bot_token=None, api_base_url=None, timeout=None):
        self.bot_token = bot_token if bot_token is not None else settings.TELEGRAM_BOT_TOKEN
        self.api_base_url = (api_base_url or settings.TELEGRAM_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.TELEGRAM_REQUEST_TIMEOUT

    @property
    def enabled(self):
        return bool(self.bot_token)

    def notify(self, chat_id, order_number, status):
        """
        Deliver a status update for ``order_number`` to ``chat_id``.

        Returns:
            bool: True when Telegram accepted the message
        """
        if not self.enabled:
            logger.warning(
                f"TELEGRAM_BOT_TOKEN not configured; skipping status update for order {order_number}"
            )
            return False

        try:
            self.send(chat_id, format_status_update(order_number, status))
        except NotificationError as e:
            logger.error(f"Failed to notify chat {chat_id} about order {order_number}: {e}")
            return False

        logger.info(f"Sent '{status}' update for order {order_number} to chat {chat_id}")
        return True

    def send(self, chat_id, text):
        url = f"{self.api_base_url}/bot{self.bot_token}/sendMessage"
        payload = {"chat_id": chat_id, "text": text}

        try:
            response = requests.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise NotificationError(f"HTTP request to Telegram Bot API failed: {e}") from e
        except ValueError as e:
            raise NotificationError("Telegram Bot API returned a non-JSON response.") from e

        if not data.get("ok"):
            raise NotificationError(
                f"Telegram Bot API error: {data.get('description', 'unknown error')}",
                details={"error_code": data.get("error_code")},
            )
        return data.get("result")
