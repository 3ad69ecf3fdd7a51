"""
Centralized configuration access.

Business configuration has two layers: Django settings (environment driven,
see core_backend.settings) provide the defaults, and admin-edited
StoreSetting rows override them at runtime. Business logic reads through
``app_settings`` and never queries StoreSetting directly.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Optional

from django.conf import settings as django_settings

logger = logging.getLogger(__name__)

DELIVERY_FEE_KEY = "delivery_fee"
FREE_DELIVERY_THRESHOLD_KEY = "free_delivery_threshold"


class AppSettings:
    """
    A LAZY singleton holding the StoreSetting rows. The table is read on first
    access, so management commands like 'migrate' run before it exists.
    Saving or deleting a StoreSetting reloads it (see settings.signals).
    """

    _instance: Optional["AppSettings"] = None

    def __new__(cls) -> "AppSettings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._rows = None
        return cls._instance

    def _setup(self) -> Dict[str, Any]:
        if self._rows is None:
            self.load_settings()
        return self._rows

    def load_settings(self) -> None:
        from .models import StoreSetting

        self._rows = {row.key: row for row in StoreSetting.objects.all()}
        logger.debug(f"Loaded {len(self._rows)} store settings")

    def reload(self) -> None:
        self.load_settings()
        logger.info("AppSettings cache reloaded")

    def invalidate(self) -> None:
        """Forget loaded rows; the next access reads the table again."""
        self._rows = None

    def get(self, key: str, default: Any = None) -> Any:
        """
        Typed value of a StoreSetting, or ``default`` when the key is absent
        or its value cannot be parsed.
        """
        row = self._setup().get(key)
        if row is None:
            return default
        try:
            return row.typed_value()
        except ValueError as e:
            logger.warning(f"Ignoring malformed setting '{key}': {e}")
            return default

    def get_delivery_fee_policy(self):
        from orders.calculators import DeliveryFeePolicy

        default_fee = Decimal(str(django_settings.DELIVERY_FEE))
        default_threshold = Decimal(str(django_settings.FREE_DELIVERY_THRESHOLD))

        fee = self._as_amount(DELIVERY_FEE_KEY, default_fee)
        threshold = self._as_amount(FREE_DELIVERY_THRESHOLD_KEY, default_threshold)
        return DeliveryFeePolicy(fee=fee, free_threshold=threshold)

    def _as_amount(self, key: str, default: Decimal) -> Decimal:
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
            logger.warning(f"Ignoring non-numeric setting '{key}': {value!r}")
            return default
        value = Decimal(str(value))
        if value < 0:
            logger.warning(f"Ignoring negative setting '{key}': {value}")
            return default
        return value


app_settings = AppSettings()
