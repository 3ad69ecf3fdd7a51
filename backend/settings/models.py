import json
from decimal import Decimal, InvalidOperation

from django.db import models
from django.utils.translation import gettext_lazy as _


class StoreSetting(models.Model):
    """
    Admin-editable key/value setting. ``value`` is stored as text and
    interpreted according to ``type``.
    """

    class ValueType(models.TextChoices):
        STRING = "string", _("String")
        NUMBER = "number", _("Number")
        BOOLEAN = "boolean", _("Boolean")
        JSON = "json", _("JSON")

    key = models.CharField(max_length=100, unique=True)
    value = models.TextField(blank=True, default="")
    type = models.CharField(max_length=50, choices=ValueType.choices, default=ValueType.STRING)
    description = models.TextField(blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Store Setting")
        verbose_name_plural = _("Store Settings")
        ordering = ["key"]

    def __str__(self):
        return f"{self.key}={self.value}"

    def typed_value(self):
        """
        The value converted to its declared type.

        Raises:
            ValueError: if the stored text is not a valid value of that type
        """
        return parse_setting_value(self.value, self.type)


BOOLEAN_TRUE = {"true", "1", "yes", "on"}
BOOLEAN_FALSE = {"false", "0", "no", "off", ""}


def parse_setting_value(raw, value_type):
    raw = "" if raw is None else str(raw)
    if value_type == StoreSetting.ValueType.NUMBER:
        try:
            number = Decimal(raw.strip())
        except InvalidOperation:
            raise ValueError(f"'{raw}' is not a number.")
        if not number.is_finite():
            raise ValueError(f"'{raw}' is not a finite number.")
        return number
    if value_type == StoreSetting.ValueType.BOOLEAN:
        lowered = raw.strip().lower()
        if lowered in BOOLEAN_TRUE:
            return True
        if lowered in BOOLEAN_FALSE:
            return False
        raise ValueError(f"'{raw}' is not a boolean.")
    if value_type == StoreSetting.ValueType.JSON:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e.msg}")
    return raw
