import logging

from django.db import transaction

from .models import StoreSetting

logger = logging.getLogger(__name__)


class SettingsService:
    @staticmethod
    @transaction.atomic
    def upsert_setting(key, value, type=None, description=None):
        """
        Create the setting or update it in place. Fields passed as None keep
        their stored value.
        """
        setting, created = StoreSetting.objects.select_for_update().get_or_create(
            key=key,
            defaults={
                "value": value,
                "type": type or StoreSetting.ValueType.STRING,
                "description": description or "",
            },
        )
        if not created:
            setting.value = value
            if type is not None:
                setting.type = type
            if description is not None:
                setting.description = description
            setting.save()
        logger.info(f"Setting '{key}' {'created' if created else 'updated'}")
        return setting, created
