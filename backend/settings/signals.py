"""
Signal handlers for the settings app.
Reloads the configuration cache whenever a StoreSetting change is committed.
"""

import logging

from django.db import transaction
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from .models import StoreSetting

logger = logging.getLogger(__name__)


def _reload_after_commit(key):
    from .config import app_settings

    app_settings.reload()
    logger.info(f"Configuration cache updated after change to '{key}'")


@receiver(post_save, sender=StoreSetting)
@receiver(post_delete, sender=StoreSetting)
def reload_app_settings(sender, instance, **kwargs):
    # Values from a transaction that rolls back must never reach the cache.
    key = instance.key
    transaction.on_commit(lambda: _reload_after_commit(key))
