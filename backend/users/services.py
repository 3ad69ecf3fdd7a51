import logging

from django.db import transaction

from .models import User

logger = logging.getLogger(__name__)


class UserService:
    @staticmethod
    @transaction.atomic
    def upsert_telegram_user(telegram_user_id, username="", first_name="", last_name=""):
        """
        Create or refresh the identity record for a Telegram user.

        Only non-empty profile fields overwrite stored values, so a partial
        profile (e.g. a user without a public username) never erases data.
        """
        telegram_user_id = str(telegram_user_id)
        user, created = User.objects.select_for_update().get_or_create(
            telegram_user_id=telegram_user_id,
            defaults={
                "telegram_username": username or "",
                "first_name": first_name or "",
                "last_name": last_name or "",
            },
        )
        if created:
            user.set_unusable_password()
            user.save(update_fields=["password"])
            logger.info(f"Registered Telegram user {telegram_user_id}")
            return user

        updates = {
            "telegram_username": username,
            "first_name": first_name,
            "last_name": last_name,
        }
        changed = [field for field, value in updates.items() if value and getattr(user, field) != value]
        if changed:
            for field in changed:
                setattr(user, field, updates[field])
            user.save(update_fields=changed + ["updated_at"])
            logger.debug(f"Updated Telegram user {telegram_user_id}: {', '.join(changed)}")
        return user

    @staticmethod
    def get_by_telegram_id(telegram_user_id):
        return User.objects.filter(telegram_user_id=str(telegram_user_id)).first()
