from rest_framework import serializers
from core_backend.base import BaseModelSerializer, TimestampedSerializer
from .models import User, Staff


class UserSerializer(TimestampedSerializer):
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "full_name",
            "profile_image_url",
            "telegram_user_id",
            "telegram_username",
            "is_admin",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class StaffSerializer(BaseModelSerializer):
    class Meta:
        model = Staff
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "role",
            "is_active",
            "hire_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "is_active", "created_at", "updated_at"]
        extra_kwargs = {
            "hire_date": {"required": False},
        }

    def validate_email(self, value):
        return value or None


class TelegramIdentitySerializer(serializers.Serializer):
    """Telegram profile as forwarded by the Mini App / bot."""

    telegram_user_id = serializers.CharField(max_length=64)
    username = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")
    first_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")
    last_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")

    def validate_telegram_user_id(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value
