from rest_framework import serializers
from core_backend.base import TimestampedSerializer
from .models import Category, MenuItem


class CategorySerializer(TimestampedSerializer):
    class Meta:
        model = Category
        fields = [
            "id",
            "name",
            "emoji",
            "slug",
            "description",
            "is_active",
            "sort_order",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "is_active"]


class CategoryReferenceSerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "emoji", "slug"]


class MenuItemSerializer(TimestampedSerializer):
    category = CategoryReferenceSerializer(read_only=True)
    category_id = serializers.PrimaryKeyRelatedField(
        source="category",
        queryset=Category.objects.all(),
        allow_null=True,
        required=False,
        write_only=True,
    )

    class Meta:
        model = MenuItem
        fields = [
            "id",
            "name",
            "description",
            "price",
            "category",
            "category_id",
            "image_url",
            "is_active",
            "is_popular",
            "preparation_time",
            "calories",
            "rating",
            "rating_count",
            "sort_order",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "is_active", "rating", "rating_count"]
        select_related_fields = ["category"]

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Price cannot be negative.")
        return value
