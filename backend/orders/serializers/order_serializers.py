from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from orders.models import Order, OrderItem


class OrderItemSerializer(BaseModelSerializer):
    menu_item_id = serializers.IntegerField(read_only=True)
    menu_item_name = serializers.CharField(source="menu_item.name", read_only=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "menu_item_id",
            "menu_item_name",
            "quantity",
            "price",
            "line_total",
            "special_instructions",
            "created_at",
        ]
        read_only_fields = fields


class OrderSerializer(BaseModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)
    owner = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "status",
            "subtotal",
            "delivery_fee",
            "total",
            "customer_notes",
            "telegram_chat_id",
            "owner",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
        prefetch_related_fields = ["items__menu_item"]

    def get_owner(self, obj):
        owner = obj.owner
        if owner.kind == "user":
            return {"kind": owner.kind, "id": owner.user_id}
        return {"kind": owner.kind, "id": owner.external_id}


class OrderItemInputSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, default=1)
    special_instructions = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default="", max_length=500
    )


class OrderCreateSerializer(serializers.Serializer):
    """
    Checkout payload. ``subtotal``/``delivery_fee``/``total`` are what the
    client displayed; they are checked against the server figures, not stored.
    """

    items = OrderItemInputSerializer(many=True, allow_empty=True)
    customer_notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    subtotal = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    delivery_fee = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    total = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)

    def client_totals(self):
        return {
            key: self.validated_data[key]
            for key in ("subtotal", "delivery_fee", "total")
            if key in self.validated_data
        }


class TelegramOrderCreateSerializer(OrderCreateSerializer):
    """Order placed from Telegram by a user who has not signed in."""

    telegram_user_id = serializers.CharField(max_length=64)
    telegram_chat_id = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    username = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")
    first_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")
    last_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")

    def validate_telegram_user_id(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value

    def validate(self, attrs):
        attrs = super().validate(attrs)
        # Private chats share the user's id
        if not attrs.get("telegram_chat_id"):
            attrs["telegram_chat_id"] = attrs["telegram_user_id"]
        return attrs


class DashboardStatsSerializer(serializers.Serializer):
    today_orders = serializers.IntegerField()
    today_revenue = serializers.DecimalField(max_digits=12, decimal_places=2)
    active_users = serializers.IntegerField()
    average_order = serializers.DecimalField(max_digits=12, decimal_places=2)
