from rest_framework import serializers


class CartMenuItemSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    image_url = serializers.CharField()


class CartLineSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    menu_item = CartMenuItemSerializer(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    special_instructions = serializers.CharField(read_only=True, allow_null=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class CartSerializer(serializers.Serializer):
    """Read-only view of a Cart; totals come from the line price snapshots."""

    items = CartLineSerializer(source="lines", many=True, read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    delivery_fee = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    free_delivery_threshold = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class AddToCartSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, default=1)
    special_instructions = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=500
    )


class UpdateCartItemSerializer(serializers.Serializer):
    # Zero or less removes the line
    quantity = serializers.IntegerField()


class CheckoutSerializer(serializers.Serializer):
    customer_notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
