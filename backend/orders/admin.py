from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ("menu_item", "quantity", "price", "get_line_total", "special_instructions")
    readonly_fields = fields
    can_delete = False

    def get_line_total(self, obj):
        return f"${obj.line_total:,.2f}"

    get_line_total.short_description = "Line Total"

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Orders are created through checkout only; the admin can review them and
    change their status.
    """

    list_display = (
        "order_number",
        "get_owner_display",
        "status",
        "subtotal",
        "delivery_fee",
        "total",
        "created_at",
    )
    list_display_links = ("order_number",)
    list_filter = ("status", "created_at")
    search_fields = ("order_number", "user__email", "channel_user_id")
    readonly_fields = (
        "id",
        "order_number",
        "user",
        "channel_user_id",
        "subtotal",
        "delivery_fee",
        "total",
        "telegram_chat_id",
        "created_at",
        "updated_at",
    )
    inlines = [OrderItemInline]

    @admin.display(description="Owner")
    def get_owner_display(self, obj):
        if obj.user_id:
            return str(obj.user)
        return f"Telegram {obj.channel_user_id}"

    def has_add_permission(self, request):
        return False
