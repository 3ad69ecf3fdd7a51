from django.contrib import admin
from .models import Category, MenuItem


class ArchivedVisibleAdmin(admin.ModelAdmin):
    """Admin screens list archived rows too, so they can be restored."""

    def get_queryset(self, request):
        return self.model.objects.with_archived()


@admin.register(Category)
class CategoryAdmin(ArchivedVisibleAdmin):
    list_display = ("name", "emoji", "slug", "sort_order", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
    ordering = ("sort_order", "name")


@admin.register(MenuItem)
class MenuItemAdmin(ArchivedVisibleAdmin):
    list_display = ("name", "category", "price", "is_popular", "is_active", "sort_order")
    list_filter = ("category", "is_popular", "is_active")
    search_fields = ("name", "description")
    list_select_related = ("category",)
    ordering = ("category__sort_order", "sort_order", "name")
