from django.contrib import admin
from .models import StoreSetting


@admin.register(StoreSetting)
class StoreSettingAdmin(admin.ModelAdmin):
    list_display = ("key", "value", "type", "updated_at")
    list_filter = ("type",)
    search_fields = ("key", "description")
