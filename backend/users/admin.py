from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import BaseUserCreationForm, UserChangeForm as BaseUserChangeForm
from .models import User, Staff


class UserAdminCreationForm(BaseUserCreationForm):
    class Meta:
        model = User
        fields = ("email",)


class UserAdminChangeForm(BaseUserChangeForm):
    class Meta:
        model = User
        fields = "__all__"
        field_classes = {}


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = UserAdminChangeForm
    add_form = UserAdminCreationForm

    list_display = (
        "email",
        "telegram_username",
        "telegram_user_id",
        "first_name",
        "last_name",
        "is_admin",
        "is_staff",
        "is_active",
    )
    list_filter = ("is_admin", "is_staff", "is_superuser", "is_active")
    search_fields = ("email", "first_name", "last_name", "telegram_username", "telegram_user_id")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at", "last_login")

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Personal info", {"fields": ("first_name", "last_name", "profile_image_url")}),
        ("Telegram", {"fields": ("telegram_user_id", "telegram_username")}),
        (
            "Permissions",
            {"fields": ("is_admin", "is_active", "is_staff", "is_superuser", "groups", "user_permissions")},
        ),
        ("Important dates", {"fields": ("last_login", "created_at", "updated_at")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "password1", "password2", "is_admin"),
            },
        ),
    )


@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    list_display = ("name", "role", "email", "phone", "is_active", "hire_date")
    list_filter = ("role", "is_active")
    search_fields = ("name", "email", "phone")

    def get_queryset(self, request):
        return Staff.objects.with_archived()
