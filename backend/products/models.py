from django.db import models
from django.utils.translation import gettext_lazy as _
from core_backend.utils.archiving import SoftDeleteMixin


class Category(SoftDeleteMixin):
    name = models.CharField(max_length=100, help_text=_("Name of the menu category."))
    emoji = models.CharField(max_length=10, blank=True)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True, help_text=_("Description of the category."))
    sort_order = models.IntegerField(
        default=0,
        help_text=_("Display order for this category. Lower numbers appear first."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = ["sort_order", "name"]

    def __str__(self):
        return f"{self.emoji} {self.name}".strip()


class MenuItem(SoftDeleteMixin):
    name = models.CharField(max_length=200, help_text=_("Name of the menu item."))
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("Current selling price. Orders copy this value when placed."),
    )
    category = models.ForeignKey(
        Category,
        related_name="menu_items",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
    )
    image_url = models.URLField(max_length=500, blank=True)
    is_popular = models.BooleanField(default=False)
    preparation_time = models.PositiveIntegerField(
        null=True, blank=True, help_text=_("Preparation time in minutes.")
    )
    calories = models.PositiveIntegerField(null=True, blank=True)
    rating = models.DecimalField(max_digits=3, decimal_places=2, default=0)
    rating_count = models.PositiveIntegerField(default=0)
    sort_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Menu Item")
        verbose_name_plural = _("Menu Items")
        ordering = ["sort_order", "name"]
        indexes = [
            models.Index(fields=["category", "is_active"], name="menuitem_category_active_idx"),
            models.Index(fields=["is_popular"], name="menuitem_is_popular_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def is_available(self):
        """Orderable: active, and not filed under an archived category."""
        if not self.is_active:
            return False
        return self.category is None or self.category.is_active
