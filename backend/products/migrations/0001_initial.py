import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def _archiving_fields():
    return [
        (
            "is_active",
            models.BooleanField(
                db_index=True,
                default=True,
                help_text="Unchecked once the record is archived and no longer offered.",
            ),
        ),
        (
            "archived_at",
            models.DateTimeField(blank=True, help_text="When the record was archived.", null=True),
        ),
    ]


def _archived_by_field():
    return (
        "archived_by",
        models.ForeignKey(
            blank=True,
            help_text="Who archived the record.",
            null=True,
            on_delete=django.db.models.deletion.SET_NULL,
            related_name="%(app_label)s_%(class)s_archived",
            to=settings.AUTH_USER_MODEL,
        ),
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                *_archiving_fields(),
                ("name", models.CharField(help_text="Name of the menu category.", max_length=100)),
                ("emoji", models.CharField(blank=True, max_length=10)),
                ("slug", models.SlugField(max_length=100, unique=True)),
                ("description", models.TextField(blank=True, help_text="Description of the category.")),
                (
                    "sort_order",
                    models.IntegerField(
                        default=0, help_text="Display order for this category. Lower numbers appear first."
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                _archived_by_field(),
            ],
            options={
                "verbose_name": "Category",
                "verbose_name_plural": "Categories",
                "ordering": ["sort_order", "name"],
            },
        ),
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                *_archiving_fields(),
                ("name", models.CharField(help_text="Name of the menu item.", max_length=200)),
                ("description", models.TextField(blank=True)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Current selling price. Orders copy this value when placed.",
                        max_digits=10,
                    ),
                ),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("is_popular", models.BooleanField(default=False)),
                (
                    "preparation_time",
                    models.PositiveIntegerField(blank=True, help_text="Preparation time in minutes.", null=True),
                ),
                ("calories", models.PositiveIntegerField(blank=True, null=True)),
                ("rating", models.DecimalField(decimal_places=2, default=0, max_digits=3)),
                ("rating_count", models.PositiveIntegerField(default=0)),
                ("sort_order", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                _archived_by_field(),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="menu_items",
                        to="products.category",
                    ),
                ),
            ],
            options={
                "verbose_name": "Menu Item",
                "verbose_name_plural": "Menu Items",
                "ordering": ["sort_order", "name"],
                "indexes": [
                    models.Index(fields=["category", "is_active"], name="menuitem_category_active_idx"),
                    models.Index(fields=["is_popular"], name="menuitem_is_popular_idx"),
                ],
            },
        ),
    ]
