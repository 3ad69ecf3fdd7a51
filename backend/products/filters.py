import django_filters
from .models import MenuItem


class MenuItemFilter(django_filters.FilterSet):
    category_id = django_filters.NumberFilter(field_name="category_id")
    is_popular = django_filters.BooleanFilter(field_name="is_popular")

    class Meta:
        model = MenuItem
        fields = ["category_id", "is_popular"]
