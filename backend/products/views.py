from core_backend.base import BaseViewSet
from users.permissions import IsAdministratorOrReadOnly
from .filters import MenuItemFilter
from .models import Category, MenuItem
from .serializers import CategorySerializer, MenuItemSerializer


class CategoryViewSet(BaseViewSet):
    """
    Public category list; administrators manage categories.
    Deleting a category archives it.
    """

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsAdministratorOrReadOnly]
    search_fields = ["name", "slug"]
    ordering_fields = ["sort_order", "name"]
    ordering = ["sort_order", "name"]


class MenuItemViewSet(BaseViewSet):
    """
    Public menu (``?category_id=`` narrows to one category); administrators
    manage items. Items under an archived category are hidden from the
    public list.
    """

    queryset = MenuItem.objects.all()
    serializer_class = MenuItemSerializer
    permission_classes = [IsAdministratorOrReadOnly]
    filterset_class = MenuItemFilter
    search_fields = ["name", "description"]
    ordering_fields = ["sort_order", "name", "price", "rating"]
    ordering = ["sort_order", "name"]

    def get_queryset(self):
        queryset = super().get_queryset()
        if not self.can_view_archived():
            queryset = queryset.exclude(category__is_active=False)
        return queryset
