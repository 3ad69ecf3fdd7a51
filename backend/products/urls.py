from django.urls import path
from .views import CategoryViewSet, MenuItemViewSet

app_name = "products"

urlpatterns = [
    path("categories/", CategoryViewSet.as_view({'get': 'list', 'post': 'create'}), name="category-list"),
    path("categories/<int:pk>/", CategoryViewSet.as_view({
        'get': 'retrieve',
        'put': 'update',
        'patch': 'partial_update',
        'delete': 'destroy'
    }), name="category-detail"),
    path("categories/<int:pk>/unarchive/", CategoryViewSet.as_view({'post': 'unarchive'}), name="category-unarchive"),

    path("menu/", MenuItemViewSet.as_view({'get': 'list', 'post': 'create'}), name="menu-item-list"),
    path("menu/<int:pk>/", MenuItemViewSet.as_view({
        'get': 'retrieve',
        'put': 'update',
        'patch': 'partial_update',
        'delete': 'destroy'
    }), name="menu-item-detail"),
    path("menu/<int:pk>/unarchive/", MenuItemViewSet.as_view({'post': 'unarchive'}), name="menu-item-unarchive"),
]
