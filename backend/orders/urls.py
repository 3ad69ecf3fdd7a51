from django.urls import path
from .views import OrderViewSet, DashboardStatsView

app_name = "orders"

urlpatterns = [
    path("orders/", OrderViewSet.as_view({'get': 'list', 'post': 'create'}), name="order-list"),
    path("orders/telegram/", OrderViewSet.as_view({'post': 'create_telegram'}), name="order-telegram"),
    path("orders/<str:pk>/", OrderViewSet.as_view({'get': 'retrieve'}), name="order-detail"),
    path("orders/<str:pk>/status/", OrderViewSet.as_view({
        'post': 'update_status',
        'put': 'update_status',
    }), name="order-status"),

    path("dashboard/stats/", DashboardStatsView.as_view(), name="dashboard-stats"),
]
