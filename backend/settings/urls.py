from django.urls import path
from .views import StoreSettingViewSet

app_name = "settings"

urlpatterns = [
    path("", StoreSettingViewSet.as_view({'get': 'list', 'post': 'create'}), name="setting-list"),
    path("<str:key>/", StoreSettingViewSet.as_view({'get': 'retrieve'}), name="setting-detail"),
]
