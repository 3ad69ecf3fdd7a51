from django.urls import path
from .views import CurrentUserView, TelegramIdentityView, UserViewSet, StaffViewSet

app_name = "users"

urlpatterns = [
    path("auth/user/", CurrentUserView.as_view(), name="current-user"),
    path("auth/telegram/", TelegramIdentityView.as_view(), name="telegram-identity"),

    path("users/", UserViewSet.as_view({'get': 'list'}), name="user-list"),
    path("users/<int:pk>/", UserViewSet.as_view({'get': 'retrieve'}), name="user-detail"),

    path("staff/", StaffViewSet.as_view({'get': 'list', 'post': 'create'}), name="staff-list"),
    path("staff/<int:pk>/", StaffViewSet.as_view({
        'get': 'retrieve',
        'put': 'update',
        'patch': 'partial_update',
        'delete': 'destroy'
    }), name="staff-detail"),
    path("staff/<int:pk>/unarchive/", StaffViewSet.as_view({'post': 'unarchive'}), name="staff-unarchive"),
]
