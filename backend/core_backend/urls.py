"""
URL configuration for core_backend project.

Every app registers its own resource prefixes, so apps are mounted under
``api/`` rather than under an app-specific prefix.
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("api/", include("users.urls")),
    path("api/", include("products.urls")),
    path("api/settings/", include("settings.urls")),
    path("api/cart/", include("cart.urls")),
    # The orders app registers "orders/" and "dashboard/" itself.
    path("api/", include("orders.urls")),
]
