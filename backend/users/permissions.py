from rest_framework import permissions


class IsAdministrator(permissions.BasePermission):
    """Authenticated identity carrying the is_admin flag."""

    message = "Admin access required"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "is_admin", False))


class IsAdministratorOrReadOnly(IsAdministrator):
    """
    Anyone may read; only administrators may create, update or delete.
    Used by the public menu endpoints.
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
