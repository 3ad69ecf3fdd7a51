from rest_framework import permissions


class IsOrderOwnerOrAdministrator(permissions.BasePermission):
    """
    Administrators see every order; anyone else only orders they own,
    including Telegram orders placed under their linked Telegram id.
    """

    message = "Access denied"

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        if getattr(request.user, "is_admin", False):
            return True
        return obj.is_owned_by(request.user)
