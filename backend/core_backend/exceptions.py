"""
Domain error taxonomy shared by every app, and the DRF exception handler that
renders it.

Every error response has the shape ``{"kind": ..., "message": ..., "details": ...}``
so clients can branch on ``kind`` without parsing messages.
"""

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base exception for business-rule and persistence failures."""

    kind = "error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An unexpected error occurred."

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        payload = {"kind": self.kind, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(DomainError):
    """Bad or missing input, or a reference to an unknown/inactive entity."""

    kind = "validation"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "The request is invalid."


class InvalidStatusTransitionError(ValidationError):
    """Raised when an order status change does not follow the lifecycle."""

    def __init__(self, current_status, new_status):
        self.current_status = current_status
        self.new_status = new_status
        super().__init__(
            f"Cannot transition order from {current_status} to {new_status}.",
            details={"current_status": current_status, "requested_status": new_status},
        )


class AuthorizationError(DomainError):
    kind = "authorization"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied."


class NotFoundError(DomainError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class ConflictError(DomainError):
    """A uniqueness collision that survived every retry. Safe to retry the whole call."""

    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT
    default_message = "The request conflicted with existing data. Please retry."


class StorageError(DomainError):
    """Persistence failure. Partial effects are rolled back before this is raised."""

    kind = "storage"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to save data. Please try again."


class NotificationError(DomainError):
    """Delivery of a customer notification failed. Never surfaced over HTTP."""

    kind = "notification"
    default_message = "Failed to deliver notification."


def _flatten_validation_detail(detail):
    if isinstance(detail, list) and detail:
        return _flatten_validation_detail(detail[0])
    if isinstance(detail, dict) and detail:
        field, value = next(iter(detail.items()))
        message = _flatten_validation_detail(value)
        return message if field == "non_field_errors" else f"{field}: {message}"
    return str(detail)


def api_exception_handler(exc, context):
    """
    DRF exception handler mapping domain errors and DRF's own exceptions onto
    the ``kind``/``message`` error contract.
    """
    if isinstance(exc, DomainError):
        if isinstance(exc, StorageError):
            logger.error(f"Storage failure: {exc.message}", exc_info=exc.__cause__)
        return Response(exc.to_dict(), status=exc.status_code)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, drf_exceptions.ValidationError):
        kind = "validation"
        message = _flatten_validation_detail(exc.detail)
        details = exc.detail
    elif isinstance(exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)):
        kind = "authorization"
        message = str(exc.detail)
        details = None
    elif isinstance(exc, (drf_exceptions.PermissionDenied, DjangoPermissionDenied)):
        kind = "authorization"
        message = str(getattr(exc, "detail", None) or AuthorizationError.default_message)
        details = None
    elif isinstance(exc, (drf_exceptions.NotFound, Http404)):
        kind = "not_found"
        message = "Not found."
        details = None
    elif isinstance(exc, drf_exceptions.ParseError):
        kind = "validation"
        message = str(exc.detail)
        details = None
    else:
        kind = "error"
        message = str(getattr(exc, "detail", exc))
        details = None

    payload = {"kind": kind, "message": message}
    if details:
        payload["details"] = details
    response.data = payload
    return response
