import logging

from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from orders.serializers import UpdateOrderStatusSerializer

logger = logging.getLogger(__name__)


class StatusActionsMixin:
    """
    Mixin for order status transition actions

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=True, methods=["post", "put"], url_path="status")
    def update_status(self, request: Request, pk=None) -> Response:
        """
        Moves the order to the requested status. Administrators only.

        The customer's Telegram chat is notified after the change is saved;
        a failed notification does not fail the request.
        """
        serializer = UpdateOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self.get_order_service().set_status(pk, serializer.validated_data["status"])
        return self._order_response(order)
