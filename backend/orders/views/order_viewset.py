import logging

from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import ReadOnlyBaseViewSet
from orders.models import Order
from orders.owners import AuthenticatedOwner, ChannelOwner
from orders.permissions import IsOrderOwnerOrAdministrator
from orders.serializers import (
    OrderSerializer,
    OrderCreateSerializer,
    TelegramOrderCreateSerializer,
    UpdateOrderStatusSerializer,
)
from orders.services import OrderService
from users.permissions import IsAdministrator
from users.services import UserService

from .status_actions import StatusActionsMixin

logger = logging.getLogger(__name__)


class OrderViewSet(StatusActionsMixin, ReadOnlyBaseViewSet):
    """
    Orders placed through the web app or Telegram.

    - list: administrators see every order (``?status=`` narrows it),
      customers only their own
    - retrieve: administrators or the order's owner
    - create: checkout for the signed-in customer
    - telegram: checkout for a Telegram user, no sign-in required
    - update_status: administrators only
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    permission_classes = [IsOrderOwnerOrAdministrator]
    filterset_fields = ["status"]
    search_fields = ["order_number"]
    ordering_fields = ["created_at", "total", "order_number"]
    ordering = ["-created_at"]

    order_service_class = OrderService

    def get_order_service(self):
        return self.order_service_class()

    def get_permissions(self):
        if self.action == "create_telegram":
            return [AllowAny()]
        if self.action == "update_status":
            return [IsAdministrator()]
        if self.action == "create":
            return [IsAuthenticated()]
        return super().get_permissions()

    def get_serializer_class(self):
        if self.action == "create":
            return OrderCreateSerializer
        if self.action == "create_telegram":
            return TelegramOrderCreateSerializer
        if self.action == "update_status":
            return UpdateOrderStatusSerializer
        return OrderSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != "list":
            return queryset

        user = self.request.user
        if getattr(user, "is_admin", False):
            return queryset

        owned = Q(user_id=user.pk)
        if user.telegram_user_id:
            owned |= Q(channel_user_id=user.telegram_user_id)
        return queryset.filter(owned)

    def _order_response(self, order, status_code=status.HTTP_200_OK):
        order = Order.objects.prefetch_related("items__menu_item").get(pk=order.pk)
        return Response(OrderSerializer(order, context=self.get_serializer_context()).data, status=status_code)

    def create(self, request: Request, *args, **kwargs) -> Response:
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order = self.get_order_service().create_order(
            items=data["items"],
            owner=AuthenticatedOwner(user_id=request.user.pk),
            customer_notes=data.get("customer_notes") or "",
            client_totals=serializer.client_totals(),
        )
        return self._order_response(order, status.HTTP_201_CREATED)

    @action(detail=False, methods=["post"], url_path="telegram")
    def create_telegram(self, request: Request) -> Response:
        """
        Places an order for a Telegram user. The user's profile is recorded
        (or refreshed) first so administrators can see who ordered.
        """
        serializer = TelegramOrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        UserService.upsert_telegram_user(
            telegram_user_id=data["telegram_user_id"],
            username=data.get("username", ""),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
        )

        order = self.get_order_service().create_order(
            items=data["items"],
            owner=ChannelOwner(external_id=data["telegram_user_id"]),
            customer_notes=data.get("customer_notes") or "",
            telegram_chat_id=data["telegram_chat_id"],
            client_totals=serializer.client_totals(),
        )
        return self._order_response(order, status.HTTP_201_CREATED)
