"""
Cart API views. The cart lives in the client's session, so anonymous
visitors can build one; placing the order requires signing in.
"""

import logging

from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from core_backend.exceptions import NotFoundError
from orders.owners import AuthenticatedOwner
from orders.serializers import OrderSerializer

from .serializers import (
    AddToCartSerializer,
    CartSerializer,
    CheckoutSerializer,
    UpdateCartItemSerializer,
)
from .services import CartService

logger = logging.getLogger(__name__)


class CartViewSet(viewsets.ViewSet):
    """
    ViewSet for cart operations.

    Endpoints:
    - GET /api/cart/ - Retrieve current cart
    - DELETE /api/cart/ - Clear all items
    - POST /api/cart/items/ - Add item to cart
    - PATCH /api/cart/items/{line_id}/ - Update item quantity
    - DELETE /api/cart/items/{line_id}/ - Remove item from cart
    - POST /api/cart/checkout/ - Convert cart to order
    """

    permission_classes = [AllowAny]

    def get_permissions(self):
        if self.action == "checkout":
            return [IsAuthenticated()]
        return super().get_permissions()

    def _cart_response(self, cart, status_code=status.HTTP_200_OK):
        return Response(CartSerializer(cart).data, status=status_code)

    def retrieve(self, request):
        return self._cart_response(CartService.get_cart(request))

    def add_item(self, request):
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = CartService.get_cart(request)
        CartService.add_item(cart, **serializer.validated_data)
        return self._cart_response(cart, status.HTTP_201_CREATED)

    def update_item(self, request, line_id=None):
        serializer = UpdateCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = CartService.get_cart(request)
        if cart.get_line(line_id) is None:
            raise NotFoundError("Cart item not found.")
        cart.update_quantity(line_id, serializer.validated_data["quantity"])
        return self._cart_response(cart)

    def remove_item(self, request, line_id=None):
        cart = CartService.get_cart(request)
        if not cart.remove_item(line_id):
            raise NotFoundError("Cart item not found.")
        return self._cart_response(cart)

    def clear(self, request):
        cart = CartService.get_cart(request)
        cart.clear()
        return self._cart_response(cart)

    def checkout(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = CartService.get_cart(request)
        order = CartService.checkout(
            cart,
            owner=AuthenticatedOwner(user_id=request.user.pk),
            customer_notes=serializer.validated_data.get("customer_notes") or "",
            client_totals={
                "subtotal": cart.subtotal(),
                "delivery_fee": cart.delivery_fee(),
                "total": cart.total(),
            },
        )
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)
