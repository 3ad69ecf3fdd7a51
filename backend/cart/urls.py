"""
URL configuration for cart app.
"""

from django.urls import path
from .views import CartViewSet

app_name = 'cart'

urlpatterns = [
    path('', CartViewSet.as_view({'get': 'retrieve', 'delete': 'clear'}), name='cart-detail'),
    path('items/', CartViewSet.as_view({'post': 'add_item'}), name='cart-items'),
    path('items/<int:line_id>/', CartViewSet.as_view({
        'patch': 'update_item',
        'delete': 'remove_item',
    }), name='cart-item-detail'),
    path('checkout/', CartViewSet.as_view({'post': 'checkout'}), name='cart-checkout'),
]
