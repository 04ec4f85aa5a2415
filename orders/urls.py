# orders/urls.py
"""
URL маршруты для orders.

ENDPOINTS:
- /api/orders, /api/orders/{id}
- /api/orders/{id}/status, /api/orders/{id}/tracking, /api/orders/{id}/cancel
- /api/buyer/orders
- /api/manager/orders/pending, /api/manager/orders/approved
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    BuyerOrderListView,
    ManagerApprovedOrderListView,
    ManagerPendingOrderListView,
    OrderViewSet,
)

app_name = 'orders'

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'orders', OrderViewSet, basename='order')

urlpatterns = [
    path('buyer/orders', BuyerOrderListView.as_view(), name='buyer-orders'),
    path('manager/orders/pending', ManagerPendingOrderListView.as_view(), name='manager-orders-pending'),
    path('manager/orders/approved', ManagerApprovedOrderListView.as_view(), name='manager-orders-approved'),
    path('', include(router.urls)),
]
