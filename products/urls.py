# products/urls.py
"""
URL маршруты для products.

ENDPOINTS:
- /api/products, /api/products/home, /api/products/{id}
- /api/products/{id}/toggle-home
- /api/manager/products
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ManagerProductListView, ProductViewSet

app_name = 'products'

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'products', ProductViewSet, basename='product')

urlpatterns = [
    path('manager/products', ManagerProductListView.as_view(), name='manager-products'),
    path('', include(router.urls)),
]
