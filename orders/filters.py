# orders/filters.py
"""
Фильтры для orders.

Параметры:
- status: статус заказа (pending, approved, rejected, cancelled)
- search: подстрока в email покупателя или названии товара
"""

import django_filters

from .models import Order, OrderStatus
from .services import OrderWorkflowService


class OrderFilter(django_filters.FilterSet):
    """Полный список заказов (админ)."""

    status = django_filters.ChoiceFilter(field_name='status', choices=OrderStatus.choices)
    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = Order
        fields = ('status', 'search')

    def filter_search(self, queryset, name, value):
        return OrderWorkflowService.search(queryset, value)
