# products/filters.py
"""
Django Filter фильтры для каталога.

Параметры:
- search: подстрока в названии или категории (без учёта регистра)
- category: точное совпадение категории
"""

import django_filters

from .models import Product


class ProductFilter(django_filters.FilterSet):

    search = django_filters.CharFilter(method='filter_search')
    category = django_filters.CharFilter(field_name='category', lookup_expr='exact')

    class Meta:
        model = Product
        fields = ['search', 'category']

    def filter_search(self, queryset, name, value):
        return queryset.search(value)


class ManagerProductFilter(django_filters.FilterSet):
    """Товары менеджера: только поиск, владелец подставляется во view."""

    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = Product
        fields = ['search']

    def filter_search(self, queryset, name, value):
        return queryset.search(value)
