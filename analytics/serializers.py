# analytics/serializers.py
"""Сериализаторы для analytics."""

from django.conf import settings
from rest_framework import serializers


class AnalyticsQuerySerializer(serializers.Serializer):
    """Окно в днях: ?period=30"""

    period = serializers.IntegerField(
        min_value=0,
        max_value=settings.ANALYTICS_MAX_PERIOD_DAYS,
        required=False,
        help_text='Окно для заказов в днях'
    )

    def validate(self, attrs):
        attrs.setdefault('period', settings.ANALYTICS_DEFAULT_PERIOD_DAYS)
        return attrs


class CategoryCountSerializer(serializers.Serializer):
    category = serializers.CharField()
    count = serializers.IntegerField()


class AnalyticsSummarySerializer(serializers.Serializer):
    """Схема ответа (для документации)."""

    totalProducts = serializers.IntegerField()
    totalOrders = serializers.IntegerField()
    totalUsers = serializers.IntegerField()
    activeManagers = serializers.IntegerField()
    recentOrders = serializers.IntegerField()
    productsByCategory = CategoryCountSerializer(many=True)
    period = serializers.IntegerField()
