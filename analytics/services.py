# analytics/services.py
"""
Сервис аналитики для админа.

Считается на лету при каждом запросе: без кэша и без
инкрементальных счётчиков, запросы редкие.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List

from django.conf import settings
from django.db.models import Count
from django.utils import timezone

from orders.models import Order
from products.models import Product
from users.models import User, UserRole, UserStatus


@dataclass
class AnalyticsSummary:
    """Сводка за период."""

    total_products: int
    total_orders: int
    total_users: int
    active_managers: int
    recent_orders: int
    products_by_category: List[Dict[str, Any]] = field(default_factory=list)
    period: int = 30

    def to_dict(self) -> Dict[str, Any]:
        return {
            'totalProducts': self.total_products,
            'totalOrders': self.total_orders,
            'totalUsers': self.total_users,
            'activeManagers': self.active_managers,
            'recentOrders': self.recent_orders,
            'productsByCategory': self.products_by_category,
            'period': self.period,
        }


class AnalyticsService:
    """Агрегаты по товарам, заказам и пользователям."""

    @staticmethod
    def window_start(period_days: int) -> datetime:
        return timezone.now() - timedelta(days=period_days)

    @classmethod
    def get_summary(cls, period_days: int = None) -> AnalyticsSummary:
        """
        Сводка для админ-панели.

        Args:
            period_days: Окно в днях для заказов (по умолчанию из настроек)

        Returns:
            AnalyticsSummary

        totalProducts и totalUsers считаются за всё время,
        totalOrders и recentOrders только за окно.
        """
        if period_days is None:
            period_days = settings.ANALYTICS_DEFAULT_PERIOD_DAYS

        start = cls.window_start(period_days)
        orders_in_window = Order.objects.filter(created_at__gte=start).count()

        by_category = [
            {'category': row['category'], 'count': row['count']}
            for row in (
                Product.objects
                .order_by()
                .values('category')
                .annotate(count=Count('id'))
                .order_by('category')
            )
        ]

        return AnalyticsSummary(
            total_products=Product.objects.count(),
            total_orders=orders_in_window,
            total_users=User.objects.count(),
            active_managers=User.objects.filter(
                role=UserRole.MANAGER,
                status=UserStatus.APPROVED
            ).count(),
            recent_orders=orders_in_window,
            products_by_category=by_category,
            period=period_days,
        )
