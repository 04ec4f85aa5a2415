# orders/throttles.py
"""
Throttle классы для эндпоинтов заказов.
"""

from rest_framework.throttling import UserRateThrottle


class OrderCreationThrottle(UserRateThrottle):
    """
    Создание заказов.

    Защита от дублирования заказов и спама, лимит на покупателя
    (ключ кэша: email из токена).
    """
    scope = 'order_creation'
