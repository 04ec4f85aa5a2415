# users/throttles.py
"""
Throttle классы для публичных эндпоинтов.

- TokenIssueThrottle: выдача токена
- UserRegistrationThrottle: первый вход (создание пользователя)
"""

from rest_framework.throttling import AnonRateThrottle


class TokenIssueThrottle(AnonRateThrottle):
    """
    Выдача токена.

    Эндпоинт публичный, ограничиваем по IP.
    """
    scope = 'auth_token'


class UserRegistrationThrottle(AnonRateThrottle):
    """Массовое создание пользователей с одного IP."""
    scope = 'user_registration'
