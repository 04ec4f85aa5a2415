# users/permissions.py
"""
Permissions по ролям.

Каждая проверка: один запрос в users по email из токена (AccessPolicy).
Проверяются после аутентификации; без токена DRF отвечает 401.
"""

from rest_framework.permissions import BasePermission

from .authentication import get_request_email
from .services import AccessPolicy, Capability


class RolePermission(BasePermission):
    """Базовый класс: доступ, если роль пользователя допускает capability."""

    capability: Capability = None

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        return AccessPolicy.allows(get_request_email(request), self.capability)


class IsAdmin(RolePermission):
    """Только администраторы."""
    capability = Capability.ADMIN


class IsManagerOrAdmin(RolePermission):
    """Менеджеры или админы."""
    capability = Capability.MANAGE


class IsBuyerOrAdmin(RolePermission):
    """Покупатели или админы."""
    capability = Capability.BUY
