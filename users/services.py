# users/services.py
"""
Сервисы пользователей: выдача токенов, проверка ролей, справочник пользователей.
"""

import logging
from enum import Enum
from typing import Optional

from django.conf import settings
from django.db.models import Q, QuerySet
from django.utils import timezone
from rest_framework_simplejwt.tokens import AccessToken

from .models import User, UserRole, UserStatus

logger = logging.getLogger(__name__)


# =============================================================================
# TOKEN SERVICE
# =============================================================================

class TokenService:
    """Выдача подписанного токена и доставка его через httpOnly куку."""

    @staticmethod
    def issue_token(email: str) -> str:
        """
        Подписать токен для email.

        Срок жизни: SIMPLE_JWT['ACCESS_TOKEN_LIFETIME'] (JWT_EXPIRE).
        """
        token = AccessToken()
        token[settings.SIMPLE_JWT['USER_ID_CLAIM']] = email
        return str(token)

    @staticmethod
    def set_auth_cookie(response, token: str):
        response.set_cookie(
            settings.AUTH_COOKIE_NAME,
            token,
            max_age=settings.COOKIE_EXPIRE_DAYS * 24 * 60 * 60,
            httponly=True,
            secure=settings.AUTH_COOKIE_SECURE,
            samesite=settings.AUTH_COOKIE_SAMESITE,
        )
        return response

    @staticmethod
    def clear_auth_cookie(response):
        """Удаление куки с теми же атрибутами, что при выдаче."""
        response.set_cookie(
            settings.AUTH_COOKIE_NAME,
            '',
            max_age=0,
            expires='Thu, 01 Jan 1970 00:00:00 GMT',
            httponly=True,
            secure=settings.AUTH_COOKIE_SECURE,
            samesite=settings.AUTH_COOKIE_SAMESITE,
        )
        return response


# =============================================================================
# ACCESS POLICY
# =============================================================================

class Capability(str, Enum):
    """Что требуется маршруту."""
    ADMIN = 'admin'
    MANAGE = 'manage'
    BUY = 'buy'


class AccessPolicy:
    """
    Проверка роли по email из токена.

    Одно чтение из users на проверку, никаких записей.
    Нет пользователя, значит нет доступа.
    """

    ALLOWED_ROLES = {
        Capability.ADMIN: frozenset({UserRole.ADMIN}),
        Capability.MANAGE: frozenset({UserRole.MANAGER, UserRole.ADMIN}),
        Capability.BUY: frozenset({UserRole.BUYER, UserRole.ADMIN}),
    }

    @classmethod
    def role_of(cls, email: Optional[str]) -> Optional[str]:
        if not email:
            return None
        return User.objects.filter(email=email).values_list('role', flat=True).first()

    @classmethod
    def allows(cls, email: Optional[str], capability: Capability) -> bool:
        role = cls.role_of(email)
        return role is not None and role in cls.ALLOWED_ROLES[capability]


# =============================================================================
# USER DIRECTORY
# =============================================================================

class UserDirectoryService:
    """Справочник пользователей."""

    @staticmethod
    def upsert(*, email: str, name: str = '', photo_url: str = '',
               role: str = UserRole.BUYER) -> tuple[User, bool]:
        """
        Создать пользователя при первом входе.

        Если email уже есть, вернуть существующего без изменений.

        Returns:
            (user, created)
        """
        user, created = User.objects.get_or_create(
            email=email,
            defaults={
                'name': name,
                'photo_url': photo_url,
                'role': role,
                'status': UserStatus.PENDING,
                'suspended_reason': None,
            }
        )

        if created:
            user.set_unusable_password()
            user.save(update_fields=['password'])
            logger.info(f"Создан пользователь {email} с ролью {role}")

        return user, created

    @staticmethod
    def get_by_email(email: str) -> Optional[User]:
        return User.objects.filter(email=email).first()

    @staticmethod
    def search(queryset: QuerySet, term: Optional[str]) -> QuerySet:
        """Поиск без учёта регистра по имени, email или роли."""
        if not term:
            return queryset
        return queryset.filter(
            Q(name__icontains=term) |
            Q(email__icontains=term) |
            Q(role__icontains=term)
        )

    @staticmethod
    def update_status(user_id, *, status: str, suspended_reason: Optional[str] = None) -> int:
        """
        Сменить статус пользователя.

        Причина блокировки сохраняется только для suspended,
        для остальных статусов сбрасывается в NULL.

        Returns:
            Количество найденных записей (0, если id не существует)
        """
        if not str(user_id).isdigit():
            return 0

        matched = User.objects.filter(pk=int(user_id)).update(
            status=status,
            suspended_reason=suspended_reason if status == UserStatus.SUSPENDED else None,
            updated_at=timezone.now(),
        )

        if matched:
            logger.info(f"Статус пользователя {user_id} изменён на {status}")

        return matched
