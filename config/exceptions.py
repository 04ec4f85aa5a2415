# config/exceptions.py
"""
Доменные исключения и единый обработчик ошибок API.

Все ошибки отдаются в формате {"message": str, "error": str?}:
- 401: нет токена / токен недействителен или истёк
- 403: роль не подходит или чужой объект
- 400: недопустимый переход статуса, невалидные данные
- 404: объект не найден
- 500: всё остальное (ошибка хранилища), текст ошибки уходит клиенту
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = 'Unauthorized access'
FORBIDDEN_MESSAGE = 'Forbidden access'


# =============================================================================
# ДОМЕННЫЕ ИСКЛЮЧЕНИЯ
# =============================================================================

class DomainError(Exception):
    """Базовая ошибка бизнес-логики. Сервисы поднимают, обработчик переводит в HTTP."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Bad request'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DomainStateError(DomainError):
    """Недопустимый переход статуса (например, отмена не-pending заказа)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Invalid state transition'


class OwnershipError(DomainError):
    """Действие над чужим объектом."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = FORBIDDEN_MESSAGE


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Not found'


# =============================================================================
# ОБРАБОТЧИК
# =============================================================================

def _flatten(detail, prefix=''):
    """Превращает вложенные ошибки DRF в одну строку: 'quantity: ...; productId: ...'."""
    if isinstance(detail, dict):
        parts = []
        for field, value in detail.items():
            name = field if field != 'non_field_errors' else ''
            label = f'{prefix}.{name}' if prefix and name else (name or prefix)
            parts.append(_flatten(value, label))
        return '; '.join(part for part in parts if part)

    if isinstance(detail, (list, tuple)):
        return '; '.join(_flatten(item, prefix) for item in detail)

    return f'{prefix}: {detail}' if prefix else str(detail)


def _failure_message(view) -> str:
    """Текст 500-й ошибки, заданный во view через failure_messages."""
    messages = getattr(view, 'failure_messages', None) or {}
    action = getattr(view, 'action', None)
    if not action:
        request = getattr(view, 'request', None)
        action = request.method.lower() if request is not None else None
    return messages.get(action, 'Internal server error')


def api_exception_handler(exc, context):
    """
    EXCEPTION_HANDLER для DRF.

    Стандартный обработчик DRF формирует статус и заголовки
    (WWW-Authenticate для 401), здесь только приводим тело к единому виду.
    """
    if isinstance(exc, DomainError):
        set_rollback()
        return Response({'message': exc.message}, status=exc.status_code)

    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
            response.data = {'message': UNAUTHORIZED_MESSAGE}
        elif isinstance(exc, exceptions.PermissionDenied):
            response.data = {'message': FORBIDDEN_MESSAGE}
        elif isinstance(exc, exceptions.ValidationError):
            response.data = {
                'message': 'Invalid request data',
                'error': _flatten(exc.detail),
            }
        else:
            detail = getattr(exc, 'detail', None)
            response.data = {'message': _flatten(detail) if detail else str(exc)}
        return response

    # Необработанная ошибка: хранилище недоступно, ошибка запроса и т.п.
    view = context.get('view')
    message = _failure_message(view)
    logger.exception(f"{message}: {exc}")
    set_rollback()

    return Response(
        {'message': message, 'error': str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
