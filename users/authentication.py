# users/authentication.py
"""
Проверка токена для каждого запроса.

Токен берётся из httpOnly куки `token`, запасной вариант: заголовок
Authorization: Bearer <jwt>. Пользователь из БД не загружается:
request.user это TokenUser, в request.auth расшифрованные claims.
"""

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication


class CookieJWTAuthentication(JWTStatelessUserAuthentication):

    def authenticate(self, request):
        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)

        if not raw_token:
            header = self.get_header(request)
            if header is None:
                return None
            raw_token = self.get_raw_token(header)
            if raw_token is None:
                return None

        # Подпись, срок действия и тип токена; иначе InvalidToken (401)
        validated_token = self.get_validated_token(raw_token)

        return self.get_user(validated_token), validated_token


def get_request_email(request) -> str:
    """Email из токена текущего запроса."""
    return request.auth[settings.SIMPLE_JWT['USER_ID_CLAIM']]
