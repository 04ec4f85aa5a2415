# users/views.py
"""
Views для выдачи токена и управления пользователями.

API ENDPOINTS:
- POST /api/auth/jwt - выдать токен (кука token)
- POST /api/auth/logout - удалить куку
- POST /api/users - первый вход (создание пользователя)
- GET /api/users - список и поиск (админ)
- GET /api/users/{email} - свой профиль
- PATCH /api/users/{id} - смена статуса (админ)
"""

from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from config.exceptions import NotFoundError, OwnershipError

from .authentication import get_request_email
from .models import User
from .permissions import IsAdmin
from .serializers import (
    TokenRequestSerializer,
    UserCreateSerializer,
    UserSearchSerializer,
    UserSerializer,
    UserStatusUpdateSerializer,
)
from .services import TokenService, UserDirectoryService
from .throttles import TokenIssueThrottle, UserRegistrationThrottle


class IssueTokenView(APIView):
    """
    Выдача токена.

    POST /api/auth/jwt
    Body: {"email": "buyer@example.com"}

    Токен кладётся в httpOnly куку, в теле только {"success": true}.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [TokenIssueThrottle]
    failure_messages = {'post': 'Error generating token'}

    def post(self, request: Request) -> Response:
        serializer = TokenRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        token = TokenService.issue_token(serializer.validated_data['email'])

        response = Response({'success': True})
        return TokenService.set_auth_cookie(response, token)


class LogoutView(APIView):
    """
    Выход: удаляем куку с теми же атрибутами.

    POST /api/auth/logout
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        response = Response({'success': True})
        return TokenService.clear_auth_cookie(response)


class UserListCreateView(generics.GenericAPIView):
    """
    POST /api/users - создание при первом входе (публично)
    GET /api/users?search=... - список пользователей (админ)
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    failure_messages = {
        'get': 'Error fetching users',
        'post': 'Error creating user',
    }

    def get_authenticators(self):
        if self.request is not None and self.request.method == 'POST':
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method == 'POST':
            return [AllowAny()]
        return [IsAuthenticated(), IsAdmin()]

    def get_throttles(self):
        if self.request.method == 'POST':
            return [UserRegistrationThrottle()]
        return super().get_throttles()

    def get(self, request: Request) -> Response:
        params = UserSearchSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        users = UserDirectoryService.search(
            self.get_queryset(),
            params.validated_data.get('search')
        )
        return Response(UserSerializer(users, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user, created = UserDirectoryService.upsert(**serializer.validated_data)

        if not created:
            return Response({
                'message': 'User already exists',
                'insertedId': user.id,
            })

        return Response({'acknowledged': True, 'insertedId': user.id})


class UserDetailView(APIView):
    """
    GET /api/users/{email} - свой профиль (чужой email -> 403)
    PATCH /api/users/{id} - смена статуса (админ)

    Body PATCH: {"status": "suspended", "suspendedReason": "Spam"}
    """

    failure_messages = {
        'get': 'Error fetching user',
        'patch': 'Error updating user',
    }

    def get_permissions(self):
        if self.request.method == 'PATCH':
            return [IsAuthenticated(), IsAdmin()]
        return [IsAuthenticated()]

    def get(self, request: Request, lookup: str) -> Response:
        if lookup != get_request_email(request):
            raise OwnershipError()

        user = UserDirectoryService.get_by_email(lookup)
        if user is None:
            raise NotFoundError('User not found')

        return Response(UserSerializer(user).data)

    def patch(self, request: Request, lookup: str) -> Response:
        serializer = UserStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        matched = UserDirectoryService.update_status(
            lookup,
            status=serializer.validated_data['status'],
            suspended_reason=serializer.validated_data.get('suspended_reason'),
        )

        return Response(
            {'matchedCount': matched, 'modifiedCount': matched},
            status=status.HTTP_200_OK
        )
