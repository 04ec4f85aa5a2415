from rest_framework import serializers

from .models import User, UserRole, UserStatus


class TokenRequestSerializer(serializers.Serializer):
    """Данные для выдачи токена: достаточно email."""

    email = serializers.EmailField()


class UserCreateSerializer(serializers.Serializer):
    """
    Первый вход пользователя.

    Роль выбирается при регистрации: buyer или manager.
    Администратора через API создать нельзя.
    """

    email = serializers.EmailField()
    name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    photoURL = serializers.URLField(
        max_length=500,
        required=False,
        allow_blank=True,
        default='',
        source='photo_url'
    )
    role = serializers.ChoiceField(
        choices=[UserRole.BUYER, UserRole.MANAGER],
        required=False,
        default=UserRole.BUYER
    )


class UserSerializer(serializers.ModelSerializer):
    """Публичное представление пользователя."""

    photoURL = serializers.CharField(source='photo_url', read_only=True)
    suspendedReason = serializers.CharField(source='suspended_reason', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'name', 'photoURL', 'role', 'status',
            'suspendedReason', 'createdAt', 'updatedAt'
        ]
        read_only_fields = fields


class UserStatusUpdateSerializer(serializers.Serializer):
    """Смена статуса админом."""

    status = serializers.ChoiceField(choices=UserStatus.choices)
    suspendedReason = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        source='suspended_reason'
    )


class UserSearchSerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True)
