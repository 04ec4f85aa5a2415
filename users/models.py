# users/models.py
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from .managers import UserManager


class UserRole(models.TextChoices):
    BUYER = 'buyer', 'Покупатель'
    MANAGER = 'manager', 'Менеджер'
    ADMIN = 'admin', 'Администратор'


class UserStatus(models.TextChoices):
    PENDING = 'pending', 'Ожидает одобрения'
    APPROVED = 'approved', 'Одобрен'
    SUSPENDED = 'suspended', 'Заблокирован'


class User(AbstractBaseUser, PermissionsMixin):
    """
    Пользователь системы.

    Создаётся при первом входе (POST /api/users), ключ: email.
    Пароль не хранится: личность подтверждает внешний провайдер входа,
    а API получает подписанный токен с email.
    """

    email = models.EmailField(
        max_length=254,
        unique=True,
        verbose_name='Email'
    )
    name = models.CharField(max_length=150, blank=True, verbose_name='Имя')
    photo_url = models.URLField(max_length=500, blank=True, verbose_name='Фото')

    # Роль и статусы
    role = models.CharField(
        max_length=10,
        choices=UserRole.choices,
        default=UserRole.BUYER,
        verbose_name='Роль'
    )
    status = models.CharField(
        max_length=10,
        choices=UserStatus.choices,
        default=UserStatus.PENDING,
        verbose_name='Статус'
    )
    suspended_reason = models.TextField(
        null=True,
        blank=True,
        verbose_name='Причина блокировки',
        help_text='Заполняется только при статусе suspended'
    )

    # Доступ к Django admin
    is_active = models.BooleanField(default=True, verbose_name='Активен')
    is_staff = models.BooleanField(default=False, verbose_name='Персонал')

    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')
    updated_at = models.DateTimeField(null=True, blank=True, verbose_name='Дата обновления')

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'users'
        verbose_name = 'Пользователь'
        verbose_name_plural = 'Пользователи'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name or self.email} ({self.role})"

    def save(self, *args, **kwargs):
        # Администраторы автоматически получают доступ к админке
        if self.role == UserRole.ADMIN:
            self.is_staff = True

        super().save(*args, **kwargs)
