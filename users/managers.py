# users/managers.py
"""
Менеджер пользователей.

Обычные пользователи заводятся через API без пароля (вход через внешний
провайдер). Пароль нужен только администраторам для Django admin.
"""

from django.contrib.auth.models import BaseUserManager


class UserManager(BaseUserManager):

    use_in_migrations = True

    def create_user(self, email: str, password: str = None, **extra_fields):
        """
        Создаёт пользователя.

        Args:
            email: Email (уникальный ключ)
            password: Пароль, если нужен вход в админку
            **extra_fields: name, role, photo_url и т.д.

        Raises:
            ValueError: Если email не указан
        """
        if not email:
            raise ValueError('Email обязателен')

        email = self.normalize_email(email)
        extra_fields.setdefault('status', 'pending')

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)

        return user

    def create_superuser(self, email: str, password: str = None, **extra_fields):
        """Администратор: роль admin, сразу одобрен, доступ к админке."""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', 'admin')
        extra_fields.setdefault('status', 'approved')

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Суперпользователь должен иметь is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Суперпользователь должен иметь is_superuser=True')

        return self.create_user(email, password, **extra_fields)
