from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils import timezone

from .models import User, UserStatus


@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ['email', 'name', 'role', 'status', 'is_active', 'created_at']
    list_filter = ['role', 'status', 'is_active', 'created_at']
    search_fields = ['email', 'name']
    ordering = ['-created_at']

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Личная информация', {'fields': ('name', 'photo_url')}),
        ('Роль и статус', {'fields': ('role', 'status', 'suspended_reason', 'is_active', 'is_staff', 'is_superuser')}),
        ('Даты', {'fields': ('last_login', 'created_at', 'updated_at')}),
    )

    readonly_fields = ['created_at', 'updated_at']

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'password1', 'password2', 'role'),
        }),
    )

    actions = ['approve_users', 'mark_pending']

    def approve_users(self, request, queryset):
        """Массовое одобрение пользователей"""
        updated = queryset.update(
            status=UserStatus.APPROVED,
            suspended_reason=None,
            updated_at=timezone.now()
        )
        self.message_user(request, f'Одобрено {updated} пользователей')

    approve_users.short_description = 'Одобрить выбранных пользователей'

    def mark_pending(self, request, queryset):
        updated = queryset.update(
            status=UserStatus.PENDING,
            suspended_reason=None,
            updated_at=timezone.now()
        )
        self.message_user(request, f'Возвращено на рассмотрение: {updated}')

    mark_pending.short_description = 'Вернуть на рассмотрение'
