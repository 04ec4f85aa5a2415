# orders/admin.py
"""Django Admin для orders."""

from django.contrib import admin
from django.utils import timezone

from .models import Order, OrderStatus, OrderTrackingEvent


class OrderTrackingEventInline(admin.TabularInline):
    """Трекинг только для просмотра: события не редактируются."""
    model = OrderTrackingEvent
    extra = 0
    can_delete = False
    readonly_fields = ['details', 'timestamp']

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):

    list_display = [
        'id', 'product_name', 'quantity', 'buyer_email',
        'status', 'order_price', 'created_at'
    ]

    list_filter = ['status', 'created_at']

    search_fields = ['buyer_email', 'product_name', 'id']

    # статус меняется только через действия: они ставят даты переходов
    readonly_fields = [
        'product', 'product_name', 'quantity', 'buyer_email', 'status',
        'created_at', 'approved_at', 'rejected_at', 'cancelled_at', 'updated_at'
    ]

    inlines = [OrderTrackingEventInline]

    fieldsets = [
        ('Основное', {
            'fields': ['product', 'product_name', 'quantity', 'buyer_email', 'status']
        }),
        ('Оплата и доставка', {
            'fields': [
                ('unit_price', 'order_price'),
                'payment_method', 'contact_number', 'delivery_address', 'notes'
            ]
        }),
        ('Даты', {
            'fields': [
                'created_at',
                ('approved_at', 'rejected_at', 'cancelled_at'),
                'updated_at'
            ],
            'classes': ['collapse']
        }),
    ]

    actions = ['approve_orders', 'reject_orders']

    def approve_orders(self, request, queryset):
        """Массовое одобрение заказов (только PENDING)."""
        now = timezone.now()
        updated = queryset.filter(status=OrderStatus.PENDING).update(
            status=OrderStatus.APPROVED,
            approved_at=now,
            updated_at=now
        )
        self.message_user(request, f'Одобрено {updated} заказов')

    approve_orders.short_description = 'Одобрить выбранные заказы'

    def reject_orders(self, request, queryset):
        """Массовое отклонение заказов (только PENDING)."""
        now = timezone.now()
        updated = queryset.filter(status=OrderStatus.PENDING).update(
            status=OrderStatus.REJECTED,
            rejected_at=now,
            updated_at=now
        )
        self.message_user(request, f'Отклонено {updated} заказов')

    reject_orders.short_description = 'Отклонить выбранные заказы'
