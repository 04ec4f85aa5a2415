# orders/models.py
"""
Модели заказов.

WORKFLOW:
1. Покупатель создаёт заказ → status=PENDING, остаток товара уменьшается
2. Менеджер одобряет → APPROVED (approved_at) или отклоняет → REJECTED (rejected_at)
3. Покупатель может отменить только PENDING → CANCELLED (cancelled_at), остаток возвращается

Трекинг производства и доставки: OrderTrackingEvent, только добавление.
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class OrderStatus(models.TextChoices):
    """
    Статусы заказа.

    PENDING начальный, остальные финальные.
    """
    PENDING = 'pending', 'В ожидании'
    APPROVED = 'approved', 'Одобрен'
    REJECTED = 'rejected', 'Отклонён'
    CANCELLED = 'cancelled', 'Отменён'


class OrderQuerySet(models.QuerySet):

    def for_buyer(self, email):
        return self.filter(buyer_email=email).order_by('-created_at', '-id')

    def pending(self):
        return self.filter(status=OrderStatus.PENDING).order_by('-created_at', '-id')

    def approved(self):
        return self.filter(status=OrderStatus.APPROVED).order_by('-approved_at', '-id')

    def with_tracking(self):
        return self.prefetch_related('tracking')


class Order(models.Model):
    """
    Заказ покупателя на один товар.

    buyer_email всегда из токена, не из тела запроса.
    product_name: снимок названия на момент заказа.
    """

    product = models.ForeignKey(
        'products.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
        verbose_name='Товар'
    )
    product_name = models.CharField(max_length=200, verbose_name='Название товара')

    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        verbose_name='Количество'
    )

    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='Цена за единицу'
    )
    order_price = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='Сумма заказа'
    )

    buyer_email = models.EmailField(db_index=True, verbose_name='Покупатель (email)')
    contact_number = models.CharField(max_length=30, blank=True, verbose_name='Телефон')
    delivery_address = models.TextField(blank=True, verbose_name='Адрес доставки')
    notes = models.TextField(blank=True, verbose_name='Комментарий')
    payment_method = models.CharField(max_length=100, blank=True, verbose_name='Способ оплаты')

    status = models.CharField(
        max_length=16,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
        verbose_name='Статус'
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')
    approved_at = models.DateTimeField(null=True, blank=True, verbose_name='Дата одобрения')
    rejected_at = models.DateTimeField(null=True, blank=True, verbose_name='Дата отклонения')
    cancelled_at = models.DateTimeField(null=True, blank=True, verbose_name='Дата отмены')
    updated_at = models.DateTimeField(null=True, blank=True, verbose_name='Дата обновления')

    objects = OrderQuerySet.as_manager()

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        verbose_name = 'Заказ'
        verbose_name_plural = 'Заказы'
        indexes = [
            models.Index(fields=['buyer_email', '-created_at'], name='orders_buyer_e_4b1f0c_idx'),
            models.Index(fields=['status', '-created_at'], name='orders_status_9d2e7a_idx'),
        ]

    def __str__(self) -> str:
        return f"Заказ #{self.pk} {self.product_name} x{self.quantity} ({self.status})"

    @property
    def is_cancellable(self) -> bool:
        return self.status == OrderStatus.PENDING


class OrderTrackingEvent(models.Model):
    """
    Событие трекинга (крой, пошив, упаковка, отправка...).

    details: произвольный объект от менеджера, timestamp ставит сервер.
    """

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='tracking',
        verbose_name='Заказ'
    )
    details = models.JSONField(default=dict, verbose_name='Данные события')
    timestamp = models.DateTimeField(default=timezone.now, verbose_name='Время')

    class Meta:
        db_table = 'order_tracking_events'
        ordering = ['timestamp', 'id']
        verbose_name = 'Событие трекинга'
        verbose_name_plural = 'События трекинга'

    def __str__(self) -> str:
        return f"Трекинг заказа #{self.order_id} {self.timestamp:%Y-%m-%d %H:%M}"
