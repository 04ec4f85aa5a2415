# orders/services.py
"""
Сервисы для orders.

WORKFLOW:
1. Покупатель создаёт заказ → PENDING, остаток товара -quantity
2. Менеджер одобряет/отклоняет → APPROVED / REJECTED (только из PENDING)
3. Покупатель отменяет свой PENDING заказ → CANCELLED, остаток +quantity

Заказ и изменение остатка пишутся в одной транзакции, остаток меняется
через F() выражение, поэтому параллельные заказы не теряют списания.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional

from django.db import transaction
from django.db.models import F, Q, QuerySet
from django.utils import timezone

from config.exceptions import DomainStateError, NotFoundError, OwnershipError
from products.models import Product

from .models import Order, OrderStatus, OrderTrackingEvent

logger = logging.getLogger(__name__)


@dataclass
class OrderData:
    """Данные для создания заказа."""
    product: Product
    quantity: int
    unit_price: Optional[Decimal] = None
    order_price: Optional[Decimal] = None
    extra: Dict[str, Any] = field(default_factory=dict)


class OrderWorkflowService:
    """Сервис workflow заказов."""

    # Итоговые статусы, которые выставляет менеджер
    REVIEW_STATUSES = {
        OrderStatus.APPROVED: 'approved_at',
        OrderStatus.REJECTED: 'rejected_at',
    }

    # =========================================================================
    # СОЗДАНИЕ ЗАКАЗА (ПОКУПАТЕЛЬ)
    # =========================================================================

    @classmethod
    @transaction.atomic
    def create_order(cls, *, data: OrderData, buyer_email: str) -> Order:
        """
        Покупатель создаёт заказ и резервирует количество.

        Остаток не проверяется: available_quantity может уйти в минус.

        Args:
            data: Товар, количество и доп. поля
            buyer_email: Email из токена

        Returns:
            Order
        """
        order = Order.objects.create(
            product=data.product,
            product_name=data.product.name,
            quantity=data.quantity,
            unit_price=data.unit_price,
            order_price=data.order_price,
            buyer_email=buyer_email,
            status=OrderStatus.PENDING,
            **data.extra
        )

        Product.objects.filter(pk=data.product.pk).update(
            available_quantity=F('available_quantity') - data.quantity
        )

        logger.info(
            f"Заказ #{order.id} создан: {buyer_email}, товар #{data.product.pk} x{data.quantity}"
        )
        return order

    # =========================================================================
    # ОДОБРЕНИЕ / ОТКЛОНЕНИЕ (МЕНЕДЖЕР)
    # =========================================================================

    @classmethod
    def update_status(cls, order_id, *, status: str) -> int:
        """
        Менеджер одобряет или отклоняет заказ.

        Переход только из PENDING, поэтому approved_at / rejected_at
        ставится ровно один раз.

        Returns:
            Количество обновлённых записей (1)

        Raises:
            NotFoundError: Заказа нет
            DomainStateError: Недопустимый статус или заказ уже не PENDING
        """
        if status not in cls.REVIEW_STATUSES:
            raise DomainStateError(f'Unsupported order status "{status}"')

        now = timezone.now()
        matched = Order.objects.filter(pk=order_id, status=OrderStatus.PENDING).update(
            status=status,
            updated_at=now,
            **{cls.REVIEW_STATUSES[status]: now}
        )

        if not matched:
            order = cls.get_order(order_id)
            raise DomainStateError(
                f'Cannot change status of {order.status} order'
            )

        logger.info(f"Заказ #{order_id}: pending → {status}")
        return matched

    # =========================================================================
    # ТРЕКИНГ (МЕНЕДЖЕР)
    # =========================================================================

    @classmethod
    def add_tracking_event(cls, order_id, details: Dict[str, Any]) -> OrderTrackingEvent:
        """
        Добавить событие трекинга. Старые события не меняются.

        timestamp из тела запроса игнорируется, время ставит сервер.
        """
        order = cls.get_order(order_id)

        details = {key: value for key, value in details.items() if key != 'timestamp'}
        now = timezone.now()

        event = OrderTrackingEvent.objects.create(order=order, details=details, timestamp=now)
        Order.objects.filter(pk=order.pk).update(updated_at=now)

        logger.info(f"Заказ #{order.pk}: добавлено событие трекинга #{event.id}")
        return event

    # =========================================================================
    # ОТМЕНА (ПОКУПАТЕЛЬ)
    # =========================================================================

    @classmethod
    @transaction.atomic
    def cancel_order(cls, order_id, *, buyer_email: str) -> int:
        """
        Покупатель отменяет свой заказ и возвращает количество на склад.

        Порядок проверок: статус, затем владелец.

        Raises:
            NotFoundError: Заказа нет
            DomainStateError: Заказ не в PENDING
            OwnershipError: Чужой заказ
        """
        order = cls.get_order(order_id)

        if not order.is_cancellable:
            raise DomainStateError('Cannot cancel approved/rejected order')

        if order.buyer_email != buyer_email:
            raise OwnershipError()

        now = timezone.now()

        # Условное обновление: из двух параллельных отмен пройдёт одна
        matched = Order.objects.filter(
            pk=order.pk,
            status=OrderStatus.PENDING,
            buyer_email=buyer_email
        ).update(
            status=OrderStatus.CANCELLED,
            cancelled_at=now,
            updated_at=now
        )

        if not matched:
            raise DomainStateError('Cannot cancel approved/rejected order')

        if order.product_id is not None:
            Product.objects.filter(pk=order.product_id).update(
                available_quantity=F('available_quantity') + order.quantity
            )

        logger.info(f"Заказ #{order.pk} отменён покупателем {buyer_email}, возвращено {order.quantity}")
        return matched

    # =========================================================================
    # ЧТЕНИЕ
    # =========================================================================

    @classmethod
    def get_order(cls, order_id) -> Order:
        order = Order.objects.with_tracking().filter(pk=order_id).first()
        if order is None:
            raise NotFoundError('Order not found')
        return order

    @classmethod
    def search(cls, queryset: QuerySet, term: Optional[str]) -> QuerySet:
        """Поиск по email покупателя или названию товара."""
        if not term:
            return queryset
        return queryset.filter(
            Q(buyer_email__icontains=term) |
            Q(product_name__icontains=term)
        )
