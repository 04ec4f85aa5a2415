"""Жизненный цикл заказа и связь с остатком товара."""

import pytest

from config.exceptions import DomainStateError, NotFoundError, OwnershipError
from orders.models import Order, OrderStatus
from orders.services import OrderData, OrderWorkflowService


pytestmark = pytest.mark.django_db


@pytest.fixture
def product(make_product):
    return make_product(name='Shirt', category='Tops', available_quantity=10)


@pytest.fixture
def pending_order(product, buyer_user):
    return OrderWorkflowService.create_order(
        data=OrderData(product=product, quantity=3),
        buyer_email=buyer_user.email,
    )


def test_create_reserves_quantity(product, pending_order):
    product.refresh_from_db()

    assert product.available_quantity == 7
    assert pending_order.status == OrderStatus.PENDING
    assert pending_order.product_name == 'Shirt'
    assert pending_order.tracking.count() == 0


def test_create_does_not_check_stock(product, buyer_user):
    OrderWorkflowService.create_order(
        data=OrderData(product=product, quantity=25),
        buyer_email=buyer_user.email,
    )

    product.refresh_from_db()
    assert product.available_quantity == -15


def test_cancel_restores_quantity(product, pending_order, buyer_user):
    matched = OrderWorkflowService.cancel_order(pending_order.id, buyer_email=buyer_user.email)

    assert matched == 1
    product.refresh_from_db()
    pending_order.refresh_from_db()
    assert product.available_quantity == 10
    assert pending_order.status == OrderStatus.CANCELLED
    assert pending_order.cancelled_at is not None


def test_second_cancel_fails_and_keeps_quantity(product, pending_order, buyer_user):
    OrderWorkflowService.cancel_order(pending_order.id, buyer_email=buyer_user.email)

    with pytest.raises(DomainStateError):
        OrderWorkflowService.cancel_order(pending_order.id, buyer_email=buyer_user.email)

    product.refresh_from_db()
    assert product.available_quantity == 10


@pytest.mark.parametrize('final_status', [OrderStatus.APPROVED, OrderStatus.REJECTED])
def test_reviewed_order_cannot_be_cancelled(product, pending_order, buyer_user, final_status):
    OrderWorkflowService.update_status(pending_order.id, status=final_status)

    with pytest.raises(DomainStateError):
        OrderWorkflowService.cancel_order(pending_order.id, buyer_email=buyer_user.email)

    product.refresh_from_db()
    assert product.available_quantity == 7


def test_other_buyer_cannot_cancel(pending_order):
    with pytest.raises(OwnershipError):
        OrderWorkflowService.cancel_order(pending_order.id, buyer_email='intruder@garments.test')

    pending_order.refresh_from_db()
    assert pending_order.status == OrderStatus.PENDING


def test_approve_stamps_approved_at_once(pending_order):
    OrderWorkflowService.update_status(pending_order.id, status=OrderStatus.APPROVED)
    pending_order.refresh_from_db()
    approved_at = pending_order.approved_at

    assert pending_order.status == OrderStatus.APPROVED
    assert approved_at is not None
    assert pending_order.rejected_at is None

    with pytest.raises(DomainStateError):
        OrderWorkflowService.update_status(pending_order.id, status=OrderStatus.REJECTED)

    pending_order.refresh_from_db()
    assert pending_order.status == OrderStatus.APPROVED
    assert pending_order.approved_at == approved_at


def test_reject_stamps_rejected_at(pending_order):
    OrderWorkflowService.update_status(pending_order.id, status=OrderStatus.REJECTED)

    pending_order.refresh_from_db()
    assert pending_order.rejected_at is not None
    assert pending_order.approved_at is None


def test_status_cannot_be_set_to_cancelled_by_manager(pending_order):
    with pytest.raises(DomainStateError):
        OrderWorkflowService.update_status(pending_order.id, status=OrderStatus.CANCELLED)


def test_tracking_is_append_only(pending_order):
    OrderWorkflowService.add_tracking_event(pending_order.id, {'status': 'Cutting Completed'})
    OrderWorkflowService.add_tracking_event(pending_order.id, {
        'status': 'Sewing Started',
        'location': 'Line 3',
        'timestamp': '1999-01-01T00:00:00Z',
    })

    events = list(Order.objects.get(pk=pending_order.id).tracking.all())

    assert [event.details['status'] for event in events] == ['Cutting Completed', 'Sewing Started']
    assert 'timestamp' not in events[1].details
    assert events[1].timestamp.year != 1999
    assert events[0].timestamp <= events[1].timestamp


def test_missing_order_raises_not_found():
    with pytest.raises(NotFoundError):
        OrderWorkflowService.cancel_order(424242, buyer_email='buyer@garments.test')
    with pytest.raises(NotFoundError):
        OrderWorkflowService.update_status(424242, status=OrderStatus.APPROVED)
    with pytest.raises(NotFoundError):
        OrderWorkflowService.add_tracking_event(424242, {'status': 'x'})
