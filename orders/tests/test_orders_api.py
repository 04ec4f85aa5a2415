import pytest

from orders.models import Order, OrderStatus
from products.models import Product


pytestmark = pytest.mark.django_db


@pytest.fixture
def product(make_product):
    return make_product(name='Shirt', category='Tops', available_quantity=10)


@pytest.fixture
def place_order(client_for):
    def _place_order(email, product, quantity=3, **extra):
        response = client_for(email).post('/api/orders', {
            'productId': product.id,
            'quantity': quantity,
            **extra,
        }, format='json')
        assert response.status_code == 200, response.content
        return Order.objects.get(pk=response.json()['insertedId'])
    return _place_order


class TestCreate:

    def test_buyer_email_comes_from_token(self, buyer_client, buyer_user, product):
        response = buyer_client.post('/api/orders', {
            'productId': product.id,
            'quantity': 2,
            'buyerEmail': 'spoofed@garments.test',
            'status': 'approved',
            'deliveryAddress': 'House 12, Road 5, Dhaka',
            'contactNumber': '+8801700000000',
            'unitPrice': '12.50',
            'orderPrice': '25.00',
        }, format='json')

        assert response.status_code == 200
        assert response.json()['acknowledged'] is True

        order = Order.objects.get(pk=response.json()['insertedId'])
        assert order.buyer_email == buyer_user.email
        assert order.status == OrderStatus.PENDING
        assert order.delivery_address == 'House 12, Road 5, Dhaka'
        assert str(order.order_price) == '25.00'

    def test_unknown_product(self, buyer_client):
        response = buyer_client.post('/api/orders', {'productId': 424242, 'quantity': 1}, format='json')

        assert response.status_code == 400
        assert 'productId' in response.json()['error']

    @pytest.mark.parametrize('quantity', [0, -3])
    def test_quantity_must_be_positive(self, buyer_client, product, quantity):
        response = buyer_client.post('/api/orders', {'productId': product.id, 'quantity': quantity}, format='json')

        assert response.status_code == 400
        product.refresh_from_db()
        assert product.available_quantity == 10

    def test_oversized_quantity_is_rejected(self, buyer_client, product):
        response = buyer_client.post('/api/orders', {'productId': product.id, 'quantity': 10 ** 20}, format='json')

        assert response.status_code == 400
        assert 'quantity' in response.json()['error']
        product.refresh_from_db()
        assert product.available_quantity == 10
        assert not Order.objects.exists()

    def test_manager_cannot_order(self, manager_client, product):
        response = manager_client.post('/api/orders', {'productId': product.id, 'quantity': 1}, format='json')

        assert response.status_code == 403


class TestCancelEndpoint:

    def test_owner_cancels(self, buyer_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        response = buyer_client.patch(f'/api/orders/{order.id}/cancel')

        assert response.status_code == 200
        assert response.json() == {'matchedCount': 1, 'modifiedCount': 1}
        product.refresh_from_db()
        assert product.available_quantity == 10

    def test_second_cancel_is_bad_request(self, buyer_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)
        buyer_client.patch(f'/api/orders/{order.id}/cancel')

        response = buyer_client.patch(f'/api/orders/{order.id}/cancel')

        assert response.status_code == 400
        assert response.json() == {'message': 'Cannot cancel approved/rejected order'}

    def test_other_buyer_is_forbidden(self, make_user, client_for, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)
        intruder = make_user('intruder@garments.test')

        response = client_for(intruder.email).patch(f'/api/orders/{order.id}/cancel')

        assert response.status_code == 403
        assert response.json() == {'message': 'Forbidden access'}

    def test_missing_order(self, buyer_client):
        response = buyer_client.patch('/api/orders/424242/cancel')

        assert response.status_code == 404


class TestManagerActions:

    def test_approve(self, manager_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        response = manager_client.patch(f'/api/orders/{order.id}/status', {'status': 'approved'}, format='json')

        assert response.json() == {'matchedCount': 1, 'modifiedCount': 1}
        order.refresh_from_db()
        assert order.status == OrderStatus.APPROVED
        assert order.approved_at is not None

    def test_status_must_be_approved_or_rejected(self, manager_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        response = manager_client.patch(f'/api/orders/{order.id}/status', {'status': 'cancelled'}, format='json')

        assert response.status_code == 400

    def test_buyer_cannot_approve(self, buyer_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        response = buyer_client.patch(f'/api/orders/{order.id}/status', {'status': 'approved'}, format='json')

        assert response.status_code == 403

    def test_add_tracking(self, manager_client, buyer_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        manager_client.post(f'/api/orders/{order.id}/tracking', {
            'status': 'Cutting Completed',
            'location': 'Factory A',
        }, format='json')
        manager_client.post(f'/api/orders/{order.id}/tracking', {'status': 'Packed'}, format='json')

        tracking = buyer_client.get(f'/api/orders/{order.id}').json()['tracking']

        assert [event['status'] for event in tracking] == ['Cutting Completed', 'Packed']
        assert tracking[0]['location'] == 'Factory A'
        assert all('timestamp' in event for event in tracking)

    def test_empty_tracking_records_timestamp_only(self, manager_client, buyer_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        response = manager_client.post(f'/api/orders/{order.id}/tracking', {}, format='json')

        assert response.status_code == 200
        tracking = buyer_client.get(f'/api/orders/{order.id}').json()['tracking']
        assert len(tracking) == 1
        assert list(tracking[0]) == ['timestamp']

    def test_tracking_must_be_an_object(self, manager_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        response = manager_client.post(f'/api/orders/{order.id}/tracking', ['Packed'], format='json')

        assert response.status_code == 400
        assert not order.tracking.exists()


class TestReads:

    def test_buyer_sees_own_orders_newest_first(self, buyer_client, buyer_user, make_user, product, place_order):
        first = place_order(buyer_user.email, product, quantity=1)
        second = place_order(buyer_user.email, product, quantity=2)
        other = make_user('other@garments.test')
        place_order(other.email, product, quantity=1)

        response = buyer_client.get('/api/buyer/orders')

        assert [order['id'] for order in response.json()] == [second.id, first.id]

    def test_admin_filters_by_status_and_search(self, admin_client, buyer_user, make_user, product, place_order):
        kept = place_order(buyer_user.email, product)
        cancelled = place_order(buyer_user.email, product)
        Order.objects.filter(pk=cancelled.pk).update(status=OrderStatus.CANCELLED)
        other = make_user('rahim@garments.test')
        place_order(other.email, product)

        response = admin_client.get('/api/orders', {'status': 'pending', 'search': 'BUYER@'})

        assert [order['id'] for order in response.json()] == [kept.id]

    def test_admin_list_requires_admin(self, manager_client):
        assert manager_client.get('/api/orders').status_code == 403

    def test_manager_queues(self, manager_client, buyer_user, product, place_order):
        pending = place_order(buyer_user.email, product)
        approved = place_order(buyer_user.email, product)
        manager_client.patch(f'/api/orders/{approved.id}/status', {'status': 'approved'}, format='json')

        pending_ids = [o['id'] for o in manager_client.get('/api/manager/orders/pending').json()]
        approved_ids = [o['id'] for o in manager_client.get('/api/manager/orders/approved').json()]

        assert pending_ids == [pending.id]
        assert approved_ids == [approved.id]

    def test_any_authenticated_user_can_fetch_order(self, make_user, client_for, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)
        stranger = make_user('stranger@garments.test')

        response = client_for(stranger.email).get(f'/api/orders/{order.id}')

        assert response.status_code == 200
        assert response.json()['buyerEmail'] == buyer_user.email

    def test_fetch_missing_order(self, buyer_client):
        response = buyer_client.get('/api/orders/424242')

        assert response.status_code == 404
        assert response.json() == {'message': 'Order not found'}

    def test_fetch_requires_token(self, api_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        assert api_client.get(f'/api/orders/{order.id}').status_code == 401

    def test_deleted_product_keeps_order(self, manager_client, buyer_client, buyer_user, product, place_order):
        order = place_order(buyer_user.email, product)

        manager_client.delete(f'/api/products/{product.id}')
        body = buyer_client.get(f'/api/orders/{order.id}').json()

        assert body['productId'] is None
        assert body['productName'] == 'Shirt'


def test_end_to_end_scenario(manager_client, buyer_client, buyer_user):
    created = manager_client.post('/api/products', {
        'name': 'Shirt',
        'category': 'Tops',
        'availableQuantity': 10,
    }, format='json')
    assert created.status_code == 200
    product_id = created.json()['insertedId']

    ordered = buyer_client.post('/api/orders', {'productId': product_id, 'quantity': 3}, format='json')
    order_id = ordered.json()['insertedId']

    order = buyer_client.get(f'/api/orders/{order_id}').json()
    assert order['status'] == 'pending'
    assert order['buyerEmail'] == buyer_user.email
    assert Product.objects.get(pk=product_id).available_quantity == 7

    approved = manager_client.patch(f'/api/orders/{order_id}/status', {'status': 'approved'}, format='json')
    assert approved.status_code == 200

    order = buyer_client.get(f'/api/orders/{order_id}').json()
    assert order['status'] == 'approved'
    assert order['approvedAt'] is not None

    cancelled = buyer_client.patch(f'/api/orders/{order_id}/cancel')
    assert cancelled.status_code == 400
    assert Product.objects.get(pk=product_id).available_quantity == 7
