import pytest

from products.models import Product


pytestmark = pytest.mark.django_db


class TestCreate:

    def test_manager_creates_product(self, manager_client, manager_user):
        response = manager_client.post('/api/products', {
            'name': 'Shirt',
            'category': 'Tops',
            'availableQuantity': 10,
            'createdBy': 'someone-else@garments.test',
        }, format='json')

        assert response.status_code == 200
        body = response.json()
        assert body['acknowledged'] is True

        product = Product.objects.get(pk=body['insertedId'])
        assert product.created_by == manager_user.email
        assert product.available_quantity == 10
        assert product.show_on_home is False
        assert product.created_at is not None

    def test_supplementary_fields(self, manager_client):
        response = manager_client.post('/api/products', {
            'name': 'Denim Jacket',
            'category': 'Outerwear',
            'description': 'Stone washed',
            'price': '49.90',
            'availableQuantity': 100,
            'minimumOrderQuantity': 20,
            'images': ['https://cdn.example.com/jacket.jpg'],
            'paymentMethod': 'Cash on Delivery',
            'showOnHome': True,
        }, format='json')

        product = Product.objects.get(pk=response.json()['insertedId'])
        assert str(product.price) == '49.90'
        assert product.minimum_order_quantity == 20
        assert product.images == ['https://cdn.example.com/jacket.jpg']
        assert product.show_on_home is True

    @pytest.mark.parametrize('field', ['availableQuantity', 'minimumOrderQuantity'])
    def test_oversized_integers_are_rejected(self, manager_client, field):
        response = manager_client.post('/api/products', {
            'name': 'Shirt',
            'category': 'Tops',
            field: 10 ** 20,
        }, format='json')

        assert response.status_code == 400
        assert field in response.json()['error']
        assert not Product.objects.exists()

    def test_missing_name_is_rejected(self, manager_client):
        response = manager_client.post('/api/products', {'category': 'Tops'}, format='json')

        assert response.status_code == 400
        assert 'name' in response.json()['error']

    def test_buyer_cannot_create(self, buyer_client):
        response = buyer_client.post('/api/products', {'name': 'X', 'category': 'Y'}, format='json')

        assert response.status_code == 403

    def test_anonymous_cannot_create(self, api_client):
        response = api_client.post('/api/products', {'name': 'X', 'category': 'Y'}, format='json')

        assert response.status_code == 401


class TestPublicReads:

    def test_search_is_case_insensitive_over_name_and_category(self, api_client, make_product):
        make_product(name='Polo Shirt', category='Tops')
        make_product(name='Chino', category='Bottoms')
        make_product(name='Tank', category='Tops')

        response = api_client.get('/api/products', {'search': 'TOP'})

        assert response.status_code == 200
        assert {p['name'] for p in response.json()} == {'Polo Shirt', 'Tank'}

    def test_search_and_category_compose(self, api_client, make_product):
        make_product(name='Shirt', category='Tops')
        make_product(name='Shirt Dress', category='Dresses')

        response = api_client.get('/api/products', {'search': 'shirt', 'category': 'Dresses'})

        assert [p['name'] for p in response.json()] == ['Shirt Dress']

    def test_limit_caps_results(self, api_client, make_product):
        for index in range(5):
            make_product(name=f'Item {index}')

        assert len(api_client.get('/api/products', {'limit': 2}).json()) == 2
        assert len(api_client.get('/api/products', {'limit': 0}).json()) == 5

    def test_negative_limit_is_rejected(self, api_client):
        response = api_client.get('/api/products', {'limit': -1})

        assert response.status_code == 400

    def test_home_is_capped_at_six(self, api_client, make_product):
        for index in range(8):
            make_product(name=f'Featured {index}', show_on_home=True)
        make_product(name='Hidden', show_on_home=False)

        products = api_client.get('/api/products/home').json()

        assert len(products) == 6
        assert all(p['showOnHome'] for p in products)

    def test_fetch_by_id(self, api_client, make_product):
        product = make_product(name='Hoodie', category='Outerwear')

        response = api_client.get(f'/api/products/{product.id}')

        assert response.status_code == 200
        assert response.json()['name'] == 'Hoodie'
        assert response.json()['availableQuantity'] == 10

    def test_fetch_missing(self, api_client):
        response = api_client.get('/api/products/424242')

        assert response.status_code == 404
        assert response.json() == {'message': 'Product not found'}


class TestUpdateToggleDelete:

    def test_update_changes_only_given_fields(self, manager_client, make_product):
        product = make_product(name='Shirt', category='Tops', available_quantity=10)

        response = manager_client.put(f'/api/products/{product.id}', {'name': 'Oxford Shirt'}, format='json')

        assert response.json() == {'matchedCount': 1, 'modifiedCount': 1}
        product.refresh_from_db()
        assert product.name == 'Oxford Shirt'
        assert product.category == 'Tops'
        assert product.available_quantity == 10
        assert product.updated_at is not None

    def test_update_does_not_check_owner(self, make_user, client_for, make_product):
        other = make_user('other-manager@garments.test', role='manager')
        product = make_product()

        response = client_for(other.email).put(f'/api/products/{product.id}', {'category': 'Shirts'}, format='json')

        assert response.json()['matchedCount'] == 1

    def test_toggle_twice_restores_flag(self, admin_client, make_product):
        product = make_product(show_on_home=False)

        admin_client.patch(f'/api/products/{product.id}/toggle-home')
        product.refresh_from_db()
        assert product.show_on_home is True

        admin_client.patch(f'/api/products/{product.id}/toggle-home')
        product.refresh_from_db()
        assert product.show_on_home is False

    def test_toggle_missing_is_noop(self, admin_client):
        response = admin_client.patch('/api/products/424242/toggle-home')

        assert response.status_code == 200
        assert response.json() == {'matchedCount': 0, 'modifiedCount': 0}

    def test_toggle_requires_admin(self, manager_client, make_product):
        product = make_product()

        assert manager_client.patch(f'/api/products/{product.id}/toggle-home').status_code == 403

    def test_delete_is_idempotent(self, manager_client, make_product):
        product = make_product()

        first = manager_client.delete(f'/api/products/{product.id}')
        second = manager_client.delete(f'/api/products/{product.id}')

        assert first.json() == {'deletedCount': 1}
        assert second.json() == {'deletedCount': 0}
        assert not Product.objects.filter(pk=product.id).exists()


class TestManagerProducts:

    def test_lists_only_own_products(self, manager_client, make_user, make_product):
        other = make_user('other-manager@garments.test', role='manager')
        make_product(name='Mine')
        make_product(name='Theirs', created_by=other.email)

        response = manager_client.get('/api/manager/products')

        assert [p['name'] for p in response.json()] == ['Mine']

    def test_search_applies(self, manager_client, make_product):
        make_product(name='Polo', category='Tops')
        make_product(name='Chino', category='Bottoms')

        response = manager_client.get('/api/manager/products', {'search': 'bottom'})

        assert [p['name'] for p in response.json()] == ['Chino']

    def test_buyer_is_forbidden(self, buyer_client):
        assert buyer_client.get('/api/manager/products').status_code == 403
