import pytest
from django.db import DatabaseError


def test_banner(client):
    response = client.get('/')

    assert response.status_code == 200
    assert response.content.decode() == 'Garments Order & Production Tracker Server is Running!'


@pytest.mark.django_db
def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json() == {
        'status': 'OK',
        'message': 'Server is running',
        'checks': {'database': 'ok'},
    }


@pytest.mark.django_db
def test_health_reports_database_failure(client, monkeypatch):
    def broken_cursor(*args, **kwargs):
        raise DatabaseError('connection refused')

    monkeypatch.setattr('config.urls.connection.cursor', broken_cursor)

    response = client.get('/health')

    assert response.status_code == 503
    assert response.json()['status'] == 'ERROR'


def test_unknown_route_is_json_404(client, settings):
    settings.DEBUG = False

    response = client.get('/api/nope')

    assert response.status_code == 404
    assert response.json() == {'message': 'Not found'}


def _failing(*args, **kwargs):
    raise DatabaseError('disk I/O error')


@pytest.mark.django_db
def test_storage_failure_in_viewset_action(api_client, monkeypatch):
    from products.services import ProductService

    monkeypatch.setattr(ProductService, 'home_products', _failing)

    response = api_client.get('/api/products/home')

    assert response.status_code == 500
    assert response.json() == {'message': 'Error fetching home products', 'error': 'disk I/O error'}


def test_storage_failure_in_function_view(admin_client, monkeypatch):
    from analytics.services import AnalyticsService

    monkeypatch.setattr(AnalyticsService, 'get_summary', _failing)

    response = admin_client.get('/api/analytics')

    assert response.status_code == 500
    assert response.json() == {'message': 'Error fetching analytics', 'error': 'disk I/O error'}


def test_storage_failure_in_generic_view(admin_client, monkeypatch):
    from users.services import UserDirectoryService

    monkeypatch.setattr(UserDirectoryService, 'search', _failing)

    response = admin_client.get('/api/users')

    assert response.status_code == 500
    assert response.json() == {'message': 'Error fetching users', 'error': 'disk I/O error'}


def test_user_manager_is_serialized_into_migrations():
    from users.models import User

    assert User.objects.use_in_migrations is True
