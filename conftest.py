# conftest.py
"""Общие фикстуры для тестов API."""

import pytest
from django.conf import settings
from django.core.cache import cache
from rest_framework.test import APIClient

from products.models import Product
from users.models import User, UserRole, UserStatus
from users.services import TokenService


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    """Счётчики throttling живут в кэше, сбрасываем между тестами."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make_user(email, role=UserRole.BUYER, status=UserStatus.APPROVED, **extra):
        extra.setdefault('name', email.split('@')[0].title())
        return User.objects.create_user(email=email, role=role, status=status, **extra)
    return _make_user


@pytest.fixture
def client_for():
    """APIClient с токеном в куке для указанного email."""
    def _client_for(email):
        client = APIClient()
        client.cookies[settings.AUTH_COOKIE_NAME] = TokenService.issue_token(email)
        return client
    return _client_for


@pytest.fixture
def admin_user(make_user):
    return make_user('admin@garments.test', role=UserRole.ADMIN)


@pytest.fixture
def manager_user(make_user):
    return make_user('manager@garments.test', role=UserRole.MANAGER)


@pytest.fixture
def buyer_user(make_user):
    return make_user('buyer@garments.test', role=UserRole.BUYER)


@pytest.fixture
def admin_client(admin_user, client_for):
    return client_for(admin_user.email)


@pytest.fixture
def manager_client(manager_user, client_for):
    return client_for(manager_user.email)


@pytest.fixture
def buyer_client(buyer_user, client_for):
    return client_for(buyer_user.email)


@pytest.fixture
def make_product(db, manager_user):
    def _make_product(**fields):
        fields.setdefault('name', 'Shirt')
        fields.setdefault('category', 'Tops')
        fields.setdefault('available_quantity', 10)
        fields.setdefault('created_by', manager_user.email)
        return Product.objects.create(**fields)
    return _make_product
