# products/services.py
"""
Сервисы каталога товаров.

Изменения отдаются как результат операции над хранилищем:
insertedId / matchedCount / deletedCount.
"""

import logging
from typing import Any, Dict, Optional

from django.conf import settings
from django.db.models import QuerySet
from django.utils import timezone

from .models import Product

logger = logging.getLogger(__name__)


class ProductService:
    """Сервис товаров."""

    @classmethod
    def limit(cls, queryset: QuerySet, limit: Optional[int]) -> QuerySet:
        """Ограничение выдачи; 0 или None: без ограничения."""
        if limit:
            return queryset[:limit]
        return queryset

    @classmethod
    def home_products(cls) -> QuerySet:
        """Товары для главной страницы, не больше HOME_PRODUCTS_LIMIT."""
        return Product.objects.featured()[:settings.HOME_PRODUCTS_LIMIT]

    @classmethod
    def create_product(cls, *, data: Dict[str, Any], created_by: str) -> Product:
        """
        Создать товар.

        Args:
            data: Проверенные поля товара
            created_by: Email менеджера (владелец)
        """
        data.setdefault('show_on_home', False)
        product = Product.objects.create(created_by=created_by, **data)

        logger.info(f"Товар #{product.id} '{product.name}' создан пользователем {created_by}")
        return product

    @classmethod
    def update_product(cls, product_id, data: Dict[str, Any]) -> int:
        """
        Обновить переданные поля товара.

        Владелец не проверяется: достаточно роли менеджера.

        Returns:
            Количество найденных записей
        """
        data.pop('id', None)
        return Product.objects.filter(pk=product_id).update(
            **data,
            updated_at=timezone.now()
        )

    @classmethod
    def toggle_home(cls, product_id) -> int:
        """
        Переключить show_on_home.

        Нет товара: ничего не меняем, matchedCount = 0.
        """
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            return 0

        return Product.objects.filter(pk=product_id).update(
            show_on_home=not product.show_on_home,
            updated_at=timezone.now()
        )

    @classmethod
    def delete_product(cls, product_id) -> int:
        """Удаление идемпотентно: повторный вызов вернёт 0."""
        deleted, _ = Product.objects.filter(pk=product_id).delete()

        if deleted:
            logger.info(f"Товар #{product_id} удалён")
        return deleted
