# products/models.py
"""
Модели каталога товаров.

Товар принадлежит менеджеру, который его создал (created_by = email).
available_quantity меняется только жизненным циклом заказа:
создание заказа уменьшает, отмена возвращает.
"""

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q


class ProductQuerySet(models.QuerySet):

    def search(self, term):
        """Подстрока без учёта регистра в названии или категории."""
        if not term:
            return self
        return self.filter(Q(name__icontains=term) | Q(category__icontains=term))

    def owned_by(self, email):
        return self.filter(created_by=email)

    def featured(self):
        return self.filter(show_on_home=True)


class Product(models.Model):
    """Товар (модель одежды) с остатком для заказа."""

    name = models.CharField(max_length=200, verbose_name='Название')
    category = models.CharField(max_length=100, db_index=True, verbose_name='Категория')
    description = models.TextField(blank=True, verbose_name='Описание')

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        verbose_name='Цена'
    )

    # Может уйти в минус: заказ не проверяет остаток
    available_quantity = models.IntegerField(default=0, verbose_name='Доступно')

    minimum_order_quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        verbose_name='Минимальный заказ'
    )

    images = models.JSONField(default=list, blank=True, verbose_name='Изображения (URL)')
    payment_method = models.CharField(max_length=100, blank=True, verbose_name='Способ оплаты')

    created_by = models.EmailField(db_index=True, verbose_name='Создал (email)')
    show_on_home = models.BooleanField(default=False, verbose_name='На главной')

    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')
    updated_at = models.DateTimeField(null=True, blank=True, verbose_name='Дата обновления')

    objects = ProductQuerySet.as_manager()

    class Meta:
        db_table = 'products'
        ordering = ['id']
        verbose_name = 'Товар'
        verbose_name_plural = 'Товары'

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
