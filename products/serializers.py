# products/serializers.py
"""
Сериализаторы товаров.

Поля наружу в camelCase (availableQuantity, showOnHome, createdBy),
в модели snake_case.
"""

from django.conf import settings
from rest_framework import serializers

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Товар: чтение, создание и обновление.

    id, createdBy, createdAt, updatedAt ставит сервер.
    """

    availableQuantity = serializers.IntegerField(
        source='available_quantity',
        min_value=-settings.MAX_INTEGER_VALUE,
        max_value=settings.MAX_INTEGER_VALUE,
        required=False,
        default=0
    )
    minimumOrderQuantity = serializers.IntegerField(
        source='minimum_order_quantity',
        min_value=1,
        max_value=settings.MAX_INTEGER_VALUE,
        required=False,
        default=1
    )
    images = serializers.ListField(
        child=serializers.URLField(max_length=500),
        required=False,
        default=list
    )
    paymentMethod = serializers.CharField(
        source='payment_method',
        max_length=100,
        required=False,
        allow_blank=True,
        default=''
    )
    showOnHome = serializers.BooleanField(source='show_on_home', required=False, default=False)
    createdBy = serializers.EmailField(source='created_by', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'category',
            'description',
            'price',
            'availableQuantity',
            'minimumOrderQuantity',
            'images',
            'paymentMethod',
            'showOnHome',
            'createdBy',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id']
        extra_kwargs = {
            'description': {'required': False, 'allow_blank': True},
            'price': {'required': False, 'allow_null': True},
        }


class ProductListQuerySerializer(serializers.Serializer):
    """Query параметры публичного списка (search и category в ProductFilter)."""

    limit = serializers.IntegerField(min_value=0, required=False)
