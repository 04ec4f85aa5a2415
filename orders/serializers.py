# orders/serializers.py
"""
Сериализаторы для orders.

Наружу camelCase: productId, buyerEmail, approvedAt, tracking[...].
"""

from django.conf import settings
from rest_framework import serializers

from products.models import Product
from .models import Order, OrderStatus, OrderTrackingEvent


# =============================================================================
# TRACKING
# =============================================================================

class OrderTrackingEventSerializer(serializers.ModelSerializer):
    """Событие трекинга: поля от менеджера + timestamp сервера."""

    class Meta:
        model = OrderTrackingEvent
        fields = ['details', 'timestamp']

    def to_representation(self, instance):
        data = dict(instance.details or {})
        data['timestamp'] = serializers.DateTimeField().to_representation(instance.timestamp)
        return data


class TrackingEventCreateSerializer(serializers.Serializer):
    """
    Тело POST /api/orders/{id}/tracking.

    Любой JSON-объект, в том числе пустой, например:
    {"status": "Cutting Completed", "location": "Factory A", "note": "..."}
    """

    def to_internal_value(self, data):
        if not isinstance(data, dict):
            raise serializers.ValidationError({'non_field_errors': ['Tracking update must be a JSON object']})
        return dict(data)


# =============================================================================
# ORDER
# =============================================================================

class OrderSerializer(serializers.ModelSerializer):
    """Заказ со встроенным трекингом."""

    productId = serializers.IntegerField(source='product_id', read_only=True, allow_null=True)
    productName = serializers.CharField(source='product_name', read_only=True)
    unitPrice = serializers.DecimalField(source='unit_price', max_digits=12, decimal_places=2, read_only=True)
    orderPrice = serializers.DecimalField(source='order_price', max_digits=14, decimal_places=2, read_only=True)
    buyerEmail = serializers.EmailField(source='buyer_email', read_only=True)
    contactNumber = serializers.CharField(source='contact_number', read_only=True)
    deliveryAddress = serializers.CharField(source='delivery_address', read_only=True)
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    tracking = OrderTrackingEventSerializer(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    approvedAt = serializers.DateTimeField(source='approved_at', read_only=True)
    rejectedAt = serializers.DateTimeField(source='rejected_at', read_only=True)
    cancelledAt = serializers.DateTimeField(source='cancelled_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'productId',
            'productName',
            'quantity',
            'unitPrice',
            'orderPrice',
            'buyerEmail',
            'contactNumber',
            'deliveryAddress',
            'notes',
            'paymentMethod',
            'status',
            'tracking',
            'createdAt',
            'approvedAt',
            'rejectedAt',
            'cancelledAt',
            'updatedAt',
        ]
        read_only_fields = fields


class OrderCreateSerializer(serializers.Serializer):
    """
    Создание заказа покупателем.

    buyerEmail не принимается: берётся из токена.
    """

    productId = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        source='product'
    )
    quantity = serializers.IntegerField(min_value=1, max_value=settings.MAX_INTEGER_VALUE)
    unitPrice = serializers.DecimalField(
        source='unit_price', max_digits=12, decimal_places=2,
        min_value=0, required=False, allow_null=True
    )
    orderPrice = serializers.DecimalField(
        source='order_price', max_digits=14, decimal_places=2,
        min_value=0, required=False, allow_null=True
    )
    contactNumber = serializers.CharField(source='contact_number', max_length=30, required=False, allow_blank=True)
    deliveryAddress = serializers.CharField(source='delivery_address', required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)
    paymentMethod = serializers.CharField(source='payment_method', max_length=100, required=False, allow_blank=True)

    EXTRA_FIELDS = ('contact_number', 'delivery_address', 'notes', 'payment_method')


class OrderStatusUpdateSerializer(serializers.Serializer):
    """Менеджер: approved или rejected."""

    status = serializers.ChoiceField(choices=[OrderStatus.APPROVED, OrderStatus.REJECTED])

