# orders/views.py
"""
Views для заказов.

API ENDPOINTS:
- POST /api/orders - создать заказ (покупатель/админ)
- GET /api/orders?status=&search= - все заказы (админ)
- GET /api/orders/{id} - заказ по id (любой авторизованный)
- PATCH /api/orders/{id}/status - одобрить/отклонить (менеджер/админ)
- POST /api/orders/{id}/tracking - событие трекинга (менеджер/админ)
- PATCH /api/orders/{id}/cancel - отмена своим покупателем
- GET /api/buyer/orders - мои заказы (покупатель/админ)
- GET /api/manager/orders/pending - очередь на рассмотрение (менеджер/админ)
- GET /api/manager/orders/approved - одобренные (менеджер/админ)
"""

from django.db.models import QuerySet
from rest_framework import generics, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from users.authentication import get_request_email
from users.permissions import IsAdmin, IsBuyerOrAdmin, IsManagerOrAdmin

from .filters import OrderFilter
from .models import Order
from .serializers import (
    OrderCreateSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
    TrackingEventCreateSerializer,
)
from .services import OrderData, OrderWorkflowService
from .throttles import OrderCreationThrottle


class OrderViewSet(viewsets.GenericViewSet):
    """
    Заказы.

    Покупатель создаёт и отменяет, менеджер рассматривает и ведёт трекинг,
    админ видит все заказы.
    """

    queryset = Order.objects.with_tracking()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    lookup_value_regex = r'\d+'

    failure_messages = {
        'list': 'Error fetching orders',
        'create': 'Error creating order',
        'retrieve': 'Error fetching order',
        'set_status': 'Error updating order status',
        'tracking': 'Error adding tracking',
        'cancel': 'Error cancelling order',
    }

    def get_permissions(self):
        if self.action == 'list':
            return [IsAuthenticated(), IsAdmin()]
        if self.action in ('create', 'cancel'):
            return [IsAuthenticated(), IsBuyerOrAdmin()]
        if self.action in ('set_status', 'tracking'):
            return [IsAuthenticated(), IsManagerOrAdmin()]
        return [IsAuthenticated()]

    def get_throttles(self):
        if self.action == 'create':
            return [OrderCreationThrottle()]
        return super().get_throttles()

    def list(self, request: Request) -> Response:
        """
        Все заказы, новые сверху.

        GET /api/orders?status=pending&search=buyer@
        """
        queryset = self.filter_queryset(self.get_queryset()).order_by('-created_at', '-id')
        return Response(OrderSerializer(queryset, many=True).data)

    def create(self, request: Request) -> Response:
        """
        Создать заказ.

        POST /api/orders
        Body: {"productId": 1, "quantity": 3, "deliveryAddress": "..."}
        """
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        validated = serializer.validated_data

        order = OrderWorkflowService.create_order(
            data=OrderData(
                product=validated['product'],
                quantity=validated['quantity'],
                unit_price=validated.get('unit_price'),
                order_price=validated.get('order_price'),
                extra={
                    key: validated[key]
                    for key in OrderCreateSerializer.EXTRA_FIELDS
                    if key in validated
                },
            ),
            buyer_email=get_request_email(request),
        )

        return Response({'acknowledged': True, 'insertedId': order.id})

    def retrieve(self, request: Request, pk=None) -> Response:
        order = OrderWorkflowService.get_order(pk)
        return Response(OrderSerializer(order).data)

    @action(detail=True, methods=['patch'], url_path='status')
    def set_status(self, request: Request, pk=None) -> Response:
        """
        PATCH /api/orders/{id}/status
        Body: {"status": "approved"}
        """
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        matched = OrderWorkflowService.update_status(pk, status=serializer.validated_data['status'])
        return Response({'matchedCount': matched, 'modifiedCount': matched})

    @action(detail=True, methods=['post'])
    def tracking(self, request: Request, pk=None) -> Response:
        """
        POST /api/orders/{id}/tracking
        Body: {"status": "Sewing Started", "location": "Line 3"}
        """
        serializer = TrackingEventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        OrderWorkflowService.add_tracking_event(pk, serializer.validated_data)
        return Response({'matchedCount': 1, 'modifiedCount': 1})

    @action(detail=True, methods=['patch'])
    def cancel(self, request: Request, pk=None) -> Response:
        """PATCH /api/orders/{id}/cancel"""
        matched = OrderWorkflowService.cancel_order(pk, buyer_email=get_request_email(request))
        return Response({'matchedCount': matched, 'modifiedCount': matched})


# =============================================================================
# СПИСКИ ПО РОЛЯМ
# =============================================================================

class BuyerOrderListView(generics.ListAPIView):
    """Заказы текущего покупателя, новые сверху."""

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated, IsBuyerOrAdmin]
    filter_backends = []
    failure_messages = {'get': 'Error fetching buyer orders'}

    def get_queryset(self) -> QuerySet[Order]:
        if getattr(self, 'swagger_fake_view', False):
            return Order.objects.none()
        return Order.objects.with_tracking().for_buyer(get_request_email(self.request))


class ManagerPendingOrderListView(generics.ListAPIView):
    """Очередь заказов на рассмотрение."""

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated, IsManagerOrAdmin]
    filter_backends = []
    failure_messages = {'get': 'Error fetching pending orders'}

    def get_queryset(self) -> QuerySet[Order]:
        return Order.objects.with_tracking().pending()


class ManagerApprovedOrderListView(generics.ListAPIView):
    """Одобренные заказы, последние одобренные сверху."""

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated, IsManagerOrAdmin]
    filter_backends = []
    failure_messages = {'get': 'Error fetching approved orders'}

    def get_queryset(self) -> QuerySet[Order]:
        return Order.objects.with_tracking().approved()
