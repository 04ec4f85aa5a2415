# products/views.py
"""
Views для каталога товаров.

API ENDPOINTS:
- GET /api/products?search=&category=&limit= - каталог (публично)
- GET /api/products/home - товары для главной (публично)
- GET /api/products/{id} - детали товара (публично)
- POST /api/products - создать (менеджер/админ)
- PUT /api/products/{id} - обновить (менеджер/админ)
- DELETE /api/products/{id} - удалить (менеджер/админ)
- PATCH /api/products/{id}/toggle-home - показать/скрыть на главной (админ)
- GET /api/manager/products?search= - мои товары (менеджер/админ)
"""

from django.db.models import QuerySet
from rest_framework import generics, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from config.exceptions import NotFoundError
from users.authentication import get_request_email
from users.permissions import IsAdmin, IsManagerOrAdmin

from .filters import ManagerProductFilter, ProductFilter
from .models import Product
from .serializers import ProductListQuerySerializer, ProductSerializer
from .services import ProductService


class ProductViewSet(viewsets.GenericViewSet):
    """
    Товары.

    - Все: чтение каталога без токена
    - Менеджер/админ: создание, обновление, удаление
    - Админ: флаг "на главной"
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    filterset_class = ProductFilter
    lookup_value_regex = r'\d+'

    PUBLIC_ACTIONS = ('list', 'retrieve', 'home')

    failure_messages = {
        'list': 'Error fetching products',
        'home': 'Error fetching home products',
        'retrieve': 'Error fetching product',
        'create': 'Error adding product',
        'update': 'Error updating product',
        'toggle_home': 'Error toggling product',
        'destroy': 'Error deleting product',
    }

    def _requested_action(self):
        method = self.request.method.lower()
        return getattr(self, 'action_map', {}).get(method)

    def get_authenticators(self):
        # Публичные маршруты не читают куку: просроченный токен им не мешает
        if self.request is not None and self._requested_action() in self.PUBLIC_ACTIONS:
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.action in self.PUBLIC_ACTIONS:
            return [AllowAny()]
        if self.action == 'toggle_home':
            return [IsAuthenticated(), IsAdmin()]
        return [IsAuthenticated(), IsManagerOrAdmin()]

    def list(self, request: Request) -> Response:
        """
        Каталог.

        GET /api/products
        GET /api/products?search=shirt&category=Tops&limit=10
        """
        params = ProductListQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        queryset = self.filter_queryset(self.get_queryset())
        queryset = ProductService.limit(queryset, params.validated_data.get('limit'))

        return Response(ProductSerializer(queryset, many=True).data)

    @action(detail=False, methods=['get'])
    def home(self, request: Request) -> Response:
        """Товары с showOnHome=true, максимум 6."""
        products = ProductService.home_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk=None) -> Response:
        product = Product.objects.filter(pk=pk).first()
        if product is None:
            raise NotFoundError('Product not found')
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        """
        Создать товар.

        POST /api/products
        Body: {"name": "Shirt", "category": "Tops", "availableQuantity": 10}
        """
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = ProductService.create_product(
            data=dict(serializer.validated_data),
            created_by=get_request_email(request)
        )

        return Response({'acknowledged': True, 'insertedId': product.id})

    def update(self, request: Request, pk=None) -> Response:
        """
        Обновить переданные поля.

        PUT /api/products/{id}
        """
        serializer = ProductSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        matched = ProductService.update_product(pk, dict(serializer.validated_data))
        return Response({'matchedCount': matched, 'modifiedCount': matched})

    def destroy(self, request: Request, pk=None) -> Response:
        deleted = ProductService.delete_product(pk)
        return Response({'deletedCount': deleted})

    @action(detail=True, methods=['patch'], url_path='toggle-home')
    def toggle_home(self, request: Request, pk=None) -> Response:
        """PATCH /api/products/{id}/toggle-home"""
        matched = ProductService.toggle_home(pk)
        return Response({'matchedCount': matched, 'modifiedCount': matched})


class ManagerProductListView(generics.ListAPIView):
    """
    Товары, созданные текущим менеджером.

    GET /api/manager/products?search=...
    """

    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated, IsManagerOrAdmin]
    filterset_class = ManagerProductFilter
    failure_messages = {'get': 'Error fetching manager products'}

    def get_queryset(self) -> QuerySet[Product]:
        if getattr(self, 'swagger_fake_view', False):
            return Product.objects.none()
        return Product.objects.owned_by(get_request_email(self.request))
