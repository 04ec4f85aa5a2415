# analytics/views.py
"""
Views для analytics.

API ENDPOINTS:
- GET /api/analytics?period=30 - сводка для админа
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from users.permissions import IsAdmin

from .serializers import AnalyticsQuerySerializer, AnalyticsSummarySerializer
from .services import AnalyticsService


@extend_schema(
    parameters=[OpenApiParameter('period', int, description='Окно в днях (по умолчанию 30)')],
    responses=AnalyticsSummarySerializer,
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdmin])
def get_analytics(request: Request) -> Response:
    """
    Сводка за период.

    GET /api/analytics?period=7

    Ответ:
    {
        "totalProducts": 42,
        "totalOrders": 17,
        "totalUsers": 120,
        "activeManagers": 5,
        "recentOrders": 17,
        "productsByCategory": [{"category": "Tops", "count": 12}, ...],
        "period": 7
    }
    """
    serializer = AnalyticsQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)

    summary = AnalyticsService.get_summary(serializer.validated_data['period'])
    return Response(summary.to_dict())


get_analytics.cls.failure_messages = {'get': 'Error fetching analytics'}
