"""
URL configuration для Garments Order & Production Tracker.
"""
import logging

from django.contrib import admin
from django.db import DatabaseError, connection
from django.http import HttpResponse, JsonResponse
from django.urls import path, include
from django.views.decorators.http import require_http_methods
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
def health_check(request):
    """Health check endpoint для мониторинга и load balancer"""
    health_status = {
        'status': 'OK',
        'message': 'Server is running',
        'checks': {}
    }

    # Проверка базы данных
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        health_status['checks']['database'] = 'ok'
    except DatabaseError as e:
        logger.error(f"Health check: база данных недоступна: {e}")
        health_status['checks']['database'] = f'error: {str(e)}'
        health_status['status'] = 'ERROR'

    status_code = 200 if health_status['status'] == 'OK' else 503
    return JsonResponse(health_status, status=status_code)


@require_http_methods(["GET"])
def banner(request):
    return HttpResponse(
        'Garments Order & Production Tracker Server is Running!',
        content_type='text/plain; charset=utf-8'
    )


def not_found(request, exception=None):
    """404 вне DRF в том же формате {message}."""
    return JsonResponse({'message': 'Not found'}, status=404)


urlpatterns = [
    # Health check (для мониторинга)
    path('health', health_check, name='health-check'),

    # Административная панель
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # Основные API маршруты
    path('api/', include('users.urls')),
    path('api/', include('products.urls')),
    path('api/', include('orders.urls')),
    path('api/analytics', include('analytics.urls')),

    path('', banner, name='banner'),
]

handler404 = not_found

# Настройка Admin панели
admin.site.site_header = 'Garments Tracker - Администрирование'
admin.site.site_title = 'Garments Tracker'
admin.site.index_title = 'Панель управления'
