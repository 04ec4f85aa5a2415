# analytics/urls.py
"""URL маршруты для analytics."""

from django.urls import path

from . import views

app_name = 'analytics'

urlpatterns = [
    path('', views.get_analytics, name='summary'),
]
