from django.urls import path

from .views import (
    IssueTokenView,
    LogoutView,
    UserListCreateView,
    UserDetailView,
)

app_name = 'users'

urlpatterns = [
    # Токен в куке
    path('auth/jwt', IssueTokenView.as_view(), name='token'),
    path('auth/logout', LogoutView.as_view(), name='logout'),

    # Пользователи
    path('users', UserListCreateView.as_view(), name='user-list'),
    # GET по email (свой профиль), PATCH по id (статус, админ)
    path('users/<str:lookup>', UserDetailView.as_view(), name='user-detail'),
]
