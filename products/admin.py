# products/admin.py
"""Django Admin для products."""

from django.contrib import admin
from django.utils.html import format_html

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin для товаров."""

    list_display = [
        'name',
        'category',
        'price',
        'stock_display',
        'created_by',
        'show_on_home',
        'created_at'
    ]

    list_filter = ['category', 'show_on_home', 'created_at']

    search_fields = ['name', 'category', 'created_by']

    list_editable = ['show_on_home']

    # остаток двигают только заказы и их отмена
    readonly_fields = ['available_quantity', 'created_by', 'created_at', 'updated_at']

    fieldsets = [
        ('Основное', {
            'fields': ['name', 'category', 'description', 'images']
        }),
        ('Цена и оплата', {
            'fields': ['price', 'payment_method']
        }),
        ('Склад', {
            'fields': ['available_quantity', 'minimum_order_quantity']
        }),
        ('Главная страница', {
            'fields': ['show_on_home']
        }),
        ('Системное', {
            'fields': ['created_by', 'created_at', 'updated_at'],
            'classes': ['collapse']
        })
    ]

    def stock_display(self, obj):
        """Остаток, отрицательный подсвечивается."""
        color = 'green' if obj.available_quantity > 0 else 'red'
        return format_html(
            '<span style="color: {};">{}</span>',
            color,
            obj.available_quantity
        )

    stock_display.short_description = 'Доступно'
