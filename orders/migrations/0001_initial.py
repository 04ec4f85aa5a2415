import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_name', models.CharField(max_length=200, verbose_name='Название товара')),
                ('quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)], verbose_name='Количество')),
                ('unit_price', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, verbose_name='Цена за единицу')),
                ('order_price', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True, verbose_name='Сумма заказа')),
                ('buyer_email', models.EmailField(db_index=True, max_length=254, verbose_name='Покупатель (email)')),
                ('contact_number', models.CharField(blank=True, max_length=30, verbose_name='Телефон')),
                ('delivery_address', models.TextField(blank=True, verbose_name='Адрес доставки')),
                ('notes', models.TextField(blank=True, verbose_name='Комментарий')),
                ('payment_method', models.CharField(blank=True, max_length=100, verbose_name='Способ оплаты')),
                ('status', models.CharField(choices=[('pending', 'В ожидании'), ('approved', 'Одобрен'), ('rejected', 'Отклонён'), ('cancelled', 'Отменён')], db_index=True, default='pending', max_length=16, verbose_name='Статус')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('approved_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата одобрения')),
                ('rejected_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата отклонения')),
                ('cancelled_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата отмены')),
                ('updated_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата обновления')),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='orders', to='products.product', verbose_name='Товар')),
            ],
            options={
                'verbose_name': 'Заказ',
                'verbose_name_plural': 'Заказы',
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['buyer_email', '-created_at'], name='orders_buyer_e_4b1f0c_idx'),
                    models.Index(fields=['status', '-created_at'], name='orders_status_9d2e7a_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OrderTrackingEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('details', models.JSONField(default=dict, verbose_name='Данные события')),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Время')),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tracking', to='orders.order', verbose_name='Заказ')),
            ],
            options={
                'verbose_name': 'Событие трекинга',
                'verbose_name_plural': 'События трекинга',
                'db_table': 'order_tracking_events',
                'ordering': ['timestamp', 'id'],
            },
        ),
    ]
