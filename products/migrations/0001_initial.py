import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Название')),
                ('category', models.CharField(db_index=True, max_length=100, verbose_name='Категория')),
                ('description', models.TextField(blank=True, verbose_name='Описание')),
                ('price', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(0)], verbose_name='Цена')),
                ('available_quantity', models.IntegerField(default=0, verbose_name='Доступно')),
                ('minimum_order_quantity', models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)], verbose_name='Минимальный заказ')),
                ('images', models.JSONField(blank=True, default=list, verbose_name='Изображения (URL)')),
                ('payment_method', models.CharField(blank=True, max_length=100, verbose_name='Способ оплаты')),
                ('created_by', models.EmailField(db_index=True, max_length=254, verbose_name='Создал (email)')),
                ('show_on_home', models.BooleanField(default=False, verbose_name='На главной')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата обновления')),
            ],
            options={
                'verbose_name': 'Товар',
                'verbose_name_plural': 'Товары',
                'db_table': 'products',
                'ordering': ['id'],
            },
        ),
    ]
