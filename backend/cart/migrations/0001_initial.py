from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CartLine',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_code', models.BigIntegerField(help_text='Barcode of the product added to the cart')),
                ('added_at', models.DateTimeField(auto_now_add=True)),
                ('account', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='cart_lines', to='accounts.account')),
            ],
            options={
                'db_table': 'cart_line',
                'ordering': ['added_at', 'id'],
                'constraints': [
                    models.UniqueConstraint(fields=('account', 'product_code'), name='unique_product_code_per_cart'),
                ],
            },
        ),
    ]
