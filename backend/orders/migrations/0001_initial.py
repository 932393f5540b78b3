from decimal import Decimal
import django.core.validators
from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('owner_identity_id', models.CharField(db_index=True, help_text='Identity provider user id of the customer who placed the order', max_length=255)),
                ('owner_email', models.EmailField(help_text='Customer email at the time the order was placed', max_length=254)),
                ('line_items', models.JSONField(default=list, help_text='Items exactly as submitted at checkout')),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('fulfillment_mode', models.CharField(choices=[('delivery', 'Delivery'), ('takeaway', 'Store Pickup')], max_length=20)),
                ('payment_mode', models.CharField(choices=[('online', 'Online'), ('cod', 'Cash on Delivery')], max_length=20)),
                ('delivery_address', models.TextField(help_text="Delivery address, or 'Store Pickup' for takeaway orders")),
                ('contact_phone', models.CharField(max_length=32)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('preparing', 'Preparing'), ('ready', 'Ready'), ('delivered', 'Delivered'), ('cancelled', 'Cancelled')], db_index=True, default='pending', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'orders_order',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['owner_identity_id', '-created_at'], name='orders_owner_created_idx'),
                    models.Index(fields=['-created_at'], name='orders_created_idx'),
                ],
            },
        ),
    ]
