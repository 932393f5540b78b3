import django.core.validators
from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Account',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('identity_id', models.CharField(editable=False, help_text='User id issued by the identity provider', max_length=255, unique=True)),
                ('email', models.EmailField(help_text="Account's contact email address", max_length=254, unique=True, validators=[django.core.validators.EmailValidator()])),
                ('avatar_url', models.URLField(blank=True, default='', help_text='Profile picture URL from the identity provider', max_length=1024)),
                ('loyalty_balance', models.PositiveIntegerField(default=0, help_text='Loyalty coins earned from placed orders', validators=[django.core.validators.MinValueValidator(0)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Account',
                'verbose_name_plural': 'Accounts',
                'db_table': 'accounts_account',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['email'], name='accounts_ac_email_0b5d8e_idx'),
                    models.Index(fields=['identity_id'], name='accounts_ac_identit_6c1f2a_idx'),
                ],
            },
        ),
    ]
