# Generated manually for the whiskeys app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


def price_field():
    return models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[MinValueValidator(Decimal('0.00'))])


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Whiskey',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('type', models.CharField(choices=[('bourbon', 'Bourbon'), ('rye', 'Rye'), ('scotch', 'Scotch'), ('irish', 'Irish'), ('japanese', 'Japanese'), ('canadian', 'Canadian'), ('tennessee', 'Tennessee'), ('other', 'Other')], max_length=20)),
                ('distillery', models.CharField(db_index=True, max_length=200)),
                ('region', models.CharField(blank=True, max_length=100)),
                ('country', models.CharField(blank=True, max_length=100)),
                ('age', models.PositiveIntegerField(blank=True, null=True)),
                ('abv', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))])),
                ('proof', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('200'))])),
                ('size', models.CharField(blank=True, max_length=50)),
                ('quantity', models.PositiveIntegerField(default=1)),
                ('msrp', price_field()),
                ('secondary_price', price_field()),
                ('purchase_date', models.DateField(blank=True, null=True)),
                ('purchase_price', price_field()),
                ('purchase_location', models.CharField(blank=True, max_length=200)),
                ('bottle_code', models.CharField(blank=True, max_length=100)),
                ('current_market_value', price_field()),
                ('value_gain_loss', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('is_investment_bottle', models.BooleanField(default=False)),
                ('is_for_sale', models.BooleanField(default=False)),
                ('asking_price', price_field()),
                ('is_for_trade', models.BooleanField(default=False)),
                ('rating', models.DecimalField(blank=True, decimal_places=2, max_digits=4, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('10'))])),
                ('description', models.TextField(blank=True)),
                ('tasting_notes', models.TextField(blank=True)),
                ('nose_notes', models.TextField(blank=True)),
                ('palate_notes', models.TextField(blank=True)),
                ('finish_notes', models.TextField(blank=True)),
                ('color', models.CharField(blank=True, max_length=100)),
                ('food_pairings', models.TextField(blank=True)),
                ('times_tasted', models.PositiveIntegerField(default=0)),
                ('last_tasted_date', models.DateField(blank=True, null=True)),
                ('cask_type', models.CharField(blank=True, max_length=200)),
                ('cask_finish', models.CharField(blank=True, max_length=200)),
                ('barrel_number', models.CharField(blank=True, max_length=100)),
                ('bottle_number', models.CharField(blank=True, max_length=100)),
                ('vintage_year', models.CharField(blank=True, max_length=20)),
                ('bottled_date', models.CharField(blank=True, max_length=50)),
                ('mash_bill', models.CharField(blank=True, max_length=500)),
                ('awards', models.TextField(blank=True)),
                ('limited_edition', models.BooleanField(default=False)),
                ('chill_filtered', models.BooleanField(default=False)),
                ('natural_color', models.BooleanField(default=False)),
                ('status', models.CharField(blank=True, max_length=50)),
                ('is_opened', models.BooleanField(default=False)),
                ('date_opened', models.DateField(blank=True, null=True)),
                ('remaining_volume', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))])),
                ('storage_location', models.CharField(blank=True, max_length=200)),
                ('shared_with', models.TextField(blank=True)),
                ('private_notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='whiskeys', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'whiskeys',
                'ordering': ['-created_at', 'id'],
                'indexes': [
                    models.Index(fields=['created_by', 'type'], name='whiskeys_owner_type_idx'),
                    models.Index(fields=['created_by', 'distillery'], name='whiskeys_owner_dist_idx'),
                    models.Index(fields=['created_at'], name='whiskeys_created_at_idx'),
                ],
            },
        ),
    ]
