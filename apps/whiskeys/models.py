from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from decimal import Decimal
import uuid


class WhiskeyType(models.TextChoices):
    BOURBON = 'bourbon', 'Bourbon'
    RYE = 'rye', 'Rye'
    SCOTCH = 'scotch', 'Scotch'
    IRISH = 'irish', 'Irish'
    JAPANESE = 'japanese', 'Japanese'
    CANADIAN = 'canadian', 'Canadian'
    TENNESSEE = 'tennessee', 'Tennessee'
    OTHER = 'other', 'Other'


def _price_field():
    return models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
    )


class Whiskey(models.Model):
    """A bottle (or set of identical bottles) in one user's collection."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Identity
    name = models.CharField(max_length=200, db_index=True)
    type = models.CharField(max_length=20, choices=WhiskeyType.choices)
    distillery = models.CharField(max_length=200, db_index=True)
    region = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)

    # Physical
    age = models.PositiveIntegerField(null=True, blank=True)
    abv = models.DecimalField(
        max_digits=5, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
    )
    proof = models.DecimalField(
        max_digits=5, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('200'))],
    )
    size = models.CharField(max_length=50, blank=True)
    quantity = models.PositiveIntegerField(default=1)

    # Commercial
    msrp = _price_field()
    secondary_price = _price_field()
    purchase_date = models.DateField(null=True, blank=True)
    purchase_price = _price_field()
    purchase_location = models.CharField(max_length=200, blank=True)
    bottle_code = models.CharField(max_length=100, blank=True)
    current_market_value = _price_field()
    value_gain_loss = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    is_investment_bottle = models.BooleanField(default=False)
    is_for_sale = models.BooleanField(default=False)
    asking_price = _price_field()
    is_for_trade = models.BooleanField(default=False)

    # Tasting
    rating = models.DecimalField(
        max_digits=4, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('10'))],
    )
    description = models.TextField(blank=True)
    tasting_notes = models.TextField(blank=True)
    nose_notes = models.TextField(blank=True)
    palate_notes = models.TextField(blank=True)
    finish_notes = models.TextField(blank=True)
    color = models.CharField(max_length=100, blank=True)
    food_pairings = models.TextField(blank=True)
    times_tasted = models.PositiveIntegerField(default=0)
    last_tasted_date = models.DateField(null=True, blank=True)

    # Provenance
    cask_type = models.CharField(max_length=200, blank=True)
    cask_finish = models.CharField(max_length=200, blank=True)
    barrel_number = models.CharField(max_length=100, blank=True)
    bottle_number = models.CharField(max_length=100, blank=True)
    vintage_year = models.CharField(max_length=20, blank=True)
    bottled_date = models.CharField(max_length=50, blank=True)
    mash_bill = models.CharField(max_length=500, blank=True)
    awards = models.TextField(blank=True)
    limited_edition = models.BooleanField(default=False)
    chill_filtered = models.BooleanField(default=False)
    natural_color = models.BooleanField(default=False)

    # Lifecycle
    status = models.CharField(max_length=50, blank=True)
    is_opened = models.BooleanField(default=False)
    date_opened = models.DateField(null=True, blank=True)
    remaining_volume = models.DecimalField(
        max_digits=5, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
    )
    storage_location = models.CharField(max_length=200, blank=True)

    # Sharing
    shared_with = models.TextField(blank=True)
    private_notes = models.TextField(blank=True)

    # Ownership
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='whiskeys',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'whiskeys'
        indexes = [
            models.Index(fields=['created_by', 'type'], name='whiskeys_owner_type_idx'),
            models.Index(fields=['created_by', 'distillery'], name='whiskeys_owner_dist_idx'),
            models.Index(fields=['created_at'], name='whiskeys_created_at_idx'),
        ]
        ordering = ['-created_at', 'id']

    def __str__(self):
        return f"{self.distillery} - {self.name}"
