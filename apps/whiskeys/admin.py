from django.contrib import admin
from apps.whiskeys.models import Whiskey


@admin.register(Whiskey)
class WhiskeyAdmin(admin.ModelAdmin):
    """Admin interface for whiskey records across all collections."""

    list_display = [
        'name',
        'distillery',
        'type',
        'get_owner',
        'quantity',
        'rating',
        'is_opened',
        'created_at'
    ]
    list_filter = [
        'type',
        'is_opened',
        'is_for_sale',
        'is_for_trade',
        'limited_edition',
        'country',
        'created_at'
    ]
    search_fields = [
        'name',
        'distillery',
        'region',
        'country',
        'created_by__username',
        'created_by__email'
    ]
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    raw_id_fields = ['created_by']

    fieldsets = (
        ('Identity', {
            'fields': ('name', 'type', 'distillery', 'region', 'country', 'created_by')
        }),
        ('Bottle', {
            'fields': ('age', 'abv', 'proof', 'size', 'quantity')
        }),
        ('Purchase & Value', {
            'fields': (
                'msrp',
                'secondary_price',
                'purchase_date',
                'purchase_price',
                'purchase_location',
                'bottle_code',
                'current_market_value',
                'value_gain_loss',
                'is_investment_bottle',
                'is_for_sale',
                'asking_price',
                'is_for_trade'
            ),
            'classes': ('collapse',)
        }),
        ('Tasting', {
            'fields': (
                'rating',
                'description',
                'tasting_notes',
                'nose_notes',
                'palate_notes',
                'finish_notes',
                'color',
                'food_pairings',
                'times_tasted',
                'last_tasted_date'
            )
        }),
        ('Provenance', {
            'fields': (
                'cask_type',
                'cask_finish',
                'barrel_number',
                'bottle_number',
                'vintage_year',
                'bottled_date',
                'mash_bill',
                'awards',
                'limited_edition',
                'chill_filtered',
                'natural_color'
            ),
            'classes': ('collapse',)
        }),
        ('Cellar', {
            'fields': ('status', 'is_opened', 'date_opened', 'remaining_volume', 'storage_location')
        }),
        ('Sharing', {
            'fields': ('shared_with', 'private_notes'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['mark_opened', 'mark_unopened']

    def mark_opened(self, request, queryset):
        """Mark selected bottles as opened."""
        count = queryset.update(is_opened=True)
        self.message_user(request, f"Marked {count} whiskeys as opened")
    mark_opened.short_description = "Mark selected whiskeys as opened"

    def mark_unopened(self, request, queryset):
        """Mark selected bottles as unopened."""
        count = queryset.update(is_opened=False)
        self.message_user(request, f"Marked {count} whiskeys as unopened")
    mark_unopened.short_description = "Mark selected whiskeys as unopened"

    def get_owner(self, obj):
        return obj.created_by.username
    get_owner.short_description = 'Owner'
    get_owner.admin_order_field = 'created_by__username'

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('created_by')
