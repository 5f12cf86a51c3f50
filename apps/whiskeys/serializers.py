from django.conf import settings
from rest_framework import serializers
from .models import Whiskey, WhiskeyType


WHISKEY_INPUT_FIELDS = [
    'name',
    'type',
    'distillery',
    'region',
    'country',
    'age',
    'abv',
    'proof',
    'size',
    'quantity',
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
    'is_for_trade',
    'rating',
    'description',
    'tasting_notes',
    'nose_notes',
    'palate_notes',
    'finish_notes',
    'color',
    'food_pairings',
    'times_tasted',
    'last_tasted_date',
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
    'natural_color',
    'status',
    'is_opened',
    'date_opened',
    'remaining_volume',
    'storage_location',
    'shared_with',
    'private_notes',
]


class WhiskeySerializer(serializers.ModelSerializer):
    """Full representation of a whiskey record."""

    class Meta:
        model = Whiskey
        fields = ['id'] + WHISKEY_INPUT_FIELDS + ['created_by', 'created_at', 'updated_at']
        read_only_fields = fields


class WhiskeyWriteSerializer(serializers.ModelSerializer):
    """
    Input validation for creating and updating whiskeys.

    Use ``partial=True`` for updates so only the supplied fields are checked.
    Ownership and timestamps are not accepted from the client.
    """

    class Meta:
        model = Whiskey
        fields = WHISKEY_INPUT_FIELDS
        extra_kwargs = {
            'name': {'error_messages': {'required': 'Name is required', 'blank': 'Name is required'}},
            'distillery': {'error_messages': {'required': 'Distillery is required', 'blank': 'Distillery is required'}},
            'type': {'error_messages': {'required': 'Type is required', 'invalid_choice': 'Invalid whiskey type "{input}"'}},
        }


class WhiskeyFilterSerializer(serializers.Serializer):
    """Query parameters for listing whiskeys."""
    type = serializers.ChoiceField(
        choices=WhiskeyType.choices,
        required=False,
        error_messages={'invalid_choice': 'Invalid whiskey type "{input}"'},
    )
    distillery = serializers.CharField(required=False, allow_blank=True)


class SearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField(
        max_length=200,
        error_messages={
            'required': 'Search query is required',
            'blank': 'Search query is required',
        },
    )


class CSVImportSerializer(serializers.Serializer):
    """Multipart upload for CSV import."""
    file = serializers.FileField(
        error_messages={
            'required': 'No file uploaded',
            'null': 'No file uploaded',
            'invalid': 'No file uploaded',
            'empty': 'CSV file is empty or invalid',
        },
    )

    def validate_file(self, value):
        content_type = (getattr(value, 'content_type', '') or '').split(';')[0].strip()
        name = (value.name or '').lower()
        if content_type != 'text/csv' and not name.endswith('.csv'):
            raise serializers.ValidationError('Only CSV files are allowed')

        max_bytes = settings.CSV_IMPORT_MAX_BYTES
        if value.size > max_bytes:
            raise serializers.ValidationError(
                f'File too large (max {max_bytes // (1024 * 1024)}MB)'
            )
        return value
