"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class BreakdownQuerySerializer(serializers.Serializer):
    """
    Query parameters for the breakdown endpoint.

    The dimension itself is checked by ``CollectionAnalytics.breakdown``.
    """
    by = serializers.CharField(
        required=False,
        default='type',
        help_text="Group by: 'type', 'distillery', 'country' or 'region'"
    )


class TopRatedQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(
        min_value=1,
        max_value=100,
        required=False,
        default=10,
        help_text='Number of results (1-100)'
    )


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class SummarySerializer(serializers.Serializer):
    """Response serializer for collection totals."""
    record_count = serializers.IntegerField()
    bottle_count = serializers.IntegerField()
    distillery_count = serializers.IntegerField()
    opened_count = serializers.IntegerField()
    unopened_count = serializers.IntegerField()
    average_rating = serializers.FloatField(allow_null=True)
    total_msrp_value = serializers.FloatField()
    total_paid = serializers.FloatField()
    total_market_value = serializers.FloatField()
    total_value_gain_loss = serializers.FloatField()


class BreakdownEntrySerializer(serializers.Serializer):
    value = serializers.CharField()
    count = serializers.IntegerField()
    bottles = serializers.IntegerField()
    average_rating = serializers.FloatField(allow_null=True)


class BreakdownResponseSerializer(serializers.Serializer):
    by = serializers.CharField()
    results = BreakdownEntrySerializer(many=True)


class TopRatedEntrySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    distillery = serializers.CharField()
    type = serializers.CharField()
    rating = serializers.FloatField()


class TopRatedResponseSerializer(serializers.Serializer):
    results = TopRatedEntrySerializer(many=True)


class DashboardResponseSerializer(serializers.Serializer):
    """Response serializer for dashboard summary."""
    summary = SummarySerializer()
    by_type = BreakdownEntrySerializer(many=True)
    top_rated = TopRatedEntrySerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
