"""
Analytics Module
=================

Aggregate statistics over one user's whiskey collection, used to power the
collection dashboard and charts.

Classes:
    CollectionAnalytics: Static methods for collection statistics.

Key Features:
    - Collection totals (records, bottles, distilleries, opened bottles)
    - Value tracking (MSRP, amount paid, market value, gain/loss)
    - Breakdowns by type, distillery, country or region
    - Highest rated bottles

Example:
    Getting collection statistics::

        from apps.analytics.analytics import CollectionAnalytics

        stats = CollectionAnalytics.summary(owner=user)
        print(f"{stats['bottle_count']} bottles from "
              f"{stats['distillery_count']} distilleries")

Note:
    This module is read-only. Every method takes the owner as a required
    argument and never looks at another user's records.
"""

from decimal import Decimal

from django.db.models import (
    Avg,
    Count,
    DecimalField,
    ExpressionWrapper,
    F,
    Q,
    Sum,
    Value,
)
from django.db.models.functions import Coalesce

from apps.whiskeys.models import Whiskey
from .exceptions import InvalidDimensionError

BREAKDOWN_DIMENSIONS = ('type', 'distillery', 'country', 'region')

UNKNOWN_LABEL = 'Unknown'

MONEY = DecimalField(max_digits=14, decimal_places=2)


def _money_total(expression):
    return Coalesce(Sum(expression, output_field=MONEY), Value(Decimal('0.00')), output_field=MONEY)


def _times_quantity(field_name):
    return ExpressionWrapper(F(field_name) * F('quantity'), output_field=MONEY)


def _rounded(value):
    return round(float(value), 2) if value is not None else None


class CollectionAnalytics:
    """
    Aggregate queries over a single user's collection.

    Methods:
        summary: Collection totals and value figures.
        breakdown: Counts grouped by type, distillery, country or region.
        top_rated: Highest rated records.
        dashboard: Summary, type breakdown and top five in one payload.

    Note:
        All methods return plain dictionaries or lists, not Django objects,
        making them suitable for JSON serialization in API responses.
    """

    @staticmethod
    def summary(owner):
        """
        Calculate totals for the owner's collection.

        Args:
            owner (User): The collection owner.

        Returns:
            dict: A dictionary containing:
                - record_count (int): Number of whiskey records.
                - bottle_count (int): Sum of quantities.
                - distillery_count (int): Distinct distilleries.
                - opened_count (int): Records marked opened.
                - unopened_count (int): Records not marked opened.
                - average_rating (float | None): Mean of rated records.
                - total_msrp_value (Decimal): Sum of msrp × quantity.
                - total_paid (Decimal): Sum of purchase_price × quantity.
                - total_market_value (Decimal): Sum of current_market_value.
                - total_value_gain_loss (Decimal): Sum of value_gain_loss.

        Example:
            stats = CollectionAnalytics.summary(owner=user)
            print(f"Paid {stats['total_paid']} for {stats['bottle_count']} bottles")

        Note:
            Records with no price are left out of the money totals rather
            than counted as zero-value bottles.
        """
        totals = Whiskey.objects.filter(created_by=owner).aggregate(
            record_count=Count('id'),
            bottle_count=Coalesce(Sum('quantity'), 0),
            distillery_count=Count('distillery', distinct=True),
            opened_count=Count('id', filter=Q(is_opened=True)),
            average_rating=Avg('rating'),
            total_msrp_value=_money_total(_times_quantity('msrp')),
            total_paid=_money_total(_times_quantity('purchase_price')),
            total_market_value=_money_total(F('current_market_value')),
            total_value_gain_loss=_money_total(F('value_gain_loss')),
        )

        totals['unopened_count'] = totals['record_count'] - totals['opened_count']
        totals['average_rating'] = _rounded(totals['average_rating'])
        return totals

    @staticmethod
    def breakdown(owner, by='type'):
        """
        Group the owner's collection by one field.

        Args:
            owner (User): The collection owner.
            by (str): One of ``type``, ``distillery``, ``country``, ``region``.

        Returns:
            list[dict]: One entry per distinct value, largest group first:
                - value (str): Group label, 'Unknown' for blank values.
                - count (int): Records in the group.
                - bottles (int): Sum of quantities in the group.
                - average_rating (float | None): Mean rating in the group.

        Raises:
            InvalidDimensionError: If ``by`` is not a supported field.
        """
        if by not in BREAKDOWN_DIMENSIONS:
            raise InvalidDimensionError(
                f"Invalid dimension: '{by}'. Valid options: {', '.join(BREAKDOWN_DIMENSIONS)}"
            )

        groups = (
            Whiskey.objects
            .filter(created_by=owner)
            .values(by)
            .annotate(
                count=Count('id'),
                bottles=Coalesce(Sum('quantity'), 0),
                average_rating=Avg('rating'),
            )
            .order_by('-count', by)
        )

        return [
            {
                'value': group[by] or UNKNOWN_LABEL,
                'count': group['count'],
                'bottles': group['bottles'],
                'average_rating': _rounded(group['average_rating']),
            }
            for group in groups
        ]

    @staticmethod
    def top_rated(owner, limit=10):
        """Highest rated records; unrated records are left out."""
        whiskeys = (
            Whiskey.objects
            .filter(created_by=owner, rating__isnull=False)
            .order_by('-rating', 'name', 'id')[:limit]
        )

        return [
            {
                'id': whiskey.id,
                'name': whiskey.name,
                'distillery': whiskey.distillery,
                'type': whiskey.type,
                'rating': _rounded(whiskey.rating),
            }
            for whiskey in whiskeys
        ]

    @staticmethod
    def dashboard(owner):
        return {
            'summary': CollectionAnalytics.summary(owner),
            'by_type': CollectionAnalytics.breakdown(owner, by='type'),
            'top_rated': CollectionAnalytics.top_rated(owner, limit=5),
        }
