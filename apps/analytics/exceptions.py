"""
Domain exceptions for analytics app.

These exceptions are raised by the analytics query layer and represent
invalid requests, separate from HTTP concerns.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidDimensionError

Usage:
    from apps.analytics.exceptions import InvalidDimensionError

    if by not in BREAKDOWN_DIMENSIONS:
        raise InvalidDimensionError(f"Invalid dimension: '{by}'")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    Views can catch this to handle every analytics error the same way:

        try:
            data = CollectionAnalytics.breakdown(owner=user, by='colour')
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidDimensionError(AnalyticsServiceError):
    """
    Raised when a breakdown is requested over an unsupported field.

    Valid dimensions are: type, distillery, country, region.

    Example:
        raise InvalidDimensionError(
            "Invalid dimension: 'colour'. Valid options: type, distillery, country, region"
        )
    """

    pass
