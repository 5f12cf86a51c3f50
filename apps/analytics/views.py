from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import CanReadWhiskeys
from .analytics import CollectionAnalytics
from .serializers import (
    # Input serializers
    BreakdownQuerySerializer,
    TopRatedQuerySerializer,
    # Response serializers
    SummarySerializer,
    BreakdownResponseSerializer,
    TopRatedResponseSerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)
from .exceptions import InvalidDimensionError


@extend_schema(
    responses={200: SummarySerializer},
    description="Totals for the current user's collection: bottles, distilleries, value.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, CanReadWhiskeys])
def collection_summary(request):
    """Get collection totals - thin HTTP handler."""
    return Response(CollectionAnalytics.summary(request.user))


@extend_schema(
    parameters=[BreakdownQuerySerializer],
    responses={
        200: BreakdownResponseSerializer,
        400: ErrorSerializer,
    },
    description="Count the current user's whiskeys grouped by type, distillery, country or region.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, CanReadWhiskeys])
def collection_breakdown(request):
    """Get grouped counts - thin HTTP handler."""
    query_serializer = BreakdownQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    by = query_serializer.validated_data['by']

    try:
        data = CollectionAnalytics.breakdown(request.user, by=by)
    except InvalidDimensionError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'by': by,
        'results': data,
    })


@extend_schema(
    parameters=[TopRatedQuerySerializer],
    responses={200: TopRatedResponseSerializer},
    description="Highest rated whiskeys in the current user's collection.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, CanReadWhiskeys])
def top_rated(request):
    """Get highest rated whiskeys - thin HTTP handler."""
    query_serializer = TopRatedQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = CollectionAnalytics.top_rated(
        request.user,
        limit=query_serializer.validated_data['limit']
    )
    return Response({'results': data})


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Summary, type breakdown and top five whiskeys in one call.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, CanReadWhiskeys])
def dashboard(request):
    """Get dashboard data - thin HTTP handler."""
    return Response(CollectionAnalytics.dashboard(request.user))
