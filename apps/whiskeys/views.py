import logging

from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import serializers, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.accounts.models import Capability
from apps.accounts.permissions import HasCapability
from .serializers import (
    CSVImportSerializer,
    SearchQuerySerializer,
    WhiskeyFilterSerializer,
    WhiskeySerializer,
    WhiskeyWriteSerializer,
)
from .services import (
    create_whiskey,
    delete_whiskey,
    export_filename,
    export_whiskeys_csv,
    get_whiskey,
    import_whiskeys_csv,
    list_whiskeys,
    search_whiskeys,
    update_whiskey,
    CSVFormatError,
    WhiskeyNotFoundError,
    WhiskeyValidationError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class WhiskeyListResponseSerializer(serializers.Serializer):
    whiskeys = WhiskeySerializer(many=True)


class WhiskeyDetailResponseSerializer(serializers.Serializer):
    whiskey = WhiskeySerializer()


class WhiskeyMessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    whiskey = WhiskeySerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class ImportSummarySerializer(serializers.Serializer):
    total = serializers.IntegerField()
    imported = serializers.IntegerField()
    skipped = serializers.IntegerField()
    errors = serializers.IntegerField()


class ImportedWhiskeySerializer(serializers.Serializer):
    name = serializers.CharField()
    type = serializers.CharField()
    id = serializers.UUIDField()


class ImportResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    summary = ImportSummarySerializer()
    imported = ImportedWhiskeySerializer(many=True)
    skipped = serializers.ListField(child=serializers.CharField())
    errors = serializers.ListField(child=serializers.CharField())


class WhiskeyViewSet(viewsets.ViewSet):
    """
    The acting user's whiskey collection.

    list: Get own whiskeys (filter by type, distillery)
    search: Substring search over names, places and notes
    export_csv: Download the collection as CSV
    import_csv: Upload a CSV file into the collection
    retrieve: Get one whiskey
    create: Add a whiskey
    update / partial_update: Change a whiskey
    destroy: Permanently delete a whiskey

    Records owned by other users behave exactly like missing records.
    """

    permission_classes = [IsAuthenticated, HasCapability]
    lookup_value_regex = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'
    required_capabilities = {
        'list': Capability.READ_WHISKEY,
        'retrieve': Capability.READ_WHISKEY,
        'search': Capability.READ_WHISKEY,
        'export_csv': Capability.READ_WHISKEY,
        'create': Capability.CREATE_WHISKEY,
        'import_csv': Capability.CREATE_WHISKEY,
        'update': Capability.UPDATE_WHISKEY,
        'partial_update': Capability.UPDATE_WHISKEY,
        'destroy': Capability.DELETE_WHISKEY,
    }

    @extend_schema(
        parameters=[WhiskeyFilterSerializer],
        responses={200: WhiskeyListResponseSerializer},
        tags=['whiskeys'],
    )
    def list(self, request):
        filters = WhiskeyFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        whiskeys = list_whiskeys(
            owner=request.user,
            whiskey_type=filters.validated_data.get('type'),
            distillery=filters.validated_data.get('distillery'),
        )
        return Response({'whiskeys': WhiskeySerializer(whiskeys, many=True).data})

    @extend_schema(
        responses={200: WhiskeyDetailResponseSerializer, 404: ErrorResponseSerializer},
        tags=['whiskeys'],
    )
    def retrieve(self, request, pk=None):
        try:
            whiskey = get_whiskey(whiskey_id=pk, owner=request.user)
        except WhiskeyNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'whiskey': WhiskeySerializer(whiskey).data})

    @extend_schema(
        request=WhiskeyWriteSerializer,
        responses={201: WhiskeyMessageResponseSerializer},
        tags=['whiskeys'],
    )
    def create(self, request):
        serializer = WhiskeyWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            whiskey = create_whiskey(owner=request.user, data=serializer.validated_data)
        except WhiskeyValidationError as e:
            return Response(e.as_dict(), status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                'message': 'Whiskey created successfully',
                'whiskey': WhiskeySerializer(whiskey).data,
            },
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        request=WhiskeyWriteSerializer,
        responses={200: WhiskeyMessageResponseSerializer, 404: ErrorResponseSerializer},
        tags=['whiskeys'],
    )
    def update(self, request, pk=None):
        return self._update(request, pk)

    @extend_schema(
        request=WhiskeyWriteSerializer,
        responses={200: WhiskeyMessageResponseSerializer, 404: ErrorResponseSerializer},
        tags=['whiskeys'],
    )
    def partial_update(self, request, pk=None):
        return self._update(request, pk)

    def _update(self, request, pk):
        # PUT and PATCH both change only the supplied fields
        serializer = WhiskeyWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            whiskey = update_whiskey(
                whiskey_id=pk,
                owner=request.user,
                data=serializer.validated_data,
            )
        except WhiskeyNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except WhiskeyValidationError as e:
            return Response(e.as_dict(), status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'message': 'Whiskey updated successfully',
            'whiskey': WhiskeySerializer(whiskey).data,
        })

    @extend_schema(
        responses={200: MessageResponseSerializer, 404: ErrorResponseSerializer},
        tags=['whiskeys'],
    )
    def destroy(self, request, pk=None):
        if not delete_whiskey(whiskey_id=pk, owner=request.user):
            return Response(
                {'error': 'Whiskey not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response({'message': 'Whiskey deleted successfully'})

    @extend_schema(
        parameters=[SearchQuerySerializer],
        responses={200: WhiskeyListResponseSerializer},
        tags=['whiskeys'],
    )
    @action(detail=False, methods=['get'])
    def search(self, request):
        """Search own whiskeys by name, distillery, region, country or notes."""
        params = SearchQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        whiskeys = search_whiskeys(query=params.validated_data['q'], owner=request.user)
        return Response({'whiskeys': WhiskeySerializer(whiskeys, many=True).data})

    @extend_schema(
        responses={(200, 'text/csv'): OpenApiTypes.STR, 500: ErrorResponseSerializer},
        tags=['whiskeys'],
    )
    @action(detail=False, methods=['get'], url_path='export/csv')
    def export_csv(self, request):
        """Download the whole collection as a CSV attachment."""
        try:
            content = export_whiskeys_csv(list_whiskeys(owner=request.user))
        except Exception:
            logger.exception("CSV export failed for %s", request.user.username)
            return Response(
                {'error': 'Failed to export whiskeys'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        response = HttpResponse(content, content_type='text/csv')
        response['Content-Disposition'] = f'attachment; filename="{export_filename()}"'
        return response

    @extend_schema(
        request={'multipart/form-data': CSVImportSerializer},
        responses={
            200: ImportResponseSerializer,
            400: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
        },
        tags=['whiskeys'],
    )
    @action(
        detail=False,
        methods=['post'],
        url_path='import/csv',
        parser_classes=[MultiPartParser, FormParser],
    )
    def import_csv(self, request):
        """
        Import whiskeys from an uploaded CSV file.

        Accepts the native export format and OnlyDrams exports. Bad rows are
        reported in ``skipped`` or ``errors`` without failing the upload.
        """
        serializer = CSVImportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        upload = serializer.validated_data['file']

        try:
            result = import_whiskeys_csv(owner=request.user, content=upload.read())
        except CSVFormatError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("CSV import failed for %s", request.user.username)
            return Response(
                {'error': 'Failed to import CSV file'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({'message': 'CSV import completed', **result.to_dict()})
