"""
Whiskeys services module.

Owner-scoped collection storage plus CSV import and export.
"""

from .csv_export import (
    EXPORT_COLUMNS,
    EXPORT_HEADERS,
    export_filename,
    export_whiskeys_csv,
)
from .csv_import import (
    COLUMN_MAP,
    ImportResult,
    import_whiskeys_csv,
    map_subcategory_to_type,
)
from .exceptions import (
    CSVFormatError,
    WhiskeyNotFoundError,
    WhiskeysServiceError,
    WhiskeyValidationError,
)
from .whiskey_store import (
    create_whiskey,
    delete_whiskey,
    get_whiskey,
    list_whiskeys,
    search_whiskeys,
    update_whiskey,
)

__all__ = [
    # Store
    'list_whiskeys',
    'search_whiskeys',
    'get_whiskey',
    'create_whiskey',
    'update_whiskey',
    'delete_whiskey',
    # CSV
    'COLUMN_MAP',
    'EXPORT_COLUMNS',
    'EXPORT_HEADERS',
    'ImportResult',
    'import_whiskeys_csv',
    'map_subcategory_to_type',
    'export_whiskeys_csv',
    'export_filename',
    # Exceptions
    'WhiskeysServiceError',
    'WhiskeyNotFoundError',
    'WhiskeyValidationError',
    'CSVFormatError',
]
