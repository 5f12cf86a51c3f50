"""
CSV import of whiskey collections.

Reads the native export format and the OnlyDrams export format. Each
recognised header maps to one target field through ``COLUMN_MAP``; rows are
processed one at a time and every data row ends up in exactly one of
``imported``, ``skipped`` or ``errors`` on the returned ``ImportResult``.

Example::

    result = import_whiskeys_csv(owner=request.user, content=upload.read())
    result.summary  # {'total': 3, 'imported': 2, 'skipped': 1, 'errors': 0}
"""

import csv
import io
import logging
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from django.contrib.auth import get_user_model
from django.utils.dateparse import parse_date

from ..models import WhiskeyType
from .exceptions import CSVFormatError
from .whiskey_store import REQUIRED_FIELDS, create_whiskey

User = get_user_model()

logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS = '$€£¥'

DATE_FORMATS = ('%m/%d/%Y', '%Y/%m/%d', '%m/%d/%y')

_DECIMAL_PREFIX = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)')
_INTEGER_PREFIX = re.compile(r'[+-]?\d+')


# =============================================================================
# Coercion
# =============================================================================

def _number_text(value: str) -> str:
    text = value.strip()
    if text[:1] in ('+', '-') and text[1:2] in CURRENCY_SYMBOLS:
        return text[0] + text[2:].lstrip()
    return text.lstrip(CURRENCY_SYMBOLS).lstrip()


def to_decimal(value: str) -> Decimal:
    """Parse the leading decimal number: ``'45.5%'`` -> 45.5, ``'$60'`` -> 60."""
    match = _DECIMAL_PREFIX.match(_number_text(value))
    if not match:
        raise ValueError(f'"{value}" is not a number')
    return Decimal(match.group())


def to_int(value: str) -> int:
    """Parse the leading integer: ``'12 years'`` -> 12, ``'12.9'`` -> 12."""
    match = _INTEGER_PREFIX.match(_number_text(value))
    if not match:
        raise ValueError(f'"{value}" is not a whole number')
    return int(match.group())


def to_bool(value: str) -> bool:
    return value.lower() == 'yes' or value == '1'


def to_date(value: str):
    parsed = parse_date(value)
    if parsed:
        return parsed
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f'"{value}" is not a valid date')


def to_text(value: str) -> str:
    return value


def to_lower(value: str) -> str:
    return value.lower()


def map_subcategory_to_type(subcategory: str) -> str:
    """Translate an OnlyDrams subcategory into a whiskey type."""
    sub = subcategory.lower()
    if sub == 'bourbon':
        return WhiskeyType.BOURBON
    if sub == 'rye':
        return WhiskeyType.RYE
    if 'single malt' in sub or 'blended' in sub or 'single grain' in sub:
        return WhiskeyType.SCOTCH
    if 'tennessee' in sub:
        return WhiskeyType.TENNESSEE
    if 'canadian' in sub:
        return WhiskeyType.CANADIAN
    if 'irish' in sub:
        return WhiskeyType.IRISH
    if 'japanese' in sub:
        return WhiskeyType.JAPANESE
    return WhiskeyType.OTHER


# =============================================================================
# Header mapping
# =============================================================================

class Column(NamedTuple):
    """Target field for one CSV header.

    When ``note_prefix`` is set the value is appended to the field as a new
    line instead of replacing it.
    """
    field: str
    coerce: Callable[[str], Any]
    note_prefix: Optional[str] = None


# 'Category' (OnlyDrams) is deliberately absent: Subcategory carries the type.
COLUMN_MAP: Dict[str, Column] = {
    # Identity
    'Name': Column('name', to_text),
    'Type': Column('type', to_lower),
    'Subcategory': Column('type', map_subcategory_to_type),
    'Distillery': Column('distillery', to_text),
    'Region': Column('region', to_text),
    'Country': Column('country', to_text),
    # Physical
    'Age': Column('age', to_int),
    'ABV': Column('abv', to_decimal),
    'Proof': Column('proof', to_decimal),
    'Size': Column('size', to_text),
    'Quantity': Column('quantity', to_int),
    # Commercial
    'MSRP': Column('msrp', to_decimal),
    'Secondary Price': Column('secondary_price', to_decimal),
    'Secondary': Column('secondary_price', to_decimal),
    'Purchase Date': Column('purchase_date', to_date),
    'Purchase Price': Column('purchase_price', to_decimal),
    'Paid': Column('purchase_price', to_decimal),
    'Purchase Location': Column('purchase_location', to_text),
    'Bottle Code': Column('bottle_code', to_text),
    'Current Market Value': Column('current_market_value', to_decimal),
    'Value Gain/Loss': Column('value_gain_loss', to_decimal),
    'Is Investment Bottle': Column('is_investment_bottle', to_bool),
    'Is For Sale': Column('is_for_sale', to_bool),
    'Asking Price': Column('asking_price', to_decimal),
    'Is For Trade': Column('is_for_trade', to_bool),
    # Tasting
    'Rating': Column('rating', to_decimal),
    'Description': Column('description', to_text),
    'Tasting Notes': Column('tasting_notes', to_text),
    'Nose Notes': Column('nose_notes', to_text),
    'Palate Notes': Column('palate_notes', to_text),
    'Finish Notes': Column('finish_notes', to_text),
    'Color': Column('color', to_text),
    'Food Pairings': Column('food_pairings', to_text),
    'Times Tasted': Column('times_tasted', to_int),
    'Last Tasted Date': Column('last_tasted_date', to_date),
    # Provenance
    'Cask Type': Column('cask_type', to_text),
    'Cask Finish': Column('cask_finish', to_text),
    'Barrel Number': Column('barrel_number', to_text),
    'Bottle Number': Column('bottle_number', to_text),
    'Vintage Year': Column('vintage_year', to_text),
    'Bottled Date': Column('bottled_date', to_text),
    'Mash Bill': Column('mash_bill', to_text),
    'Awards': Column('awards', to_text),
    'Limited Edition': Column('limited_edition', to_bool),
    'Chill Filtered': Column('chill_filtered', to_bool),
    'Natural Color': Column('natural_color', to_bool),
    # Lifecycle
    'Status': Column('status', to_text),
    'Is Opened': Column('is_opened', to_bool),
    'Date Opened': Column('date_opened', to_date),
    'Remaining Volume': Column('remaining_volume', to_decimal),
    'Storage Location': Column('storage_location', to_text),
    # Sharing
    'Shared With': Column('shared_with', to_text),
    'Private Notes': Column('private_notes', to_text),
    'Rarity': Column('private_notes', to_text, note_prefix='Rarity: '),
    'Notes': Column('private_notes', to_text, note_prefix=''),
}


# =============================================================================
# Parsing
# =============================================================================

def _clean_value(raw: str) -> str:
    # Surrounding quotes are already gone; any quote left is part of the value
    return raw.strip()


def read_csv_records(content: bytes) -> List[List[str]]:
    """
    Decode and tokenize an uploaded document into non-blank records.

    Quoted fields may contain commas, newlines and doubled quotes.

    Raises:
        CSVFormatError: If the bytes are not UTF-8 or the CSV is malformed
    """
    try:
        text = content.decode('utf-8-sig')
    except UnicodeDecodeError:
        raise CSVFormatError("CSV file must be UTF-8 encoded")

    try:
        reader = csv.reader(io.StringIO(text, newline=''), skipinitialspace=True)
        return [
            record for record in reader
            if any(field.strip() for field in record)
        ]
    except csv.Error as e:
        raise CSVFormatError(f"Could not parse CSV file: {e}")


def map_row(headers: List[str], values: List[str]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Map one record onto whiskey fields.

    Empty values are treated as absent. Values that fail coercion are left
    out of the data and reported in the returned problem list.
    """
    data: Dict[str, Any] = {}
    problems: List[str] = []

    for index, header in enumerate(headers):
        column = COLUMN_MAP.get(header)
        if column is None:
            continue

        value = _clean_value(values[index]) if index < len(values) else ''
        if not value:
            continue

        try:
            coerced = column.coerce(value)
        except ValueError as e:
            problems.append(f"{header} {e}")
            continue

        if column.note_prefix is None:
            data[column.field] = coerced
        else:
            note = f"{column.note_prefix}{coerced}"
            existing = data.get(column.field)
            data[column.field] = f"{existing}\n{note}" if existing else note

    return data, problems


def derive_fields(data: Dict[str, Any]) -> None:
    """Fill fields that the OnlyDrams format implies but does not carry."""
    if data.get('abv') is None and data.get('proof'):
        data['abv'] = data['proof'] / 2

    if 'is_opened' not in data and data.get('status'):
        status = data['status'].lower()
        if status == 'unopened':
            data['is_opened'] = False
        elif status == 'opened':
            data['is_opened'] = True


def skip_reason(data: Dict[str, Any]) -> Optional[str]:
    if not all(data.get(name) for name in REQUIRED_FIELDS):
        return "Missing required fields (name, type, or distillery)"
    if data['type'] not in WhiskeyType.values:
        return f'Invalid whiskey type "{data["type"]}"'
    return None


# =============================================================================
# Import
# =============================================================================

class ImportResult:
    """Per-row outcome of a CSV import."""

    def __init__(self, total=0):
        self.total = total
        self.imported = []
        self.skipped = []
        self.errors = []

    @property
    def summary(self) -> Dict[str, int]:
        return {
            'total': self.total,
            'imported': len(self.imported),
            'skipped': len(self.skipped),
            'errors': len(self.errors),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            'summary': self.summary,
            'imported': self.imported,
            'skipped': self.skipped,
            'errors': self.errors,
        }


def import_whiskeys_csv(*, owner: User, content: bytes) -> ImportResult:
    """
    Import whiskeys from CSV bytes into the owner's collection.

    The first non-blank record is the header row. Row numbers in messages
    count the header as row 1. Rows that fail do not undo rows imported
    before them.

    Args:
        owner: User who will own the imported records
        content: Raw uploaded file content

    Returns:
        ImportResult with imported, skipped and errored rows in row order

    Raises:
        CSVFormatError: If the file is unreadable or has no data rows
    """
    records = read_csv_records(content)
    if len(records) < 2:
        raise CSVFormatError("CSV file is empty or invalid")

    headers = [_clean_value(header) for header in records[0]]
    result = ImportResult(total=len(records) - 1)

    logger.info(
        "Importing %d CSV rows for %s", result.total, owner.username
    )

    for row_number, values in enumerate(records[1:], start=2):
        data, problems = map_row(headers, values)
        derive_fields(data)

        reason = skip_reason(data)
        if reason:
            result.skipped.append(f"Row {row_number}: {reason}")
            continue

        if problems:
            result.errors.append(f"Row {row_number}: {'; '.join(problems)}")
            continue

        try:
            whiskey = create_whiskey(owner=owner, data=data)
        except Exception as e:
            logger.warning("CSV row %d failed for %s: %s", row_number, owner.username, e)
            result.errors.append(f"Row {row_number}: {e}")
            continue

        result.imported.append({
            'name': whiskey.name,
            'type': whiskey.type,
            'id': str(whiskey.id),
        })

    logger.info(
        "CSV import for %s finished: %s", owner.username, result.summary
    )
    return result
