"""
CSV export of whiskey collections.

The column set and order are fixed; the header row is always written, even
for an empty collection, and the output can be fed straight back into
``import_whiskeys_csv``.
"""

import csv
import io
from datetime import date
from typing import Iterable, Optional

from django.utils import timezone

from ..models import Whiskey

EXPORT_COLUMNS = (
    ('Name', 'name'),
    ('Type', 'type'),
    ('Distillery', 'distillery'),
    ('Region', 'region'),
    ('Country', 'country'),
    ('Age', 'age'),
    ('ABV', 'abv'),
    ('Proof', 'proof'),
    ('Size', 'size'),
    ('Quantity', 'quantity'),
    ('MSRP', 'msrp'),
    ('Secondary Price', 'secondary_price'),
    ('Purchase Date', 'purchase_date'),
    ('Purchase Price', 'purchase_price'),
    ('Purchase Location', 'purchase_location'),
    ('Bottle Code', 'bottle_code'),
    ('Rating', 'rating'),
    ('Description', 'description'),
    ('Tasting Notes', 'tasting_notes'),
    ('Status', 'status'),
    ('Is Opened', 'is_opened'),
    ('Date Opened', 'date_opened'),
    ('Remaining Volume', 'remaining_volume'),
    ('Storage Location', 'storage_location'),
    ('Cask Type', 'cask_type'),
    ('Cask Finish', 'cask_finish'),
    ('Barrel Number', 'barrel_number'),
    ('Bottle Number', 'bottle_number'),
    ('Vintage Year', 'vintage_year'),
    ('Bottled Date', 'bottled_date'),
    ('Color', 'color'),
    ('Nose Notes', 'nose_notes'),
    ('Palate Notes', 'palate_notes'),
    ('Finish Notes', 'finish_notes'),
    ('Times Tasted', 'times_tasted'),
    ('Last Tasted Date', 'last_tasted_date'),
    ('Food Pairings', 'food_pairings'),
    ('Current Market Value', 'current_market_value'),
    ('Value Gain/Loss', 'value_gain_loss'),
    ('Is Investment Bottle', 'is_investment_bottle'),
    ('Mash Bill', 'mash_bill'),
    ('Awards', 'awards'),
    ('Limited Edition', 'limited_edition'),
    ('Chill Filtered', 'chill_filtered'),
    ('Natural Color', 'natural_color'),
    ('Is For Sale', 'is_for_sale'),
    ('Asking Price', 'asking_price'),
    ('Is For Trade', 'is_for_trade'),
    ('Shared With', 'shared_with'),
    ('Private Notes', 'private_notes'),
)

EXPORT_HEADERS = [header for header, _ in EXPORT_COLUMNS]


def format_value(value) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'Yes' if value else 'No'
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def export_whiskeys_csv(whiskeys: Iterable[Whiskey]) -> str:
    """
    Render whiskeys as CSV text.

    Lines are separated by ``\\n`` with no trailing newline. Fields holding a
    comma, a double quote or a line break are quoted with inner quotes
    doubled.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')

    writer.writerow(EXPORT_HEADERS)
    for whiskey in whiskeys:
        writer.writerow([
            format_value(getattr(whiskey, field)) for _, field in EXPORT_COLUMNS
        ])

    output = buffer.getvalue()
    return output[:-1] if output.endswith('\n') else output


def export_filename(day: Optional[date] = None) -> str:
    day = day or timezone.localdate()
    return f"whiskey-collection-{day.isoformat()}.csv"
