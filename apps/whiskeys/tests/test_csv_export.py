import csv
import io
import pytest
from datetime import date
from decimal import Decimal
from apps.whiskeys.models import Whiskey
from apps.whiskeys.services import (
    EXPORT_COLUMNS,
    create_whiskey,
    export_filename,
    export_whiskeys_csv,
    import_whiskeys_csv,
)


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


class TestExportColumns:

    def test_every_editable_field_is_exported_once(self):
        fields = [field for _, field in EXPORT_COLUMNS]
        editable = {
            f.name for f in Whiskey._meta.concrete_fields
            if f.name not in ('id', 'created_by', 'created_at', 'updated_at')
        }

        assert len(fields) == len(set(fields)) == 50
        assert set(fields) == editable

    def test_filename(self):
        assert export_filename(date(2024, 7, 4)) == 'whiskey-collection-2024-07-04.csv'


@pytest.mark.django_db
class TestExportWhiskeysCsv:

    def test_empty_collection_has_header_only(self):
        text = export_whiskeys_csv([])

        assert text == ','.join(header for header, _ in EXPORT_COLUMNS)

    def test_one_line_per_record_without_trailing_newline(self, bourbon, scotch):
        text = export_whiskeys_csv([bourbon, scotch])

        assert len(text.split('\n')) == 3
        assert not text.endswith('\n')

    def test_value_formatting(self, bourbon):
        bourbon.is_opened = True
        bourbon.purchase_date = date(2023, 12, 24)
        bourbon.save()

        header, row = _rows(export_whiskeys_csv([bourbon]))
        values = dict(zip(header, row))

        assert values['Name'] == 'Eagle Rare 10'
        assert values['Type'] == 'bourbon'
        assert values['Age'] == '10'
        assert values['Is Opened'] == 'Yes'
        assert values['Chill Filtered'] == 'No'
        assert values['Proof'] == ''
        assert values['Purchase Date'] == '2023-12-24'

    def test_quoting(self, editor):
        whiskey = create_whiskey(
            owner=editor,
            data={
                'name': 'Stagg',
                'type': 'bourbon',
                'distillery': 'Buffalo Trace',
                'tasting_notes': 'Smoky, peaty, 10/10',
                'description': 'The "hazmat" one',
                'private_notes': 'line one\nline two',
            },
        )

        text = export_whiskeys_csv([whiskey])

        assert '"Smoky, peaty, 10/10"' in text
        assert '"The ""hazmat"" one"' in text
        assert '"line one\nline two"' in text


@pytest.mark.django_db
class TestRoundTrip:

    def test_export_then_import_preserves_fields(self, editor, other_editor):
        original = create_whiskey(
            owner=editor,
            data={
                'name': 'Lagavulin 16',
                'type': 'scotch',
                'distillery': 'Lagavulin',
                'region': 'Islay',
                'country': 'Scotland',
                'age': 16,
                'abv': Decimal('43.00'),
                'proof': Decimal('86.00'),
                'size': '700ml',
                'quantity': 2,
                'msrp': Decimal('99.99'),
                'secondary_price': Decimal('120.00'),
                'purchase_date': date(2022, 11, 5),
                'purchase_price': Decimal('89.50'),
                'purchase_location': 'Total Wine, Store #12',
                'bottle_code': 'L2 123',
                'current_market_value': Decimal('110.00'),
                'value_gain_loss': Decimal('-9.99'),
                'is_investment_bottle': True,
                'is_for_sale': False,
                'asking_price': Decimal('150.00'),
                'is_for_trade': True,
                'rating': Decimal('9.25'),
                'description': 'Classic "Islay" peat',
                'tasting_notes': 'Smoky, peaty, 10/10',
                'nose_notes': 'Bonfire',
                'palate_notes': 'Sherry, smoke',
                'finish_notes': 'Long\nand dry',
                'color': 'Amber',
                'food_pairings': 'Blue cheese',
                'times_tasted': 4,
                'last_tasted_date': date(2024, 1, 2),
                'cask_type': 'Ex-bourbon',
                'cask_finish': 'PX sherry',
                'barrel_number': '42',
                'bottle_number': '1001',
                'vintage_year': '2006',
                'bottled_date': '2022',
                'mash_bill': '100% malted barley',
                'awards': 'Gold, 2019',
                'limited_edition': True,
                'chill_filtered': True,
                'natural_color': False,
                'status': 'Opened',
                'is_opened': True,
                'date_opened': date(2023, 1, 1),
                'remaining_volume': Decimal('62.50'),
                'storage_location': 'Shelf B',
                'shared_with': 'Dad',
                'private_notes': 'Birthday bottle',
            },
        )
        original.refresh_from_db()

        text = export_whiskeys_csv([original])
        result = import_whiskeys_csv(owner=other_editor, content=text.encode('utf-8'))

        assert result.summary == {'total': 1, 'imported': 1, 'skipped': 0, 'errors': 0}
        copy = Whiskey.objects.get(created_by=other_editor)
        for _, field in EXPORT_COLUMNS:
            assert getattr(copy, field) == getattr(original, field), field

    def test_blank_fields_stay_blank(self, editor, other_editor, bourbon):
        text = export_whiskeys_csv([bourbon])

        import_whiskeys_csv(owner=other_editor, content=text.encode('utf-8'))

        copy = Whiskey.objects.get(created_by=other_editor)
        assert copy.proof is None
        assert copy.purchase_date is None
        assert copy.private_notes == ''
        assert copy.quantity == bourbon.quantity

    def test_values_with_edge_quotes_survive(self, editor, other_editor):
        original = create_whiskey(
            owner=editor,
            data={
                'name': '"Best" dram',
                'type': 'bourbon',
                'distillery': 'Buffalo Trace',
                'description': 'Weller"',
                'nose_notes': '"',
            },
        )

        text = export_whiskeys_csv([original])
        import_whiskeys_csv(owner=other_editor, content=text.encode('utf-8'))

        copy = Whiskey.objects.get(created_by=other_editor)
        assert copy.name == '"Best" dram'
        assert copy.description == 'Weller"'
        assert copy.nose_notes == '"'
