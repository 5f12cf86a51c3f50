import pytest
from datetime import date
from decimal import Decimal
from apps.whiskeys.models import Whiskey
from apps.whiskeys.services import (
    import_whiskeys_csv,
    map_subcategory_to_type,
    CSVFormatError,
)
from apps.whiskeys.services.csv_import import to_decimal, to_int, to_bool, to_date


def _csv(*lines):
    return '\n'.join(lines).encode('utf-8')


# =============================================================================
# Coercion helpers
# =============================================================================

class TestCoercion:

    @pytest.mark.parametrize('raw,expected', [
        ('45.5', Decimal('45.5')),
        ('45.5%', Decimal('45.5')),
        ('$60', Decimal('60')),
        ('  12.99 USD', Decimal('12.99')),
        ('-7.50', Decimal('-7.50')),
        ('.5', Decimal('.5')),
    ])
    def test_decimal_leading_number(self, raw, expected):
        assert to_decimal(raw) == expected

    def test_decimal_without_number(self):
        with pytest.raises(ValueError):
            to_decimal('about forty')

    @pytest.mark.parametrize('raw,expected', [
        ('12', 12),
        ('12 years', 12),
        ('12.9', 12),
    ])
    def test_int_leading_number(self, raw, expected):
        assert to_int(raw) == expected

    def test_int_without_number(self):
        with pytest.raises(ValueError):
            to_int('NAS')

    @pytest.mark.parametrize('raw,expected', [
        ('yes', True),
        ('Yes', True),
        ('YES', True),
        ('1', True),
        ('no', False),
        ('true', False),
        ('0', False),
    ])
    def test_bool(self, raw, expected):
        assert to_bool(raw) is expected

    @pytest.mark.parametrize('raw', ['2023-04-01', '04/01/2023', '2023/04/01'])
    def test_date_formats(self, raw):
        assert to_date(raw) == date(2023, 4, 1)

    def test_date_garbage(self):
        with pytest.raises(ValueError):
            to_date('spring 2023')


class TestMapSubcategoryToType:

    @pytest.mark.parametrize('subcategory,expected', [
        ('Bourbon', 'bourbon'),
        ('Rye', 'rye'),
        ('Single Malt Scotch', 'scotch'),
        ('Blended Scotch', 'scotch'),
        ('Single Grain', 'scotch'),
        ('Tennessee Whiskey', 'tennessee'),
        ('Canadian Whisky', 'canadian'),
        ('Irish Single Pot Still', 'irish'),
        ('Japanese Whisky', 'japanese'),
        ('Wheated Bourbon', 'other'),
        ('American Single Malt', 'scotch'),
        ('Rum', 'other'),
    ])
    def test_mapping(self, subcategory, expected):
        assert map_subcategory_to_type(subcategory) == expected


# =============================================================================
# Import
# =============================================================================

@pytest.mark.django_db
class TestImportNativeFormat:

    def test_basic_import(self, editor):
        content = _csv(
            'Name,Type,Distillery,Age,ABV,Quantity,MSRP,Purchase Date,Is Opened',
            'Eagle Rare,Bourbon,Buffalo Trace,10,45,2,39.99,03/15/2024,Yes',
        )

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary == {'total': 1, 'imported': 1, 'skipped': 0, 'errors': 0}
        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.type == 'bourbon'
        assert whiskey.age == 10
        assert whiskey.abv == Decimal('45')
        assert whiskey.quantity == 2
        assert whiskey.purchase_date == date(2024, 3, 15)
        assert whiskey.is_opened is True
        assert result.imported == [{'name': 'Eagle Rare', 'type': 'bourbon', 'id': str(whiskey.id)}]

    def test_quoted_field_with_commas_is_one_field(self, editor):
        content = _csv(
            'Name,Type,Distillery,Tasting Notes,Rating',
            'Ardbeg 10,scotch,Ardbeg,"Smoky, peaty, 10/10",9',
        )

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary['imported'] == 1
        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.tasting_notes == 'Smoky, peaty, 10/10'
        assert whiskey.rating == Decimal('9')

    def test_quoted_field_with_newline_and_quotes(self, editor):
        content = _csv(
            'Name,Type,Distillery,Description',
            'Stagg,bourbon,Buffalo Trace,"Line one',
            'the ""hazmat"" one"',
        )

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.total == 1
        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.description == 'Line one\nthe "hazmat" one'

    def test_quotes_inside_a_value_are_kept(self, editor):
        content = _csv(
            'Name,Type,Distillery,Description,Nose Notes',
            'Weller",bourbon,Buffalo Trace,"""Best"" dram","ends ""here"""',
        )

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary['imported'] == 1
        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.name == 'Weller"'
        assert whiskey.description == '"Best" dram'
        assert whiskey.nose_notes == 'ends "here"'

    def test_bom_and_crlf(self, editor):
        content = '\ufeffName,Type,Distillery\r\nWeller,bourbon,Buffalo Trace\r\n'.encode('utf-8')

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary['imported'] == 1

    def test_unknown_headers_are_ignored(self, editor):
        content = _csv(
            'Name,Type,Distillery,Favourite Glass',
            'Weller,bourbon,Buffalo Trace,Glencairn',
        )

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary['imported'] == 1

    def test_empty_value_keeps_default(self, editor):
        content = _csv(
            'Name,Type,Distillery,Quantity,Times Tasted',
            'Weller,bourbon,Buffalo Trace,,',
        )

        import_whiskeys_csv(owner=editor, content=content)

        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.quantity == 1
        assert whiskey.times_tasted == 0

    def test_blank_lines_are_dropped(self, editor):
        content = _csv(
            'Name,Type,Distillery',
            '',
            'Weller,bourbon,Buffalo Trace',
            '   ',
            'Stagg,bourbon,Buffalo Trace',
            '',
        )

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary == {'total': 2, 'imported': 2, 'skipped': 0, 'errors': 0}


@pytest.mark.django_db
class TestImportForeignFormat:

    def test_category_and_subcategory(self, editor):
        content = _csv(
            'Name,Category,Subcategory,Distillery',
            'Old Forester 1920,Whiskey,Bourbon,Brown-Forman',
            'Glenfiddich 12,Whiskey,Single Malt Scotch,Glenfiddich',
        )

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary['imported'] == 2
        types = dict(Whiskey.objects.values_list('name', 'type'))
        assert types == {'Old Forester 1920': 'bourbon', 'Glenfiddich 12': 'scotch'}

    def test_abv_derived_from_proof(self, editor):
        content = _csv(
            'Name,Subcategory,Distillery,Proof',
            'Old Forester 1920,Bourbon,Brown-Forman,100',
        )

        import_whiskeys_csv(owner=editor, content=content)

        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.proof == Decimal('100')
        assert whiskey.abv == Decimal('50')

    def test_explicit_abv_wins_over_proof(self, editor):
        content = _csv(
            'Name,Subcategory,Distillery,Proof,ABV',
            'Odd One,Bourbon,Somewhere,100,49',
        )

        import_whiskeys_csv(owner=editor, content=content)

        assert Whiskey.objects.get(created_by=editor).abv == Decimal('49')

    @pytest.mark.parametrize('status_value,expected', [
        ('Unopened', False),
        ('Opened', True),
        ('Finished', False),
    ])
    def test_is_opened_derived_from_status(self, editor, status_value, expected):
        content = _csv(
            'Name,Subcategory,Distillery,Status',
            f'Old Forester 1920,Bourbon,Brown-Forman,{status_value}',
        )

        import_whiskeys_csv(owner=editor, content=content)

        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.status == status_value
        assert whiskey.is_opened is expected

    def test_explicit_is_opened_wins_over_status(self, editor):
        content = _csv(
            'Name,Type,Distillery,Status,Is Opened',
            'Weller,bourbon,Buffalo Trace,Unopened,Yes',
        )

        import_whiskeys_csv(owner=editor, content=content)

        assert Whiskey.objects.get(created_by=editor).is_opened is True

    def test_secondary_and_paid(self, editor):
        content = _csv(
            'Name,Subcategory,Distillery,Secondary,Paid',
            'Old Forester 1920,Bourbon,Brown-Forman,$75,$59.99',
        )

        import_whiskeys_csv(owner=editor, content=content)

        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.secondary_price == Decimal('75')
        assert whiskey.purchase_price == Decimal('59.99')

    def test_rarity_and_notes_appended_to_private_notes(self, editor):
        content = _csv(
            'Name,Subcategory,Distillery,Rarity,Notes',
            'Old Forester 1920,Bourbon,Brown-Forman,Common,Gift from Dad',
        )

        import_whiskeys_csv(owner=editor, content=content)

        whiskey = Whiskey.objects.get(created_by=editor)
        assert whiskey.private_notes == 'Rarity: Common\nGift from Dad'


@pytest.mark.django_db
class TestImportRowOutcomes:

    @pytest.mark.parametrize('row', [
        ',bourbon,Buffalo Trace',
        'Weller,,Buffalo Trace',
        'Weller,bourbon,',
    ])
    def test_missing_required_field_is_skipped(self, editor, row):
        content = _csv('Name,Type,Distillery', row)

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary == {'total': 1, 'imported': 0, 'skipped': 1, 'errors': 0}
        assert result.skipped == ['Row 2: Missing required fields (name, type, or distillery)']
        assert not Whiskey.objects.exists()

    def test_invalid_type_is_skipped(self, editor):
        content = _csv('Name,Type,Distillery', 'Smirnoff,Vodka,Diageo')

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.skipped == ['Row 2: Invalid whiskey type "vodka"']

    def test_out_of_range_value_is_an_error(self, editor):
        content = _csv('Name,Type,Distillery,ABV', 'Overproof,rye,X,150')

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary == {'total': 1, 'imported': 0, 'skipped': 0, 'errors': 1}
        assert result.errors[0].startswith('Row 2: abv')

    def test_oversized_whole_number_is_a_field_error(self, editor):
        content = _csv('Name,Type,Distillery,Age', 'Ancient,scotch,X,' + '9' * 30)

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary == {'total': 1, 'imported': 0, 'skipped': 0, 'errors': 1}
        assert result.errors == ['Row 2: age: Must be at most 2147483647']

    def test_unparseable_number_is_an_error(self, editor):
        content = _csv('Name,Type,Distillery,Age', 'Mystery,rye,X,NAS')

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary['errors'] == 1
        assert result.errors[0].startswith('Row 2: Age')

    def test_missing_field_wins_over_bad_value(self, editor):
        content = _csv('Name,Type,Distillery,Age', ',rye,X,NAS')

        result = import_whiskeys_csv(owner=editor, content=content)

        assert result.summary == {'total': 1, 'imported': 0, 'skipped': 1, 'errors': 0}

    def test_mixed_batch_accounts_for_every_row(self, editor):
        content = _csv(
            'Name,Type,Distillery,Rating',
            'Good One,bourbon,Buffalo Trace,8',
            'No Distillery,bourbon,,7',
            'Bad Rating,rye,X,11',
            'Vodka,vodka,X,5',
            'Another Good,irish,Midleton,9',
        )

        result = import_whiskeys_csv(owner=editor, content=content)

        summary = result.summary
        assert summary == {'total': 5, 'imported': 2, 'skipped': 2, 'errors': 1}
        assert summary['imported'] + summary['skipped'] + summary['errors'] == summary['total']
        assert result.skipped == [
            'Row 3: Missing required fields (name, type, or distillery)',
            'Row 5: Invalid whiskey type "vodka"',
        ]
        assert result.errors[0].startswith('Row 4: ')
        assert Whiskey.objects.filter(created_by=editor).count() == 2

    def test_quantity_override_applies_to_import(self, override_user, editor):
        content = _csv('Name,Type,Distillery,Quantity', 'Finished,bourbon,X,0')

        import_whiskeys_csv(owner=override_user, content=content)
        import_whiskeys_csv(owner=editor, content=content)

        assert Whiskey.objects.get(created_by=override_user).quantity == 1
        assert Whiskey.objects.get(created_by=editor).quantity == 0

    def test_result_dict(self, editor):
        content = _csv('Name,Type,Distillery', 'Weller,bourbon,Buffalo Trace')

        data = import_whiskeys_csv(owner=editor, content=content).to_dict()

        assert set(data) == {'summary', 'imported', 'skipped', 'errors'}


@pytest.mark.django_db
class TestImportFileErrors:

    def test_header_only(self, editor):
        with pytest.raises(CSVFormatError, match='CSV file is empty or invalid'):
            import_whiskeys_csv(owner=editor, content=_csv('Name,Type,Distillery'))

    def test_empty(self, editor):
        with pytest.raises(CSVFormatError):
            import_whiskeys_csv(owner=editor, content=b'')

    def test_not_utf8(self, editor):
        with pytest.raises(CSVFormatError):
            import_whiskeys_csv(owner=editor, content='Name\nCaf\xe9'.encode('latin-1') + b'\xff\xfe')
