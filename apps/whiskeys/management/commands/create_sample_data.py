"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear

This creates:
- 3 users, one per role (admin, editor, viewer)
- A small whiskey collection for the admin and the editor
"""

from datetime import date
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import Role, User
from apps.whiskeys.models import Whiskey
from apps.whiskeys.services import create_whiskey


SAMPLE_USERS = [
    ('admin', 'admin@example.com', 'admin123', Role.ADMIN),
    ('alice', 'alice@example.com', 'password123', Role.EDITOR),
    ('victor', 'victor@example.com', 'password123', Role.VIEWER),
]

SAMPLE_WHISKEYS = [
    {
        'name': 'Buffalo Trace',
        'type': 'bourbon',
        'distillery': 'Buffalo Trace',
        'region': 'Kentucky',
        'country': 'USA',
        'proof': Decimal('90'),
        'abv': Decimal('45'),
        'size': '750ml',
        'msrp': Decimal('29.99'),
        'purchase_price': Decimal('34.99'),
        'purchase_date': date(2024, 3, 2),
        'rating': Decimal('7.5'),
        'tasting_notes': 'Vanilla, caramel, a little mint',
        'status': 'Opened',
        'is_opened': True,
    },
    {
        'name': 'Lagavulin 16',
        'type': 'scotch',
        'distillery': 'Lagavulin',
        'region': 'Islay',
        'country': 'Scotland',
        'age': 16,
        'abv': Decimal('43'),
        'size': '700ml',
        'msrp': Decimal('99.99'),
        'rating': Decimal('9'),
        'nose_notes': 'Smoky, peaty, iodine',
        'cask_type': 'Ex-bourbon and sherry',
    },
    {
        'name': 'Redbreast 12',
        'type': 'irish',
        'distillery': 'Midleton',
        'country': 'Ireland',
        'age': 12,
        'abv': Decimal('40'),
        'quantity': 2,
        'msrp': Decimal('69.99'),
        'rating': Decimal('8.5'),
    },
    {
        'name': 'Rittenhouse Bottled in Bond',
        'type': 'rye',
        'distillery': 'Heaven Hill',
        'country': 'USA',
        'proof': Decimal('100'),
        'abv': Decimal('50'),
        'msrp': Decimal('27.99'),
        'rating': Decimal('8'),
    },
    {
        'name': 'Yamazaki 12',
        'type': 'japanese',
        'distillery': 'Suntory',
        'country': 'Japan',
        'age': 12,
        'abv': Decimal('43'),
        'msrp': Decimal('150.00'),
        'secondary_price': Decimal('185.00'),
        'is_investment_bottle': True,
        'limited_edition': False,
    },
]


class Command(BaseCommand):
    help = 'Create sample users and whiskey collections'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete the sample users and their collections first',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing sample data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.create_collection(users['admin'], SAMPLE_WHISKEYS[:2])
        self.create_collection(users['alice'], SAMPLE_WHISKEYS)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        for username, _, password, role in SAMPLE_USERS:
            self.stdout.write(f'  {username} / {password} ({role})')

    def clear_data(self):
        usernames = [username for username, *_ in SAMPLE_USERS]
        Whiskey.objects.filter(created_by__username__in=usernames).delete()
        User.objects.filter(username__in=usernames).delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        users = {}
        for username, email, password, role in SAMPLE_USERS:
            user, _ = User.objects.get_or_create(
                username=username,
                defaults={
                    'email': email,
                    'role': role,
                    'is_staff': role == Role.ADMIN,
                    'is_superuser': role == Role.ADMIN,
                }
            )
            user.set_password(password)
            user.save()
            users[username] = user

        return users

    def create_collection(self, owner, samples):
        self.stdout.write(f'  Creating whiskeys for {owner.username}...')

        for sample in samples:
            exists = Whiskey.objects.filter(
                created_by=owner,
                name=sample['name'],
                distillery=sample['distillery'],
            ).exists()
            if not exists:
                create_whiskey(owner=owner, data=sample)
