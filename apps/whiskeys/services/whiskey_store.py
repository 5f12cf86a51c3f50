"""
Owner-scoped whiskey data access.

Every function takes the acting user as a required keyword argument and
filters on ``created_by`` before anything else, so there is no query path
that reaches another user's records. A record owned by someone else is
reported exactly like a record that does not exist.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.db.models import Q, QuerySet

from ..models import Whiskey, WhiskeyType
from .exceptions import WhiskeyNotFoundError, WhiskeyValidationError

User = get_user_model()

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Whiskey not found"

REQUIRED_FIELDS = ('name', 'type', 'distillery')

PROTECTED_FIELDS = frozenset(['id', 'created_by', 'created_at', 'updated_at'])

EDITABLE_FIELDS = {
    field.name: field
    for field in Whiskey._meta.concrete_fields
    if field.name not in PROTECTED_FIELDS
}

# Largest value every supported database stores in a PositiveIntegerField
MAX_POSITIVE_INT = 2147483647

# (minimum, maximum); decimal maximums also follow the field's max_digits
NUMERIC_BOUNDS = {
    'age': (0, MAX_POSITIVE_INT),
    'abv': (0, 100),
    'proof': (0, 200),
    'quantity': (0, MAX_POSITIVE_INT),
    'msrp': (0, None),
    'secondary_price': (0, None),
    'purchase_price': (0, None),
    'current_market_value': (0, None),
    'asking_price': (0, None),
    'rating': (0, 10),
    'remaining_volume': (0, 100),
    'times_tasted': (0, MAX_POSITIVE_INT),
}

DECIMAL_FIELDS = {
    name: field
    for name, field in EDITABLE_FIELDS.items()
    if isinstance(field, models.DecimalField)
}

NUMERIC_FIELDS = tuple(NUMERIC_BOUNDS) + tuple(
    name for name in DECIMAL_FIELDS if name not in NUMERIC_BOUNDS
)

SEARCH_FIELDS = (
    'name',
    'distillery',
    'region',
    'country',
    'description',
    'tasting_notes',
    'nose_notes',
    'palate_notes',
    'finish_notes',
)


def _prepare_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep editable fields only; map None onto non-nullable defaults."""
    cleaned = {}
    for name, value in data.items():
        field = EDITABLE_FIELDS.get(name)
        if field is None:
            continue
        if value is None and not field.null:
            value = field.get_default() if field.has_default() else ''
        if isinstance(value, str) and name in REQUIRED_FIELDS:
            value = value.strip()
        cleaned[name] = value
    return cleaned


def _validate_data(data: Dict[str, Any], *, partial: bool) -> None:
    for name in REQUIRED_FIELDS:
        if name in data:
            if not data[name]:
                raise WhiskeyValidationError(name, f"{name.capitalize()} is required")
        elif not partial:
            raise WhiskeyValidationError(name, f"{name.capitalize()} is required")

    if 'type' in data and data['type'] not in WhiskeyType.values:
        raise WhiskeyValidationError('type', f"Invalid whiskey type \"{data['type']}\"")

    for name in NUMERIC_FIELDS:
        value = data.get(name)
        if value is None:
            continue
        try:
            number = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise WhiskeyValidationError(name, "Must be a number")
        if not number.is_finite():
            raise WhiskeyValidationError(name, "Must be a number")

        minimum, maximum = NUMERIC_BOUNDS.get(name, (None, None))
        if minimum is not None and number < minimum:
            raise WhiskeyValidationError(name, f"Must be at least {minimum}")
        if maximum is not None and number > maximum:
            raise WhiskeyValidationError(name, f"Must be at most {maximum}")

        field = DECIMAL_FIELDS.get(name)
        if field is not None:
            whole_digits = field.max_digits - field.decimal_places
            if abs(number) >= Decimal(10) ** whole_digits:
                raise WhiskeyValidationError(
                    name, f"Must have at most {whole_digits} digits before the decimal point"
                )


def apply_quantity_override(*, owner: User, data: Dict[str, Any]) -> None:
    """
    Rewrite a quantity of 0 to 1 for the usernames listed in
    ``settings.QUANTITY_OVERRIDE_USERNAMES``.
    """
    usernames = getattr(settings, 'QUANTITY_OVERRIDE_USERNAMES', ())
    if owner.username in usernames and data.get('quantity') == 0:
        data['quantity'] = 1


def list_whiskeys(
    *,
    owner: User,
    whiskey_type: Optional[str] = None,
    distillery: Optional[str] = None
) -> QuerySet[Whiskey]:
    """
    List the owner's whiskeys with optional filters.

    Args:
        owner: User whose collection is listed
        whiskey_type: Exact whiskey type
        distillery: Case-insensitive distillery substring

    Returns:
        QuerySet ordered newest first, ties broken by id
    """
    queryset = Whiskey.objects.filter(created_by=owner)

    if whiskey_type:
        queryset = queryset.filter(type=whiskey_type)

    if distillery:
        queryset = queryset.filter(distillery__icontains=distillery)

    return queryset.order_by('-created_at', 'id')


def search_whiskeys(*, query: str, owner: User) -> QuerySet[Whiskey]:
    """Case-insensitive substring search across the owner's text fields."""
    condition = Q()
    for name in SEARCH_FIELDS:
        condition |= Q(**{f'{name}__icontains': query})

    return (
        Whiskey.objects
        .filter(created_by=owner)
        .filter(condition)
        .order_by('-created_at', 'id')
    )


def get_whiskey(*, whiskey_id, owner: User) -> Whiskey:
    """
    Get one of the owner's whiskeys.

    Raises:
        WhiskeyNotFoundError: If it doesn't exist or belongs to someone else
    """
    try:
        return Whiskey.objects.get(id=whiskey_id, created_by=owner)
    except (Whiskey.DoesNotExist, ValidationError):
        raise WhiskeyNotFoundError(NOT_FOUND_MESSAGE)


@transaction.atomic
def create_whiskey(*, owner: User, data: Dict[str, Any]) -> Whiskey:
    """
    Create a whiskey in the owner's collection.

    Unknown keys and any caller-supplied id, owner or timestamps are ignored.

    Args:
        owner: User who will own the record
        data: Field values

    Returns:
        Created Whiskey instance

    Raises:
        WhiskeyValidationError: If a required field is missing, the type is
            unknown or a number is out of range
    """
    cleaned = _prepare_data(data)
    _validate_data(cleaned, partial=False)
    apply_quantity_override(owner=owner, data=cleaned)

    whiskey = Whiskey.objects.create(created_by=owner, **cleaned)
    logger.debug("Created whiskey %s for %s", whiskey.id, owner.username)
    return whiskey


@transaction.atomic
def update_whiskey(*, whiskey_id, owner: User, data: Dict[str, Any]) -> Whiskey:
    """
    Update one of the owner's whiskeys.

    Returns:
        Updated Whiskey instance

    Raises:
        WhiskeyNotFoundError: If it doesn't exist or belongs to someone else
        WhiskeyValidationError: If the new values violate a constraint
    """
    try:
        whiskey = (
            Whiskey.objects
            .select_for_update()
            .get(id=whiskey_id, created_by=owner)
        )
    except (Whiskey.DoesNotExist, ValidationError):
        raise WhiskeyNotFoundError(NOT_FOUND_MESSAGE)

    cleaned = _prepare_data(data)
    _validate_data(cleaned, partial=True)
    apply_quantity_override(owner=owner, data=cleaned)

    for name, value in cleaned.items():
        setattr(whiskey, name, value)

    whiskey.save()
    return whiskey


@transaction.atomic
def delete_whiskey(*, whiskey_id, owner: User) -> bool:
    """
    Hard delete one of the owner's whiskeys.

    Returns:
        True if a record was removed, False if nothing owned matched
    """
    try:
        deleted, _ = Whiskey.objects.filter(id=whiskey_id, created_by=owner).delete()
    except ValidationError:
        return False
    return deleted > 0
