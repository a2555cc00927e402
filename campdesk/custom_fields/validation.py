"""
custom_fields/validation.py
───────────────────────────
Checks a single answer against its CustomField: required-ness, the option
list of select fields and the validation type (email, phone, number, date).
"""

import re
from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.utils.dateparse import parse_date

from .models import CustomField

PHONE_RE = re.compile(r'^\+?[0-9\s().-]{7,20}$')

SINGLE_CHOICE_TYPES = (CustomField.FieldType.DROPDOWN, CustomField.FieldType.SINGLE_SELECT)


def clean_value(field, value, required):
    """
    Validate *value* for *field*.

    Returns a (response, response_array) pair ready to store: multi-select
    answers go into response_array, everything else into response.
    Raises ValidationError with a message naming the field.
    """
    required = required or field.validation_type == CustomField.ValidationType.REQUIRED

    if field.field_type == CustomField.FieldType.MULTI_SELECT:
        return '', _clean_multi(field, value, required)

    if value is None:
        text = ''
    elif isinstance(value, (str, int, float)) and not isinstance(value, bool):
        text = str(value).strip()
    else:
        raise ValidationError(f'{field.label} must be a single value.')

    if not text:
        if required:
            raise ValidationError(f'{field.label} is required.')
        return '', None

    if field.field_type in SINGLE_CHOICE_TYPES and text not in field.options:
        raise ValidationError(f'{field.label}: "{text}" is not one of the options.')

    _check_validation_type(field, text)
    return text, None


def _clean_multi(field, value, required):
    if value in (None, ''):
        values = []
    elif isinstance(value, list) and all(isinstance(item, str) for item in value):
        values = [item for item in value if item]
    else:
        raise ValidationError(f'{field.label} must be a list of options.')

    if required and not values:
        raise ValidationError(f'{field.label} is required.')
    invalid = [item for item in values if item not in field.options]
    if invalid:
        raise ValidationError(f'{field.label}: {", ".join(invalid)} not in the options.')
    return values


def _check_validation_type(field, text):
    kind = field.validation_type

    if kind == CustomField.ValidationType.EMAIL:
        try:
            validate_email(text)
        except ValidationError:
            raise ValidationError(f'{field.label} must be a valid email address.')

    elif kind == CustomField.ValidationType.PHONE:
        if not PHONE_RE.match(text) or sum(ch.isdigit() for ch in text) < 7:
            raise ValidationError(f'{field.label} must be a valid phone number.')

    elif kind == CustomField.ValidationType.NUMBER:
        try:
            number = Decimal(text)
        except InvalidOperation:
            number = None
        if number is None or not number.is_finite():
            raise ValidationError(f'{field.label} must be a number.')

    elif kind == CustomField.ValidationType.DATE:
        try:
            parsed = parse_date(text)
        except ValueError:
            parsed = None
        if parsed is None:
            raise ValidationError(f'{field.label} must be a date (YYYY-MM-DD).')
