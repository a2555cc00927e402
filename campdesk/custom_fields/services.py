"""
custom_fields/services.py
─────────────────────────
Attaching fields to camps, ordering them, validating and storing answers.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from .models import CampCustomField, CampMetaField, CustomField, CustomFieldResponse
from .validation import clean_value

logger = logging.getLogger(__name__)


def registration_fields(camp, include_internal=True):
    """The camp's registration questions in display order."""
    links = (
        camp.custom_fields
        .select_related('custom_field')
        .filter(custom_field__field_source=CustomField.Source.REGISTRATION)
    )
    if not include_internal:
        links = links.filter(custom_field__is_internal=False)
    return links


def _submitted_value(entry):
    if entry.get('response_array') is not None:
        return entry['response_array']
    return entry.get('response')


def clean_registration_responses(camp, responses):
    """
    Validate a registration's answers against the camp's form.

    *responses* is a list of {custom_field_id, response, response_array}.
    Every required public question must be answered; internal questions are
    filled in by staff and only checked when present.  Returns a list of
    (field, response, response_array) tuples; raises ValidationError keyed
    by field id.
    """
    links = {link.custom_field_id: link for link in registration_fields(camp)}

    submitted = {}
    for entry in responses:
        try:
            field_id = int(entry.get('custom_field_id'))
        except (TypeError, ValueError):
            raise ValidationError('Each response needs a numeric custom_field_id.')
        if field_id not in links:
            raise ValidationError(f'Field {field_id} is not part of this camp\'s registration form.')
        submitted[field_id] = _submitted_value(entry)

    cleaned, errors = [], {}
    for field_id, link in links.items():
        field = link.custom_field
        if field.is_internal and field_id not in submitted:
            continue
        try:
            response, response_array = clean_value(field, submitted.get(field_id), link.is_required)
        except ValidationError as exc:
            errors[str(field_id)] = exc.messages
            continue
        if field_id in submitted:
            cleaned.append((field, response, response_array))

    if errors:
        raise ValidationError(errors)
    return cleaned


def save_registration_responses(registration, cleaned):
    CustomFieldResponse.objects.bulk_create([
        CustomFieldResponse(
            registration=registration,
            custom_field=field,
            response=response,
            response_array=response_array,
        )
        for field, response, response_array in cleaned
    ])


# ── Camp form layout ──────────────────────────────────────────────────────────

def attach_field(camp, field, order=None, required=None):
    if field.organization_id != camp.organization_id:
        raise ValidationError('This field belongs to another organization.')
    if field.field_source != CustomField.Source.REGISTRATION:
        raise ValidationError('Only registration fields can be added to a camp form. Use meta fields instead.')
    if camp.custom_fields.filter(custom_field=field).exists():
        raise ValidationError('This field is already on the camp form.')

    if order is None:
        order = camp.custom_fields.count()
    return CampCustomField.objects.create(camp=camp, custom_field=field, order=order, required=required)


@transaction.atomic
def reorder_fields(camp, entries):
    """
    *entries* is [{id, order}, …] of CampCustomField ids.  Every id must
    belong to *camp*.  Returns the camp's fields in their new order.
    """
    if not isinstance(entries, list):
        raise ValidationError('fields must be a list of {id, order} objects.')

    links = {link.id: link for link in camp.custom_fields.select_for_update()}
    for entry in entries:
        try:
            link_id, order = int(entry['id']), int(entry['order'])
        except (KeyError, TypeError, ValueError):
            raise ValidationError('Each entry needs an integer id and order.')
        if link_id not in links:
            raise ValidationError(f'Field {link_id} is not on this camp form.')
        if order < 0:
            raise ValidationError('order must not be negative.')
        links[link_id].order = order

    CampCustomField.objects.bulk_update(list(links.values()), ['order'])
    return camp.custom_fields.select_related('custom_field').all()


# ── Camp meta fields ──────────────────────────────────────────────────────────

def _check_meta_field(camp, field):
    if field.organization_id != camp.organization_id:
        raise ValidationError('This field belongs to another organization.')
    if field.field_source != CustomField.Source.CAMP:
        raise ValidationError('Only camp fields can hold camp values.')


def set_meta_field(camp, field, value):
    _check_meta_field(camp, field)
    if camp.meta_fields.filter(custom_field=field).exists():
        raise ValidationError('This camp already has a value for this field.')
    response, response_array = clean_value(field, value, field.required)
    return CampMetaField.objects.create(
        camp=camp,
        custom_field=field,
        response=response,
        response_array=response_array,
    )


def update_meta_field(meta, value):
    meta.response, meta.response_array = clean_value(meta.custom_field, value, meta.custom_field.required)
    meta.save(update_fields=['response', 'response_array', 'updated_at'])
    return meta
