"""
core/http.py
────────────
JSON request/response helpers used by every API view.

ApiError         – raise from a view or service to return {"error": …}
read_json        – parse the request body into a dict
bind_json_form   – bind a ModelForm to a JSON payload (partial updates too)
validate_form    – cleaned_data or ApiError with per-field details
"""

import json

from django.core.exceptions import FieldDoesNotExist
from django.forms.models import model_to_dict
from django.http import JsonResponse


class ApiError(Exception):
    """An error that maps directly onto an HTTP status and a JSON body."""

    def __init__(self, message, status=400, details=None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details


def json_error(message, status=400, details=None):
    payload = {'error': message}
    if details:
        payload['details'] = details
    return JsonResponse(payload, status=status)


def read_json(req):
    """Return the JSON object in the request body ({} when the body is empty)."""
    if not req.body:
        return {}
    try:
        payload = json.loads(req.body)
    except (ValueError, UnicodeDecodeError):
        raise ApiError('Request body must be valid JSON.')
    if not isinstance(payload, dict):
        raise ApiError('Request body must be a JSON object.')
    return payload


def bind_json_form(form_class, payload, instance=None, **kwargs):
    """
    Bind *form_class* to a JSON payload.

    HTML forms send every field, JSON clients send only what they mean to
    change.  Missing keys are filled from the instance (PATCH) or from the
    model field defaults (create) so checkboxes and choices keep their value
    instead of collapsing to False / ''.
    """
    field_names = list(form_class.base_fields)
    model = form_class._meta.model

    if instance is not None:
        data = model_to_dict(instance, fields=field_names)
    else:
        data = {}
        for name in field_names:
            try:
                model_field = model._meta.get_field(name)
            except FieldDoesNotExist:
                continue
            if model_field.has_default():
                data[name] = model_field.get_default()

    data.update({key: value for key, value in payload.items() if key in field_names})
    return form_class(data=data, instance=instance, **kwargs)


def form_error_details(form):
    return {field: [str(msg) for msg in errors] for field, errors in form.errors.items()}


def validate_form(form):
    """Return form.cleaned_data, or raise ApiError carrying the field errors."""
    if not form.is_valid():
        raise ApiError('Invalid data.', details=form_error_details(form))
    return form.cleaned_data


def parse_int(value, name):
    """Coerce a JSON/query value to int or raise a 400."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ApiError(f'{name} must be an integer.')
