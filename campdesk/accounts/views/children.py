"""
accounts/views/children.py
──────────────────────────
Parent-only management of their children and the sports they play.
"""

from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.shortcuts import get_object_or_404

from core.decorators import allow_methods, parent_required
from core.http import ApiError, bind_json_form, form_error_details, read_json, validate_form

from ..forms import ChildForm, ChildSportForm
from ..models import Child
from ..serializers import child_to_dict
from ..services import save_child


def _clean_sports(payload):
    """
    Validate `sports_interests` from the payload.
    Returns None when the key is absent (leave sports untouched).
    """
    entries = payload.get('sports_interests')
    if entries is None:
        return None
    if not isinstance(entries, list):
        raise ApiError('sports_interests must be a list.')

    cleaned, seen = [], set()
    for index, entry in enumerate(entries):
        form = ChildSportForm(data=entry if isinstance(entry, dict) else {})
        if not form.is_valid():
            raise ApiError('Invalid sports interest.', details={str(index): form_error_details(form)})
        sport = form.cleaned_data['sport_id']
        if sport.id in seen:
            raise ValidationError(f'{sport.name} is listed more than once.')
        seen.add(sport.id)
        cleaned.append(form.cleaned_data)
    return cleaned


def _parent_child(req, child_id):
    child = get_object_or_404(Child, pk=child_id)
    if child.parent_id != req.user.id:
        raise ApiError('This child does not belong to you.', status=403)
    return child


@parent_required
@allow_methods('GET', 'POST')
def children_view(req):
    if req.method == 'GET':
        children = req.user.children.prefetch_related('sports')
        return JsonResponse([child_to_dict(child) for child in children], safe=False)

    payload = read_json(req)
    form = bind_json_form(ChildForm, payload)
    validate_form(form)
    child = save_child(req.user, form, _clean_sports(payload) or [])
    return JsonResponse(child_to_dict(child), status=201)


@parent_required
@allow_methods('GET', 'PUT', 'PATCH')
def child_detail_view(req, child_id):
    child = _parent_child(req, child_id)

    if req.method == 'GET':
        return JsonResponse(child_to_dict(child))

    payload = read_json(req)
    form = bind_json_form(ChildForm, payload, instance=child)
    validate_form(form)
    child = save_child(req.user, form, _clean_sports(payload))
    return JsonResponse(child_to_dict(child))
