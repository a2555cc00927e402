"""
camps/views/registrations.py
────────────────────────────
Registering children for camps and listing registrations.
"""

from django.http import JsonResponse

from core.decorators import allow_methods, api_login_required, parent_required, require_POST_or_405
from core.http import json_error, read_json, validate_form

from ..forms import RegistrationForm
from ..models import Registration
from ..serializers import camp_summary, registration_to_dict
from ..services import register_child
from .utils import get_live_camp


@parent_required
@require_POST_or_405
def register_view(req):
    """
    Register one of the parent's children.  201 with `waitlisted: true`
    when the camp is full but keeps a waitlist.
    """
    cleaned = validate_form(RegistrationForm(data=read_json(req)))
    registration = register_child(
        req.user,
        cleaned['camp_id'],
        cleaned['child_id'],
        cleaned['custom_field_responses'],
    )
    return JsonResponse(registration_to_dict(registration), status=201)


@api_login_required
@allow_methods('GET')
def camp_registrations_view(req, camp_id):
    """
    Organization staff see every registration (with parent contact);
    parents see only their own children's; anyone else gets 403.
    """
    camp = get_live_camp(camp_id)
    registrations = camp.registrations.select_related('child__parent')

    if req.user.belongs_to(camp.organization_id):
        return JsonResponse({
            'registrations': [registration_to_dict(r, include_parent=True) for r in registrations],
            'permissions':   {'can_manage': req.user.can_manage(camp.organization_id)},
        })

    if req.user.is_parent:
        own = registrations.filter(child__parent=req.user)
        return JsonResponse({
            'registrations': [registration_to_dict(r) for r in own],
            'permissions':   {'can_manage': False},
        })

    return json_error('You cannot view registrations for this camp.', status=403)


@parent_required
@allow_methods('GET')
def parent_registrations_view(req):
    registrations = (
        Registration.objects
        .filter(child__parent=req.user)
        .select_related('camp', 'child')
        .order_by('-registered_at')
    )
    data = []
    for registration in registrations:
        entry = registration_to_dict(registration)
        entry['camp'] = camp_summary(registration.camp)
        data.append(entry)
    return JsonResponse(data, safe=False)
