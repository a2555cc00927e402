"""
camps/views/camps.py
────────────────────
Camp CRUD, cancellation, sharing, schedules, staff and the organization
dashboard.

SECURITY: writes require a camp creator / manager of the camp's own
organization (core.permissions.ensure_manager).
"""

from django.core.cache import cache
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404

from accounts.models import Organization
from core.cache import PUBLIC_CAMPS_TIMEOUT, public_camps_key
from core.decorators import (
    allow_methods,
    api_login_required,
    organization_manager_required,
    require_POST_or_405,
)
from core.http import bind_json_form, read_json, validate_form
from core.permissions import ensure_manager, ensure_member

from ..forms import CampForm, CampStaffForm, CancelForm, ScheduleExceptionForm
from ..models import Camp
from ..selectors import camps_visible_to, filter_camps, organization_dashboard, public_camps
from ..serializers import camp_summary, camp_to_dict, schedule_exception_to_dict, schedule_to_dict
from ..services import (
    add_camp_staff,
    cancel_camp,
    create_camp,
    create_schedule_exception,
    update_camp,
)
from ..share import camp_share_url, generate_share_qr
from .utils import can_manage_camp, get_live_camp, schedule_forms_from, sport_from


# ── List / create ─────────────────────────────────────────────────────────────

@allow_methods('GET', 'POST')
def camps_view(req):
    """
    GET  – camps visible to the caller, filtered by the query string.
           Organization staff get their own camps; everyone else gets the
           (cached) public listing.
    POST – create a camp for the caller's organization.
    """
    if req.method == 'POST':
        return _create_camp(req)

    user = req.user
    if user.is_authenticated and (user.is_platform_admin or user.is_organization_staff):
        camps = filter_camps(camps_visible_to(user), req.GET)
        return JsonResponse([camp_summary(camp) for camp in camps], safe=False)

    key = public_camps_key(req.GET.urlencode())
    data = cache.get(key)
    if data is None:
        data = [camp_summary(camp) for camp in filter_camps(public_camps(), req.GET)]
        cache.set(key, data, PUBLIC_CAMPS_TIMEOUT)
    return JsonResponse(data, safe=False)


@organization_manager_required
def _create_camp(req):
    payload = read_json(req)
    form = bind_json_form(CampForm, payload)
    validate_form(form)
    sport = sport_from(payload)
    schedules = schedule_forms_from(payload) or []

    camp = create_camp(req.user.organization, req.user, form, sport, schedules)
    return JsonResponse(camp_to_dict(camp, can_manage=True), status=201)


# ── Detail / update / delete ──────────────────────────────────────────────────

@allow_methods('GET', 'PATCH', 'DELETE')
def camp_detail_view(req, camp_id):
    camp = get_live_camp(camp_id)

    if req.method == 'GET':
        return JsonResponse(camp_to_dict(camp, can_manage=can_manage_camp(req.user, camp)))

    ensure_manager(req.user, camp.organization_id)

    if req.method == 'DELETE':
        camp.soft_delete()
        return HttpResponse(status=204)

    payload = read_json(req)
    form = bind_json_form(CampForm, payload, instance=camp)
    validate_form(form)
    camp = update_camp(camp, form, sport_from(payload, camp=camp), schedule_forms_from(payload))
    return JsonResponse(camp_to_dict(camp, can_manage=True))


@allow_methods('GET')
def camp_by_slug_view(req, slug):
    camp = get_object_or_404(Camp.objects.select_related('organization'), slug=slug, is_deleted=False)
    return JsonResponse(camp_to_dict(camp, can_manage=can_manage_camp(req.user, camp)))


@api_login_required
@require_POST_or_405
def cancel_camp_view(req, camp_id):
    camp = get_live_camp(camp_id)
    ensure_manager(req.user, camp.organization_id)
    cleaned = validate_form(CancelForm(data=read_json(req)))
    cancel_camp(camp, cleaned.get('reason', ''))
    return JsonResponse(camp_to_dict(camp, can_manage=True))


@allow_methods('GET')
def camp_share_view(req, camp_id):
    """Share link plus a base64 PNG QR code pointing at it."""
    camp = get_live_camp(camp_id)
    url = camp_share_url(camp)
    return JsonResponse({
        'slug':      camp.slug,
        'share_url': url,
        'qr_code':   generate_share_qr(url),
    })


# ── Schedules ─────────────────────────────────────────────────────────────────

@allow_methods('GET')
def schedules_view(req, camp_id):
    camp = get_live_camp(camp_id)
    return JsonResponse([schedule_to_dict(s) for s in camp.schedules.all()], safe=False)


@allow_methods('GET', 'POST')
def schedule_exceptions_view(req, camp_id):
    camp = get_live_camp(camp_id)

    if req.method == 'GET':
        exceptions = camp.schedule_exceptions.all()
        return JsonResponse([schedule_exception_to_dict(e) for e in exceptions], safe=False)

    ensure_manager(req.user, camp.organization_id)
    form = bind_json_form(ScheduleExceptionForm, read_json(req), camp=camp)
    validate_form(form)
    exception = create_schedule_exception(camp, form)
    return JsonResponse(schedule_exception_to_dict(exception), status=201)


# ── Staff ─────────────────────────────────────────────────────────────────────

@api_login_required
@allow_methods('GET', 'POST')
def camp_staff_view(req, camp_id):
    camp = get_live_camp(camp_id)

    if req.method == 'GET':
        ensure_member(req.user, camp.organization_id)
        staff = camp.staff.select_related('user')
        return JsonResponse([
            {'id': s.id, 'user_id': s.user_id, 'name': s.user.display_name, 'role': s.role}
            for s in staff
        ], safe=False)

    ensure_manager(req.user, camp.organization_id)
    cleaned = validate_form(CampStaffForm(data=read_json(req)))
    assignment = add_camp_staff(camp, cleaned['user_id'], cleaned['role'])
    return JsonResponse(
        {'id': assignment.id, 'user_id': assignment.user_id, 'role': assignment.role},
        status=201,
    )


# ── Organization dashboard ────────────────────────────────────────────────────

@api_login_required
@allow_methods('GET')
def organization_dashboard_view(req, org_id):
    org = get_object_or_404(Organization, pk=org_id)
    ensure_member(req.user, org.id)
    return JsonResponse(organization_dashboard(org))
