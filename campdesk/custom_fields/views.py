"""
custom_fields/views.py
──────────────────────
Organization question bank, per-camp registration forms, registration
answers and camp meta fields.

Visibility rules:
- organization staff see every field of their organization;
- parents see only non-internal fields and only their own children's
  answers;
- only camp creators / managers (or platform admins) change anything.
"""

from django.core.exceptions import PermissionDenied
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404

from accounts.models import Organization
from camps.models import Camp, Registration
from core.decorators import allow_methods, api_login_required
from core.http import bind_json_form, read_json, validate_form
from core.permissions import ensure_manager

from .forms import CampFieldForm, CampFieldUpdateForm, CustomFieldForm, MetaFieldForm
from .models import CampCustomField, CampMetaField, CustomField
from .serializers import camp_field_to_dict, field_to_dict, meta_field_to_dict, response_to_dict
from .services import (
    attach_field,
    registration_fields,
    reorder_fields,
    set_meta_field,
    update_meta_field,
)


def _sees_internal(user, organization_id):
    """Organization staff see internal fields; parents and outsiders do not."""
    if user.belongs_to(organization_id):
        return True
    if user.is_parent:
        return False
    raise PermissionDenied('You do not have access to these fields.')


def _live_camp(camp_id):
    return get_object_or_404(Camp, pk=camp_id, is_deleted=False)


# ── Organization fields ───────────────────────────────────────────────────────

@api_login_required
@allow_methods('GET', 'POST')
def organization_fields_view(req, org_id):
    """
    GET  – ?source=registration|camp, ?internal=true|false filters.
    POST – create a field (managers only).
    """
    org = get_object_or_404(Organization, pk=org_id)

    if req.method == 'POST':
        ensure_manager(req.user, org.id)
        form = bind_json_form(CustomFieldForm, read_json(req), organization=org)
        validate_form(form)
        field = form.save(commit=False)
        field.organization = org
        field.save()
        return JsonResponse(field_to_dict(field), status=201)

    fields = org.custom_fields.all()
    if not _sees_internal(req.user, org.id):
        fields = fields.filter(is_internal=False)
    elif req.GET.get('internal') in ('true', 'false'):
        fields = fields.filter(is_internal=req.GET['internal'] == 'true')
    if req.GET.get('source'):
        fields = fields.filter(field_source=req.GET['source'])
    return JsonResponse([field_to_dict(f) for f in fields], safe=False)


@api_login_required
@allow_methods('GET', 'PATCH', 'DELETE')
def field_detail_view(req, field_id):
    field = get_object_or_404(CustomField, pk=field_id)

    if req.method == 'GET':
        sees_internal = _sees_internal(req.user, field.organization_id)
        if field.is_internal and not sees_internal:
            raise PermissionDenied('This field is internal to the organization.')
        return JsonResponse(field_to_dict(field))

    ensure_manager(req.user, field.organization_id)

    if req.method == 'DELETE':
        field.delete()
        return HttpResponse(status=204)

    form = bind_json_form(CustomFieldForm, read_json(req), instance=field, organization=field.organization)
    validate_form(form)
    return JsonResponse(field_to_dict(form.save()))


# ── Camp registration form ────────────────────────────────────────────────────

@api_login_required
@allow_methods('GET', 'POST')
def camp_fields_view(req, camp_id):
    camp = _live_camp(camp_id)

    if req.method == 'GET':
        links = registration_fields(camp, include_internal=_sees_internal(req.user, camp.organization_id))
        return JsonResponse([camp_field_to_dict(link) for link in links], safe=False)

    ensure_manager(req.user, camp.organization_id)
    cleaned = validate_form(CampFieldForm(data=read_json(req)))
    field = get_object_or_404(CustomField, pk=cleaned['custom_field_id'])
    link = attach_field(camp, field, cleaned['order'], cleaned['required'])
    return JsonResponse(camp_field_to_dict(link), status=201)


@api_login_required
@allow_methods('PATCH', 'DELETE')
def camp_field_detail_view(req, camp_id, link_id):
    camp = _live_camp(camp_id)
    link = get_object_or_404(CampCustomField.objects.select_related('custom_field'), pk=link_id, camp=camp)
    ensure_manager(req.user, camp.organization_id)

    if req.method == 'DELETE':
        link.delete()
        return HttpResponse(status=204)

    payload = read_json(req)
    cleaned = validate_form(CampFieldUpdateForm(data=payload))
    if 'order' in payload and cleaned['order'] is not None:
        link.order = cleaned['order']
    if 'required' in payload:
        link.required = cleaned['required']
    link.save(update_fields=['order', 'required'])
    return JsonResponse(camp_field_to_dict(link))


@api_login_required
@allow_methods('PATCH')
def reorder_camp_fields_view(req, camp_id):
    """Body: {"fields": [{"id": <camp field id>, "order": <n>}, …]}."""
    camp = _live_camp(camp_id)
    ensure_manager(req.user, camp.organization_id)
    links = reorder_fields(camp, read_json(req).get('fields'))
    return JsonResponse([camp_field_to_dict(link) for link in links], safe=False)


# ── Registration answers ──────────────────────────────────────────────────────

@api_login_required
@allow_methods('GET')
def registration_responses_view(req, registration_id):
    registration = get_object_or_404(
        Registration.objects.select_related('camp', 'child'), pk=registration_id,
    )
    is_staff = req.user.belongs_to(registration.camp.organization_id)
    if not is_staff and registration.child.parent_id != req.user.id:
        raise PermissionDenied('You cannot view these responses.')

    answers = registration.custom_field_responses.select_related('custom_field')
    if not is_staff:
        answers = answers.filter(custom_field__is_internal=False)
    return JsonResponse([response_to_dict(a) for a in answers], safe=False)


# ── Camp meta fields ──────────────────────────────────────────────────────────

def _meta_value(payload):
    if payload.get('response_array') is not None:
        return payload['response_array']
    return payload.get('response')


@api_login_required
@allow_methods('GET', 'POST')
def meta_fields_view(req, camp_id):
    camp = _live_camp(camp_id)

    if req.method == 'GET':
        metas = camp.meta_fields.select_related('custom_field')
        if not _sees_internal(req.user, camp.organization_id):
            metas = metas.filter(custom_field__is_internal=False)
        return JsonResponse([meta_field_to_dict(m) for m in metas], safe=False)

    ensure_manager(req.user, camp.organization_id)
    payload = read_json(req)
    cleaned = validate_form(MetaFieldForm(data=payload))
    field = get_object_or_404(CustomField, pk=cleaned['custom_field_id'])
    meta = set_meta_field(camp, field, _meta_value(payload))
    return JsonResponse(meta_field_to_dict(meta), status=201)


@api_login_required
@allow_methods('PATCH', 'DELETE')
def meta_field_detail_view(req, camp_id, meta_id):
    camp = _live_camp(camp_id)
    meta = get_object_or_404(CampMetaField.objects.select_related('custom_field'), pk=meta_id, camp=camp)
    ensure_manager(req.user, camp.organization_id)

    if req.method == 'DELETE':
        meta.delete()
        return HttpResponse(status=204)

    meta = update_meta_field(meta, _meta_value(read_json(req)))
    return JsonResponse(meta_field_to_dict(meta))
