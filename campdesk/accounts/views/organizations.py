"""
accounts/views/organizations.py
───────────────────────────────
Organization profile, logo, staff list and staff invitations.

SECURITY: every private endpoint checks organization membership through
core.permissions; a manager of one organization cannot touch another.
"""

from django.http import JsonResponse
from django.shortcuts import get_object_or_404

from camps.selectors import public_camps
from camps.serializers import camp_summary
from core.decorators import allow_methods, api_login_required, require_POST_or_405
from core.http import bind_json_form, read_json, validate_form
from core.permissions import ensure_manager, ensure_member
from core.uploads import file_url, save_image_upload

from ..forms import InvitationForm, OrganizationForm
from ..models import Organization
from ..serializers import invitation_to_dict, organization_to_dict, user_summary
from ..services import accept_invitation, invite_staff


@api_login_required
@allow_methods('GET', 'PATCH')
def organization_view(req, org_id):
    org = get_object_or_404(Organization, pk=org_id)

    if req.method == 'GET':
        ensure_member(req.user, org.id)
        return JsonResponse(organization_to_dict(org))

    ensure_manager(req.user, org.id)
    form = bind_json_form(OrganizationForm, read_json(req), instance=org)
    validate_form(form)
    return JsonResponse(organization_to_dict(form.save()))


@allow_methods('GET')
def public_organization_view(req, slug):
    """Public profile: organization details plus its upcoming public camps."""
    org = get_object_or_404(Organization, slug=slug)
    camps = public_camps().filter(organization=org)
    data = organization_to_dict(org)
    data['camps'] = [camp_summary(camp) for camp in camps]
    return JsonResponse(data)


@api_login_required
@require_POST_or_405
def organization_logo_view(req, org_id):
    org = get_object_or_404(Organization, pk=org_id)
    ensure_manager(req.user, org.id)

    org.logo.name = save_image_upload(req.FILES.get('logo'))
    org.save(update_fields=['logo'])
    return JsonResponse({'url': file_url(org.logo)})


@api_login_required
@allow_methods('GET')
def staff_view(req, org_id):
    org = get_object_or_404(Organization, pk=org_id)
    ensure_member(req.user, org.id)
    staff = org.members.order_by('last_name', 'first_name', 'username')
    return JsonResponse([user_summary(member) for member in staff], safe=False)


@api_login_required
@allow_methods('GET', 'POST')
def invitations_view(req, org_id):
    org = get_object_or_404(Organization, pk=org_id)
    ensure_manager(req.user, org.id)

    if req.method == 'GET':
        return JsonResponse([invitation_to_dict(inv) for inv in org.invitations.all()], safe=False)

    form = InvitationForm(data=read_json(req), organization=org)
    cleaned = validate_form(form)
    invitation = invite_staff(org, req.user, cleaned['email'], cleaned['role'])
    return JsonResponse(invitation_to_dict(invitation), status=201)


@api_login_required
@require_POST_or_405
def accept_invitation_view(req, token):
    invitation = accept_invitation(token, req.user)
    return JsonResponse({
        'success':      True,
        'organization': organization_to_dict(invitation.organization),
        'role':         invitation.role,
    })
