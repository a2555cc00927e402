"""
accounts/services.py
────────────────────
Account operations that touch more than one row.

register_user(cleaned)                  – create a user (and organization)
invite_staff(organization, sender, ...) – create an Invitation and e-mail it
accept_invitation(token, user)          – join the inviting organization
save_child(parent, form, sports)        – create/update a child and its sports
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.http import Http404

from communications.services import send_invitation_email
from core.constants import Role

from .models import ChildSport, Invitation, Organization, User

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(cleaned):
    organization = None
    if cleaned['role'] == Role.CAMP_CREATOR:
        organization = Organization.objects.create(name=cleaned['organization_name'].strip())

    user = User.objects.create_user(
        username=cleaned['username'],
        email=cleaned['email'],
        password=cleaned['password'],
        first_name=cleaned.get('first_name', ''),
        last_name=cleaned.get('last_name', ''),
        role=cleaned['role'],
        organization=organization,
    )
    logger.info('Registered %s as %s', user.username, user.role)
    return user


def invite_staff(organization, sender, email, role):
    invitation = Invitation.objects.create(
        organization=organization,
        invited_by=sender,
        email=email,
        role=role,
    )
    send_invitation_email(invitation)
    return invitation


@transaction.atomic
def accept_invitation(token, user):
    """
    Move *user* into the invitation's organization with the invited role.
    Expired or already used tokens are rejected.
    """
    try:
        invitation = Invitation.objects.select_for_update().get(token=token)
    except Invitation.DoesNotExist:
        raise Http404('Invitation not found.')

    if invitation.accepted:
        raise ValidationError('This invitation has already been used.')
    if invitation.is_expired:
        raise ValidationError('This invitation has expired.')
    if user.organization_id and user.organization_id != invitation.organization_id:
        raise ValidationError('You already belong to another organization.')

    user.organization = invitation.organization
    user.role = invitation.role
    user.save(update_fields=['organization', 'role'])

    invitation.accepted = True
    invitation.save(update_fields=['accepted'])
    logger.info('%s joined %s as %s', user.username, invitation.organization, invitation.role)
    return invitation


@transaction.atomic
def save_child(parent, form, sports=None):
    """
    Save a validated ChildForm for *parent*.  When *sports* is given
    (a list of cleaned ChildSportForm data) the child's sports are replaced.
    """
    child = form.save(commit=False)
    child.parent = parent
    child.save()

    if sports is not None:
        child.sports.all().delete()
        ChildSport.objects.bulk_create([
            ChildSport(
                child=child,
                sport=entry['sport_id'],
                skill_level=entry['skill_level'],
                preferred_positions=entry['preferred_positions'],
                current_team=entry.get('current_team', ''),
            )
            for entry in sports
        ])
    return child
