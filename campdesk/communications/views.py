"""
communications/views.py
────────────────────────
Camp messages between organization staff and parents, plus the
notification log.

Staff of the camp's organization send and list messages; parents only ever
see messages (and replies) delivered to them.
"""

from django.core.exceptions import PermissionDenied
from django.db.models import Count
from django.http import JsonResponse
from django.shortcuts import get_object_or_404

from accounts.models import Organization
from camps.models import Camp
from core.decorators import allow_methods, api_login_required, parent_required
from core.http import read_json, validate_form
from core.permissions import ensure_member

from .forms import CampMessageForm, ReplyForm
from .messaging import mark_recipient_read, replies_visible_to, reply_to_message, send_camp_message
from .models import CampMessage, CampMessageRecipient, NotificationLog
from .serializers import message_to_dict, notification_to_dict, recipient_to_dict, reply_to_dict


def _live_camp(camp_id):
    return get_object_or_404(Camp, pk=camp_id, is_deleted=False)


@api_login_required
@allow_methods('GET', 'POST')
def camp_messages_view(req, camp_id):
    camp = _live_camp(camp_id)
    ensure_member(req.user, camp.organization_id)

    if req.method == 'POST':
        cleaned = validate_form(CampMessageForm(data=read_json(req)))
        message, recipients_count = send_camp_message(
            camp,
            req.user,
            cleaned['subject'],
            cleaned['content'],
            cleaned['registration_ids'],
        )
        data = message_to_dict(message)
        data['recipients_count'] = recipients_count
        return JsonResponse(data, status=201)

    messages = camp.messages.annotate(recipients_count=Count('recipients', distinct=True))
    data = []
    for message in messages:
        entry = message_to_dict(message)
        entry['recipients_count'] = message.recipients_count
        data.append(entry)
    return JsonResponse(data, safe=False)


@parent_required
@allow_methods('GET')
def parent_camp_messages_view(req, camp_id):
    """Messages of one camp that reached the current parent."""
    camp = _live_camp(camp_id)
    messages = (
        CampMessage.objects
        .filter(camp=camp, recipients__parent=req.user)
        .distinct()
    )
    return JsonResponse([message_to_dict(m) for m in messages], safe=False)


@api_login_required
@allow_methods('GET')
def parent_inbox_view(req, parent_id):
    """Every message delivered to the parent, newest first, with the unread count."""
    if req.user.id != parent_id:
        raise PermissionDenied('You can only read your own messages.')

    recipients = list(
        CampMessageRecipient.objects
        .filter(parent=req.user)
        .select_related('message', 'child')
    )
    return JsonResponse({
        'messages':     [
            {'message': message_to_dict(r.message), 'recipient': recipient_to_dict(r)}
            for r in recipients
        ],
        'unread_count': sum(1 for r in recipients if not r.is_read),
    })


@api_login_required
@allow_methods('PATCH')
def mark_read_view(req, message_id, recipient_id):
    recipient = get_object_or_404(
        CampMessageRecipient.objects.select_related('child'),
        pk=recipient_id,
        message_id=message_id,
    )
    if recipient.parent_id != req.user.id:
        raise PermissionDenied('This message was not sent to you.')
    return JsonResponse(recipient_to_dict(mark_recipient_read(recipient)))


@api_login_required
@allow_methods('GET', 'POST')
def replies_view(req, message_id):
    message = get_object_or_404(CampMessage, pk=message_id)
    is_staff = req.user.belongs_to(message.organization_id)
    if not is_staff and not message.recipients.filter(parent=req.user).exists():
        raise PermissionDenied('You cannot view this conversation.')

    if req.method == 'POST':
        cleaned = validate_form(ReplyForm(data=read_json(req)))
        reply = reply_to_message(message, req.user, cleaned['content'], cleaned['recipient_id'])
        return JsonResponse(reply_to_dict(reply), status=201)

    replies = replies_visible_to(message, req.user)
    return JsonResponse([reply_to_dict(r) for r in replies], safe=False)


@api_login_required
@allow_methods('GET')
def organization_messages_view(req, org_id):
    org = get_object_or_404(Organization, pk=org_id)
    ensure_member(req.user, org.id)

    messages = (
        org.camp_messages
        .select_related('camp')
        .annotate(
            recipients_count=Count('recipients', distinct=True),
            reply_count=Count('replies', distinct=True),
        )
    )
    data = []
    for message in messages:
        entry = message_to_dict(message)
        entry['camp_name'] = message.camp.name
        entry['recipients_count'] = message.recipients_count
        entry['reply_count'] = message.reply_count
        data.append(entry)
    return JsonResponse(data, safe=False)


@api_login_required
@allow_methods('GET')
def notification_log_view(req):
    """
    Staff-only view: notifications sent on behalf of the user's organization.
    Platform admins see everything.  ?type= filters by notification type.
    """
    if not (req.user.is_platform_admin or req.user.is_organization_staff):
        raise PermissionDenied('Organization staff only.')
    logs = NotificationLog.objects.all()
    if not req.user.is_platform_admin:
        logs = logs.filter(organization_id=req.user.organization_id)
    if req.GET.get('type'):
        logs = logs.filter(notification_type=req.GET['type'])
    return JsonResponse([notification_to_dict(log) for log in logs[:200]], safe=False)
