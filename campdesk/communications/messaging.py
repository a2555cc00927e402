"""
communications/messaging.py
───────────────────────────
Camp messages: staff write to the families registered for a camp, parents
read and reply.

send_camp_message(camp, sender, subject, content, registration_ids=None)
    One CampMessageRecipient per registration, one e-mail per distinct
    parent (a parent with two children in the camp gets a single e-mail).

reply_to_message(message, sender, content, recipient_id=None)
mark_recipient_read(recipient)
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from accounts.models import User

from .models import CampMessage, CampMessageRecipient, CampMessageReply
from .services import send_camp_message_email

logger = logging.getLogger(__name__)


def send_camp_message(camp, sender, subject, content, registration_ids=None):
    """
    *registration_ids* None means every registration of the camp.  Ids that
    do not belong to the camp are rejected rather than silently dropped.
    """
    registrations = camp.registrations.select_related('child__parent')
    if registration_ids is not None:
        registration_ids = set(registration_ids)
        registrations = registrations.filter(pk__in=registration_ids)
        unknown = registration_ids - {r.id for r in registrations}
        if unknown:
            raise ValidationError({'registration_ids': [
                f'Not registrations of this camp: {", ".join(str(i) for i in sorted(unknown))}.'
            ]})
    registrations = list(registrations)
    if not registrations:
        raise ValidationError('This camp has no registrations to message.')

    with transaction.atomic():
        message = CampMessage.objects.create(
            camp=camp,
            organization_id=camp.organization_id,
            sender=sender,
            sender_name=sender.display_name,
            subject=subject,
            content=content,
            sent_to_all=registration_ids is None,
        )
        recipients = CampMessageRecipient.objects.bulk_create([
            CampMessageRecipient(
                message=message,
                registration=registration,
                child=registration.child,
                parent=registration.child.parent,
            )
            for registration in registrations
        ])

    delivered = {}
    for recipient in recipients:
        if recipient.parent_id not in delivered:
            delivered[recipient.parent_id] = send_camp_message_email(recipient.parent, message)

    CampMessageRecipient.objects.filter(
        message=message, parent_id__in=[pid for pid, ok in delivered.items() if ok],
    ).update(email_delivered=True)
    message.email_sent = any(delivered.values())
    message.save(update_fields=['email_sent', 'updated_at'])

    logger.info(
        'Message %s sent to %d registrations (%d parents) of camp %s',
        message.id, len(recipients), len(delivered), camp.id,
    )
    return message, len(recipients)


def replies_visible_to(message, user):
    """Staff see the whole thread; a parent sees their own replies and staff replies meant for them."""
    replies = message.replies.all()
    if user.belongs_to(message.organization_id):
        return replies
    staff_broadcast = Q(recipient__isnull=True, sender__organization_id=message.organization_id)
    return replies.filter(Q(sender=user) | Q(recipient=user) | staff_broadcast)


def reply_to_message(message, sender, content, recipient_id=None):
    recipient = None
    if recipient_id is not None:
        if not sender.belongs_to(message.organization_id):
            raise ValidationError({'recipient_id': ['Only staff can address a reply to one parent.']})
        if not message.recipients.filter(parent_id=recipient_id).exists():
            raise ValidationError({'recipient_id': ['That parent did not receive this message.']})
        recipient = User.objects.get(pk=recipient_id)

    return CampMessageReply.objects.create(
        message=message,
        sender=sender,
        sender_name=sender.display_name,
        recipient=recipient,
        content=content,
    )


def mark_recipient_read(recipient):
    if not recipient.is_read:
        recipient.is_read = True
        recipient.read_at = timezone.now()
        recipient.save(update_fields=['is_read', 'read_at'])
    return recipient
