"""
communications/services.py
──────────────────────────
Service functions for sending emails.

These are called by services in accounts/, camps/ and by
communications.messaging, keeping all "talk to the outside world" logic in
one place.  Every attempt, successful or not, is written to NotificationLog.

Functions
─────────
send_invitation_email(invitation)
    Invite someone to join an organization's staff.

send_registration_confirmation(registration)
send_waitlist_notification(registration)
    Tell the parent whether their child got a place.

send_slot_booking_confirmation(booking)
send_slot_cancellation(booking)
    Availability slot booking notices.

send_camp_update(parent, camp, headline, details)
    Changes to a camp the parent's child is registered for.

send_camp_message_email(parent, message)
    A staff message to a parent.
"""

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils import timezone

from .models import NotificationLog

logger = logging.getLogger(__name__)


def _log(recipient, notification_type, channel, subject, body, camp=None, organization=None,
         email='', success=True, error=''):
    """Internal helper to persist a NotificationLog entry."""
    NotificationLog.objects.create(
        recipient=recipient,
        recipient_email=email or getattr(recipient, 'email', ''),
        notification_type=notification_type,
        channel=channel,
        subject=subject,
        body_preview=body[:500],
        camp=camp,
        organization=organization or getattr(camp, 'organization', None),
        sent_at=timezone.now(),
        success=success,
        error_message=error,
    )


def _site_url(path=''):
    return settings.SITE_URL.rstrip('/') + path


def _deliver(recipient, notification_type, subject, template, context, camp=None,
             organization=None, email=''):
    """
    Render *template*, send it and log the attempt.
    Returns True on success, False on failure.
    """
    address = email or recipient.email
    body = render_to_string(f'communications/email/{template}', context)

    if not address:
        _log(recipient, notification_type, NotificationLog.Channel.EMAIL, subject, body,
             camp=camp, organization=organization, success=False, error='No email address on file.')
        return False

    try:
        send_mail(
            subject=subject,
            message=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[address],
            fail_silently=False,
        )
        _log(recipient, notification_type, NotificationLog.Channel.EMAIL, subject, body,
             camp=camp, organization=organization, email=address)
        return True
    except Exception as exc:
        logger.warning('Sending %s to %s failed: %s', notification_type, address, exc)
        _log(recipient, notification_type, NotificationLog.Channel.EMAIL, subject, body,
             camp=camp, organization=organization, email=address,
             success=False, error=str(exc))
        return False


def send_invitation_email(invitation):
    subject = f'You are invited to join {invitation.organization.name}'
    context = {
        'invitation': invitation,
        'accept_url': _site_url(f'/invitations/{invitation.token}'),
    }
    return _deliver(None, NotificationLog.NotificationType.INVITATION, subject,
                    'invitation.txt', context, organization=invitation.organization,
                    email=invitation.email)


def send_registration_confirmation(registration):
    camp, child = registration.camp, registration.child
    subject = f'Registration confirmed: {camp.name}'
    context = {
        'parent':       child.parent,
        'child':        child,
        'camp':         camp,
        'camp_url':     _site_url(f'/camp/slug/{camp.slug}'),
    }
    return _deliver(child.parent, NotificationLog.NotificationType.REGISTRATION_CONFIRMATION,
                    subject, 'registration_confirmation.txt', context, camp=camp)


def send_waitlist_notification(registration):
    camp, child = registration.camp, registration.child
    subject = f'Waitlist: {camp.name}'
    context = {
        'parent': child.parent,
        'child':  child,
        'camp':   camp,
    }
    return _deliver(child.parent, NotificationLog.NotificationType.WAITLIST,
                    subject, 'waitlist.txt', context, camp=camp)


def send_slot_booking_confirmation(booking):
    slot = booking.slot
    subject = f'Session booked: {slot.camp.name} on {slot.slot_date:%Y-%m-%d}'
    context = {
        'parent':  booking.parent,
        'child':   booking.child,
        'slot':    slot,
        'camp':    slot.camp,
    }
    return _deliver(booking.parent, NotificationLog.NotificationType.SLOT_BOOKING,
                    subject, 'slot_booking.txt', context, camp=slot.camp)


def send_slot_cancellation(booking):
    slot = booking.slot
    subject = f'Session cancelled: {slot.camp.name} on {slot.slot_date:%Y-%m-%d}'
    context = {
        'parent':  booking.parent,
        'child':   booking.child,
        'slot':    slot,
        'camp':    slot.camp,
        'reason':  booking.cancel_reason,
    }
    return _deliver(booking.parent, NotificationLog.NotificationType.SLOT_CANCELLATION,
                    subject, 'slot_cancellation.txt', context, camp=slot.camp)


def send_camp_update(parent, camp, headline, details=''):
    subject = f'Update: {camp.name}'
    context = {
        'parent':   parent,
        'camp':     camp,
        'headline': headline,
        'details':  details,
    }
    return _deliver(parent, NotificationLog.NotificationType.CAMP_UPDATE,
                    subject, 'camp_update.txt', context, camp=camp)


def send_camp_message_email(parent, message):
    subject = f'[{message.camp.name}] {message.subject}'
    context = {
        'parent':      parent,
        'message':     message,
        'camp':        message.camp,
        'inbox_url':   _site_url('/parent/messages'),
    }
    return _deliver(parent, NotificationLog.NotificationType.CAMP_MESSAGE,
                    subject, 'camp_message.txt', context, camp=message.camp)
