"""
communications/models.py
─────────────────────────
Models for camp messaging and outbound notification tracking.

CampMessage          – a message from organization staff about one camp.
CampMessageRecipient – one row per registration the message went to, with
                       read and e-mail delivery state.
CampMessageReply     – a reply in the message thread (parent or staff).
NotificationLog      – records every automated email/notification sent,
                       so staff can see what went out and what failed.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class CampMessage(models.Model):
    camp = models.ForeignKey('camps.Camp', on_delete=models.CASCADE, related_name='messages')
    organization = models.ForeignKey(
        'accounts.Organization',
        on_delete=models.CASCADE,
        related_name='camp_messages',
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='camp_messages_sent',
    )
    sender_name = models.CharField(max_length=200)
    subject = models.CharField(max_length=255)
    content = models.TextField()
    sent_to_all = models.BooleanField(default=False)
    email_sent = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.subject} ({self.camp})"


class CampMessageRecipient(models.Model):
    message = models.ForeignKey(CampMessage, on_delete=models.CASCADE, related_name='recipients')
    registration = models.ForeignKey(
        'camps.Registration',
        on_delete=models.CASCADE,
        related_name='message_receipts',
    )
    child = models.ForeignKey('accounts.Child', on_delete=models.CASCADE, related_name='+')
    parent = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='camp_message_receipts',
    )
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    email_delivered = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['message', 'registration'], name='unique_message_recipient'),
        ]


class CampMessageReply(models.Model):
    """
    A reply in a message thread.  Parents reply to the organization; staff
    may reply to everyone or address one parent via `recipient`.
    """

    message = models.ForeignKey(CampMessage, on_delete=models.CASCADE, related_name='replies')
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='camp_message_replies',
    )
    sender_name = models.CharField(max_length=200)
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='camp_message_replies_received',
        help_text='Set when staff reply to a single parent.',
    )
    content = models.TextField()
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at']
        verbose_name_plural = 'Camp message replies'


class NotificationLog(models.Model):
    """
    Tracks outbound notifications (registration confirmations, booking
    notices, camp messages, etc.) sent by the system.

    This gives staff a full audit trail:
    "Booking confirmation sent to Parent X on Tuesday."
    """

    class NotificationType(models.TextChoices):
        REGISTRATION_CONFIRMATION = 'registration_confirmation', 'Registration Confirmation'
        WAITLIST                  = 'waitlist',                  'Waitlist Notice'
        SLOT_BOOKING              = 'slot_booking',              'Slot Booking Confirmation'
        SLOT_CANCELLATION         = 'slot_cancellation',         'Slot Cancellation'
        CAMP_UPDATE               = 'camp_update',               'Camp Update'
        CAMP_MESSAGE              = 'camp_message',              'Camp Message'
        INVITATION                = 'invitation',                'Staff Invitation'
        CUSTOM                    = 'custom',                    'Custom Message'

    class Channel(models.TextChoices):
        EMAIL = 'email', 'Email'
        SMS   = 'sms',   'SMS'

    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications_received',
        help_text='The user who received this notification (empty for invitations).',
    )
    recipient_email = models.EmailField(blank=True)
    notification_type = models.CharField(
        max_length=30,
        choices=NotificationType.choices,
        default=NotificationType.CUSTOM,
    )
    channel = models.CharField(
        max_length=10,
        choices=Channel.choices,
        default=Channel.EMAIL,
    )
    subject = models.CharField(
        max_length=255,
        blank=True,
        help_text='Email subject line or SMS header.',
    )
    body_preview = models.TextField(
        blank=True,
        help_text='First 500 characters of the message body (for the audit log).',
    )
    organization = models.ForeignKey(
        'accounts.Organization',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications',
    )
    camp = models.ForeignKey(
        'camps.Camp',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications',
        help_text='The camp this notification is about (if applicable).',
    )
    sent_at = models.DateTimeField(default=timezone.now)
    success = models.BooleanField(
        default=True,
        help_text='False if the send attempt failed (e.g. bounce, SMTP error).',
    )
    error_message = models.TextField(
        blank=True,
        help_text='Error details if success=False.',
    )

    class Meta:
        ordering = ['-sent_at']
        verbose_name = 'Notification Log'
        verbose_name_plural = 'Notification Logs'

    def __str__(self):
        recipient_label = str(self.recipient) if self.recipient else self.recipient_email or 'unknown'
        return (
            f"[{self.get_notification_type_display()}] "
            f"→ {recipient_label} "
            f"({self.sent_at.strftime('%Y-%m-%d %H:%M')})"
        )
