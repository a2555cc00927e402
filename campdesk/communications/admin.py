"""
communications/admin.py
────────────────────────
Admin for camp messages and the notification log.
"""

from django.contrib import admin

from .models import CampMessage, CampMessageRecipient, CampMessageReply, NotificationLog


class CampMessageRecipientInline(admin.TabularInline):
    model = CampMessageRecipient
    extra = 0
    fields = ('registration', 'child', 'parent', 'is_read', 'read_at', 'email_delivered')
    readonly_fields = ('read_at',)
    raw_id_fields = ('registration', 'child', 'parent')


class CampMessageReplyInline(admin.TabularInline):
    model = CampMessageReply
    extra = 0
    fields = ('sender_name', 'recipient', 'content', 'is_read', 'created_at')
    readonly_fields = ('created_at',)
    raw_id_fields = ('recipient',)


@admin.register(CampMessage)
class CampMessageAdmin(admin.ModelAdmin):
    list_display  = ('subject', 'camp', 'organization', 'sender_name', 'sent_to_all', 'email_sent', 'created_at')
    list_filter   = ('sent_to_all', 'email_sent', 'organization')
    search_fields = ('subject', 'content', 'camp__name', 'sender_name')
    readonly_fields = ('created_at', 'updated_at')
    inlines = [CampMessageRecipientInline, CampMessageReplyInline]


@admin.register(NotificationLog)
class NotificationLogAdmin(admin.ModelAdmin):
    list_display  = ('notification_type', 'channel', 'recipient', 'recipient_email', 'camp', 'sent_at', 'success')
    list_filter   = ('notification_type', 'channel', 'success', 'sent_at')
    search_fields = ('recipient__username', 'recipient__last_name', 'recipient_email', 'subject')
    readonly_fields = ('sent_at',)

    fieldsets = (
        (None, {
            'fields': ('recipient', 'recipient_email', 'notification_type', 'channel', 'organization', 'camp'),
        }),
        ('Content', {
            'fields': ('subject', 'body_preview'),
        }),
        ('Result', {
            'fields': ('success', 'error_message', 'sent_at'),
        }),
    )
