"""
communications/serializers.py
─────────────────────────────
Dict builders for camp messages and the notification log.
"""

from accounts.serializers import child_summary


def message_to_dict(message):
    return {
        'id':              message.id,
        'camp_id':         message.camp_id,
        'organization_id': message.organization_id,
        'sender_id':       message.sender_id,
        'sender_name':     message.sender_name,
        'subject':         message.subject,
        'content':         message.content,
        'sent_to_all':     message.sent_to_all,
        'email_sent':      message.email_sent,
        'created_at':      message.created_at,
    }


def recipient_to_dict(recipient):
    return {
        'id':              recipient.id,
        'message_id':      recipient.message_id,
        'registration_id': recipient.registration_id,
        'child':           child_summary(recipient.child),
        'parent_id':       recipient.parent_id,
        'is_read':         recipient.is_read,
        'read_at':         recipient.read_at,
        'email_delivered': recipient.email_delivered,
    }


def reply_to_dict(reply):
    return {
        'id':           reply.id,
        'message_id':   reply.message_id,
        'sender_id':    reply.sender_id,
        'sender_name':  reply.sender_name,
        'recipient_id': reply.recipient_id,
        'content':      reply.content,
        'is_read':      reply.is_read,
        'created_at':   reply.created_at,
    }


def notification_to_dict(log):
    return {
        'id':                log.id,
        'recipient_id':      log.recipient_id,
        'recipient_email':   log.recipient_email,
        'notification_type': log.notification_type,
        'channel':           log.channel,
        'subject':           log.subject,
        'camp_id':           log.camp_id,
        'sent_at':           log.sent_at,
        'success':           log.success,
        'error_message':     log.error_message,
    }
