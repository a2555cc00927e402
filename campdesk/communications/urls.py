"""
communications/urls.py
───────────────────────
URL patterns for camp messages and the notification log.
Include in the root urls.py with:
    path('api/', include('communications.urls')),
"""

from django.urls import path

from . import views

urlpatterns = [
    path('camps/<int:camp_id>/messages/',         views.camp_messages_view,        name='camp_messages'),
    path('camps/<int:camp_id>/messages/parent/',  views.parent_camp_messages_view, name='parent_camp_messages'),
    path('parent/<int:parent_id>/camp-messages/', views.parent_inbox_view,         name='parent_inbox'),
    path(
        'camp-messages/<int:message_id>/recipients/<int:recipient_id>/read/',
        views.mark_read_view,
        name='mark_message_read',
    ),
    path('camp-messages/<int:message_id>/replies/',      views.replies_view,               name='message_replies'),
    path('organizations/<int:org_id>/camp-messages/',    views.organization_messages_view, name='organization_messages'),
    path('notifications/',                               views.notification_log_view,      name='notification_log'),
]
