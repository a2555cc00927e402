"""Tests for camp messages, replies, read receipts and the notification log."""

from unittest import mock

import pytest

from communications.models import CampMessage, CampMessageRecipient, NotificationLog
from communications.services import send_waitlist_notification

pytestmark = pytest.mark.django_db


@pytest.fixture
def family(camp, parent, child, make_child):
    """Two children of the same parent plus one child of another parent, all registered."""
    def build(other_parent):
        sibling = make_child(parent, full_name='Sam Parent')
        neighbour = make_child(other_parent, full_name='Nico Neighbour')
        return [camp.registrations.create(child=kid) for kid in (child, sibling, neighbour)]
    return build


def send(client, camp, **payload):
    payload.setdefault('subject', 'Bring water')
    payload.setdefault('content', 'Hot day tomorrow, pack two bottles.')
    return client.post(f'/api/camps/{camp.id}/messages/', payload, content_type='application/json')


class TestSendMessage:

    def test_one_recipient_per_registration_one_email_per_parent(
        self, login, coach, camp, family, other_parent, mailoutbox,
    ):
        family(other_parent)
        resp = send(login(coach), camp)
        assert resp.status_code == 201
        body = resp.json()
        assert body['recipients_count'] == 3
        assert body['sent_to_all'] is True
        assert body['email_sent'] is True

        assert sorted(m.to[0] for m in mailoutbox) == ['other_parent@example.com', 'parent@example.com']
        assert CampMessageRecipient.objects.filter(email_delivered=True).count() == 3

    def test_selected_registrations(self, login, coach, camp, family, other_parent, mailoutbox):
        registrations = family(other_parent)
        resp = send(login(coach), camp, registration_ids=[registrations[2].id])
        body = resp.json()
        assert body['recipients_count'] == 1
        assert body['sent_to_all'] is False
        assert [m.to[0] for m in mailoutbox] == ['other_parent@example.com']

    def test_foreign_registration_ids(self, login, coach, camp, make_camp, child):
        elsewhere = make_camp(name='Elsewhere').registrations.create(child=child)
        resp = send(login(coach), camp, registration_ids=[elsewhere.id])
        assert resp.status_code == 400
        assert not CampMessage.objects.exists()

    def test_empty_selection(self, login, coach, camp, child):
        camp.registrations.create(child=child)
        assert send(login(coach), camp, registration_ids=[]).status_code == 400

    def test_camp_without_registrations(self, login, coach, camp):
        assert send(login(coach), camp).status_code == 400

    def test_parents_and_outsiders_cannot_send(self, login, parent, outsider, camp, child):
        camp.registrations.create(child=child)
        assert send(login(parent), camp).status_code == 403
        assert send(login(outsider), camp).status_code == 403

    def test_failed_email_is_logged(self, login, coach, camp, child):
        camp.registrations.create(child=child)
        with mock.patch('communications.services.send_mail', side_effect=OSError('SMTP down')):
            body = send(login(coach), camp).json()
        assert body['email_sent'] is False
        log = NotificationLog.objects.get(notification_type='camp_message')
        assert log.success is False
        assert log.error_message == 'SMTP down'
        assert CampMessageRecipient.objects.get().email_delivered is False


class TestParentInbox:

    def test_inbox_and_unread_count(self, login, coach, parent, camp, family, other_parent):
        family(other_parent)
        send(login(coach), camp)
        client = login(parent)
        body = client.get(f'/api/parent/{parent.id}/camp-messages/').json()
        assert len(body['messages']) == 2
        assert body['unread_count'] == 2
        assert {entry['recipient']['child']['full_name'] for entry in body['messages']} == {
            'Alex Parent', 'Sam Parent',
        }

        entry = body['messages'][0]
        resp = client.patch(
            f"/api/camp-messages/{entry['message']['id']}/recipients/{entry['recipient']['id']}/read/",
            content_type='application/json',
        )
        assert resp.status_code == 200
        assert resp.json()['is_read'] is True
        assert resp.json()['read_at'] is not None
        assert client.get(f'/api/parent/{parent.id}/camp-messages/').json()['unread_count'] == 1

    def test_cannot_read_someone_elses_inbox(self, login, parent, other_parent):
        assert login(other_parent).get(f'/api/parent/{parent.id}/camp-messages/').status_code == 403

    def test_cannot_mark_someone_elses_receipt(self, login, coach, camp, child, other_parent):
        camp.registrations.create(child=child)
        message_id = send(login(coach), camp).json()['id']
        receipt = CampMessageRecipient.objects.get()
        resp = login(other_parent).patch(
            f'/api/camp-messages/{message_id}/recipients/{receipt.id}/read/', content_type='application/json',
        )
        assert resp.status_code == 403

    def test_camp_messages_for_parent(self, login, coach, parent, other_parent, camp, child):
        camp.registrations.create(child=child)
        send(login(coach), camp)
        assert len(login(parent).get(f'/api/camps/{camp.id}/messages/parent/').json()) == 1
        assert login(other_parent).get(f'/api/camps/{camp.id}/messages/parent/').json() == []


class TestReplies:

    def test_thread_visibility(self, login, coach, parent, other_parent, camp, family):
        family(other_parent)
        message_id = send(login(coach), camp).json()['id']
        url = f'/api/camp-messages/{message_id}/replies/'

        assert login(parent).post(url, {'content': 'Thanks!'}, content_type='application/json').status_code == 201
        assert login(other_parent).post(url, {'content': 'Can we bring juice?'},
                                        content_type='application/json').status_code == 201
        resp = login(coach).post(url, {'content': 'Water only, sorry.', 'recipient_id': other_parent.id},
                                 content_type='application/json')
        assert resp.status_code == 201
        login(coach).post(url, {'content': 'See you all at 9.'}, content_type='application/json')

        assert len(login(coach).get(url).json()) == 4
        assert [r['content'] for r in login(parent).get(url).json()] == ['Thanks!', 'See you all at 9.']
        assert [r['content'] for r in login(other_parent).get(url).json()] == [
            'Can we bring juice?', 'Water only, sorry.', 'See you all at 9.',
        ]

    def test_strangers_cannot_join(self, login, coach, outsider, other_parent, camp, child):
        camp.registrations.create(child=child)
        message_id = send(login(coach), camp).json()['id']
        url = f'/api/camp-messages/{message_id}/replies/'
        assert login(other_parent).get(url).status_code == 403
        assert login(outsider).post(url, {'content': 'Hi'}, content_type='application/json').status_code == 403

    def test_parents_cannot_address_one_parent(self, login, coach, parent, other_parent, camp, family):
        family(other_parent)
        message_id = send(login(coach), camp).json()['id']
        resp = login(parent).post(f'/api/camp-messages/{message_id}/replies/', {
            'content': 'psst', 'recipient_id': other_parent.id,
        }, content_type='application/json')
        assert resp.status_code == 400

    def test_staff_reply_must_target_a_recipient(self, login, coach, camp, child, other_parent):
        camp.registrations.create(child=child)
        message_id = send(login(coach), camp).json()['id']
        resp = login(coach).post(f'/api/camp-messages/{message_id}/replies/', {
            'content': 'Hello', 'recipient_id': other_parent.id,
        }, content_type='application/json')
        assert resp.status_code == 400


class TestOrganizationOverview:

    def test_messages_with_counts(self, login, coach, parent, organization, camp, child):
        camp.registrations.create(child=child)
        message_id = send(login(coach), camp).json()['id']
        login(parent).post(f'/api/camp-messages/{message_id}/replies/', {'content': 'Ok'},
                           content_type='application/json')

        body = login(coach).get(f'/api/organizations/{organization.id}/camp-messages/').json()
        assert body[0]['camp_name'] == camp.name
        assert body[0]['recipients_count'] == 1
        assert body[0]['reply_count'] == 1

    def test_outsider_forbidden(self, login, outsider, organization):
        assert login(outsider).get(f'/api/organizations/{organization.id}/camp-messages/').status_code == 403


class TestNotificationLog:

    def test_staff_see_their_organization_only(self, login, coach, outsider, camp, child):
        registration = camp.registrations.create(child=child)
        send_waitlist_notification(registration)

        body = login(coach).get('/api/notifications/').json()
        assert [entry['notification_type'] for entry in body] == ['waitlist']
        assert body[0]['recipient_email'] == 'parent@example.com'
        assert login(outsider).get('/api/notifications/').json() == []

    def test_type_filter(self, login, coach, camp, child):
        registration = camp.registrations.create(child=child)
        send_waitlist_notification(registration)
        assert login(coach).get('/api/notifications/?type=camp_message').json() == []

    def test_parents_forbidden(self, login, parent):
        assert login(parent).get('/api/notifications/').status_code == 403

    def test_missing_address_is_logged_as_failure(self, parent, camp, child, mailoutbox):
        parent.email = ''
        parent.save()
        registration = camp.registrations.create(child=child)
        assert send_waitlist_notification(registration) is False
        assert mailoutbox == []
        assert NotificationLog.objects.get().success is False
