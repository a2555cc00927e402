"""Tests for registering children: window, age, duplicates, capacity and waitlist."""

from datetime import timedelta

import pytest
from django.utils import timezone

from camps.models import Registration
from camps.services import register_child
from communications.models import NotificationLog

pytestmark = pytest.mark.django_db


def register(client, camp, child, **extra):
    payload = {'camp_id': camp.id, 'child_id': child.id}
    payload.update(extra)
    return client.post('/api/registrations/', payload, content_type='application/json')


class TestRegisterChild:

    def test_success_sends_confirmation(self, login, parent, camp, child, mailoutbox):
        resp = register(login(parent), camp, child)
        assert resp.status_code == 201
        assert resp.json()['waitlisted'] is False
        assert mailoutbox[0].subject == f'Registration confirmed: {camp.name}'
        assert NotificationLog.objects.filter(
            recipient=parent, notification_type='registration_confirmation', success=True,
        ).exists()

    def test_window_closed(self, login, parent, make_camp, child):
        today = timezone.localdate()
        camp = make_camp(registration_start_date=today + timedelta(days=1))
        resp = register(login(parent), camp, child)
        assert resp.status_code == 400
        assert resp.json()['error'] == 'Registration is not open for this camp.'

    def test_window_ended(self, login, parent, make_camp, child):
        today = timezone.localdate()
        camp = make_camp(
            registration_start_date=today - timedelta(days=10),
            registration_end_date=today - timedelta(days=1),
        )
        assert register(login(parent), camp, child).status_code == 400

    def test_age_out_of_range(self, login, parent, camp, make_child):
        toddler = make_child(parent, full_name='Tiny Parent', age=4)
        resp = register(login(parent), camp, toddler)
        assert resp.status_code == 400
        assert 'ages 8-12' in resp.json()['error']

    def test_age_is_taken_on_the_first_camp_day(self, parent, make_camp, make_child):
        today = timezone.localdate()
        camp = make_camp(min_age=11, max_age=12)
        # turns 11 between today and the first camp day
        almost_eleven = make_child(parent, full_name='Soon Eleven', age=11)
        almost_eleven.date_of_birth = camp.start_date.replace(year=camp.start_date.year - 11) - timedelta(days=1)
        almost_eleven.save()
        assert almost_eleven.age_on(today) == 10
        registration = register_child(parent, camp.id, almost_eleven.id)
        assert registration.pk is not None

    def test_duplicate(self, login, parent, camp, child):
        client = login(parent)
        register(client, camp, child)
        resp = register(client, camp, child)
        assert resp.status_code == 400
        assert resp.json()['error'] == 'This child is already registered for this camp.'

    def test_someone_elses_child(self, login, other_parent, camp, child):
        assert register(login(other_parent), camp, child).status_code == 403

    def test_cancelled_camp(self, login, parent, camp, child):
        camp.cancel('Rain')
        resp = register(login(parent), camp, child)
        assert resp.status_code == 400
        assert resp.json()['error'] == 'This camp has been cancelled.'

    def test_only_parents(self, login, coach, camp, child):
        assert register(login(coach), camp, child).status_code == 403

    def test_missing_ids(self, login, parent):
        resp = login(parent).post('/api/registrations/', {}, content_type='application/json')
        assert resp.status_code == 400
        assert set(resp.json()['details']) == {'camp_id', 'child_id'}


class TestCapacity:

    def test_full_camp_waitlists(self, login, parent, camp, make_child, mailoutbox):
        client = login(parent)
        kids = [make_child(parent, full_name=f'Kid {n}') for n in range(3)]
        responses = [register(client, camp, kid).json() for kid in kids]

        assert [r['waitlisted'] for r in responses] == [False, False, True]
        assert camp.enrolled_count == 2
        assert camp.spots_available == 0
        assert mailoutbox[-1].subject == f'Waitlist: {camp.name}'

    def test_full_camp_without_waitlist(self, login, parent, make_camp, make_child):
        camp = make_camp(capacity=1, waitlist_enabled=False)
        client = login(parent)
        assert register(client, camp, make_child(parent, full_name='First')).status_code == 201
        resp = register(client, camp, make_child(parent, full_name='Second'))
        assert resp.status_code == 400
        assert resp.json()['error'] == 'This camp is full.'
        assert Registration.objects.filter(camp=camp).count() == 1

    def test_never_exceeds_capacity(self, parent, make_camp, make_child):
        camp = make_camp(capacity=3)
        for n in range(6):
            register_child(parent, camp.id, make_child(parent, full_name=f'Kid {n}').id)
        assert Registration.objects.filter(camp=camp, waitlisted=False).count() == 3
        assert Registration.objects.filter(camp=camp, waitlisted=True).count() == 3


class TestListRegistrations:

    def test_staff_see_everyone_with_parent_contact(self, login, coach, camp, child, other_parent, make_child):
        camp.registrations.create(child=child)
        camp.registrations.create(child=make_child(other_parent, full_name='Other Kid'))
        body = login(coach).get(f'/api/camps/{camp.id}/registrations/').json()
        assert len(body['registrations']) == 2
        assert body['registrations'][0]['parent']['email'].endswith('@example.com')
        assert body['permissions'] == {'can_manage': False}

    def test_parent_sees_only_own(self, login, parent, camp, child, other_parent, make_child):
        camp.registrations.create(child=child)
        camp.registrations.create(child=make_child(other_parent, full_name='Other Kid'))
        body = login(parent).get(f'/api/camps/{camp.id}/registrations/').json()
        assert [r['child_id'] for r in body['registrations']] == [child.id]
        assert 'parent' not in body['registrations'][0]

    def test_outsider_forbidden(self, login, outsider, camp):
        assert login(outsider).get(f'/api/camps/{camp.id}/registrations/').status_code == 403

    def test_parent_registrations_include_camp(self, login, parent, camp, child):
        camp.registrations.create(child=child)
        body = login(parent).get('/api/parent/registrations/').json()
        assert body[0]['camp']['name'] == camp.name
