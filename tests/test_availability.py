"""Tests for availability slots and slot bookings."""

from datetime import timedelta

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from camps.forms import MAX_RECURRING_SLOTS
from camps.models import AvailabilitySlot, Camp, SlotBooking
from camps.services import book_slot, cancel_booking
from communications.models import NotificationLog

pytestmark = pytest.mark.django_db


def slot_payload(camp, **extra):
    payload = {
        'slot_date': camp.start_date.isoformat(),
        'start_time': '14:00',
        'end_time': '15:30',
        'max_bookings': 2,
    }
    payload.update(extra)
    return payload


class TestSlots:

    def test_create_slot_derives_duration(self, login, creator, availability_camp):
        resp = login(creator).post(f'/api/camps/{availability_camp.id}/availability-slots/',
                                   slot_payload(availability_camp), content_type='application/json')
        assert resp.status_code == 201
        body = resp.json()
        assert body['duration_minutes'] == 90
        assert body['status'] == 'available'
        assert body['occurrences_created'] == 0

    def test_daily_recurrence_stops_at_camp_end(self, login, creator, availability_camp):
        camp = availability_camp
        payload = slot_payload(
            camp, is_recurring=True, recurrence_rule='daily',
            recurrence_end_date=(camp.end_date + timedelta(days=10)).isoformat(),
        )
        resp = login(creator).post(f'/api/camps/{camp.id}/availability-slots/', payload,
                                   content_type='application/json')
        assert resp.status_code == 201
        days = (camp.end_date - camp.start_date).days
        assert resp.json()['occurrences_created'] == days
        slots = AvailabilitySlot.objects.filter(camp=camp)
        assert slots.count() == days + 1
        assert slots.last().slot_date == camp.end_date

    def test_recurring_needs_rule_and_end(self, login, creator, availability_camp):
        resp = login(creator).post(f'/api/camps/{availability_camp.id}/availability-slots/',
                                   slot_payload(availability_camp, is_recurring=True),
                                   content_type='application/json')
        assert resp.status_code == 400
        assert {'recurrence_rule', 'recurrence_end_date'} <= set(resp.json()['details'])

    def test_weekly_recurrence(self, login, creator, make_camp):
        camp = make_camp(
            type=Camp.Type.ONE_ON_ONE,
            scheduling_type=Camp.SchedulingType.AVAILABILITY,
            end_date=timezone.localdate() + timedelta(days=20 + 21),
        )
        payload = slot_payload(
            camp, is_recurring=True, recurrence_rule='weekly',
            recurrence_end_date=camp.end_date.isoformat(),
        )
        resp = login(creator).post(f'/api/camps/{camp.id}/availability-slots/', payload,
                                   content_type='application/json')
        assert resp.status_code == 201
        assert resp.json()['occurrences_created'] == 3
        dates = list(AvailabilitySlot.objects.filter(camp=camp).values_list('slot_date', flat=True))
        assert dates == [camp.start_date + timedelta(weeks=n) for n in range(4)]

    def test_recurrence_is_capped(self, login, creator, make_camp):
        camp = make_camp(
            type=Camp.Type.ONE_ON_ONE,
            scheduling_type=Camp.SchedulingType.AVAILABILITY,
            end_date=timezone.localdate() + timedelta(days=20 + 2 * MAX_RECURRING_SLOTS),
        )
        payload = slot_payload(
            camp, is_recurring=True, recurrence_rule='daily',
            recurrence_end_date=camp.end_date.isoformat(),
        )
        resp = login(creator).post(f'/api/camps/{camp.id}/availability-slots/', payload,
                                   content_type='application/json')
        assert resp.status_code == 201
        assert resp.json()['occurrences_created'] == MAX_RECURRING_SLOTS - 1
        assert AvailabilitySlot.objects.filter(camp=camp).count() == MAX_RECURRING_SLOTS

    def test_new_slot_cannot_start_booked(self, login, creator, parent, child, availability_camp):
        camp = availability_camp
        payload = slot_payload(
            camp, max_bookings=3, status='booked', is_recurring=True, recurrence_rule='daily',
            recurrence_end_date=(camp.start_date + timedelta(days=1)).isoformat(),
        )
        resp = login(creator).post(f'/api/camps/{camp.id}/availability-slots/', payload,
                                   content_type='application/json')
        assert resp.status_code == 201
        body = resp.json()
        assert body['status'] == 'available'
        assert body['current_bookings'] == 0
        assert set(AvailabilitySlot.objects.filter(camp=camp).values_list('status', flat=True)) == {'available'}

        resp = login(parent).post(
            f'/api/camps/{camp.id}/availability-slots/{body["id"]}/book/',
            {'child_id': child.id}, content_type='application/json',
        )
        assert resp.status_code == 201

    def test_new_slot_may_start_unavailable(self, login, creator, availability_camp):
        resp = login(creator).post(f'/api/camps/{availability_camp.id}/availability-slots/',
                                   slot_payload(availability_camp, status='unavailable'),
                                   content_type='application/json')
        assert resp.status_code == 201
        assert resp.json()['status'] == 'unavailable'

    @pytest.mark.parametrize('overrides, field', [
        ({'end_time': '13:00'}, 'end_time'),
        ({'max_bookings': 0}, 'max_bookings'),
        ({'slot_date': '2001-01-01'}, 'slot_date'),
    ])
    def test_validation(self, login, creator, availability_camp, overrides, field):
        resp = login(creator).post(f'/api/camps/{availability_camp.id}/availability-slots/',
                                   slot_payload(availability_camp, **overrides), content_type='application/json')
        assert resp.status_code == 400
        assert field in resp.json()['details']

    def test_only_managers_create(self, login, coach, parent, availability_camp):
        url = f'/api/camps/{availability_camp.id}/availability-slots/'
        for user in (coach, parent):
            resp = login(user).post(url, slot_payload(availability_camp), content_type='application/json')
            assert resp.status_code == 403

    def test_list_available_only(self, anon, slot, availability_camp):
        AvailabilitySlot.objects.create(
            camp=availability_camp, slot_date=slot.slot_date, start_time=slot.end_time,
            end_time=slot.end_time.replace(hour=12), duration_minutes=60, status='unavailable',
        )
        url = f'/api/camps/{availability_camp.id}/availability-slots/'
        assert len(anon.get(url).json()) == 2
        assert [s['id'] for s in anon.get(url + '?available=true').json()] == [slot.id]

    def test_cannot_lower_max_below_bookings(self, login, creator, parent, child, make_child, slot):
        slot.max_bookings = 2
        slot.save()
        book_slot(parent, slot.id, child.id)
        book_slot(parent, slot.id, make_child(parent, full_name='Second Kid').id)
        resp = login(creator).patch(f'/api/camps/{slot.camp_id}/availability-slots/{slot.id}/',
                                    {'max_bookings': 1}, content_type='application/json')
        assert resp.status_code == 400
        slot.refresh_from_db()
        assert slot.max_bookings == 2

    def test_lowering_to_booking_count_marks_booked(self, login, creator, parent, child, slot):
        slot.max_bookings = 2
        slot.save()
        book_slot(parent, slot.id, child.id)
        resp = login(creator).patch(f'/api/camps/{slot.camp_id}/availability-slots/{slot.id}/',
                                    {'max_bookings': 1}, content_type='application/json')
        assert resp.status_code == 200
        assert resp.json()['status'] == 'booked'

        book = SlotBooking.objects.get()
        cancel_booking(parent, book.id)
        slot.refresh_from_db()
        assert slot.status == 'available'

    def test_cannot_delete_booked_slot(self, login, creator, parent, child, slot):
        book_slot(parent, slot.id, child.id)
        resp = login(creator).delete(f'/api/camps/{slot.camp_id}/availability-slots/{slot.id}/')
        assert resp.status_code == 400
        assert AvailabilitySlot.objects.filter(pk=slot.id).exists()

    def test_delete_empty_slot(self, login, creator, slot):
        resp = login(creator).delete(f'/api/camps/{slot.camp_id}/availability-slots/{slot.id}/')
        assert resp.status_code == 204


class TestBooking:

    def _book(self, client, slot, child, **extra):
        return client.post(
            f'/api/camps/{slot.camp_id}/availability-slots/{slot.id}/book/',
            {'child_id': child.id, **extra},
            content_type='application/json',
        )

    def test_book_marks_slot_booked(self, login, parent, child, slot, mailoutbox):
        resp = self._book(login(parent), slot, child, notes='Left-handed')
        assert resp.status_code == 201
        body = resp.json()
        assert body['status'] == 'confirmed'
        assert body['notes'] == 'Left-handed'
        assert body['slot']['current_bookings'] == 1
        assert body['slot']['status'] == 'booked'

        assert len(mailoutbox) == 1
        assert SlotBooking.objects.get().notification_sent is True
        assert NotificationLog.objects.filter(notification_type='slot_booking').count() == 1

    def test_full_slot_rejected(self, login, parent, other_parent, child, make_child, slot):
        self._book(login(parent), slot, child)
        resp = self._book(login(other_parent), slot, make_child(other_parent, full_name='Late Kid'))
        assert resp.status_code == 400
        slot.refresh_from_db()
        assert slot.current_bookings == slot.max_bookings == 1

    def test_never_exceeds_max_bookings(self, parent, make_child, slot):
        slot.max_bookings = 3
        slot.save()
        kids = [make_child(parent, full_name=f'Kid {n}') for n in range(5)]
        for kid in kids[:3]:
            book_slot(parent, slot.id, kid.id)
        for kid in kids[3:]:
            with pytest.raises(ValidationError):
                book_slot(parent, slot.id, kid.id)
        slot.refresh_from_db()
        assert slot.current_bookings == 3
        assert SlotBooking.objects.filter(slot=slot, status='confirmed').count() == 3

    def test_same_child_twice(self, login, parent, child, slot):
        slot.max_bookings = 2
        slot.save()
        client = login(parent)
        self._book(client, slot, child)
        resp = self._book(client, slot, child)
        assert resp.status_code == 400
        assert resp.json()['error'] == 'This child already has a booking for this slot.'

    def test_unavailable_slot(self, login, parent, child, slot):
        slot.status = 'unavailable'
        slot.save()
        assert self._book(login(parent), slot, child).status_code == 400

    def test_someone_elses_child(self, login, other_parent, child, slot):
        assert self._book(login(other_parent), slot, child).status_code == 403

    def test_booking_links_registration(self, parent, child, slot):
        registration = slot.camp.registrations.create(child=child)
        booking = book_slot(parent, slot.id, child.id)
        assert booking.registration_id == registration.id


class TestCancelBooking:

    def test_parent_cancels_and_frees_capacity(self, login, parent, child, slot, mailoutbox):
        booking = book_slot(parent, slot.id, child.id)
        resp = login(parent).post(f'/api/slot-bookings/{booking.id}/cancel/', {'reason': 'Sick'},
                                  content_type='application/json')
        assert resp.status_code == 200
        body = resp.json()
        assert body['status'] == 'cancelled'
        assert body['cancel_reason'] == 'Sick'
        assert body['slot']['current_bookings'] == 0
        assert body['slot']['status'] == 'available'
        assert 'Sick' in mailoutbox[-1].body

    def test_rebook_after_cancel(self, parent, child, slot):
        first = book_slot(parent, slot.id, child.id)
        cancel_booking(parent, first.id)
        second = book_slot(parent, slot.id, child.id)
        assert second.status == 'confirmed'

    def test_staff_may_cancel(self, login, coach, parent, child, slot):
        booking = book_slot(parent, slot.id, child.id)
        resp = login(coach).post(f'/api/slot-bookings/{booking.id}/cancel/', content_type='application/json')
        assert resp.status_code == 200

    def test_stranger_may_not(self, login, other_parent, parent, child, slot):
        booking = book_slot(parent, slot.id, child.id)
        resp = login(other_parent).post(f'/api/slot-bookings/{booking.id}/cancel/',
                                        content_type='application/json')
        assert resp.status_code == 403

    def test_cancel_twice(self, login, parent, child, slot):
        booking = book_slot(parent, slot.id, child.id)
        client = login(parent)
        client.post(f'/api/slot-bookings/{booking.id}/cancel/', content_type='application/json')
        resp = client.post(f'/api/slot-bookings/{booking.id}/cancel/', content_type='application/json')
        assert resp.status_code == 400


class TestBookingLists:

    def test_parent_bookings(self, login, parent, child, slot):
        book_slot(parent, slot.id, child.id)
        body = login(parent).get('/api/parent/bookings/').json()
        assert body[0]['camp']['id'] == slot.camp_id

    def test_camp_bookings_for_staff(self, login, coach, parent, child, slot):
        book_slot(parent, slot.id, child.id)
        body = login(coach).get(f'/api/camps/{slot.camp_id}/bookings/').json()
        assert body[0]['bookings'][0]['child']['id'] == child.id

    def test_camp_bookings_hidden_from_parents(self, login, parent, slot):
        assert login(parent).get(f'/api/camps/{slot.camp_id}/bookings/').status_code == 403
