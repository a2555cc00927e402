"""
camps/services.py
─────────────────
Write-side operations on camps.  Views validate input with forms and call
into here; everything that must be all-or-nothing runs in one transaction.

Functions
─────────
create_camp / update_camp
    Camp row + its sport + its weekly schedules.

cancel_camp(camp, reason)
    Mark cancelled and tell every registered parent.

register_child(parent, camp_id, child_id, responses)
    Window, age, duplicate and capacity checks under a lock on the camp row;
    full camps put the child on the waitlist when the camp allows it.

create_slots / update_slot / delete_slot
    Availability slots, including daily/weekly recurrence.

book_slot / cancel_booking
    The slot row is locked while its confirmed bookings are counted, so
    current_bookings never exceeds max_bookings.
"""

import logging
from datetime import timedelta

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.shortcuts import get_object_or_404
from django.utils import timezone

from accounts.models import Child, User
from communications.services import (
    send_camp_update,
    send_registration_confirmation,
    send_slot_booking_confirmation,
    send_slot_cancellation,
    send_waitlist_notification,
)
from custom_fields.services import clean_registration_responses, save_registration_responses

from .forms import MAX_RECURRING_SLOTS
from .models import (
    AvailabilitySlot,
    Camp,
    CampSport,
    CampStaff,
    Registration,
    SlotBooking,
)

logger = logging.getLogger(__name__)


# ── Camps ─────────────────────────────────────────────────────────────────────

def _check_schedules(camp, schedules):
    if camp.scheduling_type == Camp.SchedulingType.FIXED and not schedules:
        raise ValidationError({'schedules': ['Fixed-schedule camps need at least one weekly session.']})


def _replace_schedules(camp, schedules):
    camp.schedules.all().delete()
    if camp.scheduling_type == Camp.SchedulingType.AVAILABILITY:
        return
    for form in schedules:
        schedule = form.save(commit=False)
        schedule.camp = camp
        schedule.save()


def _replace_sport(camp, sport):
    camp.sports.all().delete()
    CampSport.objects.create(
        camp=camp,
        sport=sport['sport_id'],
        custom_sport=(sport.get('custom_sport') or '').strip(),
        skill_level=sport['skill_level'],
    )


@transaction.atomic
def create_camp(organization, creator, form, sport, schedules):
    """
    *form* is a valid CampForm, *sport* cleaned CampSportForm data and
    *schedules* a list of valid CampScheduleForm instances.
    """
    camp = form.save(commit=False)
    _check_schedules(camp, schedules)
    camp.organization = organization
    camp.created_by = creator
    camp.save()

    _replace_sport(camp, sport)
    _replace_schedules(camp, schedules)
    logger.info('Camp %s created for %s by %s', camp.id, organization, creator.username)
    return camp


@transaction.atomic
def update_camp(camp, form, sport=None, schedules=None):
    """Partial update; sport and schedules are replaced only when given."""
    camp = form.save(commit=False)
    if schedules is not None:
        _check_schedules(camp, schedules)
    elif camp.scheduling_type == Camp.SchedulingType.FIXED and 'scheduling_type' in form.changed_data:
        _check_schedules(camp, list(camp.schedules.all()))
    camp.save()

    if sport is not None:
        _replace_sport(camp, sport)
    if schedules is not None or camp.scheduling_type == Camp.SchedulingType.AVAILABILITY:
        _replace_schedules(camp, schedules or [])
    return camp


def cancel_camp(camp, reason=''):
    camp.cancel(reason)
    logger.info('Camp %s cancelled: %s', camp.id, reason or 'no reason given')
    registrations = camp.registrations.select_related('child__parent')
    parents = {reg.child.parent for reg in registrations}
    for parent in parents:
        send_camp_update(parent, camp, f'{camp.name} has been cancelled.', reason)
    return camp


def add_camp_staff(camp, user_id, role):
    user = get_object_or_404(User, pk=user_id)
    if user.organization_id != camp.organization_id:
        raise ValidationError('Staff must be members of the camp organization.')
    assignment, _ = CampStaff.objects.update_or_create(camp=camp, user=user, defaults={'role': role})
    return assignment


def create_schedule_exception(camp, form):
    exception = form.save(commit=False)
    exception.camp = camp
    exception.day_of_week = exception.exception_date.weekday()
    exception.save()
    return exception


# ── Registrations ─────────────────────────────────────────────────────────────

def register_child(parent, camp_id, child_id, responses=(), today=None):
    """
    Register *child_id* for *camp_id* on behalf of *parent*.

    Raises PermissionDenied when the child is not the parent's and
    ValidationError for every business rule.  Returns the Registration,
    whose `waitlisted` flag says whether the child got a place.
    """
    today = today or timezone.localdate()

    child = get_object_or_404(Child, pk=child_id)
    if child.parent_id != parent.id:
        raise PermissionDenied('You can only register your own children.')

    with transaction.atomic():
        camp = get_object_or_404(Camp.objects.select_for_update(), pk=camp_id, is_deleted=False)

        if camp.is_cancelled:
            raise ValidationError('This camp has been cancelled.')
        if not camp.is_registration_open(today):
            raise ValidationError('Registration is not open for this camp.')

        age = child.age_on(camp.start_date)
        if not camp.min_age <= age <= camp.max_age:
            raise ValidationError(
                f'{child.full_name} will be {age}; this camp is for ages {camp.min_age}-{camp.max_age}.'
            )

        if Registration.objects.filter(camp=camp, child=child).exists():
            raise ValidationError('This child is already registered for this camp.')

        answers = clean_registration_responses(camp, responses)

        waitlisted = False
        if camp.enrolled_count >= camp.capacity:
            if not camp.waitlist_enabled:
                raise ValidationError('This camp is full.')
            waitlisted = True

        registration = Registration.objects.create(camp=camp, child=child, waitlisted=waitlisted)
        save_registration_responses(registration, answers)

    logger.info(
        'Child %s registered for camp %s%s', child.id, camp.id, ' (waitlist)' if waitlisted else '',
    )
    if waitlisted:
        send_waitlist_notification(registration)
    else:
        send_registration_confirmation(registration)
    return registration


# ── Availability slots ────────────────────────────────────────────────────────

def _occurrence_dates(first_day, rule, until):
    step = timedelta(days=1 if rule == AvailabilitySlot.Recurrence.DAILY else 7)
    day = first_day + step
    while day <= until:
        yield day
        day += step


@transaction.atomic
def create_slots(camp, creator, form):
    """
    Save the slot described by a valid AvailabilitySlotForm.  Recurring
    slots also get one child slot per day/week up to the recurrence end
    date (never past the camp end, at most MAX_RECURRING_SLOTS in total).
    Returns every slot created, the template first.
    """
    slot = form.save(commit=False)
    slot.camp = camp
    slot.creator = creator
    slot.duration_minutes = form.cleaned_data['duration_minutes']
    # A new slot has no bookings, so it can only be available or unavailable.
    slot.current_bookings = 0
    if slot.status != AvailabilitySlot.Status.UNAVAILABLE:
        slot.status = AvailabilitySlot.Status.AVAILABLE
    slot.save()

    if not slot.is_recurring:
        return [slot]

    until = min(slot.recurrence_end_date, camp.end_date)
    occurrences = []
    for day in _occurrence_dates(slot.slot_date, slot.recurrence_rule, until):
        if len(occurrences) + 1 >= MAX_RECURRING_SLOTS:
            break
        occurrences.append(AvailabilitySlot(
            camp=camp,
            creator=creator,
            slot_date=day,
            start_time=slot.start_time,
            end_time=slot.end_time,
            duration_minutes=slot.duration_minutes,
            status=slot.status,
            max_bookings=slot.max_bookings,
            notes=slot.notes,
            buffer_before=slot.buffer_before,
            buffer_after=slot.buffer_after,
            parent_slot=slot,
        ))
    AvailabilitySlot.objects.bulk_create(occurrences)
    logger.info('Created %d recurring slots for camp %s', len(occurrences) + 1, camp.id)
    return [slot] + occurrences


@transaction.atomic
def update_slot(form):
    locked = AvailabilitySlot.objects.select_for_update().get(pk=form.instance.pk)
    if form.cleaned_data['max_bookings'] < locked.current_bookings:
        raise ValidationError(
            f'max_bookings cannot be lower than the {locked.current_bookings} existing bookings.'
        )
    slot = form.save(commit=False)
    slot.duration_minutes = form.cleaned_data['duration_minutes']
    slot.refresh_booking_state()
    slot.save()
    return slot


@transaction.atomic
def delete_slot(slot):
    locked = AvailabilitySlot.objects.select_for_update().get(pk=slot.pk)
    if locked.current_bookings > 0:
        raise ValidationError('Cannot delete a slot that has bookings. Cancel them first.')
    locked.delete()


# ── Bookings ──────────────────────────────────────────────────────────────────

def book_slot(parent, slot_id, child_id, notes=''):
    """
    Book *child_id* into *slot_id*.  The slot row stays locked from the
    capacity check until the new booking is counted.
    """
    child = get_object_or_404(Child, pk=child_id)
    if child.parent_id != parent.id:
        raise PermissionDenied('You can only book slots for your own children.')

    with transaction.atomic():
        slot = get_object_or_404(AvailabilitySlot.objects.select_for_update(), pk=slot_id)
        camp = slot.camp

        if camp.is_cancelled or camp.is_deleted:
            raise ValidationError('This camp is no longer running.')
        if slot.status != AvailabilitySlot.Status.AVAILABLE:
            raise ValidationError('This slot is not available for booking.')
        if slot.current_bookings >= slot.max_bookings:
            raise ValidationError('This slot is fully booked.')
        if slot.bookings.filter(child=child, status=SlotBooking.Status.CONFIRMED).exists():
            raise ValidationError('This child already has a booking for this slot.')

        registration = Registration.objects.filter(camp=camp, child=child, waitlisted=False).first()
        booking = SlotBooking.objects.create(
            slot=slot,
            registration=registration,
            child=child,
            parent=parent,
            notes=notes,
        )

        slot.refresh_booking_state()
        slot.save(update_fields=['current_bookings', 'status', 'updated_at'])

    logger.info('Slot %s booked for child %s (%d/%d)', slot.id, child.id, slot.current_bookings, slot.max_bookings)
    if send_slot_booking_confirmation(booking):
        booking.notification_sent = True
        booking.save(update_fields=['notification_sent', 'updated_at'])
    return booking


def cancel_booking(user, booking_id, reason=''):
    """The booking's parent or staff of the camp organization may cancel."""
    with transaction.atomic():
        booking = get_object_or_404(SlotBooking.objects.select_for_update(), pk=booking_id)
        slot = AvailabilitySlot.objects.select_for_update().get(pk=booking.slot_id)

        if booking.parent_id != user.id and not user.belongs_to(slot.camp.organization_id):
            raise PermissionDenied('You cannot cancel this booking.')
        if booking.status == SlotBooking.Status.CANCELLED:
            raise ValidationError('This booking is already cancelled.')

        booking.status = SlotBooking.Status.CANCELLED
        booking.cancelled_at = timezone.now()
        booking.cancel_reason = reason
        booking.save(update_fields=['status', 'cancelled_at', 'cancel_reason', 'updated_at'])

        slot.refresh_booking_state()
        slot.save(update_fields=['current_bookings', 'status', 'updated_at'])

    logger.info('Booking %s cancelled by %s', booking.id, user.username)
    send_slot_cancellation(booking)
    return booking
