"""
camps/models.py
───────────────
Camps and everything that hangs off one.

Camp             – a sports camp run by an organization.
CampSport        – the sport (and skill level) a camp teaches.
CampSchedule     – a weekly session: day of week + start/end time.
ScheduleException– a one-off cancellation or reschedule of a session.
CampStaff        – an organization member assigned to a camp.
Registration     – a child's place (or waitlist spot) in a camp.
AvailabilitySlot – a bookable time window for availability-scheduled camps.
SlotBooking      – a child's booking of a slot.

SECURITY: querysets must be scoped to the user's organization in views.
"""

import secrets

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils import timezone

from core.constants import SkillLevel, StaffRole


def _camp_slug():
    return secrets.token_hex(12)


class Camp(models.Model):
    """
    A camp with a location (or meeting URL), a registration window and
    a capacity.  Deleting a camp is a soft delete; cancelling keeps it
    visible with a reason.
    """

    class Type(models.TextChoices):
        ONE_ON_ONE = 'one_on_one', 'One-on-one'
        GROUP      = 'group',      'Group'
        TEAM       = 'team',       'Team'
        VIRTUAL    = 'virtual',    'Virtual'

    class Visibility(models.TextChoices):
        PUBLIC  = 'public',  'Public'
        PRIVATE = 'private', 'Private'

    class RepeatType(models.TextChoices):
        NONE    = 'none',    'Does not repeat'
        WEEKLY  = 'weekly',  'Weekly'
        MONTHLY = 'monthly', 'Monthly'

    class SchedulingType(models.TextChoices):
        FIXED        = 'fixed',        'Fixed weekly schedule'
        AVAILABILITY = 'availability', 'Bookable availability slots'

    class Status(models.TextChoices):
        REGISTRATION_OPEN   = 'registration_open',   'Registration open'
        REGISTRATION_CLOSED = 'registration_closed', 'Registration closed'
        ACTIVE              = 'active',              'Active'
        COMPLETED           = 'completed',           'Completed'
        CANCELLED           = 'cancelled',           'Cancelled'

    organization = models.ForeignKey(
        'accounts.Organization',
        on_delete=models.CASCADE,
        related_name='camps',
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='camps_created',
    )
    name = models.CharField(max_length=200)
    description = models.TextField()
    slug = models.CharField(max_length=32, unique=True, default=_camp_slug, editable=False)

    # Location
    is_virtual = models.BooleanField(default=False)
    virtual_meeting_url = models.URLField(blank=True)
    street_address = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=50, blank=True)
    zip_code = models.CharField(max_length=20, blank=True)
    additional_location_details = models.TextField(blank=True)

    # Dates
    start_date = models.DateField()
    end_date = models.DateField()
    registration_start_date = models.DateField()
    registration_end_date = models.DateField()

    # Enrolment
    price = models.DecimalField(max_digits=8, decimal_places=2, default=0)
    capacity = models.PositiveIntegerField()
    min_age = models.PositiveSmallIntegerField()
    max_age = models.PositiveSmallIntegerField()
    waitlist_enabled = models.BooleanField(default=True)

    type = models.CharField(max_length=20, choices=Type.choices, default=Type.GROUP)
    visibility = models.CharField(max_length=10, choices=Visibility.choices, default=Visibility.PUBLIC)
    scheduling_type = models.CharField(
        max_length=20,
        choices=SchedulingType.choices,
        default=SchedulingType.FIXED,
    )
    repeat_type = models.CharField(max_length=10, choices=RepeatType.choices, default=RepeatType.NONE)
    repeat_count = models.PositiveSmallIntegerField(default=0)

    # Lifecycle
    is_deleted = models.BooleanField(default=False)
    deleted_at = models.DateTimeField(null=True, blank=True)
    is_cancelled = models.BooleanField(default=False)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    cancel_reason = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['start_date', 'name']
        constraints = [
            models.CheckConstraint(
                condition=Q(end_date__gte=models.F('start_date')),
                name='camp_end_after_start',
            ),
            models.CheckConstraint(
                condition=Q(max_age__gte=models.F('min_age')),
                name='camp_age_range',
            ),
        ]

    def __str__(self):
        return self.name

    # ── Capacity ──────────────────────────────────────────────────────────────

    @property
    def enrolled_count(self):
        """Registrations holding a place (waitlist excluded)."""
        return self.registrations.filter(waitlisted=False).count()

    @property
    def spots_available(self):
        return max(0, self.capacity - self.enrolled_count)

    @property
    def is_full(self):
        return self.enrolled_count >= self.capacity

    # ── Status ────────────────────────────────────────────────────────────────

    def is_registration_open(self, today=None):
        today = today or timezone.localdate()
        return (
            not self.is_cancelled
            and not self.is_deleted
            and self.registration_start_date <= today <= self.registration_end_date
        )

    def status(self, today=None):
        today = today or timezone.localdate()
        if self.is_cancelled:
            return self.Status.CANCELLED
        if today < self.registration_start_date:
            return self.Status.REGISTRATION_CLOSED
        if today <= self.registration_end_date:
            return self.Status.REGISTRATION_OPEN
        if today < self.start_date:
            return self.Status.REGISTRATION_CLOSED
        if today <= self.end_date:
            return self.Status.ACTIVE
        return self.Status.COMPLETED

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def soft_delete(self, today=None):
        """Hide the camp.  Only allowed before registration opens."""
        today = today or timezone.localdate()
        if today >= self.registration_start_date:
            raise ValidationError('Camps can only be deleted before registration opens.')
        self.is_deleted = True
        self.deleted_at = timezone.now()
        self.save(update_fields=['is_deleted', 'deleted_at', 'updated_at'])

    def cancel(self, reason=''):
        if self.is_cancelled:
            raise ValidationError('This camp is already cancelled.')
        self.is_cancelled = True
        self.cancelled_at = timezone.now()
        self.cancel_reason = reason
        self.save(update_fields=['is_cancelled', 'cancelled_at', 'cancel_reason', 'updated_at'])


class CampSport(models.Model):
    camp = models.ForeignKey(Camp, on_delete=models.CASCADE, related_name='sports')
    sport = models.ForeignKey(
        'core.Sport',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+',
    )
    custom_sport = models.CharField(max_length=100, blank=True)
    skill_level = models.CharField(max_length=20, choices=SkillLevel.choices)

    def __str__(self):
        return f"{self.camp} – {self.sport or self.custom_sport}"


class CampSchedule(models.Model):
    """Weekly session; day_of_week follows Python: 0 = Monday … 6 = Sunday."""

    camp = models.ForeignKey(Camp, on_delete=models.CASCADE, related_name='schedules')
    day_of_week = models.PositiveSmallIntegerField()
    start_time = models.TimeField()
    end_time = models.TimeField()

    class Meta:
        ordering = ['day_of_week', 'start_time']

    def __str__(self):
        return f"{self.camp} day {self.day_of_week} {self.start_time:%H:%M}-{self.end_time:%H:%M}"


class ScheduleException(models.Model):

    class Status(models.TextChoices):
        ACTIVE      = 'active',      'Active'
        CANCELLED   = 'cancelled',   'Cancelled'
        RESCHEDULED = 'rescheduled', 'Rescheduled'

    camp = models.ForeignKey(Camp, on_delete=models.CASCADE, related_name='schedule_exceptions')
    original_schedule = models.ForeignKey(
        CampSchedule,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='exceptions',
    )
    exception_date = models.DateField()
    day_of_week = models.PositiveSmallIntegerField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.CANCELLED)
    reason = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['exception_date', 'start_time']


class CampStaff(models.Model):
    camp = models.ForeignKey(Camp, on_delete=models.CASCADE, related_name='staff')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='camp_assignments',
    )
    role = models.CharField(max_length=20, choices=StaffRole.choices)

    class Meta:
        verbose_name_plural = 'Camp staff'
        constraints = [
            models.UniqueConstraint(fields=['camp', 'user'], name='unique_camp_staff'),
        ]


class Registration(models.Model):
    """
    A child's registration.  `waitlisted` registrations do not count
    towards the camp's capacity.
    """

    camp = models.ForeignKey(Camp, on_delete=models.CASCADE, related_name='registrations')
    child = models.ForeignKey('accounts.Child', on_delete=models.CASCADE, related_name='registrations')
    paid = models.BooleanField(default=False)
    waitlisted = models.BooleanField(default=False)
    registered_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-registered_at']
        constraints = [
            models.UniqueConstraint(fields=['camp', 'child'], name='unique_camp_registration'),
        ]

    @property
    def parent(self):
        return self.child.parent

    def __str__(self):
        label = 'waitlist' if self.waitlisted else 'enrolled'
        return f"{self.child} @ {self.camp} ({label})"


class AvailabilitySlot(models.Model):
    """
    A bookable window.  `current_bookings` mirrors the number of confirmed
    SlotBookings and never exceeds `max_bookings`; camps/services.py keeps
    both in step under a row lock.
    """

    class Status(models.TextChoices):
        AVAILABLE   = 'available',   'Available'
        BOOKED      = 'booked',      'Booked'
        UNAVAILABLE = 'unavailable', 'Unavailable'

    class Recurrence(models.TextChoices):
        DAILY  = 'daily',  'Daily'
        WEEKLY = 'weekly', 'Weekly'

    camp = models.ForeignKey(Camp, on_delete=models.CASCADE, related_name='availability_slots')
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='slots_created',
    )
    slot_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    duration_minutes = models.PositiveIntegerField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.AVAILABLE)
    max_bookings = models.PositiveIntegerField(default=1)
    current_bookings = models.PositiveIntegerField(default=0)
    notes = models.TextField(blank=True)
    buffer_before = models.PositiveIntegerField(default=0, help_text='Minutes kept free before the slot.')
    buffer_after = models.PositiveIntegerField(default=0, help_text='Minutes kept free after the slot.')

    is_recurring = models.BooleanField(default=False)
    recurrence_rule = models.CharField(max_length=10, choices=Recurrence.choices, blank=True)
    recurrence_end_date = models.DateField(null=True, blank=True)
    parent_slot = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='occurrences',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['slot_date', 'start_time']
        constraints = [
            models.CheckConstraint(
                condition=Q(current_bookings__lte=models.F('max_bookings')),
                name='slot_bookings_within_capacity',
            ),
            models.CheckConstraint(
                condition=Q(max_bookings__gte=1),
                name='slot_max_bookings_positive',
            ),
        ]

    def __str__(self):
        return f"{self.camp} {self.slot_date} {self.start_time:%H:%M}-{self.end_time:%H:%M}"

    @property
    def is_full(self):
        return self.current_bookings >= self.max_bookings

    def refresh_booking_state(self):
        """
        Recount confirmed bookings and derive the status from them.
        `unavailable` is a manual state and is left alone.
        """
        self.current_bookings = self.bookings.filter(status=SlotBooking.Status.CONFIRMED).count()
        if self.status != self.Status.UNAVAILABLE:
            self.status = self.Status.BOOKED if self.is_full else self.Status.AVAILABLE


class SlotBooking(models.Model):

    class Status(models.TextChoices):
        CONFIRMED   = 'confirmed',   'Confirmed'
        CANCELLED   = 'cancelled',   'Cancelled'
        RESCHEDULED = 'rescheduled', 'Rescheduled'
        WAITLISTED  = 'waitlisted',  'Waitlisted'

    slot = models.ForeignKey(AvailabilitySlot, on_delete=models.CASCADE, related_name='bookings')
    registration = models.ForeignKey(
        Registration,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='slot_bookings',
    )
    child = models.ForeignKey('accounts.Child', on_delete=models.CASCADE, related_name='slot_bookings')
    parent = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='slot_bookings',
    )
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.CONFIRMED)
    booking_date = models.DateTimeField(default=timezone.now)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    cancel_reason = models.TextField(blank=True)
    rescheduled_from = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='rescheduled_to',
    )
    notes = models.TextField(blank=True)
    notification_sent = models.BooleanField(default=False)
    reminder_sent = models.BooleanField(default=False)
    feedback_sent = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-booking_date']
        constraints = [
            models.UniqueConstraint(
                fields=['slot', 'child'],
                condition=Q(status='confirmed'),
                name='unique_confirmed_booking_per_child',
            ),
        ]

    def __str__(self):
        return f"{self.child} → {self.slot} ({self.get_status_display()})"
