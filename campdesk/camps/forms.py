from datetime import date, datetime

from django import forms

from core.constants import SkillLevel, StaffRole
from core.models import Sport

from .models import AvailabilitySlot, Camp, CampSchedule, ScheduleException

MAX_RECURRING_SLOTS = 100


class CampForm(forms.ModelForm):
    """
    Create / edit a camp.

    Key behaviour:
    - in-person camps need a full street address; virtual camps need a
      meeting URL instead.
    - end dates may not precede start dates and min_age ≤ max_age.
    - `state` is stored upper-case.
    """

    class Meta:
        model = Camp
        fields = [
            'name',
            'description',
            'is_virtual',
            'virtual_meeting_url',
            'street_address',
            'city',
            'state',
            'zip_code',
            'additional_location_details',
            'start_date',
            'end_date',
            'registration_start_date',
            'registration_end_date',
            'price',
            'capacity',
            'min_age',
            'max_age',
            'waitlist_enabled',
            'type',
            'visibility',
            'scheduling_type',
            'repeat_type',
            'repeat_count',
        ]

    def clean_state(self):
        return (self.cleaned_data.get('state') or '').strip().upper()

    def clean_capacity(self):
        capacity = self.cleaned_data.get('capacity')
        if capacity is not None and capacity < 1:
            raise forms.ValidationError('Capacity must be at least 1.')
        return capacity

    def clean(self):
        cleaned = super().clean()

        start, end = cleaned.get('start_date'), cleaned.get('end_date')
        if start and end and end < start:
            self.add_error('end_date', 'End date must be on or after the start date.')

        reg_start, reg_end = cleaned.get('registration_start_date'), cleaned.get('registration_end_date')
        if reg_start and reg_end and reg_end < reg_start:
            self.add_error('registration_end_date', 'Registration end must be on or after registration start.')
        if reg_start and end and reg_start > end:
            self.add_error('registration_start_date', 'Registration must open before the camp ends.')

        min_age, max_age = cleaned.get('min_age'), cleaned.get('max_age')
        if min_age is not None and max_age is not None and min_age > max_age:
            self.add_error('max_age', 'Maximum age must be greater than or equal to minimum age.')

        if cleaned.get('is_virtual'):
            if not cleaned.get('virtual_meeting_url'):
                self.add_error('virtual_meeting_url', 'Virtual camps need a meeting URL.')
        else:
            for name in ('street_address', 'city', 'state', 'zip_code'):
                if name not in self.errors and not cleaned.get(name):
                    self.add_error(name, 'Required for in-person camps.')

        return cleaned


class CampScheduleForm(forms.ModelForm):
    """One weekly session.  Times accept HH:MM or H:MM."""

    class Meta:
        model = CampSchedule
        fields = ['day_of_week', 'start_time', 'end_time']

    def clean_day_of_week(self):
        day = self.cleaned_data['day_of_week']
        if day > 6:
            raise forms.ValidationError('day_of_week must be between 0 (Monday) and 6 (Sunday).')
        return day

    def clean(self):
        cleaned = super().clean()
        start, end = cleaned.get('start_time'), cleaned.get('end_time')
        if start and end and end <= start:
            self.add_error('end_time', 'End time must be after start time.')
        return cleaned


class CampSportForm(forms.Form):
    sport_id = forms.ModelChoiceField(queryset=Sport.objects.all(), required=False)
    custom_sport = forms.CharField(max_length=100, required=False)
    skill_level = forms.ChoiceField(choices=SkillLevel.choices)

    def clean(self):
        cleaned = super().clean()
        if not cleaned.get('sport_id') and not (cleaned.get('custom_sport') or '').strip():
            if 'sport_id' not in self.errors:
                self.add_error('sport_id', 'Choose a sport or enter a custom one.')
        return cleaned


class ScheduleExceptionForm(forms.ModelForm):

    class Meta:
        model = ScheduleException
        fields = ['original_schedule', 'exception_date', 'start_time', 'end_time', 'status', 'reason']

    def __init__(self, *args, camp=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.camp = camp
        self.fields['original_schedule'].queryset = (
            camp.schedules.all() if camp else CampSchedule.objects.none()
        )

    def clean(self):
        cleaned = super().clean()
        day = cleaned.get('exception_date')
        start, end = cleaned.get('start_time'), cleaned.get('end_time')
        if start and end and end <= start:
            self.add_error('end_time', 'End time must be after start time.')
        if self.camp and day and not (self.camp.start_date <= day <= self.camp.end_date):
            self.add_error('exception_date', 'Date must fall within the camp dates.')
        return cleaned


class CampStaffForm(forms.Form):
    user_id = forms.IntegerField()
    role = forms.ChoiceField(choices=StaffRole.choices)


class RegistrationForm(forms.Form):
    camp_id = forms.IntegerField()
    child_id = forms.IntegerField()
    custom_field_responses = forms.JSONField(required=False)

    def clean_custom_field_responses(self):
        responses = self.cleaned_data.get('custom_field_responses') or []
        if not isinstance(responses, list) or not all(isinstance(item, dict) for item in responses):
            raise forms.ValidationError('custom_field_responses must be a list of objects.')
        return responses


class CancelForm(forms.Form):
    reason = forms.CharField(required=False)


class AvailabilitySlotForm(forms.ModelForm):
    """
    A bookable slot.  `duration_minutes` is derived from the times.
    Recurring slots need a rule and an end date.
    """

    class Meta:
        model = AvailabilitySlot
        fields = [
            'slot_date',
            'start_time',
            'end_time',
            'status',
            'max_bookings',
            'notes',
            'buffer_before',
            'buffer_after',
            'is_recurring',
            'recurrence_rule',
            'recurrence_end_date',
        ]

    def __init__(self, *args, camp=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.camp = camp

    def clean_max_bookings(self):
        max_bookings = self.cleaned_data.get('max_bookings')
        if max_bookings is not None and max_bookings < 1:
            raise forms.ValidationError('max_bookings must be at least 1.')
        return max_bookings

    def clean(self):
        cleaned = super().clean()
        start, end = cleaned.get('start_time'), cleaned.get('end_time')
        if start and end:
            duration = slot_duration_minutes(start, end)
            if duration <= 0:
                self.add_error('end_time', 'End time must be after start time.')
            else:
                cleaned['duration_minutes'] = duration

        day = cleaned.get('slot_date')
        if self.camp and day and not (self.camp.start_date <= day <= self.camp.end_date):
            self.add_error('slot_date', 'Slot date must fall within the camp dates.')

        if cleaned.get('is_recurring'):
            if not cleaned.get('recurrence_rule'):
                self.add_error('recurrence_rule', 'Recurring slots need a recurrence rule.')
            until = cleaned.get('recurrence_end_date')
            if not until:
                self.add_error('recurrence_end_date', 'Recurring slots need an end date.')
            elif day and until < day:
                self.add_error('recurrence_end_date', 'Recurrence must end on or after the slot date.')
        return cleaned


class BookingForm(forms.Form):
    child_id = forms.IntegerField()
    notes = forms.CharField(required=False)


def slot_duration_minutes(start, end):
    """Minutes between two times on the same day (≤ 0 when end is not after start)."""
    day = date(2000, 1, 1)
    return int((datetime.combine(day, end) - datetime.combine(day, start)).total_seconds() // 60)
