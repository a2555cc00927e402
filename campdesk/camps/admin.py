"""
camps/admin.py
──────────────
Admin for camps, registrations and availability slots.
"""

from django.contrib import admin

from .models import (
    AvailabilitySlot,
    Camp,
    CampSchedule,
    CampSport,
    CampStaff,
    Registration,
    ScheduleException,
    SlotBooking,
)


class CampSportInline(admin.TabularInline):
    model = CampSport
    extra = 0


class CampScheduleInline(admin.TabularInline):
    model = CampSchedule
    extra = 0


class CampStaffInline(admin.TabularInline):
    model = CampStaff
    extra = 0
    raw_id_fields = ('user',)


@admin.register(Camp)
class CampAdmin(admin.ModelAdmin):
    list_display  = ('name', 'organization', 'start_date', 'end_date', 'capacity', 'visibility',
                     'is_cancelled', 'is_deleted')
    list_filter   = ('type', 'visibility', 'scheduling_type', 'is_cancelled', 'is_deleted')
    search_fields = ('name', 'organization__name', 'city', 'slug')
    readonly_fields = ('slug', 'created_at', 'updated_at', 'deleted_at', 'cancelled_at')
    raw_id_fields = ('organization', 'created_by')
    inlines       = [CampSportInline, CampScheduleInline, CampStaffInline]

    fieldsets = (
        (None, {
            'fields': ('organization', 'name', 'description', 'slug', 'type', 'visibility', 'created_by'),
        }),
        ('Location', {
            'fields': ('is_virtual', 'virtual_meeting_url', 'street_address', 'city', 'state',
                       'zip_code', 'additional_location_details'),
        }),
        ('Dates', {
            'fields': ('start_date', 'end_date', 'registration_start_date', 'registration_end_date',
                       'scheduling_type', 'repeat_type', 'repeat_count'),
        }),
        ('Enrolment', {
            'fields': ('price', 'capacity', 'min_age', 'max_age', 'waitlist_enabled'),
        }),
        ('Lifecycle', {
            'fields': ('is_cancelled', 'cancelled_at', 'cancel_reason', 'is_deleted', 'deleted_at',
                       'created_at', 'updated_at'),
        }),
    )


@admin.register(ScheduleException)
class ScheduleExceptionAdmin(admin.ModelAdmin):
    list_display  = ('camp', 'exception_date', 'start_time', 'end_time', 'status')
    list_filter   = ('status',)
    raw_id_fields = ('camp', 'original_schedule')


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display  = ('child', 'camp', 'paid', 'waitlisted', 'registered_at')
    list_filter   = ('paid', 'waitlisted')
    search_fields = ('child__full_name', 'camp__name', 'child__parent__email')
    raw_id_fields = ('camp', 'child')


@admin.register(AvailabilitySlot)
class AvailabilitySlotAdmin(admin.ModelAdmin):
    list_display  = ('camp', 'slot_date', 'start_time', 'end_time', 'status',
                     'current_bookings', 'max_bookings')
    list_filter   = ('status', 'is_recurring')
    raw_id_fields = ('camp', 'creator', 'parent_slot')
    readonly_fields = ('current_bookings',)


@admin.register(SlotBooking)
class SlotBookingAdmin(admin.ModelAdmin):
    list_display  = ('child', 'slot', 'parent', 'status', 'booking_date')
    list_filter   = ('status',)
    search_fields = ('child__full_name', 'parent__email')
    raw_id_fields = ('slot', 'registration', 'child', 'parent', 'rescheduled_from')
