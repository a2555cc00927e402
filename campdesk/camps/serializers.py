"""
camps/serializers.py
────────────────────
Dict builders for camps, registrations, slots and bookings.
"""

from accounts.serializers import child_summary, organization_to_dict, user_summary
from core.constants import get_sport_name


def camp_sport_to_dict(camp_sport):
    return {
        'id':           camp_sport.id,
        'sport_id':     camp_sport.sport_id,
        'sport_name':   get_sport_name(camp_sport.sport_id) if camp_sport.sport_id else camp_sport.custom_sport,
        'custom_sport': camp_sport.custom_sport,
        'skill_level':  camp_sport.skill_level,
    }


def schedule_to_dict(schedule):
    return {
        'id':          schedule.id,
        'day_of_week': schedule.day_of_week,
        'start_time':  schedule.start_time.strftime('%H:%M'),
        'end_time':    schedule.end_time.strftime('%H:%M'),
    }


def schedule_exception_to_dict(exc):
    return {
        'id':                   exc.id,
        'original_schedule_id': exc.original_schedule_id,
        'exception_date':       exc.exception_date,
        'day_of_week':          exc.day_of_week,
        'start_time':           exc.start_time.strftime('%H:%M'),
        'end_time':             exc.end_time.strftime('%H:%M'),
        'status':               exc.status,
        'reason':               exc.reason,
    }


def camp_summary(camp):
    return {
        'id':              camp.id,
        'slug':            camp.slug,
        'name':            camp.name,
        'organization_id': camp.organization_id,
        'city':            camp.city,
        'state':           camp.state,
        'is_virtual':      camp.is_virtual,
        'start_date':      camp.start_date,
        'end_date':        camp.end_date,
        'price':           camp.price,
        'type':            camp.type,
        'status':          camp.status(),
    }


def camp_to_dict(camp, can_manage=False):
    data = camp_summary(camp)
    data.update({
        'description':                 camp.description,
        'organization':                organization_to_dict(camp.organization),
        'virtual_meeting_url':         camp.virtual_meeting_url,
        'street_address':              camp.street_address,
        'zip_code':                    camp.zip_code,
        'additional_location_details': camp.additional_location_details,
        'registration_start_date':     camp.registration_start_date,
        'registration_end_date':       camp.registration_end_date,
        'capacity':                    camp.capacity,
        'spots_available':             camp.spots_available,
        'min_age':                     camp.min_age,
        'max_age':                     camp.max_age,
        'waitlist_enabled':            camp.waitlist_enabled,
        'visibility':                  camp.visibility,
        'scheduling_type':             camp.scheduling_type,
        'repeat_type':                 camp.repeat_type,
        'repeat_count':                camp.repeat_count,
        'is_cancelled':                camp.is_cancelled,
        'cancel_reason':               camp.cancel_reason,
        'created_at':                  camp.created_at,
        'sports':                      [camp_sport_to_dict(cs) for cs in camp.sports.all()],
        'schedules':                   [schedule_to_dict(s) for s in camp.schedules.all()],
        'permissions':                 {'can_manage': can_manage},
    })
    return data


def registration_to_dict(registration, include_parent=False):
    data = {
        'id':            registration.id,
        'camp_id':       registration.camp_id,
        'child_id':      registration.child_id,
        'child':         child_summary(registration.child),
        'paid':          registration.paid,
        'waitlisted':    registration.waitlisted,
        'registered_at': registration.registered_at,
    }
    if include_parent:
        data['parent'] = user_summary(registration.child.parent)
    return data


def slot_to_dict(slot, include_bookings=False):
    data = {
        'id':                  slot.id,
        'camp_id':             slot.camp_id,
        'slot_date':           slot.slot_date,
        'start_time':          slot.start_time.strftime('%H:%M'),
        'end_time':            slot.end_time.strftime('%H:%M'),
        'duration_minutes':    slot.duration_minutes,
        'status':              slot.status,
        'max_bookings':        slot.max_bookings,
        'current_bookings':    slot.current_bookings,
        'notes':               slot.notes,
        'buffer_before':       slot.buffer_before,
        'buffer_after':        slot.buffer_after,
        'is_recurring':        slot.is_recurring,
        'recurrence_rule':     slot.recurrence_rule,
        'recurrence_end_date': slot.recurrence_end_date,
        'parent_slot_id':      slot.parent_slot_id,
    }
    if include_bookings:
        data['bookings'] = [booking_to_dict(b) for b in slot.bookings.all()]
    return data


def booking_to_dict(booking, include_slot=False):
    data = {
        'id':              booking.id,
        'slot_id':         booking.slot_id,
        'registration_id': booking.registration_id,
        'child':           child_summary(booking.child),
        'parent_id':       booking.parent_id,
        'status':          booking.status,
        'booking_date':    booking.booking_date,
        'cancelled_at':    booking.cancelled_at,
        'cancel_reason':   booking.cancel_reason,
        'notes':           booking.notes,
    }
    if include_slot:
        data['slot'] = slot_to_dict(booking.slot)
        data['camp'] = camp_summary(booking.slot.camp)
    return data
