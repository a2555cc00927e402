"""
camps/views/__init__.py
───────────────────────
Re-exports every view so urls.py can keep using `views.<name>`.
"""

from .availability import (
    book_slot_view,
    camp_bookings_view,
    cancel_booking_view,
    parent_bookings_view,
    slot_detail_view,
    slots_view,
)
from .camps import (
    camp_by_slug_view,
    camp_detail_view,
    camp_share_view,
    camp_staff_view,
    camps_view,
    cancel_camp_view,
    organization_dashboard_view,
    schedule_exceptions_view,
    schedules_view,
)
from .registrations import (
    camp_registrations_view,
    parent_registrations_view,
    register_view,
)

__all__ = [
    # camps
    'camps_view',
    'camp_detail_view',
    'camp_by_slug_view',
    'cancel_camp_view',
    'camp_share_view',
    'schedules_view',
    'schedule_exceptions_view',
    'camp_staff_view',
    'organization_dashboard_view',
    # registrations
    'register_view',
    'camp_registrations_view',
    'parent_registrations_view',
    # availability
    'slots_view',
    'slot_detail_view',
    'book_slot_view',
    'cancel_booking_view',
    'parent_bookings_view',
    'camp_bookings_view',
]
