"""
camps/views/availability.py
───────────────────────────
Availability slots for one-on-one / small-group camps and their bookings.

Organization staff create and edit slots; parents book them for their
children.  Capacity is enforced in camps/services.py.
"""

from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404

from core.decorators import allow_methods, api_login_required, parent_required, require_POST_or_405
from core.http import bind_json_form, read_json, validate_form
from core.permissions import ensure_manager, ensure_member

from ..forms import AvailabilitySlotForm, BookingForm, CancelForm
from ..models import AvailabilitySlot, SlotBooking
from ..serializers import booking_to_dict, slot_to_dict
from ..services import book_slot, cancel_booking, create_slots, delete_slot, update_slot
from .utils import get_live_camp


@allow_methods('GET', 'POST')
def slots_view(req, camp_id):
    """
    GET  – slots ordered by date and start time; `?available=true` keeps
           only bookable ones.
    POST – create a slot (and its recurrences).
    """
    camp = get_live_camp(camp_id)

    if req.method == 'GET':
        slots = camp.availability_slots.all()
        if req.GET.get('available') == 'true':
            slots = slots.filter(status=AvailabilitySlot.Status.AVAILABLE)
        return JsonResponse([slot_to_dict(slot) for slot in slots], safe=False)

    ensure_manager(req.user, camp.organization_id)
    form = bind_json_form(AvailabilitySlotForm, read_json(req), camp=camp)
    validate_form(form)
    slots = create_slots(camp, req.user, form)
    data = slot_to_dict(slots[0])
    data['occurrences_created'] = len(slots) - 1
    return JsonResponse(data, status=201)


@api_login_required
@allow_methods('PATCH', 'DELETE')
def slot_detail_view(req, camp_id, slot_id):
    camp = get_live_camp(camp_id)
    slot = get_object_or_404(AvailabilitySlot, pk=slot_id, camp=camp)
    ensure_manager(req.user, camp.organization_id)

    if req.method == 'DELETE':
        delete_slot(slot)
        return HttpResponse(status=204)

    form = bind_json_form(AvailabilitySlotForm, read_json(req), instance=slot, camp=camp)
    validate_form(form)
    return JsonResponse(slot_to_dict(update_slot(form)))


@parent_required
@require_POST_or_405
def book_slot_view(req, camp_id, slot_id):
    camp = get_live_camp(camp_id)
    slot = get_object_or_404(AvailabilitySlot, pk=slot_id, camp=camp)
    cleaned = validate_form(BookingForm(data=read_json(req)))
    booking = book_slot(req.user, slot.id, cleaned['child_id'], cleaned.get('notes', ''))
    return JsonResponse(booking_to_dict(booking, include_slot=True), status=201)


@api_login_required
@require_POST_or_405
def cancel_booking_view(req, booking_id):
    cleaned = validate_form(CancelForm(data=read_json(req)))
    booking = cancel_booking(req.user, booking_id, cleaned.get('reason', ''))
    return JsonResponse(booking_to_dict(booking, include_slot=True))


@parent_required
@allow_methods('GET')
def parent_bookings_view(req):
    bookings = (
        SlotBooking.objects
        .filter(parent=req.user)
        .select_related('slot__camp', 'child')
    )
    return JsonResponse([booking_to_dict(b, include_slot=True) for b in bookings], safe=False)


@api_login_required
@allow_methods('GET')
def camp_bookings_view(req, camp_id):
    """Every slot of the camp with its bookings (organization staff only)."""
    camp = get_live_camp(camp_id)
    ensure_member(req.user, camp.organization_id)
    slots = camp.availability_slots.prefetch_related('bookings__child')
    return JsonResponse([slot_to_dict(slot, include_bookings=True) for slot in slots], safe=False)
