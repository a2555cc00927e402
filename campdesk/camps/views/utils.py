"""
camps/views/utils.py
────────────────────
Small helpers shared by the camp view modules.
Nothing here depends on any other view module (no circular imports).
"""

from django.shortcuts import get_object_or_404

from core.http import ApiError, form_error_details

from ..forms import CampScheduleForm, CampSportForm
from ..models import Camp


def get_live_camp(camp_id):
    """A camp that has not been soft-deleted, or 404."""
    return get_object_or_404(Camp.objects.select_related('organization'), pk=camp_id, is_deleted=False)


def can_manage_camp(user, camp):
    return user.is_authenticated and user.can_manage(camp.organization_id)


def schedule_forms_from(payload):
    """
    Validate `schedules` from the payload into CampScheduleForms.
    Returns None when the key is absent.
    """
    entries = payload.get('schedules')
    if entries is None:
        return None
    if not isinstance(entries, list):
        raise ApiError('schedules must be a list.')

    forms, errors = [], {}
    for index, entry in enumerate(entries):
        form = CampScheduleForm(data=entry if isinstance(entry, dict) else {})
        if form.is_valid():
            forms.append(form)
        else:
            errors[str(index)] = form_error_details(form)
    if errors:
        raise ApiError('Invalid schedules.', details={'schedules': errors})
    return forms


SPORT_KEYS = ('sport_id', 'custom_sport', 'skill_level')


def sport_from(payload, camp=None):
    """
    Cleaned CampSportForm data.  On update (camp given) returns None unless
    the payload touches one of the sport keys; missing keys keep their
    current values.
    """
    if camp is not None and not any(key in payload for key in SPORT_KEYS):
        return None

    data = {}
    current = camp.sports.first() if camp is not None else None
    if current is not None:
        data = {
            'sport_id':     current.sport_id,
            'custom_sport': current.custom_sport,
            'skill_level':  current.skill_level,
        }
    data.update({key: payload[key] for key in SPORT_KEYS if key in payload})

    form = CampSportForm(data=data)
    if not form.is_valid():
        raise ApiError('Invalid sport.', details=form_error_details(form))
    return form.cleaned_data
