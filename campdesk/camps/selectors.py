"""
camps/selectors.py
──────────────────
Read-side query helpers: which camps a user may see, listing filters and
the organization dashboard figures.
"""

from datetime import timedelta

from django.db.models import Q
from django.utils import timezone

from core.http import ApiError

from .models import Camp, Registration


def live_camps():
    return Camp.objects.filter(is_deleted=False)


def public_camps():
    return live_camps().filter(visibility=Camp.Visibility.PUBLIC).select_related('organization')


def camps_visible_to(user):
    """
    Staff see every live camp of their own organization; platform admins see
    everything; everyone else (parents, athletes, anonymous) sees public camps.
    """
    if user.is_authenticated and user.is_platform_admin:
        return live_camps().select_related('organization')
    if user.is_authenticated and user.is_organization_staff:
        return live_camps().filter(organization_id=user.organization_id).select_related('organization')
    return public_camps()


def filter_camps(camps, params):
    """Apply the listing filters from a QueryDict."""
    if params.get('q'):
        term = params['q'].strip()
        camps = camps.filter(Q(name__icontains=term) | Q(description__icontains=term))
    if params.get('sport'):
        camps = camps.filter(sports__sport_id=_int_param(params, 'sport'))
    if params.get('skill_level'):
        camps = camps.filter(sports__skill_level=params['skill_level'])
    if params.get('type'):
        camps = camps.filter(type=params['type'])
    if params.get('city'):
        camps = camps.filter(city__iexact=params['city'].strip())
    if params.get('state'):
        camps = camps.filter(state__iexact=params['state'].strip())
    if params.get('age'):
        age = _int_param(params, 'age')
        camps = camps.filter(min_age__lte=age, max_age__gte=age)
    if params.get('upcoming') == 'true':
        camps = camps.filter(end_date__gte=timezone.localdate())
    return camps.distinct()


def _int_param(params, name):
    try:
        return int(params[name])
    except (TypeError, ValueError):
        raise ApiError(f'{name} must be an integer.')


def organization_dashboard(organization, today=None):
    """Camp counts by status plus registration totals for one organization."""
    today = today or timezone.localdate()
    counts = {status: 0 for status in Camp.Status.values}
    for camp in live_camps().filter(organization=organization):
        counts[camp.status(today)] += 1

    registrations = Registration.objects.filter(camp__organization=organization, camp__is_deleted=False)
    since = timezone.now() - timedelta(hours=48)
    return {
        'camp_counts':          counts,
        'total_camps':          sum(counts.values()),
        'total_registrations':  registrations.count(),
        'waitlisted':           registrations.filter(waitlisted=True).count(),
        'recent_registrations': registrations.filter(registered_at__gte=since).count(),
    }
