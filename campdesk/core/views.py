"""
core/views.py
─────────────
Public endpoints: health check, sport catalogue, shared constants.
Custom error handlers (404 / 500) are registered in campdesk/urls.py, the
CSRF failure view in settings.CSRF_FAILURE_VIEW.
"""

from django.http import JsonResponse
from django.utils import timezone

from .cache import cached_sports
from .constants import constants_payload
from .decorators import allow_methods
from .http import json_error


@allow_methods('GET')
def health_view(req):
    return JsonResponse({'status': 'ok', 'time': timezone.now()})


@allow_methods('GET')
def sports_view(req):
    """The sport catalogue, ordered by name."""
    return JsonResponse(cached_sports(), safe=False)


@allow_methods('GET')
def constants_view(req):
    """Every enumeration the client needs for pickers and labels."""
    return JsonResponse(constants_payload())


# ── Custom error pages ────────────────────────────────────────────────────────

def handler404(req, exception):
    return json_error('Not found.', status=404)


def handler500(req):
    return json_error('Internal server error.', status=500)


def csrf_failure(req, reason=''):
    return json_error('CSRF verification failed. Reload the page and try again.', status=403)
