"""
core/middleware.py
──────────────────
ApiErrorMiddleware – converts exceptions raised by /api/ views into JSON.

    ApiError          → its own status
    ValidationError   → 400 with the messages as details
    Http404           → 404
    PermissionDenied  → 403
    anything else     → 500, logged with traceback

Non-API paths fall through to Django's normal handling.
"""

import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.http import Http404

from .http import ApiError, json_error

logger = logging.getLogger(__name__)


def validation_details(exc):
    if hasattr(exc, 'error_dict'):
        return {field: [str(msg) for msg in messages] for field, messages in exc.message_dict.items()}
    return {'__all__': [str(msg) for msg in exc.messages]}


class ApiErrorMiddleware:

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, req):
        return self.get_response(req)

    def process_exception(self, req, exc):
        if not req.path.startswith('/api/'):
            return None

        if isinstance(exc, ApiError):
            return json_error(exc.message, status=exc.status, details=exc.details)
        if isinstance(exc, ValidationError):
            return json_error(' '.join(exc.messages), status=400, details=validation_details(exc))
        if isinstance(exc, Http404):
            return json_error('Not found.', status=404)
        if isinstance(exc, PermissionDenied):
            return json_error(str(exc) or 'Access denied.', status=403)

        logger.exception('Unhandled error on %s %s', req.method, req.path)
        return json_error('Internal server error.', status=500)
