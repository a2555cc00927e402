"""
core/decorators.py
──────────────────
Access-control decorators for the JSON API.
Nothing here depends on any app's views (no circular imports).

api_login_required          – 401 for anonymous users
role_required(*roles)       – 401 for anonymous, 403 for other roles
parent_required             – role_required(PARENT)
organization_staff_required – staff of some organization
organization_manager_required – camp creators and managers
allow_methods(*methods)     – 405 for any other HTTP method
"""

from functools import wraps

from django.http import HttpResponseNotAllowed

from .constants import ORGANIZATION_MANAGER_ROLES, ORGANIZATION_STAFF_ROLES, Role
from .http import json_error


def api_login_required(view_fn):
    @wraps(view_fn)
    def wrapper(req, *args, **kwargs):
        if not req.user.is_authenticated:
            return json_error('Not authenticated.', status=401)
        return view_fn(req, *args, **kwargs)
    return wrapper


def role_required(*roles, message='Access denied.'):
    """
    Decorator factory: the user must be logged in and hold one of *roles*.
    Staff roles additionally need an organization.
    """
    def decorator(view_fn):
        @wraps(view_fn)
        def wrapper(req, *args, **kwargs):
            user = req.user
            if not user.is_authenticated:
                return json_error('Not authenticated.', status=401)
            if user.role not in roles:
                return json_error(message, status=403)
            if user.role in ORGANIZATION_STAFF_ROLES and not user.organization_id:
                return json_error('You are not a member of an organization.', status=403)
            return view_fn(req, *args, **kwargs)
        return wrapper
    return decorator


parent_required = role_required(Role.PARENT, message='Parents only.')

organization_staff_required = role_required(
    *ORGANIZATION_STAFF_ROLES, message='Organization staff only.',
)

organization_manager_required = role_required(
    *ORGANIZATION_MANAGER_ROLES, message='Only camp creators and managers can do this.',
)


def allow_methods(*methods):
    """
    Return HTTP 405 Method Not Allowed for any method not in *methods*
    instead of falling through to a handler branch.
    """
    def decorator(view_fn):
        @wraps(view_fn)
        def wrapper(req, *args, **kwargs):
            if req.method not in methods:
                return HttpResponseNotAllowed(methods)
            return view_fn(req, *args, **kwargs)
        return wrapper
    return decorator


require_POST_or_405 = allow_methods('POST')
