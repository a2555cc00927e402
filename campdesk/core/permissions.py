"""
core/permissions.py
───────────────────
Organization-scoped permission checks.  They raise PermissionDenied, which
ApiErrorMiddleware turns into a 403 JSON response.
"""

from django.core.exceptions import PermissionDenied


def ensure_member(user, organization_id):
    """Staff of the organization (any staff role) or a platform admin."""
    if not user.is_authenticated or not user.belongs_to(organization_id):
        raise PermissionDenied('You do not have access to this organization.')


def ensure_manager(user, organization_id):
    """Camp creator / manager of the organization, or a platform admin."""
    if not user.is_authenticated or not user.can_manage(organization_id):
        raise PermissionDenied('Only camp creators and managers of this organization can do this.')
