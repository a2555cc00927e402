"""
accounts/views/__init__.py
──────────────────────────
Re-exports every view so urls.py can keep using `views.<name>`.
"""

from .auth import (
    current_user_view,
    login_view,
    logout_view,
    profile_photo_view,
    profile_view,
    register_view,
)
from .children import child_detail_view, children_view
from .organizations import (
    accept_invitation_view,
    invitations_view,
    organization_logo_view,
    organization_view,
    public_organization_view,
    staff_view,
)

__all__ = [
    # auth
    'register_view',
    'login_view',
    'logout_view',
    'current_user_view',
    'profile_view',
    'profile_photo_view',
    # organizations
    'organization_view',
    'public_organization_view',
    'organization_logo_view',
    'staff_view',
    'invitations_view',
    'accept_invitation_view',
    # children
    'children_view',
    'child_detail_view',
]
