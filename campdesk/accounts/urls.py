"""
accounts/urls.py
────────────────
URL patterns for authentication, organizations and children.
Include in the root urls.py with:
    path('api/', include('accounts.urls')),
"""

from django.urls import path

from . import views

urlpatterns = [
    # Auth
    path('register/',            views.register_view,      name='register'),
    path('login/',               views.login_view,         name='login'),
    path('logout/',              views.logout_view,        name='logout'),
    path('user/',                views.current_user_view,  name='current_user'),
    path('user/profile/',        views.profile_view,       name='profile'),
    path('upload/profile-photo/', views.profile_photo_view, name='profile_photo'),

    # Organizations
    path('organizations/<int:org_id>/',              views.organization_view,      name='organization'),
    path('organizations/public/<slug:slug>/',        views.public_organization_view, name='public_organization'),
    path('organizations/<int:org_id>/logo/',         views.organization_logo_view, name='organization_logo'),
    path('organizations/<int:org_id>/staff/',        views.staff_view,             name='organization_staff'),
    path('organizations/<int:org_id>/invitations/',  views.invitations_view,       name='invitations'),
    path('invitations/<str:token>/accept/',          views.accept_invitation_view, name='accept_invitation'),

    # Parent: children
    path('parent/children/',                 views.children_view,     name='children'),
    path('parent/children/<int:child_id>/',  views.child_detail_view, name='child_detail'),
]
