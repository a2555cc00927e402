"""
core/urls.py
────────────
URL patterns for sitewide endpoints.
Include in the root urls.py with:
    path('api/', include('core.urls')),
"""

from django.urls import path

from . import views

urlpatterns = [
    path('health/',    views.health_view,    name='health'),
    path('sports/',    views.sports_view,    name='sports'),
    path('constants/', views.constants_view, name='constants'),
]
