"""
URL configuration for the campdesk project.

Every app exposes its JSON endpoints under /api/:
  core            – health, sports, constants
  accounts        – auth, organizations, invitations, children
  camps           – camps, registrations, availability slots and bookings
  custom_fields   – organization fields, camp forms, responses, meta fields
  communications  – camp messages and the notification log
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),

    path('api/', include('core.urls')),
    path('api/', include('accounts.urls')),
    path('api/', include('camps.urls')),
    path('api/', include('custom_fields.urls')),
    path('api/', include('communications.urls')),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler404 = 'core.views.handler404'
handler500 = 'core.views.handler500'
