"""
custom_fields/urls.py
─────────────────────
Include in the root urls.py with:
    path('api/', include('custom_fields.urls')),
"""

from django.urls import path

from . import views

urlpatterns = [
    path('organizations/<int:org_id>/custom-fields/', views.organization_fields_view, name='organization_fields'),
    path('custom-fields/<int:field_id>/',             views.field_detail_view,        name='custom_field'),

    path('camps/<int:camp_id>/custom-fields/',                   views.camp_fields_view,         name='camp_fields'),
    path('camps/<int:camp_id>/custom-fields/reorder/',           views.reorder_camp_fields_view, name='reorder_camp_fields'),
    path('camps/<int:camp_id>/custom-fields/<int:link_id>/',     views.camp_field_detail_view,   name='camp_field'),
    path('registrations/<int:registration_id>/custom-field-responses/',
         views.registration_responses_view, name='registration_responses'),

    path('camps/<int:camp_id>/meta-fields/',                views.meta_fields_view,       name='meta_fields'),
    path('camps/<int:camp_id>/meta-fields/<int:meta_id>/',  views.meta_field_detail_view, name='meta_field'),
]
