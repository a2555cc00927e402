"""
camps/urls.py
─────────────
URL patterns for camps, registrations and availability.
Include in the root urls.py with:
    path('api/', include('camps.urls')),
"""

from django.urls import path

from . import views

urlpatterns = [
    # Camps
    path('camps/',                                views.camps_view,               name='camps'),
    path('camps/<int:camp_id>/',                  views.camp_detail_view,         name='camp_detail'),
    path('camps/slug/<str:slug>/',                views.camp_by_slug_view,        name='camp_by_slug'),
    path('camps/<int:camp_id>/cancel/',           views.cancel_camp_view,         name='cancel_camp'),
    path('camps/<int:camp_id>/share/',            views.camp_share_view,          name='camp_share'),
    path('camps/<int:camp_id>/schedules/',        views.schedules_view,           name='camp_schedules'),
    path('camps/<int:camp_id>/schedule-exceptions/', views.schedule_exceptions_view, name='schedule_exceptions'),
    path('camps/<int:camp_id>/staff/',            views.camp_staff_view,          name='camp_staff'),
    path('organizations/<int:org_id>/dashboard/', views.organization_dashboard_view, name='organization_dashboard'),

    # Registrations
    path('registrations/',                        views.register_view,            name='register_child'),
    path('camps/<int:camp_id>/registrations/',    views.camp_registrations_view,  name='camp_registrations'),
    path('parent/registrations/',                 views.parent_registrations_view, name='parent_registrations'),

    # Availability
    path('camps/<int:camp_id>/availability-slots/',                     views.slots_view,       name='slots'),
    path('camps/<int:camp_id>/availability-slots/<int:slot_id>/',       views.slot_detail_view, name='slot_detail'),
    path('camps/<int:camp_id>/availability-slots/<int:slot_id>/book/',  views.book_slot_view,   name='book_slot'),
    path('slot-bookings/<int:booking_id>/cancel/',                      views.cancel_booking_view, name='cancel_booking'),
    path('parent/bookings/',                                            views.parent_bookings_view, name='parent_bookings'),
    path('camps/<int:camp_id>/bookings/',                               views.camp_bookings_view, name='camp_bookings'),
]
