"""
accounts/admin.py
─────────────────
Admin registrations for User, Organization, Invitation, Child and ChildSport.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Child, ChildSport, Invitation, Organization, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Extends the default UserAdmin to surface the role and organization.
    """

    list_display  = BaseUserAdmin.list_display + ('role', 'organization')
    list_filter   = BaseUserAdmin.list_filter  + ('role',)
    raw_id_fields = ('organization',)

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Camp platform', {'fields': (
            'role', 'organization', 'phone_number', 'address', 'city', 'state', 'zip_code',
            'profile_photo', 'preferred_contact', 'onboarding_completed',
        )}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Camp platform', {'fields': ('role', 'organization')}),
    )


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display  = ('name', 'slug', 'contact_email', 'created_at')
    search_fields = ('name', 'slug')


@admin.register(Invitation)
class InvitationAdmin(admin.ModelAdmin):
    list_display  = ('email', 'organization', 'role', 'accepted', 'expires_at')
    list_filter   = ('role', 'accepted')
    search_fields = ('email', 'organization__name')
    raw_id_fields = ('organization', 'invited_by')
    readonly_fields = ('token',)


class ChildSportInline(admin.TabularInline):
    model = ChildSport
    extra = 0


@admin.register(Child)
class ChildAdmin(admin.ModelAdmin):
    list_display  = ('full_name', 'parent', 'date_of_birth', 'gender')
    list_filter   = ('gender',)
    search_fields = ('full_name', 'parent__username', 'parent__last_name', 'parent__email')
    raw_id_fields = ('parent',)
    inlines       = [ChildSportInline]
