"""
accounts/models.py
──────────────────
Identity, authentication, and multi-tenancy models.

Organization – a club or company that runs camps (the tenant).
User         – extends AbstractUser with a role and an optional organization.
Invitation   – a one-time token that adds a user to an organization's staff.
Child        – a parent's child: medical, emergency and kit information.
ChildSport   – one sport a child plays, with skill level and position.
"""

import secrets
from datetime import timedelta

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils import timezone
from django.utils.text import slugify

from core.constants import (
    ORGANIZATION_MANAGER_ROLES,
    ORGANIZATION_STAFF_ROLES,
    ContactMethod,
    Gender,
    JerseySize,
    Role,
    SkillLevel,
    StaffRole,
)

INVITATION_LIFETIME = timedelta(days=7)


class Organization(models.Model):
    name = models.CharField(max_length=200)
    slug = models.SlugField(
        max_length=220,
        unique=True,
        blank=True,
        help_text='Public URL name; generated from the name when left empty.',
    )
    description = models.TextField(blank=True)
    mission = models.TextField(blank=True)
    logo = models.FileField(upload_to='uploads/', blank=True)
    contact_email = models.EmailField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._unique_slug()
        super().save(*args, **kwargs)

    def _unique_slug(self):
        base = slugify(self.name)[:200] or 'organization'
        slug = base
        while Organization.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f'{base}-{secrets.token_hex(3)}'
        return slug

    def __str__(self):
        return self.name


class User(AbstractUser):
    """
    Custom user model for the camp platform.

    Roles
    -----
    PLATFORM_ADMIN – operates the whole platform, may act on any organization.
    CAMP_CREATOR / MANAGER – run an organization's camps.
    COACH / VOLUNTEER – organization staff with read access to its camps.
    PARENT – registers children for camps.
    ATHLETE – an adult participant.
    """

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.PARENT,
    )
    organization = models.ForeignKey(
        Organization,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='members',
    )
    phone_number = models.CharField(max_length=30, blank=True)
    address = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=50, blank=True)
    zip_code = models.CharField(max_length=20, blank=True)
    profile_photo = models.FileField(upload_to='uploads/', blank=True)
    preferred_contact = models.CharField(
        max_length=10,
        choices=ContactMethod.choices,
        default=ContactMethod.EMAIL,
    )
    onboarding_completed = models.BooleanField(default=False)

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    @property
    def is_platform_admin(self):
        return self.role == Role.PLATFORM_ADMIN

    @property
    def is_parent(self):
        return self.role == Role.PARENT

    @property
    def is_organization_staff(self):
        return self.role in ORGANIZATION_STAFF_ROLES and self.organization_id is not None

    @property
    def is_organization_manager(self):
        return self.role in ORGANIZATION_MANAGER_ROLES and self.organization_id is not None

    def belongs_to(self, organization_id):
        """Staff of *organization_id*, or a platform admin."""
        if self.is_platform_admin:
            return True
        return self.is_organization_staff and self.organization_id == organization_id

    def can_manage(self, organization_id):
        """May create and edit things owned by *organization_id*."""
        if self.is_platform_admin:
            return True
        return self.is_organization_manager and self.organization_id == organization_id

    @property
    def display_name(self):
        return self.get_full_name() or self.username

    def __str__(self):
        return f"{self.display_name} ({self.get_role_display()})"


def _invitation_token():
    return secrets.token_urlsafe(32)


def _invitation_expiry():
    return timezone.now() + INVITATION_LIFETIME


class Invitation(models.Model):
    email = models.EmailField()
    role = models.CharField(max_length=20, choices=StaffRole.choices)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name='invitations',
    )
    invited_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='invitations_sent',
    )
    token = models.CharField(max_length=64, unique=True, default=_invitation_token)
    accepted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField(default=_invitation_expiry)

    class Meta:
        ordering = ['-created_at']

    @property
    def is_expired(self):
        return timezone.now() >= self.expires_at

    def __str__(self):
        return f"{self.email} → {self.organization} ({self.get_role_display()})"


class Child(models.Model):
    """
    A parent's child.  Everything a camp needs to know before the first day:
    contact preferences, medical notes, emergency contact and kit sizes.
    """

    parent = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='children',
    )
    full_name = models.CharField(max_length=200)
    date_of_birth = models.DateField()
    gender = models.CharField(max_length=20, choices=Gender.choices)
    profile_photo = models.FileField(upload_to='uploads/', blank=True)

    current_grade = models.CharField(max_length=30, blank=True)
    school_name = models.CharField(max_length=200, blank=True)
    sports_history = models.TextField(blank=True)
    achievements = models.JSONField(default=list, blank=True)

    emergency_contact = models.CharField(max_length=200, blank=True)
    emergency_phone = models.CharField(max_length=30, blank=True)
    emergency_relation = models.CharField(max_length=50, blank=True)

    allergies = models.JSONField(default=list, blank=True)
    medical_conditions = models.JSONField(default=list, blank=True)
    medications = models.JSONField(default=list, blank=True)
    special_needs = models.TextField(blank=True)

    preferred_contact = models.CharField(
        max_length=10,
        choices=ContactMethod.choices,
        default=ContactMethod.EMAIL,
    )
    communication_opt_in = models.BooleanField(default=True)

    jersey_size = models.CharField(max_length=5, choices=JerseySize.choices, blank=True)
    shoe_size = models.CharField(max_length=10, blank=True)
    height = models.CharField(max_length=20, blank=True)
    weight = models.CharField(max_length=20, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = 'Children'
        ordering = ['full_name']

    def age_on(self, day):
        """Age in whole years on *day*."""
        born = self.date_of_birth
        return day.year - born.year - ((day.month, day.day) < (born.month, born.day))

    def __str__(self):
        return self.full_name


class ChildSport(models.Model):
    child = models.ForeignKey(Child, on_delete=models.CASCADE, related_name='sports')
    sport = models.ForeignKey('core.Sport', on_delete=models.PROTECT, related_name='+')
    skill_level = models.CharField(
        max_length=20,
        choices=SkillLevel.choices,
        default=SkillLevel.BEGINNER,
    )
    preferred_positions = models.JSONField(default=list, blank=True)
    current_team = models.CharField(max_length=200, blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['child', 'sport'], name='unique_child_sport'),
        ]

    def __str__(self):
        return f"{self.child} – {self.sport}"
