"""
accounts/forms.py
─────────────────
Forms for sign-up, profiles, organizations, invitations and children.
All of them are bound to JSON payloads via core.http.bind_json_form.
"""

from django import forms
from django.contrib.auth.password_validation import validate_password

from core.constants import SELF_SERVICE_ROLES, Role, SkillLevel
from core.models import Sport

from .models import Child, Invitation, Organization, User

CHILD_LIST_FIELDS = ('achievements', 'allergies', 'medical_conditions', 'medications')


def clean_string_list(value, label):
    """JSON list fields accept only lists of strings; None means empty."""
    if value in (None, ''):
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise forms.ValidationError(f'{label} must be a list of strings.')
    return [item.strip() for item in value if item.strip()]


class RegisterForm(forms.Form):
    """
    Self-service sign-up.

    Camp creators must also name their organization, which is created
    together with the account.
    """

    username = forms.CharField(max_length=150)
    email = forms.EmailField()
    password = forms.CharField(min_length=8)
    first_name = forms.CharField(max_length=150, required=False)
    last_name = forms.CharField(max_length=150, required=False)
    role = forms.ChoiceField(choices=[(role.value, role.label) for role in SELF_SERVICE_ROLES])
    organization_name = forms.CharField(max_length=200, required=False)

    def clean_username(self):
        username = self.cleaned_data['username'].strip()
        if User.objects.filter(username__iexact=username).exists():
            raise forms.ValidationError('Username already exists.')
        return username

    def clean_email(self):
        email = self.cleaned_data['email'].lower()
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError('An account with this email already exists.')
        return email

    def clean(self):
        cleaned = super().clean()
        if cleaned.get('role') == Role.CAMP_CREATOR and not (cleaned.get('organization_name') or '').strip():
            self.add_error('organization_name', 'Organization name is required for camp creators.')
        password = cleaned.get('password')
        if password:
            try:
                validate_password(password, User(username=cleaned.get('username', ''),
                                                  email=cleaned.get('email', '')))
            except forms.ValidationError as exc:
                self.add_error('password', exc)
        return cleaned


class LoginForm(forms.Form):
    username = forms.CharField()
    password = forms.CharField()


class ProfileForm(forms.ModelForm):

    class Meta:
        model = User
        fields = [
            'first_name',
            'last_name',
            'email',
            'phone_number',
            'address',
            'city',
            'state',
            'zip_code',
            'preferred_contact',
            'onboarding_completed',
        ]

    def clean_email(self):
        email = self.cleaned_data['email'].lower()
        if email and User.objects.filter(email__iexact=email).exclude(pk=self.instance.pk).exists():
            raise forms.ValidationError('An account with this email already exists.')
        return email


class OrganizationForm(forms.ModelForm):

    class Meta:
        model = Organization
        fields = ['name', 'description', 'mission', 'contact_email']


class InvitationForm(forms.ModelForm):

    class Meta:
        model = Invitation
        fields = ['email', 'role']

    def __init__(self, *args, organization=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.organization = organization

    def clean_email(self):
        email = self.cleaned_data['email'].lower()
        if self.organization and User.objects.filter(
            email__iexact=email, organization=self.organization,
        ).exists():
            raise forms.ValidationError('This person is already a member of the organization.')
        return email


class ChildForm(forms.ModelForm):
    """A parent's child.  List fields (allergies, …) take JSON arrays of strings."""

    class Meta:
        model = Child
        fields = [
            'full_name',
            'date_of_birth',
            'gender',
            'current_grade',
            'school_name',
            'sports_history',
            'achievements',
            'emergency_contact',
            'emergency_phone',
            'emergency_relation',
            'allergies',
            'medical_conditions',
            'medications',
            'special_needs',
            'preferred_contact',
            'communication_opt_in',
            'jersey_size',
            'shoe_size',
            'height',
            'weight',
        ]

    def clean(self):
        cleaned = super().clean()
        for name in CHILD_LIST_FIELDS:
            if name in self.errors:
                continue
            try:
                cleaned[name] = clean_string_list(cleaned.get(name), name.replace('_', ' ').capitalize())
            except forms.ValidationError as exc:
                self.add_error(name, exc)
        return cleaned


class ChildSportForm(forms.Form):
    sport_id = forms.ModelChoiceField(queryset=Sport.objects.all())
    skill_level = forms.ChoiceField(choices=SkillLevel.choices, required=False)
    preferred_positions = forms.JSONField(required=False)
    current_team = forms.CharField(max_length=200, required=False)

    def clean_skill_level(self):
        return self.cleaned_data.get('skill_level') or SkillLevel.BEGINNER

    def clean_preferred_positions(self):
        return clean_string_list(self.cleaned_data.get('preferred_positions'), 'Preferred positions')
