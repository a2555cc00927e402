"""
custom_fields/models.py
───────────────────────
Organization-defined questions for registration forms and camp profiles.

CustomField         – a question owned by an organization.
CampCustomField     – attaches a registration question to a camp, with an
                      order and an optional per-camp `required` override.
CustomFieldResponse – a registration's answer to one question.
CampMetaField       – a camp's own answer to a camp-source question.

Answers are stored as text (`response`) or, for multi-select questions,
as a JSON list (`response_array`).
"""

from django.db import models


class CustomField(models.Model):

    class FieldType(models.TextChoices):
        SHORT_TEXT    = 'short_text',    'Short text'
        LONG_TEXT     = 'long_text',     'Long text'
        DROPDOWN      = 'dropdown',      'Dropdown'
        SINGLE_SELECT = 'single_select', 'Single select'
        MULTI_SELECT  = 'multi_select',  'Multi select'

    class ValidationType(models.TextChoices):
        NONE     = 'none',     'None'
        REQUIRED = 'required', 'Required'
        EMAIL    = 'email',    'Email'
        PHONE    = 'phone',    'Phone'
        NUMBER   = 'number',   'Number'
        DATE     = 'date',     'Date'

    class Source(models.TextChoices):
        REGISTRATION = 'registration', 'Registration form'
        CAMP         = 'camp',         'Camp attribute'

    organization = models.ForeignKey(
        'accounts.Organization',
        on_delete=models.CASCADE,
        related_name='custom_fields',
    )
    name = models.CharField(max_length=100, help_text='Internal key, e.g. "tshirt_color".')
    label = models.CharField(max_length=200, help_text='Question shown to parents.')
    description = models.TextField(blank=True)
    field_type = models.CharField(max_length=20, choices=FieldType.choices)
    required = models.BooleanField(default=False)
    validation_type = models.CharField(
        max_length=10,
        choices=ValidationType.choices,
        default=ValidationType.NONE,
    )
    options = models.JSONField(default=list, blank=True, help_text='Choices for select fields.')
    field_source = models.CharField(max_length=20, choices=Source.choices, default=Source.REGISTRATION)
    is_internal = models.BooleanField(
        default=False,
        help_text='Internal fields are only visible to organization staff.',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(fields=['organization', 'name'], name='unique_field_name_per_org'),
        ]

    @property
    def has_options(self):
        return self.field_type in (
            self.FieldType.DROPDOWN,
            self.FieldType.SINGLE_SELECT,
            self.FieldType.MULTI_SELECT,
        )

    def __str__(self):
        return self.label


class CampCustomField(models.Model):
    camp = models.ForeignKey('camps.Camp', on_delete=models.CASCADE, related_name='custom_fields')
    custom_field = models.ForeignKey(CustomField, on_delete=models.CASCADE, related_name='camp_links')
    order = models.PositiveIntegerField(default=0)
    required = models.BooleanField(
        null=True,
        blank=True,
        help_text='Overrides the field default for this camp when set.',
    )

    class Meta:
        ordering = ['order', 'id']
        constraints = [
            models.UniqueConstraint(fields=['camp', 'custom_field'], name='unique_camp_custom_field'),
        ]

    @property
    def is_required(self):
        if self.required is not None:
            return self.required
        return self.custom_field.required

    def __str__(self):
        return f"{self.camp} – {self.custom_field}"


class CustomFieldResponse(models.Model):
    registration = models.ForeignKey(
        'camps.Registration',
        on_delete=models.CASCADE,
        related_name='custom_field_responses',
    )
    custom_field = models.ForeignKey(CustomField, on_delete=models.CASCADE, related_name='responses')
    response = models.TextField(blank=True)
    response_array = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['registration', 'custom_field'], name='unique_field_response'),
        ]


class CampMetaField(models.Model):
    camp = models.ForeignKey('camps.Camp', on_delete=models.CASCADE, related_name='meta_fields')
    custom_field = models.ForeignKey(CustomField, on_delete=models.CASCADE, related_name='camp_values')
    response = models.TextField(blank=True)
    response_array = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['custom_field__name']
        constraints = [
            models.UniqueConstraint(fields=['camp', 'custom_field'], name='unique_camp_meta_field'),
        ]
