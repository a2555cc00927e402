from django import forms

from .models import CustomField


class CustomFieldForm(forms.ModelForm):
    """
    Create / edit an organization's question.

    Key behaviour:
    - select types need at least one option; other types drop their options.
    - `name` is unique within the organization.
    """

    class Meta:
        model = CustomField
        fields = [
            'name',
            'label',
            'description',
            'field_type',
            'required',
            'validation_type',
            'options',
            'field_source',
            'is_internal',
        ]

    def __init__(self, *args, organization=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.organization = organization

    def clean_name(self):
        name = self.cleaned_data['name'].strip()
        taken = CustomField.objects.filter(organization=self.organization, name__iexact=name)
        if self.instance.pk:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise forms.ValidationError('A field with this name already exists.')
        return name

    def clean(self):
        cleaned = super().clean()
        options = cleaned.get('options') or []
        if 'options' not in self.errors and (
            not isinstance(options, list) or not all(isinstance(opt, str) for opt in options)
        ):
            self.add_error('options', 'Options must be a list of strings.')
            return cleaned

        options = [opt.strip() for opt in options if opt.strip()]
        field_type = cleaned.get('field_type')
        if field_type in (
            CustomField.FieldType.DROPDOWN,
            CustomField.FieldType.SINGLE_SELECT,
            CustomField.FieldType.MULTI_SELECT,
        ):
            if not options:
                self.add_error('options', 'Select fields need at least one option.')
            elif len(set(options)) != len(options):
                self.add_error('options', 'Options must be unique.')
        elif field_type:
            options = []
        cleaned['options'] = options
        return cleaned


class CampFieldForm(forms.Form):
    custom_field_id = forms.IntegerField()
    order = forms.IntegerField(min_value=0, required=False)
    required = forms.NullBooleanField(required=False)


class CampFieldUpdateForm(forms.Form):
    order = forms.IntegerField(min_value=0, required=False)
    required = forms.NullBooleanField(required=False)


class MetaFieldForm(forms.Form):
    custom_field_id = forms.IntegerField()
