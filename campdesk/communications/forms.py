from django import forms


class CampMessageForm(forms.Form):
    """`registration_ids` omitted or null sends to every registration."""

    subject = forms.CharField(max_length=255)
    content = forms.CharField()
    registration_ids = forms.JSONField(required=False)

    def clean_registration_ids(self):
        ids = self.cleaned_data.get('registration_ids')
        if ids is None and self.data.get('registration_ids') != []:
            return None
        if not isinstance(ids, list) or not ids or not all(isinstance(i, int) for i in ids):
            raise forms.ValidationError('registration_ids must be a non-empty list of integers.')
        return ids


class ReplyForm(forms.Form):
    content = forms.CharField()
    recipient_id = forms.IntegerField(required=False)
