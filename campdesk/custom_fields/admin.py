from django.contrib import admin

from .models import CampCustomField, CampMetaField, CustomField, CustomFieldResponse


@admin.register(CustomField)
class CustomFieldAdmin(admin.ModelAdmin):
    list_display  = ('label', 'name', 'organization', 'field_type', 'field_source', 'required', 'is_internal')
    list_filter   = ('field_type', 'field_source', 'is_internal')
    search_fields = ('name', 'label', 'organization__name')
    raw_id_fields = ('organization',)


@admin.register(CampCustomField)
class CampCustomFieldAdmin(admin.ModelAdmin):
    list_display  = ('camp', 'custom_field', 'order', 'required')
    raw_id_fields = ('camp', 'custom_field')


@admin.register(CustomFieldResponse)
class CustomFieldResponseAdmin(admin.ModelAdmin):
    list_display  = ('registration', 'custom_field', 'response')
    raw_id_fields = ('registration', 'custom_field')


@admin.register(CampMetaField)
class CampMetaFieldAdmin(admin.ModelAdmin):
    list_display  = ('camp', 'custom_field', 'response')
    raw_id_fields = ('camp', 'custom_field')
