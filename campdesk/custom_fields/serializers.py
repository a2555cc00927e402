def field_to_dict(field):
    return {
        'id':              field.id,
        'organization_id': field.organization_id,
        'name':            field.name,
        'label':           field.label,
        'description':     field.description,
        'field_type':      field.field_type,
        'required':        field.required,
        'validation_type': field.validation_type,
        'options':         field.options,
        'field_source':    field.field_source,
        'is_internal':     field.is_internal,
        'created_at':      field.created_at,
        'updated_at':      field.updated_at,
    }


def camp_field_to_dict(link):
    return {
        'id':              link.id,
        'camp_id':         link.camp_id,
        'custom_field_id': link.custom_field_id,
        'order':           link.order,
        'required':        link.required,
        'is_required':     link.is_required,
        'field':           field_to_dict(link.custom_field),
    }


def response_to_dict(answer):
    return {
        'id':              answer.id,
        'custom_field_id': answer.custom_field_id,
        'response':        answer.response,
        'response_array':  answer.response_array,
        'field':           field_to_dict(answer.custom_field),
    }


def meta_field_to_dict(meta):
    return {
        'id':              meta.id,
        'camp_id':         meta.camp_id,
        'custom_field_id': meta.custom_field_id,
        'response':        meta.response,
        'response_array':  meta.response_array,
        'field':           field_to_dict(meta.custom_field),
    }
