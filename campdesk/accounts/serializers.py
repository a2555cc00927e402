"""
accounts/serializers.py
───────────────────────
Plain dict builders for JsonResponse.  Dates, times and decimals are left
as Python objects; DjangoJSONEncoder formats them.
"""

from core.constants import get_sport_name
from core.uploads import file_url


def organization_to_dict(org):
    if org is None:
        return None
    return {
        'id':            org.id,
        'name':          org.name,
        'slug':          org.slug,
        'description':   org.description,
        'mission':       org.mission,
        'contact_email': org.contact_email,
        'logo_url':      file_url(org.logo),
        'created_at':    org.created_at,
    }


def user_summary(user):
    if user is None:
        return None
    return {
        'id':           user.id,
        'username':     user.username,
        'first_name':   user.first_name,
        'last_name':    user.last_name,
        'email':        user.email,
        'phone_number': user.phone_number,
        'role':         user.role,
    }


def user_to_dict(user):
    data = user_summary(user)
    data.update({
        'address':              user.address,
        'city':                 user.city,
        'state':                user.state,
        'zip_code':             user.zip_code,
        'preferred_contact':    user.preferred_contact,
        'onboarding_completed': user.onboarding_completed,
        'profile_photo_url':    file_url(user.profile_photo),
        'organization_id':      user.organization_id,
        'organization':         organization_to_dict(user.organization),
    })
    return data


def invitation_to_dict(invitation):
    return {
        'id':              invitation.id,
        'email':           invitation.email,
        'role':            invitation.role,
        'organization_id': invitation.organization_id,
        'token':           invitation.token,
        'accepted':        invitation.accepted,
        'expired':         invitation.is_expired,
        'created_at':      invitation.created_at,
        'expires_at':      invitation.expires_at,
    }


def child_sport_to_dict(child_sport):
    return {
        'id':                  child_sport.id,
        'sport_id':            child_sport.sport_id,
        'sport_name':          get_sport_name(child_sport.sport_id),
        'skill_level':         child_sport.skill_level,
        'preferred_positions': child_sport.preferred_positions,
        'current_team':        child_sport.current_team,
    }


def child_summary(child):
    return {
        'id':            child.id,
        'full_name':     child.full_name,
        'date_of_birth': child.date_of_birth,
        'gender':        child.gender,
    }


def child_to_dict(child):
    data = child_summary(child)
    data.update({
        'parent_id':            child.parent_id,
        'profile_photo_url':    file_url(child.profile_photo),
        'current_grade':        child.current_grade,
        'school_name':          child.school_name,
        'sports_history':       child.sports_history,
        'achievements':         child.achievements,
        'emergency_contact':    child.emergency_contact,
        'emergency_phone':      child.emergency_phone,
        'emergency_relation':   child.emergency_relation,
        'allergies':            child.allergies,
        'medical_conditions':   child.medical_conditions,
        'medications':          child.medications,
        'special_needs':        child.special_needs,
        'preferred_contact':    child.preferred_contact,
        'communication_opt_in': child.communication_opt_in,
        'jersey_size':          child.jersey_size,
        'shoe_size':            child.shoe_size,
        'height':               child.height,
        'weight':               child.weight,
        'sports_interests':     [child_sport_to_dict(cs) for cs in child.sports.all()],
    })
    return data
