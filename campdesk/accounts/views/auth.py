"""
accounts/views/auth.py
──────────────────────
Session authentication over JSON: sign-up, login, logout, current user,
profile edits and profile photo upload.
"""

import logging

from django.contrib.auth import authenticate, login, logout
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.csrf import ensure_csrf_cookie

from core.decorators import allow_methods, api_login_required, require_POST_or_405
from core.http import bind_json_form, json_error, parse_int, read_json, validate_form
from core.uploads import file_url, save_image_upload

from ..forms import LoginForm, ProfileForm, RegisterForm
from ..serializers import user_to_dict
from ..services import register_user

logger = logging.getLogger(__name__)


@require_POST_or_405
def register_view(req):
    """Create an account (and organization for camp creators) and log it in."""
    cleaned = validate_form(RegisterForm(data=read_json(req)))
    user = register_user(cleaned)
    login(req, user, backend='django.contrib.auth.backends.ModelBackend')
    return JsonResponse(user_to_dict(user), status=201)


@require_POST_or_405
def login_view(req):
    cleaned = validate_form(LoginForm(data=read_json(req)))
    user = authenticate(req, username=cleaned['username'].strip(), password=cleaned['password'])
    if user is None:
        logger.info('Failed login for %s', cleaned['username'])
        return json_error('Invalid username or password.', status=401)
    login(req, user)
    return JsonResponse(user_to_dict(user))


@require_POST_or_405
def logout_view(req):
    logout(req)
    return JsonResponse({'success': True})


@ensure_csrf_cookie
@allow_methods('GET')
def current_user_view(req):
    """The logged-in user, or 401.  Also hands out the CSRF cookie."""
    if not req.user.is_authenticated:
        return json_error('Not authenticated.', status=401)
    return JsonResponse(user_to_dict(req.user))


@api_login_required
@allow_methods('PATCH')
def profile_view(req):
    form = bind_json_form(ProfileForm, read_json(req), instance=req.user)
    validate_form(form)
    user = form.save()
    return JsonResponse(user_to_dict(user))


@api_login_required
@require_POST_or_405
def profile_photo_view(req):
    """
    Upload a profile photo (multipart field `photo`).  With `child_id` the
    photo goes to one of the parent's children instead of the user.
    """
    child_id = req.POST.get('child_id')
    child = None
    if child_id:
        child = get_object_or_404(req.user.children, pk=parse_int(child_id, 'child_id'))

    name = save_image_upload(req.FILES.get('photo'))

    if child is not None:
        child.profile_photo.name = name
        child.save(update_fields=['profile_photo'])
        return JsonResponse({'url': file_url(child.profile_photo), 'child_id': child.id})

    req.user.profile_photo.name = name
    req.user.save(update_fields=['profile_photo'])
    return JsonResponse({'url': file_url(req.user.profile_photo)})
