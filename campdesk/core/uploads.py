"""
core/uploads.py
───────────────
Image uploads for profile photos and organization logos.

Files are stored through Django's default storage as
uploads/<millis>-<random hex><ext>; only image/* content up to
settings.UPLOAD_MAX_BYTES is accepted.
"""

import logging
import secrets
import time
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage

logger = logging.getLogger(__name__)

UPLOAD_FOLDER = 'uploads'


def validate_image_upload(upload):
    if upload is None:
        raise ValidationError('No file uploaded.')
    if not (upload.content_type or '').startswith('image/'):
        raise ValidationError('Only image files are allowed.')
    max_bytes = settings.UPLOAD_MAX_BYTES
    if upload.size > max_bytes:
        raise ValidationError(f'File is too large (maximum {max_bytes // (1024 * 1024)} MB).')


def save_image_upload(upload):
    """Validate and store *upload*; return the storage name."""
    validate_image_upload(upload)
    ext = Path(upload.name).suffix.lower()
    name = f'{UPLOAD_FOLDER}/{int(time.time() * 1000)}-{secrets.token_hex(8)}{ext}'
    saved = default_storage.save(name, upload)
    logger.info('Stored upload %s (%d bytes)', saved, upload.size)
    return saved


def file_url(field_file):
    """URL of a FileField value, or None when it is empty."""
    return field_file.url if field_file else None
