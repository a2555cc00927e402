"""
camps/signals.py
────────────────
Invalidate the cached public camp listing whenever a camp changes.
Connected in CampsConfig.ready().
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from core.cache import bump_public_camps_version

from .models import Camp


@receiver(post_save, sender=Camp)
@receiver(post_delete, sender=Camp)
def camp_changed(sender, instance, **kwargs):
    bump_public_camps_version()
