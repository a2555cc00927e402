"""
core/cache.py
─────────────
Thin wrappers around Django's cache framework.

The sport catalogue never changes at runtime, so it is cached for a day.
The public camp listing is cached per query string under a version number
that camps/signals.py bumps whenever a Camp is saved or deleted.
"""

from django.core.cache import cache

SPORTS_CACHE_KEY = 'sports:all'
SPORTS_TIMEOUT = 60 * 60 * 24

PUBLIC_CAMPS_VERSION_KEY = 'camps:public:version'
PUBLIC_CAMPS_TIMEOUT = 60 * 5


def cached_sports():
    from .models import Sport

    return cache.get_or_set(
        SPORTS_CACHE_KEY,
        lambda: list(Sport.objects.order_by('name').values('id', 'name')),
        SPORTS_TIMEOUT,
    )


def public_camps_version():
    return cache.get_or_set(PUBLIC_CAMPS_VERSION_KEY, 1, None)


def bump_public_camps_version():
    try:
        cache.incr(PUBLIC_CAMPS_VERSION_KEY)
    except ValueError:
        cache.set(PUBLIC_CAMPS_VERSION_KEY, 2, None)


def public_camps_key(query_string):
    return f'camps:public:{public_camps_version()}:{query_string}'
