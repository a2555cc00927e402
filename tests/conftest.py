"""Shared pytest fixtures for the test suite.

Import any of these in a test file by simply declaring the fixture name as a
parameter; pytest discovers them automatically from this conftest.py.

Fixture overview
----------------
organization      — the tenant that owns every camp below
creator           — camp creator of `organization` (may manage)
coach             — coach of `organization` (staff, may not manage)
parent            — a parent with one child (`child`, 10 years old)
other_parent      — an unrelated parent
outsider          — camp creator of another organization
camp              — public fixed-schedule camp with registration open today
availability_camp — availability-scheduled camp for slot tests
slot              — one bookable hour of `availability_camp`
login             — returns a Django test client logged in as a given user
"""

from datetime import time, timedelta

import pytest
from django.core.cache import cache
from django.test import Client
from django.utils import timezone

from accounts.models import Child, Organization, User
from camps.models import AvailabilitySlot, Camp, CampSchedule, CampSport
from core.constants import Role
from helpers import PASSWORD, years_ago


# ── Global test settings ─────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _clear_cache():
    """Cached sports / public camp listings must not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def _media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / 'media'
    settings.SITE_URL = 'https://camps.example.com'


# ── Users and organizations ──────────────────────────────────────────────────


@pytest.fixture
def organization(db):
    return Organization.objects.create(name='Riverside Athletics', contact_email='info@riverside.example.com')


def _make_user(username, role, organization=None, **extra):
    return User.objects.create_user(
        username=username,
        email=f'{username}@example.com',
        password=PASSWORD,
        role=role,
        organization=organization,
        **extra,
    )


@pytest.fixture
def creator(organization):
    return _make_user('creator', Role.CAMP_CREATOR, organization, first_name='Casey', last_name='Coach')


@pytest.fixture
def coach(organization):
    return _make_user('coach', Role.COACH, organization)


@pytest.fixture
def parent(db):
    return _make_user('parent', Role.PARENT, first_name='Pat', last_name='Parent')


@pytest.fixture
def other_parent(db):
    return _make_user('other_parent', Role.PARENT)


@pytest.fixture
def outsider(db):
    """Camp creator of a different organization."""
    other_org = Organization.objects.create(name='Hilltop Sports')
    return _make_user('outsider', Role.CAMP_CREATOR, other_org)


@pytest.fixture
def make_child():
    def factory(parent, full_name='Alex Parent', age=10, **extra):
        return Child.objects.create(
            parent=parent,
            full_name=full_name,
            date_of_birth=years_ago(age) - timedelta(days=30),
            gender='other',
            **extra,
        )
    return factory


@pytest.fixture
def child(parent, make_child):
    return make_child(parent)


# ── Camps ────────────────────────────────────────────────────────────────────


@pytest.fixture
def make_camp(organization, creator):
    """Factory for camps; registration is open today unless overridden."""
    def factory(**overrides):
        today = timezone.localdate()
        values = dict(
            organization=organization,
            created_by=creator,
            name='Summer Soccer Camp',
            description='A week of soccer drills and games.',
            street_address='1 Field Road',
            city='Springfield',
            state='IL',
            zip_code='62701',
            start_date=today + timedelta(days=20),
            end_date=today + timedelta(days=25),
            registration_start_date=today - timedelta(days=5),
            registration_end_date=today + timedelta(days=10),
            price='150.00',
            capacity=2,
            min_age=8,
            max_age=12,
        )
        values.update(overrides)
        camp = Camp.objects.create(**values)
        CampSport.objects.create(camp=camp, sport_id=2, skill_level='all_levels')
        if camp.scheduling_type == Camp.SchedulingType.FIXED:
            CampSchedule.objects.create(camp=camp, day_of_week=0, start_time=time(9), end_time=time(12))
        return camp
    return factory


@pytest.fixture
def camp(make_camp):
    return make_camp()


@pytest.fixture
def availability_camp(make_camp):
    return make_camp(
        name='Private Pitching Lessons',
        type=Camp.Type.ONE_ON_ONE,
        scheduling_type=Camp.SchedulingType.AVAILABILITY,
        capacity=10,
    )


@pytest.fixture
def slot(availability_camp, creator):
    return AvailabilitySlot.objects.create(
        camp=availability_camp,
        creator=creator,
        slot_date=availability_camp.start_date,
        start_time=time(10),
        end_time=time(11),
        duration_minutes=60,
        max_bookings=1,
    )


# ── HTTP clients ─────────────────────────────────────────────────────────────


@pytest.fixture
def login():
    """`login(user)` returns a test client with *user*'s session."""
    def factory(user):
        client = Client()
        client.force_login(user)
        return client
    return factory


@pytest.fixture
def anon():
    return Client()

