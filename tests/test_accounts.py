"""Tests for sign-up, login, organizations, invitations and children."""

from datetime import timedelta

import pytest
from django.utils import timezone

from accounts.models import Invitation, Organization, User
from communications.models import NotificationLog
from helpers import PASSWORD, years_ago

pytestmark = pytest.mark.django_db


class TestRegistration:

    def test_parent_sign_up_logs_in(self, anon):
        resp = anon.post('/api/register/', {
            'username': 'newparent',
            'email': 'NewParent@Example.com',
            'password': PASSWORD,
            'role': 'parent',
        }, content_type='application/json')
        assert resp.status_code == 201
        body = resp.json()
        assert body['role'] == 'parent'
        assert body['email'] == 'newparent@example.com'
        assert body['organization'] is None
        assert anon.get('/api/user/').json()['username'] == 'newparent'

    def test_camp_creator_gets_an_organization(self, anon):
        resp = anon.post('/api/register/', {
            'username': 'founder',
            'email': 'founder@example.com',
            'password': PASSWORD,
            'role': 'camp_creator',
            'organization_name': 'Lakeside Lacrosse',
        }, content_type='application/json')
        assert resp.status_code == 201
        org = resp.json()['organization']
        assert org['name'] == 'Lakeside Lacrosse'
        assert org['slug'] == 'lakeside-lacrosse'

    def test_camp_creator_needs_organization_name(self, anon):
        resp = anon.post('/api/register/', {
            'username': 'founder',
            'email': 'founder@example.com',
            'password': PASSWORD,
            'role': 'camp_creator',
        }, content_type='application/json')
        assert resp.status_code == 400
        assert 'organization_name' in resp.json()['details']

    @pytest.mark.parametrize('role', ['platform_admin', 'manager', 'coach'])
    def test_staff_roles_cannot_self_register(self, anon, role):
        resp = anon.post('/api/register/', {
            'username': 'sneaky', 'email': 'sneaky@example.com', 'password': PASSWORD, 'role': role,
        }, content_type='application/json')
        assert resp.status_code == 400
        assert 'role' in resp.json()['details']

    def test_short_password(self, anon):
        resp = anon.post('/api/register/', {
            'username': 'shorty', 'email': 'shorty@example.com', 'password': 'abc', 'role': 'parent',
        }, content_type='application/json')
        assert resp.status_code == 400
        assert 'password' in resp.json()['details']

    def test_duplicate_username_and_email(self, anon, parent):
        resp = anon.post('/api/register/', {
            'username': 'PARENT', 'email': 'parent@example.com', 'password': PASSWORD, 'role': 'parent',
        }, content_type='application/json')
        details = resp.json()['details']
        assert resp.status_code == 400
        assert 'username' in details and 'email' in details


class TestLogin:

    def test_login_and_logout(self, anon, parent):
        resp = anon.post('/api/login/', {'username': 'parent', 'password': PASSWORD},
                         content_type='application/json')
        assert resp.status_code == 200
        assert resp.json()['id'] == parent.id

        anon.post('/api/logout/')
        assert anon.get('/api/user/').status_code == 401

    def test_bad_password(self, anon, parent):
        resp = anon.post('/api/login/', {'username': 'parent', 'password': 'wrong-password'},
                         content_type='application/json')
        assert resp.status_code == 401

    def test_profile_patch_keeps_other_fields(self, login, parent):
        client = login(parent)
        resp = client.patch('/api/user/profile/', {'city': 'Madison', 'onboarding_completed': True},
                            content_type='application/json')
        assert resp.status_code == 200
        body = resp.json()
        assert body['city'] == 'Madison'
        assert body['onboarding_completed'] is True
        assert body['first_name'] == 'Pat'

    def test_profile_cannot_take_another_users_email(self, login, parent, other_parent):
        resp = login(other_parent).patch('/api/user/profile/', {'email': 'PARENT@example.com'},
                                         content_type='application/json')
        assert resp.status_code == 400
        assert 'email' in resp.json()['details']
        other_parent.refresh_from_db()
        assert other_parent.email == 'other_parent@example.com'

    def test_profile_email_is_lowercased(self, login, parent):
        resp = login(parent).patch('/api/user/profile/', {'email': 'Parent@Example.com'},
                                   content_type='application/json')
        assert resp.status_code == 200
        assert resp.json()['email'] == 'parent@example.com'


class TestOrganizations:

    def test_member_reads_organization(self, login, coach, organization):
        resp = login(coach).get(f'/api/organizations/{organization.id}/')
        assert resp.status_code == 200
        assert resp.json()['name'] == organization.name

    def test_other_organization_is_forbidden(self, login, outsider, organization):
        resp = login(outsider).get(f'/api/organizations/{organization.id}/')
        assert resp.status_code == 403

    def test_coach_cannot_edit(self, login, coach, organization):
        resp = login(coach).patch(f'/api/organizations/{organization.id}/', {'mission': 'Win'},
                                  content_type='application/json')
        assert resp.status_code == 403

    def test_creator_edits(self, login, creator, organization):
        resp = login(creator).patch(f'/api/organizations/{organization.id}/', {'mission': 'Play fair'},
                                    content_type='application/json')
        assert resp.status_code == 200
        organization.refresh_from_db()
        assert organization.mission == 'Play fair'
        assert organization.name == 'Riverside Athletics'

    def test_public_profile_lists_public_camps(self, anon, organization, make_camp):
        make_camp(name='Open Camp')
        make_camp(name='Invite Only', visibility='private')
        resp = anon.get(f'/api/organizations/public/{organization.slug}/')
        assert resp.status_code == 200
        assert [c['name'] for c in resp.json()['camps']] == ['Open Camp']

    def test_slugs_are_unique(self, organization):
        twin = Organization.objects.create(name=organization.name)
        assert twin.slug != organization.slug
        assert twin.slug.startswith('riverside-athletics-')

    def test_staff_list(self, login, creator, coach, organization):
        resp = login(coach).get(f'/api/organizations/{organization.id}/staff/')
        assert {member['username'] for member in resp.json()} == {'creator', 'coach'}


class TestInvitations:

    def test_invite_and_accept(self, login, creator, organization, mailoutbox):
        resp = login(creator).post(f'/api/organizations/{organization.id}/invitations/', {
            'email': 'Volunteer@Example.com', 'role': 'volunteer',
        }, content_type='application/json')
        assert resp.status_code == 201
        token = resp.json()['token']

        assert len(mailoutbox) == 1
        assert mailoutbox[0].to == ['volunteer@example.com']
        assert token in mailoutbox[0].body
        log = NotificationLog.objects.get()
        assert log.notification_type == 'invitation' and log.success

        newcomer = User.objects.create_user('volunteer', 'volunteer@example.com', PASSWORD, role='athlete')
        resp = login(newcomer).post(f'/api/invitations/{token}/accept/')
        assert resp.status_code == 200
        newcomer.refresh_from_db()
        assert newcomer.organization_id == organization.id
        assert newcomer.role == 'volunteer'

    def test_invitation_is_single_use(self, login, creator, organization, parent, other_parent):
        invitation = Invitation.objects.create(organization=organization, email='x@example.com', role='coach')
        assert login(parent).post(f'/api/invitations/{invitation.token}/accept/').status_code == 200
        resp = login(other_parent).post(f'/api/invitations/{invitation.token}/accept/')
        assert resp.status_code == 400
        assert resp.json()['error'] == 'This invitation has already been used.'

    def test_expired_invitation(self, login, organization, parent):
        invitation = Invitation.objects.create(
            organization=organization, email='x@example.com', role='coach',
            expires_at=timezone.now() - timedelta(minutes=1),
        )
        resp = login(parent).post(f'/api/invitations/{invitation.token}/accept/')
        assert resp.status_code == 400
        assert resp.json()['error'] == 'This invitation has expired.'

    def test_unknown_token_is_404(self, login, parent):
        resp = login(parent).post('/api/invitations/not-a-real-token/accept/')
        assert resp.status_code == 404
        parent.refresh_from_db()
        assert parent.organization_id is None

    def test_only_managers_invite(self, login, coach, organization):
        resp = login(coach).post(f'/api/organizations/{organization.id}/invitations/', {
            'email': 'a@example.com', 'role': 'coach',
        }, content_type='application/json')
        assert resp.status_code == 403


class TestChildren:

    def _payload(self, **extra):
        payload = {
            'full_name': 'Jamie Parent',
            'date_of_birth': years_ago(9).isoformat(),
            'gender': 'female',
            'allergies': ['peanuts', ' '],
            'jersey_size': 'YM',
            'sports_interests': [
                {'sport_id': 2, 'skill_level': 'intermediate', 'preferred_positions': ['Midfielder']},
            ],
        }
        payload.update(extra)
        return payload

    def test_create_child_with_sports(self, login, parent):
        resp = login(parent).post('/api/parent/children/', self._payload(), content_type='application/json')
        assert resp.status_code == 201
        body = resp.json()
        assert body['allergies'] == ['peanuts']
        assert body['communication_opt_in'] is True
        assert body['sports_interests'][0]['sport_name'] == 'Soccer'

    def test_list_only_own_children(self, login, parent, other_parent, child, make_child):
        make_child(other_parent, full_name='Someone Else')
        resp = login(parent).get('/api/parent/children/')
        assert [c['full_name'] for c in resp.json()] == [child.full_name]

    def test_list_fields_must_be_strings(self, login, parent):
        resp = login(parent).post('/api/parent/children/', self._payload(allergies=[1, 2]),
                                  content_type='application/json')
        assert resp.status_code == 400
        assert 'allergies' in resp.json()['details']

    def test_duplicate_sport(self, login, parent):
        sports = [{'sport_id': 2}, {'sport_id': 2}]
        resp = login(parent).post('/api/parent/children/', self._payload(sports_interests=sports),
                                  content_type='application/json')
        assert resp.status_code == 400

    def test_patch_leaves_sports_alone(self, login, parent):
        client = login(parent)
        child_id = client.post('/api/parent/children/', self._payload(), content_type='application/json').json()['id']
        resp = client.patch(f'/api/parent/children/{child_id}/', {'school_name': 'Oak Elementary'},
                            content_type='application/json')
        assert resp.status_code == 200
        assert resp.json()['school_name'] == 'Oak Elementary'
        assert len(resp.json()['sports_interests']) == 1

    def test_other_parent_gets_403(self, login, other_parent, child):
        resp = login(other_parent).get(f'/api/parent/children/{child.id}/')
        assert resp.status_code == 403

    def test_staff_cannot_use_parent_endpoints(self, login, coach):
        assert login(coach).get('/api/parent/children/').status_code == 403
