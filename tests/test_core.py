"""Tests for sitewide endpoints, error handling and the shared constants."""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import Client

from core.constants import SPORTS, get_sport_id, get_sport_name
from core.models import Sport


class TestSportsCatalogue:
    """The sport list is stable, seeded by migration and served sorted."""

    def test_known_ids(self):
        assert get_sport_name(1) == 'Basketball'
        assert get_sport_name(2) == 'Soccer'
        assert get_sport_id('Soccer') == 2

    def test_unknown_id(self):
        assert get_sport_name(9999) == 'Unknown Sport'

    def test_ids_are_unique(self):
        ids = [sport_id for sport_id, _ in SPORTS]
        assert len(ids) == len(set(ids)) == 72

    @pytest.mark.django_db
    def test_migration_seeds_every_sport(self):
        assert Sport.objects.count() == len(SPORTS)

    @pytest.mark.django_db
    def test_endpoint_sorted_by_name(self, anon):
        resp = anon.get('/api/sports/')
        assert resp.status_code == 200
        names = [sport['name'] for sport in resp.json()]
        assert names == sorted(names)
        assert {'id': 2, 'name': 'Soccer'} in resp.json()


class TestPublicEndpoints:

    def test_health(self, anon):
        resp = anon.get('/api/health/')
        assert resp.status_code == 200
        assert resp.json()['status'] == 'ok'

    def test_constants(self, anon):
        data = anon.get('/api/constants/').json()
        assert {'value': 'all_levels', 'label': 'All levels'} in data['skill_levels']
        assert len(data['sports']) == 72
        assert any(item['value'] == 'YM' for item in data['jersey_sizes'])

    def test_method_not_allowed(self, anon):
        assert anon.post('/api/health/').status_code == 405


@pytest.mark.django_db
class TestErrorHandling:
    """API errors always come back as JSON."""

    def test_unauthenticated_is_401(self, anon):
        resp = anon.get('/api/parent/children/')
        assert resp.status_code == 401
        assert resp.json() == {'error': 'Not authenticated.'}

    def test_missing_object_is_404_json(self, login, creator):
        resp = login(creator).get('/api/camps/424242/')
        assert resp.status_code == 404
        assert resp.json()['error'] == 'Not found.'

    def test_invalid_json_body(self, login, parent):
        resp = login(parent).post('/api/parent/children/', data='{nope', content_type='application/json')
        assert resp.status_code == 400
        assert 'valid JSON' in resp.json()['error']

    def test_csrf_failure_is_json(self, parent):
        client = Client(enforce_csrf_checks=True)
        client.force_login(parent)
        resp = client.post('/api/parent/children/', {}, content_type='application/json')
        assert resp.status_code == 403
        assert resp['Content-Type'] == 'application/json'
        assert 'CSRF' in resp.json()['error']


@pytest.mark.django_db
class TestUploads:

    def _image(self, name='photo.png', size=100, content_type='image/png'):
        return SimpleUploadedFile(name, b'\x89PNG' + b'0' * size, content_type=content_type)

    def test_profile_photo(self, login, parent):
        resp = login(parent).post('/api/upload/profile-photo/', {'photo': self._image()})
        assert resp.status_code == 200
        url = resp.json()['url']
        assert url.startswith('/media/uploads/') and url.endswith('.png')
        parent.refresh_from_db()
        assert parent.profile_photo.name.startswith('uploads/')

    def test_child_photo(self, login, parent, child):
        resp = login(parent).post(
            '/api/upload/profile-photo/', {'photo': self._image(), 'child_id': str(child.id)},
        )
        assert resp.status_code == 200
        child.refresh_from_db()
        assert child.profile_photo.name

    def test_other_parents_child_is_404(self, login, other_parent, child):
        resp = login(other_parent).post(
            '/api/upload/profile-photo/', {'photo': self._image(), 'child_id': str(child.id)},
        )
        assert resp.status_code == 404

    def test_rejects_non_images(self, login, parent):
        upload = self._image('notes.txt', content_type='text/plain')
        resp = login(parent).post('/api/upload/profile-photo/', {'photo': upload})
        assert resp.status_code == 400
        assert resp.json()['error'] == 'Only image files are allowed.'

    def test_rejects_large_files(self, login, parent, settings):
        settings.UPLOAD_MAX_BYTES = 50
        resp = login(parent).post('/api/upload/profile-photo/', {'photo': self._image(size=100)})
        assert resp.status_code == 400

    def test_missing_file(self, login, parent):
        resp = login(parent).post('/api/upload/profile-photo/', {})
        assert resp.status_code == 400
