"""
Tests for the HTTP API.
"""

import pytest
import requests
from unittest.mock import Mock

from pagesift import __version__
from pagesift.web import create_app


URL = "https://example.com/foxes"


@pytest.fixture
def session(make_response, fox_page):
    """HTTP session stand-in shared by the app."""
    session = Mock()
    session.get.return_value = make_response(fox_page)
    return session


@pytest.fixture
def client(tmp_path, session):
    """Flask test client backed by a temporary data directory."""
    app = create_app(data_dir=str(tmp_path), session=session)
    app.config['TESTING'] = True
    return app.test_client()


class TestGeneralRoutes:
    """Test cases for health and config routes."""

    def test_health(self, client):
        """Test the health check."""
        response = client.get('/api/health')

        assert response.status_code == 200
        assert response.get_json() == {'status': 'healthy', 'version': __version__}

    def test_config(self, client, tmp_path):
        """Test the configuration view."""
        data = client.get('/api/config').get_json()

        assert data['data_dir'] == str(tmp_path)
        assert data['reducer_mode'] == "regex"

    def test_unknown_route(self, client):
        """Test the JSON 404 handler."""
        response = client.get('/api/nothing-here')

        assert response.status_code == 404
        assert response.get_json() == {'error': 'Not found'}

    def test_method_not_allowed(self, client):
        """Test the JSON 405 handler."""
        response = client.put('/api/health')

        assert response.status_code == 405
        assert response.get_json() == {'error': 'Method not allowed'}


class TestSearchRoutes:
    """Test cases for search routes."""

    def submit(self, client, **body):
        payload = {'websiteUrl': URL, 'searchQuery': 'fox'}
        payload.update(body)
        return client.post('/api/search', json=payload)

    def test_submit_success(self, client):
        """Test a successful search and its stored results."""
        response = self.submit(client, maxResults=2, maxTokensPerChunk=20)

        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is True
        assert data['resultsCount'] == 2
        assert data['totalChunks'] == 6
        assert data['processingTime'] >= 0

        search = client.get(f"/api/search/{data['searchId']}").get_json()
        assert search['status'] == "completed"
        assert len(search['chunks']) == 2
        scores = [chunk['relevance_score'] for chunk in search['chunks']]
        assert scores == sorted(scores, reverse=True)

    def test_submit_uses_defaults(self, client):
        """Test that omitted limits fall back to configuration."""
        data = self.submit(client).get_json()

        assert data['success'] is True
        assert data['totalChunks'] == 1

    def test_submit_fetch_failure(self, client, session):
        """Test that a fetch error is reported and recorded."""
        session.get.side_effect = requests.ConnectionError("connection refused")

        response = self.submit(client)

        assert response.status_code == 500
        data = response.get_json()
        assert data['success'] is False
        assert "Failed to fetch website" in data['error']

        search = client.get(f"/api/search/{data['searchId']}").get_json()
        assert search['status'] == "failed"
        assert "connection refused" in search['error_message']

    @pytest.mark.parametrize("body", [
        {'websiteUrl': URL},
        {'searchQuery': 'fox'},
        {},
    ])
    def test_submit_missing_fields(self, client, session, body):
        """Test that required fields are enforced."""
        response = client.post('/api/search', json=body)

        assert response.status_code == 400
        assert response.get_json()['success'] is False
        session.get.assert_not_called()

    @pytest.mark.parametrize("body", [
        {'websiteUrl': 'not a url'},
        {'searchQuery': '   '},
        {'maxResults': 0},
        {'maxResults': 'ten'},
        {'maxTokensPerChunk': -5},
        {'maxTokensPerChunk': True},
    ])
    def test_submit_invalid_fields(self, client, session, body):
        """Test that invalid values are rejected before anything is recorded."""
        response = self.submit(client, **body)

        assert response.status_code == 400
        assert response.get_json()['success'] is False
        session.get.assert_not_called()
        assert client.get('/api/search/stats').get_json()['total_searches'] == 0

    def test_submit_non_json(self, client):
        """Test a body that is not JSON."""
        response = client.post('/api/search', data="websiteUrl=x", content_type='text/plain')

        assert response.status_code == 400

    def test_get_missing_search(self, client):
        """Test getting an unknown search."""
        response = client.get('/api/search/does-not-exist')

        assert response.status_code == 404

    def test_delete_search(self, client):
        """Test deleting a search."""
        search_id = self.submit(client).get_json()['searchId']

        response = client.delete(f'/api/search/{search_id}')
        assert response.status_code == 200
        assert response.get_json() == {'deleted': search_id}

        assert client.get(f'/api/search/{search_id}').status_code == 404
        assert client.delete(f'/api/search/{search_id}').status_code == 404

    def test_history_and_stats(self, client, session):
        """Test search history and statistics."""
        first = self.submit(client, searchQuery='fox').get_json()['searchId']
        second = self.submit(client, searchQuery='wolves').get_json()['searchId']
        session.get.side_effect = requests.Timeout("too slow")
        third = self.submit(client, searchQuery='dogs').get_json()['searchId']

        history = client.get('/api/search/history?limit=2').get_json()['history']
        assert [search['id'] for search in history] == [third, second]

        stats = client.get('/api/search/stats').get_json()
        assert stats['total_searches'] == 3
        assert stats['completed_searches'] == 2
        assert stats['failed_searches'] == 1
        assert first != second
