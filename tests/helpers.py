# tests/helpers.py
import unittest
from fastapi.testclient import TestClient

from nextup.main import app
from nextup.db.session import Base, engine


class ApiTestCase(unittest.TestCase):
    """Fresh in-memory database and a registered account per test"""

    email = "a@x.com"
    password = "pw123456"

    def setUp(self):
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
        self.client = TestClient(app)
        self.token = self.register(self.email, self.password)

    def tearDown(self):
        Base.metadata.drop_all(bind=engine)

    def register(self, email, password):
        response = self.client.post('/api/auth/register', json={'email': email, 'password': password})
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()['token']

    def headers(self, token=None):
        return {'Authorization': f'Bearer {token or self.token}'}

    def create_team(self, name, members=None, topic=None, token=None):
        payload = {'name': name, 'members': members or []}
        if topic is not None:
            payload['topic'] = topic
        response = self.client.post('/api/teams', headers=self.headers(token), json=payload)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()['team']

    def record(self, team_id, presentation_seconds, qa_seconds, token=None):
        response = self.client.post(
            f'/api/teams/{team_id}/presentation',
            headers=self.headers(token),
            json={'presentationSeconds': presentation_seconds, 'qaSeconds': qa_seconds},
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()['presentation']
