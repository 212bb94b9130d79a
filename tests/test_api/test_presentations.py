# tests/test_api/test_presentations.py
import unittest

from tests.helpers import ApiTestCase


class PresentationsTestCase(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.team = self.create_team('Alpha')

    def test_record_presentation(self):
        record = self.record(self.team['id'], 420, 180)
        self.assertEqual(record['teamId'], self.team['id'])
        self.assertEqual(record['presentationSeconds'], 420)
        self.assertEqual(record['qaSeconds'], 180)
        self.assertIn('createdAt', record)

    def test_records_are_appended(self):
        self.record(self.team['id'], 400, 0)
        self.record(self.team['id'], 400, 150)

        response = self.client.get(f"/api/teams/{self.team['id']}/presentations", headers=self.headers())
        self.assertEqual(response.status_code, 200)
        records = response.json()['presentations']
        self.assertEqual([r['qaSeconds'] for r in records], [0, 150])

    def test_fractional_seconds_are_rounded(self):
        record = self.record(self.team['id'], 59.6, 0)
        self.assertEqual(record['presentationSeconds'], 60)

    def test_accepts_durations_up_to_one_day(self):
        record = self.record(self.team['id'], 86400, 86400)
        self.assertEqual(record['presentationSeconds'], 86400)
        self.assertEqual(record['qaSeconds'], 86400)

    def test_rejects_non_numeric_durations(self):
        url = f"/api/teams/{self.team['id']}/presentation"
        for payload in [
            {'presentationSeconds': 'abc', 'qaSeconds': 10},
            {'presentationSeconds': 10},
            {'presentationSeconds': -5, 'qaSeconds': 10},
            {'presentationSeconds': True, 'qaSeconds': False},
            {'presentationSeconds': '420', 'qaSeconds': 0},
            {'presentationSeconds': 1e20, 'qaSeconds': 0},
            {'presentationSeconds': 0, 'qaSeconds': 86401},
        ]:
            response = self.client.post(url, headers=self.headers(), json=payload)
            self.assertEqual(response.status_code, 400, payload)
            self.assertIn('message', response.json())

    def test_unknown_team(self):
        response = self.client.post('/api/teams/999/presentation', headers=self.headers(),
                                    json={'presentationSeconds': 1, 'qaSeconds': 1})
        self.assertEqual(response.status_code, 404)

        response = self.client.get('/api/teams/999/presentations', headers=self.headers())
        self.assertEqual(response.status_code, 404)

    def test_cannot_record_for_another_account(self):
        other = self.register('b@x.com', 'pw123456')
        response = self.client.post(f"/api/teams/{self.team['id']}/presentation",
                                    headers=self.headers(other),
                                    json={'presentationSeconds': 1, 'qaSeconds': 1})
        self.assertEqual(response.status_code, 404)


if __name__ == '__main__':
    unittest.main()
