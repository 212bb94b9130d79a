# tests/test_api/test_export.py
import csv
import io
import unittest

from tests.helpers import ApiTestCase


class ExportTestCase(ApiTestCase):

    def export_csv_rows(self):
        response = self.client.get('/api/export?format=csv', headers=self.headers())
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers['content-type'].startswith('text/csv'))
        self.assertIn('attachment; filename="teams-export-', response.headers['content-disposition'])
        return list(csv.reader(io.StringIO(response.text)))

    def test_team_without_records_exports_na_row(self):
        self.create_team('Alpha', members=['Ada', 'Grace'])
        rows = self.export_csv_rows()

        self.assertEqual(rows[0][0], 'Team Name')
        self.assertEqual(len(rows), 2)
        alpha = rows[1]
        self.assertEqual(alpha[:4], ['Alpha', 'TBD', 'Ada; Grace', ''])
        self.assertEqual(alpha[5:9], ['N/A', 'N/A', 'N/A', 'N/A'])

    def test_minutes_formatting(self):
        team = self.create_team('Alpha')
        self.record(team['id'], 420, 180)

        rows = self.export_csv_rows()
        self.assertEqual(rows[1][5:8], ['7.00', '3.00', '10.00'])

        data = self.client.get('/api/export?format=json', headers=self.headers()).json()
        entry = data[0]['presentations'][0]
        self.assertEqual(entry['presentationMinutes'], '7.00')
        self.assertEqual(entry['qaMinutes'], '3.00')
        self.assertEqual(entry['totalMinutes'], '10.00')
        self.assertTrue(entry['timestamp'])

    def test_csv_and_json_count_every_record(self):
        alpha = self.create_team('Alpha')
        beta = self.create_team('Beta')
        self.create_team('Gamma')
        self.record(alpha['id'], 300, 0)
        self.record(alpha['id'], 300, 120)
        self.record(beta['id'], 200, 100)

        data = self.client.get('/api/export?format=json', headers=self.headers()).json()
        self.assertEqual([team['name'] for team in data], ['Alpha', 'Beta', 'Gamma'])
        json_entries = sum(len(team['presentations']) for team in data)

        rows = self.export_csv_rows()[1:]
        csv_entries = sum(1 for row in rows if row[5] != 'N/A')

        self.assertEqual(json_entries, 3)
        self.assertEqual(csv_entries, 3)
        self.assertEqual(len(rows), 4)

    def test_json_is_default_format(self):
        self.create_team('Alpha', topic='Graphs')
        response = self.client.get('/api/export', headers=self.headers())
        self.assertEqual(response.status_code, 200)
        team = response.json()[0]
        self.assertEqual(set(team), {'id', 'name', 'topic', 'members', 'notes', 'createdAt', 'presentations'})
        self.assertEqual(team['topic'], 'Graphs')

    def test_unknown_format(self):
        response = self.client.get('/api/export?format=xml', headers=self.headers())
        self.assertEqual(response.status_code, 400)


if __name__ == '__main__':
    unittest.main()
