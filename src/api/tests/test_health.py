"""Tests for the health and root endpoints."""

import unittest
from unittest.mock import patch, MagicMock
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from api.main import app, VERSION


class TestHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    @patch('api.routes.health.get_mongodb_client')
    def test_healthy_when_mongodb_pings(self, mock_get_client):
        mock_get_client.return_value = MagicMock()

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")
        self.assertEqual(response.json()["services"]["mongodb"]["status"], "healthy")

    @patch('api.routes.health.get_mongodb_client')
    def test_degraded_when_mongodb_not_configured(self, mock_get_client):
        mock_get_client.return_value = None

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "degraded")

    @patch('api.routes.health.get_mongodb_client')
    def test_degraded_when_ping_fails(self, mock_get_client):
        client = MagicMock()
        client.admin.command.side_effect = PyMongoError("timeout")
        mock_get_client.return_value = client

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertIn("timeout", response.json()["services"]["mongodb"]["message"])

    def test_root_reports_version(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["version"], VERSION)
        self.assertEqual(response.json()["status"], "running")


if __name__ == '__main__':
    unittest.main()
