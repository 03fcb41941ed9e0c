from unittest.mock import patch

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient


class SystemEndpointsTest(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_health_reports_database(self):
        response = self.client.get(reverse("system_info:health"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["status"], "healthy")
        self.assertEqual(response.data["data"]["database"], "up")
        self.assertTrue(response.data["timestamp"].endswith("Z"))

    def test_health_when_database_is_down(self):
        with patch("system_info.views.database_is_up", return_value=False):
            response = self.client.get(reverse("system_info:health"))

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data["error"], "Database unavailable")

    def test_info(self):
        data = self.client.get(reverse("system_info:info")).data["data"]
        self.assertEqual(data["name"], "b2b-marketplace-api")
        self.assertEqual(data["docs"], "/api/docs/")
        self.assertIn("django", data)

    def test_version(self):
        response = self.client.get(reverse("system_info:version"))
        self.assertEqual(response.data["data"], {"name": "b2b-marketplace-api", "version": "1.0.0"})

    def test_metrics_are_prometheus_text(self):
        response = self.client.get(reverse("system_info:metrics"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response["Content-Type"].startswith("text/plain"))
        self.assertIn(b"# HELP", response.content)

    def test_optional_trailing_slash(self):
        url = reverse("system_info:version")
        other = url[:-1] if url.endswith("/") else url + "/"
        self.assertEqual(self.client.get(other).status_code, status.HTTP_200_OK)
