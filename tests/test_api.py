import json
import os
import unittest
from unittest import mock

from fastapi.testclient import TestClient

from api.main import app, pop_fn, push_fn
from common.errors import EmptyBucketError


class TestHarness(unittest.TestCase):
    def setUp(self):
        # handler failures must come back as a 500, not raise into the test
        self.client = TestClient(app, raise_server_exceptions=False)

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"ok": True})

    def test_push_returns_bare_url(self):
        url = "https://assets-bucket.s3.amazonaws.com/k?X-Amz-Expires=600"
        with mock.patch.object(push_fn, "handler", return_value=url) as handler:
            resp = self.client.get("/push")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.text, url)
        self.assertTrue(resp.headers["content-type"].startswith("text/plain"))
        handler.assert_called_once_with({}, None)

    def test_pop_returns_bare_url(self):
        url = "https://assets-bucket.s3.amazonaws.com/b?X-Amz-Expires=600"
        with mock.patch.object(pop_fn, "handler", return_value=url):
            resp = self.client.get("/pop")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.text, url)

    def test_failure_has_no_structured_body(self):
        with mock.patch.object(pop_fn, "handler", side_effect=EmptyBucketError("Bucket has no objects")):
            resp = self.client.get("/pop")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.text, "Internal Server Error")

    def test_root_reports_linked_app(self):
        app_env = {"SST_RESOURCE_App": json.dumps({"name": "aws-rust-lambda", "stage": "dev"})}
        with mock.patch.dict(os.environ, app_env):
            resp = self.client.get("/")
        self.assertEqual(resp.json(), {"app": "aws-rust-lambda", "stage": "dev"})

    def test_root_without_app(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("message", resp.json())


if __name__ == "__main__":
    unittest.main()
