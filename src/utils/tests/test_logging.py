"""Tests for structured JSON logging."""

import json
import logging
import unittest

from utils.logging import JSONFormatter, setup_structured_logging


class TestJSONFormatter(unittest.TestCase):

    def _record(self, msg, extra=None, exc_info=None):
        logger = logging.getLogger('test.json')
        record = logger.makeRecord('test.json', logging.INFO, __file__, 1, msg, (), exc_info, extra=extra)
        return record

    def test_formats_basic_fields(self):
        data = json.loads(JSONFormatter().format(self._record("User registered")))

        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "test.json")
        self.assertEqual(data["message"], "User registered")
        self.assertTrue(data["timestamp"].endswith("Z"))

    def test_includes_extra_fields(self):
        record = self._record("User logged in", extra={"userId": "abc", "username": "alice"})

        data = json.loads(JSONFormatter().format(record))

        self.assertEqual(data["userId"], "abc")
        self.assertEqual(data["username"], "alice")

    def test_includes_exception(self):
        try:
            raise ValueError("bad date")
        except ValueError:
            import sys
            record = self._record("failed", exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        self.assertIn("ValueError: bad date", data["exception"])


class TestSetupStructuredLogging(unittest.TestCase):

    def setUp(self):
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level

    def tearDown(self):
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_installs_json_handler(self):
        setup_structured_logging()

        self.assertEqual(len(self.root.handlers), 1)
        self.assertIsInstance(self.root.handlers[0].formatter, JSONFormatter)
        self.assertEqual(logging.getLogger("uvicorn.access").level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
