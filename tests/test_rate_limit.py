import unittest
from unittest.mock import MagicMock
from datetime import datetime
import sys
import os

# Add src to path to allow imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from reposize.rate_limit import format_rate_limit, report_rate_limit


class TestRateLimit(unittest.TestCase):

    def test_format_converts_reset_to_local_time(self):
        reset = 1700000000
        expected = datetime.fromtimestamp(reset).strftime("%Y-%m-%d %H:%M:%S")

        report = format_rate_limit({"rate": {"remaining": 4999, "reset": reset}})

        self.assertEqual(report, f"API rate limit: 4999 requests remaining, resets at {expected}")

    def test_format_missing_fields(self):
        self.assertEqual(format_rate_limit({}),
                         "API rate limit: null requests remaining, resets at null")

    def test_report_queries_client(self):
        client = MagicMock()
        client.get_rate_limit.return_value = {"rate": {"remaining": 0}}

        report = report_rate_limit(client)

        client.get_rate_limit.assert_called_once_with()
        self.assertIn("0 requests remaining", report)


if __name__ == '__main__':
    unittest.main()
