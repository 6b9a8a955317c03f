#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, CodingLog, CodingProgressStep, HeaderLog

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].level, LogLevel.INFO)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is a warning", self.captured_output.getvalue())

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is an error", self.captured_output.getvalue())

    def test_progress_not_recorded_by_default(self):
        self.logger.coding_step_interval_count = 2
        for _ in range(4):
            self.logger.log(CodingProgressStep("Encoding symbols", 4))
        self.assertEqual(self.logger.logs, [])
        self.assertIn("(4/4)", self.captured_output.getvalue())
        self.assertNotIn("(1/4)", self.captured_output.getvalue())

    def test_get_logs_by_type_and_clear(self):
        self.logger.log(CodingLog(97, 8, 3))
        self.logger.log(HeaderLog(6))
        self.assertEqual(len(self.logger.get_logs()), 2)
        self.assertEqual(len(self.logger.get_logs(CodingLog)), 1)
        self.logger.clear()
        self.assertEqual(self.logger.get_logs(), [])

    def test_save(self):
        self.logger.log(HeaderLog(6))
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file_name = temp_file.name
        try:
            self.logger.save(temp_file_name)
            with open(temp_file_name) as f:
                self.assertIn("Header size: 6", f.read())
        finally:
            os.remove(temp_file_name)

if __name__ == '__main__':
    unittest.main()
