import os
import shutil
import tempfile
import unittest
from chardiff.input_controller import CombinedFileParser, InputController, RawFileParser


class TestInputController(unittest.TestCase):
    def setUp(self):
        self.controller = InputController()
        self.tmpdir = tempfile.mkdtemp()
        self.path_a = self._write("test_a.txt", "line 1\r\nline 2")
        self.path_b = self._write("test_b.txt", "line 1\nline 3")
        self.path_combined = self._write(
            "test_combined.txt", "--- OLD FILE ---\nold 1\nold 2\n--- NEW FILE ---\nnew 1\n")

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _write(self, name, content):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    def test_raw_parsing(self):
        text_a, text_b = self.controller.parse(self.path_a, self.path_b)
        # Line breaks are left for the normalizer.
        self.assertEqual(text_a, "line 1\r\nline 2")
        self.assertEqual(text_b, "line 1\nline 3")

    def test_combined_parsing(self):
        text_a, text_b = self.controller.parse(self.path_combined)
        self.assertEqual(text_a, "old 1\nold 2")
        self.assertEqual(text_b, "new 1")

    def test_parser_selection(self):
        self.assertIsInstance(self.controller._get_parser("a", "b"), RawFileParser)
        self.assertIsInstance(self.controller._get_parser("a"), CombinedFileParser)

    def test_missing_file(self):
        missing = os.path.join(self.tmpdir, "nope.txt")
        with self.assertLogs("chardiff.input_controller", level="WARNING"):
            text_a, text_b = self.controller.parse(missing, self.path_b)
        self.assertIsNone(text_a)
        self.assertEqual(text_b, "line 1\nline 3")

    def test_missing_delimiters(self):
        path = self._write("plain.txt", "no delimiters here\n")
        with self.assertLogs("chardiff.input_controller", level="WARNING"):
            text_a, text_b = self.controller.parse(path)
        self.assertEqual((text_a, text_b), ("", ""))

    def test_raw_parser_requires_two_files(self):
        with self.assertRaises(ValueError):
            RawFileParser().parse(self.path_a)


if __name__ == '__main__':
    unittest.main()
