import os
import tempfile
import unittest

from markovseed.data.sequencer import join, read_training_file, sanitize, split
from markovseed.errors import ModelIOError


class TestSanitize(unittest.TestCase):
    def test_keeps_tab_and_line_breaks(self):
        self.assertEqual(sanitize("a\tb\nc\r\nd"), "a\tb\nc\r\nd")

    def test_strips_c0_and_c1_controls(self):
        text = "a\x00b\x07c\x0bd\x0ce\x1bf\x7fg\x85h\x9fi"
        self.assertEqual(sanitize(text), "abcdefghi")

    def test_keeps_printable_unicode(self):
        self.assertEqual(sanitize("Zürich ½ 東京 🙂"), "Zürich ½ 東京 🙂")


class TestSplit(unittest.TestCase):
    def test_multibyte_symbols_are_single_units(self):
        symbols = split("é東🙂")
        self.assertEqual(symbols, ["é", "東", "🙂"])

    def test_join_restores_text(self):
        text = "héllo, wörld\n"
        self.assertEqual(join(split(text)), text)

    def test_split_is_restartable(self):
        symbols = split("abc")
        self.assertEqual(list(symbols), list(symbols))


class TestReadTrainingFile(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write(self, name, data):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'wb') as f:
            f.write(data)
        return path

    def test_reads_utf8(self):
        path = self.write("ok.txt", "grüße".encode('utf-8'))
        self.assertEqual(read_training_file(path), "grüße")

    def test_missing_file(self):
        with self.assertRaises(ModelIOError):
            read_training_file(os.path.join(self.tmpdir.name, "nope.txt"))

    def test_empty_file(self):
        path = self.write("empty.txt", b"")
        with self.assertRaisesRegex(ModelIOError, "empty"):
            read_training_file(path)

    def test_oversized_file(self):
        path = self.write("big.txt", b"x" * 32)
        with self.assertRaisesRegex(ModelIOError, "too large"):
            read_training_file(path, max_size=16)

    def test_invalid_utf8(self):
        path = self.write("bad.txt", b"\xff\xfe\xfa")
        with self.assertRaisesRegex(ModelIOError, "UTF-8"):
            read_training_file(path)

    def test_model_io_error_is_os_error(self):
        with self.assertRaises(OSError):
            read_training_file(os.path.join(self.tmpdir.name, "nope.txt"))


if __name__ == '__main__':
    unittest.main()
