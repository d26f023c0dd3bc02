import json
import os
import tempfile
import unittest
from unittest import mock

from markovseed.errors import CorruptModelError, ModelIOError
from markovseed.models.table import TransitionTable
from markovseed.utils import store
from markovseed.utils.store import load_model, parse_payload, save_model


class TestParsePayload(unittest.TestCase):
    def test_valid(self):
        n, table, meta = parse_payload({
            'n': 2,
            'model': {'ab': ['c', 'c'], 'bc': []},
            'meta': {'timestamp': '2024-01-01T00:00:00+00:00', 'size': 2},
        })
        self.assertEqual(n, 2)
        self.assertEqual(table.to_dict(), {'ab': ['c', 'c'], 'bc': []})
        self.assertEqual(meta['size'], 2)

    def test_meta_is_optional(self):
        _, _, meta = parse_payload({'n': 1, 'model': {}})
        self.assertEqual(meta, {})

    def test_rejects_malformed(self):
        cases = [
            [],
            "model",
            {'model': {}},
            {'n': 2},
            {'n': 0, 'model': {}},
            {'n': -3, 'model': {}},
            {'n': '2', 'model': {}},
            {'n': 2.0, 'model': {}},
            {'n': True, 'model': {}},
            {'n': 2, 'model': []},
            {'n': 2, 'model': {'ab': 'c'}},
            {'n': 2, 'model': {'ab': ['c', 1]}},
            {'n': 2, 'model': {'ab': [None]}},
            {'n': 2, 'model': {}, 'meta': []},
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(CorruptModelError):
                    parse_payload(data)


class TestFiles(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.path = os.path.join(self.tmpdir.name, "model.json")

    def test_save_and_load(self):
        table = TransitionTable({'東京': ['都', '東'], 'ab': ['c']})
        meta = save_model(self.path, 2, table)
        self.assertEqual(meta['size'], 2)

        n, loaded, loaded_meta = load_model(self.path)
        self.assertEqual(n, 2)
        self.assertEqual(loaded, table)
        self.assertEqual(loaded_meta, meta)

    def test_failed_write_keeps_previous_model(self):
        save_model(self.path, 1, TransitionTable({'a': ['b']}))
        with open(self.path, encoding='utf-8') as f:
            before = f.read()

        def partial_dump(payload, f, **kwargs):
            f.write('{"n": 2, "mo')
            raise OSError(28, "No space left on device")

        with mock.patch.object(store.json, 'dump', side_effect=partial_dump):
            with self.assertRaises(ModelIOError):
                save_model(self.path, 2, TransitionTable({'ab': ['c']}))

        with open(self.path, encoding='utf-8') as f:
            self.assertEqual(f.read(), before)
        self.assertEqual(os.listdir(self.tmpdir.name), ['model.json'])

    def test_overwrites_existing_model(self):
        save_model(self.path, 1, TransitionTable({'a': ['b']}))
        save_model(self.path, 2, TransitionTable({'ab': ['c']}))
        n, table, _ = load_model(self.path)
        self.assertEqual(n, 2)
        self.assertEqual(table.to_dict(), {'ab': ['c']})
        self.assertEqual(os.listdir(self.tmpdir.name), ['model.json'])

    def test_not_json(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write("{not json")
        with self.assertRaises(CorruptModelError):
            load_model(self.path)

    def test_missing_fields(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({'meta': {}}, f)
        with self.assertRaisesRegex(CorruptModelError, "missing"):
            load_model(self.path)

    def test_missing_file(self):
        with self.assertRaises(ModelIOError):
            load_model(os.path.join(self.tmpdir.name, "absent.json"))

    def test_unwritable_destination(self):
        with self.assertRaises(ModelIOError):
            save_model(self.tmpdir.name, 2, TransitionTable())


if __name__ == '__main__':
    unittest.main()
