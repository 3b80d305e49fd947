# tests/test_services/test_storage.py
import json
import os
import shutil
import tempfile
import threading
import unittest

from portfolio_api.core.config import Settings
from portfolio_api.core.errors import NotFoundError
from portfolio_api.schemas.profile import default_profile
from portfolio_api.services.storage import DatabaseStorage, FileStorage, create_storage


def photo_data(**overrides):
    data = {"title": "Lake", "image_url": "data:image/png;base64,AAAA", "category": "nature"}
    data.update(overrides)
    return data


class StorageContract:
    """Behaviour both backends must share; mixed into one TestCase per backend"""

    backend = None

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.settings = Settings(
            STORAGE_BACKEND=self.backend,
            DATA_DIR=self.tmp_dir,
            SQLALCHEMY_DATABASE_URI=f"sqlite:///{os.path.join(self.tmp_dir, 'test.db')}",
        )
        self.storage = create_storage(self.settings)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_empty_collection(self):
        self.assertEqual(self.storage.get_all_photos(), [])
        self.assertEqual(self.storage.get_photos_by_category("nature"), [])

    def test_ids_start_at_one_and_increase(self):
        ids = [self.storage.add_photo(photo_data(title=f"P{n}")).id for n in range(3)]
        self.assertEqual(ids, [1, 2, 3])

    def test_add_returns_stored_photo(self):
        photo = self.storage.add_photo(photo_data(tags=["lake", "blue"], iso=100))
        self.assertEqual(self.storage.get_photo_by_id(photo.id), photo)
        self.assertEqual(photo.tags, ["lake", "blue"])
        self.assertIsNone(photo.lens)

    def test_get_missing_photo_raises(self):
        with self.assertRaises(NotFoundError):
            self.storage.get_photo_by_id(5)

    def test_category_filter_is_exact(self):
        self.storage.add_photo(photo_data(title="A"))
        self.storage.add_photo(photo_data(title="B", category="fishing"))
        self.storage.add_photo(photo_data(title="C"))

        titles = [photo.title for photo in self.storage.get_photos_by_category("nature")]
        self.assertEqual(titles, ["A", "C"])
        self.assertEqual(self.storage.get_photos_by_category("NATURE"), [])

    def test_update_merges_given_fields(self):
        photo = self.storage.add_photo(photo_data(description="old"))
        updated = self.storage.update_photo(photo.id, {"description": "new", "camera": "X100V"})

        self.assertEqual(updated.description, "new")
        self.assertEqual(updated.camera, "X100V")
        self.assertEqual(updated.title, "Lake")
        self.assertEqual(self.storage.get_photo_by_id(photo.id), updated)

    def test_update_missing_photo_raises(self):
        with self.assertRaises(NotFoundError):
            self.storage.update_photo(9, {"title": "x"})

    def test_delete_keeps_others_and_is_idempotent(self):
        first = self.storage.add_photo(photo_data(title="first"))
        second = self.storage.add_photo(photo_data(title="second"))
        third = self.storage.add_photo(photo_data(title="third"))

        self.storage.delete_photo(second.id)
        self.storage.delete_photo(second.id)
        self.storage.delete_photo(404)

        self.assertEqual([photo.id for photo in self.storage.get_all_photos()], [first.id, third.id])

    def test_profile_default_is_not_persisted(self):
        self.assertEqual(self.storage.get_profile(), default_profile())
        self.assertEqual(self.storage.get_profile(), default_profile())

    def test_profile_update_round_trip(self):
        before = self.storage.get_profile()
        self.storage.update_profile({"bio": "X"})
        after = self.storage.get_profile()

        self.assertEqual(after.bio, "X")
        self.assertEqual(after.model_dump(exclude={"bio"}), before.model_dump(exclude={"bio"}))
        self.assertEqual(after.id, 1)


class FileStorageTestCase(StorageContract, unittest.TestCase):
    backend = "file"

    def test_backend_type(self):
        self.assertIsInstance(self.storage, FileStorage)

    def test_documents_are_pretty_printed_camel_case(self):
        self.storage.add_photo(photo_data())
        with open(os.path.join(self.tmp_dir, "photos.json")) as f:
            text = f.read()
        self.assertIn('\n  {', text)
        self.assertEqual(json.loads(text)[0]["imageUrl"], "data:image/png;base64,AAAA")

    def test_corrupt_document_reads_as_empty(self):
        with open(os.path.join(self.tmp_dir, "photos.json"), "w") as f:
            f.write("{not json")
        with open(os.path.join(self.tmp_dir, "profile.json"), "w") as f:
            f.write("")

        self.assertEqual(self.storage.get_all_photos(), [])
        self.assertEqual(self.storage.get_profile(), default_profile())
        self.assertEqual(self.storage.add_photo(photo_data()).id, 1)

    def test_wrongly_shaped_document_reads_as_empty(self):
        for photos_json in ("null", "{}"):
            with self.subTest(photos_json=photos_json):
                with open(os.path.join(self.tmp_dir, "photos.json"), "w") as f:
                    f.write(photos_json)
                with open(os.path.join(self.tmp_dir, "profile.json"), "w") as f:
                    f.write("[]")

                self.assertEqual(self.storage.get_all_photos(), [])
                self.assertEqual(self.storage.get_profile(), default_profile())
                self.assertEqual(self.storage.add_photo(photo_data()).id, 1)

        with open(os.path.join(self.tmp_dir, "photos.json")) as f:
            self.assertEqual([item["id"] for item in json.load(f)], [1])

    def test_failed_update_does_not_rewrite_document(self):
        self.storage.add_photo(photo_data())
        path = os.path.join(self.tmp_dir, "photos.json")
        mtime = os.stat(path).st_mtime_ns

        with self.assertRaises(NotFoundError):
            self.storage.update_photo(2, {"title": "x"})
        self.assertEqual(os.stat(path).st_mtime_ns, mtime)

    def test_concurrent_adds_do_not_lose_updates(self):
        threads = [
            threading.Thread(target=self.storage.add_photo, args=(photo_data(title=f"T{n}"),))
            for n in range(20)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = sorted(photo.id for photo in self.storage.get_all_photos())
        self.assertEqual(ids, list(range(1, 21)))


class DatabaseStorageTestCase(StorageContract, unittest.TestCase):
    backend = "database"

    def test_backend_type(self):
        self.assertIsInstance(self.storage, DatabaseStorage)


if __name__ == '__main__':
    unittest.main()
