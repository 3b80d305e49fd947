# portfolio_api/services/storage/file.py
import os
from typing import Any, Dict, List

from portfolio_api.core.errors import NotFoundError
from portfolio_api.core.logging import logger
from portfolio_api.schemas.photo import Photo
from portfolio_api.schemas.profile import Profile, PROFILE_ID, default_profile
from portfolio_api.services.documents import JsonDocument, next_id
from portfolio_api.services.storage.base import PortfolioStorage


def _dump(model) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


class FileStorage(PortfolioStorage):
    """
    Document-file-backed storage.

    Photos live in ``photos.json`` (an array, in insertion order) and the
    profile in ``profile.json`` (an object). Each mutation reads the whole
    document, changes it in memory and rewrites it.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self.photos = JsonDocument(os.path.join(data_dir, "photos.json"), list)
        self.profile = JsonDocument(os.path.join(data_dir, "profile.json"), lambda: None, expected_type=dict)
        logger.info(f"File storage initialized with directory: {data_dir}")

    def get_all_photos(self) -> List[Photo]:
        return [Photo.model_validate(item) for item in self.photos.read()]

    def get_photos_by_category(self, category: str) -> List[Photo]:
        return [photo for photo in self.get_all_photos() if photo.category == category]

    def get_photo_by_id(self, photo_id: int) -> Photo:
        for item in self.photos.read():
            if item["id"] == photo_id:
                return Photo.model_validate(item)
        raise NotFoundError("Photo", photo_id)

    def add_photo(self, data: Dict[str, Any]) -> Photo:
        with self.photos.transaction() as items:
            photo = Photo(id=next_id(items), **data)
            items.append(_dump(photo))
        logger.info(f"Created photo {photo.id}")
        return photo

    def update_photo(self, photo_id: int, data: Dict[str, Any]) -> Photo:
        with self.photos.transaction() as items:
            for index, item in enumerate(items):
                if item["id"] == photo_id:
                    merged = Photo.model_validate(item).model_copy(update=data)
                    items[index] = _dump(merged)
                    return merged
            # Leaving the transaction by exception skips the write
            raise NotFoundError("Photo", photo_id)

    def delete_photo(self, photo_id: int) -> None:
        with self.photos.transaction() as items:
            remaining = [item for item in items if item["id"] != photo_id]
            if len(remaining) == len(items):
                logger.warning(f"Photo {photo_id} did not exist when attempting to delete")
            items[:] = remaining

    def get_profile(self) -> Profile:
        saved = self.profile.read()
        if not saved:
            return default_profile()
        return Profile.model_validate(saved)

    def update_profile(self, data: Dict[str, Any]) -> Profile:
        with self.profile.lock:
            merged = self.get_profile().model_copy(update={**data, "id": PROFILE_ID})
            self.profile.write(_dump(merged))
        return merged
