# portfolio_api/services/storage/database.py
from typing import Any, Dict, List
from sqlalchemy.orm import sessionmaker

from portfolio_api.core.errors import NotFoundError
from portfolio_api.core.logging import logger
from portfolio_api.models.photo import Photo
from portfolio_api.models.profile import Profile
from portfolio_api.schemas.photo import Photo as PhotoSchema
from portfolio_api.schemas.profile import Profile as ProfileSchema, PROFILE_ID, default_profile
from portfolio_api.services.storage.base import PortfolioStorage


class DatabaseStorage(PortfolioStorage):
    """
    Table-backed storage.

    Every operation is a single statement against one table, keyed by
    primary key or by an equality filter on category. Ids come from the
    database's auto-increment.
    """

    def __init__(self, session_factory: sessionmaker):
        self.SessionLocal = session_factory
        logger.info("Database storage initialized")

    def get_all_photos(self) -> List[PhotoSchema]:
        with self.SessionLocal() as db:
            photos = db.query(Photo).order_by(Photo.id).all()
            return [PhotoSchema.model_validate(photo.as_dict()) for photo in photos]

    def get_photos_by_category(self, category: str) -> List[PhotoSchema]:
        with self.SessionLocal() as db:
            photos = db.query(Photo).filter(Photo.category == category).order_by(Photo.id).all()
            return [PhotoSchema.model_validate(photo.as_dict()) for photo in photos]

    def get_photo_by_id(self, photo_id: int) -> PhotoSchema:
        with self.SessionLocal() as db:
            photo = db.query(Photo).filter(Photo.id == photo_id).first()
            if not photo:
                raise NotFoundError("Photo", photo_id)
            return PhotoSchema.model_validate(photo.as_dict())

    def add_photo(self, data: Dict[str, Any]) -> PhotoSchema:
        with self.SessionLocal() as db:
            photo = Photo(**data)
            db.add(photo)
            db.commit()
            db.refresh(photo)
            logger.info(f"Created photo {photo.id}")
            return PhotoSchema.model_validate(photo.as_dict())

    def update_photo(self, photo_id: int, data: Dict[str, Any]) -> PhotoSchema:
        with self.SessionLocal() as db:
            photo = db.query(Photo).filter(Photo.id == photo_id).first()
            if not photo:
                raise NotFoundError("Photo", photo_id)

            for field, value in data.items():
                setattr(photo, field, value)

            db.commit()
            db.refresh(photo)
            return PhotoSchema.model_validate(photo.as_dict())

    def delete_photo(self, photo_id: int) -> None:
        with self.SessionLocal() as db:
            deleted = db.query(Photo).filter(Photo.id == photo_id).delete()
            db.commit()
            if not deleted:
                logger.warning(f"Photo {photo_id} did not exist when attempting to delete")

    def get_profile(self) -> ProfileSchema:
        with self.SessionLocal() as db:
            profile = db.query(Profile).filter(Profile.id == PROFILE_ID).first()
            if not profile:
                return default_profile()
            return ProfileSchema.model_validate(profile.as_dict())

    def update_profile(self, data: Dict[str, Any]) -> ProfileSchema:
        with self.SessionLocal() as db:
            profile = db.query(Profile).filter(Profile.id == PROFILE_ID).first()
            if not profile:
                # First save: persist the defaults with the changes applied
                profile = Profile(**default_profile().model_dump())
                db.add(profile)

            for field, value in data.items():
                setattr(profile, field, value)

            db.commit()
            db.refresh(profile)
            return ProfileSchema.model_validate(profile.as_dict())
