# portfolio_api/services/storage/base.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from portfolio_api.schemas.photo import Photo
from portfolio_api.schemas.profile import Profile


class PortfolioStorage(ABC):
    """
    CRUD over photos and the profile singleton.

    Data passed to ``add_photo``/``update_photo``/``update_profile`` is a
    dict keyed by snake_case field names, as produced by
    ``model_dump(exclude_unset=True)`` on the request schemas. Absent ids
    raise ``NotFoundError``, except on delete, which is idempotent.
    """

    @abstractmethod
    def get_all_photos(self) -> List[Photo]:
        ...

    @abstractmethod
    def get_photos_by_category(self, category: str) -> List[Photo]:
        ...

    @abstractmethod
    def get_photo_by_id(self, photo_id: int) -> Photo:
        ...

    @abstractmethod
    def add_photo(self, data: Dict[str, Any]) -> Photo:
        ...

    @abstractmethod
    def update_photo(self, photo_id: int, data: Dict[str, Any]) -> Photo:
        ...

    @abstractmethod
    def delete_photo(self, photo_id: int) -> None:
        ...

    @abstractmethod
    def get_profile(self) -> Profile:
        ...

    @abstractmethod
    def update_profile(self, data: Dict[str, Any]) -> Profile:
        ...
