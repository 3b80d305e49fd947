# portfolio_api/api/endpoints/photos.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import Callable, List

from portfolio_api.api.deps import get_image_analyzer, get_settings, get_storage
from portfolio_api.core.config import Settings
from portfolio_api.core.errors import NotFoundError
from portfolio_api.core.logging import logger
from portfolio_api.middleware.auth import AdminGuardRoute, require_admin
from portfolio_api.schemas.photo import Photo as PhotoSchema, PhotoCreate, PhotoUpdate
from portfolio_api.services.image_analysis import FALLBACK_DESCRIPTION, FALLBACK_TAGS, PhotoAnalysis
from portfolio_api.services.storage import PortfolioStorage

router = APIRouter(route_class=AdminGuardRoute)


@router.get("", response_model=List[PhotoSchema])
def get_photos(storage: PortfolioStorage = Depends(get_storage)):
    """
    List every photo in storage order
    """
    try:
        return storage.get_all_photos()
    except Exception as e:
        logger.exception(f"Error retrieving photos: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch photos"
        )


@router.get("/category/{category}", response_model=List[PhotoSchema])
def get_photos_by_category(category: str, storage: PortfolioStorage = Depends(get_storage)):
    """
    List the photos of one category (exact, case-sensitive match)
    """
    try:
        return storage.get_photos_by_category(category)
    except Exception as e:
        logger.exception(f"Error retrieving photos for category {category}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch photos by category"
        )


@router.get("/{photo_id}", response_model=PhotoSchema)
def get_photo(photo_id: int, storage: PortfolioStorage = Depends(get_storage)):
    """
    Get a specific photo by ID
    """
    try:
        return storage.get_photo_by_id(photo_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Photo not found"
        )
    except Exception as e:
        logger.exception(f"Error retrieving photo {photo_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch photo"
        )


@router.post(
    "",
    response_model=PhotoSchema,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def upload_photo(
    photo_in: PhotoCreate,
    storage: PortfolioStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
    analyze: Callable[[str], PhotoAnalysis] = Depends(get_image_analyzer),
):
    """
    Upload a new photo. The image arrives inline as a base64 data URL and
    is analyzed before it is stored.
    """
    if len(photo_in.image_url) > settings.MAX_IMAGE_DATA_LENGTH:
        logger.warning(f"Rejected upload of {len(photo_in.image_url)} characters of image data")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                "Image file size too large. Please upload a smaller image "
                f"(max {settings.MAX_IMAGE_DATA_LENGTH // (1024 * 1024)}MB encoded)"
            )
        )

    try:
        analysis = analyze(photo_in.image_url)
    except Exception as e:
        logger.exception(f"Image analysis failed, using fallback: {str(e)}")
        analysis = PhotoAnalysis(FALLBACK_DESCRIPTION, list(FALLBACK_TAGS), {})

    photo_data = photo_in.model_dump(exclude_unset=True)
    # EXIF values only fill fields the uploader left empty
    for field, value in analysis.camera_metadata.items():
        if photo_data.get(field) is None:
            photo_data[field] = value
    photo_data["ai_description"] = analysis.description
    photo_data["tags"] = analysis.suggested_tags

    try:
        return storage.add_photo(photo_data)
    except Exception as e:
        logger.exception(f"Photo upload error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload photo"
        )


@router.patch("/{photo_id}", response_model=PhotoSchema, dependencies=[Depends(require_admin)])
def update_photo(
    photo_id: int,
    photo_in: PhotoUpdate,
    storage: PortfolioStorage = Depends(get_storage),
):
    """
    Update some fields of a photo
    """
    try:
        return storage.update_photo(photo_id, photo_in.model_dump(exclude_unset=True))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Photo not found"
        )
    except Exception as e:
        logger.exception(f"Photo update error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update photo"
        )


@router.delete(
    "/{photo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_admin)],
)
def delete_photo(photo_id: int, storage: PortfolioStorage = Depends(get_storage)):
    """
    Delete a photo. Deleting an unknown id is not an error.
    """
    try:
        storage.delete_photo(photo_id)
    except Exception as e:
        logger.exception(f"Photo deletion error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete photo"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
