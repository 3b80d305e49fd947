# portfolio_api/services/image_analysis.py
"""
Best-effort enrichment of uploaded photos.

The upload carries the image inline as a base64 data URL. Pillow decodes it
to describe the picture (dimensions, orientation, transparency) and to read
the camera settings from EXIF. Nothing here may block an upload: any
failure produces a generic fallback result instead.
"""
import base64
import binascii
import io
from fractions import Fraction
from typing import Any, Dict, List, NamedTuple, Optional

from PIL import Image as PILImage, UnidentifiedImageError

from portfolio_api.core.logging import logger

FALLBACK_DESCRIPTION = "An uploaded image"
FALLBACK_TAGS = ["photo"]

# EXIF tag ids
EXIF_IFD = 0x8769
TAG_MAKE = 0x010F
TAG_MODEL = 0x0110
TAG_ISO = 0x8827
TAG_F_NUMBER = 0x829D
TAG_LENS_MODEL = 0xA434


class PhotoAnalysis(NamedTuple):
    description: str
    suggested_tags: List[str]
    camera_metadata: Dict[str, Any]


def decode_image_data(image_data: str) -> bytes:
    """Decode a data URL (or bare base64 text) into raw bytes."""
    _, sep, payload = image_data.partition(",")
    return base64.b64decode(payload if sep else image_data, validate=True)


def _to_float(value: Any) -> Optional[float]:
    # EXIF rationals arrive as IFDRational, Fraction or (num, den) tuples
    if isinstance(value, tuple) and len(value) == 2:
        return float(value[0]) / float(value[1]) if value[1] else None
    try:
        return float(Fraction(value)) if isinstance(value, Fraction) else float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return None


def extract_camera_metadata(img: PILImage.Image) -> Dict[str, Any]:
    """
    Read iso, aperture, camera and lens from the image's EXIF block.
    Only keys that are present in the image are returned.
    """
    exif = img.getexif()
    details = exif.get_ifd(EXIF_IFD)
    metadata: Dict[str, Any] = {}

    make = str(exif.get(TAG_MAKE, "")).strip().strip("\x00")
    model = str(exif.get(TAG_MODEL, "")).strip().strip("\x00")
    if model:
        metadata["camera"] = model if not make or model.startswith(make) else f"{make} {model}"
    elif make:
        metadata["camera"] = make

    iso = details.get(TAG_ISO)
    if isinstance(iso, (tuple, list)):
        iso = iso[0] if iso else None
    if iso is not None:
        try:
            metadata["iso"] = int(iso)
        except (TypeError, ValueError):
            pass

    f_number = _to_float(details.get(TAG_F_NUMBER))
    if f_number:
        metadata["aperture"] = f"f/{f_number:g}"

    lens = str(details.get(TAG_LENS_MODEL, "")).strip().strip("\x00")
    if lens:
        metadata["lens"] = lens

    return metadata


def analyze_photo(image_data: str) -> PhotoAnalysis:
    """
    Describe an uploaded image and suggest tags for it.
    Never raises; undecodable input yields the fallback analysis.
    """
    try:
        img = PILImage.open(io.BytesIO(decode_image_data(image_data)))
        width, height = img.size

        description = f"An image with dimensions {width}x{height}"
        suggested_tags = [
            img.format.lower() if img.format else "image",
            "landscape" if width > height else "portrait",
            "transparent" if img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info else "opaque",
        ]

        return PhotoAnalysis(description, suggested_tags, extract_camera_metadata(img))
    except (UnidentifiedImageError, binascii.Error, ValueError, OSError) as e:
        logger.error(f"Image analysis error: {str(e)}")
    except Exception as e:
        logger.exception(f"Unexpected image analysis error: {str(e)}")

    return PhotoAnalysis(FALLBACK_DESCRIPTION, list(FALLBACK_TAGS), {})
