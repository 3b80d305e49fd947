# tests/utils.py
import base64
import io

from PIL import Image as PILImage

ADMIN_PASSWORD = "correct horse battery staple"


def make_data_url(width=4, height=3, mode="RGB", fmt="PNG", exif=None) -> str:
    """Encode a freshly drawn image as a base64 data URL"""
    buffer = io.BytesIO()
    img = PILImage.new(mode, (width, height))
    if exif is not None:
        img.save(buffer, format=fmt, exif=exif)
    else:
        img.save(buffer, format=fmt)
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/{fmt.lower()};base64,{encoded}"
