"""
Image loading helpers shared by the soil scanner and pest detector.
"""
import base64
import binascii
import io
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from ..security.exceptions import FileValidationError

ImageSource = Union[str, Path, bytes, Image.Image]

DATA_URL_PREFIX = "data:"


def load_image(source: ImageSource) -> Image.Image:
    """
    Open an image as RGB.
    
    :param source: PIL image, raw bytes, a data URL, or a file path
    :return: RGB PIL image
    :raises FileValidationError: If the source cannot be decoded as an image
    """
    if isinstance(source, Image.Image):
        return source.convert("RGB")
    
    if isinstance(source, str) and source.startswith(DATA_URL_PREFIX):
        source = decode_data_url(source)
    
    try:
        if isinstance(source, bytes):
            with Image.open(io.BytesIO(source)) as img:
                return img.convert("RGB")
        with Image.open(source) as img:
            return img.convert("RGB")
    except (UnidentifiedImageError, OSError) as e:
        raise FileValidationError(f"Could not read image: {str(e)}")


def decode_data_url(data_url: str) -> bytes:
    """Return the bytes of a base64 data URL."""
    try:
        header, encoded = data_url.split(",", 1)
    except ValueError:
        raise FileValidationError("Malformed data URL")
    if ";base64" not in header:
        raise FileValidationError("Only base64 data URLs are supported")
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        raise FileValidationError("Data URL is not valid base64")


def to_data_url(data: bytes, mime_type: str = "image/jpeg") -> str:
    """Encode raw image bytes as a data URL for embedding in a chat message."""
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"
