import logging
from io import BytesIO
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError

from asciify.errors import DecodeError, FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch(url: str, timeout: float) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(url, f"could not download image ({e})") from e
    if response.status_code != requests.codes.ok:
        raise FetchError(url, f"download failed with status code {response.status_code}")
    return response.content


def _read(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FetchError(path, f"could not open file ({e.strerror or e})") from e


def decode(data: bytes, source: str) -> Image.Image:
    """Decode image bytes, picking the format from the content rather than the name."""
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise DecodeError(source, "could not decode image") from e
    logger.info("Loaded image %s (format %s, %dx%d)", source, image.format, image.width, image.height)
    return image


def load_image(source: str, timeout: float = DEFAULT_TIMEOUT) -> Image.Image:
    """Load an image from a local path or an http(s) URL. A single attempt is made."""
    if is_url(source):
        data = _fetch(source, timeout)
    else:
        data = _read(source)
    return decode(data, source)
