"""
Source image services

Resolves the image the editor is working on into a decoded bitmap, and turns
user uploads into inline images.

Responsibilities:
- Inline (data URI) and remote (http/https) sources
- Decoding at native resolution, off the event loop
- Validation of uploaded files
"""

import asyncio
from dataclasses import dataclass, field
from io import BytesIO
from typing import Optional

import requests
from PIL import Image, ImageOps

from neonize.errors import ImageLoadError
from neonize.utils import (decode_data_uri, get_image_bytes_from_url,
                           is_data_uri, is_remote_url, to_data_uri)


@dataclass(frozen=True)
class SourceImage:
    """
    Immutable reference to the editor's image: either a remote ``url`` or
    inline ``data`` with its ``mime_type``.
    """

    url: Optional[str] = None
    data: Optional[bytes] = field(default=None, repr=False)
    mime_type: Optional[str] = None

    def __post_init__(self):
        if (self.url is None) == (self.data is None):
            raise ValueError("SourceImage needs exactly one of url or data")
        if self.data is not None and not self.mime_type:
            raise ValueError("Inline SourceImage needs a mime_type")

    @classmethod
    def from_uri(cls, uri: str) -> "SourceImage":
        uri = uri.strip()
        if is_remote_url(uri):
            return cls(url=uri)
        if is_data_uri(uri):
            try:
                mime_type, data = decode_data_uri(uri)
            except ValueError as e:
                raise ImageLoadError(f"Malformed data URI: {e}") from e
            return cls(data=data, mime_type=mime_type)
        raise ImageLoadError("Image must be an http(s) URL or a base64 data URI")

    @property
    def is_remote(self) -> bool:
        return self.url is not None

    def to_uri(self) -> str:
        if self.url is not None:
            return self.url
        return to_data_uri(self.data, self.mime_type)


def _check_mime_type(mime_type: str) -> None:
    # remote servers don't always report a content type; decoding decides then
    if mime_type and not mime_type.startswith("image/"):
        raise ImageLoadError(f"Unsupported MIME type: {mime_type}")


def decode_image(img_bytes: bytes) -> Image.Image:
    """Decode encoded image bytes at their native resolution."""
    try:
        img = Image.open(BytesIO(img_bytes))
        img.load()
        return ImageOps.exif_transpose(img)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"Could not decode image: {e}") from e


def read_source_bytes(source: SourceImage) -> tuple[str, bytes]:
    """Return the MIME type and the encoded bytes of ``source``."""
    if source.is_remote:
        try:
            mime_type, img_bytes = get_image_bytes_from_url(source.url)
        except (requests.exceptions.RequestException, ValueError) as e:
            raise ImageLoadError(f"Could not fetch {source.url}: {e}") from e
    else:
        mime_type, img_bytes = source.mime_type, source.data
    _check_mime_type(mime_type)
    return mime_type, img_bytes


def _load(source: SourceImage) -> Image.Image:
    _, img_bytes = read_source_bytes(source)
    return decode_image(img_bytes)


async def load_source_image(source: SourceImage) -> Image.Image:
    """
    Fetch and decode ``source``. Resolves once, when decoding has finished or
    failed; failures raise ImageLoadError.
    """
    return await asyncio.to_thread(_load, source)


def source_from_upload(filename: str, content_type: str, data: bytes) -> SourceImage:
    content_type = (content_type or "").split(";", 1)[0].strip().lower()
    if not content_type.startswith("image/"):
        raise ImageLoadError(f"{filename or 'upload'} is not an image ({content_type or 'unknown type'})")
    if not data:
        raise ImageLoadError(f"{filename or 'upload'} is empty")
    decode_image(data)
    return SourceImage(data=data, mime_type=content_type)
