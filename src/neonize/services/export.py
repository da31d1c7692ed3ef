"""
Wallpaper export

Renders the editor's current image through its filters at full resolution and
encodes the result as the PNG the user downloads.
"""

import asyncio
from dataclasses import dataclass, field
from io import BytesIO
from typing import Optional

from PIL import Image

from neonize.config import EXPORT_FILENAME, EXPORT_MIME_TYPE
from neonize.errors import EncodeError
from neonize.filters import FilterState
from neonize.services.compositing import composite
from neonize.services.images import SourceImage, load_source_image


@dataclass(frozen=True)
class ExportRequest:
    source: SourceImage
    filters: FilterState


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    mime_type: str
    data: bytes = field(repr=False)
    width: int
    height: int


def encode_png(image: Image.Image) -> bytes:
    if image.width == 0 or image.height == 0:
        raise EncodeError(f"Cannot encode a {image.width}x{image.height} image")
    output_buffer = BytesIO()
    try:
        image.save(output_buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"Error encoding PNG: {e}") from e
    return output_buffer.getvalue()


def render_export(image: Image.Image, filters: FilterState) -> ExportArtifact:
    """Composite ``image`` with ``filters`` and encode it. Output size is the image's own."""
    if image.width == 0 or image.height == 0:
        raise EncodeError(f"Cannot encode a {image.width}x{image.height} image")
    surface = composite(image, filters)
    return ExportArtifact(
        filename=EXPORT_FILENAME,
        mime_type=EXPORT_MIME_TYPE,
        data=encode_png(surface),
        width=surface.width,
        height=surface.height,
    )


async def export_wallpaper(
    source: Optional[SourceImage], filters: FilterState
) -> Optional[ExportArtifact]:
    """
    Export ``source`` with ``filters`` applied.

    Returns None when there is no source image. Raises ImageLoadError when the
    source can't be loaded and EncodeError when the result can't be encoded;
    in both cases nothing is produced.
    """
    if source is None:
        return None
    request = ExportRequest(source=source, filters=filters)
    image = await load_source_image(request.source)
    return await asyncio.to_thread(render_export, image, request.filters)
