from fastapi import APIRouter, HTTPException

from neonize import deps
from neonize.config import GALLERY_ITEMS
from neonize.routers.editor import source_response
from neonize.schemas import GalleryItem, SourceResponse
from neonize.services.images import SourceImage

router = APIRouter(prefix="/gallery")


@router.get("")
async def list_gallery() -> list[GalleryItem]:
    return [
        GalleryItem(index=index, src=src, hint=hint)
        for index, (src, hint) in enumerate(GALLERY_ITEMS)
    ]


@router.post("/{index}/select")
async def select_gallery_item(index: int) -> SourceResponse:
    """Make a gallery wallpaper the editor's image. Filters go back to their defaults."""
    if not 0 <= index < len(GALLERY_ITEMS):
        print(f"Rejected gallery selection: no item {index}")
        raise HTTPException(status_code=404, detail=f"No gallery item {index}")
    src, _ = GALLERY_ITEMS[index]
    deps.editor_session.replace_source(SourceImage.from_uri(src))
    return source_response()


def get_router():
    return router
