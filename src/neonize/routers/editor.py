from fastapi import APIRouter, File, HTTPException, Response, UploadFile

from neonize import deps
from neonize.errors import EncodeError, ImageLoadError, InvalidFilterName
from neonize.filters import FilterState, css_filter
from neonize.schemas import (FilterStateResponse, FilterValue, SourceRequest,
                             SourceResponse)
from neonize.services.export import ExportArtifact, export_wallpaper
from neonize.services.images import SourceImage, source_from_upload

router = APIRouter(prefix="/editor")


def filter_state_response(state: FilterState) -> FilterStateResponse:
    return FilterStateResponse(filters=state.as_dict(), css=css_filter(state))


def source_response() -> SourceResponse:
    state = deps.editor_session.state
    return SourceResponse(
        imageUri=state.source.to_uri() if state.source is not None else None,
        filters=filter_state_response(state.filters),
    )


def download_response(artifact: ExportArtifact) -> Response:
    return Response(
        content=artifact.data,
        media_type=artifact.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@router.get("/filters")
async def get_filters() -> FilterStateResponse:
    return filter_state_response(deps.editor_session.filters.current_state())


@router.put("/filters/{name}")
async def set_filter(name: str, req: FilterValue) -> FilterStateResponse:
    try:
        state = deps.editor_session.filters.set(name, req.value)
    except InvalidFilterName as e:
        print(f"Rejected filter update: {e}")
        raise HTTPException(status_code=404, detail=str(e)) from e
    return filter_state_response(state)


@router.post("/filters/reset")
async def reset_filters() -> FilterStateResponse:
    return filter_state_response(deps.editor_session.filters.reset())


@router.get("/source")
async def get_source() -> SourceResponse:
    return source_response()


@router.post("/source")
async def set_source(req: SourceRequest) -> SourceResponse:
    try:
        source = SourceImage.from_uri(req.imageUri)
    except ImageLoadError as e:
        print(f"Rejected source image: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    deps.editor_session.replace_source(source)
    return source_response()


@router.post("/upload")
async def upload_image(file: UploadFile = File(...)) -> SourceResponse:
    """Use an uploaded image file as the new wallpaper."""
    try:
        data = await file.read()
        source = source_from_upload(file.filename, file.content_type, data)
    except ImageLoadError as e:
        print(f"Rejected upload {file.filename}: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    deps.editor_session.replace_source(source)
    return source_response()


@router.get("/export")
async def export_current():
    """Download the current wallpaper with its filters applied, at full resolution."""
    state = deps.editor_session.state
    try:
        artifact = await export_wallpaper(state.source, state.filters)
    except ImageLoadError as e:
        print(f"Error loading image for export: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    except EncodeError as e:
        print(f"Error encoding export: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    if artifact is None:
        return Response(status_code=204)
    return download_response(artifact)


def get_router():
    return router
