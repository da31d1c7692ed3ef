from fastapi import APIRouter, HTTPException

from neonize import deps
from neonize.errors import (EncodeError, GenerationError, ImageLoadError,
                            InvalidFilterName)
from neonize.filters import FilterStateManager
from neonize.routers.editor import download_response
from neonize.schemas import (ApplyBokehEffectInput, ApplyBokehEffectOutput,
                             ExportBody, GenerateSeoTagsInput,
                             GenerateWallpaperInput, GenerateWallpaperOutput,
                             SuggestWallpaperIdeaInput,
                             SuggestWallpaperIdeaResponse)
from neonize.services.export import export_wallpaper
from neonize.services.generation import (apply_bokeh_effect,
                                         generate_seo_tags, generate_wallpaper,
                                         split_tags, suggest_wallpaper_idea)
from neonize.services.images import SourceImage

router = APIRouter()


@router.post("/export")
async def export_image(req: ExportBody):
    """Render ``imageUri`` with the given filters and return the PNG download."""
    manager = FilterStateManager()
    try:
        for name, value in req.filters.items():
            manager.set(name, value)
        source = SourceImage.from_uri(req.imageUri)
        artifact = await export_wallpaper(source, manager.current_state())
    except (InvalidFilterName, ValueError) as e:
        print(f"Rejected export filters: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e
    except ImageLoadError as e:
        print(f"Error loading image for export: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    except EncodeError as e:
        print(f"Error encoding export: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return download_response(artifact)


@router.post("/ai/generate")
async def generate(req: GenerateWallpaperInput) -> GenerateWallpaperOutput:
    """Generate a wallpaper and make it the editor's image."""
    try:
        result = await generate_wallpaper(req)
        source = SourceImage.from_uri(result.imageUrl)
    except (GenerationError, ImageLoadError) as e:
        print(f"Error generating wallpaper: {e}")
        raise HTTPException(
            status_code=502, detail="Failed to generate wallpaper. Please try again."
        ) from e
    deps.editor_session.replace_source(source)
    return result


@router.post("/ai/seo-tags")
async def seo_tags(req: GenerateSeoTagsInput) -> list[str]:
    try:
        return await generate_seo_tags(req)
    except GenerationError as e:
        print(f"Error generating SEO tags: {e}")
        raise HTTPException(
            status_code=502, detail="Failed to generate SEO tags. Please try again."
        ) from e


@router.post("/ai/suggest")
async def suggest(req: SuggestWallpaperIdeaInput) -> SuggestWallpaperIdeaResponse:
    try:
        result = await suggest_wallpaper_idea(req)
    except GenerationError as e:
        print(f"Error suggesting wallpaper ideas: {e}")
        raise HTTPException(
            status_code=502, detail="Failed to suggest wallpaper ideas. Please try again."
        ) from e
    return SuggestWallpaperIdeaResponse(
        refinedPrompt=result.refinedPrompt,
        seoTags=result.seoTags,
        tags=split_tags(result.seoTags),
    )


@router.post("/ai/bokeh")
async def bokeh(req: ApplyBokehEffectInput) -> ApplyBokehEffectOutput:
    try:
        return await apply_bokeh_effect(req)
    except ImageLoadError as e:
        print(f"Error loading image for bokeh effect: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    except GenerationError as e:
        print(f"Error applying bokeh effect: {e}")
        raise HTTPException(
            status_code=502, detail="Failed to apply the bokeh effect. Please try again."
        ) from e


def get_router():
    return router
