"""
AI wallpaper flows

Each flow is a single prompt-template call to the generative model, with its
input and output validated by the schemas in neonize.schemas.

Responsibilities:
- Build the prompt for each flow
- Validate what the model returns before handing it to the API layer
- Report failures as GenerationError (no retries)
"""

import asyncio

from google.genai import types
from pydantic import TypeAdapter, ValidationError

from neonize import deps
from neonize.errors import GenerationError
from neonize.schemas import (ApplyBokehEffectInput, ApplyBokehEffectOutput,
                             GenerateSeoTagsInput, GenerateWallpaperInput,
                             GenerateWallpaperOutput, SuggestWallpaperIdeaInput,
                             SuggestWallpaperIdeaOutput)
from neonize.services.images import SourceImage, read_source_bytes

WALLPAPER_PROMPT = (
    "A dark-themed, neon-style mobile wallpaper with an aspect ratio of 9:16. "
    "Prompt: {prompt}"
)

SEO_TAGS_PROMPT = """You are an SEO expert specializing in generating tags for wallpapers.

Based on the description of the wallpaper, generate a list of SEO tags that are relevant to the content and current trends.
Consider trending art styles, color schemes, and themes when generating the tags.
The tags should be optimized for discoverability and promotion.

Wallpaper Description: {wallpaperDescription}

SEO Tags:"""

SUGGEST_IDEA_PROMPT = """You are a creative assistant that helps users generate wallpaper ideas for their phones.

The user will provide a prompt describing the wallpaper they want. You will refine this prompt to include trending art styles from ArtStation, if relevant, to improve the visual appeal of the wallpaper.

Trending art styles on ArtStation include: Photorealistic, Digital Art, Anime, Cartoon, Fantasy, Sci-Fi, Cyberpunk, Synthwave, Vaporwave, Low Poly, Isometric, Retro.

Original Prompt: {prompt}

Based on the original prompt, generate a refined prompt that includes trending art styles to enhance the wallpaper idea. Also, generate SEO tags for the wallpaper idea, as a single comma-separated string.
"""

BOKEH_PROMPT = (
    "Re-render this image with a blurred background (bokeh effect), keeping the "
    "main subject in sharp focus. Do not change the subject or the overall composition."
)

_TAGS = TypeAdapter(list[str])


def build_wallpaper_prompt(req: GenerateWallpaperInput) -> str:
    prompt = WALLPAPER_PROMPT.format(prompt=req.prompt.strip())
    if req.style and req.style.strip():
        prompt += f" Style: {req.style.strip()}"
    return prompt


def split_tags(tags: str) -> list[str]:
    """Split a comma-separated tag string into trimmed, non-empty tags."""
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


async def generate_wallpaper(req: GenerateWallpaperInput) -> GenerateWallpaperOutput:
    image_url = await deps.genai_client.generate_image(build_wallpaper_prompt(req))
    return GenerateWallpaperOutput(imageUrl=image_url)


async def generate_seo_tags(req: GenerateSeoTagsInput) -> list[str]:
    result = await deps.genai_client.generate_json(
        SEO_TAGS_PROMPT.format(wallpaperDescription=req.wallpaperDescription),
        list[str],
    )
    try:
        tags = _TAGS.validate_python(result)
    except ValidationError as e:
        raise GenerationError(f"Unexpected SEO tags answer: {e}") from e
    return [tag.strip() for tag in tags if tag.strip()]


async def suggest_wallpaper_idea(req: SuggestWallpaperIdeaInput) -> SuggestWallpaperIdeaOutput:
    result = await deps.genai_client.generate_json(
        SUGGEST_IDEA_PROMPT.format(prompt=req.prompt),
        SuggestWallpaperIdeaOutput,
    )
    try:
        return SuggestWallpaperIdeaOutput.model_validate(result)
    except ValidationError as e:
        raise GenerationError(f"Unexpected wallpaper idea answer: {e}") from e


async def apply_bokeh_effect(req: ApplyBokehEffectInput) -> ApplyBokehEffectOutput:
    source = SourceImage.from_uri(req.imageUri)
    mime_type, img_bytes = await asyncio.to_thread(read_source_bytes, source)
    contents = [
        types.Part.from_bytes(data=img_bytes, mime_type=mime_type or "image/png"),
        types.Part.from_text(text=BOKEH_PROMPT),
    ]
    image_url = await deps.genai_client.generate_image(contents)
    return ApplyBokehEffectOutput(imageUrl=image_url)
