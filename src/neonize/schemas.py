"""
Data models and validation

Defines the Pydantic schemas used to:
- Validate the input of the endpoints and of the AI flows
- Document the API automatically with OpenAPI
"""

from typing import Optional

from pydantic import BaseModel, Field


class FilterValue(BaseModel):
    value: float = Field(allow_inf_nan=False)


class FilterStateResponse(BaseModel):
    filters: dict[str, float]
    css: str


class SourceRequest(BaseModel):
    imageUri: str


class SourceResponse(BaseModel):
    imageUri: Optional[str]
    filters: FilterStateResponse


class ExportBody(BaseModel):
    imageUri: str
    filters: dict[str, float] = {}


class GenerateWallpaperInput(BaseModel):
    prompt: str = Field(min_length=10, description="A detailed description of the wallpaper to generate.")
    style: Optional[str] = None


class GenerateWallpaperOutput(BaseModel):
    imageUrl: str


class GenerateSeoTagsInput(BaseModel):
    wallpaperDescription: str = Field(
        min_length=10, description="A detailed description of the wallpaper content."
    )


class SuggestWallpaperIdeaInput(BaseModel):
    prompt: str = Field(min_length=10, description='A description of the desired wallpaper, e.g., "a city at night".')


class SuggestWallpaperIdeaOutput(BaseModel):
    refinedPrompt: str
    seoTags: str


class SuggestWallpaperIdeaResponse(SuggestWallpaperIdeaOutput):
    tags: list[str]


class ApplyBokehEffectInput(BaseModel):
    imageUri: str


class ApplyBokehEffectOutput(BaseModel):
    imageUrl: str


class GalleryItem(BaseModel):
    index: int
    src: str
    hint: str
