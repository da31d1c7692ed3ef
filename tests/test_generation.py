import asyncio
from types import SimpleNamespace

import pytest

from neonize.errors import GenerationError
from neonize.genai_client import GeminiClient
from neonize.schemas import (ApplyBokehEffectInput, GenerateSeoTagsInput,
                             GenerateWallpaperInput, SuggestWallpaperIdeaInput,
                             SuggestWallpaperIdeaOutput)
from neonize.services.generation import (apply_bokeh_effect,
                                         build_wallpaper_prompt,
                                         generate_seo_tags, generate_wallpaper,
                                         split_tags, suggest_wallpaper_idea)


def test_build_wallpaper_prompt():
    prompt = build_wallpaper_prompt(GenerateWallpaperInput(prompt="a wolf howling at a neon moon"))
    assert prompt.startswith("A dark-themed, neon-style mobile wallpaper with an aspect ratio of 9:16.")
    assert prompt.endswith("Prompt: a wolf howling at a neon moon")

    styled = build_wallpaper_prompt(
        GenerateWallpaperInput(prompt="a wolf howling at a neon moon", style="synthwave")
    )
    assert styled.endswith("Style: synthwave")


def test_generate_wallpaper(fake_genai):
    fake_genai.image_url = "data:image/png;base64,AAAA"
    result = asyncio.run(generate_wallpaper(GenerateWallpaperInput(prompt="a neon city at night")))
    assert result.imageUrl == "data:image/png;base64,AAAA"
    kind, contents = fake_genai.calls[0]
    assert kind == "image"
    assert "a neon city at night" in contents


def test_generate_wallpaper_failure(fake_genai):
    fake_genai.error = GenerationError("quota")
    with pytest.raises(GenerationError):
        asyncio.run(generate_wallpaper(GenerateWallpaperInput(prompt="a neon city at night")))


def test_generate_seo_tags(fake_genai):
    fake_genai.json_result = [" neon ", "synthwave", "", "wallpaper 4k"]
    tags = asyncio.run(
        generate_seo_tags(GenerateSeoTagsInput(wallpaperDescription="purple synthwave sunset"))
    )
    assert tags == ["neon", "synthwave", "wallpaper 4k"]
    _, prompt, _ = fake_genai.calls[0]
    assert "Wallpaper Description: purple synthwave sunset" in prompt


def test_generate_seo_tags_rejects_unexpected_answer(fake_genai):
    fake_genai.json_result = {"tags": "neon"}
    with pytest.raises(GenerationError):
        asyncio.run(
            generate_seo_tags(GenerateSeoTagsInput(wallpaperDescription="purple synthwave sunset"))
        )


def test_suggest_wallpaper_idea(fake_genai):
    fake_genai.json_result = {
        "refinedPrompt": "A cyberpunk wolf under a neon moon, synthwave",
        "seoTags": "cyberpunk, wolf, neon moon",
    }
    result = asyncio.run(suggest_wallpaper_idea(SuggestWallpaperIdeaInput(prompt="a wolf and a moon")))
    assert result.refinedPrompt == "A cyberpunk wolf under a neon moon, synthwave"
    assert split_tags(result.seoTags) == ["cyberpunk", "wolf", "neon moon"]
    assert fake_genai.calls[0][2] is SuggestWallpaperIdeaOutput


def test_suggest_wallpaper_idea_rejects_missing_fields(fake_genai):
    fake_genai.json_result = {"refinedPrompt": "only half an answer"}
    with pytest.raises(GenerationError):
        asyncio.run(suggest_wallpaper_idea(SuggestWallpaperIdeaInput(prompt="a wolf and a moon")))


def test_apply_bokeh_effect(fake_genai, red_pixel_uri):
    fake_genai.image_url = "data:image/png;base64,BBBB"
    result = asyncio.run(apply_bokeh_effect(ApplyBokehEffectInput(imageUri=red_pixel_uri)))
    assert result.imageUrl == "data:image/png;base64,BBBB"
    _, contents = fake_genai.calls[0]
    assert contents[0].inline_data.mime_type == "image/png"
    assert "bokeh" in contents[1].text


def test_split_tags():
    assert split_tags("neon, city ,, night ") == ["neon", "city", "night"]
    assert split_tags("") == []


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    async def generate_content(self, model, contents, config):
        self.requests.append((model, contents, config))
        if self.error:
            raise self.error
        return self.response


def client_with(models):
    client = GeminiClient(api_key="test-key", image_model="image-model", text_model="text-model")
    client._client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return client


def image_response(*parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


def test_client_returns_first_inline_image():
    models = FakeModels(
        image_response(
            SimpleNamespace(inline_data=None, text="Here is your wallpaper"),
            SimpleNamespace(inline_data=SimpleNamespace(data=b"\x89PNG", mime_type="image/png")),
        )
    )
    image_url = asyncio.run(client_with(models).generate_image("a prompt"))
    assert image_url == "data:image/png;base64,iVBORw=="
    model, _, config = models.requests[0]
    assert model == "image-model"
    assert config.response_modalities == ["TEXT", "IMAGE"]


def test_client_without_image_fails():
    models = FakeModels(image_response(SimpleNamespace(inline_data=None, text="no image")))
    with pytest.raises(GenerationError):
        asyncio.run(client_with(models).generate_image("a prompt"))


def test_client_wraps_sdk_errors():
    models = FakeModels(error=RuntimeError("429 RESOURCE_EXHAUSTED"))
    with pytest.raises(GenerationError):
        asyncio.run(client_with(models).generate_image("a prompt"))


def test_client_parses_json():
    models = FakeModels(SimpleNamespace(text='["neon", "city"]'))
    assert asyncio.run(client_with(models).generate_json("a prompt", list[str])) == ["neon", "city"]
    model, _, config = models.requests[0]
    assert model == "text-model"
    assert config.response_mime_type == "application/json"


def test_client_rejects_invalid_json():
    models = FakeModels(SimpleNamespace(text="neon, city"))
    with pytest.raises(GenerationError):
        asyncio.run(client_with(models).generate_json("a prompt", list[str]))


def test_client_needs_api_key():
    client = GeminiClient(api_key="", image_model="image-model", text_model="text-model")
    with pytest.raises(GenerationError):
        asyncio.run(client.generate_image("a prompt"))
