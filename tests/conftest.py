import base64
from io import BytesIO

import pytest
from PIL import Image

from neonize import deps
from neonize.editor import EditorSession, EditorState


def png_bytes(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def png_data_uri(image: Image.Image) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes(image)).decode("ascii")


class FakeGenaiClient:
    """Stands in for GeminiClient; records every call."""

    def __init__(self, image_url=None, json_result=None, error=None):
        self.image_url = image_url
        self.json_result = json_result
        self.error = error
        self.calls = []

    async def generate_image(self, contents):
        self.calls.append(("image", contents))
        if self.error:
            raise self.error
        return self.image_url

    async def generate_json(self, prompt, schema):
        self.calls.append(("json", prompt, schema))
        if self.error:
            raise self.error
        return self.json_result


@pytest.fixture
def red_pixel():
    return Image.new("RGB", (1, 1), (255, 0, 0))


@pytest.fixture
def red_pixel_uri(red_pixel):
    return png_data_uri(red_pixel)


@pytest.fixture
def fake_genai(monkeypatch):
    client = FakeGenaiClient()
    monkeypatch.setattr(deps, "genai_client", client)
    return client


@pytest.fixture
def session(monkeypatch):
    session = EditorSession(EditorState())
    monkeypatch.setattr(deps, "editor_session", session)
    return session
