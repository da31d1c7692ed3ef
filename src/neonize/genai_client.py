"""
Client for the generative model backend (Gemini).

This module holds all the communication with the hosted model API: image
generation and structured (JSON) text generation.

Responsibilities:
- Create the google-genai client from the configured API key
- Send prompts with the right response modalities / schema
- Turn returned media into data URIs and JSON into Python objects
- Report every failure as a GenerationError
"""

import base64
import json
from typing import Any, Optional

from google import genai
from google.genai import types

from neonize.errors import GenerationError
from neonize.utils import to_data_uri


class GeminiClient:

    def __init__(self, api_key: str, image_model: str, text_model: str):
        self.api_key = api_key
        self.image_model = image_model
        self.text_model = text_model
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise GenerationError("GEMINI_API_KEY is not set")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def _generate(self, model: str, contents, config: types.GenerateContentConfig):
        client = self.client
        try:
            return await client.aio.models.generate_content(
                model=model, contents=contents, config=config
            )
        except Exception as e:
            print(f"Error calling {model}: {e}")
            raise GenerationError(f"Model call failed: {e}") from e

    async def generate_image(self, contents) -> str:
        """Generate an image and return it as a data URI."""
        response = await self._generate(
            self.image_model,
            contents,
            types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
        )
        for candidate in response.candidates or []:
            if candidate.content is None:
                continue
            for part in candidate.content.parts or []:
                if part.inline_data and part.inline_data.data:
                    data = part.inline_data.data
                    if isinstance(data, str):
                        data = base64.b64decode(data)
                    return to_data_uri(data, part.inline_data.mime_type or "image/png")
        raise GenerationError("Image generation failed.")

    async def generate_json(self, prompt: str, schema: Any) -> Any:
        """Generate a JSON answer shaped by ``schema`` and return it parsed."""
        response = await self._generate(
            self.text_model,
            prompt,
            types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        if not response.text:
            raise GenerationError("The model returned an empty answer.")
        try:
            return json.loads(response.text)
        except json.JSONDecodeError as e:
            raise GenerationError(f"The model returned invalid JSON: {e}") from e
