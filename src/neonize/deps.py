"""
Shared instances injected across the application

Manages:
- The generative model client
- The editor session of the (single) local user

Keeps one place for shared dependencies and avoids repeated initialization.
Routers and services read them as ``deps.<name>`` at call time.
"""

from neonize.config import GEMINI_API_KEY, IMAGE_MODEL, TEXT_MODEL
from neonize.editor import EditorSession
from neonize.genai_client import GeminiClient

genai_client = GeminiClient(
    api_key=GEMINI_API_KEY,
    image_model=IMAGE_MODEL,
    text_model=TEXT_MODEL,
)

editor_session = EditorSession()
