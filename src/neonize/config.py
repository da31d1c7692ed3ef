"""Configuration values for the wallpaper service."""

import os

from dotenv import load_dotenv

load_dotenv()

GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
IMAGE_MODEL: str = os.environ.get(
    "NEONIZE_IMAGE_MODEL", "gemini-2.0-flash-preview-image-generation"
)
TEXT_MODEL: str = os.environ.get("NEONIZE_TEXT_MODEL", "gemini-2.0-flash")

API_PREFIX: str = "/neonize/api"
CORS_ORIGINS: list[str] = ["http://localhost:9002", "*"]

EXPORT_FILENAME: str = "neonize-wallpaper.png"
EXPORT_MIME_TYPE: str = "image/png"
FETCH_TIMEOUT: int = 10  # seconds
PLACEHOLDER_IMAGE_URL: str = "https://placehold.co/375x812.png"

# (src, hint) of the wallpapers offered in the gallery
GALLERY_ITEMS: list[tuple[str, str]] = [
    ("https://placehold.co/375x812.png", "cyberpunk city"),
    ("https://placehold.co/375x812.png", "synthwave sunset"),
    ("https://placehold.co/375x812.png", "neon jungle"),
    ("https://placehold.co/375x812.png", "glowing forest"),
    ("https://placehold.co/375x812.png", "abstract shapes"),
    ("https://placehold.co/375x812.png", "retro car"),
    ("https://placehold.co/375x812.png", "space nebula"),
    ("https://placehold.co/375x812.png", "futuristic warrior"),
]
