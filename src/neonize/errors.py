"""
Domain errors raised by the editor, the export pipeline and the AI flows.

Routers translate them into HTTP responses; nothing here is fatal to the
running service.
"""


class NeonizeError(Exception):
    """Base class for every error the service raises on purpose."""


class InvalidFilterName(NeonizeError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown filter: {self.name!r}"


class ImageLoadError(NeonizeError):
    """The source image could not be fetched or decoded."""


class EncodeError(NeonizeError):
    """The composited surface could not be encoded to a file."""


class GenerationError(NeonizeError):
    """The generative model call failed (network, quota or refusal)."""
