"""
Compositing of the editor filters onto a bitmap

Each filter follows the CSS Filter Effects definition of the function with the
same name, so an export looks like the browser preview. Colour filters work on
unpremultiplied RGB in [0, 1] and leave alpha alone; the image is held in one
float buffer for all of them and quantized to 8 bits once. Blur is a Gaussian
whose standard deviation is the filter value in pixels.
"""

from collections.abc import Mapping
from typing import Callable

import numpy as np
from PIL import Image, ImageFilter

from neonize.filters import filter_pipeline

# Rec. 709 luminance weights, as used by the CSS colour matrices
_LUMA = np.array([0.2126, 0.7152, 0.0722], dtype=np.float32)

_SEPIA = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float32,
)

_IDENTITY = np.eye(3, dtype=np.float32)


def _apply_matrix(rgb: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    return rgb @ matrix.T


def saturate_matrix(amount: float) -> np.ndarray:
    # every row is the luminance row pulled towards the identity by `amount`
    luma = np.tile(_LUMA, (3, 1))
    return (luma + (_IDENTITY - luma) * amount).astype(np.float32)


def sepia_matrix(amount: float) -> np.ndarray:
    amount = min(amount, 1.0)
    return (_IDENTITY + (_SEPIA - _IDENTITY) * amount).astype(np.float32)


def brightness(rgb: np.ndarray, amount: float) -> np.ndarray:
    return rgb * np.float32(amount)


def contrast(rgb: np.ndarray, amount: float) -> np.ndarray:
    return (rgb - np.float32(0.5)) * np.float32(amount) + np.float32(0.5)


def saturate(rgb: np.ndarray, amount: float) -> np.ndarray:
    return _apply_matrix(rgb, saturate_matrix(amount))


def sepia(rgb: np.ndarray, amount: float) -> np.ndarray:
    return _apply_matrix(rgb, sepia_matrix(amount))


def grayscale(rgb: np.ndarray, amount: float) -> np.ndarray:
    return _apply_matrix(rgb, saturate_matrix(1.0 - min(amount, 1.0)))


def invert(rgb: np.ndarray, amount: float) -> np.ndarray:
    amount = np.float32(min(amount, 1.0))
    return amount + rgb * (np.float32(1.0) - 2 * amount)


COLOR_FILTERS: dict[str, Callable[[np.ndarray, float], np.ndarray]] = {
    "brightness": brightness,
    "contrast": contrast,
    "saturate": saturate,
    "sepia": sepia,
    "grayscale": grayscale,
    "invert": invert,
}

# values at which a filter leaves the image as it is
_NEUTRAL = {
    "brightness": 100.0,
    "contrast": 100.0,
    "saturate": 100.0,
    "sepia": 0.0,
    "grayscale": 0.0,
    "invert": 0.0,
    "blur": 0.0,
}


def gaussian_blur(image: Image.Image, radius: float) -> Image.Image:
    """Blur an RGBA image, premultiplying alpha so transparent pixels don't bleed colour."""
    if image.getextrema()[3][0] == 255:
        return image.filter(ImageFilter.GaussianBlur(radius))
    premultiplied = image.convert("RGBa").filter(ImageFilter.GaussianBlur(radius))
    return premultiplied.convert("RGBA")


class _FloatBuffer:
    """RGBA pixels as float32 in [0, 1], quantized back to 8 bits on demand."""

    def __init__(self, image: Image.Image):
        self.pixels = np.asarray(image, dtype=np.float32) / np.float32(255.0)

    def apply(self, fn, amount: float) -> None:
        rgb = fn(self.pixels[..., :3], amount)
        self.pixels[..., :3] = np.clip(rgb, 0.0, 1.0)

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.rint(self.pixels * 255.0).astype(np.uint8))


def composite(image: Image.Image, state: Mapping[str, float]) -> Image.Image:
    """
    Draw ``image`` through the filters of ``state`` in pipeline order.

    The result is RGBA and keeps the native size of ``image``.
    """
    result = image.convert("RGBA")
    buffer = None
    for name, value in filter_pipeline(state):
        if value == _NEUTRAL[name]:
            continue
        if name in COLOR_FILTERS:
            if buffer is None:
                buffer = _FloatBuffer(result)
            buffer.apply(COLOR_FILTERS[name], value / 100.0)
        elif name == "blur":
            if buffer is not None:
                result, buffer = buffer.to_image(), None
            result = gaussian_blur(result, value)
        else:
            raise ValueError(f"No compositing step for filter {name!r}")
    if buffer is not None:
        result = buffer.to_image()
    return result
