import base64
import binascii

import requests

from neonize.config import FETCH_TIMEOUT


def is_remote_url(data: str) -> bool:
    """
    Check if the provided data is an http(s) URL
    """
    return data.startswith(("http://", "https://"))


def is_data_uri(data: str) -> bool:
    return data.startswith("data:")


def remove_b64_header(data: str) -> str:
    """
    Remove the header from a base64 data URI and fix its padding.
    Anything that is not a data URI is returned untouched.
    """
    if is_data_uri(data):
        img_b64 = data.split(",", 1)[-1]
        img_b64 = "".join(img_b64.split())
        padding = len(img_b64) % 4
        if padding:
            img_b64 += "=" * (4 - padding)
        return img_b64
    return data


def get_data_uri_mime_type(data: str) -> str:
    """
    Return the MIME type declared by a data URI, e.g. ``image/png``.
    """
    if not is_data_uri(data) or "," not in data:
        raise ValueError("Not a data URI")
    header = data[len("data:"):].split(",", 1)[0]
    params = header.split(";")
    if "base64" not in params[1:]:
        raise ValueError("Only base64 data URIs are supported")
    mime_type = params[0].strip().lower()
    if not mime_type:
        raise ValueError("Data URI has no MIME type")
    return mime_type


def decode_data_uri(data: str) -> tuple[str, bytes]:
    """
    Split a ``data:<mime>;base64,<payload>`` URI into its MIME type and bytes.
    """
    mime_type = get_data_uri_mime_type(data)
    try:
        payload = base64.b64decode(remove_b64_header(data), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return mime_type, payload


def to_data_uri(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def get_image_bytes_from_url(url: str) -> tuple[str, bytes]:
    """
    Fetch image bytes from a URL. Returns the reported content type and the body.
    """
    resp = requests.get(url, timeout=FETCH_TIMEOUT)
    if resp.status_code != 200:
        raise ValueError(f"Failed to fetch image from {url}: {resp.status_code}")
    content_type = resp.headers.get("Content-Type", "")
    return content_type.split(";", 1)[0].strip().lower(), resp.content
