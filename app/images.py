"""
Normalization of caller-supplied images into inline data parts.

An image reference may be:
- a remote http(s) URL, fetched and re-encoded from its raw bytes
- a data URL such as ``data:image/jpeg;base64,<payload>``
- a bare base64 payload, assumed to be PNG
"""
import base64
import binascii
from dataclasses import dataclass
from typing import Iterable, List

import requests

from app.errors import ClientError
from app.logger import LOG

DEFAULT_MIME_TYPE = "image/png"


@dataclass(frozen=True)
class InlineImage:
    mime_type: str
    data: bytes

    @property
    def b64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


def is_remote_url(ref: str) -> bool:
    return ref.startswith("http://") or ref.startswith("https://")


def _decode_b64(payload: str) -> bytes:
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ClientError("Image is not valid base64 data")


def decode_inline(ref: str) -> InlineImage:
    if ref.startswith("data:"):
        header, sep, payload = ref.partition(",")
        if not sep:
            raise ClientError("Image data URL has no payload")
        # "data:image/jpeg;base64" -> "image/jpeg"
        mime_type = header[len("data:"):].split(";")[0] or DEFAULT_MIME_TYPE
        return InlineImage(mime_type=mime_type, data=_decode_b64(payload.strip()))
    return InlineImage(mime_type=DEFAULT_MIME_TYPE, data=_decode_b64(ref.strip()))


def fetch_remote(url: str, timeout: float = 30.0) -> InlineImage:
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.RequestException as e:
        LOG.warning(f"Failed to fetch image {url}: {e}")
        raise ClientError(f"Failed to fetch image: {url}")

    content_type = resp.headers.get("Content-Type") or DEFAULT_MIME_TYPE
    mime_type = content_type.split(";")[0].strip() or DEFAULT_MIME_TYPE
    return InlineImage(mime_type=mime_type, data=resp.content)


def normalize_images(refs: Iterable[str], timeout: float = 30.0) -> List[InlineImage]:
    """Resolve every reference sequentially, keeping input order"""
    images = []
    for ref in refs:
        if is_remote_url(ref):
            images.append(fetch_remote(ref, timeout=timeout))
        else:
            images.append(decode_inline(ref))
    return images
