"""Object-storage photo adapter — implements PhotoStoragePort over a storage REST API."""

from __future__ import annotations

import base64
import binascii
import logging
import random
import re
import time

import httpx

from civicdesk.application.ports.photo_storage_port import PhotoStoragePort
from civicdesk.config import settings
from civicdesk.domain.exceptions import DependencyError, ValidationError

logger = logging.getLogger(__name__)

_DATA_URI = re.compile(r"^data:(?P<content_type>[\w.+-]+/[\w.+-]+)?;base64,(?P<payload>.*)$", re.DOTALL)

EXTENSIONS: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


def decode_photo_data(photo_data: str) -> tuple[bytes, str]:
    """Decode a raw base64 string or a ``data:<type>;base64,`` URI.

    Returns (bytes, content_type). Raw base64 is assumed to be JPEG.
    """
    content_type = "image/jpeg"
    payload = photo_data.strip()

    match = _DATA_URI.match(payload)
    if match:
        content_type = (match.group("content_type") or content_type).lower()
        payload = match.group("payload")

    if content_type not in EXTENSIONS:
        raise ValidationError(f"Unsupported photo type: {content_type}")

    try:
        data = base64.b64decode(payload, validate=False)
    except (binascii.Error, ValueError) as e:
        raise ValidationError("Photo data is not valid base64") from e
    if not data:
        raise ValidationError("Photo data is empty")
    return data, content_type


def build_object_path(content_type: str, now_ms: int | None = None) -> str:
    """complaints/complaint_<ms>_<random>.<ext>"""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    suffix = "".join(random.choices("abcdefghijklmnopqrstuvwxyz0123456789", k=7))
    return f"complaints/complaint_{now_ms}_{suffix}.{EXTENSIONS[content_type]}"


class HttpPhotoStorageAdapter(PhotoStoragePort):
    """Uploads photos to a storage bucket and returns their public URL."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        bucket: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url if base_url is not None else settings.storage_url).rstrip("/")
        self._api_key = api_key if api_key is not None else settings.storage_api_key
        self._bucket = bucket or settings.storage_bucket
        self._timeout = timeout or settings.storage_timeout
        self._transport = transport

    def public_url(self, path: str) -> str:
        return f"{self._base_url}/storage/v1/object/public/{self._bucket}/{path}"

    async def upload(self, photo_data: str) -> str:
        data, content_type = decode_photo_data(photo_data)
        path = build_object_path(content_type)

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    f"{self._base_url}/storage/v1/object/{self._bucket}/{path}",
                    content=data,
                    headers={
                        "Authorization": f"Bearer {self._api_key}",
                        "Content-Type": content_type,
                        "x-upsert": "false",
                    },
                    timeout=self._timeout,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Photo upload to bucket '%s' failed: %s", self._bucket, e)
            raise DependencyError("storage", f"photo upload failed: {e}") from e

        logger.info("Uploaded %d bytes to %s/%s", len(data), self._bucket, path)
        return self.public_url(path)
