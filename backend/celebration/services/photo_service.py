"""Photo ingestion: turns an embedded data-URI into a stored object URL.

The returned URL is best effort: when the bucket rejects the write, or the
store fails, a placeholder URL is handed back instead of an error, so a URL
is never proof that the photo was persisted.
"""
import base64
import binascii
import logging
import re
import secrets
import time
from typing import Callable, Optional

from celebration.errors import FormatError, StorageUnavailable
from celebration.storage.object_store import LocalObjectStore

logger = logging.getLogger(__name__)

DATA_URI = re.compile(r"^data:([\w/+.-]+);base64,(.*)$", re.DOTALL)
SCRIPTABLE_IMAGE_TYPES = {"image/svg+xml"}


def parse_data_uri(encoded: str) -> tuple[str, bytes]:
    """Split a base64 data-URI into ``(mime_type, decoded_bytes)``."""
    match = DATA_URI.match(encoded or "")
    if not match or "/" not in match.group(1):
        raise FormatError("Invalid base64 string format")
    mime_type, payload = match.groups()
    # Objects are served from the API origin; scriptable types stay out
    if not mime_type.startswith("image/") or mime_type in SCRIPTABLE_IMAGE_TYPES:
        raise FormatError(f"Photo must be a raster image, got {mime_type}")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise FormatError(f"Photo payload is not valid base64: {exc}") from exc
    return mime_type, data


def extension_for(mime_type: str) -> str:
    return mime_type.split("/", 1)[1]


class PhotoIngestor:
    def __init__(
        self,
        store: LocalObjectStore,
        bucket: str = "memories",
        folder: str = "memories",
        placeholder_url: str = "",
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.bucket = bucket
        self.folder = folder
        self.placeholder_url = placeholder_url
        self._clock = clock

    def object_name(self, mime_type: str, timestamp: int) -> str:
        return f"{self.folder}/{timestamp}-{secrets.token_hex(4)}.{extension_for(mime_type)}"

    def ingest(self, encoded: str) -> Optional[str]:
        """Store the photo and return its public URL (or a placeholder).

        Raises FormatError for a malformed data-URI.
        """
        mime_type, data = parse_data_uri(encoded)
        timestamp = int(self._clock() * 1000)
        name = self.object_name(mime_type, timestamp)

        try:
            self.store.ensure_bucket(self.bucket)
            self.store.put(self.bucket, name, data, content_type=mime_type)
        except StorageUnavailable as exc:
            logger.warning("Photo upload rejected, using placeholder: %s", exc)
            return self._placeholder(timestamp, extension_for(mime_type))
        except OSError as exc:
            logger.error("Photo upload failed, using placeholder: %s", exc)
            return self._placeholder(timestamp, "jpg")

        return self.store.public_url(self.bucket, name)

    def _placeholder(self, timestamp: int, ext: str) -> Optional[str]:
        if not self.placeholder_url:
            return None
        return self.placeholder_url.format(timestamp=timestamp, ext=ext)
