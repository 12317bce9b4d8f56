"""Filesystem-backed object buckets.

Each bucket is a directory under ``root``. Objects keep their declared
content type in a ``.content-type`` sidecar so they are served back with it.
"""
import logging
import mimetypes
from pathlib import Path

from celebration.errors import StorageUnavailable

logger = logging.getLogger(__name__)

SIDECAR_SUFFIX = ".content-type"


class LocalObjectStore:
    def __init__(self, root, public_base_url: str, max_object_bytes: int = 10485760):
        self.root = Path(root)
        self.public_base_url = public_base_url.rstrip("/")
        self.max_object_bytes = max_object_bytes

    def _bucket_dir(self, bucket: str) -> Path:
        return self.root / bucket

    def _object_path(self, bucket: str, name: str) -> Path:
        bucket_dir = self._bucket_dir(bucket).resolve()
        path = (bucket_dir / name).resolve()
        if bucket_dir not in path.parents or name.endswith(SIDECAR_SUFFIX):
            raise StorageUnavailable(f"Object name '{name}' is not allowed in bucket '{bucket}'")
        return path

    def bucket_exists(self, bucket: str) -> bool:
        return self._bucket_dir(bucket).is_dir()

    def ensure_bucket(self, bucket: str) -> bool:
        """Create the bucket if absent. Returns True when it was created."""
        if self.bucket_exists(bucket):
            return False
        try:
            self._bucket_dir(bucket).mkdir(parents=True, exist_ok=True)
        except PermissionError as exc:
            raise StorageUnavailable(f"Could not create bucket '{bucket}': {exc}") from exc
        logger.info("Created bucket '%s' at %s", bucket, self._bucket_dir(bucket))
        return True

    def put(self, bucket: str, name: str, data: bytes, content_type: str) -> None:
        if len(data) > self.max_object_bytes:
            raise StorageUnavailable(
                f"Object of {len(data)} bytes exceeds the {self.max_object_bytes} byte limit"
            )
        path = self._object_path(bucket, name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
            path.with_name(path.name + SIDECAR_SUFFIX).write_text(content_type)
        except PermissionError as exc:
            raise StorageUnavailable(f"Write to bucket '{bucket}' rejected: {exc}") from exc
        logger.info("Stored %s (%d bytes, %s) in bucket '%s'", name, len(data), content_type, bucket)

    def open(self, bucket: str, name: str) -> tuple[Path, str]:
        """Return the object's path and content type. Raises FileNotFoundError."""
        try:
            path = self._object_path(bucket, name)
        except StorageUnavailable as exc:
            raise FileNotFoundError(name) from exc
        if not path.is_file():
            raise FileNotFoundError(name)
        sidecar = path.with_name(path.name + SIDECAR_SUFFIX)
        if sidecar.is_file():
            content_type = sidecar.read_text().strip()
        else:
            content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return path, content_type

    def public_url(self, bucket: str, name: str) -> str:
        return f"{self.public_base_url}/media/{bucket}/{name}"
