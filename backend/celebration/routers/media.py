"""Serves photos stored in the local buckets."""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from celebration.deps import get_object_store
from celebration.storage.object_store import LocalObjectStore

router = APIRouter()


@router.get("/{bucket}/{name:path}")
def get_object(bucket: str, name: str, store: LocalObjectStore = Depends(get_object_store)):
    try:
        path, content_type = store.open(bucket, name)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Object not found")
    headers = {"X-Content-Type-Options": "nosniff"}
    if not content_type.startswith("image/") or content_type == "image/svg+xml":
        headers["Content-Disposition"] = "attachment"
    return FileResponse(path, media_type=content_type, headers=headers)
