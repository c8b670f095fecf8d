from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse
import logging

from yatra.services.object_storage import ObjectStorageService, get_object_storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/public-objects/{file_path:path}")
async def get_public_object(
    file_path: str,
    storage: ObjectStorageService = Depends(get_object_storage),
):
    try:
        found = storage.search_public_object(file_path)
    except Exception:
        logger.exception(f"Error searching for public object {file_path!r}")
        raise HTTPException(status_code=500, detail="Internal server error")

    if not found:
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(found)
