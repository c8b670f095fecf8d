from pathlib import Path
from typing import Optional
import logging

from yatra.config import get_settings

logger = logging.getLogger(__name__)


class ObjectStorageService:
    """
    Looks up public assets (destination photos, airline logos) across the
    configured search paths, first match wins. Paths that resolve outside
    a search root are never served.
    """

    def __init__(self, search_paths: Optional[list[str]] = None):
        paths = search_paths if search_paths is not None else get_settings().public_object_search_paths
        self.search_paths = [Path(p).resolve() for p in paths]

    def search_public_object(self, file_path: str) -> Optional[Path]:
        for root in self.search_paths:
            candidate = (root / file_path).resolve()
            if not candidate.is_relative_to(root):
                logger.warning(f"Rejected public object path outside {root}: {file_path!r}")
                continue
            if candidate.is_file():
                return candidate
        return None


def get_object_storage() -> ObjectStorageService:
    return ObjectStorageService()
